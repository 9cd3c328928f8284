"""Commit message checks."""

from .base import CommitCheck
from .body import EmptyLineCheck
from .registry import CHECK_IDS, CheckRegistry, create_registry
from .subject import DEFAULT_MAX_SUBJECT_LENGTH, SubjectLengthCheck, SubjectPeriodCheck

__all__ = [
    'CommitCheck',
    'SubjectLengthCheck',
    'SubjectPeriodCheck',
    'EmptyLineCheck',
    'CheckRegistry',
    'CHECK_IDS',
    'DEFAULT_MAX_SUBJECT_LENGTH',
    'create_registry',
]
