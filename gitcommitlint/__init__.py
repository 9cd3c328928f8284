"""Commit message linting for code review automation."""

__version__ = "0.1.0"

from .checks import (
    CheckRegistry,
    CommitCheck,
    EmptyLineCheck,
    SubjectLengthCheck,
    SubjectPeriodCheck,
    create_registry,
)
from .config import Config
from .linter import NOOP_MESSAGE, CommitLinter
from .models import CheckSelector, Commit, Disposition
from .report import StatusReport
from .resolver import resolve_dispositions

__all__ = [
    "__version__",
    "CheckRegistry",
    "CheckSelector",
    "Commit",
    "CommitCheck",
    "CommitLinter",
    "Config",
    "Disposition",
    "EmptyLineCheck",
    "NOOP_MESSAGE",
    "StatusReport",
    "SubjectLengthCheck",
    "SubjectPeriodCheck",
    "create_registry",
    "resolve_dispositions",
]
