"""Ordered registry of the known commit checks."""
from typing import Dict, Iterator, List, Optional, Sequence

from .base import CommitCheck
from .body import EmptyLineCheck
from .subject import DEFAULT_MAX_SUBJECT_LENGTH, SubjectLengthCheck, SubjectPeriodCheck

CHECK_IDS = (
    SubjectLengthCheck.identifier,
    SubjectPeriodCheck.identifier,
    EmptyLineCheck.identifier,
)


class CheckRegistry:
    """A fixed, ordered collection of checks keyed by identifier.

    Iteration follows registration order, which is also the order in which
    violations are reported.
    """

    def __init__(self, checks: Sequence[CommitCheck]):
        self._checks: Dict[str, CommitCheck] = {}
        for check in checks:
            if check.identifier in self._checks:
                raise ValueError(f"Duplicate check identifier: {check.identifier}")
            self._checks[check.identifier] = check

    @property
    def identifiers(self) -> List[str]:
        return list(self._checks)

    def get(self, check_id: str) -> Optional[CommitCheck]:
        return self._checks.get(check_id)

    def __getitem__(self, check_id: str) -> CommitCheck:
        return self._checks[check_id]

    def __contains__(self, check_id: object) -> bool:
        return check_id in self._checks

    def __iter__(self) -> Iterator[CommitCheck]:
        return iter(self._checks.values())

    def __len__(self) -> int:
        return len(self._checks)


def create_registry(max_subject_length: int = DEFAULT_MAX_SUBJECT_LENGTH) -> CheckRegistry:
    """Create the default registry of checks."""
    return CheckRegistry([
        SubjectLengthCheck(max_subject_length),
        SubjectPeriodCheck(),
        EmptyLineCheck(),
    ])
