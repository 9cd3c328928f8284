"""Base class for commit message checks."""
from abc import ABC, abstractmethod
from typing import List


def split_lines(message: str) -> List[str]:
    return message.split('\n')


def subject_of(message: str) -> str:
    """Return the subject line: everything before the first line break."""
    return split_lines(message)[0]


class CommitCheck(ABC):
    """Abstract base class for commit message checks.

    A check is stateless. ``evaluate`` returns True when the message passes;
    a failing check is reported with its fixed ``MESSAGE``.
    """

    identifier: str = ""
    MESSAGE: str = ""

    @property
    def violation_message(self) -> str:
        return self.MESSAGE

    @abstractmethod
    def evaluate(self, message: str) -> bool:
        """Return True if the commit message passes this check."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.identifier!r})"
