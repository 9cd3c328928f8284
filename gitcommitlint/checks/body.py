"""Checks on the separation between subject and body."""
from .base import CommitCheck, split_lines


class EmptyLineCheck(CommitCheck):
    """Validates blank line after subject."""

    identifier = "empty_line"
    MESSAGE = "Please separate subject from body with newline."

    def evaluate(self, message: str) -> bool:
        lines = split_lines(message)
        return len(lines) < 2 or lines[1] == ''
