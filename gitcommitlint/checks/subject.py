"""Checks on the subject line."""
from .base import CommitCheck, subject_of

DEFAULT_MAX_SUBJECT_LENGTH = 50


class SubjectLengthCheck(CommitCheck):
    """Validates the subject line length."""

    identifier = "subject_length"
    MESSAGE_TEMPLATE = "Please limit commit subject line to {max_length} characters."
    MESSAGE = MESSAGE_TEMPLATE.format(max_length=DEFAULT_MAX_SUBJECT_LENGTH)

    def __init__(self, max_length: int = DEFAULT_MAX_SUBJECT_LENGTH):
        self.max_length = max_length

    @property
    def violation_message(self) -> str:
        # The message names the threshold, so it follows a configured one.
        return self.MESSAGE_TEMPLATE.format(max_length=self.max_length)

    def evaluate(self, message: str) -> bool:
        return len(subject_of(message)) <= self.max_length


class SubjectPeriodCheck(CommitCheck):
    """Validates that the subject line doesn't end with a period."""

    identifier = "subject_period"
    MESSAGE = "Please remove period from end of commit subject line."

    def evaluate(self, message: str) -> bool:
        return not subject_of(message).endswith('.')
