import pytest

from gitcommitlint.config import ENV_MAPPING
from gitcommitlint.linter import CommitLinter
from gitcommitlint.models import Commit

TEST_MESSAGES = {
    "subject_length": "This is a really long subject line and should result in an error",
    "subject_period": "This subject line ends in a period.",
    "empty_line": "This subject line is fine\nBut then I forgot the empty line separating the subject and the body.",
    "all_errors": "This is a really long subject and it even ends in a period.\nNot to mention the missing empty line!",
    "valid": "This is a valid message\n\nYou can tell because it meets all the criteria and the linter does not complain.",
}


def report_counts(status_report):
    """Total number of entries across all report categories."""
    return sum(len(entries) for entries in status_report.to_dict().values())


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep GIT_COMMIT_LINT_* variables from the host out of the tests."""
    for env_var in ENV_MAPPING:
        monkeypatch.delenv(env_var, raising=False)
    yield


@pytest.fixture
def linter():
    """Linter with the default configuration."""
    return CommitLinter()


@pytest.fixture
def commit_for():
    """Build a commit from one of the canned test messages."""
    def _commit_for(key: str) -> Commit:
        return Commit(message=TEST_MESSAGES[key])
    return _commit_for
