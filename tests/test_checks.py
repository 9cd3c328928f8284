"""Tests for the individual commit checks."""
import pytest

from gitcommitlint.checks import (
    CHECK_IDS,
    CheckRegistry,
    CommitCheck,
    EmptyLineCheck,
    SubjectLengthCheck,
    SubjectPeriodCheck,
    create_registry,
)

from .conftest import TEST_MESSAGES


def test_subject_length_check():
    check = SubjectLengthCheck()

    assert not check.evaluate(TEST_MESSAGES["subject_length"])
    assert check.evaluate("This subject is just fine")

    # Exactly at the limit
    assert check.evaluate("x" * 50)
    assert not check.evaluate("x" * 51)

    # Only the subject counts, not the body
    assert check.evaluate("Short subject\n\n" + "y" * 200)


def test_subject_length_check_custom_threshold():
    check = SubjectLengthCheck(max_length=10)

    assert check.evaluate("1234567890")
    assert not check.evaluate("This is way too long")
    assert check.violation_message == "Please limit commit subject line to 10 characters."


def test_subject_length_default_message():
    assert SubjectLengthCheck().violation_message == SubjectLengthCheck.MESSAGE
    assert SubjectLengthCheck.MESSAGE == "Please limit commit subject line to 50 characters."


def test_subject_period_check():
    check = SubjectPeriodCheck()

    assert not check.evaluate(TEST_MESSAGES["subject_period"])
    assert check.evaluate("This subject line has no period")

    # A period in the body doesn't matter
    assert check.evaluate("Fix the parser\n\nIt crashed on empty input.")
    assert not check.evaluate("Fix the parser.\n\nIt crashed on empty input")

    assert check.evaluate("Release v1.2")


def test_empty_line_check():
    check = EmptyLineCheck()

    assert not check.evaluate(TEST_MESSAGES["empty_line"])
    assert check.evaluate(TEST_MESSAGES["valid"])

    # Single line messages always pass
    assert check.evaluate("Just a subject")
    assert check.evaluate("Just a subject\n")


@pytest.mark.parametrize("check", [SubjectLengthCheck(), SubjectPeriodCheck(), EmptyLineCheck()])
@pytest.mark.parametrize("message", ["", "\n", "\n\n\n", "Ünïcödé sübjéct 🚀\n\nBödy"])
def test_checks_handle_unusual_messages(check, message):
    """Checks never raise and give the same answer every time."""
    first = check.evaluate(message)
    assert isinstance(first, bool)
    assert check.evaluate(message) == first


@pytest.mark.parametrize("key", sorted(TEST_MESSAGES))
def test_checks_are_repeatable(key):
    for check in create_registry():
        assert check.evaluate(TEST_MESSAGES[key]) == check.evaluate(TEST_MESSAGES[key])


def test_all_errors_message_fails_every_check():
    for check in create_registry():
        assert not check.evaluate(TEST_MESSAGES["all_errors"])


def test_registry_order_and_keys():
    registry = create_registry()

    assert registry.identifiers == ["subject_length", "subject_period", "empty_line"]
    assert list(CHECK_IDS) == registry.identifiers
    assert len(registry) == 3
    assert "subject_period" in registry
    assert "subject_capital" not in registry
    assert registry.get("subject_capital") is None
    assert isinstance(registry["empty_line"], EmptyLineCheck)


def test_registry_threshold():
    registry = create_registry(max_subject_length=72)
    assert registry["subject_length"].max_length == 72


def test_registry_rejects_duplicate_identifiers():
    with pytest.raises(ValueError, match="Duplicate check identifier"):
        CheckRegistry([SubjectPeriodCheck(), SubjectPeriodCheck()])


def test_check_base_is_abstract():
    with pytest.raises(TypeError):
        CommitCheck()
