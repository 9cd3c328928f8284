"""Tests for resolving disable/warn selectors into dispositions."""
import pytest

from gitcommitlint.checks import create_registry
from gitcommitlint.models import CheckSelector, Disposition, SelectorKind
from gitcommitlint.resolver import resolve_dispositions, unknown_checks


@pytest.fixture
def registry():
    return create_registry()


def test_default_enforces_everything(registry):
    dispositions = resolve_dispositions(registry, CheckSelector.none(), CheckSelector.none())

    assert list(dispositions) == ["subject_length", "subject_period", "empty_line"]
    assert set(dispositions.values()) == {Disposition.ENFORCE}


def test_disable_all(registry):
    dispositions = resolve_dispositions(registry, CheckSelector.all(), CheckSelector.none())
    assert set(dispositions.values()) == {Disposition.SKIP}


def test_warn_all(registry):
    dispositions = resolve_dispositions(registry, CheckSelector.none(), CheckSelector.all())
    assert set(dispositions.values()) == {Disposition.WARN}


def test_specific_selectors(registry):
    dispositions = resolve_dispositions(
        registry,
        CheckSelector.of("empty_line"),
        CheckSelector.of("subject_period"),
    )

    assert dispositions == {
        "subject_length": Disposition.ENFORCE,
        "subject_period": Disposition.WARN,
        "empty_line": Disposition.SKIP,
    }


def test_disable_wins_over_warn(registry):
    dispositions = resolve_dispositions(
        registry,
        CheckSelector.of("subject_length"),
        CheckSelector.of("subject_length", "empty_line"),
    )
    assert dispositions["subject_length"] == Disposition.SKIP
    assert dispositions["empty_line"] == Disposition.WARN

    dispositions = resolve_dispositions(registry, CheckSelector.all(), CheckSelector.all())
    assert set(dispositions.values()) == {Disposition.SKIP}


def test_unknown_identifiers_are_ignored(registry):
    dispositions = resolve_dispositions(
        registry,
        CheckSelector.of("subject_lenght"),
        CheckSelector.of("body_length"),
    )
    assert set(dispositions.values()) == {Disposition.ENFORCE}

    assert unknown_checks(
        registry,
        CheckSelector.of("subject_lenght", "empty_line"),
        CheckSelector.of("body_length"),
        CheckSelector.all(),
    ) == ["body_length", "subject_lenght"]


@pytest.mark.parametrize("value", [None, [], (), "", " , "])
def test_selector_parse_none(value):
    assert CheckSelector.parse(value).kind == SelectorKind.NONE


@pytest.mark.parametrize("value", ["all", "ALL", " all ", ["all"], ["empty_line", "all"]])
def test_selector_parse_all(value):
    assert CheckSelector.parse(value).is_all


def test_selector_parse_specific():
    selector = CheckSelector.parse(["subject_length", "Empty_Line "])
    assert selector.kind == SelectorKind.SPECIFIC
    assert selector.checks == frozenset({"subject_length", "empty_line"})

    assert CheckSelector.parse("subject_length,empty_line") == selector
    assert CheckSelector.parse("subject_period").checks == frozenset({"subject_period"})


def test_selector_parse_rejects_non_collections():
    with pytest.raises(ValueError):
        CheckSelector.parse(42)


def test_selector_includes():
    assert CheckSelector.all().includes("anything")
    assert not CheckSelector.none().includes("empty_line")
    assert CheckSelector.of("empty_line").includes("empty_line")
    assert not CheckSelector.of("empty_line").includes("subject_length")


def test_selector_values():
    assert CheckSelector.all().to_value() == "all"
    assert CheckSelector.none().to_value() == []
    assert CheckSelector.of("subject_period", "empty_line").to_value() == ["empty_line", "subject_period"]
    assert str(CheckSelector.of("subject_period", "empty_line")) == "empty_line, subject_period"
    assert str(CheckSelector.none()) == "none"
