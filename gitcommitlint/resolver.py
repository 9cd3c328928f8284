"""Resolve the disable/warn settings into per-check dispositions."""
from typing import Dict, List

from .checks.registry import CheckRegistry
from .models import CheckSelector, Disposition


def resolve_dispositions(
    registry: CheckRegistry,
    disable: CheckSelector,
    warn: CheckSelector,
) -> Dict[str, Disposition]:
    """Compute the disposition of every registered check, in registry order.

    Disabling a check wins over warn-listing it.
    """
    dispositions: Dict[str, Disposition] = {}
    for check in registry:
        if disable.includes(check.identifier):
            dispositions[check.identifier] = Disposition.SKIP
        elif warn.includes(check.identifier):
            dispositions[check.identifier] = Disposition.WARN
        else:
            dispositions[check.identifier] = Disposition.ENFORCE
    return dispositions


def unknown_checks(registry: CheckRegistry, *selectors: CheckSelector) -> List[str]:
    """Identifiers named by the selectors that the registry doesn't know."""
    unknown = set()
    for selector in selectors:
        unknown.update(check_id for check_id in selector.checks if check_id not in registry)
    return sorted(unknown)
