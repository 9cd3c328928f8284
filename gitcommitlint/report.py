"""Status report produced by a lint run."""
from collections.abc import Mapping
from typing import Dict, Iterator, List, Tuple

CATEGORIES = ("errors", "warnings", "messages")


class StatusReport(Mapping):
    """Violations grouped by severity.

    A read-only mapping of the three categories to their entries. Each
    category keeps insertion order and duplicates. Only ``errors``
    decide whether a run passed; warnings and messages are informational.
    """

    def __init__(self):
        self._entries: Dict[str, List[str]] = {category: [] for category in CATEGORIES}

    def reset(self) -> None:
        for entries in self._entries.values():
            entries.clear()

    def error(self, text: str) -> None:
        self._entries["errors"].append(text)

    def warn(self, text: str) -> None:
        self._entries["warnings"].append(text)

    def message(self, text: str) -> None:
        self._entries["messages"].append(text)

    @property
    def errors(self) -> Tuple[str, ...]:
        return tuple(self._entries["errors"])

    @property
    def warnings(self) -> Tuple[str, ...]:
        return tuple(self._entries["warnings"])

    @property
    def messages(self) -> Tuple[str, ...]:
        return tuple(self._entries["messages"])

    @property
    def passed(self) -> bool:
        return not self._entries["errors"]

    def count(self) -> int:
        return sum(len(entries) for entries in self._entries.values())

    def is_empty(self) -> bool:
        return self.count() == 0

    def to_dict(self) -> Dict[str, List[str]]:
        return {category: list(entries) for category, entries in self._entries.items()}

    def __getitem__(self, category: str) -> Tuple[str, ...]:
        if category not in self._entries:
            raise KeyError(category)
        return tuple(self._entries[category])

    def __iter__(self) -> Iterator[str]:
        return iter(CATEGORIES)

    def __len__(self) -> int:
        return len(CATEGORIES)

    def __repr__(self) -> str:
        counts = ", ".join(f"{category}={len(entries)}" for category, entries in self._entries.items())
        return f"StatusReport({counts})"
