"""Shared models for git-commit-lint."""
from collections import abc
from dataclasses import dataclass
from enum import Enum
from typing import Any, FrozenSet, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

ALL_TOKEN = "all"


@dataclass(frozen=True)
class Commit:
    """A commit under review. Only ``message`` is ever read by the linter."""
    message: str
    sha: Optional[str] = None


class Disposition(str, Enum):
    SKIP = "skip"
    WARN = "warn"
    ENFORCE = "enforce"


class SelectorKind(str, Enum):
    NONE = "none"
    ALL = "all"
    SPECIFIC = "specific"


class CheckSelector(BaseModel):
    """Selects checks for the ``disable`` and ``warn`` settings.

    A selector is either nothing, every check, or a specific set of check
    identifiers. Identifiers are not validated against the registry.
    """

    model_config = ConfigDict(frozen=True)

    kind: SelectorKind = SelectorKind.NONE
    checks: FrozenSet[str] = Field(default_factory=frozenset)

    @classmethod
    def none(cls) -> "CheckSelector":
        return cls(kind=SelectorKind.NONE)

    @classmethod
    def all(cls) -> "CheckSelector":
        return cls(kind=SelectorKind.ALL)

    @classmethod
    def of(cls, *check_ids: str) -> "CheckSelector":
        if not check_ids:
            return cls.none()
        return cls(kind=SelectorKind.SPECIFIC, checks=frozenset(check_ids))

    @classmethod
    def parse(cls, value: Any) -> "CheckSelector":
        """Build a selector from a config or command line value.

        Accepts ``None``, ``"all"``, a comma-separated string of identifiers,
        or an iterable of identifiers. An empty value selects nothing.
        """
        if isinstance(value, CheckSelector):
            return value
        if value is None:
            return cls.none()
        if isinstance(value, str):
            raw: Iterable[Any] = value.split(",")
        elif isinstance(value, abc.Iterable):
            raw = value
        else:
            raise ValueError(f"Invalid check selector: {value!r}")

        tokens = [str(token).strip().lower() for token in raw]
        tokens = [token for token in tokens if token]
        if not tokens:
            return cls.none()
        if ALL_TOKEN in tokens:
            return cls.all()
        return cls.of(*tokens)

    @property
    def is_all(self) -> bool:
        return self.kind == SelectorKind.ALL

    @property
    def is_none(self) -> bool:
        return self.kind == SelectorKind.NONE

    def includes(self, check_id: str) -> bool:
        if self.kind == SelectorKind.ALL:
            return True
        return check_id in self.checks

    def to_value(self) -> Union[str, List[str]]:
        """Plain value suitable for TOML or JSON output."""
        if self.kind == SelectorKind.ALL:
            return ALL_TOKEN
        return sorted(self.checks)

    def __str__(self) -> str:
        if self.kind == SelectorKind.ALL:
            return ALL_TOKEN
        if self.kind == SelectorKind.NONE:
            return "none"
        return ", ".join(sorted(self.checks))
