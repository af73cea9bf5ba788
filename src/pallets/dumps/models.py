"""Core value types for dump inventory and queries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class DumpKind(str, Enum):
    """Category of a daily dump."""

    REGIONS = "regions"
    NATIONS = "nations"

    @classmethod
    def parse(cls, token: str) -> "DumpKind":
        """Return the kind for a filename/CLI token, case-insensitively."""

        try:
            return cls(token.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown dump kind: {token!r}") from None

    @property
    def rank(self) -> int:
        return _KIND_RANK[self]

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DumpKind):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DumpKind):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DumpKind):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DumpKind):
            return NotImplemented
        return self.rank >= other.rank


# Sort order between kinds; regions sort before nations on the same date.
_KIND_RANK: dict[DumpKind, int] = {
    DumpKind.REGIONS: 0,
    DumpKind.NATIONS: 1,
}


class DumpOrder(str, Enum):
    """Ordering applied to listed dumps."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class DumpRecord:
    """A single dump known to exist in the cache directory."""

    kind: DumpKind
    date: date

    @property
    def sort_key(self) -> tuple[date, int]:
        return (self.date, self.kind.rank)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DumpRecord):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return f"{self.date.isoformat()} {self.kind}"


__all__ = ["DumpKind", "DumpOrder", "DumpRecord"]
