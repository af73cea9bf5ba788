"""Filtering and ordering of dump inventories."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import Optional

from pallets.dumps.models import DumpKind, DumpOrder, DumpRecord


def query(
    records: Iterable[DumpRecord],
    *,
    kind: Optional[DumpKind] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
    order: DumpOrder = DumpOrder.ASCENDING,
) -> list[DumpRecord]:
    """Filter `records` and return them ordered by date, then kind.

    Bounds are inclusive. A `start` after `end` simply matches nothing.
    """

    selected = [record for record in records if _matches(record, kind=kind, start=start, end=end)]
    return sorted(
        selected,
        key=lambda record: record.sort_key,
        reverse=order == DumpOrder.DESCENDING,
    )


def _matches(
    record: DumpRecord,
    *,
    kind: Optional[DumpKind],
    start: Optional[date],
    end: Optional[date],
) -> bool:
    if kind is not None and record.kind != kind:
        return False
    if start is not None and record.date < start:
        return False
    if end is not None and record.date > end:
        return False
    return True


__all__ = ["query"]
