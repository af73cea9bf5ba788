from __future__ import annotations

import unittest
from datetime import date

from pallets.dumps.models import DumpKind, DumpRecord


class DumpModelTests(unittest.TestCase):
    def test_kind_order_is_regions_then_nations(self) -> None:
        self.assertLess(DumpKind.REGIONS, DumpKind.NATIONS)
        self.assertGreater(DumpKind.NATIONS, DumpKind.REGIONS)
        self.assertEqual(sorted([DumpKind.NATIONS, DumpKind.REGIONS]), [DumpKind.REGIONS, DumpKind.NATIONS])

    def test_kind_parse_is_case_insensitive(self) -> None:
        self.assertIs(DumpKind.parse("Nations"), DumpKind.NATIONS)
        self.assertIs(DumpKind.parse(" regions "), DumpKind.REGIONS)
        with self.assertRaises(ValueError):
            DumpKind.parse("cards")

    def test_kind_str_is_token(self) -> None:
        self.assertEqual(str(DumpKind.NATIONS), "nations")

    def test_records_equal_by_kind_and_date(self) -> None:
        a = DumpRecord(kind=DumpKind.NATIONS, date=date(2023, 5, 1))
        b = DumpRecord(kind=DumpKind.NATIONS, date=date(2023, 5, 1))
        self.assertEqual(a, b)
        self.assertEqual(len({a, b}), 1)

    def test_records_order_by_date_then_kind(self) -> None:
        early_nations = DumpRecord(DumpKind.NATIONS, date(2023, 5, 1))
        late_regions = DumpRecord(DumpKind.REGIONS, date(2023, 5, 2))
        late_nations = DumpRecord(DumpKind.NATIONS, date(2023, 5, 2))
        self.assertEqual(
            sorted([late_nations, late_regions, early_nations]),
            [early_nations, late_regions, late_nations],
        )
        self.assertEqual(str(late_regions), "2023-05-02 regions")


if __name__ == "__main__":
    unittest.main()
