from __future__ import annotations

import unittest
from datetime import date
from pathlib import Path

from pallets.dumps.models import DumpKind, DumpRecord
from pallets.dumps.naming import local_file_name, local_path, parse_file_name, remote_url


class NamingTests(unittest.TestCase):
    def test_local_file_name_layout(self) -> None:
        self.assertEqual(
            local_file_name(DumpKind.REGIONS, date(2023, 5, 2)),
            "2023-05-02-regions-xml.gz",
        )
        self.assertEqual(
            local_file_name(DumpKind.NATIONS, date(2024, 12, 31)),
            "2024-12-31-nations-xml.gz",
        )

    def test_remote_url_zero_pads(self) -> None:
        self.assertEqual(
            remote_url(DumpKind.NATIONS, date(2023, 1, 9)),
            "https://www.nationstates.net/archive/nations/2023-01-09-nations-xml.gz",
        )

    def test_remote_url_custom_host(self) -> None:
        url = remote_url(DumpKind.REGIONS, date(2023, 1, 9), host="localhost:8080", scheme="http")
        self.assertEqual(url, "http://localhost:8080/archive/regions/2023-01-09-regions-xml.gz")

    def test_local_path_joins_directory(self) -> None:
        root = Path("/var/cache/pallets")
        self.assertEqual(
            local_path(root, DumpKind.REGIONS, date(2023, 5, 2)),
            root / "2023-05-02-regions-xml.gz",
        )

    def test_parse_inverts_local_file_name(self) -> None:
        days = [date(1999, 1, 1), date(2020, 2, 29), date(2023, 5, 2), date(2024, 12, 31)]
        for kind in DumpKind:
            for day in days:
                with self.subTest(kind=kind, day=day):
                    self.assertEqual(
                        parse_file_name(local_file_name(kind, day)),
                        DumpRecord(kind=kind, date=day),
                    )

    def test_parse_rejects_non_canonical_names(self) -> None:
        for name in [
            "readme.txt",
            "2023-05-01-regions.xml.gz",
            "2023-5-01-regions-xml.gz",
            "23-05-01-regions-xml.gz",
            "2023-05-01-Regions-xml.gz",
            "2023-05-01-cards-xml.gz",
            "2023-05-01-regions-xml.gz.part",
            "x2023-05-01-regions-xml.gz",
            "2023-05-01-regions-xml.gz\n",
            "",
        ]:
            with self.subTest(name=name):
                self.assertIsNone(parse_file_name(name))

    def test_parse_rejects_impossible_dates(self) -> None:
        self.assertIsNone(parse_file_name("2024-02-30-nations-xml.gz"))
        self.assertIsNone(parse_file_name("2023-13-01-regions-xml.gz"))
        self.assertIsNone(parse_file_name("2023-02-29-regions-xml.gz"))


if __name__ == "__main__":
    unittest.main()
