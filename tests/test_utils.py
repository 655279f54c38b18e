from __future__ import annotations

import json
import unittest

from sitemeta.utils import (
    canonical_json,
    dedupe,
    dump_json,
    force_https,
    format_coordinate,
    normalise_path,
    parse_german_date,
    parse_iso_date,
    slugify,
    to_absolute_url,
)


class SlugifyTests(unittest.TestCase):
    def test_slugify_transliterates_german_umlauts(self) -> None:
        self.assertEqual(slugify("München"), "muenchen")
        self.assertEqual(slugify("Zürich"), "zuerich")
        self.assertEqual(slugify("Düsseldorf"), "duesseldorf")
        self.assertEqual(slugify("Großbeeren"), "grossbeeren")

    def test_slugify_collapses_whitespace_and_symbols(self) -> None:
        self.assertEqual(slugify("Frankfurt am Main"), "frankfurt-am-main")
        self.assertEqual(slugify("  Basel -- Stadt!  "), "basel-stadt")
        self.assertEqual(slugify("Genève"), "geneve")

    def test_slugify_handles_decomposed_input(self) -> None:
        self.assertEqual(slugify("Mu\u0308nchen"), "muenchen")

    def test_slugify_is_total_and_idempotent(self) -> None:
        self.assertEqual(slugify(""), "")
        self.assertEqual(slugify(None), "")
        self.assertEqual(slugify("!!!"), "")
        for value in ("München", "Frankfurt am Main", "Sankt Pölten", "a  b--c", "Ça va?"):
            once = slugify(value)
            self.assertEqual(slugify(once), once)


class DedupeTests(unittest.TestCase):
    def test_dedupe_keeps_first_occurrence_in_order(self) -> None:
        items = ["a", "B", "A", "c", "b"]
        self.assertEqual(dedupe(items, str.lower), ["a", "B", "c"])

    def test_dedupe_is_idempotent(self) -> None:
        items = ["x", "X", "y", "x", "Y", "z"]
        once = dedupe(items, str.lower)
        self.assertEqual(dedupe(once, str.lower), once)
        self.assertLessEqual(len(once), len(items))

    def test_canonical_json_ignores_key_order(self) -> None:
        first = {"@type": "Thing", "name": "A", "nested": {"b": 1, "a": 2}}
        second = {"nested": {"a": 2, "b": 1}, "name": "A", "@type": "Thing"}
        self.assertEqual(canonical_json(first), canonical_json(second))
        self.assertEqual(len(dedupe([first, second], canonical_json)), 1)


class UrlHelperTests(unittest.TestCase):
    def test_normalise_path_strips_query_and_trailing_slashes(self) -> None:
        self.assertEqual(normalise_path("/standort/berlin/?utm=1"), "/standort/berlin")
        self.assertEqual(normalise_path("/preise#paket"), "/preise")
        self.assertEqual(normalise_path(""), "/")
        self.assertEqual(normalise_path("///"), "/")
        self.assertEqual(normalise_path("kontakt"), "/kontakt")

    def test_normalise_path_collapses_slash_runs(self) -> None:
        self.assertEqual(normalise_path("//evil.example/preise"), "/evil.example/preise")
        self.assertEqual(normalise_path("/standort//berlin/"), "/standort/berlin")

    def test_to_absolute_url_rewrites_relative_forms(self) -> None:
        base = "https://www.zoe-solar.de"
        self.assertEqual(to_absolute_url("/kontakt", base), "https://www.zoe-solar.de/kontakt")
        self.assertEqual(to_absolute_url("kontakt", base), "https://www.zoe-solar.de/kontakt")
        self.assertEqual(to_absolute_url("//cdn.example.com/x.png", base), "https://cdn.example.com/x.png")
        self.assertEqual(to_absolute_url("https://example.com/a", base), "https://example.com/a")
        self.assertEqual(to_absolute_url(None, base + "/"), base)

    def test_force_https_upgrades_plain_http(self) -> None:
        self.assertEqual(force_https("http://example.com/a"), "https://example.com/a")
        self.assertEqual(force_https("https://example.com/a"), "https://example.com/a")

    def test_format_coordinate_pads_to_two_decimals(self) -> None:
        self.assertEqual(format_coordinate(13.40), "13.40")
        self.assertEqual(format_coordinate(52.52), "52.52")
        self.assertEqual(format_coordinate(13.404954), "13.404954")
        self.assertEqual(format_coordinate(7), "7.00")


class DateParsingTests(unittest.TestCase):
    def test_parse_german_date_returns_utc_iso(self) -> None:
        self.assertEqual(parse_german_date("30. August 2024"), "2024-08-30T00:00:00+00:00")
        self.assertEqual(parse_german_date("1. März 2025"), "2025-03-01T00:00:00+00:00")

    def test_parse_german_date_accepts_decomposed_umlauts(self) -> None:
        self.assertEqual(parse_german_date("1. Ma\u0308rz 2025"), "2025-03-01T00:00:00+00:00")

    def test_parse_german_date_omits_unparsable_values(self) -> None:
        self.assertIsNone(parse_german_date("gestern"))
        self.assertIsNone(parse_german_date("31. Februar 2024"))
        self.assertIsNone(parse_german_date("30. Sommer 2024"))
        self.assertIsNone(parse_german_date(None))

    def test_parse_iso_date(self) -> None:
        self.assertEqual(parse_iso_date("2024-05-01"), "2024-05-01T00:00:00+00:00")
        self.assertIsNone(parse_iso_date("not a date"))


def test_dump_json_creates_parent_directories(tmp_path):
    target = tmp_path / "nested" / "out.json"
    dump_json(target, {"city": "München"})
    assert json.loads(target.read_text(encoding="utf-8")) == {"city": "München"}
    assert "München" in target.read_text(encoding="utf-8")


if __name__ == "__main__":
    unittest.main()
