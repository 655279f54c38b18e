from __future__ import annotations

import threading
import unittest

from sitemeta.config import SiteSettings
from sitemeta.location import LocationCacheError, LocationConfigCache, build_location_config, location_title
from sitemeta.models import SeoOverrideLayer
from sitemeta.regions import RegionRegistry


class LocationConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        self.settings = SiteSettings()
        self.registry = RegionRegistry()

    def test_title_and_canonical_follow_region(self) -> None:
        region = self.registry.by_slug("muenchen")
        layer = build_location_config(region, settings=self.settings)
        self.assertEqual(layer.title, "Solaranlagen München | ZOE Solar – Photovoltaik in Bayern")
        self.assertEqual(layer.canonical, "https://www.zoe-solar.de/standort/muenchen")
        self.assertEqual(layer.title, location_title(self.settings, region))
        self.assertIn("Photovoltaik München", layer.keywords)

    def test_alternates_depend_on_country(self) -> None:
        german = build_location_config(self.registry.by_slug("berlin"), settings=self.settings)
        austrian = build_location_config(self.registry.by_slug("graz"), settings=self.settings)
        swiss = build_location_config(self.registry.by_slug("basel"), settings=self.settings)
        self.assertEqual([alt.href_lang for alt in german.alternates], ["de", "de-DE", "x-default"])
        self.assertEqual([alt.href_lang for alt in austrian.alternates], ["de", "de-DE", "de-AT", "x-default"])
        self.assertEqual([alt.href_lang for alt in swiss.alternates], ["de", "de-DE", "de-CH", "x-default"])

    def test_meta_and_geo_describe_the_place(self) -> None:
        region = self.registry.by_slug("hamburg")
        layer = build_location_config(region, settings=self.settings)
        meta = {(tag.name or tag.property): tag.content for tag in layer.additional_meta}
        self.assertEqual(meta["city"], "Hamburg")
        self.assertEqual(meta["region"], "Hamburg")
        self.assertEqual(meta["place:location:latitude"], str(region.latitude))
        self.assertEqual(layer.geo.region, "DE-HH")
        self.assertEqual(layer.geo.latitude, region.latitude)

    def test_structured_data_is_deduplicated(self) -> None:
        layer = build_location_config(self.registry.by_slug("berlin"), settings=self.settings)
        ids = [entry.get("@id") for entry in layer.structured_data if entry.get("@id")]
        self.assertEqual(len(ids), len(set(ids)))


class LocationConfigCacheTests(unittest.TestCase):
    def test_get_or_build_builds_once_per_slug(self) -> None:
        cache = LocationConfigCache()
        calls = []

        def build() -> SeoOverrideLayer:
            calls.append(1)
            return SeoOverrideLayer(title="Berlin")

        first = cache.get_or_build("berlin", build)
        second = cache.get_or_build("berlin", build)
        self.assertIs(first, second)
        self.assertEqual(len(calls), 1)
        self.assertIn("berlin", cache)
        self.assertNotIn("hamburg", cache)
        self.assertEqual(len(cache), 1)

    def test_concurrent_population_builds_once(self) -> None:
        cache = LocationConfigCache()
        calls = []
        barrier = threading.Barrier(8)
        results = []

        def build() -> SeoOverrideLayer:
            calls.append(1)
            return SeoOverrideLayer(title="Berlin")

        def worker() -> None:
            barrier.wait()
            results.append(cache.get_or_build("berlin", build))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        self.assertEqual(len(calls), 1)
        self.assertTrue(all(result is results[0] for result in results))

    def test_bind_fixes_one_base_url(self) -> None:
        cache = LocationConfigCache()
        self.assertIsNone(cache.base_url)
        cache.bind("https://www.zoe-solar.de")
        cache.bind("https://www.zoe-solar.de")
        self.assertEqual(cache.base_url, "https://www.zoe-solar.de")
        with self.assertRaises(LocationCacheError):
            cache.bind("https://staging.zoe-solar.de")

    def test_warm_populates_every_region(self) -> None:
        settings = SiteSettings()
        registry = RegionRegistry()
        cache = LocationConfigCache()
        count = cache.warm(registry, lambda region: build_location_config(region, settings=settings))
        self.assertEqual(count, len(registry))
        self.assertIn("frankfurt", cache)
        self.assertIn("zuerich", cache)


if __name__ == "__main__":
    unittest.main()
