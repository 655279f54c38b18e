import unittest

from sitemeta.config import SiteSettings
from sitemeta.models import PageId
from sitemeta.pages import (
    DEFAULT_TITLE,
    HERO_IMAGES,
    PRICING_PACKAGES,
    build_default_layer,
    build_page_layers,
    hero_image_for,
)
from sitemeta.regions import PRIMARY_SERVICE_REGIONS


class DefaultLayerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.settings = SiteSettings()
        self.layer = build_default_layer(self.settings, PRIMARY_SERVICE_REGIONS)

    def test_default_layer_carries_site_wide_values(self) -> None:
        self.assertEqual(self.layer.title, DEFAULT_TITLE)
        self.assertEqual(self.layer.robots, self.settings.default_robots)
        self.assertIn("x-default", [alt.href_lang for alt in self.layer.alternates])
        self.assertIsNone(self.layer.og.image)
        self.assertIsNone(self.layer.og.title)

    def test_default_layer_describes_the_organization(self) -> None:
        ids = {entry.get("@id") for entry in self.layer.structured_data}
        self.assertIn(self.settings.url("#organization"), ids)
        self.assertIn(self.settings.url("#headquarters"), ids)


class PageLayerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.settings = SiteSettings()
        self.layers = build_page_layers(self.settings, PRIMARY_SERVICE_REGIONS)

    def test_private_pages_are_not_indexed(self) -> None:
        for page in (PageId.LOGIN, PageId.DASHBOARD, PageId.MITARBEITER_LOGIN):
            self.assertTrue(self.layers[page].robots.startswith("noindex"), page)

    def test_dynamic_pages_have_no_static_layer(self) -> None:
        for page in (PageId.STANDORT, PageId.ARTICLE_DETAIL, PageId.HERSTELLER_DETAIL):
            self.assertNotIn(page, self.layers)

    def test_pricing_page_lists_offer_catalog(self) -> None:
        structured = self.layers[PageId.PREISE].structured_data
        catalog = [entry for entry in structured if entry.get("@type") == "OfferCatalog"]
        self.assertEqual(len(catalog), 1)
        self.assertEqual(len(catalog[0]["itemListElement"]), len(PRICING_PACKAGES))

    def test_agri_pv_regional_pages_carry_geo(self) -> None:
        geo = self.layers[PageId.AGRI_PV_BAYERN].geo
        self.assertEqual(geo.region, "DE-BY")
        self.assertEqual(geo.latitude, 48.1351)

    def test_hero_images(self) -> None:
        self.assertEqual(hero_image_for(PageId.AGRI_PV), HERO_IMAGES[PageId.AGRI_PV])
        self.assertIsNone(hero_image_for(None))
        self.assertIsNone(hero_image_for(PageId.STANDORT))


if __name__ == "__main__":
    unittest.main()
