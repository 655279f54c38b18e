import pytest

from sitemeta.config import SiteSettings
from sitemeta.dynamic import build_dynamic_config
from sitemeta.location import LocationCacheError, LocationConfigCache
from sitemeta.models import (
    Article,
    DynamicSeoInput,
    Guide,
    Manufacturer,
    ManufacturerProduct,
    PageId,
    UseCase,
)
from sitemeta.regions import RegionRegistry


@pytest.fixture
def context():
    return {"settings": SiteSettings(), "registry": RegionRegistry(), "cache": LocationConfigCache()}


def build_article(date: str = "30. August 2024") -> Article:
    return Article(
        slug="eeg-2024-aenderungen",
        title="EEG 2024: Was sich ändert",
        category="Politik",
        date=date,
        image_url="https://img.example.com/eeg.jpg",
        excerpt="Die wichtigsten Änderungen der EEG-Novelle für Gewerbebetriebe im Überblick.",
        author_name="Jana Beispiel",
    )


def test_article_layer_parses_german_date(context):
    layer = build_dynamic_config(
        DynamicSeoInput(page=PageId.ARTICLE_DETAIL, article=build_article()), **context
    )
    assert layer.canonical == "https://www.zoe-solar.de/aktuelles/eeg-2024-aenderungen"
    assert layer.title == "EEG 2024: Was sich ändert | ZOE Solar Insights"
    article = layer.structured_data[0]
    assert article["@type"] == "NewsArticle"
    assert article["datePublished"] == "2024-08-30T00:00:00+00:00"
    assert layer.og.type == "article"
    assert layer.twitter.image == "https://img.example.com/eeg.jpg"


def test_article_layer_omits_unparsable_dates(context):
    layer = build_dynamic_config(
        DynamicSeoInput(page="article-detail", article=build_article("irgendwann")), **context
    )
    article = layer.structured_data[0]
    assert "datePublished" not in article
    assert "dateModified" not in article


@pytest.mark.parametrize(
    "page",
    [PageId.ARTICLE_DETAIL, PageId.GUIDE_DETAIL, PageId.HERSTELLER_DETAIL, PageId.ANWENDUNGSFALL_DETAIL],
)
def test_detail_pages_without_entity_return_none(context, page):
    assert build_dynamic_config(DynamicSeoInput(page=page), **context) is None


def test_static_and_unknown_pages_have_no_dynamic_layer(context):
    assert build_dynamic_config(DynamicSeoInput(page=PageId.PREISE), **context) is None
    assert build_dynamic_config(DynamicSeoInput(page="does-not-exist"), **context) is None


def test_guide_layer(context):
    guide = Guide(
        slug="netzanschluss",
        title="Leitfaden Netzanschluss",
        description="Schritt für Schritt zum Netzanschluss Ihrer Gewerbeanlage.",
        type="Leitfaden",
        image_url="https://img.example.com/guide.jpg",
        date="2024-05-01",
    )
    layer = build_dynamic_config(DynamicSeoInput(page=PageId.GUIDE_DETAIL, guide=guide), **context)
    assert layer.canonical == "https://www.zoe-solar.de/wissen/guide/netzanschluss"
    assert layer.structured_data[0]["@type"] == "TechArticle"
    assert layer.structured_data[0]["datePublished"] == "2024-05-01T00:00:00+00:00"


def test_manufacturer_layer_includes_products(context):
    products = tuple(
        ManufacturerProduct(
            name=f"Modul {index}",
            description="Hocheffizientes Modul",
            category="Module",
            image_url=f"https://img.example.com/{index}.jpg",
            manufacturer="SunMaker",
        )
        for index in range(12)
    )
    manufacturer = Manufacturer(
        slug="sunmaker",
        name="SunMaker",
        description="Premium-Hersteller von Solarmodulen.",
        logo_url="/logos/sunmaker.svg",
        category=("Module", "Speicher"),
        products=products,
    )
    layer = build_dynamic_config(
        DynamicSeoInput(page=PageId.HERSTELLER_DETAIL, manufacturer=manufacturer), **context
    )
    brand = layer.structured_data[0]
    assert brand["logo"] == "https://www.zoe-solar.de/logos/sunmaker.svg"
    assert len(brand["hasOfferCatalog"]["itemListElement"]) == 6
    assert len([entry for entry in layer.structured_data if entry["@type"] == "Product"]) == 10
    assert layer.og.image == "https://img.example.com/0.jpg"
    assert "Speicher Hersteller" in layer.keywords


def test_use_case_layer_prefers_hero_image(context):
    use_case = UseCase(
        id="logistik",
        title="Logistikzentrum",
        headline="Photovoltaik für Logistik",
        description="Große Hallendächer liefern günstigen Solarstrom für den Betrieb.",
        image_url="https://img.example.com/card.jpg",
        hero_image_url="https://img.example.com/hero.jpg",
    )
    layer = build_dynamic_config(
        DynamicSeoInput(page=PageId.ANWENDUNGSFALL_DETAIL, use_case=use_case), **context
    )
    assert layer.canonical == "https://www.zoe-solar.de/anwendungsfaelle/logistik"
    assert layer.og.image == "https://img.example.com/hero.jpg"


def test_location_layer_is_memoised(context):
    first = build_dynamic_config(
        DynamicSeoInput(page=PageId.STANDORT, pathname="/standort/berlin/"), **context
    )
    second = build_dynamic_config(
        DynamicSeoInput(page=PageId.STANDORT, pathname="/standort/Berlin?ref=nav"), **context
    )
    assert first is second
    assert "berlin" in context["cache"]
    assert len(context["cache"]) == 1


def test_location_layer_uses_explicit_slug(context):
    layer = build_dynamic_config(
        DynamicSeoInput(page=PageId.STANDORT, pathname="/standort/frankfurt-am-main"), **context
    )
    assert layer.canonical == "https://www.zoe-solar.de/standort/frankfurt"
    assert "frankfurt" in context["cache"]


def test_unknown_location_returns_none(context):
    assert build_dynamic_config(
        DynamicSeoInput(page=PageId.STANDORT, pathname="/standort/atlantis"), **context
    ) is None
    assert build_dynamic_config(DynamicSeoInput(page=PageId.STANDORT, pathname="/"), **context) is None
    assert len(context["cache"]) == 0


def test_location_layer_refuses_cache_bound_to_other_site(context):
    context["cache"].bind("https://staging.zoe-solar.de")
    with pytest.raises(LocationCacheError):
        build_dynamic_config(DynamicSeoInput(page=PageId.STANDORT, pathname="/standort/berlin"), **context)
    assert len(context["cache"]) == 0
