import json
from dataclasses import replace

import pytest

from sitemeta.config import SiteSettings
from sitemeta.location import LocationCacheError, LocationConfigCache
from sitemeta.models import (
    DynamicSeoInput,
    GeoOverride,
    OpenGraphOverride,
    PageId,
    SeoOverrideLayer,
    TwitterOverride,
)
from sitemeta.pages import DEFAULT_TITLE, HERO_IMAGES
from sitemeta.regions import RegionRegistry
from sitemeta.resolver import SeoResolver, complete_layer


@pytest.fixture(scope="module")
def resolver():
    return SeoResolver(settings=SiteSettings(), registry=RegionRegistry(), cache=LocationConfigCache())


def test_berlin_location_page_end_to_end(resolver):
    resolved = resolver.resolve(DynamicSeoInput(page="standort", pathname="/standort/berlin"))

    local_businesses = [
        entry
        for entry in resolved.structured_data
        if entry.get("@type") == "LocalBusiness" and entry.get("@id", "").endswith("#local-business")
    ]
    assert len(local_businesses) == 1
    assert local_businesses[0]["@id"] == "https://www.zoe-solar.de/standort/berlin#local-business"
    assert len([entry for entry in resolved.structured_data if entry.get("@type") == "BreadcrumbList"]) == 1
    assert any(entry.get("@type") == "FAQPage" for entry in resolved.structured_data)

    assert resolved.canonical == "https://www.zoe-solar.de/standort/berlin"
    assert resolved.url == resolved.canonical
    assert resolved.og.url == resolved.canonical
    assert resolved.title.startswith("Solaranlagen Berlin")
    assert resolved.geo.region == "DE-BE"
    assert resolved.geo.position == "52.520008;13.404954"


def test_unknown_location_keeps_requested_path_as_canonical(resolver):
    """Unknown cities get the default copy but a canonical on the requested path, not the site root."""

    resolved = resolver.resolve(DynamicSeoInput(page=PageId.STANDORT, pathname="/standort/atlantis"))

    assert resolved.title == DEFAULT_TITLE
    assert resolved.canonical == "https://www.zoe-solar.de/standort/atlantis"
    assert not any("/standort/atlantis" in json.dumps(entry) for entry in resolved.structured_data)
    assert not any(
        entry.get("@id", "").endswith("#local-business") for entry in resolved.structured_data
    )


def test_home_canonical_is_site_root(resolver):
    resolved = resolver.resolve(DynamicSeoInput(page=PageId.HOME, pathname="/?utm_source=x"))
    assert resolved.canonical == "https://www.zoe-solar.de/"
    assert resolved.og.image == SiteSettings().default_share_image


@pytest.mark.parametrize("pathname", ["/preise", "/preise/", "/preise?tab=2", "preise"])
def test_canonical_is_absolute_https_for_any_path_form(resolver, pathname):
    resolved = resolver.resolve(DynamicSeoInput(page=PageId.PREISE, pathname=pathname))
    assert resolved.canonical == "https://www.zoe-solar.de/preise"


def test_hero_image_fills_open_graph_and_twitter(resolver):
    resolved = resolver.resolve(DynamicSeoInput(page=PageId.PREISE, pathname="/preise"))
    assert resolved.og.image == HERO_IMAGES[PageId.PREISE]
    assert resolved.twitter.image == resolved.og.image
    assert resolved.og.title == resolved.title


def test_page_layer_scalars_override_defaults(resolver):
    resolved = resolver.resolve(DynamicSeoInput(page=PageId.LOGIN, pathname="/login"))
    assert resolved.robots == "noindex,nofollow"
    assert resolved.title == "Login | ZOE Solar Kundenportal"


def test_agri_pv_page_recomputes_geo_position(resolver):
    resolved = resolver.resolve(DynamicSeoInput(page=PageId.AGRI_PV_BAYERN, pathname="/agri-pv-bayern"))
    assert resolved.geo.region == "DE-BY"
    assert resolved.geo.position == "48.1351;11.582"


def test_unknown_page_resolves_to_global_defaults(resolver):
    resolved = resolver.resolve(DynamicSeoInput(page="mystery", pathname="/mystery"))
    assert resolved.title == DEFAULT_TITLE
    assert resolved.canonical == "https://www.zoe-solar.de/mystery"
    assert resolved.keywords[0] == "ZOE Solar"


def test_collections_in_resolved_record_are_unique(resolver):
    resolved = resolver.resolve(DynamicSeoInput(page=PageId.STANDORT, pathname="/standort/wien"))
    keywords = [keyword.lower() for keyword in resolved.keywords]
    assert len(keywords) == len(set(keywords))
    serialized = [json.dumps(entry, sort_keys=True) for entry in resolved.structured_data]
    assert len(serialized) == len(set(serialized))
    alternate_keys = [alt.dedupe_key() for alt in resolved.alternates]
    assert len(alternate_keys) == len(set(alternate_keys))
    assert "de-at|https://www.zoe-solar.de/standort/wien" in alternate_keys


def test_each_resolution_returns_a_fresh_record(resolver):
    request = DynamicSeoInput(page=PageId.KONTAKT, pathname="/kontakt")
    first = resolver.resolve(request)
    second = resolver.resolve(request)
    assert first == second
    assert first is not second


def test_resolved_record_is_json_serialisable(resolver):
    payload = resolver.resolve(DynamicSeoInput(page=PageId.STANDORT, pathname="/standort/muenchen")).to_dict()
    text = json.dumps(payload, ensure_ascii=False)
    assert '"canonical": "https://www.zoe-solar.de/standort/muenchen"' in text
    assert payload["geo"]["placename"] == "München"


def test_complete_layer_fills_every_field_from_settings():
    settings = SiteSettings()
    merged = SeoOverrideLayer(geo=GeoOverride(latitude=52.52, longitude=13.40))

    resolved = complete_layer(merged, canonical="https://www.zoe-solar.de/x", settings=settings)

    assert resolved.geo.position == "52.52;13.40"
    assert resolved.og.url == "https://www.zoe-solar.de/x"
    assert resolved.og.image == settings.default_share_image
    assert resolved.og.image_width == 1200
    assert resolved.og.image_height == 630
    assert resolved.og.image_type == "image/jpeg"
    assert resolved.og.locale == "de_DE"
    assert resolved.twitter.site == "@zoesolar"
    assert resolved.twitter.creator == "@zoesolar"
    assert resolved.robots == settings.default_robots


def test_complete_layer_image_fallback_order():
    settings = SiteSettings()
    explicit = SeoOverrideLayer(og=OpenGraphOverride(image="https://img/og.jpg"))
    assert complete_layer(
        explicit, canonical="https://x/", settings=settings, hero_image="https://img/hero.jpg"
    ).og.image == "https://img/og.jpg"
    assert complete_layer(
        SeoOverrideLayer(), canonical="https://x/", settings=settings, hero_image="https://img/hero.jpg"
    ).og.image == "https://img/hero.jpg"
    twitter_only = SeoOverrideLayer(twitter=TwitterOverride(image="https://img/tw.jpg"))
    resolved = complete_layer(twitter_only, canonical="https://x/", settings=settings)
    assert resolved.twitter.image == "https://img/tw.jpg"
    assert resolved.og.image == settings.default_share_image


def test_protocol_relative_and_http_canonicals_become_https():
    settings = SiteSettings()
    resolver = SeoResolver(settings=settings, registry=RegionRegistry())
    resolver.page_layers[PageId.PROJEKTE] = SeoOverrideLayer(canonical="//www.zoe-solar.de/referenzen")
    resolver.page_layers[PageId.WISSENS_HUB] = SeoOverrideLayer(canonical="http://www.zoe-solar.de/wissen")
    assert resolver.resolve(DynamicSeoInput(page=PageId.PROJEKTE)).canonical == "https://www.zoe-solar.de/referenzen"
    assert resolver.resolve(DynamicSeoInput(page=PageId.WISSENS_HUB)).canonical == "https://www.zoe-solar.de/wissen"


def test_double_slash_request_path_stays_on_site(resolver):
    resolved = resolver.resolve(DynamicSeoInput(page=PageId.PREISE, pathname="//evil.example/preise"))
    assert resolved.canonical == "https://www.zoe-solar.de/evil.example/preise"
    assert resolved.og.url == resolved.canonical
    assert resolved.url == resolved.canonical


def test_editing_a_resolved_record_does_not_leak_into_later_resolutions(resolver):
    request = DynamicSeoInput(page=PageId.STANDORT, pathname="/standort/berlin")
    first = resolver.resolve(request)
    business = next(entry for entry in first.structured_data if entry.get("@id", "").endswith("#local-business"))
    business["name"] = "Changed"
    business["address"]["addressLocality"] = "Changed"
    first.to_dict()["structured_data"][0]["name"] = "Changed too"

    second = resolver.resolve(request)
    again = next(entry for entry in second.structured_data if entry.get("@id", "").endswith("#local-business"))
    assert again["name"] != "Changed"
    assert again["address"]["addressLocality"] == "Berlin"
    assert second.structured_data[0].get("name") != "Changed too"


def test_shared_location_cache_rejects_a_second_base_url():
    cache = LocationConfigCache()
    SeoResolver(settings=SiteSettings(), registry=RegionRegistry(), cache=cache)
    staging = replace(SiteSettings(), base_url="https://staging.zoe-solar.de")
    with pytest.raises(LocationCacheError):
        SeoResolver(settings=staging, registry=RegionRegistry(), cache=cache)


def test_resolvers_on_the_same_base_url_share_location_cache():
    cache = LocationConfigCache()
    first = SeoResolver(settings=SiteSettings(), registry=RegionRegistry(), cache=cache)
    second = SeoResolver(settings=SiteSettings(), registry=RegionRegistry(), cache=cache)
    first.resolve(DynamicSeoInput(page=PageId.STANDORT, pathname="/standort/hamburg"))
    assert "hamburg" in cache
    resolved = second.resolve(DynamicSeoInput(page=PageId.STANDORT, pathname="/standort/hamburg"))
    assert resolved.canonical == "https://www.zoe-solar.de/standort/hamburg"
