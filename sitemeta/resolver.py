"""Top level entry point turning a page request into resolved metadata."""
from __future__ import annotations

import copy
import logging
from typing import Dict, Optional

from .config import SiteSettings, load_settings
from .dynamic import build_dynamic_config
from .location import LocationConfigCache, build_location_config
from .merge import dedupe_alternates, dedupe_keywords, dedupe_meta, dedupe_structured, merge_layers
from .models import (
    DynamicSeoInput,
    GeoOverride,
    OpenGraphOverride,
    PageId,
    ResolvedGeo,
    ResolvedOpenGraph,
    ResolvedSeo,
    ResolvedTwitter,
    SeoOverrideLayer,
    TwitterOverride,
)
from .pages import DEFAULT_DESCRIPTION, DEFAULT_TITLE, build_default_layer, build_page_layers, hero_image_for
from .regions import RegionRegistry
from .utils import force_https, format_coordinate, normalise_path, to_absolute_url

LOGGER = logging.getLogger(__name__)


def geo_position(latitude: Optional[float], longitude: Optional[float]) -> Optional[str]:
    if latitude is None or longitude is None:
        return None
    return f"{format_coordinate(latitude)};{format_coordinate(longitude)}"


def absolute_canonical(source: str, settings: SiteSettings) -> str:
    return force_https(to_absolute_url(source, settings.base_url))


def complete_layer(
    merged: SeoOverrideLayer,
    *,
    canonical: str,
    settings: SiteSettings,
    hero_image: Optional[str] = None,
) -> ResolvedSeo:
    """Convert a merged partial layer into a fully populated record.

    Every field missing from ``merged`` falls back to a site constant, so the
    result never carries an empty slot. ``og.url`` always equals ``canonical``.
    Structured data entries are copied so callers cannot reach the cached
    layers through the returned record.
    """

    title = merged.title or DEFAULT_TITLE
    description = merged.description or DEFAULT_DESCRIPTION
    og = merged.og or OpenGraphOverride()
    twitter = merged.twitter or TwitterOverride()
    geo = merged.geo or GeoOverride()

    image_alt = og.image_alt or title
    resolved_og = ResolvedOpenGraph(
        type=og.type or "website",
        title=og.title or title,
        description=og.description or description,
        image=og.image or hero_image or settings.default_share_image,
        image_alt=image_alt,
        image_width=og.image_width or settings.share_image_width,
        image_height=og.image_height or settings.share_image_height,
        image_type=og.image_type or settings.share_image_type,
        site_name=og.site_name or settings.site_name,
        locale=og.locale or settings.locale,
        url=canonical,
    )
    site_handle = twitter.site or settings.twitter_site
    resolved_twitter = ResolvedTwitter(
        card=twitter.card or "summary_large_image",
        title=twitter.title or title,
        description=twitter.description or description,
        image=twitter.image or resolved_og.image,
        site=site_handle,
        creator=twitter.creator or site_handle,
        image_alt=twitter.image_alt or image_alt,
    )

    latitude = geo.latitude if geo.latitude is not None else settings.hq_latitude
    longitude = geo.longitude if geo.longitude is not None else settings.hq_longitude
    resolved_geo = ResolvedGeo(
        region=geo.region or settings.hq_region,
        placename=geo.placename or settings.hq_placename,
        latitude=latitude,
        longitude=longitude,
        position=geo_position(latitude, longitude) or geo.position or "",
    )

    return ResolvedSeo(
        title=title,
        description=description,
        keywords=dedupe_keywords(merged.keywords),
        canonical=canonical,
        robots=merged.robots or settings.default_robots,
        alternates=dedupe_alternates(merged.alternates),
        structured_data=tuple(copy.deepcopy(entry) for entry in dedupe_structured(merged.structured_data)),
        additional_meta=dedupe_meta(merged.additional_meta),
        og=resolved_og,
        twitter=resolved_twitter,
        geo=resolved_geo,
        url=canonical,
    )


class SeoResolver:
    """Resolve page requests against the static layers and the entity builders.

    The default and page layers are built once per resolver. The location cache
    is injected so several resolvers (or a warm-up job) can share it, as long
    as they serve the same base URL.
    """

    def __init__(
        self,
        settings: Optional[SiteSettings] = None,
        registry: Optional[RegionRegistry] = None,
        cache: Optional[LocationConfigCache] = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.registry = registry or RegionRegistry()
        self.cache = cache if cache is not None else LocationConfigCache()
        self.cache.bind(self.settings.base_url)
        self.default_layer = build_default_layer(self.settings, self.registry.regions)
        self.page_layers: Dict[PageId, SeoOverrideLayer] = build_page_layers(self.settings, self.registry.regions)

    def warm_locations(self) -> int:
        return self.cache.warm(self.registry, lambda region: build_location_config(region, settings=self.settings))

    def page_layer(self, page: Optional[PageId]) -> Optional[SeoOverrideLayer]:
        if page is None:
            return None
        return self.page_layers.get(page)

    def canonical_for(
        self,
        page: Optional[PageId],
        pathname: str,
        page_layer: Optional[SeoOverrideLayer],
        dynamic_layer: Optional[SeoOverrideLayer],
    ) -> str:
        if dynamic_layer is not None and dynamic_layer.canonical:
            source = dynamic_layer.canonical
        elif page_layer is not None and page_layer.canonical:
            source = page_layer.canonical
        elif page is PageId.HOME:
            source = self.settings.url("/")
        else:
            source = pathname
        return absolute_canonical(source, self.settings)

    def resolve(self, seo_input: DynamicSeoInput) -> ResolvedSeo:
        page = PageId.coerce(seo_input.page)
        if page is None:
            LOGGER.warning("Unknown page %r; falling back to site defaults", seo_input.page)
        pathname = normalise_path(seo_input.pathname)
        dynamic_layer = build_dynamic_config(
            seo_input,
            settings=self.settings,
            registry=self.registry,
            cache=self.cache,
        )
        page_layer = self.page_layer(page)
        merged = merge_layers(self.default_layer, page_layer, dynamic_layer)
        canonical = self.canonical_for(page, pathname, page_layer, dynamic_layer)
        return complete_layer(
            merged,
            canonical=canonical,
            settings=self.settings,
            hero_image=hero_image_for(page),
        )
