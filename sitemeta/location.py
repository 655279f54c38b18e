"""Location landing page configuration and its process-wide cache."""
from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Iterable, Optional

from .config import SiteSettings
from .models import (
    AdditionalMetaTag,
    AlternateHref,
    GeoOverride,
    OpenGraphOverride,
    SeoOverrideLayer,
    ServiceRegion,
    TwitterOverride,
)
from .regions import country_code, region_slug
from .schema import location_structured_data, location_url
from .utils import dedupe

LOGGER = logging.getLogger(__name__)

COUNTRY_HREF_LANG = {"AT": "de-AT", "CH": "de-CH"}

LocationBuilder = Callable[[ServiceRegion], SeoOverrideLayer]


class LocationCacheError(ValueError):
    """Raised when a location cache is shared across different base URLs."""


def location_title(settings: SiteSettings, region: ServiceRegion) -> str:
    return f"Solaranlagen {region.city} | {settings.site_name} – Photovoltaik in {region.state}"


def location_alternates(region: ServiceRegion, canonical: str) -> tuple[AlternateHref, ...]:
    languages = ["de", "de-DE"]
    country_language = COUNTRY_HREF_LANG.get(country_code(region))
    if country_language:
        languages.append(country_language)
    languages.append("x-default")
    alternates = [AlternateHref(language, canonical) for language in languages]
    return tuple(dedupe(alternates, AlternateHref.dedupe_key))


def build_location_config(region: ServiceRegion, *, settings: SiteSettings) -> SeoOverrideLayer:
    """Compose the full override layer for one location page."""

    canonical = location_url(settings, region)
    title = location_title(settings, region)
    description = (
        f"{settings.site_name} plant und installiert Photovoltaik- und Speichersysteme in {region.city} und "
        f"{region.state}. Komplettservice inklusive Planung, Finanzierung, Installation und Wartung – "
        "spezialisiert auf Gewerbe, Landwirtschaft und Premium-Privatkunden."
    )
    keywords = dedupe(
        [
            f"Solaranlagen {region.city}",
            f"Photovoltaik {region.city}",
            f"PV {region.city}",
            f"Solar {region.state}",
            f"Solaranbieter {region.city}",
            f"Photovoltaik Installation {region.city}",
        ],
        str.lower,
    )
    additional_meta = dedupe(
        [
            AdditionalMetaTag(str(region.latitude), property="place:location:latitude"),
            AdditionalMetaTag(str(region.longitude), property="place:location:longitude"),
            AdditionalMetaTag(region.city, name="city"),
            AdditionalMetaTag(region.state, name="region"),
        ],
        AdditionalMetaTag.dedupe_key,
    )
    image_alt = f"Solaranlage in {region.city}"
    return SeoOverrideLayer(
        title=title,
        description=description,
        canonical=canonical,
        keywords=tuple(keywords),
        alternates=location_alternates(region, canonical),
        structured_data=tuple(location_structured_data(settings, region)),
        additional_meta=tuple(additional_meta),
        og=OpenGraphOverride(
            type="website",
            title=title,
            description=description,
            image=settings.default_share_image,
            image_alt=image_alt,
        ),
        twitter=TwitterOverride(
            card="summary_large_image",
            title=title,
            description=description,
            image=settings.default_share_image,
            site=settings.twitter_site,
            image_alt=image_alt,
        ),
        geo=GeoOverride(
            region=region.region_code,
            placename=region.city,
            latitude=region.latitude,
            longitude=region.longitude,
        ),
    )


class LocationConfigCache:
    """Memo of built location layers keyed by region slug.

    Entries are never invalidated; the region list is static for the lifetime
    of the process. Population is serialised by a lock so a slug is built at
    most once even when several threads resolve the same page.

    Cached layers embed absolute URLs, so a cache serves exactly one base URL.
    The first ``bind`` fixes it and later binds with another URL are rejected.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, SeoOverrideLayer] = {}
        self._lock = threading.Lock()
        self._base_url: Optional[str] = None

    @property
    def base_url(self) -> Optional[str]:
        return self._base_url

    def bind(self, base_url: str) -> None:
        if self._base_url == base_url:
            return
        with self._lock:
            if self._base_url is None:
                self._base_url = base_url
            elif self._base_url != base_url:
                raise LocationCacheError(
                    f"Location cache is bound to {self._base_url}, cannot serve {base_url}"
                )

    def get_or_build(self, slug: str, build_fn: Callable[[], SeoOverrideLayer]) -> SeoOverrideLayer:
        cached = self._entries.get(slug)
        if cached is not None:
            return cached
        with self._lock:
            cached = self._entries.get(slug)
            if cached is None:
                LOGGER.debug("Building location config for %s", slug)
                cached = build_fn()
                self._entries[slug] = cached
            return cached

    def warm(self, regions: Iterable[ServiceRegion], build_fn: LocationBuilder) -> int:
        """Build every region up front; returns the number of cached entries."""

        for region in regions:
            self.get_or_build(region_slug(region), lambda region=region: build_fn(region))
        LOGGER.debug("Location cache warmed with %d entries", len(self))
        return len(self)

    def __contains__(self, slug: object) -> bool:
        return slug in self._entries

    def __len__(self) -> int:
        return len(self._entries)
