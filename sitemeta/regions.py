"""Static service regions and the slug index used to resolve location pages."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, Tuple

from .models import ServiceRegion
from .utils import slugify

LOGGER = logging.getLogger(__name__)


class RegionDataError(ValueError):
    """Raised when the static region list contains an invalid entry."""


PRIMARY_SERVICE_REGIONS: Tuple[ServiceRegion, ...] = (
    ServiceRegion("Berlin", "Berlin", "DE-BE", "10115", 52.520008, 13.404954, 180),
    ServiceRegion("Hamburg", "Hamburg", "DE-HH", "20095", 53.551086, 9.993682, 120),
    ServiceRegion("München", "Bayern", "DE-BY", "80331", 48.135125, 11.581981, 160),
    ServiceRegion("Köln", "Nordrhein-Westfalen", "DE-NW", "50667", 50.937531, 6.960279, 140),
    ServiceRegion(
        "Frankfurt am Main", "Hessen", "DE-HE", "60311", 50.110924, 8.682127, 130, slug="frankfurt"
    ),
    ServiceRegion("Stuttgart", "Baden-Württemberg", "DE-BW", "70173", 48.775845, 9.182932, 120),
    ServiceRegion("Düsseldorf", "Nordrhein-Westfalen", "DE-NW", "40213", 51.227741, 6.773456, 120),
    ServiceRegion("Leipzig", "Sachsen", "DE-SN", "04109", 51.339695, 12.373075, 110),
    ServiceRegion("Hannover", "Niedersachsen", "DE-NI", "30159", 52.375892, 9.73201, 110),
    ServiceRegion("Nürnberg", "Bayern", "DE-BY", "90402", 49.452103, 11.076665, 100),
    ServiceRegion("Dresden", "Sachsen", "DE-SN", "01067", 51.050409, 13.737262, 110),
    ServiceRegion("Bremen", "Bremen", "DE-HB", "28195", 53.079296, 8.801694, 100),
    ServiceRegion("Wien", "Wien", "AT-9", "1010", 48.208174, 16.373819, 120),
    ServiceRegion("Graz", "Steiermark", "AT-6", "8010", 47.070714, 15.439504, 100),
    ServiceRegion("Linz", "Oberösterreich", "AT-4", "4020", 48.30694, 14.28583, 90),
    ServiceRegion("Salzburg", "Salzburg", "AT-5", "5020", 47.80949, 13.05501, 90),
    ServiceRegion("Innsbruck", "Tirol", "AT-7", "6020", 47.269212, 11.404102, 80),
    ServiceRegion("Zürich", "Zürich", "CH-ZH", "8001", 47.376887, 8.541694, 90),
    ServiceRegion("Basel", "Basel-Stadt", "CH-BS", "4051", 47.559599, 7.588576, 80),
    ServiceRegion("Bern", "Bern", "CH-BE", "3011", 46.947974, 7.447447, 80),
    ServiceRegion("Genf", "Genf", "CH-GE", "1201", 46.204391, 6.143158, 70),
    ServiceRegion("Lausanne", "Waadt", "CH-VD", "1003", 46.519653, 6.632273, 70),
)


def region_slug(region: ServiceRegion) -> str:
    """Return the URL slug for a region; the explicit slug wins over the city name."""

    return region.slug or slugify(region.city)


def country_code(region: ServiceRegion) -> str:
    """Return the ISO country prefix of the region code (``DE-BE`` -> ``DE``)."""

    prefix, separator, _ = region.region_code.partition("-")
    if not separator or not prefix:
        raise RegionDataError(f"Region code {region.region_code!r} for {region.city} has no country prefix")
    return prefix.upper()


def radius_meters(region: ServiceRegion) -> int:
    return int(round(region.radius_km * 1000))


def validate_region(region: ServiceRegion) -> None:
    country_code(region)
    if not region.city.strip():
        raise RegionDataError("Region without a city name")
    if not slugify(region.slug or region.city):
        raise RegionDataError(f"Region {region.city!r} does not produce a usable slug")
    if region.slug and slugify(region.slug) != region.slug:
        raise RegionDataError(f"Explicit slug {region.slug!r} for {region.city} is not normalised")
    if region.radius_km <= 0:
        raise RegionDataError(f"Region {region.city} has a non-positive radius")
    if not -90 <= region.latitude <= 90 or not -180 <= region.longitude <= 180:
        raise RegionDataError(f"Region {region.city} has coordinates out of range")


class RegionRegistry:
    """Immutable lookup from normalised slug to service region."""

    def __init__(self, regions: Iterable[ServiceRegion] = PRIMARY_SERVICE_REGIONS) -> None:
        self._regions: Tuple[ServiceRegion, ...] = tuple(regions)
        for region in self._regions:
            validate_region(region)
        index: Dict[str, ServiceRegion] = {}
        for region in self._regions:
            self._register(index, slugify(region.city), region)
        for region in self._regions:
            if region.slug:
                self._register(index, slugify(region.slug), region)
        self._index = index

    @staticmethod
    def _register(index: Dict[str, ServiceRegion], slug: str, region: ServiceRegion) -> None:
        existing = index.get(slug)
        if existing is not None and existing is not region:
            LOGGER.warning(
                "Slug %s of %s shadows %s", slug, region.city, existing.city
            )
        index[slug] = region

    @property
    def regions(self) -> Tuple[ServiceRegion, ...]:
        return self._regions

    def __iter__(self) -> Iterator[ServiceRegion]:
        return iter(self._regions)

    def __len__(self) -> int:
        return len(self._regions)

    def by_slug(self, value: str | None) -> ServiceRegion | None:
        """Resolve a path segment or city name to a region."""

        normalized = slugify(value)
        if not normalized:
            return None
        return self._index.get(normalized)

    def region_slug(self, region: ServiceRegion) -> str:
        return region_slug(region)

    def country_code(self, region: ServiceRegion) -> str:
        return country_code(region)
