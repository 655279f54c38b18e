"""Data models used by the sitemeta resolution engine."""
from __future__ import annotations

import copy
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class ServiceRegion:
    """A serviceable city; loaded once from the static region list."""

    city: str
    state: str
    region_code: str
    postal_code: str
    latitude: float
    longitude: float
    radius_km: float
    slug: Optional[str] = None


@dataclass(frozen=True)
class AlternateHref:
    href_lang: str
    href: str

    def dedupe_key(self) -> str:
        return f"{self.href_lang.lower()}|{self.href}"


@dataclass(frozen=True)
class AdditionalMetaTag:
    content: str
    name: Optional[str] = None
    property: Optional[str] = None

    def dedupe_key(self) -> str:
        return (self.name or self.property or "").lower()


@dataclass(frozen=True)
class OpenGraphOverride:
    type: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    image_alt: Optional[str] = None
    image_width: Optional[int] = None
    image_height: Optional[int] = None
    image_type: Optional[str] = None
    site_name: Optional[str] = None
    locale: Optional[str] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class TwitterOverride:
    card: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    site: Optional[str] = None
    creator: Optional[str] = None
    image_alt: Optional[str] = None


@dataclass(frozen=True)
class GeoOverride:
    region: Optional[str] = None
    placename: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    position: Optional[str] = None


@dataclass(frozen=True)
class SeoOverrideLayer:
    """One partial layer of SEO configuration.

    ``None`` marks an unset scalar or nested block; collections are tuples and
    an empty tuple contributes nothing when layers are merged.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    canonical: Optional[str] = None
    robots: Optional[str] = None
    keywords: Tuple[str, ...] = ()
    alternates: Tuple[AlternateHref, ...] = ()
    structured_data: Tuple[dict, ...] = ()
    additional_meta: Tuple[AdditionalMetaTag, ...] = ()
    og: Optional[OpenGraphOverride] = None
    twitter: Optional[TwitterOverride] = None
    geo: Optional[GeoOverride] = None


@dataclass(frozen=True)
class ResolvedOpenGraph:
    type: str
    title: str
    description: str
    image: str
    image_alt: str
    image_width: int
    image_height: int
    image_type: str
    site_name: str
    locale: str
    url: str


@dataclass(frozen=True)
class ResolvedTwitter:
    card: str
    title: str
    description: str
    image: str
    site: str
    creator: str
    image_alt: str


@dataclass(frozen=True)
class ResolvedGeo:
    region: str
    placename: str
    latitude: float
    longitude: float
    position: str


@dataclass(frozen=True)
class ResolvedSeo:
    """Fully populated metadata for one page, ready for a head renderer."""

    title: str
    description: str
    keywords: Tuple[str, ...]
    canonical: str
    robots: str
    alternates: Tuple[AlternateHref, ...]
    structured_data: Tuple[dict, ...]
    additional_meta: Tuple[AdditionalMetaTag, ...]
    og: ResolvedOpenGraph
    twitter: ResolvedTwitter
    geo: ResolvedGeo
    url: str

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "keywords": list(self.keywords),
            "canonical": self.canonical,
            "robots": self.robots,
            "alternates": [asdict(item) for item in self.alternates],
            "structured_data": copy.deepcopy(list(self.structured_data)),
            "additional_meta": [
                {key: value for key, value in asdict(item).items() if value is not None}
                for item in self.additional_meta
            ],
            "og": asdict(self.og),
            "twitter": asdict(self.twitter),
            "geo": asdict(self.geo),
            "url": self.url,
        }


class PageId(str, Enum):
    """Closed set of page identifiers the engine knows about."""

    HOME = "home"
    PHOTOVOLTAIK = "photovoltaik"
    SERVICE_PHOTOVOLTAIK = "service-photovoltaik"
    SERVICE_LADEPARKS = "service-ladeparks"
    SERVICE_SPEICHER = "service-speicher"
    SERVICE_ANMELDUNG_PV = "service-anmeldung-pv"
    SERVICE_ANMELDUNG_LADESTATIONEN = "service-anmeldung-ladestationen"
    SERVICE_NETZANSCHLUSS = "service-netzanschluss"
    PREISE = "preise"
    PRODUKTE = "produkte"
    ANWENDUNGSFAELLE = "anwendungsfaelle"
    KONTAKT = "kontakt"
    FAQ_PAGE = "faq-page"
    INNOVATIONS = "innovations"
    LOGIN = "login"
    DASHBOARD = "dashboard"
    FINANZIERUNG = "finanzierung"
    FOERDERMITTEL_CHECK = "foerdermittel-check"
    AGRI_PV = "agri-pv"
    AGRI_PV_BRANDENBURG = "agri-pv-brandenburg"
    AGRI_PV_SACHSEN_ANHALT = "agri-pv-sachsen-anhalt"
    AGRI_PV_NIEDERSACHSEN = "agri-pv-niedersachsen"
    AGRI_PV_BAYERN = "agri-pv-bayern"
    AGRI_PV_NORDRHEIN_WESTFALEN = "agri-pv-nordrhein-westfalen"
    SEO_MONITORING = "seo-monitoring"
    MITARBEITER_LOGIN = "mitarbeiter-login"
    FALLSTUDIEN = "fallstudien"
    PROJEKTE = "projekte"
    WISSENS_HUB = "wissens-hub"
    AKTUELLES = "aktuelles"
    STANDORT = "standort"
    ARTICLE_DETAIL = "article-detail"
    GUIDE_DETAIL = "guide-detail"
    HERSTELLER_DETAIL = "hersteller-detail"
    ANWENDUNGSFALL_DETAIL = "anwendungsfall-detail"

    @classmethod
    def coerce(cls, value: "PageId | str | None") -> Optional["PageId"]:
        """Return the matching identifier or ``None`` for unknown pages."""

        if value is None:
            return None
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class Article:
    slug: str
    title: str
    category: str
    date: str
    image_url: str
    excerpt: str
    author_name: str


@dataclass(frozen=True)
class Guide:
    slug: str
    title: str
    description: str
    type: str
    image_url: str
    date: Optional[str] = None


@dataclass(frozen=True)
class ManufacturerProduct:
    name: str
    description: str
    category: str
    image_url: str
    manufacturer: str
    price: Optional[str] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None
    power: Optional[str] = None
    warranty: Optional[str] = None


@dataclass(frozen=True)
class Manufacturer:
    slug: str
    name: str
    description: str
    logo_url: str
    category: Tuple[str, ...] = ()
    products: Tuple[ManufacturerProduct, ...] = ()


@dataclass(frozen=True)
class UseCase:
    id: str
    title: str
    headline: str
    description: str
    image_url: str
    hero_image_url: Optional[str] = None


@dataclass(frozen=True)
class FaqEntry:
    question: str
    answer: str
    category: str
    regions: Tuple[str, ...] = ()


@dataclass(frozen=True)
class LocalLink:
    title: str
    description: str
    url: Optional[str] = None


@dataclass(frozen=True)
class CaseStudyHighlight:
    label: str
    value: str


@dataclass(frozen=True)
class LocalCaseStudy:
    title: str
    description: str
    url: Optional[str] = None
    highlights: Tuple[CaseStudyHighlight, ...] = ()


@dataclass(frozen=True)
class LocalContent:
    blog_posts: Tuple[LocalLink, ...] = ()
    case_studies: Tuple[LocalCaseStudy, ...] = ()
    service_links: Tuple[LocalLink, ...] = ()


@dataclass(frozen=True)
class PricingPackage:
    id: str
    name: str
    target: str
    price: str


@dataclass
class DynamicSeoInput:
    """Everything the resolver needs to know about the requested page."""

    page: PageId | str
    pathname: str = "/"
    article: Optional[Article] = None
    guide: Optional[Guide] = None
    manufacturer: Optional[Manufacturer] = None
    use_case: Optional[UseCase] = None
