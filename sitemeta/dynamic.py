"""Per-entity override layers for detail and location pages."""
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from .config import SiteSettings
from .location import LocationConfigCache, build_location_config
from .models import DynamicSeoInput, OpenGraphOverride, PageId, SeoOverrideLayer, TwitterOverride
from .regions import RegionRegistry
from .schema import ARTICLE_SPEAKABLE_SELECTORS, SCHEMA_CONTEXT, product_schemas, speakable_schema
from .utils import normalise_path, parse_german_date, parse_iso_date, to_absolute_url

LOGGER = logging.getLogger(__name__)


class DynamicContext:
    """Collaborators shared by the per-page builders."""

    def __init__(self, settings: SiteSettings, registry: RegionRegistry, cache: LocationConfigCache) -> None:
        self.settings = settings
        self.registry = registry
        self.cache = cache

    def publisher(self) -> dict:
        return {
            "@type": "Organization",
            "name": self.settings.organization_name,
            "logo": {"@type": "ImageObject", "url": self.settings.organization_logo},
        }


def _article_layer(seo_input: DynamicSeoInput, context: DynamicContext) -> Optional[SeoOverrideLayer]:
    article = seo_input.article
    if article is None:
        return None
    settings = context.settings
    url = to_absolute_url(f"/aktuelles/{article.slug}", settings.base_url)
    payload = {
        "@context": SCHEMA_CONTEXT,
        "@type": "NewsArticle",
        "headline": article.title,
        "description": article.excerpt,
        "inLanguage": settings.language,
        "image": [article.image_url],
        "mainEntityOfPage": url,
        "author": {"@type": "Person", "name": article.author_name},
        "publisher": context.publisher(),
        "articleSection": article.category,
    }
    published = parse_german_date(article.date)
    if published:
        payload["datePublished"] = published
        payload["dateModified"] = published
    else:
        LOGGER.debug("Article %s has no parsable date %r", article.slug, article.date)
    return SeoOverrideLayer(
        title=f"{article.title} | {settings.site_name} Insights",
        description=article.excerpt,
        keywords=(article.category, "Solar News", f"{settings.site_name} Magazin"),
        canonical=url,
        og=OpenGraphOverride(type="article", title=article.title, description=article.excerpt, image=article.image_url),
        twitter=TwitterOverride(image=article.image_url),
        structured_data=(payload, *speakable_schema(article.title, ARTICLE_SPEAKABLE_SELECTORS)),
    )


def _guide_layer(seo_input: DynamicSeoInput, context: DynamicContext) -> Optional[SeoOverrideLayer]:
    guide = seo_input.guide
    if guide is None:
        return None
    settings = context.settings
    url = to_absolute_url(f"/wissen/guide/{guide.slug}", settings.base_url)
    payload = {
        "@context": SCHEMA_CONTEXT,
        "@type": "TechArticle",
        "name": guide.title,
        "headline": guide.title,
        "description": guide.description,
        "inLanguage": settings.language,
        "url": url,
        "author": {"@type": "Organization", "name": settings.organization_name, "url": settings.base_url},
        "image": [guide.image_url],
    }
    published = parse_iso_date(guide.date)
    if published:
        payload["datePublished"] = published
    return SeoOverrideLayer(
        title=f"{guide.title} | {settings.site_name} Wissens-Hub",
        description=guide.description,
        keywords=(guide.type, "Photovoltaik Leitfaden", guide.title),
        canonical=url,
        og=OpenGraphOverride(type="article", title=guide.title, description=guide.description, image=guide.image_url),
        twitter=TwitterOverride(image=guide.image_url),
        structured_data=(payload, *speakable_schema(guide.title, ARTICLE_SPEAKABLE_SELECTORS)),
    )


def _manufacturer_layer(seo_input: DynamicSeoInput, context: DynamicContext) -> Optional[SeoOverrideLayer]:
    manufacturer = seo_input.manufacturer
    if manufacturer is None:
        return None
    settings = context.settings
    url = to_absolute_url(f"/produkte/{manufacturer.slug}", settings.base_url)
    brand = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Brand",
        "name": manufacturer.name,
        "description": manufacturer.description,
        "url": url,
        "logo": to_absolute_url(manufacturer.logo_url, settings.base_url),
        "hasOfferCatalog": {
            "@type": "OfferCatalog",
            "name": f"{manufacturer.name} Produktportfolio",
            "itemListElement": [
                {
                    "@type": "Product",
                    "position": index + 1,
                    "name": product.name,
                    "description": product.description,
                    "category": product.category,
                    "image": product.image_url,
                }
                for index, product in enumerate(manufacturer.products[:6])
            ],
        },
    }
    image = manufacturer.products[0].image_url if manufacturer.products else settings.default_share_image
    return SeoOverrideLayer(
        title=f"{manufacturer.name} | Technologiepartner von {settings.site_name}",
        description=manufacturer.description,
        keywords=(
            manufacturer.name,
            "PV Hersteller",
            *(f"{category} Hersteller" for category in manufacturer.category),
        ),
        canonical=url,
        structured_data=(brand, *product_schemas(settings, manufacturer.products[:10])),
        og=OpenGraphOverride(image=image),
    )


def _use_case_layer(seo_input: DynamicSeoInput, context: DynamicContext) -> Optional[SeoOverrideLayer]:
    use_case = seo_input.use_case
    if use_case is None:
        return None
    settings = context.settings
    url = to_absolute_url(f"/anwendungsfaelle/{use_case.id}", settings.base_url)
    payload = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Service",
        "name": use_case.title,
        "serviceType": use_case.headline,
        "description": use_case.description,
        "provider": {"@type": "Organization", "name": settings.organization_name, "url": settings.base_url},
        "areaServed": {"@type": "AdministrativeArea", "name": "Deutschland"},
        "image": use_case.image_url,
        "url": url,
    }
    return SeoOverrideLayer(
        title=f"{use_case.title} | Erfolgsfall {settings.site_name}",
        description=use_case.description,
        keywords=(use_case.title, "Photovoltaik Use Case", "Solar Erfolgsstory"),
        canonical=url,
        structured_data=(payload, *speakable_schema(use_case.title, ARTICLE_SPEAKABLE_SELECTORS)),
        og=OpenGraphOverride(image=use_case.hero_image_url or use_case.image_url),
    )


def _location_layer(seo_input: DynamicSeoInput, context: DynamicContext) -> Optional[SeoOverrideLayer]:
    segments = [segment for segment in normalise_path(seo_input.pathname).split("/") if segment]
    if not segments:
        return None
    region = context.registry.by_slug(segments[-1])
    if region is None:
        LOGGER.debug("No service region for path %s", seo_input.pathname)
        return None
    slug = context.registry.region_slug(region)
    context.cache.bind(context.settings.base_url)
    return context.cache.get_or_build(slug, lambda: build_location_config(region, settings=context.settings))


LayerBuilder = Callable[[DynamicSeoInput, DynamicContext], Optional[SeoOverrideLayer]]

DYNAMIC_BUILDERS: Dict[PageId, LayerBuilder] = {
    PageId.ARTICLE_DETAIL: _article_layer,
    PageId.GUIDE_DETAIL: _guide_layer,
    PageId.HERSTELLER_DETAIL: _manufacturer_layer,
    PageId.ANWENDUNGSFALL_DETAIL: _use_case_layer,
    PageId.STANDORT: _location_layer,
}


def build_dynamic_config(
    seo_input: DynamicSeoInput,
    *,
    settings: SiteSettings,
    registry: RegionRegistry,
    cache: LocationConfigCache,
) -> Optional[SeoOverrideLayer]:
    """Return the entity layer for ``seo_input`` or ``None`` when there is none."""

    page = PageId.coerce(seo_input.page)
    if page is None:
        return None
    builder = DYNAMIC_BUILDERS.get(page)
    if builder is None:
        return None
    return builder(seo_input, DynamicContext(settings, registry, cache))
