"""JSON-LD builders.

Every builder is a pure function returning a list of schema.org objects. A
builder whose upstream content is missing returns an empty list so partial data
degrades to less markup instead of broken markup.
"""
from __future__ import annotations

from typing import List, Sequence

from .config import SiteSettings
from .faqs import select_faq_entries
from .local_content import local_content_for
from .models import FaqEntry, ManufacturerProduct, PricingPackage, ServiceRegion
from .regions import country_code, radius_meters, region_slug
from .utils import canonical_json, dedupe, strip_markdown_emphasis, to_absolute_url

SCHEMA_CONTEXT = "https://schema.org"
PILLAR_SPEAKABLE_SELECTORS = (".pillar-intro", ".pillar-keyfacts", ".pillar-faq .faq-speakable-question")
ARTICLE_SPEAKABLE_SELECTORS = ("article h1", "article p")
WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]


def dedupe_structured_data(entries: Sequence[dict]) -> List[dict]:
    return dedupe(entries, canonical_json)


def location_url(settings: SiteSettings, region: ServiceRegion) -> str:
    return settings.url(f"/standort/{region_slug(region)}")


def _geo_coordinates(latitude: float, longitude: float) -> dict:
    return {"@type": "GeoCoordinates", "latitude": latitude, "longitude": longitude}


def geo_circle(region: ServiceRegion, **extra: object) -> dict:
    """Service area circle around a region; the radius is always in metres."""

    payload = {
        "@type": "GeoCircle",
        "geoMidpoint": _geo_coordinates(region.latitude, region.longitude),
        "geoRadius": radius_meters(region),
    }
    payload.update(extra)
    return payload


def _postal_address(region: ServiceRegion, *, street: str | None = None, postal_code: bool = True) -> dict:
    address = {"@type": "PostalAddress"}
    if street:
        address["streetAddress"] = street
    address["addressLocality"] = region.city
    address["addressRegion"] = region.state
    if postal_code:
        address["postalCode"] = region.postal_code
    address["addressCountry"] = country_code(region)
    return address


def _city(region: ServiceRegion) -> dict:
    return {
        "@type": "City",
        "name": region.city,
        "address": _postal_address(region, postal_code=False),
    }


def _organization_ref(settings: SiteSettings, *, with_url: bool = False) -> dict:
    ref = {"@id": settings.url("#organization"), "@type": "Organization", "name": settings.organization_name}
    if with_url:
        ref["url"] = settings.base_url
    return ref


def _provider(settings: SiteSettings) -> dict:
    return {"@type": "Organization", "name": settings.organization_name, "url": settings.base_url}


def _contact_point(settings: SiteSettings, area_served: str) -> dict:
    return {
        "@type": "ContactPoint",
        "telephone": settings.telephone,
        "contactType": "customer support",
        "areaServed": area_served,
        "availableLanguage": ["de", "en"],
    }


def _question(entry: FaqEntry) -> dict:
    return {
        "@type": "Question",
        "name": entry.question,
        "acceptedAnswer": {"@type": "Answer", "text": strip_markdown_emphasis(entry.answer)},
    }


# ----------------------------------------------------------------------
# Organisation graph


def organization_graph(settings: SiteSettings, regions: Sequence[ServiceRegion]) -> List[dict]:
    """Site-wide entities: organisation, brand, catalogue, website and headquarters."""

    organization_id = settings.url("#organization")
    return [
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "Organization",
            "@id": organization_id,
            "name": settings.organization_name,
            "url": settings.base_url,
            "logo": {"@type": "ImageObject", "url": settings.organization_logo},
            "description": (
                "ZOE Solar ist ein Photovoltaik-Spezialist für Gewerbe, Landwirtschaft und Industrie "
                "mit über 500 realisierten Projekten und schlüsselfertigen Lösungen von der Planung bis zum Betrieb."
            ),
            "foundingDate": "2018",
            "foundingLocation": {
                "@type": "Place",
                "address": {"@type": "PostalAddress", "addressLocality": "Berlin", "addressCountry": "DE"},
            },
            "knowsAbout": [
                "Photovoltaik für Gewerbe",
                "Agri-Photovoltaik",
                "Industrielle Batteriespeicher",
                "E-Mobilitätsinfrastruktur",
                "Solarpark-Entwicklung",
                "Energieberatung",
            ],
            "sameAs": [
                "https://www.linkedin.com/company/zoe-solar",
                "https://www.youtube.com/@zoe-solar",
                "https://www.xing.com/pages/zoesolargmbh",
            ],
            "contactPoint": [
                dict(
                    _contact_point(settings, "DE"),
                    hoursAvailable={
                        "@type": "OpeningHoursSpecification",
                        "dayOfWeek": WEEKDAYS,
                        "opens": "08:00",
                        "closes": "17:00",
                    },
                )
            ],
            "aggregateRating": {
                "@type": "AggregateRating",
                "ratingValue": "4.8",
                "reviewCount": "127",
                "bestRating": "5",
                "worstRating": "1",
            },
        },
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "Brand",
            "@id": settings.url("#brand"),
            "name": settings.site_name,
            "description": "Premium-Photovoltaik für professionelle Anwendungen",
            "logo": settings.organization_logo,
            "url": settings.base_url,
            "slogan": "Ihre Energie. Unsere Expertise.",
        },
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "ServiceCatalog",
            "@id": settings.url("#service-catalog"),
            "name": f"{settings.site_name} Dienstleistungen",
            "description": "Komplettlösungen für Photovoltaik, Speicher und E-Mobilität",
            "provider": {"@id": organization_id},
            "hasOfferCatalog": [
                {
                    "@type": "OfferCatalog",
                    "name": "Photovoltaik Großanlagen",
                    "itemListElement": [
                        {"@type": "Offer", "itemOffered": {"@type": "Service", "name": "Aufdach-Photovoltaik"}},
                        {"@type": "Offer", "itemOffered": {"@type": "Service", "name": "Freiflächen-Photovoltaik"}},
                    ],
                },
                {
                    "@type": "OfferCatalog",
                    "name": "Energiespeicher & Management",
                    "itemListElement": [
                        {"@type": "Offer", "itemOffered": {"@type": "Service", "name": "Peak Shaving Lösungen"}},
                    ],
                },
            ],
        },
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "Article",
            "@id": settings.url("#expertise-article"),
            "headline": f"{settings.site_name}: 6 Jahre Erfahrung in Photovoltaik-Großprojekten",
            "description": (
                "Als etablierter Photovoltaik-Spezialist haben wir über 500 Projekte erfolgreich realisiert "
                "und verfügen über umfassende Expertise in allen Bereichen der Solartechnik."
            ),
            "author": {"@type": "Organization", "name": settings.organization_name},
            "publisher": {
                "@type": "Organization",
                "name": settings.organization_name,
                "logo": {"@type": "ImageObject", "url": settings.organization_logo},
            },
            "datePublished": "2024-01-15",
            "dateModified": "2024-09-28",
            "mainEntityOfPage": settings.base_url,
            "articleSection": "Unternehmensprofil",
            "about": [
                {"@type": "Thing", "name": "Photovoltaik Expertise"},
                {"@type": "Thing", "name": "Solartechnik"},
            ],
        },
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "Review",
            "@id": settings.url("#review-collection"),
            "itemReviewed": {"@type": "Organization", "name": settings.organization_name},
            "author": {"@type": "Person", "name": "Kundenbewertungen"},
            "reviewRating": {"@type": "Rating", "ratingValue": "4.8", "bestRating": "5"},
            "reviewBody": (
                "Über 120 zufriedene Kunden bestätigen unsere Qualität und Zuverlässigkeit "
                "in der Photovoltaik-Branche."
            ),
        },
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "WebSite",
            "@id": settings.url("#website"),
            "name": f"{settings.site_name} - Photovoltaik für Gewerbe & Industrie",
            "url": settings.base_url,
            "inLanguage": settings.language,
            "potentialAction": [
                {
                    "@type": "SearchAction",
                    "target": settings.url("/?s={search_term_string}"),
                    "query-input": "required name=search_term_string",
                },
                {
                    "@type": "CommunicateAction",
                    "target": settings.url("/kontakt"),
                    "description": "Kostenlose Erstberatung anfordern",
                },
            ],
            "publisher": {"@id": organization_id},
        },
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "LocalBusiness",
            "@id": settings.url("#headquarters"),
            "name": settings.organization_name,
            "image": settings.default_share_image,
            "url": settings.base_url,
            "telephone": settings.telephone,
            "priceRange": settings.price_range,
            "address": {
                "@type": "PostalAddress",
                "streetAddress": settings.street_address,
                "addressLocality": settings.hq_placename,
                "postalCode": settings.hq_postal_code,
                "addressCountry": "DE",
            },
            "geo": _geo_coordinates(settings.hq_latitude, settings.hq_longitude),
            "areaServed": {"@type": "Country", "name": "Deutschland"},
            "serviceArea": [geo_circle(region, name=f"{region.city} ({region.state})") for region in regions],
            "openingHoursSpecification": {
                "@type": "OpeningHoursSpecification",
                "dayOfWeek": WEEKDAYS,
                "opens": "08:00",
                "closes": "17:00",
            },
        },
    ]


def local_business_branches(settings: SiteSettings, regions: Sequence[ServiceRegion]) -> List[dict]:
    """One LocalBusiness per branch, linked to the parent organisation."""

    branches: List[dict] = []
    for region in regions:
        url = location_url(settings, region)
        branches.append(
            {
                "@context": SCHEMA_CONTEXT,
                "@type": "LocalBusiness",
                "@id": f"{url}#local-business-{region.region_code.lower()}",
                "name": f"{settings.organization_name} {region.city}",
                "image": settings.default_share_image,
                "url": url,
                "parentOrganization": _organization_ref(settings),
                "telephone": settings.telephone,
                "priceRange": settings.price_range,
                "address": _postal_address(region, street=settings.street_address),
                "geo": _geo_coordinates(region.latitude, region.longitude),
                "areaServed": geo_circle(region),
                "availableService": [
                    {
                        "@type": "Service",
                        "name": "Photovoltaik Komplettlösungen",
                        "serviceType": "Photovoltaikplanung",
                        "areaServed": region.city,
                        "provider": _provider(settings),
                    }
                ],
            }
        )
    return branches


# ----------------------------------------------------------------------
# Services and offers


def service_schema(
    settings: SiteSettings, name: str, description: str, url: str, area_served: str = "Deutschland"
) -> dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Service",
        "name": name,
        "description": description,
        "provider": _provider(settings),
        "areaServed": {"@type": "AdministrativeArea", "name": area_served},
        "url": url,
    }


def regional_service_schemas(
    settings: SiteSettings,
    regions: Sequence[ServiceRegion],
    service_name: str,
    description: str,
    service_url: str,
) -> List[dict]:
    return [
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "Service",
            "name": f"{service_name} {region.city}",
            "serviceType": service_name,
            "description": description,
            "url": service_url,
            "provider": _provider(settings),
            "areaServed": {
                "@type": "City",
                "name": region.city,
                "address": _postal_address(region),
            },
            "hasServiceArea": geo_circle(region),
            "availableChannel": {
                "@type": "ServiceChannel",
                "serviceUrl": f"{service_url}?region={region.region_code.lower()}",
                "servicePhone": _contact_point(settings, region.region_code),
            },
        }
        for region in regions
    ]


def offer_catalog_schema(settings: SiteSettings, packages: Sequence[PricingPackage]) -> List[dict]:
    if not packages:
        return []
    return [
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "OfferCatalog",
            "name": "Photovoltaik Komplettpakete",
            "url": settings.url("/preise"),
            "itemListElement": [
                {
                    "@type": "Offer",
                    "position": index + 1,
                    "name": package.name,
                    "description": package.target,
                    "url": settings.url(f"/preise#{package.id}"),
                    "price": package.price,
                    "priceCurrency": "EUR",
                    "itemOffered": {"@type": "Service", "name": package.name, "description": package.target},
                }
                for index, package in enumerate(packages[:6])
            ],
        }
    ]


def product_schemas(settings: SiteSettings, products: Sequence[ManufacturerProduct]) -> List[dict]:
    payloads: List[dict] = []
    for product in products:
        payload = {
            "@context": SCHEMA_CONTEXT,
            "@type": "Product",
            "name": product.name,
            "description": product.description,
            "image": product.image_url,
            "category": product.category,
            "brand": {"@type": "Brand", "name": product.manufacturer},
        }
        offer = {
            "@type": "Offer",
            "priceCurrency": "EUR",
            "availability": "https://schema.org/InStock",
            "seller": {"@type": "Organization", "name": settings.organization_name},
        }
        if product.price:
            offer["price"] = product.price
        payload["offers"] = offer
        if product.rating:
            payload["aggregateRating"] = {
                "@type": "AggregateRating",
                "ratingValue": product.rating,
                "reviewCount": product.review_count or 1,
            }
        properties = [
            {"@type": "PropertyValue", "name": label, "value": value}
            for label, value in (("Leistung", product.power), ("Garantie", product.warranty))
            if value
        ]
        if properties:
            payload["additionalProperty"] = properties
        payloads.append(payload)
    return payloads


# ----------------------------------------------------------------------
# Page furniture


def faq_schema(name: str, description: str, entries: Sequence[FaqEntry]) -> List[dict]:
    if not entries:
        return []
    return [
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "FAQPage",
            "name": name,
            "description": description,
            "mainEntity": [_question(entry) for entry in entries],
        }
    ]


def speakable_schema(name: str, selectors: Sequence[str]) -> List[dict]:
    """Speakable specification for voice and answer-engine surfaces."""

    if not selectors:
        return []
    return [
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "WebPage",
            "name": name,
            "speakable": {"@type": "SpeakableSpecification", "cssSelector": list(selectors)},
        }
    ]


def breadcrumb_schema(canonical: str, trail: Sequence[tuple[str, str]]) -> List[dict]:
    if not trail:
        return []
    return [
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "BreadcrumbList",
            "@id": f"{canonical}#breadcrumb",
            "itemListElement": [
                {"@type": "ListItem", "position": index + 1, "name": name, "item": url}
                for index, (name, url) in enumerate(trail)
            ],
        }
    ]


# ----------------------------------------------------------------------
# Location pages


def location_qa_schema(settings: SiteSettings, region: ServiceRegion, entries: Sequence[FaqEntry]) -> List[dict]:
    if not entries:
        return []
    return [
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "QAPage",
            "name": f"Antworten zu Photovoltaik in {region.city}",
            "inLanguage": settings.language,
            "url": location_url(settings, region),
            "mainEntity": [_question(entry) for entry in entries],
            "about": _city(region),
        }
    ]


def location_how_to_schema(settings: SiteSettings, region: ServiceRegion) -> List[dict]:
    canonical = location_url(settings, region)
    steps = (
        (
            "Kostenlose Erstberatung & Standortanalyse",
            f"Wir analysieren Dach- und Flächenpotenziale in {region.city}, prüfen Denkmalschutz, "
            "Netzanschluss und Förderungen.",
            "erstberatung",
        ),
        (
            "Technische Planung & Wirtschaftlichkeit",
            "Detaillierte Auslegung der Photovoltaik- und Speichertechnik inklusive Ertragsprognose, "
            f"CAPEX/OPEX-Modell und Förderstrategie für {region.city}.",
            "planung",
        ),
        (
            "Installation, Netzanschluss & Betrieb",
            "Schlüsselfertige Umsetzung mit eigenen Montageteams, Netzanschlusskoordination und "
            f"24/7-Monitoring für Anlagen in {region.city}.",
            "installation",
        ),
    )
    return [
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "HowTo",
            "@id": f"{canonical}#how-to",
            "name": f"In {region.city} mit {settings.site_name} starten",
            "description": (
                f"So läuft der Projektstart für Ihre Photovoltaikanlage in {region.city}: "
                "von der Potenzialanalyse bis zur schlüsselfertigen Übergabe."
            ),
            "inLanguage": settings.language,
            "supply": "Projektinformationen zu Standort, Dach- oder Freifläche, Energiebedarf",
            "tool": f"Digitale Potenzialanalyse & Projektplaner von {settings.site_name}",
            "totalTime": "P30D",
            "step": [
                {
                    "@type": "HowToStep",
                    "position": index + 1,
                    "name": name,
                    "text": text,
                    "url": f"{canonical}#{anchor}",
                }
                for index, (name, text, anchor) in enumerate(steps)
            ],
        }
    ]


def location_core_schemas(settings: SiteSettings, region: ServiceRegion) -> List[dict]:
    """Web page, service area, branch business and service for one location."""

    canonical = location_url(settings, region)
    service_area = geo_circle(region, name=f"Einsatzgebiet {region.city}")
    service_area_node = {"@context": SCHEMA_CONTEXT, "@id": f"{canonical}#service-area"}
    service_area_node.update(service_area)
    page_title = f"Solaranlagen {region.city} | {settings.site_name}"
    return [
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "WebPage",
            "@id": f"{canonical}#webpage",
            "name": page_title,
            "description": (
                f"Regionaler Photovoltaik-Komplettservice für {region.city} und {region.state}. "
                "Planung, Installation, Betrieb und Finanzierung aus einer Hand."
            ),
            "url": canonical,
            "inLanguage": settings.language,
            "isPartOf": settings.url("#website"),
            "about": _city(region),
            "breadcrumb": {"@id": f"{canonical}#breadcrumb"},
        },
        service_area_node,
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "LocalBusiness",
            "@id": f"{canonical}#local-business",
            "name": f"{settings.organization_name} {region.city}",
            "image": settings.default_share_image,
            "url": canonical,
            "parentOrganization": _organization_ref(settings),
            "telephone": settings.telephone,
            "priceRange": settings.price_range,
            "address": _postal_address(region, street=settings.street_address),
            "geo": _geo_coordinates(region.latitude, region.longitude),
            "hasMap": (
                "https://www.google.com/maps/search/?api=1&query="
                f"{region.latitude},{region.longitude}"
            ),
            "areaServed": _city(region),
            "serviceArea": service_area,
            "availableService": [
                {
                    "@type": "Service",
                    "name": f"Photovoltaik & Speicher in {region.city}",
                    "serviceType": "Photovoltaikplanung",
                    "provider": _organization_ref(settings),
                    "areaServed": region.city,
                }
            ],
        },
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "Service",
            "@id": f"{canonical}#service",
            "name": f"Solaranlagen & Speicher {region.city}",
            "serviceType": "Photovoltaik Komplettlösung",
            "description": (
                f"Planung, Installation und Betrieb von Photovoltaiksystemen in {region.city} und {region.state}."
            ),
            "provider": _organization_ref(settings, with_url=True),
            "areaServed": service_area,
            "availableChannel": {
                "@type": "ServiceChannel",
                "serviceUrl": canonical,
                "servicePhone": _contact_point(settings, region.region_code),
            },
            "offers": {
                "@type": "Offer",
                "price": "0",
                "priceCurrency": "EUR",
                "availability": "https://schema.org/InStock",
                "url": canonical,
            },
        },
    ]


def location_content_schemas(settings: SiteSettings, region: ServiceRegion, slug: str) -> List[dict]:
    """Item lists for local blog posts, case studies and service links."""

    content = local_content_for(slug)
    if content is None:
        return []
    canonical = location_url(settings, region)
    schemas: List[dict] = []
    if content.blog_posts:
        schemas.append(
            {
                "@context": SCHEMA_CONTEXT,
                "@type": "ItemList",
                "@id": f"{canonical}#local-articles",
                "name": f"Solar-Insights für {region.city}",
                "itemListElement": [
                    {
                        "@type": "ListItem",
                        "position": index + 1,
                        "item": {
                            "@type": "Article",
                            "name": post.title,
                            "description": post.description,
                            "url": to_absolute_url(post.url, settings.base_url),
                        },
                    }
                    for index, post in enumerate(content.blog_posts[:5])
                ],
            }
        )
    if content.case_studies:
        schemas.append(
            {
                "@context": SCHEMA_CONTEXT,
                "@type": "ItemList",
                "@id": f"{canonical}#local-case-studies",
                "name": f"Referenzen & Projekte in {region.city}",
                "itemListElement": [
                    {
                        "@type": "ListItem",
                        "position": index + 1,
                        "item": {
                            "@type": "CaseStudy",
                            "name": study.title,
                            "description": study.description,
                            "url": to_absolute_url(study.url, settings.base_url) if study.url else canonical,
                            "additionalProperty": [
                                {"@type": "PropertyValue", "name": highlight.label, "value": highlight.value}
                                for highlight in study.highlights
                            ],
                        },
                    }
                    for index, study in enumerate(content.case_studies[:4])
                ],
            }
        )
    if content.service_links:
        schemas.append(
            {
                "@context": SCHEMA_CONTEXT,
                "@type": "OfferCatalog",
                "@id": f"{canonical}#local-services",
                "name": f"Dienstleistungen in {region.city}",
                "itemListElement": [
                    {
                        "@type": "Offer",
                        "position": index + 1,
                        "name": service.title,
                        "description": service.description,
                        "url": to_absolute_url(service.url, settings.base_url),
                        "price": "0",
                        "priceCurrency": "EUR",
                    }
                    for index, service in enumerate(content.service_links[:6])
                ],
            }
        )
    return schemas


LOCATION_FAQ_CATEGORIES = ("Allgemein", "Förderung", "Technik", "Region")
LOCATION_SPEAKABLE_SELECTORS = (".page-hero-title", ".page-hero-subtitle", ".faq-section .faq-item h3")


def location_structured_data(settings: SiteSettings, region: ServiceRegion) -> List[dict]:
    """Complete, deduplicated JSON-LD graph for a location landing page."""

    slug = region_slug(region)
    canonical = location_url(settings, region)
    faq_entries = select_faq_entries(LOCATION_FAQ_CATEGORIES, region=slug, limit=4)
    trail = (
        ("Startseite", settings.base_url),
        ("Standorte", settings.url("/standort")),
        (region.city, canonical),
    )
    entries: List[dict] = []
    entries.extend(location_core_schemas(settings, region))
    entries.extend(breadcrumb_schema(canonical, trail))
    entries.extend(location_how_to_schema(settings, region))
    entries.extend(
        faq_schema(
            f"Solaranlagen {region.city} FAQ",
            f"Häufige Fragen zu Photovoltaik in {region.city} und {region.state}.",
            faq_entries,
        )
    )
    entries.extend(location_qa_schema(settings, region, faq_entries))
    entries.extend(speakable_schema(f"Solaranlagen {region.city} | {settings.site_name}", LOCATION_SPEAKABLE_SELECTORS))
    entries.extend(location_content_schemas(settings, region, slug))
    return dedupe_structured_data(entries)
