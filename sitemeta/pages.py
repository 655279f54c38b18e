"""Static SEO layers: the global defaults and one layer per known page."""
from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

from .config import SiteSettings
from .faqs import FAQ_ENTRIES, select_faq_entries
from .models import (
    AdditionalMetaTag,
    AlternateHref,
    GeoOverride,
    OpenGraphOverride,
    PageId,
    PricingPackage,
    SeoOverrideLayer,
    ServiceRegion,
    TwitterOverride,
)
from .schema import (
    PILLAR_SPEAKABLE_SELECTORS,
    SCHEMA_CONTEXT,
    faq_schema,
    local_business_branches,
    offer_catalog_schema,
    organization_graph,
    regional_service_schemas,
    service_schema,
    speakable_schema,
)
from .utils import slugify

DEFAULT_TITLE = "ZOE Solar | Photovoltaik für Gewerbe, Landwirtschaft & Freiflächen"
DEFAULT_DESCRIPTION = (
    "ZOE Solar plant, finanziert und betreibt hochrentable Photovoltaikanlagen für Gewerbe, "
    "Landwirtschaft, Industrie und Freiflächen. Profitieren Sie von maximaler Rendite, regionaler "
    "Expertise und einem Ansprechpartner für alle Energiefragen."
)
DEFAULT_IMAGE_ALT = "Photovoltaikanlage von ZOE Solar bei Sonnenuntergang"
NOINDEX = "noindex,nofollow"

HERO_IMAGES: Dict[PageId, str] = {
    PageId.PHOTOVOLTAIK: "https://images.unsplash.com/photo-1509390621415-05581bda341d?q=80&w=2070&auto=format&fit=crop",
    PageId.PREISE: "https://images.unsplash.com/photo-1639755243883-2073d8f310f8?q=80&w=2070&auto=format&fit=crop",
    PageId.FINANZIERUNG: "https://images.unsplash.com/photo-1553729459-efe14ef6055d?q=80&w=2070&auto=format&fit=crop",
    PageId.AGRI_PV: "https://images.unsplash.com/photo-1625246333195-78d9c38ad449?q=80&w=2070&auto=format&fit=crop",
    PageId.SERVICE_PHOTOVOLTAIK: (
        "https://images.unsplash.com/photo-1628087942182-7b3d0e34ab3c?q=80&w=1974&auto=format&fit=crop"
    ),
    PageId.SERVICE_LADEPARKS: "https://images.unsplash.com/photo-1633822289843-4a451b07e382?q=80&w=2070&auto=format&fit=crop",
    PageId.SERVICE_SPEICHER: "https://images.unsplash.com/photo-1633711124238-52260c6f5d81?q=80&w=2069&auto=format&fit=crop",
    PageId.SERVICE_ANMELDUNG_PV: (
        "https://images.unsplash.com/photo-1587907338887-a2c3a5e8e8b1?q=80&w=2070&auto=format&fit=crop"
    ),
    PageId.SERVICE_ANMELDUNG_LADESTATIONEN: (
        "https://images.unsplash.com/photo-1454165804606-c3d57bc86b40?q=80&w=2070&auto=format&fit=crop"
    ),
    PageId.SERVICE_NETZANSCHLUSS: (
        "https://images.unsplash.com/photo-1588339323423-64537359a3e6?q=80&w=2070&auto=format&fit=crop"
    ),
    PageId.PRODUKTE: "https://images.unsplash.com/photo-1617394390484-a84de388c455?q=80&w=2070&auto=format&fit=crop",
    PageId.ANWENDUNGSFAELLE: "https://images.unsplash.com/photo-1516216628859-9bcce25a7e6a?q=80&w=2070&auto=format&fit=crop",
    PageId.WISSENS_HUB: "https://images.unsplash.com/photo-1485827404703-89b55fcc595e?q=80&w=2070&auto=format&fit=crop",
    PageId.FAQ_PAGE: "https://images.unsplash.com/photo-1485827404703-89b55fcc595e?q=80&w=2070&auto=format&fit=crop",
    PageId.AKTUELLES: "https://images.unsplash.com/photo-1587907338887-a2c3a5e8e8b1?q=80&w=2070&auto=format&fit=crop",
    PageId.KONTAKT: "https://images.unsplash.com/photo-1587560699334-cc426240169f?q=80&w=2070&auto=format&fit=crop",
    PageId.PROJEKTE: "https://images.unsplash.com/photo-1599454100913-b903e12a4459?q=80&w=1932&auto=format&fit=crop",
    PageId.INNOVATIONS: "https://images.unsplash.com/photo-1617585035213-a8685d6b3a0a?q=80&w=1964&auto=format&fit=crop",
}

PRICING_PACKAGES: Tuple[PricingPackage, ...] = (
    PricingPackage("basic", "Basis Komplett-Paket", "Einfamilienhäuser mit 5,0 kWp Dachfläche", "13900"),
    PricingPackage("optimal", "Optimal-Paket", "Eigenheime mit 8,0 kWp und Speicher-Option", "19900"),
    PricingPackage("premium", "Premium Maximal", "Große Dächer mit 12,0 kWp inklusive Speicher", "28900"),
    PricingPackage("gewerbe", "Gewerbe Kompakt", "Gewerbedächer ab 30 kWp mit Eigenverbrauchsfokus", "39900"),
)


def hero_image_for(page: Optional[PageId]) -> Optional[str]:
    if page is None:
        return None
    return HERO_IMAGES.get(page)


def build_default_layer(settings: SiteSettings, regions: Sequence[ServiceRegion]) -> SeoOverrideLayer:
    """Global defaults every page is merged onto.

    Open Graph and Twitter titles, descriptions and images are left unset here
    so the resolver completes them from the page that is actually rendered.
    """

    home = settings.url("/")
    return SeoOverrideLayer(
        title=DEFAULT_TITLE,
        description=DEFAULT_DESCRIPTION,
        robots=settings.default_robots,
        keywords=(
            "ZOE Solar",
            "Photovoltaik Gewerbe",
            "Agri-PV Anbieter",
            "Freiflächen Photovoltaik",
            "Solarpark Brandenburg",
            "PV Finanzierung Gewerbe",
            "Industrie Solarstrom",
        ),
        alternates=tuple(AlternateHref(lang, home) for lang in ("de", "de-DE", "de-AT", "de-CH", "x-default")),
        structured_data=tuple(organization_graph(settings, regions) + local_business_branches(settings, regions)),
        additional_meta=(
            AdditionalMetaTag(settings.organization_name, name="author"),
            AdditionalMetaTag(settings.organization_name, name="publisher"),
            AdditionalMetaTag("telephone=no", name="format-detection"),
        ),
        og=OpenGraphOverride(
            type="website",
            image_alt=DEFAULT_IMAGE_ALT,
            image_width=settings.share_image_width,
            image_height=settings.share_image_height,
            image_type=settings.share_image_type,
            site_name=settings.site_name,
            locale=settings.locale,
        ),
        twitter=TwitterOverride(card="summary_large_image", site=settings.twitter_site, image_alt=DEFAULT_IMAGE_ALT),
        geo=GeoOverride(
            region=settings.hq_region,
            placename=settings.hq_placename,
            latitude=settings.hq_latitude,
            longitude=settings.hq_longitude,
        ),
    )


def _pillar_layer(
    settings: SiteSettings,
    regions: Sequence[ServiceRegion],
    *,
    title: str,
    description: str,
    keywords: Tuple[str, ...],
    service: Tuple[str, str, str],
    regional: Tuple[str, str],
    faq: Tuple[str, str, Tuple[str, ...], int],
    speakable_name: str,
    og: Optional[OpenGraphOverride] = None,
) -> SeoOverrideLayer:
    service_name, service_description, service_path = service
    service_url = settings.url(service_path)
    faq_name, faq_description, faq_categories, faq_limit = faq
    structured = [service_schema(settings, service_name, service_description, service_url)]
    structured.extend(regional_service_schemas(settings, regions, regional[0], regional[1], service_url))
    structured.extend(faq_schema(faq_name, faq_description, select_faq_entries(faq_categories, limit=faq_limit)))
    structured.extend(speakable_schema(speakable_name, PILLAR_SPEAKABLE_SELECTORS))
    return SeoOverrideLayer(
        title=title,
        description=description,
        keywords=keywords,
        structured_data=tuple(structured),
        og=og,
    )


def _agri_pv_region_layer(
    settings: SiteSettings,
    *,
    state: str,
    region_code: str,
    latitude: float,
    longitude: float,
    title: str,
    description: str,
    keywords: Tuple[str, ...],
) -> SeoOverrideLayer:
    name = f"Agri-PV {state}"
    structured = [
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "Service",
            "name": name,
            "serviceType": "Agri-Photovoltaik",
            "description": f"Planung und Umsetzung von Agri-PV-Anlagen in {state} für Landwirte und Agrarbetriebe.",
            "provider": {"@type": "Organization", "name": settings.organization_name, "url": settings.base_url},
            "areaServed": {"@type": "AdministrativeArea", "name": state},
            "url": settings.url(f"/agri-pv/{slugify(state)}"),
        }
    ]
    structured.extend(
        faq_schema(
            f"{name} FAQ",
            f"Häufige Fragen zu Agri-PV in {state}, Förderungen und Umsetzung.",
            select_faq_entries(("Förderung", "Technik", "Region"), region=state, limit=4),
        )
    )
    structured.extend(speakable_schema(f"{name} | {settings.site_name}", (".hero-headline", ".pillar-intro")))
    return SeoOverrideLayer(
        title=title,
        description=description,
        keywords=keywords,
        structured_data=tuple(structured),
        geo=GeoOverride(region=region_code, placename=state, latitude=latitude, longitude=longitude),
    )


def _web_application(settings: SiteSettings, name: str, description: str, path: str, **extra: object) -> dict:
    payload = {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebApplication",
        "name": name,
        "description": description,
        "applicationCategory": "BusinessApplication",
        "operatingSystem": "Web Browser",
        "provider": {"@type": "Organization", "name": settings.organization_name, "url": settings.base_url},
        "url": settings.url(path),
    }
    payload.update(extra)
    return payload


def build_page_layers(settings: SiteSettings, regions: Sequence[ServiceRegion]) -> Dict[PageId, SeoOverrideLayer]:
    """Return the static layer of every page that has one."""

    layers: Dict[PageId, SeoOverrideLayer] = {}

    layers[PageId.HOME] = SeoOverrideLayer(
        structured_data=(
            {
                "@context": SCHEMA_CONTEXT,
                "@type": "WebPage",
                "@id": settings.url("/#homepage"),
                "name": f"Startseite {settings.site_name}",
                "description": (
                    f"Übersicht über Leistungen, Branchenlösungen und digitale Tools von {settings.site_name} "
                    "für Photovoltaik-Großprojekte."
                ),
                "url": settings.url("/"),
                "inLanguage": settings.language,
            },
            *speakable_schema(
                f"{settings.site_name} Startseite", (".hero-headline", ".hero-pitch", ".testimonial-highlight")
            ),
        )
    )

    layers[PageId.PHOTOVOLTAIK] = _pillar_layer(
        settings,
        regions,
        title="Photovoltaik für Gewerbe & Industrie | ZOE Solar",
        description=(
            "Planen Sie mit ZOE Solar hochrentable Photovoltaikprojekte für Gewerbedächer, Industrieflächen "
            "und Solarparks. Schlüsselfertige Umsetzung inklusive Finanzierung."
        ),
        keywords=("Gewerbe Photovoltaik", "PV Industrie", "Solarpark Planung"),
        service=(
            "Photovoltaik für Gewerbe und Industrie",
            "Planung, Finanzierung, Installation und Service von großskaligen Photovoltaikanlagen für "
            "Gewerbeimmobilien, Industrie und Logistik.",
            "/service/photovoltaik",
        ),
        regional=(
            "Photovoltaik für Gewerbe und Industrie",
            "Regionale Planung und Umsetzung von Photovoltaik-Großanlagen inklusive Netzanschluss, "
            "Monitoring und Betriebsführung.",
        ),
        faq=(
            "Photovoltaik für Gewerbe – FAQ",
            "Antworten auf häufige Fragen zur Wirtschaftlichkeit, Technik und Umsetzung von PV-Anlagen für Unternehmen.",
            ("Allgemein", "Technik", "Wirtschaftlichkeit"),
            4,
        ),
        speakable_name="Photovoltaik für Gewerbe & Industrie | ZOE Solar",
        og=OpenGraphOverride(image=HERO_IMAGES[PageId.PHOTOVOLTAIK]),
    )

    layers[PageId.SERVICE_PHOTOVOLTAIK] = _pillar_layer(
        settings,
        regions,
        title="Aufdach-Photovoltaik für Unternehmen | ZOE Solar",
        description=(
            "Verwandeln Sie Ihre Dächer in eine verlässliche Einnahmequelle. ZOE Solar liefert schlüsselfertige "
            "PV-Aufdachanlagen inklusive Monitoring und Service."
        ),
        keywords=("Aufdach PV", "Dach Photovoltaik Gewerbe", "PV Monitoring"),
        service=(
            "Aufdach-Photovoltaik",
            "Schlüsselfertige Aufdachanlagen für Gewerbeimmobilien inklusive Planung, Installation und Betriebsführung.",
            "/service/photovoltaik",
        ),
        regional=(
            "Aufdach-Photovoltaik",
            "Regionale Umsetzung von Photovoltaik-Dachanlagen inklusive Standsicherheitsprüfung, Statik und Monitoring.",
        ),
        faq=(
            "FAQ Aufdach-Photovoltaik",
            "Häufige Fragen zu Dachstatik, Wartung und Monitoring gewerblicher Dachanlagen.",
            ("Allgemein", "Technik"),
            3,
        ),
        speakable_name="Aufdach-Photovoltaik für Unternehmen | ZOE Solar",
    )

    layers[PageId.SERVICE_LADEPARKS] = _pillar_layer(
        settings,
        regions,
        title="Ladeparks & Ladeinfrastruktur für E-Mobilität | ZOE Solar",
        description=(
            "Planen Sie mit ZOE Solar leistungsstarke Ladeparks für Flotten und Kunden. Von HPC-Ladesäulen bis "
            "zu smartem Lastmanagement."
        ),
        keywords=("HPC Ladepark", "E-Mobilität Gewerbe", "Ladeinfrastruktur Unternehmen"),
        service=(
            "Planung von Ladeparks",
            "Komplettlösungen für gewerbliche Ladeparks inklusive Schnellladetechnik, Lastmanagement und Abrechnung.",
            "/service/ladeparks",
        ),
        regional=(
            "Ladeparks & Ladeinfrastruktur",
            "Regionale Planung und Errichtung von Schnellladeinfrastruktur, Lastmanagement und Abrechnungssystemen.",
        ),
        faq=(
            "FAQ Ladeparks",
            "Antworten auf häufige Fragen zu Ladeleistung, Netzanschluss und Förderungen für Ladeinfrastruktur.",
            ("Technik", "Wirtschaftlichkeit"),
            3,
        ),
        speakable_name="Ladeparks & Ladeinfrastruktur | ZOE Solar",
    )

    layers[PageId.SERVICE_SPEICHER] = _pillar_layer(
        settings,
        regions,
        title="Industrielle Batteriespeicher & Peak Shaving | ZOE Solar",
        description=(
            "Mit industriellen Speichern von ZOE Solar maximieren Sie Eigenverbrauch, sichern den Betrieb ab "
            "und kappen Lastspitzen."
        ),
        keywords=("Industrieller Speicher", "Peak Shaving", "PV Batteriespeicher"),
        service=(
            "Industrielle Batteriespeicher",
            "Planung und Umsetzung von Batteriespeicherlösungen zur Eigenverbrauchsoptimierung und Lastspitzenkappung.",
            "/service/speicher",
        ),
        regional=(
            "Industrielle Batteriespeicher & Energiemanagement",
            "Regionale Speicherlösungen für Peak Shaving, Netzersatzbetrieb und Ladeinfrastruktur-Integration.",
        ),
        faq=(
            "FAQ Batteriespeicher für Unternehmen",
            "Antworten zu Lebensdauer, ROI und Einsatzbereichen von Batteriespeichern im Gewerbe.",
            ("Technik", "Wirtschaftlichkeit"),
            3,
        ),
        speakable_name="Industrielle Batteriespeicher & Peak Shaving | ZOE Solar",
    )

    layers[PageId.SERVICE_ANMELDUNG_PV] = SeoOverrideLayer(robots="noindex,follow")
    layers[PageId.SERVICE_ANMELDUNG_LADESTATIONEN] = SeoOverrideLayer(robots="noindex,follow")
    layers[PageId.SERVICE_NETZANSCHLUSS] = SeoOverrideLayer(robots="index,follow")

    layers[PageId.PREISE] = SeoOverrideLayer(
        title="Photovoltaik zum Festpreis | ZOE Solar Pakete",
        description=(
            "Transparente Photovoltaik-Festpreise von ZOE Solar. Vergleichen Sie Pakete für Gewerbe und private "
            "Dächer – inklusive Planung, Montage und Service."
        ),
        keywords=("Photovoltaik Festpreis", "PV Paket Preise", "Solar Komplettpaket"),
        structured_data=tuple(
            offer_catalog_schema(settings, PRICING_PACKAGES)
            + faq_schema(
                "FAQ Photovoltaik Preise",
                "Häufige Fragen zu Investitionskosten, Finanzierung und Wirtschaftlichkeit von Photovoltaikprojekten.",
                select_faq_entries(("Wirtschaftlichkeit",), limit=3),
            )
            + speakable_schema("Photovoltaik Preise & Pakete | ZOE Solar", PILLAR_SPEAKABLE_SELECTORS)
        ),
    )

    layers[PageId.PRODUKTE] = SeoOverrideLayer(
        title="Technologie-Partner & Komponenten | ZOE Solar",
        description=(
            "Entdecken Sie die Hersteller und Premium-Komponenten, mit denen ZOE Solar Projekte realisiert – "
            "von Modulen über Speicher bis zur Ladeinfrastruktur."
        ),
        keywords=("PV Komponenten", "Premium Solarmodule", "SolarEdge Optimierer"),
    )
    layers[PageId.ANWENDUNGSFAELLE] = SeoOverrideLayer(
        title="Branchenlösungen & Use Cases | ZOE Solar",
        description=(
            "Logistik, Industrie, Landwirtschaft oder Immobilienwirtschaft – ZOE Solar zeigt konkrete "
            "Anwendungsfälle erfolgreicher PV-Projekte."
        ),
        keywords=("Photovoltaik Logistik", "Agri-PV Beispiele", "PV Referenzen"),
    )

    layers[PageId.KONTAKT] = SeoOverrideLayer(
        title="Kontakt ZOE Solar | Photovoltaik Experten in Berlin",
        description=(
            "Sprechen Sie mit unseren Photovoltaik-Spezialisten in Berlin. Telefon, E-Mail oder digitale "
            "Potenzialanalyse – wir melden uns innerhalb von 24 Stunden."
        ),
        keywords=("ZOE Solar Kontakt", "Photovoltaik Beratung Berlin", "PV Ansprechpartner"),
        structured_data=(
            {
                "@context": SCHEMA_CONTEXT,
                "@type": "ContactPage",
                "url": settings.url("/kontakt"),
                "name": f"Kontaktseite {settings.site_name}",
                "description": (
                    f"Kontaktmöglichkeiten und Rückrufservice von {settings.organization_name} – "
                    "Ihrem Partner für Photovoltaik-Großprojekte."
                ),
                "inLanguage": settings.language,
            },
            *faq_schema(
                "Kontakt – Häufige Fragen",
                "Antworten auf wiederkehrende Fragen zu Beratung, Projektstart und Reaktionszeiten.",
                select_faq_entries(("Allgemein",), limit=2),
            ),
            *speakable_schema(
                f"Kontakt {settings.site_name}", (".hero-headline", ".hero-pitch", ".faq-section .faq-speakable-question")
            ),
        ),
    )

    general_faq = [entry for entry in FAQ_ENTRIES if not entry.regions]
    layers[PageId.FAQ_PAGE] = SeoOverrideLayer(
        title="FAQ Photovoltaik Großanlagen | ZOE Solar Wissens-Hub",
        description=(
            "Antworten auf die häufigsten Fragen zu Planung, Technik, Wirtschaftlichkeit und Service von "
            "Photovoltaikanlagen für Unternehmen."
        ),
        keywords=("Photovoltaik FAQ", "PV Fragen Antworten", "Solar Wissen"),
        structured_data=tuple(
            faq_schema(
                "FAQ Photovoltaik Großanlagen",
                "Häufige Fragen zu Photovoltaik für Unternehmen.",
                general_faq,
            )
            + speakable_schema("Photovoltaik FAQ | ZOE Solar", ("main h1", "main .faq-item h3"))
        ),
    )

    layers[PageId.INNOVATIONS] = SeoOverrideLayer(
        title="Solar-Innovationen & Zukunftstechnologien | ZOE Solar",
        description=(
            "Ästhetische Solarfassaden, Agri-PV und smarte Speicher: Entdecken Sie, wie ZOE Solar Innovationen "
            "in Projekten einsetzt."
        ),
        keywords=("Solar Innovation", "Agri PV", "Smarte Speicherlösungen"),
    )
    layers[PageId.LOGIN] = SeoOverrideLayer(
        title="Login | ZOE Solar Kundenportal",
        description=(
            "Melden Sie sich mit Ihrem ZOE Solar Konto an, um Projektstatus, Angebote und Energieberichte "
            "einzusehen."
        ),
        robots=NOINDEX,
    )
    layers[PageId.DASHBOARD] = SeoOverrideLayer(
        title="Kundenportal Dashboard | ZOE Solar",
        description="Übersicht über laufende Photovoltaik-Projekte, Angebote und Dokumente im ZOE Solar Kundenportal.",
        robots=NOINDEX,
    )

    layers[PageId.FINANZIERUNG] = SeoOverrideLayer(
        title="Photovoltaik Finanzierung & Förderung | ZOE Solar",
        description=(
            "Von KfW bis PPA: ZOE Solar strukturiert die passende Finanzierung und Fördermittelstrategie für "
            "Ihr Solarprojekt."
        ),
        keywords=("PV Finanzierung", "Photovoltaik Förderung", "PPA Vertrag"),
        structured_data=tuple(
            [
                service_schema(
                    settings,
                    "Finanzierungsberatung Photovoltaik",
                    "Beratung zu Finanzierungs- und Förderprogrammen für Photovoltaikanlagen sowie Strukturierung "
                    "von PPA-Modellen.",
                    settings.url("/finanzierung"),
                )
            ]
            + faq_schema(
                "FAQ Photovoltaik Finanzierung",
                "Antworten zu Fördermitteln, PPA-Strukturen und Finanzierungslaufzeiten.",
                select_faq_entries(("Wirtschaftlichkeit",), limit=3),
            )
            + speakable_schema(
                "Photovoltaik Finanzierung & Förderung | ZOE Solar", ("main h1", "main section:first-of-type p")
            )
        ),
    )

    layers[PageId.FOERDERMITTEL_CHECK] = SeoOverrideLayer(
        title="Fördermittel-Check für Photovoltaik | ZOE Solar",
        description=(
            "Finden Sie passende Zuschüsse und Kredite für Ihr Solarprojekt. Der digitale Fördermittel-Check "
            "von ZOE Solar zeigt aktuelle Programme."
        ),
        keywords=("PV Fördermittel", "Solar Zuschüsse", "Fördermittel Check"),
        robots="noindex,follow",
        structured_data=(
            {
                "@context": SCHEMA_CONTEXT,
                "@type": "HowTo",
                "name": "Fördermittel-Check für Photovoltaik durchführen",
                "description": (
                    "So finden Unternehmen in drei Schritten die passenden Förderprogramme für ihr Photovoltaikprojekt."
                ),
                "step": [
                    {
                        "@type": "HowToStep",
                        "position": 1,
                        "name": "Projektprofil anlegen",
                        "text": "Geben Sie Standort, Branche und Leistungsbedarf Ihres Projekts im digitalen Assistenten ein.",
                    },
                    {
                        "@type": "HowToStep",
                        "position": 2,
                        "name": "Förderprogramme vergleichen",
                        "text": (
                            "Erhalten Sie automatisch eine Übersicht relevanter Förderprogramme von Bund, Ländern "
                            "und Kommunen."
                        ),
                    },
                    {
                        "@type": "HowToStep",
                        "position": 3,
                        "name": "Förderantrag vorbereiten",
                        "text": (
                            f"Lassen Sie sich durch {settings.site_name} bei der Zusammenstellung aller nötigen "
                            "Unterlagen begleiten."
                        ),
                    },
                ],
                "supply": "Projektinformationen (Standort, Leistung, Budget)",
                "tool": f"Digitaler Fördermittel-Assistent von {settings.site_name}",
            },
        ),
    )

    layers[PageId.AGRI_PV] = SeoOverrideLayer(
        title="Agri-PV für Landwirtschaft & Sonderkulturen | ZOE Solar",
        description=(
            "Nutzen Sie Ihre Flächen doppelt: ZOE Solar realisiert Agri-PV-Anlagen, die Ernte schützen, "
            "Wasser sparen und stabile Zusatzerträge liefern."
        ),
        keywords=("Agri PV", "Landwirtschaft Solar", "Doppelnutzung Acker"),
    )
    layers[PageId.AGRI_PV_BRANDENBURG] = _agri_pv_region_layer(
        settings,
        state="Brandenburg",
        region_code="DE-BB",
        latitude=52.4125,
        longitude=12.5319,
        title="Agri-PV Brandenburg | ZOE Solar - Photovoltaik für Landwirte",
        description=(
            "Nutzen Sie die neuen Agri-PV-Förderungen 2025 in Brandenburg. Schützen Sie Ihre Kulturen vor "
            "Wetterextremen, sparen Sie Wasser und generieren Sie zusätzliche Einnahmen durch Stromproduktion."
        ),
        keywords=(
            "Agri-PV Brandenburg",
            "Landwirtschaft Solar Brandenburg",
            "PV Landwirte",
            "Agri Photovoltaik Prignitz",
            "Solar Ackerbau",
        ),
    )
    layers[PageId.AGRI_PV_SACHSEN_ANHALT] = _agri_pv_region_layer(
        settings,
        state="Sachsen-Anhalt",
        region_code="DE-ST",
        latitude=51.9503,
        longitude=11.6923,
        title="Agri-PV Sachsen-Anhalt | ZOE Solar - Deutschlands Agrarregion Nr. 1",
        description=(
            "Sachsen-Anhalt bietet ideale Voraussetzungen für Agri-PV: Über 50% der Landesfläche sind Ackerland. "
            "Nutzen Sie die neuen Bundesförderungen 2025 in der Magdeburger Börde, Altmark und im Harzvorland."
        ),
        keywords=(
            "Agri-PV Sachsen-Anhalt",
            "Landwirtschaft Solar Sachsen-Anhalt",
            "PV Magdeburger Börde",
            "Agri Photovoltaik Altmark",
            "Solar Ackerbau",
        ),
    )
    layers[PageId.AGRI_PV_NIEDERSACHSEN] = _agri_pv_region_layer(
        settings,
        state="Niedersachsen",
        region_code="DE-NI",
        latitude=52.3705,
        longitude=9.7332,
        title="Agri-PV Niedersachsen | ZOE Solar - Deutschlands größte Agrarregion",
        description=(
            "Niedersachsen ist mit über 2,6 Mio. ha die größte Agrarregion Deutschlands. Nutzen Sie die neuen "
            "Agri-PV-Förderungen 2025 und kombinieren Sie Milchwirtschaft oder Ackerbau mit Stromproduktion."
        ),
        keywords=(
            "Agri-PV Niedersachsen",
            "Landwirtschaft Solar Niedersachsen",
            "PV Lüneburger Heide",
            "Agri Photovoltaik Emsland",
            "Solar Milchwirtschaft",
        ),
    )
    layers[PageId.AGRI_PV_BAYERN] = _agri_pv_region_layer(
        settings,
        state="Bayern",
        region_code="DE-BY",
        latitude=48.1351,
        longitude=11.582,
        title="Agri-PV Bayern | ZOE Solar - Tradition trifft Innovation",
        description=(
            "Bayern ist eine traditionsreiche Agrarregion. Nutzen Sie die neuen Agri-PV-Förderungen 2025 und "
            "kombinieren Sie Landwirtschaft mit moderner Solartechnik vom Allgäu bis zur Hallertau."
        ),
        keywords=(
            "Agri-PV Bayern",
            "Landwirtschaft Solar Bayern",
            "PV Hallertau",
            "Agri Photovoltaik Allgäu",
            "Solar Hopfenanbau",
        ),
    )
    layers[PageId.AGRI_PV_NORDRHEIN_WESTFALEN] = _agri_pv_region_layer(
        settings,
        state="Nordrhein-Westfalen",
        region_code="DE-NW",
        latitude=51.4332,
        longitude=7.6616,
        title="Agri-PV Nordrhein-Westfalen | ZOE Solar - Industrie trifft Landwirtschaft",
        description=(
            "Nordrhein-Westfalen verbindet urbane Industrie mit Landwirtschaft. Nutzen Sie die neuen "
            "Agri-PV-Förderungen 2025 im Rheinland, Münsterland oder in der Eifel."
        ),
        keywords=(
            "Agri-PV Nordrhein-Westfalen",
            "Landwirtschaft Solar NRW",
            "PV Rheinland",
            "Agri Photovoltaik Münsterland",
            "Solar Weinanbau",
        ),
    )

    layers[PageId.SEO_MONITORING] = SeoOverrideLayer(
        title="SEO Monitoring Dashboard | ZOE Solar - Rankings & Performance Tracking",
        description=(
            "Überwachen Sie Ihre Suchmaschinen-Performance in Echtzeit. Tracken Sie Rankings, Core Web Vitals "
            "und strukturierte Daten für maximale Sichtbarkeit."
        ),
        keywords=("SEO Monitoring", "Ranking Tracker", "Core Web Vitals"),
        robots=NOINDEX,
        structured_data=(
            _web_application(
                settings,
                "SEO Monitoring Dashboard",
                f"Echtzeit-Überwachung von Suchmaschinen-Rankings und Website-Performance für {settings.site_name}.",
                "/seo-monitoring",
            ),
        ),
    )
    layers[PageId.MITARBEITER_LOGIN] = SeoOverrideLayer(
        title="Mitarbeiter Login & Admin Dashboard | ZOE Solar",
        description=(
            "Interner Zugang für das SEO & Growth Team von ZOE Solar. Überblick über Backlinks, Rankings und "
            "Traffic-Entwicklung."
        ),
        keywords=("Mitarbeiter Login", "Admin Dashboard", "SEO Reporting"),
        robots=NOINDEX,
        structured_data=(
            _web_application(
                settings,
                f"{settings.site_name} Admin Dashboard",
                "Internes Monitoring-Portal mit Echtzeitdaten zu SEO-Performance, Backlinks und Traffic.",
                "/mitarbeiter-login",
                offers={
                    "@type": "Offer",
                    "availability": "https://schema.org/InStock",
                    "price": "0",
                    "priceCurrency": "EUR",
                },
            ),
        ),
    )
    layers[PageId.FALLSTUDIEN] = SeoOverrideLayer(
        title="Fallstudien & Erfolgsgeschichten | ZOE Solar - Photovoltaik Projekte",
        description=(
            "Erfahren Sie von erfolgreichen Photovoltaik-Projekten: Von Einfamilienhäusern bis Industrieanlagen. "
            "Detaillierte Fallstudien mit Ergebnissen, Kosten und ROI."
        ),
        keywords=("Solar Fallstudien", "Photovoltaik Projekte", "PV Erfolgsgeschichten"),
        structured_data=(
            {
                "@context": SCHEMA_CONTEXT,
                "@type": "CollectionPage",
                "name": "Fallstudien & Erfolgsgeschichten",
                "description": f"Sammlung erfolgreicher Photovoltaik-Projekte von {settings.site_name}",
                "provider": {"@type": "Organization", "name": settings.organization_name, "url": settings.base_url},
                "url": settings.url("/fallstudien"),
            },
        ),
    )
    layers[PageId.PROJEKTE] = SeoOverrideLayer(
        title="Referenzen & Projekte | ZOE Solar",
        description=(
            "Einblick in erfolgreich realisierte Photovoltaikprojekte von ZOE Solar – von Logistikzentren "
            "bis Agro-PV."
        ),
        keywords=("Photovoltaik Referenzen", "PV Projekte", "Solar Erfolgsstory"),
    )
    layers[PageId.WISSENS_HUB] = SeoOverrideLayer(
        title="Wissens-Hub: Leitfäden, Artikel & Tools | ZOE Solar",
        description=(
            "Vertiefen Sie Ihr Wissen zu Photovoltaik mit Leitfäden, Studien, Webinaren und digitalen Tools "
            "von ZOE Solar."
        ),
        keywords=("Photovoltaik Wissen", "Solar Leitfaden", "PV Studien"),
    )
    return layers
