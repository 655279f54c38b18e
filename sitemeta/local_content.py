"""Local content per location slug; feeds the location item-list schemas."""
from __future__ import annotations

from typing import Dict

from .models import CaseStudyHighlight, LocalCaseStudy, LocalContent, LocalLink

LOCAL_CONTENT_BY_SLUG: Dict[str, LocalContent] = {
    "berlin": LocalContent(
        blog_posts=(
            LocalLink(
                "Fallstudie: Logistikzentrum spart 70% Stromkosten",
                "Wie wir eine 1,2 MWp-Anlage in Berlin gebaut haben und die Energiekosten massiv gesenkt wurden.",
                "/aktuelles/fallstudie-logistikzentrum-berlin",
            ),
            LocalLink(
                "Testsieger 2025: Warum ZOE Solar top ist",
                "Auszeichnung als bester Solaranbieter 2025 – speziell für Berlin und Umgebung.",
                "/aktuelles/auszeichnung-bester-solaranbieter-2025",
            ),
            LocalLink(
                "Agri-PV Brandenburg: Biohof Schmidt",
                "Wie ein Brandenburger Biohof mit 500 kWp Agri-PV seine Kühe schützt und Strom produziert.",
                "/fallstudie/biohof-schmidt-brandenburg-agri-pv",
            ),
        ),
        case_studies=(
            LocalCaseStudy(
                "Technologiepark Adlershof",
                "Mehrere Gebäude mit effizienten PV-Anlagen aufgerüstet – inklusive Speicher und Smart-Messung.",
                "/kontakt",
                (
                    CaseStudyHighlight("Anlagenleistung", "860 kWp"),
                    CaseStudyHighlight("Eigenverbrauch", "78%"),
                    CaseStudyHighlight("CO₂-Einsparung", "820 t / Jahr"),
                ),
            ),
            LocalCaseStudy(
                "Biohof Schmidt: 500 kWp Agri-PV mit Tieren",
                "Brandenburger Biohof mit 500 kWp Agri-PV schützt Milchkühe und erzeugt jährlich 450.000 kWh Strom.",
                "/fallstudie/biohof-schmidt-brandenburg-agri-pv",
                (
                    CaseStudyHighlight("Jahresertrag", "450.000 kWh"),
                    CaseStudyHighlight("Tierwohl", "+35%"),
                ),
            ),
        ),
        service_links=(
            LocalLink(
                "Solar für Einfamilienhäuser in Berlin",
                "Klare Kosten und lokale Förderungen im Überblick.",
                "/eigenheim-einfamilienhaus-kosten",
            ),
            LocalLink(
                "PV-Planung für die Hauptstadt",
                "Von Dachcheck bis Netzanmeldung – wir sind dabei.",
                "/eigenheim-planung",
            ),
            LocalLink(
                "Agri-PV für Brandenburger Betriebe",
                "Agrivoltaik für Kühe, Felder und Spezialkulturen in Brandenburg.",
                "/agri-pv-brandenburg",
            ),
        ),
    ),
    "muenchen": LocalContent(
        blog_posts=(
            LocalLink(
                "EEG 2024: Vorteile für Münchner Gewerbedächer",
                "Was die EEG-Novelle für bayerische Firmen bringt und wie Sie profitieren.",
                "/aktuelles/eeg-2024-aenderungen",
            ),
            LocalLink(
                "Bifaziale Module auf Flachdächern",
                "Warum moderne Module in München besonders effizient sind.",
                "/aktuelles/bifaziale-module-technologie",
            ),
        ),
        case_studies=(
            LocalCaseStudy(
                "Gewerbepark Garching",
                "Solare Vollversorgung für fünf Firmen mit verschiedenen Strombedarfen.",
                "/kontakt",
                (
                    CaseStudyHighlight("Installierte Leistung", "640 kWp"),
                    CaseStudyHighlight("Autarkiegrad", "74%"),
                    CaseStudyHighlight("ROI", "8,1 Jahre"),
                ),
            ),
            LocalCaseStudy(
                "Hopfen Krauss: 420 kWp Agri-PV für Brauerei",
                "Hallertauer Hopfenbetrieb nutzt 420 kWp Agri-PV für klimafeste Ernten und sauberen Strom.",
                None,
                (CaseStudyHighlight("Jahresertrag", "390.000 kWh"),),
            ),
        ),
        service_links=(
            LocalLink(
                "PV-Installation für Eigenheime in München",
                "Premium-Montage mit Schneesicherung für Alpenregionen.",
                "/eigenheim-installation",
            ),
            LocalLink(
                "Agri-PV Bayern: Obst & Hopfen",
                "Spezielle Agrivoltaik für bayerische Obstgärten und Hopfenfelder.",
                "/agri-pv-bayern",
            ),
        ),
    ),
    "hamburg": LocalContent(
        blog_posts=(
            LocalLink(
                "Solarstrom für Hafenlogistik",
                "Wie Lagerhallen im Hamburger Hafen zu Kraftwerken werden.",
                "/aktuelles/solarstrom-hafenlogistik-hamburg",
            ),
        ),
        service_links=(
            LocalLink(
                "Gewerbedächer in Hamburg",
                "Statikprüfung und Planung für große Hallendächer.",
                "/photovoltaik-gewerbe",
            ),
        ),
    ),
    "zuerich": LocalContent(
        blog_posts=(
            LocalLink(
                "Sektorkopplung in der Schweiz",
                "Wie Solar und E-Mobilität in Zürich zusammenkommen.",
                "/aktuelles/ai-daily-solid-state-battery-breakthrough",
            ),
            LocalLink(
                "Fördermittel-Guide Schweiz",
                "Aktuelle Förderungen und Finanzhilfen für PV-Anlagen.",
                "/aktuelles/ai-daily-new-eeg-incentives",
            ),
        ),
        case_studies=(
            LocalCaseStudy(
                "Boutique-Hotel Zürichsee",
                "PV-Anlage mit Speicher für volle Energieautonomie.",
                "/kontakt",
                (
                    CaseStudyHighlight("Anlagenleistung", "210 kWp"),
                    CaseStudyHighlight("Batteriespeicher", "120 kWh"),
                    CaseStudyHighlight("Unabhängigkeit", "82%"),
                ),
            ),
        ),
        service_links=(
            LocalLink(
                "Premium-Solarpakete für Zürich",
                "Alles-inklusive-Lösungen mit Speicher und Wallbox.",
                "/eigenheim",
            ),
        ),
    ),
    "wien": LocalContent(
        case_studies=(
            LocalCaseStudy(
                "Bürokomplex Donaustadt",
                "Fassaden- und Dach-PV für ein Bürogebäude mit 1.200 Arbeitsplätzen.",
                "/kontakt",
                (CaseStudyHighlight("Anlagenleistung", "540 kWp"),),
            ),
        ),
    ),
}


def local_content_for(slug: str) -> LocalContent | None:
    return LOCAL_CONTENT_BY_SLUG.get(slug)
