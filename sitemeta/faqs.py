"""FAQ catalogue that feeds FAQPage and QAPage structured data."""
from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .models import FaqEntry
from .utils import slugify

FAQ_ENTRIES: Tuple[FaqEntry, ...] = (
    FaqEntry(
        question="Für welche Unternehmen lohnt sich eine Photovoltaikanlage?",
        answer=(
            "Besonders für Unternehmen mit hohem Tagesverbrauch wie Logistik, Produktion und Handel. "
            "Der Eigenverbrauch senkt die Stromkosten **dauerhaft** und schützt vor Preissteigerungen."
        ),
        category="Allgemein",
    ),
    FaqEntry(
        question="Wie läuft ein Projekt mit ZOE Solar ab?",
        answer=(
            "Nach der kostenlosen Erstberatung folgen Standortanalyse, technische Planung, Installation "
            "und Netzanschluss. Sie haben einen festen Ansprechpartner von der ersten Idee bis zum Betrieb."
        ),
        category="Allgemein",
    ),
    FaqEntry(
        question="Wie schnell reagiert ZOE Solar auf Anfragen?",
        answer="Wir melden uns innerhalb von **24 Stunden** mit einem Terminvorschlag für die Erstberatung.",
        category="Allgemein",
    ),
    FaqEntry(
        question="Wie hoch ist der Stromertrag einer Solaranlage?",
        answer=(
            "Bei Südausrichtung und 30° Neigung sind 850 bis 1.100 kWh pro kWp und Jahr realistisch. "
            "Der tatsächliche Ertrag hängt von Standort, Verschattung und Ausrichtung ab."
        ),
        category="Technik",
    ),
    FaqEntry(
        question="Welche Dachtypen eignen sich für Photovoltaik?",
        answer=(
            "Flachdächer, Trapezblech- und Ziegeldächer lassen sich mit passenden Montagesystemen belegen. "
            "Vorab prüfen wir Statik und Dachzustand."
        ),
        category="Technik",
    ),
    FaqEntry(
        question="Wie lange hält eine Photovoltaikanlage?",
        answer="Module erreichen 25 bis 30 Jahre Lebensdauer, Wechselrichter werden meist nach 12 bis 15 Jahren getauscht.",
        category="Technik",
    ),
    FaqEntry(
        question="Wann amortisiert sich eine gewerbliche PV-Anlage?",
        answer=(
            "Bei hohem Eigenverbrauch amortisieren sich Gewerbeanlagen häufig nach **6 bis 9 Jahren**. "
            "Danach erzeugt die Anlage über Jahrzehnte günstigen Solarstrom."
        ),
        category="Wirtschaftlichkeit",
    ),
    FaqEntry(
        question="Was kostet eine Photovoltaikanlage pro kWp?",
        answer="Gewerbliche Anlagen liegen je nach Größe zwischen 900 und 1.300 Euro pro kWp inklusive Montage.",
        category="Wirtschaftlichkeit",
    ),
    FaqEntry(
        question="Lohnt sich ein Batteriespeicher im Gewerbe?",
        answer=(
            "Speicher erhöhen den Eigenverbrauch und kappen Lastspitzen. "
            "Bei hohen Leistungspreisen rechnet sich Peak Shaving oft schon nach wenigen Jahren."
        ),
        category="Wirtschaftlichkeit",
    ),
    FaqEntry(
        question="Welche Förderungen gibt es für Photovoltaik?",
        answer=(
            "KfW-Kredite, Landesprogramme und die EEG-Vergütung senken die Investition. "
            "Wir prüfen alle Programme im Rahmen der Planung."
        ),
        category="Förderung",
    ),
    FaqEntry(
        question="Welche Förderprogramme gibt es in Berlin?",
        answer=(
            "Das Berliner Programm SolarPLUS bezuschusst Speicher und Netzanschlüsse. "
            "Zusätzlich stehen die Kredite der IBB zur Verfügung."
        ),
        category="Förderung",
        regions=("Berlin",),
    ),
    FaqEntry(
        question="Gibt es in Berlin Auflagen für Solaranlagen auf Bestandsgebäuden?",
        answer=(
            "Das Berliner Solargesetz verpflichtet bei Neubauten und wesentlichen Dachsanierungen zu PV. "
            "In Denkmalschutzgebieten stimmen wir die Planung mit den Behörden ab."
        ),
        category="Region",
        regions=("Berlin", "Brandenburg"),
    ),
    FaqEntry(
        question="Welche Agri-PV-Förderungen gibt es in Brandenburg?",
        answer=(
            "Brandenburg unterstützt Agri-PV über Landesprogramme und die Bundesförderung für "
            "besondere Solaranlagen. Wir kombinieren beide Bausteine für Ihr Projekt."
        ),
        category="Förderung",
        regions=("Brandenburg",),
    ),
    FaqEntry(
        question="Wie hoch ist der Solarertrag in München und Oberbayern?",
        answer="Mit über 1.150 kWh pro kWp gehört der Süden Bayerns zu den ertragreichsten Regionen Deutschlands.",
        category="Region",
        regions=("München", "Bayern"),
    ),
    FaqEntry(
        question="Wie wird Agri-PV in Bayern gefördert?",
        answer="Bayern fördert Agri-PV-Pilotprojekte zusätzlich zur EEG-Innovationsausschreibung.",
        category="Förderung",
        regions=("Bayern",),
    ),
    FaqEntry(
        question="Welche Netzbetreiber sind in Hamburg zuständig?",
        answer="In Hamburg koordinieren wir den Netzanschluss mit Stromnetz Hamburg und übernehmen die Anmeldung.",
        category="Region",
        regions=("Hamburg",),
    ),
    FaqEntry(
        question="Betreut ZOE Solar auch Projekte in Österreich?",
        answer="Ja, mit Teams in Wien, Graz und Linz planen und bauen wir Anlagen in ganz Österreich.",
        category="Region",
        regions=("Wien", "Graz", "Linz", "Salzburg", "Innsbruck"),
    ),
    FaqEntry(
        question="Welche Förderungen gibt es in der Schweiz?",
        answer="Die Einmalvergütung von Pronovo und kantonale Programme senken die Investitionskosten spürbar.",
        category="Förderung",
        regions=("Zürich", "Basel", "Bern", "Genf", "Lausanne"),
    ),
    FaqEntry(
        question="Welche Agri-PV-Erfahrungen gibt es in Sachsen-Anhalt?",
        answer="In der Magdeburger Börde zeigen Pilotanlagen stabile Ernten unter den Modulreihen.",
        category="Region",
        regions=("Sachsen-Anhalt",),
    ),
    FaqEntry(
        question="Eignet sich Agri-PV für Milchbetriebe in Niedersachsen?",
        answer="Aufgeständerte Anlagen spenden Weidetieren Schatten und liefern eine zweite Einnahmequelle.",
        category="Region",
        regions=("Niedersachsen",),
    ),
    FaqEntry(
        question="Welche Flächen nutzt Agri-PV in Nordrhein-Westfalen?",
        answer="Im Rheinland und Münsterland eignen sich Obst- und Sonderkulturen besonders für Agri-PV.",
        category="Region",
        regions=("Nordrhein-Westfalen",),
    ),
)


def select_faq_entries(
    categories: Sequence[str],
    *,
    limit: int = 4,
    region: str | None = None,
    entries: Iterable[FaqEntry] = FAQ_ENTRIES,
) -> List[FaqEntry]:
    """Pick FAQ entries by category, optionally restricted to a region.

    Entries without region tags count as relevant everywhere. When a region is
    given, entries tagged for it come first.
    """

    if limit <= 0:
        return []
    region_slug = slugify(region) if region else ""
    regional: List[FaqEntry] = []
    general: List[FaqEntry] = []
    for entry in entries:
        if entry.category not in categories:
            continue
        if not region_slug or not entry.regions:
            general.append(entry)
        elif any(slugify(candidate) == region_slug for candidate in entry.regions):
            regional.append(entry)
    return (regional + general)[:limit]
