"""General utility helpers."""
from __future__ import annotations

import json
import logging
import re
import unicodedata
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, Hashable, Iterable, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_GERMAN_TRANSLITERATION = {"ä": "ae", "ö": "oe", "ü": "ue", "ß": "ss"}
_WHITESPACE_PATTERN = re.compile(r"\s+")
_SLUG_INVALID_PATTERN = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUN_PATTERN = re.compile(r"-{2,}")
_SLASH_RUN_PATTERN = re.compile(r"/{2,}")

GERMAN_MONTHS: Dict[str, int] = {
    "januar": 1,
    "jan": 1,
    "februar": 2,
    "feb": 2,
    "märz": 3,
    "maerz": 3,
    "april": 4,
    "aprile": 4,
    "mai": 5,
    "juni": 6,
    "juli": 7,
    "august": 8,
    "september": 9,
    "oktober": 10,
    "november": 11,
    "dezember": 12,
}


def slugify(value: str | None) -> str:
    """Return an SEO-friendly slug for the provided value."""

    if not value:
        return ""
    text = unicodedata.normalize("NFC", value.lower())
    for source, target in _GERMAN_TRANSLITERATION.items():
        text = text.replace(source, target)
    text = unicodedata.normalize("NFD", text)
    text = "".join(char for char in text if not unicodedata.combining(char))
    text = _WHITESPACE_PATTERN.sub("-", text)
    text = _SLUG_INVALID_PATTERN.sub("", text)
    text = _HYPHEN_RUN_PATTERN.sub("-", text)
    return text.strip("-")


def dedupe(items: Iterable[T], key: Callable[[T], Hashable]) -> List[T]:
    """Keep the first item seen for every key, preserving input order."""

    seen: set = set()
    result: List[T] = []
    for item in items:
        marker = key(item)
        if marker in seen:
            continue
        seen.add(marker)
        result.append(item)
    return result


def canonical_json(payload: Any) -> str:
    """Serialize a JSON-LD payload with a stable key order."""

    return json.dumps(payload, sort_keys=True, ensure_ascii=False, separators=(",", ":"))


def normalise_path(pathname: str | None) -> str:
    """Strip query strings and trailing slashes; empty paths become ``/``.

    Slash runs collapse to one, so a request path can never read as a
    protocol-relative URL on another host.
    """

    if not pathname or pathname == "/":
        return "/"
    clean = pathname.split("?", 1)[0].split("#", 1)[0]
    clean = _SLASH_RUN_PATTERN.sub("/", clean)
    trimmed = clean.rstrip("/")
    if not trimmed:
        return "/"
    return trimmed if trimmed.startswith("/") else f"/{trimmed}"


def to_absolute_url(path: str | None, base_url: str) -> str:
    """Resolve bare and protocol-relative paths against the site base URL."""

    base = base_url.rstrip("/")
    if not path:
        return base
    if path.startswith("http://") or path.startswith("https://"):
        return path
    if path.startswith("//"):
        return f"https:{path}"
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{base}{path}"


def force_https(url: str) -> str:
    if url.startswith("http://"):
        return "https://" + url[len("http://"):]
    return url


def format_coordinate(value: float) -> str:
    """Render a coordinate with full precision but never fewer than two decimals."""

    text = repr(float(value))
    if "e" in text or "E" in text:
        return f"{value:.6f}"
    whole, _, decimals = text.partition(".")
    if len(decimals) < 2:
        decimals = decimals.ljust(2, "0")
    return f"{whole}.{decimals}"


def parse_german_date(value: str | None) -> str | None:
    """Convert ``"30. August 2024"`` into an ISO-8601 UTC timestamp.

    Returns ``None`` when the value cannot be parsed instead of guessing a date.
    """

    if not value:
        return None
    parts = value.replace(".", " ").split()
    if len(parts) < 3:
        return None
    day_text, month_text, year_text = parts[:3]
    month = GERMAN_MONTHS.get(unicodedata.normalize("NFC", month_text).lower())
    if month is None:
        return None
    try:
        parsed = datetime(int(year_text), month, int(day_text), tzinfo=timezone.utc)
    except ValueError:
        logger.debug("Ignoring unparsable German date %r", value)
        return None
    return parsed.isoformat()


def parse_iso_date(value: str | None) -> str | None:
    """Return an ISO-8601 UTC timestamp for a ``YYYY-MM-DD`` date."""

    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        logger.debug("Ignoring unparsable ISO date %r", value)
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc).isoformat()


def strip_markdown_emphasis(value: str) -> str:
    return value.replace("**", "")


def dump_json(path: Path, data: Any) -> None:
    """Persist JSON data to disk, ensuring the parent folder exists."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
