"""Quality gates to keep resolved metadata within acceptable bounds."""
from __future__ import annotations

from typing import Callable, Hashable, Iterable, List

from .models import AdditionalMetaTag, AlternateHref, ResolvedSeo
from .utils import canonical_json

MAX_TITLE_LENGTH = 80
MIN_DESCRIPTION_LENGTH = 50
MAX_DESCRIPTION_LENGTH = 320


def _duplicates(items: Iterable, key: Callable[[object], Hashable]) -> List[Hashable]:
    seen = set()
    repeated: List[Hashable] = []
    for item in items:
        marker = key(item)
        if marker in seen and marker not in repeated:
            repeated.append(marker)
        seen.add(marker)
    return repeated


def audit_resolved(resolved: ResolvedSeo) -> List[str]:
    """Return a list of human readable problems; empty when the record is clean."""

    problems: List[str] = []
    title = resolved.title.strip()
    if not title:
        problems.append("Title is empty")
    elif len(title) > MAX_TITLE_LENGTH:
        problems.append(f"Title is {len(title)} characters long (max {MAX_TITLE_LENGTH})")
    description = resolved.description.strip()
    if not MIN_DESCRIPTION_LENGTH <= len(description) <= MAX_DESCRIPTION_LENGTH:
        problems.append(
            f"Description is {len(description)} characters long "
            f"(expected {MIN_DESCRIPTION_LENGTH}-{MAX_DESCRIPTION_LENGTH})"
        )
    if not resolved.canonical.startswith("https://"):
        problems.append(f"Canonical URL is not absolute https: {resolved.canonical}")
    if resolved.og.url != resolved.canonical:
        problems.append("Open Graph URL differs from the canonical URL")
    if resolved.url != resolved.canonical:
        problems.append("Record URL differs from the canonical URL")

    for label, items, key in (
        ("keyword", resolved.keywords, str.lower),
        ("alternate", resolved.alternates, AlternateHref.dedupe_key),
        ("meta tag", resolved.additional_meta, AdditionalMetaTag.dedupe_key),
        ("structured data entry", resolved.structured_data, canonical_json),
    ):
        repeated = _duplicates(items, key)
        if repeated:
            problems.append(f"Duplicate {label}: {len(repeated)} repeated key(s)")

    geo = resolved.geo
    if geo.latitude is not None and geo.longitude is not None and not geo.position:
        problems.append("Geo position missing although coordinates are set")
    return problems


def passes_quality(resolved: ResolvedSeo) -> bool:
    """Return True when the resolved record meets every guardrail."""

    return not audit_resolved(resolved)
