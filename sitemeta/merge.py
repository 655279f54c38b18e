"""Layer merging: later scalars win, collections accumulate."""
from __future__ import annotations

from dataclasses import fields, replace
from typing import Iterable, Optional, Tuple, TypeVar

from .models import AdditionalMetaTag, AlternateHref, SeoOverrideLayer
from .utils import canonical_json, dedupe

N = TypeVar("N")

SCALAR_FIELDS = ("title", "description", "canonical", "robots")
NESTED_FIELDS = ("og", "twitter", "geo")


def dedupe_keywords(keywords: Iterable[str]) -> Tuple[str, ...]:
    return tuple(dedupe(keywords, str.lower))


def dedupe_alternates(alternates: Iterable[AlternateHref]) -> Tuple[AlternateHref, ...]:
    return tuple(dedupe(alternates, AlternateHref.dedupe_key))


def dedupe_meta(tags: Iterable[AdditionalMetaTag]) -> Tuple[AdditionalMetaTag, ...]:
    return tuple(dedupe(tags, AdditionalMetaTag.dedupe_key))


def dedupe_structured(entries: Iterable[dict]) -> Tuple[dict, ...]:
    return tuple(dedupe(entries, canonical_json))


def merge_nested(base: Optional[N], override: Optional[N]) -> Optional[N]:
    """Field-wise overlay of two nested blocks; ``None`` fields never overwrite."""

    if override is None:
        return base
    if base is None:
        return override
    changes = {
        field.name: getattr(override, field.name)
        for field in fields(override)
        if getattr(override, field.name) is not None
    }
    return replace(base, **changes)


def _merge_pair(acc: SeoOverrideLayer, override: SeoOverrideLayer) -> SeoOverrideLayer:
    changes = {}
    for name in SCALAR_FIELDS:
        value = getattr(override, name)
        if value is not None:
            changes[name] = value
    for name in NESTED_FIELDS:
        changes[name] = merge_nested(getattr(acc, name), getattr(override, name))
    changes["keywords"] = dedupe_keywords(acc.keywords + override.keywords)
    changes["alternates"] = dedupe_alternates(acc.alternates + override.alternates)
    changes["additional_meta"] = dedupe_meta(acc.additional_meta + override.additional_meta)
    changes["structured_data"] = dedupe_structured(acc.structured_data + override.structured_data)
    return replace(acc, **changes)


def merge_layers(base: SeoOverrideLayer, *overrides: Optional[SeoOverrideLayer]) -> SeoOverrideLayer:
    """Fold ``overrides`` onto ``base`` from left to right.

    ``None`` overrides are skipped. The inputs are frozen dataclasses and are
    never modified; every stage produces a new layer.
    """

    merged = base
    for override in overrides:
        if override is None:
            continue
        merged = _merge_pair(merged, override)
    return merged
