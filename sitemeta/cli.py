"""Command line entrypoints for the sitemeta resolution engine."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from .config import load_settings
from .models import DynamicSeoInput, PageId
from .quality import audit_resolved
from .regions import RegionRegistry
from .resolver import SeoResolver
from .utils import dump_json

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Resolve SEO metadata for site pages")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve_parser = subparsers.add_parser("resolve", help="Print the resolved metadata of one page as JSON")
    resolve_parser.add_argument("page", help="Page identifier, e.g. home, preise or standort")
    resolve_parser.add_argument(
        "--path",
        help="Request path (defaults to / for home and /<page> otherwise)",
    )
    resolve_parser.set_defaults(func=handle_resolve)

    regions_parser = subparsers.add_parser("regions", help="List the service regions and their slugs")
    regions_parser.set_defaults(func=handle_regions)

    check_parser = subparsers.add_parser("check", help="Run the quality gates over every static and location page")
    check_parser.set_defaults(func=handle_check)

    export_parser = subparsers.add_parser("export", help="Write the resolved location pages as JSON files")
    export_parser.add_argument(
        "--output",
        type=Path,
        default=Path("seo"),
        help="Output directory for the exported JSON files",
    )
    export_parser.set_defaults(func=handle_export)

    return parser


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _resolver() -> SeoResolver:
    return SeoResolver(settings=load_settings(), registry=RegionRegistry())


def _default_path(page: PageId) -> str:
    return "/" if page is PageId.HOME else f"/{page.value}"


def handle_resolve(args: argparse.Namespace) -> None:
    page = PageId.coerce(args.page)
    if page is None:
        raise SystemExit(f"Unknown page '{args.page}'")
    path = args.path or _default_path(page)
    if page is PageId.STANDORT and not args.path:
        raise SystemExit("--path is required for standort pages, e.g. /standort/berlin")
    resolved = _resolver().resolve(DynamicSeoInput(page=page, pathname=path))
    print(json.dumps(resolved.to_dict(), indent=2, ensure_ascii=False))


def _truncate(value: object, width: int) -> str:
    text = str(value or "")
    if len(text) <= width:
        return text.ljust(width)
    if width <= 1:
        return text[:width]
    return (text[: width - 1].rstrip() + "…").ljust(width)


def handle_regions(args: argparse.Namespace) -> None:
    registry = RegionRegistry()
    header = f"{_truncate('Slug', 20)} {_truncate('City', 20)} {_truncate('State', 22)} Country"
    print(header)
    print("-" * len(header))
    for region in registry:
        print(
            f"{_truncate(registry.region_slug(region), 20)} "
            f"{_truncate(region.city, 20)} "
            f"{_truncate(region.state, 22)} {registry.country_code(region)}"
        )


def handle_check(args: argparse.Namespace) -> None:
    resolver = _resolver()
    errors: list[str] = []
    pages = [PageId.HOME, *(page for page in resolver.page_layers if page is not PageId.HOME)]
    checked = 0
    for page in pages:
        resolved = resolver.resolve(DynamicSeoInput(page=page, pathname=_default_path(page)))
        errors.extend(f"{page.value}: {problem}" for problem in audit_resolved(resolved))
        checked += 1
    for region in resolver.registry:
        slug = resolver.registry.region_slug(region)
        if resolver.registry.by_slug(slug) is not region:
            errors.append(f"Region {region.city} does not round-trip through slug {slug}")
        resolved = resolver.resolve(DynamicSeoInput(page=PageId.STANDORT, pathname=f"/standort/{slug}"))
        errors.extend(f"standort/{slug}: {problem}" for problem in audit_resolved(resolved))
        checked += 1
    if errors:
        for error in errors:
            LOGGER.error(error)
        raise SystemExit(1)
    LOGGER.info("Check passed: %s pages resolved", checked)


def handle_export(args: argparse.Namespace) -> None:
    if args.output.exists() and not args.output.is_dir():
        raise SystemExit(f"--output must be a directory: {args.output}")
    resolver = _resolver()
    resolver.warm_locations()
    written = 0
    for region in resolver.registry:
        slug = resolver.registry.region_slug(region)
        resolved = resolver.resolve(DynamicSeoInput(page=PageId.STANDORT, pathname=f"/standort/{slug}"))
        dump_json(args.output / "standort" / f"{slug}.json", resolved.to_dict())
        written += 1
    LOGGER.info("Exported %s location pages to %s", written, args.output)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()
    args.func(args)


if __name__ == "__main__":
    main()
