"""Configuration helpers for the sitemeta resolution engine."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace

DEFAULT_BASE_URL = "https://www.zoe-solar.de"
DEFAULT_SHARE_IMAGE = (
    "https://images.pexels.com/photos/159397/solar-panel-array-power-sun-electricity-159397.jpeg"
    "?auto=compress&cs=tinysrgb&w=1200&h=630&fit=crop"
)


@dataclass(frozen=True)
class SiteSettings:
    """Global site level constants every resolved record falls back to."""

    site_name: str = "ZOE Solar"
    base_url: str = DEFAULT_BASE_URL
    organization_name: str = "ZOE Solar GmbH"
    organization_logo: str = "https://www.zoe-solar.de/assets/logo.png"
    telephone: str = "+49-30-123-456-78"
    street_address: str = "Musterstraße 123"
    price_range: str = "€€€"
    default_share_image: str = DEFAULT_SHARE_IMAGE
    share_image_width: int = 1200
    share_image_height: int = 630
    share_image_type: str = "image/jpeg"
    locale: str = "de_DE"
    language: str = "de-DE"
    twitter_site: str = "@zoesolar"
    default_robots: str = "index,follow,max-snippet:-1,max-image-preview:large,max-video-preview:-1"
    hq_region: str = "DE-BE"
    hq_placename: str = "Berlin"
    hq_postal_code: str = "10115"
    hq_latitude: float = 52.520008
    hq_longitude: float = 13.404954

    def url(self, path: str = "") -> str:
        """Join ``path`` onto the base URL."""

        if not path:
            return self.base_url
        if not path.startswith("/") and not path.startswith("#"):
            path = f"/{path}"
        return f"{self.base_url}{path}"


def default_settings() -> SiteSettings:
    return SiteSettings()


def _env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip()
    return value or default


def load_settings(base: SiteSettings | None = None) -> SiteSettings:
    """Overlay ``SITE_*`` environment variables onto the default settings."""

    settings = base or default_settings()
    base_url = (_env("SITE_BASE_URL", settings.base_url) or settings.base_url).rstrip("/")
    return replace(
        settings,
        base_url=base_url,
        site_name=_env("SITE_NAME", settings.site_name) or settings.site_name,
        organization_name=_env("SITE_ORGANIZATION", settings.organization_name) or settings.organization_name,
        twitter_site=_env("SITE_TWITTER", settings.twitter_site) or settings.twitter_site,
        locale=_env("SITE_LOCALE", settings.locale) or settings.locale,
        default_share_image=_env("SITE_SHARE_IMAGE", settings.default_share_image) or settings.default_share_image,
        default_robots=_env("SITE_ROBOTS", settings.default_robots) or settings.default_robots,
        telephone=_env("SITE_TELEPHONE", settings.telephone) or settings.telephone,
    )
