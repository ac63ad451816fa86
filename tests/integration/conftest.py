"""Fixtures for integration tests against a mocked site."""

from collections.abc import Mapping
from typing import Any, Protocol

import pytest
from aioresponses import aioresponses as aioresponses_cls

from site_smoke.config import SiteConfig
from site_smoke.testing.pages import (
    GENERIC_PAGE_HTML,
    HOMEPAGE_HTML,
    RENTERS_HTML,
    ROBOTS_TXT,
    SITEMAP_XML,
    SITE_URL,
    SPANISH_HTML,
)

IMAGE_BYTES = b"RIFF" + b"\x00" * 20476

SITE_ROUTES: Mapping[str, Mapping[str, Any]] = {
    "/": {"body": HOMEPAGE_HTML},
    "/auto-insurance-goleta/": {"body": GENERIC_PAGE_HTML},
    "/home-insurance-goleta/": {"body": GENERIC_PAGE_HTML},
    "/renters-insurance-goleta/": {"body": RENTERS_HTML},
    "/life-insurance-goleta/": {"body": GENERIC_PAGE_HTML},
    "/business-insurance-goleta/": {"body": GENERIC_PAGE_HTML},
    "/es/": {"body": SPANISH_HTML},
    "/privacy/": {"body": GENERIC_PAGE_HTML},
    "/terms/": {"body": GENERIC_PAGE_HTML},
    "/non-existent-page-xyz/": {"status": 404, "body": "Not found"},
    "/robots.txt": {"body": ROBOTS_TXT, "content_type": "text/plain"},
    "/sitemap-index.xml": {"body": SITEMAP_XML, "content_type": "application/xml"},
    "/images/santabarbara-hero.webp": {
        "body": IMAGE_BYTES,
        "content_type": "image/webp",
        "headers": {"Content-Length": str(len(IMAGE_BYTES))},
    },
    "/images/ucsb-campus.webp": {
        "body": IMAGE_BYTES,
        "content_type": "image/webp",
        "headers": {"Content-Length": str(len(IMAGE_BYTES))},
    },
}

class ServeSiteFn(Protocol):
    """Protocol for the site mocking function."""

    def __call__(
        self, overrides: Mapping[str, Mapping[str, Any]] | None = None
    ) -> None:
        """Register every route, replacing the overridden ones."""

@pytest.fixture
def config() -> SiteConfig:
    """Create configuration pointing at the mocked site."""
    return SiteConfig(local_url=SITE_URL)

@pytest.fixture
def serve_site(aioresponses: aioresponses_cls) -> ServeSiteFn:
    """Return a function that mocks every page of a healthy site."""

    def _serve(overrides: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        routes = {**SITE_ROUTES, **(overrides or {})}
        for path, route in routes.items():
            options = {"status": 200, "content_type": "text/html", **route}
            aioresponses.get(f"{SITE_URL}{path}", repeat=True, **options)

    return _serve
