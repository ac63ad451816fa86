"""Browser-driven diagnostics: screenshots and quick page inspections.

These are one-off helpers for eyeballing a deployment. They are not part of
the smoke suite and do not record results.
"""

import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path

from playwright.async_api import Browser, ConsoleMessage, async_playwright
from playwright.async_api import Error as PlaywrightError

log = logging.getLogger(__name__)

DEFAULT_SELECTORS = ("section", "#quote-form")
SHORT_HTML_LENGTH = 1000


@dataclass(frozen=True, kw_only=True)
class Snapshot:
    """A screenshot taken of a reachable URL."""

    url: str
    status: int
    title: str
    path: Path


@dataclass(frozen=True, kw_only=True)
class PageInspection:
    """What a single page looked like when loaded in the browser."""

    url: str
    status: int | None = None
    final_url: str | None = None
    title: str | None = None
    html_length: int = 0
    selectors: dict[str, bool] = field(default_factory=dict)
    console_messages: Sequence[str] = ()
    page_errors: Sequence[str] = ()
    screenshot: Path | None = None
    error: str | None = None


@asynccontextmanager
async def launch_browser(headless: bool = True) -> AsyncGenerator[Browser, None]:
    """Launch Chromium and make sure it is closed afterwards."""
    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(headless=headless)
        try:
            yield browser
        finally:
            await browser.close()


async def capture_first_reachable(
    browser: Browser,
    urls: Sequence[str],
    path: Path,
    timeout_ms: float = 15000,
) -> Snapshot | None:
    """Screenshot the first URL that answers 200.

    Args:
        browser: Browser to open the page in
        urls: Candidate URLs, tried in order
        path: Where to write the full-page screenshot
        timeout_ms: Navigation timeout per URL

    Returns:
        The snapshot, or None if no candidate answered 200

    """
    page = await browser.new_page()
    try:
        for url in urls:
            log.info("Trying %s", url)
            try:
                response = await page.goto(url, timeout=timeout_ms)
            except PlaywrightError as e:
                log.warning("Navigation to %s failed: %s", url, e.message)
                continue

            status = response.status if response is not None else None
            log.info("Status for %s: %s", url, status)
            if status != 200:
                continue

            await page.screenshot(path=path, full_page=True)
            title = await page.title()
            log.info("Screenshot of %s saved to %s", url, path)
            return Snapshot(url=url, status=status, title=title, path=path)
    finally:
        await page.close()

    return None


async def inspect_page(
    browser: Browser,
    url: str,
    path: Path,
    selectors: Sequence[str] = DEFAULT_SELECTORS,
    timeout_ms: float = 30000,
) -> PageInspection:
    """Load a page until the network is idle and report what was found."""
    page = await browser.new_page()
    console_messages: list[str] = []
    page_errors: list[str] = []

    def on_console(message: ConsoleMessage) -> None:
        console_messages.append(f"{message.type}: {message.text}")

    def on_page_error(error: PlaywrightError) -> None:
        page_errors.append(error.message)

    page.on("console", on_console)
    page.on("pageerror", on_page_error)

    try:
        response = await page.goto(url, wait_until="networkidle", timeout=timeout_ms)
        await page.screenshot(path=path, full_page=True)
        found = {
            selector: await page.query_selector(selector) is not None
            for selector in selectors
        }
        html = await page.content()
        if len(html) < SHORT_HTML_LENGTH:
            log.warning("Suspiciously short page content: %s", html)
        return PageInspection(
            url=url,
            status=response.status if response is not None else None,
            final_url=page.url,
            title=await page.title(),
            html_length=len(html),
            selectors=found,
            console_messages=console_messages,
            page_errors=page_errors,
            screenshot=path,
        )
    except PlaywrightError as e:
        log.error("Inspection of %s failed: %s", url, e.message)
        return PageInspection(
            url=url,
            console_messages=console_messages,
            page_errors=page_errors,
            error=e.message,
        )
    finally:
        await page.close()
