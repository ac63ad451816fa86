"""CLI entry points for the site smoke suite and browser diagnostics."""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from site_smoke.browser import (
    capture_first_reachable,
    inspect_page,
    launch_browser,
)
from site_smoke.config import SiteConfig
from site_smoke.fetcher import PageFetcher
from site_smoke.groups import DEFAULT_GROUPS
from site_smoke.harness import ReachabilityError, TestGroup, TestHarness
from site_smoke.reporter import ConsoleReporter

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging() -> None:
    """Send diagnostic logs to stderr, leaving stdout for the report."""
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, stream=sys.stderr)


async def run(
    config: SiteConfig,
    groups: Sequence[TestGroup] = DEFAULT_GROUPS,
    reporter: ConsoleReporter | None = None,
) -> int:
    """Run the smoke suite and return exit code."""
    log = logging.getLogger("site_smoke")
    log.info("Running %d group(s) against %s", len(groups), config.base_url)

    try:
        async with PageFetcher.from_config(config) as fetcher:
            harness = TestHarness(
                fetcher=fetcher,
                config=config,
                reporter=reporter or ConsoleReporter(),
            )
            results = await harness.run(groups)
    except ReachabilityError:
        return 1
    except Exception:
        log.exception("Test suite error")
        return 1

    return results.exit_code


async def snapshot(
    urls: Sequence[str],
    output: Path,
    *,
    inspect: bool = False,
    headless: bool = True,
) -> int:
    """Take a browser snapshot and return exit code."""
    log = logging.getLogger("site_smoke")

    async with launch_browser(headless=headless) as browser:
        if inspect:
            inspection = await inspect_page(browser, urls[0], output)
            if inspection.error:
                return 1
            log.info(
                "Status: %s, URL: %s, title: %s, HTML length: %d",
                inspection.status,
                inspection.final_url,
                inspection.title,
                inspection.html_length,
            )
            for selector, found in inspection.selectors.items():
                log.info("Selector %s found: %s", selector, found)
            for message in inspection.console_messages:
                log.info("Console: %s", message)
            for error in inspection.page_errors:
                log.warning("Page error: %s", error)
            return 0

        captured = await capture_first_reachable(browser, urls, output)

    if captured is None:
        log.error("None of the URLs answered 200: %s", ", ".join(urls))
        return 1

    log.info("Title: %s", captured.title)
    return 0


def main() -> None:
    """CLI entry point for the smoke suite."""
    parser = argparse.ArgumentParser(
        description="Run smoke and content checks against the site"
    )
    parser.add_argument(
        "--live",
        action="store_true",
        help="Test the deployed site instead of the local dev server",
    )

    args = parser.parse_args()
    configure_logging()

    exit_code = asyncio.run(run(SiteConfig(live=args.live)))
    sys.exit(exit_code)


def snapshot_main() -> None:
    """CLI entry point for browser snapshots."""
    parser = argparse.ArgumentParser(
        description="Screenshot the first reachable URL, or inspect one page"
    )
    parser.add_argument("urls", nargs="+", help="Candidate URLs, tried in order")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("live-screenshot.png"),
        help="Screenshot path",
    )
    parser.add_argument(
        "--inspect",
        action="store_true",
        help="Wait for network idle and report console output and key elements",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window",
    )

    args = parser.parse_args()
    configure_logging()

    exit_code = asyncio.run(
        snapshot(
            urls=args.urls,
            output=args.output,
            inspect=args.inspect,
            headless=not args.headed,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
