"""Sequential test harness for running check groups against a site."""

import logging
import time
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field

from site_smoke.config import SiteConfig
from site_smoke.fetcher import NetworkError, PageFetcher
from site_smoke.models.fetch import FetchOutcome
from site_smoke.models.result import ResultSet, RunState, Status, TestResult
from site_smoke.reporter import ConsoleReporter

log = logging.getLogger(__name__)

REACHABILITY_PATH = "/"


class ReachabilityError(Exception):
    """Raised when the target site does not answer the initial probe."""

    def __init__(self, base_url: str, reason: str) -> None:
        super().__init__(f"Site not reachable at {base_url}: {reason}")
        self.base_url = base_url
        self.reason = reason


@dataclass(frozen=True, kw_only=True)
class CheckContext:
    """What a check group gets to work with during a run."""

    fetcher: PageFetcher
    results: ResultSet
    config: SiteConfig

    def record(
        self, status: Status, name: str, details: str | None = None
    ) -> TestResult:
        """Record a result on the run's result set."""
        return self.results.record(status, name, details)

    async def fetch_page(self, path: str) -> FetchOutcome:
        """Fetch a path on the target site."""
        return await self.fetcher.fetch_page(path)

    async def fetch_url(self, url: str) -> FetchOutcome:
        """Fetch an absolute URL."""
        return await self.fetcher.fetch_url(url)


type CheckFn = Callable[[CheckContext], Awaitable[None]]


@dataclass(frozen=True, kw_only=True)
class TestGroup:
    """Named bundle of related assertions."""

    __test__ = False

    name: str
    title: str
    check: CheckFn


@dataclass(frozen=True, kw_only=True)
class TestHarness:
    """Runs check groups in order and aggregates their results."""

    __test__ = False

    fetcher: PageFetcher
    config: SiteConfig
    reporter: ConsoleReporter = field(default_factory=ConsoleReporter)

    async def run(self, groups: Sequence[TestGroup]) -> ResultSet:
        """Probe the site, run every group in order, then print the summary.

        Args:
            groups: Check groups, executed strictly in the given order

        Returns:
            The result set of the run

        Raises:
            ReachabilityError: If the initial probe fails; no group runs

        """
        start = time.monotonic()
        results = ResultSet(on_record=self.reporter.result)

        self.reporter.banner(self.config.base_url)
        await self._check_reachability(results)

        results.state = RunState.RUNNING
        context = CheckContext(
            fetcher=self.fetcher, results=results, config=self.config
        )
        for group in groups:
            await self._run_group(group, context)

        results.duration = time.monotonic() - start
        results.state = RunState.SUMMARIZED
        log.info(
            "Run completed: passed=%d failed=%d skipped=%d duration=%.2fs",
            results.passed,
            results.failed,
            results.skipped,
            results.duration,
        )
        self.reporter.summary(results)
        return results

    async def _check_reachability(self, results: ResultSet) -> None:
        """Fetch the base path and abort the run unless it answers 2xx."""
        results.state = RunState.REACHABILITY_CHECK
        base_url = self.config.base_url
        log.info("Checking that %s is reachable", base_url)

        try:
            outcome = await self.fetcher.fetch_page(REACHABILITY_PATH)
        except NetworkError as e:
            reason = e.message
        else:
            if outcome.ok:
                return
            reason = f"Status: {outcome.status}"

        results.state = RunState.ABORTED
        log.error("Reachability check failed for %s: %s", base_url, reason)
        self.reporter.aborted(base_url, reason)
        raise ReachabilityError(base_url, reason)

    async def _run_group(self, group: TestGroup, context: CheckContext) -> None:
        """Run one group, recording a request failure that escapes it."""
        log.info("Running group %s", group.name)
        self.reporter.section(group.title)
        try:
            await group.check(context)
        except NetworkError as e:
            log.warning("Group %s aborted by request failure: %s", group.name, e)
            context.record("fail", f"{group.name}: request failed", e.message)
        self.reporter.end_section()
