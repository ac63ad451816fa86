"""Tests for the test harness."""

import io
from unittest.mock import AsyncMock, Mock

import pytest

from site_smoke.assertions import assert_contains
from site_smoke.config import SiteConfig
from site_smoke.fetcher import NetworkError, PageFetcher
from site_smoke.harness import CheckContext, ReachabilityError, TestGroup, TestHarness
from site_smoke.models.result import RunState
from site_smoke.reporter import ConsoleReporter
from site_smoke.testing.factories import FetchOutcomeFactory


@pytest.fixture
def fetcher_mock() -> Mock:
    """Create mock fetcher answering every page with Hello World."""
    fetcher = Mock(spec=PageFetcher)
    fetcher.fetch_page.return_value = FetchOutcomeFactory.build(body="Hello World")
    return fetcher


@pytest.fixture
def stream() -> io.StringIO:
    """Capture console output."""
    return io.StringIO()


@pytest.fixture
def harness(fetcher_mock: Mock, stream: io.StringIO) -> TestHarness:
    """Create harness with mock fetcher."""
    return TestHarness(
        fetcher=fetcher_mock,
        config=SiteConfig(),
        reporter=ConsoleReporter(stream=stream),
    )


async def check_hello(ctx: CheckContext) -> None:
    """Check the homepage greets the visitor."""
    page = await ctx.fetch_page("/")
    assert_contains(ctx.results, "Greeting present", page.body, "Hello")


def group(name: str, check: AsyncMock | None = None) -> TestGroup:
    """Build a group around a check function."""
    return TestGroup(name=name, title=f"{name.upper()} TESTS", check=check or AsyncMock())


class TestReachability:
    """Tests for the reachability gate."""

    async def test_aborts_on_server_error(
        self, harness: TestHarness, fetcher_mock: Mock, stream: io.StringIO
    ) -> None:
        """A 500 on the initial probe aborts before any group runs."""
        fetcher_mock.fetch_page.return_value = FetchOutcomeFactory.build(status=500)
        check = AsyncMock()

        with pytest.raises(ReachabilityError) as exc_info:
            await harness.run([group("Homepage", check)])

        assert exc_info.value.reason == "Status: 500"
        assert exc_info.value.base_url == "http://localhost:4321"
        check.assert_not_called()
        fetcher_mock.fetch_page.assert_called_once_with("/")
        assert "Site not reachable at http://localhost:4321" in stream.getvalue()
        assert "TEST SUMMARY" not in stream.getvalue()

    async def test_aborts_on_network_error(
        self, harness: TestHarness, fetcher_mock: Mock, stream: io.StringIO
    ) -> None:
        """A connection failure on the initial probe aborts the run."""
        fetcher_mock.fetch_page.side_effect = NetworkError(
            "http://localhost:4321/", "Connection refused"
        )
        check = AsyncMock()

        with pytest.raises(ReachabilityError, match="Connection refused"):
            await harness.run([group("Homepage", check)])

        check.assert_not_called()
        assert "Error: Connection refused" in stream.getvalue()
        assert "npm run dev" in stream.getvalue()


class TestRun:
    """Tests for running groups."""

    async def test_records_single_pass_for_hello(self, harness: TestHarness) -> None:
        """A group checking 'Hello' in 'Hello World' records exactly one pass."""
        results = await harness.run(
            [TestGroup(name="Greeting", title="GREETING TESTS", check=check_hello)]
        )

        assert len(results.results) == 1
        assert results.results[0].status == "pass"
        assert results.results[0].name == "Greeting present"
        assert results.state is RunState.SUMMARIZED
        assert results.exit_code == 0

    async def test_runs_groups_in_order(self, harness: TestHarness) -> None:
        """Groups execute strictly in the order supplied."""
        calls: list[str] = []

        def recording(name: str) -> TestGroup:
            async def check(ctx: CheckContext) -> None:
                calls.append(name)
                ctx.record("pass", name)

            return TestGroup(name=name, title=name, check=check)

        results = await harness.run([recording("b"), recording("a"), recording("c")])

        assert calls == ["b", "a", "c"]
        assert [r.name for r in results.results] == ["b", "a", "c"]

    async def test_passes_same_context_to_every_group(
        self, harness: TestHarness, fetcher_mock: Mock
    ) -> None:
        """Every group shares the run's result set and fetcher."""
        first = AsyncMock()
        second = AsyncMock()

        results = await harness.run([group("one", first), group("two", second)])

        ctx_one = first.call_args.args[0]
        ctx_two = second.call_args.args[0]
        assert ctx_one is ctx_two
        assert ctx_one.results is results
        assert ctx_one.fetcher is fetcher_mock

    async def test_network_error_in_group_does_not_stop_run(
        self, harness: TestHarness, fetcher_mock: Mock
    ) -> None:
        """A request failure escaping a group is recorded and the next group runs."""
        fetcher_mock.fetch_page.side_effect = [
            FetchOutcomeFactory.build(),
            NetworkError("http://localhost:4321/es/", "Request timed out after 20.0s"),
        ]

        async def timing_out(ctx: CheckContext) -> None:
            ctx.record("pass", "before the timeout")
            await ctx.fetch_page("/es/")
            ctx.record("pass", "never reached")

        after = AsyncMock()

        results = await harness.run(
            [
                TestGroup(name="Spanish page", title="SPANISH", check=timing_out),
                group("Later", after),
            ]
        )

        after.assert_awaited_once()
        assert [(r.status, r.name) for r in results.results] == [
            ("pass", "before the timeout"),
            ("fail", "Spanish page: request failed"),
        ]
        assert results.results[1].details == "Request timed out after 20.0s"
        assert results.exit_code == 1

    async def test_unexpected_errors_propagate(self, harness: TestHarness) -> None:
        """Errors other than request failures escape the harness."""
        broken = AsyncMock(side_effect=ValueError("bad regex"))

        with pytest.raises(ValueError, match="bad regex"):
            await harness.run([group("Broken", broken)])

    async def test_deterministic_across_runs(self, harness: TestHarness) -> None:
        """Two runs against the same content record identical results."""

        async def mixed(ctx: CheckContext) -> None:
            page = await ctx.fetch_page("/")
            assert_contains(ctx.results, "Hello", page.body, "Hello")
            assert_contains(ctx.results, "Missing", page.body, "Absent")
            ctx.record("skip", "Skipped")

        groups = [TestGroup(name="Mixed", title="MIXED", check=mixed)]

        first = await harness.run(groups)
        second = await harness.run(groups)

        assert [(r.status, r.name) for r in first.results] == [
            (r.status, r.name) for r in second.results
        ]
        assert first is not second

    async def test_counts_and_summary(
        self, harness: TestHarness, stream: io.StringIO
    ) -> None:
        """Counts add up and the summary lists the failures."""

        async def mixed(ctx: CheckContext) -> None:
            ctx.record("pass", "a")
            ctx.record("fail", "b", "Status: 404")
            ctx.record("skip", "c")
            ctx.record("info", "d")

        results = await harness.run([TestGroup(name="Mixed", title="MIXED", check=mixed)])

        assert results.total == results.passed + results.failed + results.skipped == 3
        assert 0 <= results.pass_rate <= 100
        assert results.duration >= 0
        output = stream.getvalue()
        assert "MIXED" in output
        assert "❌ b - Status: 404" in output
        assert "• b: Status: 404" in output

    async def test_empty_group_list(self, harness: TestHarness) -> None:
        """With no groups the run still summarizes with a zero pass rate."""
        results = await harness.run([])

        assert results.results == ()
        assert results.pass_rate == 0.0
        assert results.exit_code == 0
