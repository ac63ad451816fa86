"""Models for check results and their aggregation over a run."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Literal

type Status = Literal["pass", "fail", "skip", "info"]


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Outcome of a single named assertion."""

    __test__ = False

    status: Status
    name: str
    details: str | None = None


class RunState(StrEnum):
    """Lifecycle of one harness run."""

    NOT_STARTED = "not_started"
    REACHABILITY_CHECK = "reachability_check"
    ABORTED = "aborted"
    RUNNING = "running"
    SUMMARIZED = "summarized"


@dataclass(kw_only=True)
class ResultSet:
    """Ordered results and counters for one run.

    Informational results are kept in order but do not count towards
    passed, failed or skipped.
    """

    passed: int = 0
    failed: int = 0
    skipped: int = 0
    state: RunState = RunState.NOT_STARTED
    duration: float = 0.0
    on_record: Callable[[TestResult], None] | None = field(default=None, repr=False)
    _results: list[TestResult] = field(default_factory=list, repr=False)

    @property
    def results(self) -> Sequence[TestResult]:
        """All recorded results in execution order."""
        return tuple(self._results)

    @property
    def total(self) -> int:
        """Number of counted results."""
        return self.passed + self.failed + self.skipped

    @property
    def pass_rate(self) -> float:
        """Percentage of passed over passed and failed, 0 when nothing ran."""
        decided = self.passed + self.failed
        if decided == 0:
            return 0.0
        return self.passed / decided * 100

    @property
    def failures(self) -> Sequence[TestResult]:
        """Failed results in execution order."""
        return tuple(r for r in self._results if r.status == "fail")

    @property
    def exit_code(self) -> int:
        """Process exit status for this run."""
        if self.state is RunState.ABORTED or self.failed > 0:
            return 1
        return 0

    def record(self, status: Status, name: str, details: str | None = None) -> TestResult:
        """Append a result and bump the matching counter."""
        result = TestResult(status=status, name=name, details=details or None)
        if status == "pass":
            self.passed += 1
        elif status == "fail":
            self.failed += 1
        elif status == "skip":
            self.skipped += 1
        self._results.append(result)
        if self.on_record is not None:
            self.on_record(result)
        return result
