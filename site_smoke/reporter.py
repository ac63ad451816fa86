"""Console output for a harness run."""

import sys
from dataclasses import dataclass, field
from typing import TextIO

from site_smoke.models.result import ResultSet, TestResult

STATUS_SYMBOLS = {
    "pass": "✅",
    "fail": "❌",
    "skip": "⏭️",
    "info": "ℹ️",
}

RULE_WIDTH = 60
SECTION_WIDTH = 40
REMEDIATION = "If testing locally, make sure dev server is running: npm run dev"


def format_result(result: TestResult) -> str:
    """Render one result as a glyph line."""
    symbol = STATUS_SYMBOLS.get(result.status, "•")
    line = f"{symbol} {result.name}"
    if result.details:
        line += f" - {result.details}"
    return line


@dataclass(kw_only=True)
class ConsoleReporter:
    """Writes section headers, result lines and the final summary."""

    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def _write(self, text: str = "") -> None:
        print(text, file=self.stream)

    def banner(self, base_url: str) -> None:
        """Announce the target of the run."""
        self._write()
        self._write("🧪 Site Smoke Test Suite")
        self._write(f"📍 Testing: {base_url}")
        self._write()
        self._write("=" * RULE_WIDTH)
        self._write()

    def section(self, title: str) -> None:
        """Print a group header."""
        self._write(title)
        self._write("-" * SECTION_WIDTH)

    def end_section(self) -> None:
        """Separate groups with a blank line."""
        self._write()

    def result(self, result: TestResult) -> None:
        """Print a single result line."""
        self._write(format_result(result))

    def aborted(self, base_url: str, reason: str) -> None:
        """Explain why the run could not start."""
        self._write(f"❌ Site not reachable at {base_url}")
        self._write(f"   Error: {reason}")
        self._write(f"   {REMEDIATION}")
        self._write()

    def summary(self, results: ResultSet) -> None:
        """Print counts, duration, pass rate and the failed test list."""
        self._write("=" * RULE_WIDTH)
        self._write()
        self._write("📊 TEST SUMMARY")
        self._write()
        self._write(f"   ✅ Passed:  {results.passed}")
        self._write(f"   ❌ Failed:  {results.failed}")
        self._write(f"   ⏭️  Skipped: {results.skipped}")
        self._write(f"   ⏱️  Duration: {results.duration:.2f}s")
        self._write()

        rate = f"{results.pass_rate:.1f}% pass rate"
        if results.failed == 0:
            self._write(f"🎉 All tests passed! ({rate})")
            self._write()
            return

        self._write(f"⚠️  {results.failed} test(s) failed ({rate})")
        self._write()
        self._write("Failed tests:")
        for failure in results.failures:
            line = f"   • {failure.name}"
            if failure.details:
                line += f": {failure.details}"
            self._write(line)
        self._write()
