"""Assertion helpers for page content.

Each helper records exactly one result on the given result set and returns
whether it passed. None of them touch the network.
"""

import re
from collections.abc import Sequence
from typing import Literal

from site_smoke.models.result import ResultSet

EXCERPT_LENGTH = 40


def assert_contains(
    results: ResultSet,
    name: str,
    body: str,
    substrings: str | Sequence[str],
    *,
    require: Literal["all", "any"] = "all",
) -> bool:
    """Check that the body contains all (or any) of the substrings."""
    needles = [substrings] if isinstance(substrings, str) else list(substrings)
    found = [needle for needle in needles if needle in body]
    missing = [needle for needle in needles if needle not in body]

    if require == "all":
        passed = not missing
    else:
        passed = bool(found)

    details = None
    if require == "all" and len(needles) > 1:
        details = f"{len(found)}/{len(needles)}"
        if missing:
            details += f" (missing: {', '.join(missing)})"
    elif not passed and len(needles) > 1:
        details = f"none of: {', '.join(needles)}"

    results.record("pass" if passed else "fail", name, details)
    return passed


def assert_absent(
    results: ResultSet,
    name: str,
    body: str,
    substrings: str | Sequence[str],
) -> bool:
    """Check that none of the substrings occur in the body, ignoring case."""
    needles = [substrings] if isinstance(substrings, str) else list(substrings)
    lowered = body.lower()
    present = [needle for needle in needles if needle.lower() in lowered]

    if present:
        results.record("fail", name, f"found: {', '.join(present)}")
        return False
    results.record("pass", name)
    return True


def assert_matches(
    results: ResultSet,
    name: str,
    body: str,
    pattern: str | re.Pattern[str],
    *,
    length: tuple[int, int] | None = None,
) -> bool:
    """Check that the pattern matches the body.

    With ``length`` the first capture group must also be strictly longer than
    the lower bound and strictly shorter than the upper bound.
    """
    match = re.search(pattern, body)
    if match is None:
        results.record("fail", name, "missing")
        return False

    captured = match.group(1) if match.groups() else match.group(0)

    if length is not None:
        low, high = length
        passed = low < len(captured) < high
        results.record("pass" if passed else "fail", name, f"{len(captured)} chars")
        return passed

    excerpt = captured.strip()
    if len(excerpt) > EXCERPT_LENGTH:
        excerpt = excerpt[:EXCERPT_LENGTH] + "..."
    results.record("pass", name, excerpt)
    return True


def assert_range(
    results: ResultSet,
    name: str,
    value: float,
    *,
    minimum: float | None = None,
    maximum: float | None = None,
    unit: str = "",
) -> bool:
    """Check that a measured value lies strictly within the given bounds."""
    passed = (minimum is None or value > minimum) and (
        maximum is None or value < maximum
    )
    results.record("pass" if passed else "fail", name, f"{value}{unit}")
    return passed
