"""Models for captured page requests."""

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class FetchOutcome:
    """Captured result of one page request.

    Produced fresh for every request and consumed by the assertions that
    check the page.
    """

    status: int
    body: str
    elapsed_ms: int
    final_url: str
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the response carried a 2xx status."""
        return 200 <= self.status < 300

    @property
    def size_kb(self) -> int:
        """Body size in whole kilobytes."""
        return round(len(self.body) / 1024)

    @property
    def content_length(self) -> int | None:
        """Declared Content-Length, if the server sent a usable one."""
        for key, value in self.headers.items():
            if key.lower() == "content-length":
                try:
                    return int(value)
                except ValueError:
                    return None
        return None
