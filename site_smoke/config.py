"""Configuration for the site smoke suite."""

from pydantic import Field, PositiveFloat, PositiveInt

from site_smoke.models.base import Model

LOCAL_URL = "http://localhost:4321"
LIVE_URL = "https://bealer-insurance-site.pages.dev"


class SiteConfig(Model):
    """Target site and thresholds used by the check groups."""

    local_url: str = LOCAL_URL
    live_url: str = LIVE_URL
    live: bool = False
    timeout: PositiveFloat = Field(default=20.0, description="Per-request timeout in seconds")
    max_load_ms: PositiveInt = 3000
    avg_load_ms: PositiveInt = 2000
    max_html_kb: PositiveInt = 200
    # Exclusive bounds, in characters
    title_length: tuple[int, int] = (30, 70)
    description_length: tuple[int, int] = (120, 160)
    image_sample: int = Field(default=3, ge=0, description="Images to fetch from the homepage")

    @property
    def base_url(self) -> str:
        """URL every page path is resolved against."""
        return self.live_url if self.live else self.local_url
