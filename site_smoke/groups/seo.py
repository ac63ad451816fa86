"""SEO, compliance and image checks."""

import re

from site_smoke.assertions import assert_absent, assert_contains, assert_matches
from site_smoke.fetcher import NetworkError
from site_smoke.harness import CheckContext

TITLE_PATTERN = re.compile(r"<title>([^<]+)</title>")
DESCRIPTION_PATTERN = re.compile(
    r'<meta[^>]*name="description"[^>]*content="([^"]+)"'
)
H1_PATTERN = re.compile(r"<h1[^>]*>([^<]+)</h1>")
IMG_WITHOUT_ALT_PATTERN = re.compile(r"<img(?![^>]*alt=)[^>]*>")
IMAGE_SRC_PATTERN = re.compile(r'src="([^"]*\.(?:webp|jpg|png)[^"]*)"')

COMPLIANCE_PATHS = ("/", "/auto-insurance-goleta/", "/renters-insurance-goleta/")
AGENT_NAMES = ("bealer", "derrick")
CARRIER_NAMES = ("allstate",)
DISCLAIMERS = ("not an insurance company", "educational purposes")


def page_label(path: str) -> str:
    """Short label for a path, as used in result names."""
    if path == "/":
        return "Homepage"
    return path.replace("/", "")


async def check_seo(ctx: CheckContext) -> None:
    """Metadata, structured data and crawler files."""
    html = (await ctx.fetch_page("/")).body

    assert_matches(
        ctx.results,
        "Title tag optimal length",
        html,
        TITLE_PATTERN,
        length=ctx.config.title_length,
    )
    assert_matches(
        ctx.results,
        "Meta description optimal length",
        html,
        DESCRIPTION_PATTERN,
        length=ctx.config.description_length,
    )
    assert_contains(
        ctx.results, "Open Graph tags present", html, ("og:title", "og:description")
    )
    assert_contains(ctx.results, "Canonical URL set", html, 'rel="canonical"')
    assert_contains(
        ctx.results,
        "Schema.org markup present",
        html,
        ("schema.org", "application/ld+json"),
        require="any",
    )
    assert_matches(ctx.results, "H1 tag present", html, H1_PATTERN)

    missing_alt = len(IMG_WITHOUT_ALT_PATTERN.findall(html))
    if missing_alt == 0:
        ctx.record("pass", "All images have alt text")
    else:
        ctx.record("fail", "All images have alt text", f"{missing_alt} missing")

    try:
        robots = await ctx.fetch_page("/robots.txt")
    except NetworkError as e:
        ctx.record("fail", "robots.txt accessible", e.message)
    else:
        if robots.ok:
            ctx.record("pass", "robots.txt accessible")
        else:
            ctx.record("fail", "robots.txt accessible", f"Status: {robots.status}")

    try:
        sitemap = await ctx.fetch_page("/sitemap-index.xml")
    except NetworkError as e:
        ctx.record("fail", "Sitemap accessible", e.message)
    else:
        if sitemap.ok and "sitemap" in sitemap.body:
            ctx.record("pass", "Sitemap accessible")
        else:
            ctx.record("fail", "Sitemap accessible", f"Status: {sitemap.status}")


async def check_compliance(ctx: CheckContext) -> None:
    """No agent or carrier names, and a disclaimer on the homepage."""
    for path in COMPLIANCE_PATHS:
        html = (await ctx.fetch_page(path)).body
        label = page_label(path)
        assert_absent(ctx.results, f"{label}: No agent name displayed", html, AGENT_NAMES)
        assert_absent(ctx.results, f"{label}: No carrier branding", html, CARRIER_NAMES)

    home = (await ctx.fetch_page("/")).body
    assert_contains(
        ctx.results,
        "Compliance disclaimer present",
        home,
        DISCLAIMERS,
        require="any",
    )


async def check_images(ctx: CheckContext) -> None:
    """Image formats, loading hints and a sample of image downloads."""
    html = (await ctx.fetch_page("/")).body

    assert_contains(ctx.results, "WebP images used", html, ".webp")
    assert_contains(
        ctx.results,
        "Lazy loading implemented",
        html,
        ('loading="lazy"', "loading='lazy'"),
        require="any",
    )
    assert_contains(
        ctx.results,
        "Hero image eager loading",
        html,
        ('loading="eager"', 'fetchpriority="high"'),
        require="any",
    )

    sources = IMAGE_SRC_PATTERN.findall(html)
    ctx.record("info", f"Found {len(sources)} image references")

    for src in sources[: ctx.config.image_sample]:
        url = ctx.fetcher.resolve(src)
        try:
            image = await ctx.fetch_url(url)
        except NetworkError as e:
            ctx.record("fail", f"Image loads: {src}", e.message)
            continue

        if not image.ok:
            ctx.record("fail", f"Image loads: {src}", f"Status: {image.status}")
            continue

        size = image.content_length
        details = f"{round(size / 1024)}KB" if size is not None else None
        ctx.record("pass", f"Image loads: {src.rsplit('/', 1)[-1]}", details)
