"""Content checks for individual pages of the site."""

from site_smoke.assertions import assert_contains, assert_range
from site_smoke.fetcher import NetworkError
from site_smoke.harness import CheckContext

SERVICES = (
    "Auto Insurance",
    "Home Insurance",
    "Renters Insurance",
    "Life Insurance",
    "Business Insurance",
)

LOCAL_AREAS = ("Goleta", "Santa Barbara", "Isla Vista")

NAVIGATION_PAGES = (
    ("/", "Homepage"),
    ("/auto-insurance-goleta/", "Auto Insurance"),
    ("/home-insurance-goleta/", "Home Insurance"),
    ("/renters-insurance-goleta/", "Renters Insurance"),
    ("/life-insurance-goleta/", "Life Insurance"),
    ("/business-insurance-goleta/", "Business Insurance"),
    ("/es/", "Spanish Homepage"),
    ("/privacy/", "Privacy Policy"),
    ("/terms/", "Terms of Service"),
)

MISSING_PAGE_PATH = "/non-existent-page-xyz/"

RENTERS_PATH = "/renters-insurance-goleta/"
RENTERS_PRICES = ("$15", "$22", "$30")
RENTERS_COVERAGES = ("Personal Property", "Liability Protection", "Theft Coverage")

SPANISH_PATH = "/es/"


async def check_homepage(ctx: CheckContext) -> None:
    """Hero, services, social proof and local content on the homepage."""
    page = await ctx.fetch_page("/")

    if not page.ok:
        ctx.record("fail", "Homepage loads", f"Status: {page.status}")
        return
    ctx.record("pass", "Homepage loads successfully")

    max_load = ctx.config.max_load_ms
    assert_range(
        ctx.results,
        f"Load time under {max_load / 1000:g}s",
        page.elapsed_ms,
        maximum=max_load,
        unit="ms",
    )

    html = page.body
    assert_contains(
        ctx.results, "Hero headline present", html, "Stop Overpaying for Insurance"
    )
    assert_contains(
        ctx.results,
        "Hero background image integrated",
        html,
        ("santabarbara-hero", "Santa Barbara coastline"),
        require="any",
    )
    assert_contains(
        ctx.results, "Hero ZIP form present", html, ("hero-zip-form", "Enter ZIP")
    )
    assert_contains(ctx.results, "All service cards present", html, SERVICES)
    assert_contains(
        ctx.results,
        "Quote form section present",
        html,
        ("quote-form", "MultiStepForm"),
        require="any",
    )
    assert_contains(
        ctx.results,
        "Testimonials/social proof present",
        html,
        ("Maria S.", "Kevin T."),
        require="any",
    )
    assert_contains(
        ctx.results, "FAQ section present", html, "How much can I really save"
    )
    assert_contains(ctx.results, "Local area mentions present", html, LOCAL_AREAS)


async def check_navigation(ctx: CheckContext) -> None:
    """Every linked page answers, and unknown paths answer 404."""
    for path, name in NAVIGATION_PAGES:
        try:
            page = await ctx.fetch_page(path)
        except NetworkError as e:
            ctx.record("fail", f"{name} accessible", e.message)
            continue

        if page.ok:
            ctx.record("pass", f"{name} accessible", f"{page.elapsed_ms}ms")
        else:
            ctx.record("fail", f"{name} accessible", f"Status: {page.status}")

    try:
        page = await ctx.fetch_page(MISSING_PAGE_PATH)
    except NetworkError as e:
        ctx.record("skip", "404 handling", e.message)
        return

    if page.status == 404:
        ctx.record("pass", "404 page returns correct status")
    else:
        ctx.record("info", "404 handling", f"Status: {page.status}")


async def check_renters_page(ctx: CheckContext) -> None:
    """Student-focused renters landing page."""
    page = await ctx.fetch_page(RENTERS_PATH)

    if not page.ok:
        ctx.record("fail", "Renters page loads", f"Status: {page.status}")
        return
    ctx.record("pass", "Renters page loads")

    html = page.body
    assert_contains(
        ctx.results,
        "UCSB campus image integrated",
        html,
        ("ucsb-campus", "UCSB Storke Tower"),
        require="any",
    )
    assert_contains(
        ctx.results,
        "Student-focused content present",
        html,
        ("UCSB Students", "Isla Vista"),
    )
    assert_contains(ctx.results, "Pricing tiers displayed", html, RENTERS_PRICES)
    assert_contains(ctx.results, "Coverage types listed", html, RENTERS_COVERAGES)
    assert_contains(
        ctx.results,
        "Renters FAQ present",
        html,
        "How much does renters insurance cost",
    )


async def check_spanish_page(ctx: CheckContext) -> None:
    """Spanish translation of the homepage."""
    page = await ctx.fetch_page(SPANISH_PATH)

    if not page.ok:
        ctx.record("fail", "Spanish page loads", f"Status: {page.status}")
        return
    ctx.record("pass", "Spanish page loads")

    html = page.body
    assert_contains(
        ctx.results,
        "Spanish content present",
        html,
        ("Seguro", "seguro"),
        require="any",
    )
    assert_contains(ctx.results, "Spanish lang attribute set", html, 'lang="es"')
    assert_contains(
        ctx.results,
        "Local area references in Spanish page",
        html,
        ("Goleta", "Santa Barbara"),
        require="any",
    )
