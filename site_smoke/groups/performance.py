"""Page weight, load time and quote form structure."""

from site_smoke.assertions import assert_contains, assert_range
from site_smoke.harness import CheckContext

PERFORMANCE_PATHS = ("/", "/auto-insurance-goleta/", "/renters-insurance-goleta/")

REQUIRED_FIELDS = (
    ("firstName", "First Name"),
    ("lastName", "Last Name"),
    ("email", "Email"),
    ("phone", "Phone"),
    ("zipCode", "ZIP Code"),
)


async def check_performance(ctx: CheckContext) -> None:
    """HTML size per page and average load time."""
    load_times: list[int] = []

    for path in PERFORMANCE_PATHS:
        page = await ctx.fetch_page(path)
        load_times.append(page.elapsed_ms)
        assert_range(
            ctx.results,
            f"{path} HTML size",
            page.size_kb,
            maximum=ctx.config.max_html_kb,
            unit="KB",
        )

    average = round(sum(load_times) / len(load_times))
    if average < ctx.config.avg_load_ms:
        ctx.record("pass", "Average load time", f"{average}ms")
    elif average < ctx.config.max_load_ms:
        ctx.record("info", "Average load time acceptable", f"{average}ms")
    else:
        ctx.record("fail", "Average load time too slow", f"{average}ms")


async def check_form_structure(ctx: CheckContext) -> None:
    """Lead form fields, selector, submit button and handler."""
    html = (await ctx.fetch_page("/")).body

    for field_name, label in REQUIRED_FIELDS:
        assert_contains(
            ctx.results,
            f"Form field: {label}",
            html,
            (field_name, label.lower()),
            require="any",
        )

    assert_contains(
        ctx.results,
        "Insurance type selector present",
        html,
        ("insuranceType", "Insurance Type", "insurance-type"),
        require="any",
    )
    assert_contains(
        ctx.results,
        "Submit button present",
        html,
        ('type="submit"', "type='submit'"),
        require="any",
    )
    assert_contains(
        ctx.results,
        "Form submission handler present",
        html,
        ("submit-lead", "<form", "handleSubmit"),
        require="any",
    )
