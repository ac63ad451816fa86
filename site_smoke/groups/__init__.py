"""Check groups for the site, in execution order."""

from site_smoke.groups.pages import (
    check_homepage,
    check_navigation,
    check_renters_page,
    check_spanish_page,
)
from site_smoke.groups.performance import check_form_structure, check_performance
from site_smoke.groups.seo import check_compliance, check_images, check_seo
from site_smoke.harness import TestGroup

DEFAULT_GROUPS = (
    TestGroup(name="Homepage", title="📄 HOMEPAGE TESTS", check=check_homepage),
    TestGroup(name="Navigation", title="🧭 NAVIGATION TESTS", check=check_navigation),
    TestGroup(
        name="Renters page",
        title="🏠 RENTERS INSURANCE PAGE TESTS",
        check=check_renters_page,
    ),
    TestGroup(name="SEO", title="🔍 SEO TESTS", check=check_seo),
    TestGroup(name="Compliance", title="⚖️ COMPLIANCE TESTS", check=check_compliance),
    TestGroup(name="Images", title="🖼️ IMAGE TESTS", check=check_images),
    TestGroup(
        name="Spanish page", title="🇪🇸 SPANISH PAGE TESTS", check=check_spanish_page
    ),
    TestGroup(name="Performance", title="⚡ PERFORMANCE TESTS", check=check_performance),
    TestGroup(
        name="Form structure",
        title="📝 FORM STRUCTURE TESTS",
        check=check_form_structure,
    ),
)

__all__ = ["DEFAULT_GROUPS"]
