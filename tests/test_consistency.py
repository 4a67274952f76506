"""Tests for the multi-page consistency rules."""

from accessibility_checker import check_consistency
from accessibility_checker.consistency import SITE_RULES

NAV = '<nav><a href="/">Home</a> <a href="/shop">Shop</a></nav>'


class TestCheckConsistency:

    def test_single_page_is_never_inconsistent(self, page):
        assert check_consistency([page(NAV)]) == []
        assert check_consistency([]) == []

    def test_matching_navigation_passes(self, page):
        pages = [page(NAV + "<p>one</p>"), page("<p>two</p>" + NAV.replace("> <", ">\n  <"))]
        assert check_consistency(pages) == []

    def test_changed_navigation_is_reported_against_first_page(self, page):
        changed = '<nav><a href="/shop">Shop</a> <a href="/">Home</a></nav>'
        issues = check_consistency([page(NAV), page(NAV), page(changed)])
        assert [i.id for i in issues] == ["nav-consistency-2"]
        assert issues[0].type == "Navigation Consistency"
        assert issues[0].element.startswith("<nav")

    def test_component_renamed_across_pages_is_reported(self, page):
        pages = [
            page('<div role="search" aria-label="Search the site"></div>'),
            page('<form role="search" aria-label="Find"></form>'),
        ]
        issues = check_consistency(pages)
        assert [i.id for i in issues] == ["consistent-id-1-0"]
        assert '"Search the site" on page 1' in issues[0].description

    def test_differences_within_one_page_are_ignored(self, page):
        markup = page(
            '<div role="search" aria-label="Search"></div><div role="search" aria-label="Filter"></div>'
        )
        assert check_consistency([markup, markup]) == []

    def test_site_rules_are_separate_from_the_page_catalog(self):
        from accessibility_checker import RULES

        site_names = {rule.name for rule in SITE_RULES}
        assert site_names == {"nav-consistency", "consistent-id"}
        assert not site_names & {rule.name for rule in RULES}
