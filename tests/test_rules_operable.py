"""Tests for operable rules."""

from accessibility_checker import Severity


class TestKeyboard:
    """Tests for keyboard reachability of interactive elements."""

    def test_missing_tabindex_is_reported_with_fix(self, checker, page):
        issues = checker.scan_rules(page("<button>Save</button>"), ["keyboard"])
        assert len(issues) == 1
        assert issues[0].id == "keyboard-1"
        assert issues[0].selector == "button"
        assert 'tabindex="0"' in issues[0].fix

    def test_negative_tabindex_is_reported_without_fix(self, checker, page):
        issues = checker.scan_rules(page('<input id="q" tabindex="-1">'), ["keyboard"])
        assert [i.selector for i in issues] == ["#q"]
        assert issues[0].fix is None

    def test_focusable_elements_pass(self, checker, page):
        markup = page('<button tabindex="0">Go</button><div role="button" tabindex="0">Menu</div>')
        assert checker.scan_rules(markup, ["keyboard"]) == []


class TestKeyboardTrap:
    """Tests for dialogs without a way out."""

    def test_dialog_without_close_is_reported(self, checker, page):
        issues = checker.scan_rules(page("<dialog open><p>Subscribe!</p><button>OK</button></dialog>"), ["keyboard-trap"])
        assert len(issues) == 1
        assert issues[0].type == "Potential Keyboard Trap"

    def test_close_controls_are_recognized(self, checker, page):
        markup = page(
            '<div role="dialog"><button aria-label="Close">&#10005;</button></div>'
            '<div role="dialog"><button>×</button></div>'
            '<div role="dialog"><span role="button"> X </span></div>'
        )
        assert checker.scan_rules(markup, ["keyboard-trap"]) == []


class TestTiming:
    """Tests for meta refresh."""

    def test_meta_refresh_is_reported_case_insensitively(self, checker, page):
        markup = page(head='<meta http-equiv="Refresh" content="30">')
        issues = checker.scan_rules(markup, ["timing"])
        assert [i.id for i in issues] == ["timing-0"]
        assert issues[0].element.startswith("<meta")

    def test_other_meta_tags_pass(self, checker, page):
        markup = page(head='<meta charset="utf-8"><meta http-equiv="content-type" content="text/html">')
        assert checker.scan_rules(markup, ["timing"]) == []


class TestFlash:
    """Tests for flashing animations."""

    def test_flash_animation_is_critical(self, checker, page):
        markup = page(
            '<div class="promo"><p>Offer</p></div>',
            head="<style>.promo { animation: flash 0.2s infinite }</style>",
        )
        issues = checker.scan_rules(markup, ["flash"])
        assert [i.selector for i in issues] == [".promo"]
        assert issues[0].severity == Severity.CRITICAL

    def test_animation_name_property_is_read(self, checker, page):
        markup = page('<span style="animation-name: flash-fast">!</span>')
        assert len(checker.scan_rules(markup, ["flash"])) == 1

    def test_other_animations_pass(self, checker, page):
        markup = page('<span style="animation: fade-in 1s">hello</span>')
        assert checker.scan_rules(markup, ["flash"]) == []


class TestNavigation:
    """Tests for skip links, titles and link text."""

    def test_missing_skip_link_is_reported_on_body(self, checker):
        markup = '<html lang="en"><head><title>T</title></head><body><p>x</p></body></html>'
        issues = checker.scan_rules(markup, ["bypass-blocks"])
        assert [i.id for i in issues] == ["bypass-blocks-0"]
        assert issues[0].element.startswith("<body")

    def test_skip_link_passes(self, checker, page):
        assert checker.scan_rules(page("<p>x</p>"), ["bypass-blocks"]) == []

    def test_missing_title_is_reported(self, checker, page):
        issues = checker.scan_rules(page(title=None), ["page-title"])
        assert [i.id for i in issues] == ["page-title-0"]

    def test_blank_title_is_reported_on_head(self, checker, page):
        issues = checker.scan_rules(page(title="   "), ["page-title"])
        assert len(issues) == 1
        assert issues[0].element.startswith("<head")

    def test_generic_link_text_is_reported(self, checker, page):
        markup = page(
            '<a href="/a" tabindex="0">Click here</a>'
            '<a href="/b" tabindex="0">  Read more </a>'
            '<a href="/c" tabindex="0">Click here for pricing</a>'
        )
        issues = checker.scan_rules(markup, ["link-purpose"])
        assert [i.id for i in issues] == ["link-purpose-1", "link-purpose-2"]


class TestFocus:
    """Tests for focus order and focus visibility."""

    def test_backwards_tabindex_is_reported(self, checker, page):
        markup = page('<button tabindex="3">A</button><button id="b" tabindex="1">B</button>')
        issues = checker.scan_rules(markup, ["focus-order"])
        assert [(i.id, i.selector) for i in issues] == [("focus-order-2", "#b")]

    def test_non_numeric_tabindex_is_ignored(self, checker, page):
        markup = page('<button tabindex="2">A</button><button tabindex="abc">B</button><button tabindex="2">C</button>')
        assert checker.scan_rules(markup, ["focus-order"]) == []

    def test_focus_rule_without_indicator_is_reported(self, checker, page):
        css = (
            "a:focus { outline: none }"
            "button:focus { outline: 0; box-shadow: 0 0 0 3px #005fcc }"
            "input:focus { outline: 2px solid #005fcc }"
            ".tab:focus { color: #000 }"
            ".menu a:focus { outline: none; box-shadow: none }"
        )
        issues = checker.scan_rules(page(head=f"<style>{css}</style>"), ["focus-visible"])
        assert [(i.id, i.element) for i in issues] == [
            ("focus-visible-0-0", "a:focus"),
            ("focus-visible-0-3", ".tab:focus"),
            ("focus-visible-0-4", ".menu a:focus"),
        ]
