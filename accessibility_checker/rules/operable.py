"""
Operable checks: keyboard access, timing, seizures, navigation and focus.
"""

import re

from ..document import ComputedStyle, Document
from ..issue import Principle, Severity
from ..rule_base import Emitter, Rule
from ..utils import attribute_value, normalize_space, parse_tabindex, text_of, with_attribute

INTERACTIVE_SELECTOR = 'a, button, [role="button"], input, select, textarea'
FOCUSABLE_SELECTOR = "a, button, input, select, textarea, [tabindex]"
SKIP_LINK_TARGET = "#main-content"
GENERIC_LINK_TEXTS = ("Click here", "Read more")
CLOSE_CONTROL_NAMES = ("close", "×", "x")

_FLASH_ANIMATION = re.compile(r"\bflash", re.IGNORECASE)
_INVISIBLE_OUTLINE = re.compile(r"^(none|0(px)?)(\s|$)", re.IGNORECASE)


def check_keyboard_accessibility(document: Document, emitter: Emitter):
    """Interactive elements without a tabindex that keeps them in the tab order."""
    for index, element in enumerate(document.select(INTERACTIVE_SELECTOR)):
        raw = attribute_value(element, "tabindex")
        if raw is None:
            emitter.emit_for(index, element, fix=with_attribute(element, "tabindex", "0"))
            continue
        tabindex = parse_tabindex(raw)
        if tabindex is not None and tabindex < 0:
            emitter.emit_for(index, element)


def _is_close_control(button) -> bool:
    label = attribute_value(button, "aria-label")
    name = normalize_space(label if label is not None else text_of(button)).lower()
    return name in CLOSE_CONTROL_NAMES


def check_keyboard_traps(document: Document, emitter: Emitter):
    """Dialogs with no control to close them."""
    for index, dialog in enumerate(document.select('dialog, [role="dialog"]')):
        buttons = document.select('button, [role="button"]', dialog)
        if not any(_is_close_control(button) for button in buttons):
            emitter.emit_for(index, dialog)


def check_timing_adjustable(document: Document, emitter: Emitter):
    """Meta refresh tags."""
    refreshes = [
        meta for meta in document.find_all("meta")
        if (attribute_value(meta, "http-equiv") or "").strip().lower() == "refresh"
    ]
    for index, meta in enumerate(refreshes):
        emitter.emit(index, meta)


def check_flashing_content(document: Document, emitter: Emitter):
    """Elements running a flash animation."""
    for index, element in enumerate(document.elements()):
        animation = document.computed_style(element).animation
        if animation and _FLASH_ANIMATION.search(animation):
            emitter.emit_for(index, element)


def check_bypass_blocks(document: Document, emitter: Emitter):
    """Pages without a skip link to the main content."""
    if document.select_one(f'a[href="{SKIP_LINK_TARGET}"]') is None:
        emitter.emit("0", document.body)


def check_page_titles(document: Document, emitter: Emitter):
    """Pages without a non-empty title."""
    title = document.title
    if title is None or not title.get_text().strip():
        emitter.emit("0", document.head)


def check_focus_order(document: Document, emitter: Emitter):
    """Positive tabindex values that run backwards through the document."""
    last_tabindex = -1
    for index, element in enumerate(document.select(FOCUSABLE_SELECTOR)):
        raw = attribute_value(element, "tabindex")
        tabindex = parse_tabindex(raw) if raw is not None else 0
        if tabindex is None:
            continue
        if tabindex < last_tabindex:
            emitter.emit_for(index, element)
        last_tabindex = tabindex


def check_link_purpose(document: Document, emitter: Emitter):
    """Links whose whole text is a generic phrase."""
    for index, link in enumerate(document.find_all("a")):
        if link.get_text().strip() in GENERIC_LINK_TEXTS:
            emitter.emit_for(index, link)


def _draws_outline(value) -> bool:
    return bool(value) and not _INVISIBLE_OUTLINE.match(value.strip())


def _draws_shadow(value) -> bool:
    return bool(value) and value.strip().lower() != "none"


def check_focus_visible(document: Document, emitter: Emitter):
    """:focus rules that neither draw an outline nor a box shadow."""
    for sheet in document.stylesheets:
        if not sheet.available:
            continue
        for rule in sheet.rules:
            if ":focus" not in rule.selector_text:
                continue
            style = ComputedStyle(rule.declarations)
            if _draws_outline(style.outline) or _draws_shadow(style.box_shadow):
                continue
            emitter.emit(f"{sheet.index}-{rule.rule_index}", rule.selector_text)


RULES = (
    Rule(
        name="keyboard",
        issue_type="Keyboard Accessibility",
        principle=Principle.OPERABLE,
        severity=Severity.SERIOUS,
        check=check_keyboard_accessibility,
        description="Interactive element may not be keyboard accessible",
        wcag="2.1.1",
    ),
    Rule(
        name="keyboard-trap",
        issue_type="Potential Keyboard Trap",
        principle=Principle.OPERABLE,
        severity=Severity.SERIOUS,
        check=check_keyboard_traps,
        description="Dialog may trap keyboard focus",
        wcag="2.1.2",
    ),
    Rule(
        name="timing",
        issue_type="Auto-Refresh",
        principle=Principle.OPERABLE,
        severity=Severity.SERIOUS,
        check=check_timing_adjustable,
        description="Page uses auto-refresh which may be disorienting",
        wcag="2.2.1",
    ),
    Rule(
        name="flash",
        issue_type="Flashing Content",
        principle=Principle.OPERABLE,
        severity=Severity.CRITICAL,
        check=check_flashing_content,
        description="Element contains flashing animation",
        wcag="2.3.1",
    ),
    Rule(
        name="bypass-blocks",
        issue_type="Missing Skip Link",
        principle=Principle.OPERABLE,
        severity=Severity.SERIOUS,
        check=check_bypass_blocks,
        description="No skip link to bypass repeated blocks",
        wcag="2.4.1",
    ),
    Rule(
        name="page-title",
        issue_type="Missing Page Title",
        principle=Principle.OPERABLE,
        severity=Severity.SERIOUS,
        check=check_page_titles,
        description="Page missing title element",
        wcag="2.4.2",
    ),
    Rule(
        name="focus-order",
        issue_type="Focus Order",
        principle=Principle.OPERABLE,
        severity=Severity.MODERATE,
        check=check_focus_order,
        description="Focus order may not be logical",
        wcag="2.4.3",
    ),
    Rule(
        name="link-purpose",
        issue_type="Generic Link Text",
        principle=Principle.OPERABLE,
        severity=Severity.MODERATE,
        check=check_link_purpose,
        description="Link text is too generic",
        wcag="2.4.4",
    ),
    Rule(
        name="focus-visible",
        issue_type="Focus Not Visible",
        principle=Principle.OPERABLE,
        severity=Severity.SERIOUS,
        check=check_focus_visible,
        description="Focus indicator may not be visible",
        wcag="2.4.7",
    ),
)
