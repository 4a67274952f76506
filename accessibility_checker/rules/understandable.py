"""
Understandable checks: language, predictable behaviour and input assistance.

Missing form labels are reported before undescribed validation errors.
"""

from bs4.element import Tag

from ..document import Document
from ..issue import Principle, Severity
from ..rule_base import Emitter, Rule
from ..utils import any_attribute, attribute_tokens, attribute_value, text_of

FORM_CONTROL_SELECTOR = 'input:not([type="hidden"]), select, textarea'
VAGUE_HEADING_WORDS = ("heading", "title", "section")
VAGUE_LABEL_WORDS = ("label", "input")
NAMING_ATTRIBUTES = ("aria-label", "aria-labelledby", "title")


def check_language(document: Document, emitter: Emitter):
    """The root element declares no language."""
    root = document.root
    if root is None or not root.has_attr("lang"):
        emitter.emit("0", root)


def check_focus_changes(document: Document, emitter: Emitter):
    """Focus handlers whose effect is not announced."""
    for index, element in enumerate(document.elements()):
        if element.has_attr("onfocus") and not element.has_attr("aria-live"):
            emitter.emit_for(index, element)


def check_input_changes(document: Document, emitter: Emitter):
    """Change handlers on form controls whose effect is not announced."""
    for index, element in enumerate(document.find_all(["input", "select", "textarea"])):
        if element.has_attr("onchange") and not element.has_attr("aria-live"):
            emitter.emit_for(index, element)


def _resolves_to_content(document: Document, element: Tag, attribute: str) -> bool:
    """True if any id referenced by the attribute names an element with text."""
    for ref in attribute_tokens(element, attribute):
        target = document.get_element_by_id(ref)
        if target is not None and text_of(target):
            return True
    return False


def check_error_identification(document: Document, emitter: Emitter):
    """Invalid inputs whose error message cannot be reached programmatically."""
    for index, element in enumerate(document.select('[aria-invalid="true"]')):
        if _resolves_to_content(document, element, "aria-describedby"):
            continue
        if _resolves_to_content(document, element, "aria-errormessage"):
            continue
        emitter.emit_for(index, element)


def _has_label(document: Document, control: Tag) -> bool:
    control_id = attribute_value(control, "id")
    if control_id:
        for label in document.find_all("label"):
            if attribute_value(label, "for") == control_id:
                return True
    return control.find_parent("label") is not None


def check_labels(document: Document, emitter: Emitter):
    """Form controls without an accessible name."""
    for index, control in enumerate(document.select(FORM_CONTROL_SELECTOR)):
        if _has_label(document, control) or any_attribute(control, NAMING_ATTRIBUTES):
            continue
        emitter.emit_for(index, control)


def check_heading_meaning(document: Document, emitter: Emitter):
    """Headings that are empty or use placeholder words."""
    for index, heading in enumerate(document.find_all(["h1", "h2", "h3", "h4", "h5", "h6"])):
        text = text_of(heading).lower()
        if not text or any(word in text for word in VAGUE_HEADING_WORDS):
            emitter.emit_for(index, heading)


def check_label_meaning(document: Document, emitter: Emitter):
    """Labels that are empty or use placeholder words."""
    for index, label in enumerate(document.find_all("label")):
        text = text_of(label).lower()
        if not text or any(word in text for word in VAGUE_LABEL_WORDS):
            emitter.emit_for(index, label)


def check_error_suggestions(document: Document, emitter: Emitter):
    """Invalid form controls not followed by an error message."""
    for form_index, form in enumerate(document.find_all("form")):
        controls = form.find_all(["input", "select", "textarea"])
        for control_index, control in enumerate(controls):
            if not control.has_attr("aria-invalid"):
                continue
            sibling = control.find_next_sibling()
            if sibling is not None and "error-message" in attribute_tokens(sibling, "class"):
                continue
            emitter.emit_for(f"{form_index}-{control_index}", control)


def check_error_prevention(document: Document, emitter: Emitter):
    """Forms that can be submitted but offer no reset."""
    for index, form in enumerate(document.find_all("form")):
        has_submit = document.select_one('input[type="submit"]', form) is not None
        has_reset = document.select_one('button[type="reset"]', form) is not None
        if has_submit and not has_reset:
            emitter.emit_for(index, form)


RULES = (
    Rule(
        name="lang-missing",
        issue_type="Missing Language of Page",
        principle=Principle.UNDERSTANDABLE,
        severity=Severity.SERIOUS,
        check=check_language,
        description="Document missing language attribute (WCAG 2.0 A 3.1.1)",
        wcag="3.1.1",
    ),
    Rule(
        name="focus-change",
        issue_type="Focus Change",
        principle=Principle.UNDERSTANDABLE,
        severity=Severity.MODERATE,
        check=check_focus_changes,
        description="Focus change may not be announced to screen readers",
        wcag="3.2.1",
    ),
    Rule(
        name="input-change",
        issue_type="Input Change",
        principle=Principle.UNDERSTANDABLE,
        severity=Severity.MODERATE,
        check=check_input_changes,
        description="Input change may not be announced to screen readers",
        wcag="3.2.2",
    ),
    Rule(
        name="label",
        issue_type="Missing Form Label/Name",
        principle=Principle.UNDERSTANDABLE,
        severity=Severity.SERIOUS,
        check=check_labels,
        description=(
            "Form control missing accessible name (label, aria-label, aria-labelledby, "
            "or title attribute) (WCAG 2.0 A 1.3.1, 4.1.2)"
        ),
        wcag="1.3.1",
    ),
    Rule(
        name="error-identification",
        issue_type="Input Error Not Described",
        principle=Principle.UNDERSTANDABLE,
        severity=Severity.SERIOUS,
        check=check_error_identification,
        description="Form input marked as invalid but error is not programmatically described (WCAG 2.0 A 3.3.1)",
        wcag="3.3.1",
    ),
    Rule(
        name="heading-meaning",
        issue_type="Potentially Non-Descriptive Heading",
        principle=Principle.UNDERSTANDABLE,
        severity=Severity.MODERATE,
        check=check_heading_meaning,
        description="Heading text may not clearly describe the section content (WCAG 2.0 AA 2.4.6)",
        wcag="2.4.6",
    ),
    Rule(
        name="label-meaning",
        issue_type="Potentially Non-Descriptive Label",
        principle=Principle.UNDERSTANDABLE,
        severity=Severity.MODERATE,
        check=check_label_meaning,
        description="Label text may not clearly describe the associated input field (WCAG 2.0 AA 2.4.6)",
        wcag="2.4.6",
    ),
    Rule(
        name="error-suggestion",
        issue_type="Missing Error Suggestion",
        principle=Principle.UNDERSTANDABLE,
        severity=Severity.MODERATE,
        check=check_error_suggestions,
        description="Form control marked as invalid but missing error suggestion",
        wcag="3.3.3",
    ),
    Rule(
        name="error-prevention",
        issue_type="Missing Form Reset",
        principle=Principle.UNDERSTANDABLE,
        severity=Severity.MODERATE,
        check=check_error_prevention,
        description="Form with submit button missing reset option",
        wcag="3.3.4",
    ),
)
