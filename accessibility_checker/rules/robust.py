"""
Robust checks: parsing and name/role/value.
"""

from collections import Counter

from ..document import Document
from ..issue import Principle, Severity
from ..rule_base import Emitter, Rule
from ..utils import attribute_value


def check_duplicate_ids(document: Document, emitter: Emitter):
    """Every element whose id is also used by another element."""
    elements = document.elements()
    counts = Counter(
        attribute_value(element, "id") for element in elements
        if attribute_value(element, "id")
    )
    for index, element in enumerate(elements):
        element_id = attribute_value(element, "id")
        if element_id and counts[element_id] > 1:
            emitter.emit_for(index, element, description=f'Duplicate ID found: "{element_id}"')


def check_name_role_value(document: Document, emitter: Emitter):
    """Elements with a role but no accessible name."""
    for index, element in enumerate(document.find_all(attrs={"role": True})):
        if not element.has_attr("aria-label") and not element.has_attr("aria-labelledby"):
            emitter.emit_for(index, element)


RULES = (
    Rule(
        name="duplicate-id",
        issue_type="Duplicate ID",
        principle=Principle.ROBUST,
        severity=Severity.SERIOUS,
        check=check_duplicate_ids,
        description="Duplicate ID found",
        wcag="4.1.1",
    ),
    Rule(
        name="role-value",
        issue_type="Missing ARIA Label",
        principle=Principle.ROBUST,
        severity=Severity.SERIOUS,
        check=check_name_role_value,
        description="Element with role attribute missing accessible name",
        wcag="4.1.2",
    ),
)
