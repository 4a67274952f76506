"""
Best-effort CSS locators for reporting.
"""

from bs4.element import Tag


def selector_for(tag: Tag) -> str:
    """Describe an element as `#id`, `.class.list` or its tag name.

    Not guaranteed unique; only meant to help a person find the element.
    """
    element_id = tag.get("id")
    if isinstance(element_id, str) and element_id.strip():
        return f"#{element_id.strip()}"

    classes = tag.get("class")
    if isinstance(classes, str):
        classes = classes.split()
    if classes:
        return "." + ".".join(classes)

    return tag.name.lower()
