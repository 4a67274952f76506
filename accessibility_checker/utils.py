"""
Utility functions for the accessibility checker.
"""

import copy
import re
from typing import Iterable, List, Optional

from bs4.element import NavigableString, Tag

# Elements whose text is never rendered as page content.
NON_RENDERED_TAGS = frozenset({
    "head", "title", "meta", "link", "script", "style", "noscript", "template",
})

# A font-size expressed in absolute pixels, e.g. "14px" or "0.5px".
_PX_UNIT_PATTERN = re.compile(r"(?<![\w.-])-?\d*\.?\d+px\b", re.IGNORECASE)


def normalize_space(text: Optional[str]) -> str:
    """Collapse runs of whitespace and trim."""
    return " ".join((text or "").split())


def attribute_value(tag: Tag, name: str) -> Optional[str]:
    """Attribute value as a string, or None when the attribute is absent.

    An empty attribute (`alt=""`) returns "" so callers can tell it apart
    from a missing one. Multi-valued attributes (class, rel) are joined.
    """
    if not tag.has_attr(name):
        return None
    value = tag[name]
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return value


def attribute_tokens(tag: Tag, name: str) -> List[str]:
    """Whitespace-separated tokens of an attribute (e.g. an IDREF list)."""
    return (attribute_value(tag, name) or "").split()


def has_own_text(tag: Tag) -> bool:
    """True if the element directly contains non-whitespace text."""
    if tag.name in NON_RENDERED_TAGS:
        return False
    # Comments, CDATA and doctypes are NavigableString subclasses.
    return any(
        type(child) is NavigableString and child.strip()
        for child in tag.children
    )


def parse_tabindex(value: Optional[str]) -> Optional[int]:
    """Integer tabindex, or None when absent or not a number."""
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def uses_px_unit(value: Optional[str]) -> bool:
    """True if a CSS value contains a length in px."""
    return bool(value) and _PX_UNIT_PATTERN.search(value) is not None


def with_attribute(tag: Tag, name: str, value: str) -> str:
    """Serialized copy of the element with one attribute set.

    The copy is detached, so the parsed document is left untouched.
    """
    clone = copy.copy(tag)
    clone[name] = value
    return str(clone)


def text_of(tag: Optional[Tag]) -> str:
    """Normalized text content of an element ("" for None)."""
    if tag is None:
        return ""
    return normalize_space(tag.get_text(" "))


def any_attribute(tag: Tag, names: Iterable[str]) -> bool:
    """True if the element carries at least one of the attributes."""
    return any(tag.has_attr(name) for name in names)
