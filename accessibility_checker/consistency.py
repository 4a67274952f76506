"""
Consistency checks across the pages of one site.

These rules compare pages with each other, so they take several documents
and are not part of the single-page scan.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from bs4.element import Tag

from .document import Document, parse
from .issue import Issue, Principle, Severity
from .rule_base import Emitter, Rule
from .utils import attribute_value, normalize_space, text_of

logger = logging.getLogger(__name__)


def _navigation_signature(nav: Tag) -> str:
    """Whitespace-insensitive markup of a navigation block's contents."""
    return normalize_space("".join(str(child) for child in nav.children))


def _accessible_name(element: Tag) -> str:
    label = attribute_value(element, "aria-label")
    return normalize_space(label) if label else text_of(element)


def check_consistent_navigation(documents: Sequence[Document], emitter: Emitter):
    """Pages whose first <nav> differs from the first page's."""
    reference: Optional[str] = None
    for page_index, document in enumerate(documents):
        nav = document.soup.find("nav")
        if nav is None:
            continue
        signature = _navigation_signature(nav)
        if reference is None:
            reference = signature
        elif signature != reference:
            emitter.emit_for(page_index, nav)


def check_consistent_identification(documents: Sequence[Document], emitter: Emitter):
    """Components of one role named differently on different pages."""
    # role -> (first page using it, names it carries on that page)
    first_seen: Dict[str, Tuple[int, List[str]]] = {}
    for page_index, document in enumerate(documents):
        for index, component in enumerate(document.find_all(attrs={"role": True})):
            role = (attribute_value(component, "role") or "").strip()
            name = _accessible_name(component)
            if not role or not name:
                continue
            seen_page, seen_names = first_seen.setdefault(role, (page_index, []))
            if seen_page == page_index:
                if name not in seen_names:
                    seen_names.append(name)
                continue
            if name not in seen_names:
                emitter.emit_for(
                    f"{page_index}-{index}", component,
                    description=(
                        f'Component with role "{role}" is named "{name}" here but '
                        f'"{seen_names[0]}" on page {seen_page + 1}'
                    ),
                )


SITE_RULES = (
    Rule(
        name="nav-consistency",
        issue_type="Navigation Consistency",
        principle=Principle.UNDERSTANDABLE,
        severity=Severity.MODERATE,
        check=check_consistent_navigation,
        description="Navigation structure is inconsistent across pages",
        wcag="3.2.3",
    ),
    Rule(
        name="consistent-id",
        issue_type="Inconsistent Identification",
        principle=Principle.UNDERSTANDABLE,
        severity=Severity.MODERATE,
        check=check_consistent_identification,
        description="Component has inconsistent identification across pages",
        wcag="3.2.4",
    ),
)


def check_consistency(pages: Sequence[str]) -> List[Issue]:
    """Run the site-wide rules over the markup of several pages.

    Fewer than two pages cannot be inconsistent, so they yield no issues.
    """
    if len(pages) < 2:
        return []
    documents = [parse(markup) for markup in pages]
    issues: List[Issue] = []
    for rule in SITE_RULES:
        emitter = Emitter(rule)
        try:
            rule.check(documents, emitter)
        except Exception:
            logger.exception("Site rule %s failed; its issues are omitted", rule.name)
            continue
        issues.extend(emitter.issues)
    return issues
