"""
Applying an issue's suggested fix to page markup.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from .document import Document, parse
from .errors import FixNotApplicableError
from .issue import Issue
from .rule_base import Rule
from .rules import RULES

logger = logging.getLogger(__name__)


def _rule_for(issue: Issue) -> Optional[Rule]:
    """The catalog rule that produced an issue, by the longest name prefix of its id."""
    candidates = [rule for rule in RULES if issue.id.startswith(rule.name + "-")]
    return max(candidates, key=lambda rule: len(rule.name), default=None)


def _occurrence(document: Document, issue: Issue) -> int:
    """Which of the identically serialized elements the issue was reported on.

    The rule is re-run and its issues on the same markup are counted up to
    this one. Unknown rules and ids fall back to the first element.
    """
    rule = _rule_for(issue)
    if rule is None:
        return 0
    twins = [i.id for i in rule.run(document) if i.element == issue.element]
    if issue.id not in twins:
        logger.debug("Issue %s not reproduced; patching the first match", issue.id)
        return 0
    return twins.index(issue.id)


def apply_fix(markup: str, issue: Issue) -> str:
    """Replace the issue's element with its fix and return the patched markup.

    When several elements serialize the same as `issue.element`, the one the
    issue was reported on is replaced. Raises FixNotApplicableError when the
    issue carries no fix or the element is not in the markup.
    """
    if not issue.fix:
        raise FixNotApplicableError(f"Issue {issue.id} has no fix")

    document = parse(markup)
    matches: List[Tag] = [tag for tag in document.elements() if str(tag) == issue.element]
    if not matches:
        raise FixNotApplicableError(f"Element for issue {issue.id} not found in markup")
    target = matches[min(_occurrence(document, issue), len(matches) - 1)]

    fragment = BeautifulSoup(issue.fix, "html.parser")
    replacements = list(fragment.contents)
    if not replacements:
        raise FixNotApplicableError(f"Fix for issue {issue.id} is empty")

    target.replace_with(*replacements)
    return str(document.soup)
