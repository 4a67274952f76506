"""
Main checker class that runs the rule catalog against a page.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Union

from .document import Document, parse
from .issue import Issue, ScanTier
from .rule_base import Rule
from .rules import RULES, get_rule

logger = logging.getLogger(__name__)

# AA criteria that need temporal or media analysis. Neither tier checks them;
# they need manual review.
FULL_TIER_NOTES = (
    ("1.2.4", "Captions (Live)"),
    ("1.2.6", "Sign Language (Prerecorded)"),
    ("1.2.7", "Extended Audio Description (Prerecorded)"),
    ("1.2.8", "Media Alternative (Prerecorded)"),
    ("1.2.9", "Audio-only (Live)"),
    ("1.4.7", "Low or No Background Audio"),
    ("1.4.8", "Visual Presentation"),
    ("2.4.5", "Multiple Ways"),
)


class AccessibilityChecker:
    """Runs audit rules in catalog order and aggregates their issues."""

    def __init__(self, rules: Sequence[Rule] = RULES):
        self.rules = tuple(rules)

    def rules_for(self, tier: Union[ScanTier, str]) -> List[Rule]:
        """Rules enabled for a tier, in catalog order."""
        tier = ScanTier.parse(tier)
        return [rule for rule in self.rules if rule.applies_to(tier)]

    def scan(self, markup: str, tier: Union[ScanTier, str] = ScanTier.STANDARD) -> List[Issue]:
        """Check a page for accessibility issues.

        Raises MarkupParseError if the markup cannot be parsed at all and
        InvalidScanTierError for an unknown tier.
        """
        tier = ScanTier.parse(tier)
        document = parse(markup)
        issues = self._run(document, self.rules_for(tier))
        logger.info("Scan (%s tier) found %d issue(s)", tier.value, len(issues))
        return issues

    def scan_rules(self, markup: str, names: Iterable[str]) -> List[Issue]:
        """Check a page with only the named rules, still in catalog order."""
        wanted = {get_rule(name).name for name in names}
        document = parse(markup)
        return self._run(document, [rule for rule in self.rules if rule.name in wanted])

    def _run(self, document: Document, rules: Sequence[Rule]) -> List[Issue]:
        issues: List[Issue] = []
        for rule in rules:
            try:
                found = rule.run(document)
            except Exception:
                # One broken rule must not blank out the rest of the scan.
                logger.exception("Rule %s failed; its issues are omitted from this scan", rule.name)
                continue
            logger.debug("Rule %s: %d issue(s)", rule.name, len(found))
            issues.extend(found)
        return issues


_default_checker: Optional[AccessibilityChecker] = None


def scan(markup: str, tier: Union[ScanTier, str] = ScanTier.STANDARD) -> List[Issue]:
    """Scan markup with the full rule catalog."""
    global _default_checker
    if _default_checker is None:
        _default_checker = AccessibilityChecker()
    return _default_checker.scan(markup, tier)
