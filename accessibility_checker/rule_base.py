"""
Rule descriptors and the emitter rules report issues through.
"""

from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Optional, Union

from bs4.element import Tag

from .document import Document
from .issue import Issue, Principle, ScanTier, Severity
from .selector import selector_for

ALL_TIERS: FrozenSet[ScanTier] = frozenset(ScanTier)


class Emitter:
    """Collects the issues of one rule during one scan.

    Type, severity and impact always come from the rule descriptor, so a
    check cannot change the severity of what it reports.
    """

    def __init__(self, rule: "Rule"):
        self.rule = rule
        self.issues: List[Issue] = []

    def emit(
        self,
        key: Union[int, str],
        element: Union[Tag, str, None],
        description: Optional[str] = None,
        fix: Optional[str] = None,
        message: Optional[str] = None,
        selector: Optional[str] = None,
    ) -> Issue:
        """Record an issue; `key` is the positional index appended to the rule name."""
        if isinstance(element, Tag):
            snapshot = str(element)
        else:
            snapshot = element or ""
        issue = Issue(
            id=f"{self.rule.name}-{key}",
            type=self.rule.issue_type,
            element=snapshot,
            description=description or self.rule.description,
            severity=self.rule.severity,
            fix=fix,
            message=message,
            selector=selector,
            impact=self.rule.severity,
        )
        self.issues.append(issue)
        return issue

    def emit_for(self, key: Union[int, str], tag: Tag, **kwargs) -> Issue:
        """Record an issue for an element, filling in its selector."""
        kwargs.setdefault("selector", selector_for(tag))
        return self.emit(key, tag, **kwargs)


# Takes a Document (or a sequence of them for site-wide rules) and an Emitter.
CheckFunction = Callable[..., None]


@dataclass(frozen=True)
class Rule:
    """An audit rule: what it reports and the check that finds it."""
    name: str
    issue_type: str
    principle: Principle
    severity: Severity
    check: CheckFunction
    description: str
    wcag: Optional[str] = None
    tiers: FrozenSet[ScanTier] = ALL_TIERS

    def applies_to(self, tier: ScanTier) -> bool:
        return tier in self.tiers

    def run(self, document: Document) -> List[Issue]:
        """Run the check against a document and return its issues."""
        emitter = Emitter(self)
        self.check(document, emitter)
        return emitter.issues
