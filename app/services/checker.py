"""Checker service: wraps accessibility_checker and maps to API models."""

from deps import Dict, List, Optional, Sequence

from accessibility_checker import (
    AccessibilityChecker,
    Issue,
    ReportGenerator,
    ScanTier,
    Severity,
    apply_fix,
    check_consistency,
)

from ..schemas import IssueOut


def _issue_to_out(i: Issue) -> IssueOut:
    return IssueOut(
        id=i.id,
        type=i.type,
        element=i.element,
        description=i.description,
        severity=i.severity.value,
        fix=i.fix,
        message=i.message,
        selector=i.selector,
        impact=i.impact.value if i.impact else None,
    )


def _out_to_issue(out: IssueOut) -> Issue:
    return Issue(
        id=out.id,
        type=out.type,
        element=out.element,
        description=out.description,
        severity=Severity(out.severity),
        fix=out.fix,
        message=out.message,
        selector=out.selector,
        impact=Severity(out.impact) if out.impact else None,
    )


class CheckerService:
    """Wraps AccessibilityChecker for use by the API."""

    def __init__(self, checker: Optional[AccessibilityChecker] = None):
        self.checker = checker or AccessibilityChecker()

    def scan(self, html: str, tier: ScanTier) -> List[Issue]:
        """Run the rule catalog on one page."""
        return self.checker.scan(html, tier)

    @staticmethod
    def to_out(issues: List[Issue]) -> List[IssueOut]:
        return [_issue_to_out(i) for i in issues]

    def scan_site(self, pages: Sequence[str]) -> List[IssueOut]:
        """Run the cross-page consistency rules."""
        return [_issue_to_out(i) for i in check_consistency(pages)]

    def apply_fix(self, html: str, issue: IssueOut) -> str:
        return apply_fix(html, _out_to_issue(issue))

    @staticmethod
    def severity_summary(issues: List[Issue]) -> Dict[str, int]:
        return ReportGenerator.generate_severity_summary(issues)

    @staticmethod
    def text_report(issues: List[Issue], source: str = "page") -> str:
        return ReportGenerator.generate_text_report(issues, source)
