"""
Report generation for the accessibility checker.
"""

from deps import Dict, List

from .issue import Issue, Severity


class ReportGenerator:
    """Generate reports from issues."""

    @staticmethod
    def generate_text_report(issues: List[Issue], source: str = "page") -> str:
        """Generate a text report grouped by severity."""
        if not issues:
            return f"\n✓ No accessibility issues found in {source}\n"

        report = [f"\n{'='*80}"]
        report.append(f"Accessibility Report: {source}")
        report.append(f"{'='*80}\n")

        counts = []
        for severity in Severity:
            group = [i for i in issues if i.severity == severity]
            counts.append(f"{len(group)} {severity.value}")
            if not group:
                continue
            report.append(f"{severity.value.upper()} ({len(group)}):")
            report.append("-" * 80)
            for issue in group:
                report.append(f"  [{issue.id}] {issue.type}: {issue.description}")
                if issue.selector:
                    report.append(f"    Selector: {issue.selector}")
                report.append(f"    Element: {_truncate(issue.element)}")
                if issue.fix:
                    report.append(f"    Fix: {issue.fix}")
                report.append("")

        report.append(f"\nSummary: {', '.join(counts)}")
        report.append("="*80)

        return "\n".join(report)

    @staticmethod
    def generate_summary(issues: List[Issue]) -> Dict[str, int]:
        """Generate a summary count by issue type."""
        summary = {}
        for issue in issues:
            summary[issue.type] = summary.get(issue.type, 0) + 1
        return summary

    @staticmethod
    def generate_severity_summary(issues: List[Issue]) -> Dict[str, int]:
        """Count issues per severity, every level present."""
        summary = {severity.value: 0 for severity in Severity}
        for issue in issues:
            summary[issue.severity.value] += 1
        return summary


def _truncate(text: str, limit: int = 200) -> str:
    text = " ".join(text.split())
    return text if len(text) <= limit else text[: limit - 3] + "..."
