"""Format scan results as human-readable Markdown."""

from deps import Dict, List, Optional, datetime

from accessibility_checker import ScanTier, Severity
from accessibility_checker.main_checker import FULL_TIER_NOTES

from .schemas import IssueOut


def _title_case(s: str) -> str:
    """e.g. serious -> Serious."""
    if not s:
        return s
    return s.replace("_", " ").strip().lower().title()


def _issue_block_md(i: IssueOut) -> List[str]:
    """One issue as Markdown: type · severity, then description, element, fix."""
    lines = []
    lines.append(f"**{i.type} · {_title_case(i.severity)}** (`{i.id}`)")
    lines.append("")
    lines.append(i.description)
    lines.append("")
    if i.selector:
        lines.append(f"- **Selector:** `{i.selector}`")
    lines.append("- **Element:**")
    lines.append("```html")
    lines.append(i.element)
    lines.append("```")
    lines.append("")
    if i.fix:
        lines.append("- **Fix:**")
        lines.append("```html")
        lines.append(i.fix)
        lines.append("```")
        lines.append("")
    return lines


def format_markdown_report(
    issues: List[IssueOut],
    tier: str,
    source: Optional[str] = None,
    generated_at: Optional[datetime] = None,
) -> str:
    """Format single-page scan results as Markdown, most severe issues first.

    A full-tier report also lists the criteria no rule checks, so the reader
    knows what still needs manual review.
    """
    generated_at = generated_at or datetime.now()
    lines = []
    lines.append(f"# Accessibility results: {source or 'page'}")
    lines.append("")
    lines.append(f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M:%S')} · Tier: {tier}")
    lines.append("")

    counts: Dict[str, int] = {s.value: 0 for s in Severity}
    for i in issues:
        counts[i.severity] += 1
    breakdown = ", ".join(f"{n} {s}" for s, n in counts.items())
    lines.append(f"**{len(issues)}** issue(s) found ({breakdown}).")
    lines.append("")

    lines.append("## Issues")
    lines.append("")
    if not issues:
        lines.append("No accessibility issues found.")
        lines.append("")
    else:
        for i in sorted(issues, key=lambda i: Severity(i.severity).rank):
            lines.extend(_issue_block_md(i))

    if tier == ScanTier.FULL.value:
        lines.append("## Manual review")
        lines.append("")
        for criterion, name in FULL_TIER_NOTES:
            lines.append(f"- {criterion} {name}")
        lines.append("")

    return "\n".join(lines)
