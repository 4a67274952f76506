"""
Accessibility checker: audits page markup against automatable WCAG criteria.
"""

from .consistency import check_consistency
from .contrast import contrast_ratio, parse_color, relative_luminance
from .document import Document, parse
from .errors import (
    AccessibilityCheckerError,
    FixNotApplicableError,
    InvalidScanTierError,
    MarkupParseError,
    UnknownRuleError,
)
from .fixes import apply_fix
from .issue import Issue, Principle, ScanTier, Severity
from .main_checker import AccessibilityChecker, scan
from .reporter import ReportGenerator
from .rules import RULES, get_rule
from .selector import selector_for

__all__ = [
    'AccessibilityChecker',
    'AccessibilityCheckerError',
    'Document',
    'FixNotApplicableError',
    'InvalidScanTierError',
    'Issue',
    'MarkupParseError',
    'Principle',
    'RULES',
    'ReportGenerator',
    'ScanTier',
    'Severity',
    'UnknownRuleError',
    'apply_fix',
    'check_consistency',
    'contrast_ratio',
    'get_rule',
    'parse',
    'parse_color',
    'relative_luminance',
    'scan',
    'selector_for',
]
