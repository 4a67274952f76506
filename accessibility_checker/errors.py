"""
Exceptions raised by the accessibility checker.
"""


class AccessibilityCheckerError(Exception):
    """Base class for all checker errors."""


class MarkupParseError(AccessibilityCheckerError):
    """Markup could not be turned into a document tree at all."""


class InvalidScanTierError(AccessibilityCheckerError, ValueError):
    """Scan tier is not one of the supported values."""


class UnknownRuleError(AccessibilityCheckerError, KeyError):
    """No rule with the requested name is registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class FixNotApplicableError(AccessibilityCheckerError):
    """An issue's fix cannot be applied to the given markup."""
