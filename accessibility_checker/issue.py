"""
Issue data models for the accessibility checker.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from .errors import InvalidScanTierError


class Severity(Enum):
    """Issue severity levels, critical highest."""
    CRITICAL = "critical"
    SERIOUS = "serious"
    MODERATE = "moderate"
    MINOR = "minor"

    @property
    def rank(self) -> int:
        """0 for critical up to 3 for minor."""
        return _SEVERITY_ORDER.index(self)


_SEVERITY_ORDER = (Severity.CRITICAL, Severity.SERIOUS, Severity.MODERATE, Severity.MINOR)


class ScanTier(Enum):
    """Breadth of the rule set selected for one scan."""
    STANDARD = "standard"
    FULL = "full"

    @classmethod
    def parse(cls, value: Union["ScanTier", str]) -> "ScanTier":
        """Accept an enum member or a case-insensitive tier name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidScanTierError(
            f"Unknown scan tier {value!r}; expected one of: "
            + ", ".join(t.value for t in cls)
        )


class Principle(Enum):
    """WCAG principle a rule belongs to."""
    PERCEIVABLE = "perceivable"
    OPERABLE = "operable"
    UNDERSTANDABLE = "understandable"
    ROBUST = "robust"


@dataclass(frozen=True)
class Issue:
    """Represents a single accessibility issue found in a page."""
    id: str
    type: str
    element: str
    description: str
    severity: Severity
    fix: Optional[str] = None
    message: Optional[str] = None
    selector: Optional[str] = None
    impact: Optional[Severity] = None

    def to_dict(self) -> Dict[str, Any]:
        """Plain record for transport or storage; unset optional fields are omitted."""
        record: Dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "element": self.element,
            "description": self.description,
            "severity": self.severity.value,
        }
        for name in ("fix", "message", "selector"):
            value = getattr(self, name)
            if value is not None:
                record[name] = value
        if self.impact is not None:
            record["impact"] = self.impact.value
        return record
