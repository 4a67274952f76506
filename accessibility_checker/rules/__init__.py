"""
Rule catalog, in the fixed order issues are reported.
"""

from typing import Dict, Tuple

from ..errors import UnknownRuleError
from ..rule_base import Rule
from . import operable, perceivable, robust, understandable

RULES: Tuple[Rule, ...] = (
    perceivable.RULES
    + operable.RULES
    + understandable.RULES
    + robust.RULES
)

_RULES_BY_NAME: Dict[str, Rule] = {rule.name: rule for rule in RULES}


def get_rule(name: str) -> Rule:
    """Look up a rule by name."""
    try:
        return _RULES_BY_NAME[name]
    except KeyError:
        raise UnknownRuleError(f"Unknown rule: {name}") from None


def rule_names() -> Tuple[str, ...]:
    return tuple(rule.name for rule in RULES)


__all__ = ["RULES", "get_rule", "rule_names"]
