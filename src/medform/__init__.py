"""medform: validation rule catalog for the healthcare platform's records."""

from __future__ import annotations

from medform.domain.evaluator import validate
from medform.domain.registry import UnknownRuleSpecError, get_rule_spec, list_rule_specs
from medform.domain.verdict import FieldIssue, Verdict

__version__ = "0.3.0"

__all__ = [
    "FieldIssue",
    "UnknownRuleSpecError",
    "Verdict",
    "__version__",
    "get_rule_spec",
    "list_rule_specs",
    "validate",
]
