"""The generic rule interpreter.

``validate(spec, candidate)`` is a pure function of the rule spec, the
candidate mapping, and the evaluation day:

1. Every field constraint is evaluated (fail-fast within a field,
   accumulate-all across fields).
2. Only if no field failed, refinements run in declaration order on the
   normalized record and every failure is collected.

INVARIANT: A refinement never sees a record that failed field validation.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

from medform.domain.constraints import MISSING, Check, CheckKind, FieldConstraint, FieldKind
from medform.domain.patterns import EMAIL_PATTERN, UUID_PATTERN
from medform.domain.refinements import run_refinements
from medform.domain.rulespec import RuleSpec
from medform.domain.verdict import FieldIssue, Verdict

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)

_KIND_LABELS: dict[FieldKind, str] = {
    FieldKind.STRING: "string",
    FieldKind.UUID: "string",
    FieldKind.NUMBER: "number",
    FieldKind.BOOLEAN: "boolean",
    FieldKind.ENUM: "string",
    FieldKind.DATE: "date",
    FieldKind.STRING_LIST: "array",
}


class _KindError(Exception):
    """Raised internally when a raw value does not have the declared kind."""


def validate(
    spec: RuleSpec,
    candidate: Any,
    *,
    today: date | None = None,
) -> Verdict:
    """Run *spec* against *candidate* and return a fresh Verdict.

    Args:
        spec: The rule specification to apply.
        candidate: Untyped key/value input (parsed request body, form state).
        today: Evaluation day for past-date and current-year checks.
            Defaults to the local calendar day.
    """
    if not isinstance(candidate, Mapping):
        return Verdict.reject(
            [FieldIssue(path="", message=f"Expected object, received {_type_name(candidate)}")]
        )
    day = today or date.today()

    record: dict[str, Any] = {}
    errors: list[FieldIssue] = []
    for name, constraint in spec.fields.items():
        value, issue = evaluate_field(name, constraint, candidate.get(name, MISSING), today=day)
        if issue is not None:
            errors.append(issue)
        elif value is not MISSING:
            record[name] = value

    if errors:
        return Verdict.reject(errors)

    errors = run_refinements(spec.refinements, record)
    if errors:
        return Verdict.reject(errors)
    return Verdict.accept(record)


def evaluate_field(
    path: str,
    constraint: FieldConstraint,
    value: Any,
    *,
    today: date,
) -> tuple[Any, FieldIssue | None]:
    """Evaluate one field.

    Returns ``(normalized, None)`` on success, where *normalized* is
    ``MISSING`` when the field should be omitted from the record, or
    ``(MISSING, issue)`` on the first failing predicate.
    """
    if value is None and constraint.nullable:
        return None, None
    absent = value is MISSING or value is None
    if constraint.allow_empty and value == "":
        absent = True

    if absent:
        if constraint.required:
            return MISSING, FieldIssue(path=path, message=constraint.required_message)
        return constraint.default, None

    try:
        normalized = _coerce(constraint, value)
    except _KindError as exc:
        return MISSING, FieldIssue(path=path, message=str(exc))

    for check in constraint.checks:
        passed, normalized = _apply_check(check, normalized, today)
        if not passed:
            return MISSING, FieldIssue(path=path, message=check.message)
    return normalized, None


# ---------------------------------------------------------------------------
# Kind checks
# ---------------------------------------------------------------------------


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "nan" if isinstance(value, float) and math.isnan(value) else "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, (date, datetime)):
        return "date"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _kind_error(constraint: FieldConstraint, value: Any) -> _KindError:
    if constraint.invalid_message:
        return _KindError(constraint.invalid_message)
    expected = _KIND_LABELS[constraint.kind]
    return _KindError(f"Expected {expected}, received {_type_name(value)}")


def _coerce(constraint: FieldConstraint, value: Any) -> Any:
    kind = constraint.kind
    if kind is FieldKind.STRING:
        if not isinstance(value, str):
            raise _kind_error(constraint, value)
        return value

    if kind is FieldKind.UUID:
        if not isinstance(value, str) or UUID_PATTERN.match(value) is None:
            raise _kind_error(constraint, value)
        return value

    if kind is FieldKind.NUMBER:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _kind_error(constraint, value)
        if isinstance(value, float) and math.isnan(value):
            raise _kind_error(constraint, value)
        return value

    if kind is FieldKind.BOOLEAN:
        if not isinstance(value, bool):
            raise _kind_error(constraint, value)
        return value

    if kind is FieldKind.ENUM:
        if not isinstance(value, str) or value not in constraint.choices:
            if constraint.invalid_message:
                raise _KindError(constraint.invalid_message)
            options = ", ".join(f"'{c}'" for c in constraint.choices)
            raise _KindError(f"Invalid value {value!r}. Expected one of: {options}")
        return str(value)

    if kind is FieldKind.DATE:
        return _coerce_date(constraint, value)

    if kind is FieldKind.STRING_LIST:
        if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
            raise _kind_error(constraint, value)
        return list(value)

    msg = f"Unsupported field kind: {kind}"
    raise ValueError(msg)


def _coerce_date(constraint: FieldConstraint, value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            # fromisoformat accepts both date-only and full timestamps (incl. "Z").
            return datetime.fromisoformat(value).date()
        except ValueError:
            pass
    if constraint.invalid_message:
        raise _KindError(constraint.invalid_message)
    raise _KindError("Invalid date")


# ---------------------------------------------------------------------------
# Predicate checks
# ---------------------------------------------------------------------------


def _apply_check(check: Check, value: Any, today: date) -> tuple[bool, Any]:
    """Return ``(passed, value)``; integer checks normalize integral floats."""
    kind = check.kind
    if kind is CheckKind.MIN_LENGTH:
        return len(value) >= check.arg, value
    if kind is CheckKind.MAX_LENGTH:
        return len(value) <= check.arg, value
    if kind is CheckKind.PATTERN:
        return check.arg.search(value) is not None, value
    if kind is CheckKind.EMAIL:
        return EMAIL_PATTERN.match(value) is not None, value
    if kind is CheckKind.URL:
        return _is_url(value), value
    if kind is CheckKind.MIN_VALUE:
        return value >= check.arg, value
    if kind is CheckKind.MAX_VALUE:
        return value <= check.arg, value
    if kind is CheckKind.INTEGER:
        if isinstance(value, int):
            return True, value
        if math.isfinite(value) and value.is_integer():
            return True, int(value)
        return False, value
    if kind is CheckKind.POSITIVE:
        return value > 0, value
    if kind is CheckKind.NOT_PAST:
        return value >= today, value
    if kind is CheckKind.NOT_AFTER_CURRENT_YEAR:
        return value <= today.year, value
    msg = f"Unsupported check kind: {kind}"
    raise ValueError(msg)


def _is_url(value: str) -> bool:
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return True
