"""Cross-field refinements: invariants that span more than one field.

A refinement is a predicate over the whole *normalized* record, plus the
message and field path reported when it fails. Refinements only ever see
records that passed every field constraint, so predicates may assume each
present value already has the right kind.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from medform.domain.verdict import FieldIssue

Predicate = Callable[[Mapping[str, Any]], bool]


@dataclass(frozen=True)
class Refinement:
    """A record-level predicate with its attached error."""

    predicate: Predicate
    message: str
    path: str
    name: str = "custom"

    def describe(self) -> dict[str, str]:
        return {"name": self.name, "path": self.path, "message": self.message}


def run_refinements(
    refinements: Iterable[Refinement],
    record: Mapping[str, Any],
) -> list[FieldIssue]:
    """Evaluate *refinements* in declaration order and collect every failure."""
    return [
        FieldIssue(path=r.path, message=r.message, kind="refinement")
        for r in refinements
        if not r.predicate(record)
    ]


def _present(record: Mapping[str, Any], field: str) -> bool:
    value = record.get(field)
    return value is not None and value != ""


# ---------------------------------------------------------------------------
# Predicate factories
# ---------------------------------------------------------------------------


def required_unless(
    field: str,
    *,
    selector: str,
    exempt: str,
    message: str,
) -> Refinement:
    """*field* must be present unless ``record[selector] == exempt``."""

    def predicate(record: Mapping[str, Any]) -> bool:
        return record.get(selector) == exempt or _present(record, field)

    return Refinement(predicate, message, field, name="required_unless")


def required_if_any(field: str, triggers: Iterable[str], message: str) -> Refinement:
    """*field* must be present once any of *triggers* is present."""
    trigger_fields = tuple(triggers)

    def predicate(record: Mapping[str, Any]) -> bool:
        if not any(_present(record, t) for t in trigger_fields):
            return True
        return _present(record, field)

    return Refinement(predicate, message, field, name="required_if_any")


def fields_match(field: str, confirmation: str, message: str) -> Refinement:
    """*confirmation* must equal *field*; reported on *confirmation*."""

    def predicate(record: Mapping[str, Any]) -> bool:
        return record.get(field) == record.get(confirmation)

    return Refinement(predicate, message, confirmation, name="fields_match")


def not_exceeding(field: str, limit: str, message: str) -> Refinement:
    """``record[field] <= record[limit]`` when both are present."""

    def predicate(record: Mapping[str, Any]) -> bool:
        value, bound = record.get(field), record.get(limit)
        if value is None or bound is None:
            return True
        return bool(value <= bound)

    return Refinement(predicate, message, field, name="not_exceeding")


def is_true(field: str, message: str) -> Refinement:
    """*field* must be exactly ``True``; absent fails."""

    def predicate(record: Mapping[str, Any]) -> bool:
        return record.get(field) is True

    return Refinement(predicate, message, field, name="is_true")
