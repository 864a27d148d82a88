"""Rule specifications and the create -> update relaxation.

A :class:`RuleSpec` binds an ordered field table and a tuple of
refinements to exactly one (entity, action) pair.

INVARIANT: Specs are immutable. ``fields`` is exposed as a read-only
mapping and specs are defined once, at import time.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from medform.domain.constraints import FieldConstraint
from medform.domain.refinements import Refinement
from medform.domain.types import Action, Entity


@dataclass(frozen=True)
class RuleSpec:
    """Full constraint + refinement set for one (entity, action) pair."""

    entity: Entity
    action: Action
    fields: Mapping[str, FieldConstraint]
    refinements: tuple[Refinement, ...] = ()
    record_type: type | None = None
    summary: str = ""
    # Cached ordering of defaulted fields, derived in __post_init__.
    defaults: Mapping[str, Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "refinements", tuple(self.refinements))
        object.__setattr__(
            self,
            "defaults",
            MappingProxyType({k: c.default for k, c in self.fields.items() if c.has_default}),
        )

    @property
    def key(self) -> tuple[Entity, Action]:
        return (self.entity, self.action)

    @property
    def name(self) -> str:
        return f"{self.entity}:{self.action}"

    @property
    def required_fields(self) -> list[str]:
        return [k for k, c in self.fields.items() if c.required]

    def describe(self) -> dict[str, Any]:
        """Plain-data view of the spec for inspection and rendering."""
        return {
            "entity": str(self.entity),
            "action": str(self.action),
            "summary": self.summary,
            "fields": {name: c.describe() for name, c in self.fields.items()},
            "refinements": [r.describe() for r in self.refinements],
        }


def relax_for_update(
    base: Mapping[str, FieldConstraint],
    *,
    exclude: Iterable[str] = (),
    extra: Mapping[str, FieldConstraint] | None = None,
) -> dict[str, FieldConstraint]:
    """Derive an update field table from a create table.

    Every kept field becomes optional and loses its default, so an update
    only ever carries the fields the caller actually sent. *exclude* drops
    create-only fields; *extra* adds update-only fields, which are relaxed
    the same way. An *extra* entry named like a kept field replaces it in
    place.
    """
    skipped = set(exclude)
    unknown = skipped - set(base)
    if unknown:
        msg = f"Cannot exclude unknown fields: {', '.join(sorted(unknown))}"
        raise ValueError(msg)
    table = {name: c.relaxed() for name, c in base.items() if name not in skipped}
    for name, c in (extra or {}).items():
        table[name] = c.relaxed()
    return table
