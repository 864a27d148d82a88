"""Rule specification registry.

Maps every supported (entity, action) pair to its RuleSpec. The registry
is built once at import time from the catalog modules and never mutated.
"""

from __future__ import annotations

from types import MappingProxyType

from medform.domain.catalog import ALL_SPECS
from medform.domain.rulespec import RuleSpec
from medform.domain.types import Action, Entity


class UnknownRuleSpecError(LookupError):
    """No rule specification is registered for the requested pair."""

    def __init__(self, entity: str, action: str) -> None:
        super().__init__(f"No rule specification for {entity}:{action}")
        self.entity = entity
        self.action = action


def _build_registry() -> dict[tuple[Entity, Action], RuleSpec]:
    registry: dict[tuple[Entity, Action], RuleSpec] = {}
    for spec in ALL_SPECS:
        if spec.key in registry:
            msg = f"Duplicate rule specification for {spec.name}"
            raise ValueError(msg)
        registry[spec.key] = spec
    return registry


RULE_REGISTRY = MappingProxyType(_build_registry())


def get_rule_spec(entity: str, action: str) -> RuleSpec:
    """Look up the spec for *entity* / *action* (enum members or raw strings).

    Raises:
        UnknownRuleSpecError: If the pair is not part of the catalog.
    """
    try:
        key = (Entity(entity), Action(action))
    except ValueError:
        raise UnknownRuleSpecError(str(entity), str(action)) from None
    spec = RULE_REGISTRY.get(key)
    if spec is None:
        raise UnknownRuleSpecError(str(entity), str(action))
    return spec


def list_rule_specs(entity: str | None = None) -> list[RuleSpec]:
    """Every registered spec in catalog order, optionally for one entity."""
    specs = list(RULE_REGISTRY.values())
    if entity is None:
        return specs
    return [s for s in specs if s.entity == entity]


def actions_for(entity: str) -> list[str]:
    """Supported actions for *entity*, in catalog order."""
    return [str(s.action) for s in list_rule_specs(entity)]
