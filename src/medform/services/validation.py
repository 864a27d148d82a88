"""ValidationService: run catalog rule specs on behalf of callers.

Wraps the pure core (:func:`medform.domain.evaluator.validate`) with spec
lookup, evaluation-day resolution, logging, and ServiceResult mapping.
A rejected verdict is a normal outcome and is reported as a
``VALIDATION_FAILED`` error result, never raised.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from medform.config.logging import rule_context
from medform.domain.evaluator import validate
from medform.domain.registry import (
    UnknownRuleSpecError,
    actions_for,
    get_rule_spec,
    list_rule_specs,
)
from medform.domain.rulespec import RuleSpec
from medform.services.base import BaseService
from medform.services.result import (
    INVALID_INPUT,
    UNKNOWN_RULE_SPEC,
    VALIDATION_FAILED,
    ServiceResult,
)

logger = logging.getLogger(__name__)


def _catalog_keys() -> list[str]:
    return [spec.name for spec in list_rule_specs()]


class ValidationService(BaseService):
    """Validates candidate records and exposes the rule catalog."""

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, entity: str, action: str, candidate: Any) -> ServiceResult:
        """Validate *candidate* against the spec registered for *entity*/*action*."""
        op = "validate"
        spec = self._lookup(entity, action)
        if spec is None:
            return self._unknown(op, entity, action)

        today = self._today()
        meta = {"spec": spec.name, "today": today.isoformat()}

        if not isinstance(candidate, Mapping):
            return ServiceResult.failure(
                op,
                INVALID_INPUT,
                f"Expected a JSON object, received {type(candidate).__name__}",
                meta=meta,
            )

        with rule_context(spec.name):
            verdict = validate(spec, candidate, today=today)
            payload = verdict.model_dump(mode="json")

            if not verdict.ok:
                logger.debug("Rejected with %d error(s)", len(verdict.errors))
                count = len(verdict.errors)
                noun = "error" if count == 1 else "errors"
                return ServiceResult.failure(
                    op,
                    VALIDATION_FAILED,
                    f"{count} validation {noun} for {spec.name}",
                    detail={"errors": payload["errors"]},
                    meta=meta,
                )

            ignored = sorted(str(k) for k in candidate if k not in spec.fields)
            if ignored:
                logger.debug("Stripped unknown fields: %s", ", ".join(ignored))
            logger.debug("Accepted")

        return ServiceResult(
            ok=True,
            op=op,
            data={"spec": spec.name, "record": payload["record"]},
            warnings=[f"Ignored unknown field: {name}" for name in ignored],
            meta=meta,
        )

    # ------------------------------------------------------------------
    # Catalog inspection
    # ------------------------------------------------------------------

    def list_rules(self, entity: str | None = None) -> ServiceResult:
        """Summarize every registered spec, optionally for one entity."""
        items = [
            {
                "id": spec.name,
                "entity": str(spec.entity),
                "action": str(spec.action),
                "summary": spec.summary,
                "field_count": len(spec.fields),
                "required": spec.required_fields,
            }
            for spec in list_rule_specs(entity)
        ]
        return ServiceResult(ok=True, op="rules", data={"count": len(items), "items": items})

    def describe(self, entity: str, action: str) -> ServiceResult:
        """Return the full field table and refinements for one spec."""
        spec = self._lookup(entity, action)
        if spec is None:
            return self._unknown("describe", entity, action)
        return ServiceResult(ok=True, op="describe", data=spec.describe())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _lookup(entity: str, action: str) -> RuleSpec | None:
        try:
            return get_rule_spec(entity, action)
        except UnknownRuleSpecError:
            logger.debug("No rule spec for %s:%s", entity, action)
            return None

    @staticmethod
    def _unknown(op: str, entity: str, action: str) -> ServiceResult:
        return ServiceResult.failure(
            op,
            UNKNOWN_RULE_SPEC,
            f"No rule specification for {entity}:{action}",
            detail={
                "entity": entity,
                "action": action,
                "supported_actions": actions_for(entity),
                "known": _catalog_keys(),
            },
        )
