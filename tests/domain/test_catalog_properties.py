"""Catalog-wide properties: defaults, update purity, idempotence."""

from __future__ import annotations

import pytest

from medform.domain.evaluator import validate
from medform.domain.registry import get_rule_spec, list_rule_specs
from medform.domain.types import Action
from tests.conftest import TODAY, catalog_keys, valid_record

KEYS = catalog_keys()
IDS = [f"{e}:{a}" for e, a in KEYS]


def test_every_spec_has_a_sample() -> None:
    assert {s.name for s in list_rule_specs()} == set(IDS)


@pytest.mark.parametrize(("entity", "action"), KEYS, ids=IDS)
class TestSampleRecords:
    def test_sample_is_accepted(self, entity: str, action: str) -> None:
        verdict = validate(get_rule_spec(entity, action), valid_record(entity, action), today=TODAY)
        assert verdict.ok, verdict.errors

    def test_defaults_present(self, entity: str, action: str) -> None:
        spec = get_rule_spec(entity, action)
        verdict = validate(spec, valid_record(entity, action), today=TODAY)
        for name, default in spec.defaults.items():
            assert verdict.record[name] == default

    def test_idempotent(self, entity: str, action: str) -> None:
        spec = get_rule_spec(entity, action)
        first = validate(spec, valid_record(entity, action), today=TODAY)
        second = validate(spec, first.record, today=TODAY)
        assert second.ok
        assert second.record == first.record


UPDATE_ENTITIES = [str(s.entity) for s in list_rule_specs() if s.action is Action.UPDATE]


@pytest.mark.parametrize("entity", UPDATE_ENTITIES)
class TestUpdateSpecs:
    def test_no_field_required_or_defaulted(self, entity: str) -> None:
        spec = get_rule_spec(entity, "update")
        assert spec.required_fields == []
        assert dict(spec.defaults) == {}

    def test_empty_patch_is_accepted_and_empty(self, entity: str) -> None:
        verdict = validate(get_rule_spec(entity, "update"), {}, today=TODAY)
        assert verdict.ok
        assert verdict.record == {}

    def test_never_introduces_fields(self, entity: str) -> None:
        patch = valid_record(entity, "update")
        verdict = validate(get_rule_spec(entity, "update"), patch, today=TODAY)
        assert verdict.ok
        assert set(verdict.record) <= set(patch)


def test_create_defaults_not_carried_to_update() -> None:
    verdict = validate(get_rule_spec("hospital", "update"), {"name": "Sunrise"}, today=TODAY)
    assert verdict.record == {"name": "Sunrise"}
