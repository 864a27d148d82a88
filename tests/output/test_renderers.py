"""Tests for the Rich renderers, dispatched by ServiceResult.op."""

from __future__ import annotations

from medform.output.renderers import render_quiet, render_result
from medform.services.result import (
    INVALID_INPUT,
    UNKNOWN_RULE_SPEC,
    VALIDATION_FAILED,
    ServiceResult,
)
from medform.services.validation import ValidationService


def _rejected(*errors: tuple[str, str, str]) -> ServiceResult:
    return ServiceResult.failure(
        "validate",
        VALIDATION_FAILED,
        f"{len(errors)} validation errors for auth:register",
        detail={"errors": [{"path": p, "message": m, "kind": k} for p, m, k in errors]},
        meta={"spec": "auth:register", "today": "2026-03-15"},
    )


class TestRenderValidate:
    def test_accepted_record(self) -> None:
        result = ServiceResult(
            ok=True,
            op="validate",
            data={
                "spec": "doctor:reject",
                "record": {"reason": "Unverifiable", "sendNotification": True},
            },
            meta={"spec": "doctor:reject", "today": "2026-03-15"},
        )
        output = render_result(result)
        lines = [line.split() for line in output.splitlines()]
        assert lines[0] == ["OK", "validate", "doctor:reject"]
        assert ["reason:", "Unverifiable"] in lines
        assert ["sendNotification:", "True"] in lines
        assert "today" not in output

    def test_verbose_shows_meta(self) -> None:
        result = ServiceResult(
            ok=True,
            op="validate",
            data={"spec": "auth:login", "record": {}},
            meta={"today": "2026-03-15"},
        )
        assert "today: 2026-03-15" in render_result(result, verbose=True)


class TestRenderErrors:
    def test_issue_table(self) -> None:
        output = render_result(
            _rejected(
                ("agreeToTerms", "You must agree to terms and conditions", "refinement"),
                ("confirmPassword", "Passwords don't match", "refinement"),
            )
        )
        assert output.splitlines()[0].split()[:2] == ["ERROR", "validate"]
        assert "Field" in output
        assert "agreeToTerms" in output
        assert "Passwords don't match" in output
        assert "Kind" not in output

    def test_verbose_adds_kind_and_meta(self) -> None:
        output = render_result(_rejected(("email", "Required", "field")), verbose=True)
        assert "Kind" in output
        assert "field" in output
        assert "spec: auth:register" in output

    def test_record_level_issue(self) -> None:
        output = render_result(_rejected(("", "Expected object, received array", "field")))
        assert "(record)" in output

    def test_plain_error(self) -> None:
        result = ServiceResult.failure("validate", INVALID_INPUT, "Invalid JSON input")
        output = render_result(result)
        assert "ERROR" in output
        assert "Invalid JSON input" in output

    def test_verbose_detail(self) -> None:
        result = ServiceResult.failure(
            "describe",
            UNKNOWN_RULE_SPEC,
            "No rule specification for auth:logout",
            detail={"entity": "auth", "action": "logout"},
        )
        assert "action: logout" in render_result(result, verbose=True)


class TestRenderCatalog:
    def test_rules_table(self, settings) -> None:
        output = render_result(ValidationService(settings).list_rules("doctor"), width=160)
        assert "Rule specifications (5)" in output
        assert "status-update" in output

    def test_describe(self, settings) -> None:
        result = ValidationService(settings).describe("hospital-operational", "save")
        output = render_result(result, width=200)
        assert output.splitlines()[0] == "hospital-operational:save"
        assert "zipCode" in output
        assert "Refinements" in output
        assert "not_exceeding -> availableBeds: Available beds cannot exceed total beds" in output

    def test_describe_defaults(self, settings) -> None:
        result = ValidationService(settings).describe("hospital", "reject")
        output = render_result(result, width=200)
        assert "notifyAdmin" in output
        assert "True" in output
        assert "Refinements" not in output


class TestRenderGeneric:
    def test_unknown_op(self) -> None:
        output = render_result(ServiceResult(ok=True, op="ping", data={"status": "up"}))
        lines = [line.split() for line in output.splitlines()]
        assert lines[0] == ["OK", "ping"]
        assert ["status:", "up"] in lines


class TestRenderQuiet:
    def test_ok(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="validate")) == "OK: validate"

    def test_item_ids(self) -> None:
        result = ServiceResult(
            ok=True, op="rules", data={"items": [{"id": "auth:login"}, {"id": "auth:register"}]}
        )
        assert render_quiet(result) == "auth:login\nauth:register"

    def test_issue_lines(self) -> None:
        result = _rejected(("email", "Required", "field"), ("password", "Required", "field"))
        assert render_quiet(result) == "email: Required\npassword: Required"

    def test_plain_error(self) -> None:
        result = ServiceResult.failure("validate", INVALID_INPUT, "Invalid JSON input")
        assert render_quiet(result) == "ERROR: validate — Invalid JSON input"
