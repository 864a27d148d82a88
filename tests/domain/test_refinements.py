"""Tests for cross-field refinement factories."""

from __future__ import annotations

from medform.domain.refinements import (
    fields_match,
    is_true,
    not_exceeding,
    required_if_any,
    required_unless,
    run_refinements,
)


class TestRequiredUnless:
    REF = required_unless("email", selector="role", exempt="patient", message="need email")

    def test_exempt_role_passes_without_field(self) -> None:
        assert self.REF.predicate({"role": "patient"})

    def test_other_role_requires_field(self) -> None:
        assert not self.REF.predicate({"role": "doctor"})
        assert not self.REF.predicate({"role": "doctor", "email": ""})
        assert self.REF.predicate({"role": "doctor", "email": "d@example.com"})

    def test_attaches_to_field(self) -> None:
        assert self.REF.path == "email"


class TestRequiredIfAny:
    REF = required_if_any("adminEmail", ("adminPhone", "adminEmail"), "need admin email")

    def test_no_trigger(self) -> None:
        assert self.REF.predicate({})

    def test_trigger_without_field(self) -> None:
        assert not self.REF.predicate({"adminPhone": "+919876543210"})

    def test_trigger_with_field(self) -> None:
        assert self.REF.predicate({"adminPhone": "+919876543210", "adminEmail": "a@b.in"})


class TestFieldsMatch:
    def test_reports_on_confirmation(self) -> None:
        ref = fields_match("password", "confirmPassword", "Passwords do not match")
        assert ref.path == "confirmPassword"
        assert ref.predicate({"password": "x", "confirmPassword": "x"})
        assert not ref.predicate({"password": "x", "confirmPassword": "y"})


class TestNotExceeding:
    REF = not_exceeding("availableBeds", "totalBeds", "too many")

    def test_bounds(self) -> None:
        assert self.REF.predicate({"availableBeds": 100, "totalBeds": 100})
        assert not self.REF.predicate({"availableBeds": 150, "totalBeds": 100})

    def test_absent_side_passes(self) -> None:
        assert self.REF.predicate({"availableBeds": 150})


class TestIsTrue:
    def test_only_true_passes(self) -> None:
        ref = is_true("agreeToTerms", "must agree")
        assert ref.predicate({"agreeToTerms": True})
        assert not ref.predicate({"agreeToTerms": False})
        assert not ref.predicate({})
        assert not ref.predicate({"agreeToTerms": 1})


class TestRunRefinements:
    def test_declaration_order(self) -> None:
        issues = run_refinements(
            [
                is_true("agreeToTerms", "must agree"),
                fields_match("password", "confirmPassword", "mismatch"),
            ],
            {"password": "a", "confirmPassword": "b"},
        )
        assert [(i.path, i.message, i.kind) for i in issues] == [
            ("agreeToTerms", "must agree", "refinement"),
            ("confirmPassword", "mismatch", "refinement"),
        ]

    def test_describe(self) -> None:
        assert is_true("agreeToTerms", "must agree").describe() == {
            "name": "is_true",
            "path": "agreeToTerms",
            "message": "must agree",
        }
