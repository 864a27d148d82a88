"""Authentication form rules: login, register, forgot/reset password."""

from __future__ import annotations

from medform.domain.constraints import (
    FieldConstraint,
    boolean_field,
    email,
    matches,
    max_length,
    min_length,
    string_field,
)
from medform.domain.patterns import (
    DIGIT_PATTERN,
    LOOSE_PHONE_PATTERN,
    LOWERCASE_PATTERN,
    UPPERCASE_PATTERN,
)
from medform.domain.records import (
    ForgotPasswordRecord,
    LoginRecord,
    RegisterRecord,
    ResetPasswordRecord,
)
from medform.domain.refinements import fields_match, is_true
from medform.domain.rulespec import RuleSpec
from medform.domain.types import Action, Entity

PASSWORD_MISMATCH = "Passwords don't match"


def _email_field() -> FieldConstraint:
    return string_field(
        min_length(1, "Email is required"),
        email("Invalid email address"),
        required_message="Email is required",
    )


def _new_password_field() -> FieldConstraint:
    return string_field(
        min_length(8, "Password must be at least 8 characters"),
        max_length(100, "Password is too long"),
        matches(UPPERCASE_PATTERN, "Password must contain at least one uppercase letter"),
        matches(LOWERCASE_PATTERN, "Password must contain at least one lowercase letter"),
        matches(DIGIT_PATTERN, "Password must contain at least one number"),
    )


LOGIN = RuleSpec(
    entity=Entity.AUTH,
    action=Action.LOGIN,
    fields={
        "email": _email_field(),
        "password": string_field(
            min_length(6, "Password must be at least 6 characters"),
            max_length(100, "Password is too long"),
        ),
    },
    record_type=LoginRecord,
    summary="Sign in with email and password.",
)

REGISTER = RuleSpec(
    entity=Entity.AUTH,
    action=Action.REGISTER,
    fields={
        "name": string_field(
            min_length(2, "Name must be at least 2 characters"),
            max_length(100, "Name is too long"),
        ),
        "email": _email_field(),
        "phone": string_field(
            matches(LOOSE_PHONE_PATTERN, "Invalid phone number"),
            required=False,
            allow_empty=True,
        ),
        "password": _new_password_field(),
        "confirmPassword": string_field(),
        "agreeToTerms": boolean_field(required=False),
    },
    refinements=(
        is_true("agreeToTerms", "You must agree to terms and conditions"),
        fields_match("password", "confirmPassword", PASSWORD_MISMATCH),
    ),
    record_type=RegisterRecord,
    summary="Self-service account registration.",
)

FORGOT_PASSWORD = RuleSpec(
    entity=Entity.AUTH,
    action=Action.FORGOT_PASSWORD,
    fields={"email": _email_field()},
    record_type=ForgotPasswordRecord,
    summary="Request a password reset link.",
)

RESET_PASSWORD = RuleSpec(
    entity=Entity.AUTH,
    action=Action.RESET_PASSWORD,
    fields={
        "password": _new_password_field(),
        "confirmPassword": string_field(),
    },
    refinements=(fields_match("password", "confirmPassword", PASSWORD_MISMATCH),),
    record_type=ResetPasswordRecord,
    summary="Choose a new password from a reset link.",
)

SPECS = (LOGIN, REGISTER, FORGOT_PASSWORD, RESET_PASSWORD)
