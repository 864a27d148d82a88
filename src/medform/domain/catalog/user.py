"""User account rules: create, update, status change, password reset.

Patients self-register phone-first, so email and password are optional at
the field level. Every staff role needs institutional login credentials;
that requirement is enforced by role-conditional refinements.
"""

from __future__ import annotations

from medform.domain.constraints import (
    date_field,
    email,
    enum_field,
    matches,
    max_length,
    min_length,
    string_field,
    url,
    uuid_field,
)
from medform.domain.patterns import STRONG_PASSWORD_PATTERN, USER_PHONE_PATTERN
from medform.domain.records import (
    CreateUserRecord,
    ResetUserPasswordRecord,
    UpdateUserRecord,
    UpdateUserStatusRecord,
)
from medform.domain.refinements import fields_match, required_unless
from medform.domain.rulespec import RuleSpec, relax_for_update
from medform.domain.types import Action, Entity, Gender, RecordStatus, UserRole

STRONG_PASSWORD_MESSAGE = (
    "Password must be at least 8 characters with uppercase, lowercase, "
    "number, and special character"
)

USER_PHONE_FORMAT = matches(USER_PHONE_PATTERN, "Phone must be in format: +91XXXXXXXXXX")

USER_FIELDS = {
    "email": string_field(email("Invalid email address"), required=False, allow_empty=True),
    "phone": string_field(
        min_length(1, "Phone number is required"),
        USER_PHONE_FORMAT,
        required_message="Phone number is required",
    ),
    "password": string_field(
        matches(STRONG_PASSWORD_PATTERN, STRONG_PASSWORD_MESSAGE),
        required=False,
        allow_empty=True,
    ),
    "firstName": string_field(
        min_length(2, "First name must be at least 2 characters"),
        max_length(50, "First name must not exceed 50 characters"),
    ),
    "lastName": string_field(
        min_length(2, "Last name must be at least 2 characters"),
        max_length(50, "Last name must not exceed 50 characters"),
    ),
    "dateOfBirth": date_field(required=False, nullable=True),
    "gender": enum_field(Gender, required=False, nullable=True),
    "role": enum_field(UserRole, required_message="Role is required"),
    "hospitalId": uuid_field("Invalid hospital ID", required=False, nullable=True),
}

CREATE_USER = RuleSpec(
    entity=Entity.USER,
    action=Action.CREATE,
    fields=USER_FIELDS,
    refinements=(
        required_unless(
            "email",
            selector="role",
            exempt=UserRole.PATIENT,
            message="Email is required for doctors, hospital admins, and super admins",
        ),
        required_unless(
            "password",
            selector="role",
            exempt=UserRole.PATIENT,
            message="Password is required for doctors, hospital admins, and super admins",
        ),
    ),
    record_type=CreateUserRecord,
    summary="Create a user account for any platform role.",
)

# Role, credentials and hospital binding change through dedicated flows.
# A patched phone keeps its position but only the format check.
UPDATE_USER = RuleSpec(
    entity=Entity.USER,
    action=Action.UPDATE,
    fields=relax_for_update(
        USER_FIELDS,
        exclude=("password", "role", "hospitalId"),
        extra={
            "phone": string_field(USER_PHONE_FORMAT, required=False),
            "profilePicture": string_field(
                url("Invalid profile picture URL"), required=False, nullable=True
            ),
        },
    ),
    record_type=UpdateUserRecord,
    summary="Patch a user's profile; only the fields sent are applied.",
)

UPDATE_USER_STATUS = RuleSpec(
    entity=Entity.USER,
    action=Action.STATUS_UPDATE,
    fields={
        "status": enum_field(RecordStatus, required_message="Status is required"),
        "reason": string_field(
            min_length(10, "Reason must be at least 10 characters"),
            max_length(500, "Reason must not exceed 500 characters"),
            required=False,
        ),
    },
    record_type=UpdateUserStatusRecord,
    summary="Change a user's account status.",
)

RESET_USER_PASSWORD = RuleSpec(
    entity=Entity.USER,
    action=Action.RESET_PASSWORD,
    fields={
        "newPassword": string_field(
            min_length(8, "Password must be at least 8 characters"),
            matches(
                STRONG_PASSWORD_PATTERN,
                "Password must contain uppercase, lowercase, number, and special character",
            ),
        ),
        "confirmPassword": string_field(min_length(1, "Please confirm your password")),
    },
    refinements=(fields_match("newPassword", "confirmPassword", "Passwords do not match"),),
    record_type=ResetUserPasswordRecord,
    summary="Administrative password reset for a user account.",
)

SPECS = (CREATE_USER, UPDATE_USER, UPDATE_USER_STATUS, RESET_USER_PASSWORD)
