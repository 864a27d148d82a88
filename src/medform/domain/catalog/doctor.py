"""Doctor profile rules: create, update, verify, reject, status change."""

from __future__ import annotations

from medform.domain.constraints import (
    boolean_field,
    enum_field,
    integer,
    max_length,
    max_value,
    min_length,
    min_value,
    number_field,
    positive,
    string_field,
)
from medform.domain.records import (
    CreateDoctorRecord,
    RejectDoctorRecord,
    UpdateDoctorRecord,
    UpdateDoctorStatusRecord,
    VerifyDoctorRecord,
)
from medform.domain.rulespec import RuleSpec, relax_for_update
from medform.domain.types import DOCTOR_STATUSES, Action, Entity

DOCTOR_FIELDS = {
    "userId": string_field(
        min_length(1, "Please select a user"), required_message="User ID is required"
    ),
    "licenseNumber": string_field(
        min_length(5, "License number must be at least 5 characters"),
        max_length(100, "License number must not exceed 100 characters"),
        required_message="License number is required",
    ),
    "specialization": string_field(
        min_length(2, "Specialization must be at least 2 characters"),
        max_length(100, "Specialization must not exceed 100 characters"),
        required_message="Specialization is required",
    ),
    "experienceYears": number_field(
        integer("Experience must be a whole number"),
        min_value(0, "Experience cannot be negative"),
        max_value(50, "Experience cannot exceed 50 years"),
        required=False,
    ),
    "qualification": string_field(
        min_length(2, "Qualification must be at least 2 characters"),
        max_length(255, "Qualification is too long"),
        required=False,
        allow_empty=True,
    ),
    "consultationFee": number_field(
        positive("Consultation fee must be positive"),
        max_value(100000, "Consultation fee is too high"),
        required=False,
    ),
    "bio": string_field(
        max_length(1000, "Bio must not exceed 1000 characters"),
        required=False,
        allow_empty=True,
    ),
}

CREATE_DOCTOR = RuleSpec(
    entity=Entity.DOCTOR,
    action=Action.CREATE,
    fields=DOCTOR_FIELDS,
    record_type=CreateDoctorRecord,
    summary="Attach a doctor profile to an existing user.",
)

# The owning user is fixed once the profile exists; availability is update-only.
UPDATE_DOCTOR = RuleSpec(
    entity=Entity.DOCTOR,
    action=Action.UPDATE,
    fields=relax_for_update(
        DOCTOR_FIELDS,
        exclude=("userId",),
        extra={"available": boolean_field()},
    ),
    record_type=UpdateDoctorRecord,
    summary="Patch a doctor profile; only the fields sent are applied.",
)

VERIFY_DOCTOR = RuleSpec(
    entity=Entity.DOCTOR,
    action=Action.VERIFY,
    fields={
        "verified": boolean_field(required_message="Verification status is required"),
        "verificationNotes": string_field(max_length(500), required=False, allow_empty=True),
    },
    record_type=VerifyDoctorRecord,
    summary="Record the outcome of credential verification.",
)

REJECT_DOCTOR = RuleSpec(
    entity=Entity.DOCTOR,
    action=Action.REJECT,
    fields={
        "reason": string_field(
            min_length(10, "Reason must be at least 10 characters"),
            max_length(500, "Reason must not exceed 500 characters"),
            required_message="Rejection reason is required",
        ),
        "sendNotification": boolean_field(default=True),
    },
    record_type=RejectDoctorRecord,
    summary="Reject a doctor application with a substantive explanation.",
)

UPDATE_DOCTOR_STATUS = RuleSpec(
    entity=Entity.DOCTOR,
    action=Action.STATUS_UPDATE,
    fields={
        "status": enum_field(DOCTOR_STATUSES, required_message="Status is required"),
        "reason": string_field(max_length(500), required=False, allow_empty=True),
    },
    record_type=UpdateDoctorStatusRecord,
    summary="Change a doctor's account status.",
)

SPECS = (CREATE_DOCTOR, UPDATE_DOCTOR, VERIFY_DOCTOR, REJECT_DOCTOR, UPDATE_DOCTOR_STATUS)
