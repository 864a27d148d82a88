"""Hospital onboarding rules: create, update, status change, rejection.

Provisioning a hospital may also bootstrap its first admin account. The
admin sub-fields are individually optional, but once any of them is sent
the admin's email and password become mandatory.
"""

from __future__ import annotations

from medform.domain.constraints import (
    boolean_field,
    email,
    enum_field,
    integer,
    matches,
    max_length,
    max_value,
    min_length,
    min_value,
    number_field,
    string_field,
    string_list_field,
    url,
)
from medform.domain.patterns import PHONE_PATTERN, PINCODE_PATTERN
from medform.domain.records import (
    CreateHospitalRecord,
    RejectHospitalRecord,
    UpdateHospitalRecord,
    UpdateHospitalStatusRecord,
)
from medform.domain.refinements import required_if_any
from medform.domain.rulespec import RuleSpec, relax_for_update
from medform.domain.types import Action, Entity, HospitalType, RecordStatus

ADMIN_FIELDS = ("adminEmail", "adminPhone", "adminFirstName", "adminLastName", "adminPassword")

HOSPITAL_FIELDS = {
    "name": string_field(
        min_length(3, "Hospital name must be at least 3 characters"),
        max_length(200, "Hospital name must not exceed 200 characters"),
    ),
    "type": enum_field(HospitalType, "Please select a valid hospital type"),
    "email": string_field(email("Please enter a valid email address")),
    "phone": string_field(matches(PHONE_PATTERN, "Please enter a valid Indian phone number")),
    "address": string_field(min_length(10, "Address must be at least 10 characters")),
    "city": string_field(min_length(2, "City name must be at least 2 characters")),
    "state": string_field(min_length(2, "State name must be at least 2 characters")),
    "country": string_field(required=False, default="India"),
    "pincode": string_field(matches(PINCODE_PATTERN, "Pincode must be 6 digits")),
    "latitude": number_field(min_value(-90), max_value(90), required=False),
    "longitude": number_field(min_value(-180), max_value(180), required=False),
    "website": string_field(
        url("Please enter a valid website URL"), required=False, allow_empty=True
    ),
    "description": string_field(
        max_length(1000, "Description must not exceed 1000 characters"), required=False
    ),
    "facilities": string_list_field(),
    "totalBeds": number_field(
        integer(),
        min_value(0, "Total beds must be a positive number"),
        required=False,
    ),
    "isEmergency": boolean_field(default=False),
    "is24x7": boolean_field(default=False),
    "adminEmail": string_field(email(), required=False, allow_empty=True),
    "adminPhone": string_field(
        matches(PHONE_PATTERN, "Please enter a valid Indian phone number"),
        required=False,
        allow_empty=True,
    ),
    "adminFirstName": string_field(min_length(2), max_length(100), required=False),
    "adminLastName": string_field(min_length(2), max_length(100), required=False),
    "adminPassword": string_field(
        min_length(8, "Password must be at least 8 characters"), required=False
    ),
    "commissionRate": number_field(min_value(0), max_value(100), default=12),
}

CREATE_HOSPITAL = RuleSpec(
    entity=Entity.HOSPITAL,
    action=Action.CREATE,
    fields=HOSPITAL_FIELDS,
    refinements=(
        required_if_any(
            "adminEmail",
            ADMIN_FIELDS,
            "Admin email is required when provisioning a hospital admin",
        ),
        required_if_any(
            "adminPassword",
            ADMIN_FIELDS,
            "Admin password is required when provisioning a hospital admin",
        ),
    ),
    record_type=CreateHospitalRecord,
    summary="Register a hospital, optionally bootstrapping its admin account.",
)

UPDATE_HOSPITAL = RuleSpec(
    entity=Entity.HOSPITAL,
    action=Action.UPDATE,
    fields=relax_for_update(HOSPITAL_FIELDS, exclude=ADMIN_FIELDS),
    record_type=UpdateHospitalRecord,
    summary="Patch hospital details; only the fields sent are applied.",
)

UPDATE_HOSPITAL_STATUS = RuleSpec(
    entity=Entity.HOSPITAL,
    action=Action.STATUS_UPDATE,
    fields={
        "status": enum_field(RecordStatus, required_message="Status is required"),
        "reason": string_field(max_length(500), required=False),
    },
    record_type=UpdateHospitalStatusRecord,
    summary="Change a hospital's account status.",
)

REJECT_HOSPITAL = RuleSpec(
    entity=Entity.HOSPITAL,
    action=Action.REJECT,
    fields={
        "reason": string_field(
            min_length(10, "Rejection reason must be at least 10 characters"),
            max_length(500, "Rejection reason must not exceed 500 characters"),
            required_message="Rejection reason is required",
        ),
        "notifyAdmin": boolean_field(default=True),
    },
    record_type=RejectHospitalRecord,
    summary="Reject a pending hospital with a substantive explanation.",
)

SPECS = (CREATE_HOSPITAL, UPDATE_HOSPITAL, UPDATE_HOSPITAL_STATUS, REJECT_HOSPITAL)
