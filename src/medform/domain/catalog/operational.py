"""Operational hospital profile (geo + bed capacity).

This form belongs to a different bounded context from onboarding: it
uses ``zipCode`` rather than ``pincode``, and location and bed capacity
are mandatory. The two hospital shapes are kept as separate specs.
"""

from __future__ import annotations

from medform.domain.constraints import (
    boolean_field,
    email,
    integer,
    matches,
    max_length,
    max_value,
    min_length,
    min_value,
    not_after_current_year,
    number_field,
    string_field,
    url,
)
from medform.domain.patterns import LOOSE_PHONE_PATTERN
from medform.domain.records import OperationalHospitalRecord
from medform.domain.refinements import not_exceeding
from medform.domain.rulespec import RuleSpec
from medform.domain.types import Action, Entity

SAVE_OPERATIONAL_HOSPITAL = RuleSpec(
    entity=Entity.HOSPITAL_OPERATIONAL,
    action=Action.SAVE,
    fields={
        "name": string_field(
            min_length(3, "Hospital name must be at least 3 characters"),
            max_length(200, "Hospital name is too long"),
        ),
        "email": string_field(
            min_length(1, "Email is required"),
            email("Invalid email address"),
        ),
        "phone": string_field(
            min_length(10, "Phone number must be at least 10 digits"),
            matches(LOOSE_PHONE_PATTERN, "Invalid phone number"),
        ),
        "address": string_field(
            min_length(5, "Address must be at least 5 characters"),
            max_length(500, "Address is too long"),
        ),
        "city": string_field(
            min_length(2, "City name must be at least 2 characters"),
            max_length(100, "City name is too long"),
        ),
        "state": string_field(
            min_length(2, "State name must be at least 2 characters"),
            max_length(100, "State name is too long"),
        ),
        "country": string_field(
            min_length(2, "Country name must be at least 2 characters"),
            max_length(100, "Country name is too long"),
        ),
        "zipCode": string_field(
            min_length(4, "ZIP code must be at least 4 characters"),
            max_length(10, "ZIP code is too long"),
        ),
        "latitude": number_field(
            min_value(-90, "Invalid latitude"), max_value(90, "Invalid latitude")
        ),
        "longitude": number_field(
            min_value(-180, "Invalid longitude"), max_value(180, "Invalid longitude")
        ),
        "totalBeds": number_field(
            integer("Total beds must be a whole number"),
            min_value(1, "Total beds must be at least 1"),
            max_value(10000, "Total beds cannot exceed 10,000"),
        ),
        "availableBeds": number_field(
            integer("Available beds must be a whole number"),
            min_value(0, "Available beds cannot be negative"),
        ),
        "emergencyService": boolean_field(),
        "ambulanceService": boolean_field(),
        "website": string_field(url("Invalid website URL"), required=False, allow_empty=True),
        "description": string_field(
            max_length(1000, "Description is too long"), required=False
        ),
        "licenseNumber": string_field(
            min_length(5, "License number must be at least 5 characters"),
            max_length(50, "License number is too long"),
        ),
        "establishedYear": number_field(
            integer("Established year must be a whole number"),
            min_value(1800, "Invalid established year"),
            not_after_current_year("Established year cannot be in the future"),
        ),
    },
    refinements=(
        not_exceeding("availableBeds", "totalBeds", "Available beds cannot exceed total beds"),
    ),
    record_type=OperationalHospitalRecord,
    summary="Save a hospital's operational profile (location, capacity, services).",
)

SPECS = (SAVE_OPERATIONAL_HOSPITAL,)
