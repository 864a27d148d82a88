"""Appointment rules: booking, edits, status changes, cancel, reschedule.

Booking and rescheduling both reject dates strictly before the evaluation
day; same-day appointments are allowed.
"""

from __future__ import annotations

from medform.domain.constraints import (
    date_field,
    enum_field,
    matches,
    max_length,
    max_value,
    min_length,
    min_value,
    not_past,
    number_field,
    string_field,
    uuid_field,
)
from medform.domain.patterns import TIME_PATTERN
from medform.domain.records import (
    CancelAppointmentRecord,
    CreateAppointmentRecord,
    RescheduleAppointmentRecord,
    UpdateAppointmentRecord,
    UpdateAppointmentStatusRecord,
)
from medform.domain.rulespec import RuleSpec, relax_for_update
from medform.domain.types import Action, AppointmentStatus, AppointmentType, CancelledBy, Entity

TIME_MESSAGE = "Invalid time format (HH:mm)"

APPOINTMENT_FIELDS = {
    "patientId": uuid_field("Invalid patient ID", required_message="Patient is required"),
    "doctorId": uuid_field("Invalid doctor ID", required_message="Doctor is required"),
    "hospitalId": uuid_field("Invalid hospital ID", required_message="Hospital is required"),
    "appointmentDate": date_field(
        not_past("Appointment date cannot be in the past"),
        required_message="Appointment date is required",
    ),
    "startTime": string_field(matches(TIME_PATTERN, TIME_MESSAGE)),
    "duration": number_field(
        min_value(15, "Duration must be at least 15 minutes"),
        max_value(240, "Duration cannot exceed 4 hours"),
        default=30,
    ),
    "type": enum_field(AppointmentType, required_message="Appointment type is required"),
    "symptoms": string_field(max_length(1000, "Symptoms description too long"), required=False),
    "notes": string_field(max_length(500, "Notes too long"), required=False),
}

CREATE_APPOINTMENT = RuleSpec(
    entity=Entity.APPOINTMENT,
    action=Action.CREATE,
    fields=APPOINTMENT_FIELDS,
    record_type=CreateAppointmentRecord,
    summary="Book an appointment for a patient with a doctor at a hospital.",
)

# Participants are fixed at booking time.
UPDATE_APPOINTMENT = RuleSpec(
    entity=Entity.APPOINTMENT,
    action=Action.UPDATE,
    fields=relax_for_update(
        APPOINTMENT_FIELDS,
        exclude=("patientId", "doctorId", "hospitalId"),
    ),
    record_type=UpdateAppointmentRecord,
    summary="Patch appointment details; only the fields sent are applied.",
)

UPDATE_APPOINTMENT_STATUS = RuleSpec(
    entity=Entity.APPOINTMENT,
    action=Action.STATUS_UPDATE,
    fields={
        "status": enum_field(AppointmentStatus, required_message="Status is required"),
        "diagnosis": string_field(max_length(2000, "Diagnosis too long"), required=False),
        "prescription": string_field(max_length(2000, "Prescription too long"), required=False),
        "notes": string_field(max_length(1000, "Notes too long"), required=False),
    },
    record_type=UpdateAppointmentStatusRecord,
    summary="Move an appointment through its lifecycle, with clinical notes.",
)

CANCEL_APPOINTMENT = RuleSpec(
    entity=Entity.APPOINTMENT,
    action=Action.CANCEL,
    fields={
        "reason": string_field(
            min_length(10, "Cancellation reason must be at least 10 characters"),
            max_length(500, "Cancellation reason too long"),
        ),
        "cancelledBy": enum_field(
            CancelledBy, required_message="Please specify who is cancelling"
        ),
    },
    record_type=CancelAppointmentRecord,
    summary="Cancel an appointment, recording who cancelled and why.",
)

RESCHEDULE_APPOINTMENT = RuleSpec(
    entity=Entity.APPOINTMENT,
    action=Action.RESCHEDULE,
    fields={
        "appointmentDate": date_field(
            not_past("New appointment date cannot be in the past"),
            required_message="New appointment date is required",
        ),
        "startTime": string_field(matches(TIME_PATTERN, TIME_MESSAGE)),
        "reason": string_field(max_length(500, "Reason too long"), required=False),
    },
    record_type=RescheduleAppointmentRecord,
    summary="Move an appointment to a new date and start time.",
)

SPECS = (
    CREATE_APPOINTMENT,
    UPDATE_APPOINTMENT,
    UPDATE_APPOINTMENT_STATUS,
    CANCEL_APPOINTMENT,
    RESCHEDULE_APPOINTMENT,
)
