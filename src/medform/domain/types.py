"""Domain vocabulary enums.

These mirror the platform's fixed value sets. Rule specifications consume
them as enum choices; nothing here carries validation logic.
"""

from __future__ import annotations

from enum import StrEnum


class Entity(StrEnum):
    """Record families covered by the rule catalog."""

    HOSPITAL = "hospital"
    DOCTOR = "doctor"
    USER = "user"
    APPOINTMENT = "appointment"
    AUTH = "auth"
    HOSPITAL_OPERATIONAL = "hospital-operational"


class Action(StrEnum):
    """Actions a rule specification can be bound to."""

    CREATE = "create"
    UPDATE = "update"
    STATUS_UPDATE = "status-update"
    REJECT = "reject"
    VERIFY = "verify"
    RESET_PASSWORD = "reset-password"
    CANCEL = "cancel"
    RESCHEDULE = "reschedule"
    LOGIN = "login"
    REGISTER = "register"
    FORGOT_PASSWORD = "forgot-password"
    SAVE = "save"


class HospitalType(StrEnum):
    HOSPITAL = "hospital"
    CLINIC = "clinic"
    DIAGNOSTIC_CENTER = "diagnostic_center"


class RecordStatus(StrEnum):
    """Account status shared by hospitals, doctors and users."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
    PENDING = "pending"


class AppointmentStatus(StrEnum):
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"
    RESCHEDULED = "rescheduled"


class AppointmentType(StrEnum):
    IN_PERSON = "in_person"
    VIDEO = "video"
    PHONE = "phone"


class CancelledBy(StrEnum):
    PATIENT = "patient"
    DOCTOR = "doctor"
    ADMIN = "admin"


class UserRole(StrEnum):
    SUPER_ADMIN = "super_admin"
    HOSPITAL_ADMIN = "hospital_admin"
    DOCTOR = "doctor"
    PATIENT = "patient"


class Gender(StrEnum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


# Doctors cannot be moved back to "pending" once onboarded.
DOCTOR_STATUSES: tuple[str, ...] = (
    RecordStatus.ACTIVE,
    RecordStatus.INACTIVE,
    RecordStatus.SUSPENDED,
)
