"""Explicit record types for every (entity, action) pair.

Each TypedDict describes the *normalized* record a rule spec accepts.
They are maintained by hand next to the constraint tables; the test
suite checks that every spec's field table and its record type declare
the same keys and the same required/optional split.

This module avoids postponed annotations so ``__required_keys__`` sees
the ``NotRequired`` qualifiers.
"""

from datetime import date
from typing import NotRequired, TypedDict

# --- Hospital (onboarding) ---


class CreateHospitalRecord(TypedDict):
    name: str
    type: str
    email: str
    phone: str
    address: str
    city: str
    state: str
    country: NotRequired[str]
    pincode: str
    latitude: NotRequired[float]
    longitude: NotRequired[float]
    website: NotRequired[str]
    description: NotRequired[str]
    facilities: NotRequired[list[str]]
    totalBeds: NotRequired[int]
    isEmergency: NotRequired[bool]
    is24x7: NotRequired[bool]
    adminEmail: NotRequired[str]
    adminPhone: NotRequired[str]
    adminFirstName: NotRequired[str]
    adminLastName: NotRequired[str]
    adminPassword: NotRequired[str]
    commissionRate: NotRequired[float]


class UpdateHospitalRecord(TypedDict, total=False):
    name: str
    type: str
    email: str
    phone: str
    address: str
    city: str
    state: str
    country: str
    pincode: str
    latitude: float
    longitude: float
    website: str
    description: str
    facilities: list[str]
    totalBeds: int
    isEmergency: bool
    is24x7: bool
    commissionRate: float


class UpdateHospitalStatusRecord(TypedDict):
    status: str
    reason: NotRequired[str]


class RejectHospitalRecord(TypedDict):
    reason: str
    notifyAdmin: NotRequired[bool]


# --- Hospital (operational profile) ---


class OperationalHospitalRecord(TypedDict):
    name: str
    email: str
    phone: str
    address: str
    city: str
    state: str
    country: str
    zipCode: str
    latitude: float
    longitude: float
    totalBeds: int
    availableBeds: int
    emergencyService: bool
    ambulanceService: bool
    website: NotRequired[str]
    description: NotRequired[str]
    licenseNumber: str
    establishedYear: int


# --- Doctor ---


class CreateDoctorRecord(TypedDict):
    userId: str
    licenseNumber: str
    specialization: str
    experienceYears: NotRequired[int]
    qualification: NotRequired[str]
    consultationFee: NotRequired[float]
    bio: NotRequired[str]


class UpdateDoctorRecord(TypedDict, total=False):
    licenseNumber: str
    specialization: str
    experienceYears: int
    qualification: str
    consultationFee: float
    bio: str
    available: bool


class VerifyDoctorRecord(TypedDict):
    verified: bool
    verificationNotes: NotRequired[str]


class RejectDoctorRecord(TypedDict):
    reason: str
    sendNotification: NotRequired[bool]


class UpdateDoctorStatusRecord(TypedDict):
    status: str
    reason: NotRequired[str]


# --- User ---


class CreateUserRecord(TypedDict):
    email: NotRequired[str]
    phone: str
    password: NotRequired[str]
    firstName: str
    lastName: str
    dateOfBirth: NotRequired[date | None]
    gender: NotRequired[str | None]
    role: str
    hospitalId: NotRequired[str | None]


class UpdateUserRecord(TypedDict, total=False):
    email: str
    phone: str
    firstName: str
    lastName: str
    dateOfBirth: date | None
    gender: str | None
    profilePicture: str | None


class UpdateUserStatusRecord(TypedDict):
    status: str
    reason: NotRequired[str]


class ResetUserPasswordRecord(TypedDict):
    newPassword: str
    confirmPassword: str


# --- Appointment ---


class CreateAppointmentRecord(TypedDict):
    patientId: str
    doctorId: str
    hospitalId: str
    appointmentDate: date
    startTime: str
    duration: NotRequired[float]
    type: str
    symptoms: NotRequired[str]
    notes: NotRequired[str]


class UpdateAppointmentRecord(TypedDict, total=False):
    appointmentDate: date
    startTime: str
    duration: float
    type: str
    symptoms: str
    notes: str


class UpdateAppointmentStatusRecord(TypedDict):
    status: str
    diagnosis: NotRequired[str]
    prescription: NotRequired[str]
    notes: NotRequired[str]


class CancelAppointmentRecord(TypedDict):
    reason: str
    cancelledBy: str


class RescheduleAppointmentRecord(TypedDict):
    appointmentDate: date
    startTime: str
    reason: NotRequired[str]


# --- Authentication ---


class LoginRecord(TypedDict):
    email: str
    password: str


class RegisterRecord(TypedDict):
    name: str
    email: str
    phone: NotRequired[str]
    password: str
    confirmPassword: str
    agreeToTerms: NotRequired[bool]


class ForgotPasswordRecord(TypedDict):
    email: str


class ResetPasswordRecord(TypedDict):
    password: str
    confirmPassword: str
