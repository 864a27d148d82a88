"""Shared pytest fixtures and test helpers for medform tests."""

from __future__ import annotations

import copy
import logging
from collections.abc import Generator
from datetime import date, timedelta
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from medform.config.settings import MedformSettings

# Fixed evaluation day so past/future checks are deterministic.
TODAY = date(2026, 3, 15)

PATIENT_ID = "3f2b8c1e-6a4d-4b7e-9c0a-1d2e3f4a5b6c"
DOCTOR_ID = "a1b2c3d4-e5f6-4a7b-8c9d-0e1f2a3b4c5d"
HOSPITAL_ID = "9e8d7c6b-5a4f-4e3d-8c2b-1a0f9e8d7c6b"

_VALID_RECORDS: dict[tuple[str, str], dict[str, Any]] = {
    ("hospital", "create"): {
        "name": "Sunrise Multispeciality",
        "type": "hospital",
        "email": "contact@sunrise-hospital.in",
        "phone": "+919876543210",
        "address": "12 MG Road, Indiranagar",
        "city": "Bengaluru",
        "state": "Karnataka",
        "pincode": "560001",
    },
    ("hospital", "update"): {"name": "Sunrise Hospital", "totalBeds": 120},
    ("hospital", "status-update"): {"status": "suspended", "reason": "License expired"},
    ("hospital", "reject"): {"reason": "Incomplete registration documents"},
    ("doctor", "create"): {
        "userId": "usr_1024",
        "licenseNumber": "KMC-45821",
        "specialization": "Cardiology",
    },
    ("doctor", "update"): {"consultationFee": 800, "available": True},
    ("doctor", "verify"): {"verified": True},
    ("doctor", "reject"): {"reason": "License number could not be verified"},
    ("doctor", "status-update"): {"status": "inactive"},
    ("user", "create"): {
        "phone": "+919876543210",
        "firstName": "Asha",
        "lastName": "Rao",
        "role": "patient",
    },
    ("user", "update"): {"firstName": "Asha"},
    ("user", "status-update"): {"status": "active"},
    ("user", "reset-password"): {"newPassword": "Str0ng!Pass", "confirmPassword": "Str0ng!Pass"},
    ("appointment", "create"): {
        "patientId": PATIENT_ID,
        "doctorId": DOCTOR_ID,
        "hospitalId": HOSPITAL_ID,
        "appointmentDate": TODAY,
        "startTime": "09:30",
        "type": "in_person",
    },
    ("appointment", "update"): {"startTime": "14:00"},
    ("appointment", "status-update"): {"status": "completed"},
    ("appointment", "cancel"): {
        "reason": "Patient is travelling that week",
        "cancelledBy": "patient",
    },
    ("appointment", "reschedule"): {
        "appointmentDate": TODAY + timedelta(days=2),
        "startTime": "10:15",
    },
    ("auth", "login"): {"email": "asha@example.com", "password": "secret1"},
    ("auth", "register"): {
        "name": "Asha Rao",
        "email": "asha@example.com",
        "password": "Abcdef1!",
        "confirmPassword": "Abcdef1!",
        "agreeToTerms": True,
    },
    ("auth", "forgot-password"): {"email": "asha@example.com"},
    ("auth", "reset-password"): {"password": "Abcdef1!", "confirmPassword": "Abcdef1!"},
    ("hospital-operational", "save"): {
        "name": "Sunrise Multispeciality",
        "email": "ops@sunrise-hospital.in",
        "phone": "+91 98765 43210",
        "address": "12 MG Road, Indiranagar",
        "city": "Bengaluru",
        "state": "Karnataka",
        "country": "India",
        "zipCode": "560001",
        "latitude": 12.9716,
        "longitude": 77.5946,
        "totalBeds": 100,
        "availableBeds": 40,
        "emergencyService": True,
        "ambulanceService": False,
        "licenseNumber": "KA-HOSP-2291",
        "establishedYear": 1998,
    },
}


def valid_record(entity: str, action: str, **overrides: Any) -> dict[str, Any]:
    """Return a fresh record accepted by *entity*/*action*, with *overrides* applied."""
    record = copy.deepcopy(_VALID_RECORDS[(entity, action)])
    record.update(overrides)
    return record


def catalog_keys() -> list[tuple[str, str]]:
    """Every (entity, action) pair with a sample record."""
    return list(_VALID_RECORDS)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the logging setup each CLI invocation installs."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    medform_level = logging.getLogger("medform").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("medform").setLevel(medform_level)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path]:
    """Run from an empty directory with no config file or MEDFORM_* env vars."""
    monkeypatch.chdir(tmp_path)
    for name in ("MEDFORM_CONFIG", "MEDFORM_VALIDATION__TODAY", "MEDFORM_VALIDATION__TIMEZONE"):
        monkeypatch.delenv(name, raising=False)
    yield tmp_path


@pytest.fixture
def settings(_isolated_config: Path) -> MedformSettings:
    """Default settings with the evaluation day pinned to TODAY."""
    return MedformSettings.from_cli(start_dir=_isolated_config, validation={"today": TODAY})
