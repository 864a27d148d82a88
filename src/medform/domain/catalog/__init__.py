"""The fixed rule catalog, one module per record family."""

from __future__ import annotations

from medform.domain.catalog import appointment, auth, doctor, hospital, operational, user
from medform.domain.rulespec import RuleSpec

ALL_SPECS: tuple[RuleSpec, ...] = (
    *hospital.SPECS,
    *doctor.SPECS,
    *user.SPECS,
    *appointment.SPECS,
    *auth.SPECS,
    *operational.SPECS,
)
