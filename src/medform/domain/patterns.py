"""Regex formats shared by the rule catalog.

All patterns are matched with ``search`` semantics, so anchored patterns
carry their own ``^`` and end in ``\\Z`` (``$`` also matches before a
trailing newline). The password fragments below are
deliberately unanchored: each checks one character class somewhere in
the value.
"""

from __future__ import annotations

import re

# Indian mobile numbers, with or without the 91 / +91 country prefix.
PHONE_PATTERN = re.compile(r"^(\+91|91)?[6789]\d{9}\Z")

# User accounts store the canonical +91 form only.
USER_PHONE_PATTERN = re.compile(r"^\+91[6-9]\d{9}\Z")

# Free-form phone input on the public forms (digits, spaces, dashes, parens).
LOOSE_PHONE_PATTERN = re.compile(r"^\+?[\d\s\-()]+\Z")

PINCODE_PATTERN = re.compile(r"^\d{6}\Z")

# 24-hour HH:mm, hour may be a single digit.
TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]\Z")

UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}\Z"
)

EMAIL_PATTERN = re.compile(
    r"^(?!\.)(?!.*\.\.)([A-Z0-9_'+\-.]*)[A-Z0-9_+-]@([A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}\Z",
    re.IGNORECASE,
)

STRONG_PASSWORD_PATTERN = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&#])[A-Za-z\d@$!%*?&#]{8,}\Z"
)

UPPERCASE_PATTERN = re.compile(r"[A-Z]")
LOWERCASE_PATTERN = re.compile(r"[a-z]")
DIGIT_PATTERN = re.compile(r"[0-9]")
