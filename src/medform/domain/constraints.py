"""Field constraints: the per-field half of a rule specification.

A :class:`FieldConstraint` is a plain frozen value: a primitive kind,
optionality flags, an optional default, and an ordered tuple of
:class:`Check` predicates. It carries no behaviour of its own; the single
interpreter lives in :mod:`medform.domain.evaluator`.

Builders at the bottom of this module keep the catalog tables readable::

    "pincode": string_field(matches(PINCODE_PATTERN, "Pincode must be 6 digits")),
    "country": string_field(required=False, default="India"),
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Final


class _Missing:
    """Sentinel for "no value": a missing key or an undeclared default."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()

DEFAULT_REQUIRED_MESSAGE = "Required"


class FieldKind(StrEnum):
    """Primitive value kinds a field can declare."""

    STRING = "string"
    UUID = "uuid"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"
    DATE = "date"
    STRING_LIST = "string_list"


class CheckKind(StrEnum):
    """Predicates applied after the kind check, in declaration order."""

    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    PATTERN = "pattern"
    EMAIL = "email"
    URL = "url"
    MIN_VALUE = "min_value"
    MAX_VALUE = "max_value"
    INTEGER = "integer"
    POSITIVE = "positive"
    NOT_PAST = "not_past"
    NOT_AFTER_CURRENT_YEAR = "not_after_current_year"


@dataclass(frozen=True)
class Check:
    """One predicate with the message reported when it fails."""

    kind: CheckKind
    message: str
    arg: Any = None

    def describe(self) -> dict[str, Any]:
        arg = self.arg.pattern if isinstance(self.arg, re.Pattern) else self.arg
        out: dict[str, Any] = {"check": str(self.kind), "message": self.message}
        if arg is not None:
            out["arg"] = arg
        return out


@dataclass(frozen=True)
class FieldConstraint:
    """Acceptable value space for a single field.

    Attributes:
        kind: Primitive kind the raw value must have.
        checks: Predicates evaluated in order; the first failure wins.
        required: Whether absence is an error.
        default: Substituted when the field is absent (optional fields only).
        allow_empty: Treat a literal ``""`` as absent, so a cleared form
            field does not trigger format errors.
        nullable: Keep an explicit ``None`` instead of treating it as absent.
        choices: Allowed values for ``FieldKind.ENUM``.
        required_message: Reported when a required field is absent.
        invalid_message: Reported when the kind check fails. A generic
            message naming the expected kind is used when unset.
    """

    kind: FieldKind
    checks: tuple[Check, ...] = ()
    required: bool = True
    default: Any = MISSING
    allow_empty: bool = False
    nullable: bool = False
    choices: tuple[str, ...] = ()
    required_message: str = DEFAULT_REQUIRED_MESSAGE
    invalid_message: str | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    def relaxed(self) -> FieldConstraint:
        """Return the update-variant of this constraint: optional, no default."""
        return dataclasses.replace(self, required=False, default=MISSING)

    def describe(self) -> dict[str, Any]:
        """Inspectable summary used by ``medform describe``."""
        out: dict[str, Any] = {"kind": str(self.kind), "required": self.required}
        if self.has_default:
            out["default"] = self.default
        if self.allow_empty:
            out["allow_empty"] = True
        if self.nullable:
            out["nullable"] = True
        if self.choices:
            out["choices"] = list(self.choices)
        if self.checks:
            out["checks"] = [c.describe() for c in self.checks]
        return out


# ---------------------------------------------------------------------------
# Check builders
# ---------------------------------------------------------------------------


def min_length(n: int, message: str | None = None) -> Check:
    return Check(CheckKind.MIN_LENGTH, message or f"Must be at least {n} characters", n)


def max_length(n: int, message: str | None = None) -> Check:
    return Check(CheckKind.MAX_LENGTH, message or f"Must not exceed {n} characters", n)


def matches(pattern: re.Pattern[str], message: str = "Invalid format") -> Check:
    return Check(CheckKind.PATTERN, message, pattern)


def email(message: str = "Invalid email address") -> Check:
    return Check(CheckKind.EMAIL, message)


def url(message: str = "Invalid URL") -> Check:
    return Check(CheckKind.URL, message)


def min_value(n: float, message: str | None = None) -> Check:
    return Check(CheckKind.MIN_VALUE, message or f"Must be greater than or equal to {n}", n)


def max_value(n: float, message: str | None = None) -> Check:
    return Check(CheckKind.MAX_VALUE, message or f"Must be less than or equal to {n}", n)


def integer(message: str = "Expected integer, received float") -> Check:
    return Check(CheckKind.INTEGER, message)


def positive(message: str = "Must be greater than 0") -> Check:
    return Check(CheckKind.POSITIVE, message)


def not_past(message: str = "Date cannot be in the past") -> Check:
    """Calendar day must be on or after the evaluation day."""
    return Check(CheckKind.NOT_PAST, message)


def not_after_current_year(message: str = "Year cannot be in the future") -> Check:
    return Check(CheckKind.NOT_AFTER_CURRENT_YEAR, message)


# ---------------------------------------------------------------------------
# Field builders
# ---------------------------------------------------------------------------


def _field(kind: FieldKind, checks: tuple[Check, ...], **options: Any) -> FieldConstraint:
    if options.get("required_message") is None:
        options.pop("required_message", None)
    if options.get("default", MISSING) is not MISSING and options.get("required", True):
        # A default only makes sense on an optional field.
        options["required"] = False
    return FieldConstraint(kind=kind, checks=checks, **options)


def string_field(
    *checks: Check,
    required: bool = True,
    default: Any = MISSING,
    allow_empty: bool = False,
    nullable: bool = False,
    required_message: str | None = None,
) -> FieldConstraint:
    return _field(
        FieldKind.STRING,
        checks,
        required=required,
        default=default,
        allow_empty=allow_empty,
        nullable=nullable,
        required_message=required_message,
    )


def uuid_field(
    message: str = "Invalid uuid",
    *,
    required: bool = True,
    nullable: bool = False,
    required_message: str | None = None,
) -> FieldConstraint:
    return _field(
        FieldKind.UUID,
        (),
        required=required,
        nullable=nullable,
        required_message=required_message,
        invalid_message=message,
    )


def number_field(
    *checks: Check,
    required: bool = True,
    default: Any = MISSING,
    required_message: str | None = None,
) -> FieldConstraint:
    return _field(
        FieldKind.NUMBER,
        checks,
        required=required,
        default=default,
        required_message=required_message,
    )


def boolean_field(
    *,
    required: bool = True,
    default: Any = MISSING,
    required_message: str | None = None,
) -> FieldConstraint:
    return _field(
        FieldKind.BOOLEAN,
        (),
        required=required,
        default=default,
        required_message=required_message,
    )


def enum_field(
    values: Iterable[str],
    message: str | None = None,
    *,
    required: bool = True,
    nullable: bool = False,
    required_message: str | None = None,
) -> FieldConstraint:
    return _field(
        FieldKind.ENUM,
        (),
        choices=tuple(str(v) for v in values),
        required=required,
        nullable=nullable,
        required_message=required_message,
        invalid_message=message,
    )


def date_field(
    *checks: Check,
    required: bool = True,
    nullable: bool = False,
    required_message: str | None = None,
) -> FieldConstraint:
    return _field(
        FieldKind.DATE,
        checks,
        required=required,
        nullable=nullable,
        required_message=required_message,
    )


def string_list_field(*, required: bool = False) -> FieldConstraint:
    return _field(FieldKind.STRING_LIST, (), required=required)
