"""Validation verdicts.

INVARIANT: Invalid input is an expected outcome, never an exception.
Every call to ``validate`` returns a Verdict; rejected verdicts carry
path-tagged issues so callers can render each one beside its field.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

IssueKind = Literal["field", "refinement"]


class FieldIssue(BaseModel):
    """One failure, attached to the field path it should be reported on.

    ``kind`` distinguishes a single-field predicate failure (``"field"``)
    from a cross-field refinement failure (``"refinement"``).
    """

    model_config = {"frozen": True}

    path: str
    message: str
    kind: IssueKind = "field"


class Verdict(BaseModel):
    """Accept/reject outcome of running one rule specification.

    Attributes:
        ok: Whether the candidate was accepted.
        record: Normalized record on acceptance (defaults applied,
            empty-string-as-absent removed, unknown keys stripped).
            Empty on rejection.
        errors: Ordered issues on rejection. Empty on acceptance.
    """

    model_config = {"frozen": True}

    ok: bool
    record: dict[str, Any] = Field(default_factory=dict)
    errors: list[FieldIssue] = Field(default_factory=list)

    @classmethod
    def accept(cls, record: dict[str, Any]) -> Verdict:
        return cls(ok=True, record=record)

    @classmethod
    def reject(cls, errors: list[FieldIssue]) -> Verdict:
        return cls(ok=False, errors=errors)

    def errors_for(self, path: str) -> list[str]:
        """Messages reported against *path*, in order."""
        return [e.message for e in self.errors if e.path == path]

    @property
    def error_paths(self) -> list[str]:
        return [e.path for e in self.errors]
