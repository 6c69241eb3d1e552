from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ERROR_CODE_CONFIG_INVALID = "CONFIG_INVALID"
ERROR_CODE_REFERENCE_UNRESOLVED = "REFERENCE_UNRESOLVED"
ERROR_CODE_REFERENCE_FAILED = "REFERENCE_FAILED"
ERROR_CODE_SHAPE_MISMATCH = "SHAPE_MISMATCH"

VALID_ERROR_CODES = {
    ERROR_CODE_CONFIG_INVALID,
    ERROR_CODE_REFERENCE_UNRESOLVED,
    ERROR_CODE_REFERENCE_FAILED,
    ERROR_CODE_SHAPE_MISMATCH,
}


@dataclass(slots=True, frozen=True)
class DiffableError:
    code: str
    message: str
    check: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }
        if self.check is not None:
            payload["check"] = self.check
        return payload


__all__ = [
    "ERROR_CODE_CONFIG_INVALID",
    "ERROR_CODE_REFERENCE_FAILED",
    "ERROR_CODE_REFERENCE_UNRESOLVED",
    "ERROR_CODE_SHAPE_MISMATCH",
    "VALID_ERROR_CODES",
    "DiffableError",
]
