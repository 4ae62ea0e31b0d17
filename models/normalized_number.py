from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PhoneErrorKind(str, Enum):
    EMPTY_INPUT = "EmptyInput"
    REJECTED_LINE_TYPE = "RejectedLineType"
    INVALID_LENGTH = "InvalidLength"
    UNRECOGNIZED_FORMAT = "UnrecognizedFormat"


ERROR_PREFIX = "Erreur: "


@dataclass(frozen=True)
class NormalizedNumber:
    """Résultat d'un formatage : soit value (+33...), soit error + message."""

    value: Optional[str] = None
    country_id: Optional[str] = None
    label: Optional[str] = None
    error: Optional[PhoneErrorKind] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, value: str, *, country_id: str, label: str) -> "NormalizedNumber":
        return cls(value=value, country_id=country_id, label=label)

    @classmethod
    def failure(cls, error: PhoneErrorKind, message: str) -> "NormalizedNumber":
        return cls(error=error, message=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def display(self) -> str:
        if self.ok:
            return self.value or ""
        return f"{ERROR_PREFIX}{self.message}"

    def to_dict(self) -> dict:
        if self.ok:
            return {"ok": True, "value": self.value, "country": self.country_id, "type": self.label}
        return {"ok": False, "error": self.error.value, "message": self.message}
