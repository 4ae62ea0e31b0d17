# app/validator.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from app.config import settings


# =========================
# Errors
# =========================
@dataclass
class ValidationIssue(Exception):
    message: str
    field: str
    value: Any = None

    def __str__(self) -> str:
        if self.value is None:
            return f"{self.field}: {self.message}"
        return f"{self.field}: {self.message} (value={self.value!r})"


logger = logging.getLogger(__name__)


# =========================
# Validators
# =========================
def optional_text(value: Any, *, field: str, max_len: Optional[int] = None) -> str:
    """
    Champ texte libre (summary, description) :
    - None -> ""
    - str uniquement (pas de nombre/liste/objet)
    - longueur bornée, pas de caractères de contrôle hors tab/retour ligne
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationIssue("texte attendu", field=field, value=value)

    limit = settings.MAX_FIELD_LENGTH if max_len is None else max_len
    if len(value) > limit:
        raise ValidationIssue(f"trop long (max {limit})", field=field)

    if any(ord(c) < 32 and c not in "\t\r\n" for c in value):
        raise ValidationIssue("contient des caractères de contrôle", field=field)
    return value
