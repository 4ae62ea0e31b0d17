# services/phone_normalizer.py
from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from app.logging_config import mask_phone
from models.country_rules import COUNTRY_RULES, CountryRule, validate_rules
from models.normalized_number import NormalizedNumber, PhoneErrorKind


logger = logging.getLogger(__name__)

UNKNOWN_TYPE = "Unknown"

_RE_NOT_DIGIT_OR_PLUS = re.compile(r"[^0-9+]")

FR_MOBILE_TRUNKS = ("06", "07")
FR_LANDLINE_TRUNKS = ("01", "02", "03", "04", "05", "09")
RUN_MOBILE_PREFIXES = ("262692", "262693")
RUN_LANDLINE_PREFIX = "262262"


def clean_input(raw: Optional[str]) -> str:
    """
    Ne garde que les chiffres ASCII :
    - '+' initial retiré ("+33 6 12..." -> "33612...")
    - sinon préfixe d'accès international "00" retiré ("0041..." -> "41...")
    """
    if not raw:
        return ""

    kept = _RE_NOT_DIGIT_OR_PLUS.sub("", str(raw))
    if kept.startswith("+"):
        return kept.replace("+", "")

    cleaned = kept.replace("+", "")
    while cleaned.startswith("00"):
        cleaned = cleaned[2:]
    return cleaned


def _checked(rules: Sequence[CountryRule]) -> Sequence[CountryRule]:
    # La table par défaut est validée à l'import
    if rules is not COUNTRY_RULES:
        validate_rules(rules)
    return rules


def _classify(cleaned: str, rules: Sequence[CountryRule]) -> str:
    if not cleaned:
        return UNKNOWN_TYPE

    for rule in rules:
        # Forme locale (0612345678) : on substitue l'indicatif au "0"
        candidate = rule.to_international(cleaned)
        pattern = rule.match(candidate)
        if pattern is not None:
            return pattern.label
    return UNKNOWN_TYPE


def classify(cleaned: str, rules: Sequence[CountryRule] = COUNTRY_RULES) -> str:
    """
    Retourne le type de ligne (ex: "Mobile FR", "Fixe CH") ou "Unknown".
    Une table explicite est vérifiée par validate_rules (ValueError si incohérente).
    """
    return _classify(cleaned, _checked(rules))


def detect_type(raw: Optional[str], rules: Sequence[CountryRule] = COUNTRY_RULES) -> str:
    return classify(clean_input(raw), rules)


def _invalid_length(message: str) -> NormalizedNumber:
    return NormalizedNumber.failure(PhoneErrorKind.INVALID_LENGTH, message)


def _accept(value: str, country_id: str, rules: Sequence[CountryRule]) -> NormalizedNumber:
    label = _classify(value.lstrip("+"), rules)
    return NormalizedNumber.success(value, country_id=country_id, label=label)


def format_number(raw: Optional[str], rules: Sequence[CountryRule] = COUNTRY_RULES) -> NormalizedNumber:
    """
    Formate un numéro au format international (+33612345678).
    Seuls les pays présents dans `rules` sont acceptés.
    Ne lève jamais d'exception pour un numéro mal formé : les échecs sont
    renvoyés dans NormalizedNumber.
    """
    result = _format(clean_input(raw), _checked(rules))
    if result.ok:
        logger.debug(
            "Numéro formaté",
            extra={"phone": mask_phone(result.value), "country": result.country_id},
        )
    else:
        logger.debug(
            "Numéro refusé: %s",
            result.message,
            extra={"phone": mask_phone(raw), "error": result.error.value},
        )
    return result


def _format(cleaned: str, rules: Sequence[CountryRule]) -> NormalizedNumber:
    if not cleaned:
        return NormalizedNumber.failure(PhoneErrorKind.EMPTY_INPUT, "Numéro vide")

    n = len(cleaned)
    supported = {rule.id for rule in rules}

    if "FR" in supported:
        # France, forme locale
        if cleaned.startswith("0"):
            if cleaned.startswith(FR_MOBILE_TRUNKS):
                if n != 10:
                    return _invalid_length("Les numéros français doivent contenir exactement 10 chiffres")
                return _accept("+33" + cleaned[1:], "FR", rules)
            if n == 10:
                if cleaned.startswith(FR_LANDLINE_TRUNKS):
                    return NormalizedNumber.failure(
                        PhoneErrorKind.REJECTED_LINE_TYPE, "Numéro fixe non autorisé"
                    )
                return _invalid_length("Numéro français à 10 chiffres non reconnu (06/07 attendu)")

        # France, forme internationale (mobiles uniquement)
        elif cleaned.startswith("33") and n == 11 and cleaned[2] in ("6", "7"):
            return _accept("+" + cleaned, "FR", rules)

    if "CH" in supported and cleaned.startswith("41"):
        if cleaned.startswith("417"):
            if n != 11:
                return _invalid_length("Les numéros mobiles suisses doivent contenir exactement 11 chiffres")
        elif n != 11:
            return _invalid_length("Les numéros fixes suisses doivent contenir exactement 11 chiffres")
        return _accept("+" + cleaned, "CH", rules)

    if "BE" in supported and cleaned.startswith("32"):
        if n != 11:
            return _invalid_length("Les numéros belges doivent contenir exactement 11 chiffres")
        return _accept("+" + cleaned, "BE", rules)

    if "IT" in supported and cleaned.startswith("39"):
        if n != 12:
            return _invalid_length("Les numéros italiens doivent contenir exactement 12 chiffres")
        return _accept("+" + cleaned, "IT", rules)

    if "AND" in supported and cleaned.startswith("376"):
        if n != 9:
            return _invalid_length("Les numéros andorrans doivent contenir exactement 9 chiffres")
        return _accept("+" + cleaned, "AND", rules)

    if "RUN" in supported:
        if cleaned.startswith(RUN_MOBILE_PREFIXES):
            if n != 12:
                return _invalid_length("Les numéros mobiles réunionnais doivent contenir exactement 12 chiffres")
            return _accept("+" + cleaned, "RUN", rules)
        if cleaned.startswith(RUN_LANDLINE_PREFIX):
            if n != 12:
                return _invalid_length("Les numéros fixes réunionnais doivent contenir exactement 12 chiffres")
            return _accept("+" + cleaned, "RUN", rules)

    if "DE" in supported and cleaned.startswith("49"):
        if n < 11 or n > 15:
            return _invalid_length("Numéro allemand mal formaté (11 à 15 chiffres attendus)")
        return _accept("+" + cleaned, "DE", rules)

    return NormalizedNumber.failure(
        PhoneErrorKind.UNRECOGNIZED_FORMAT, "Numéro non reconnu ou mal formaté"
    )
