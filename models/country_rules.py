# models/country_rules.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional


@dataclass(frozen=True)
class LinePattern:
    """
    Règle de classification d'un numéro (déjà nettoyé, sans '+') :
    - accepted_prefixes : le numéro doit commencer par l'un d'eux
    - excluded_prefixes : le numéro ne doit commencer par aucun d'eux
    - length ou (min_length, max_length) : contrainte de longueur
    """

    label: str
    accepted_prefixes: frozenset[str]
    length: Optional[int] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    excluded_prefixes: frozenset[str] = field(default_factory=frozenset)
    kind: str = "any"

    def starts_with_accepted(self, digits: str) -> bool:
        return any(digits.startswith(p) for p in self.accepted_prefixes)

    def is_excluded(self, digits: str) -> bool:
        return any(digits.startswith(p) for p in self.excluded_prefixes)

    def has_valid_length(self, digits: str) -> bool:
        if self.length is not None:
            return len(digits) == self.length
        return self.min_length <= len(digits) <= self.max_length

    def matches(self, digits: str) -> bool:
        return (
            self.starts_with_accepted(digits)
            and not self.is_excluded(digits)
            and self.has_valid_length(digits)
        )


@dataclass(frozen=True)
class CountryRule:
    id: str
    display_name: str
    international_prefix: str
    line_patterns: tuple[LinePattern, ...]
    # Indicatif national (ex: "0" en France) accepté en saisie locale
    trunk_prefix: Optional[str] = None

    def to_international(self, digits: str) -> str:
        """0612345678 -> 33612345678 si le pays accepte la forme locale."""
        if self.trunk_prefix and digits.startswith(self.trunk_prefix):
            return self.international_prefix + digits[len(self.trunk_prefix):]
        return digits

    def match(self, digits: str) -> Optional[LinePattern]:
        for pattern in self.line_patterns:
            if pattern.matches(digits):
                return pattern
        return None


def _prefixes(*values: str) -> frozenset[str]:
    return frozenset(values)


# Ordre significatif : premier pays / premier pattern qui matche.
COUNTRY_RULES: tuple[CountryRule, ...] = (
    CountryRule(
        id="FR",
        display_name="France",
        international_prefix="33",
        trunk_prefix="0",
        line_patterns=(
            LinePattern(
                label="Mobile FR",
                accepted_prefixes=_prefixes("336", "337"),
                length=11,
                kind="mobile",
            ),
            LinePattern(
                label="Fixe FR",
                accepted_prefixes=_prefixes("331", "332", "333", "334", "335", "339"),
                length=11,
                kind="landline",
            ),
        ),
    ),
    CountryRule(
        id="CH",
        display_name="Suisse",
        international_prefix="41",
        line_patterns=(
            LinePattern(
                label="Mobile CH",
                accepted_prefixes=_prefixes("417"),
                length=11,
                kind="mobile",
            ),
            LinePattern(
                label="Fixe CH",
                accepted_prefixes=_prefixes("41"),
                excluded_prefixes=_prefixes("417"),
                length=11,
                kind="landline",
            ),
        ),
    ),
    CountryRule(
        id="BE",
        display_name="Belgique",
        international_prefix="32",
        line_patterns=(LinePattern(label="BE", accepted_prefixes=_prefixes("32"), length=11),),
    ),
    CountryRule(
        id="IT",
        display_name="Italie",
        international_prefix="39",
        line_patterns=(LinePattern(label="IT", accepted_prefixes=_prefixes("39"), length=12),),
    ),
    CountryRule(
        id="AND",
        display_name="Andorre",
        international_prefix="376",
        line_patterns=(LinePattern(label="AND", accepted_prefixes=_prefixes("376"), length=9),),
    ),
    CountryRule(
        id="RUN",
        display_name="Réunion",
        international_prefix="262",
        line_patterns=(
            LinePattern(
                label="Mobile RUN",
                accepted_prefixes=_prefixes("262692", "262693"),
                length=12,
                kind="mobile",
            ),
            LinePattern(
                label="Fixe RUN",
                accepted_prefixes=_prefixes("262262"),
                length=12,
                kind="landline",
            ),
        ),
    ),
    CountryRule(
        id="DE",
        display_name="Allemagne",
        international_prefix="49",
        line_patterns=(
            LinePattern(label="DE", accepted_prefixes=_prefixes("49"), min_length=11, max_length=15),
        ),
    ),
)


def get_country(country_id: str | None, rules: Iterable[CountryRule] = COUNTRY_RULES) -> Optional[CountryRule]:
    """Retourne la règle du pays (FR, CH, ...) ou None si le pays n'est pas supporté."""
    cid = str(country_id or "").strip().upper()
    if not cid:
        return None
    for rule in rules:
        if rule.id == cid:
            return rule
    return None


def validate_rules(rules: Iterable[CountryRule]) -> None:
    """
    Vérifie la cohérence d'une table de règles.
    Lève ValueError au premier problème rencontré.
    """
    seen: set[str] = set()
    for rule in rules:
        if rule.id in seen:
            raise ValueError(f"Pays dupliqué dans la table: {rule.id}")
        seen.add(rule.id)

        if not rule.international_prefix.isdigit():
            raise ValueError(f"{rule.id}: indicatif invalide {rule.international_prefix!r}")
        if not rule.line_patterns:
            raise ValueError(f"{rule.id}: aucun pattern défini")

        for pattern in rule.line_patterns:
            if not pattern.accepted_prefixes:
                raise ValueError(f"{rule.id}/{pattern.label}: aucun préfixe accepté")
            for prefix in pattern.accepted_prefixes:
                if not prefix.startswith(rule.international_prefix):
                    raise ValueError(
                        f"{rule.id}/{pattern.label}: le préfixe {prefix!r} "
                        f"ne commence pas par {rule.international_prefix!r}"
                    )

            if pattern.length is not None:
                if pattern.min_length is not None or pattern.max_length is not None:
                    raise ValueError(f"{rule.id}/{pattern.label}: longueur exacte ET plage définies")
                if pattern.length <= 0:
                    raise ValueError(f"{rule.id}/{pattern.label}: longueur invalide")
            elif pattern.min_length is None or pattern.max_length is None:
                raise ValueError(f"{rule.id}/{pattern.label}: règle de longueur manquante")
            elif pattern.min_length > pattern.max_length:
                raise ValueError(f"{rule.id}/{pattern.label}: min_length > max_length")


validate_rules(COUNTRY_RULES)
