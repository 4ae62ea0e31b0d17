# services/event_parser.py
"""
Heuristiques de découpage du texte des événements d'agenda.

summary     : "Dom Marie 06.56.91.39.62"  -> type, prénom, numéro brut
description : "Mme Dupont RDV 170 euros"  -> nom de famille, prix
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from app.config import settings


_RE_SUMMARY = re.compile(r"^(\S+)\s+(.+?)\s+([\d .+\-()/]+)$", re.IGNORECASE)
_RE_HONORIFICS = re.compile(r"\b(?:mme|mr|mlle|madame|monsieur)\b\.?|\bm\.", re.IGNORECASE)
_RE_PRICE_WITH_CURRENCY = re.compile(r"(?<!\d)(\d{2,4})\s*(?:€|euros?\b)", re.IGNORECASE)
_RE_PRICE_BARE = re.compile(r"(?<!\d)(\d{2,3})(?!\d)")


@dataclass(frozen=True)
class SummaryParts:
    type: Optional[str] = None
    prenom: Optional[str] = None
    phone_raw: Optional[str] = None


@dataclass(frozen=True)
class DescriptionParts:
    nom_famille: Optional[str] = None
    prix: Optional[str] = None


def normalize_channel_type(token: str) -> str:
    """Corrige les fautes fréquentes : "Tél" -> "tel", "Skipe" -> "skype"."""
    lower = token.lower()
    if lower.startswith(("tel", "tél")):
        return "tel"
    if lower.startswith("dom"):
        return "dom"
    if lower.startswith(("sky", "skipe", "skaipe")):
        return "skype"
    return lower


def parse_summary(summary: Optional[str]) -> SummaryParts:
    match = _RE_SUMMARY.match((summary or "").strip())
    if not match:
        return SummaryParts()

    return SummaryParts(
        type=normalize_channel_type(match.group(1)),
        prenom=match.group(2).strip(),
        phone_raw=match.group(3).strip(),
    )


def _extract_price(description: str, default_price: str) -> str:
    match = _RE_PRICE_WITH_CURRENCY.search(description) or _RE_PRICE_BARE.search(description)
    if match:
        return match.group(1)
    return default_price


def parse_description(description: Optional[str], default_price: Optional[str] = None) -> DescriptionParts:
    text = description or ""
    if default_price is None:
        default_price = settings.DEFAULT_PRICE

    without_prefixes = _RE_HONORIFICS.sub("", text).strip()
    words = without_prefixes.split()
    nom_famille = words[0].strip(".,;:") if words else None

    return DescriptionParts(
        nom_famille=nom_famille or None,
        prix=_extract_price(text, default_price),
    )
