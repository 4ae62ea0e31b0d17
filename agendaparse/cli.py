# agendaparse/cli.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional

from app.config import settings
from app.logging_config import setup_logging
from app.validator import ValidationIssue, optional_text
from services.contact_service import ContactService
from services.phone_normalizer import clean_input, detect_type, format_number


logger = logging.getLogger(__name__)


# =========================
# Errors
# =========================
class CLIError(Exception):
    exit_code = 4

    def __init__(self, message: str, *, exit_code: Optional[int] = None, details: Optional[dict] = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code
        self.details = details or {}


class ValidationError(CLIError):
    exit_code = 2


def _emit(payload: Any, *, as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, ensure_ascii=False))
    elif isinstance(payload, dict):
        for k, v in payload.items():
            print(f"{k}: {v}")
    else:
        print(payload)


# =========================
# Commands
# =========================
def do_format(args: argparse.Namespace) -> int:
    failures = 0
    for raw in args.numbers:
        result = format_number(raw)
        if not result.ok:
            failures += 1
        if args.json:
            _emit({"input": raw, **result.to_dict()}, as_json=True)
        else:
            _emit(f"{raw} -> {result.display()}", as_json=False)

    if failures:
        raise ValidationError(f"{failures} numéro(s) refusé(s)", details={"failures": failures})
    return 0


def do_classify(args: argparse.Namespace) -> int:
    for raw in args.numbers:
        label = detect_type(raw)
        if args.json:
            _emit({"input": raw, "cleaned": clean_input(raw), "type": label}, as_json=True)
        else:
            _emit(f"{raw} -> {label}", as_json=False)
    return 0


def do_parse(args: argparse.Namespace) -> int:
    try:
        summary = optional_text(args.summary, field="summary")
        description = optional_text(args.description, field="description")
    except ValidationIssue as exc:
        raise ValidationError(str(exc)) from exc

    record = ContactService.parse_event(summary, description)
    _emit(record.to_dict(), as_json=args.json)
    if not record.is_ok:
        raise ValidationError(record.message or "Analyse impossible")
    return 0


def do_serve(args: argparse.Namespace) -> int:
    import uvicorn

    logger.info("Démarrage du serveur", extra={"host": args.host, "port": args.port})
    uvicorn.run("app.main:app", host=args.host, port=args.port, log_level=args.log_level.lower())
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="agendaparse", description="Analyse d'événements d'agenda et formatage de numéros")
    p.add_argument("--log-level", default=settings.LOG_LEVEL, help="DEBUG, INFO, WARNING, ERROR")
    p.add_argument("--json-logs", action="store_true", default=settings.LOG_JSON, help="Logs JSON (utile pour ingestion).")
    p.add_argument("--json", action="store_true", help="Sortie JSON.")

    sp = p.add_subparsers(dest="command", required=True)

    c1 = sp.add_parser("format", help="Formate un ou plusieurs numéros au format international.")
    c1.add_argument("numbers", nargs="+")
    c1.set_defaults(func=do_format)

    c2 = sp.add_parser("classify", help="Détecte le type de ligne (Mobile FR, Fixe CH, ...).")
    c2.add_argument("numbers", nargs="+")
    c2.set_defaults(func=do_classify)

    c3 = sp.add_parser("parse", help="Analyse un summary/description d'événement.")
    c3.add_argument("--summary", required=True, help='ex: "Dom Marie 06.56.91.39.62"')
    c3.add_argument("--description", default="", help='ex: "Mme Dupont 170 euros"')
    c3.set_defaults(func=do_parse)

    c4 = sp.add_parser("serve", help="Lance l'API HTTP (POST /parse).")
    c4.add_argument("--host", default=settings.HOST)
    c4.add_argument("--port", type=int, default=settings.PORT)
    c4.set_defaults(func=do_serve)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # stdout réservé aux résultats
    setup_logging(args.log_level, json_logs=args.json_logs, stream=sys.stderr)

    try:
        return args.func(args)
    except CLIError as exc:
        logger.error("%s", exc, extra=exc.details)
        return exc.exit_code
    except Exception as exc:  # pragma: no cover
        logger.exception("Erreur inattendue", exc_info=exc)
        return CLIError.exit_code


if __name__ == "__main__":
    sys.exit(main())
