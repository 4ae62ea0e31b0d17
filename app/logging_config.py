# app/logging_config.py
from __future__ import annotations

import datetime as dt
import json
import logging
import sys
from typing import Any, Optional, TextIO

# Attributs standards d'un LogRecord : tout le reste provient de extra={...}
_RESERVED_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime", "ctx"}


def mask_phone(phone: Any) -> str:
    """
    Masque un numéro pour les logs : +33612345678 -> +336*****678.
    Les valeurs trop courtes sont entièrement masquées.
    """
    p = str(phone if phone is not None else "").strip()
    if not p:
        return ""
    if len(p) <= 6:
        return "*" * len(p)
    return p[:4] + "*" * (len(p) - 7) + p[-3:]


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS and not k.startswith("_")}


class _ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # Champ stable pour le formatter texte.
        record.ctx = " ".join(f"{k}={v}" for k, v in _extra_fields(record).items())
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update(_extra_fields(record))
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", *, json_logs: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """Installe un handler unique (stdout par défaut) sur le logger racine."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    root.handlers.clear()

    h = logging.StreamHandler(stream or sys.stdout)
    h.addFilter(_ContextFilter())

    if json_logs:
        h.setFormatter(JsonFormatter())
    else:
        # "Square" logs: [ts] [LEVEL] [logger] message | ctx
        h.setFormatter(
            logging.Formatter(
                fmt="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s | %(ctx)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root.addHandler(h)
    return root
