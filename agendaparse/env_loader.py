from __future__ import annotations

import logging
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

APP_DIR = Path.home() / ".agendaparse"
USER_ENV = APP_DIR / ".env"


def _load_if_exists(path: Path) -> bool:
    try:
        if path.exists() and path.is_file():
            load_dotenv(path, override=False)
            logger.info("Fichier env chargé: %s", str(path))
            return True
    except OSError as exc:
        logger.warning("Impossible de charger %s: %s", str(path), exc)
    return False


def load_env_files() -> list[Path]:
    """
    Ordre de recherche (sans écraser les variables déjà définies) :
      1) À côté du binaire (sys.executable)
      2) find_dotenv depuis cwd/parents
      3) ~/.agendaparse/.env
    """
    loaded: list[Path] = []

    candidates = [Path(sys.executable).resolve().parent / ".env"]

    p = find_dotenv(".env", usecwd=True)
    if p:
        candidates.append(Path(p))

    candidates.append(USER_ENV)

    for path in candidates:
        if path not in loaded and _load_if_exists(path):
            loaded.append(path)

    if not loaded:
        logger.warning("Aucun fichier .env trouvé : utilisation exclusive des variables d'environnement")
    return loaded
