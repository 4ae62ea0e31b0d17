"""Point d'entrée module pour lancer la CLI agendaparse."""
from __future__ import annotations

from agendaparse.env_loader import load_env_files


def entrypoint() -> int:
    load_env_files()
    # Import après chargement du .env : settings est figé à l'import
    from agendaparse.cli import main

    return main()


if __name__ == "__main__":
    raise SystemExit(entrypoint())
