import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    # Render fournit PORT ; 3000 en local
    PORT: int = int(os.getenv("PORT", "3000"))
    HOST: str = os.getenv("HOST", "0.0.0.0")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_JSON: bool = _env_bool("LOG_JSON")

    # Prix appliqué quand la description n'en contient pas
    DEFAULT_PRICE: str = os.getenv("DEFAULT_PRICE", "170")

    MAX_FIELD_LENGTH: int = int(os.getenv("MAX_FIELD_LENGTH", "2000"))

settings = Settings()
