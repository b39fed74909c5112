# jobboard/config.py
import os
import logging
from dataclasses import dataclass
from functools import lru_cache
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    database_url: str
    skills_db_offline: bool
    skill_debug: bool
    log_level: str
    db_timeout: float


@lru_cache()
def get_settings() -> Settings:
    """
    Reads configuration from the environment (and .env, loaded at import).
    Cached; call get_settings.cache_clear() after changing the environment.
    """
    return Settings(
        database_url=os.getenv("DATABASE_URL", "sqlite:///./job_board.db"),
        skills_db_offline=_flag("SKILLS_DB_OFFLINE"),
        skill_debug=_flag("SKILL_DEBUG"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        db_timeout=float(os.getenv("SKILLS_DB_TIMEOUT", "5")),
    )


def configure_logging(level: str = None) -> None:
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
