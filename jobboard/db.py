# jobboard/db.py
from functools import lru_cache
from sqlmodel import SQLModel, create_engine

from jobboard.config import get_settings


@lru_cache()
def get_engine():
    settings = get_settings()
    if settings.database_url.startswith("sqlite"):
        connect_args = {"timeout": settings.db_timeout, "check_same_thread": False}
    else:
        connect_args = {"connect_timeout": int(settings.db_timeout)}
    return create_engine(settings.database_url, echo=False, connect_args=connect_args)


def init_db(engine=None):
    # importing models registers the tables on SQLModel.metadata
    from jobboard import models  # noqa: F401
    SQLModel.metadata.create_all(engine or get_engine())
