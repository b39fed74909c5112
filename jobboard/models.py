from sqlmodel import SQLModel, Field
from typing import Optional
import datetime


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class Skill(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    # lower-cased name; the unique key that makes inserts upsert-ignore
    name_key: str = Field(index=True, unique=True)
    category: str = "General"
    aliases: str = "[]"   # store JSON string
    created_at: datetime.datetime = Field(default_factory=utcnow)
    updated_at: datetime.datetime = Field(default_factory=utcnow)
