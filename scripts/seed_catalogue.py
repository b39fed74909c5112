from sqlmodel import Session, select
from jobboard.config import configure_logging
from jobboard.db import get_engine, init_db
from jobboard.models import Skill
from jobboard.services.catalogue import SQLSkillStore
from jobboard.services.vocabulary import seed_entries

configure_logging()

engine = get_engine()
init_db(engine)

inserted = SQLSkillStore(engine).seed(seed_entries())

with Session(engine) as session:
    total = len(session.exec(select(Skill)).all())

print("Inserted", inserted, "skills;", total, "in catalogue")
