import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from jobboard.config import get_settings
from jobboard.db import init_db
from jobboard.services.catalogue import SkillCatalogue, SQLSkillStore, get_default_catalogue
from jobboard.services.vocabulary import seed_entries


@pytest.fixture(autouse=True)
def offline_defaults(monkeypatch):
    # module-level helpers fall back to the default catalogue; keep it off any real database
    monkeypatch.setenv("SKILLS_DB_OFFLINE", "true")
    get_settings.cache_clear()
    get_default_catalogue.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_catalogue.cache_clear()


@pytest.fixture
def catalogue():
    return SkillCatalogue()


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    store = SQLSkillStore(engine)
    store.seed(seed_entries())
    return store


@pytest.fixture
def db_catalogue(store):
    return SkillCatalogue(store=store)


class BrokenStore:
    """A store whose database is down."""

    def __init__(self):
        self.calls = []

    def _fail(self, op):
        self.calls.append(op)
        raise OperationalError("SELECT 1", {}, Exception("could not connect to server"))

    def all_entries(self):
        self._fail("all_entries")

    def find(self, term):
        self._fail("find")

    def add(self, name, category="General", aliases=()):
        self._fail("add")


@pytest.fixture
def broken_store():
    return BrokenStore()
