# jobboard/services/catalogue.py
"""
Skill catalogue: the canonical skill vocabulary with its aliases.

Two tiers. The static vocabulary (vocabulary.EXTRACTION_VOCABULARY) is always
present; a SkillStore, when configured and reachable, overlays it with the
entries persisted in the `skill` table. Store failures never reach callers:
they are logged and the catalogue keeps serving what it has.
"""
import json
import time
import logging
import threading
from collections import OrderedDict
from functools import lru_cache
from typing import Dict, Iterable, List, NamedTuple, Optional, Protocol, Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from jobboard.models import Skill, utcnow
from .entries import SkillEntry, parse_aliases, skill_key
from .vocabulary import EXTRACTION_VOCABULARY

logger = logging.getLogger(__name__)

# what "the store is unreachable" looks like from here
STORE_ERRORS = (SQLAlchemyError, OSError, TimeoutError)

# seconds before a catalogue built without the store asks it again
STORE_RETRY_SECONDS = 30.0


class SkillStore(Protocol):
    def all_entries(self) -> List[SkillEntry]:
        ...

    def find(self, term: str) -> Optional[SkillEntry]:
        ...

    def add(self, name: str, category: str = "General", aliases: Sequence[str] = ()) -> bool:
        ...


class SQLSkillStore:
    """SkillStore over the `skill` table."""

    def __init__(self, engine):
        self.engine = engine

    @staticmethod
    def _to_entry(row: Skill) -> SkillEntry:
        return SkillEntry(name=row.name, category=row.category, aliases=tuple(parse_aliases(row.aliases)))

    def all_entries(self) -> List[SkillEntry]:
        with Session(self.engine) as session:
            rows = session.exec(select(Skill).order_by(Skill.id)).all()
            return [self._to_entry(r) for r in rows]

    def find(self, term: str) -> Optional[SkillEntry]:
        """Entry whose canonical name, or failing that one of whose aliases, equals term (case-insensitive)."""
        key = skill_key(term)
        if not key:
            return None
        with Session(self.engine) as session:
            row = session.exec(select(Skill).where(Skill.name_key == key)).first()
            if row:
                return self._to_entry(row)
            # Aliases are JSON text, so the alias lookup is a scan. Only the
            # id/aliases columns are read and rows without aliases are skipped
            # in SQL; the catalogue only gets here on a miss of its own view.
            candidates = session.exec(
                select(Skill.id, Skill.aliases).where(Skill.aliases != "[]").order_by(Skill.id)
            )
            for skill_id, aliases in candidates:
                if any(skill_key(a) == key for a in parse_aliases(aliases)):
                    return self._to_entry(session.get(Skill, skill_id))
        return None

    def add(self, name: str, category: str = "General", aliases: Sequence[str] = ()) -> bool:
        """
        Insert a skill unless one with the same name (case-insensitive) exists.
        Returns True when a row was written. Concurrent inserts of the same name
        are settled by the unique name_key: the loser sees IntegrityError and
        reports False.
        """
        entry = SkillEntry(name=name, category=category, aliases=tuple(aliases or ()))
        if not entry.key:
            return False
        now = utcnow()
        with Session(self.engine) as session:
            if session.exec(select(Skill.id).where(Skill.name_key == entry.key)).first() is not None:
                return False
            session.add(Skill(
                name=entry.name,
                name_key=entry.key,
                category=entry.category,
                aliases=json.dumps(list(entry.aliases)),
                created_at=now,
                updated_at=now,
            ))
            try:
                session.commit()
            except IntegrityError:
                session.rollback()
                return False
        return True

    def seed(self, entries: Iterable[SkillEntry]) -> int:
        """Insert every entry not already present; returns how many were written."""
        return sum(1 for e in entries if self.add(e.name, e.category, e.aliases))


class CatalogueView(NamedTuple):
    """One immutable build of the catalogue; readers hold on to it while they work."""
    entries: List[SkillEntry]
    by_name: Dict[str, SkillEntry]
    by_alias: Dict[str, SkillEntry]
    revision: int
    # set when the store was configured but could not be read
    retry_at: Optional[float] = None


def _fold_target(entry: SkillEntry, merged: Dict[str, SkillEntry], owner: Dict[str, str]) -> Optional[str]:
    """Key of the merged entry that `entry` names the same skill as, if any."""
    keys = [entry.key] + [skill_key(a) for a in entry.aliases]
    for k in keys:
        if k in merged:
            return k
    for k in keys:
        if k in owner:
            return owner[k]
    return None


def merge_entries(base: Iterable[SkillEntry], extra: Iterable[SkillEntry]) -> List[SkillEntry]:
    """
    `base` overlaid by `extra`. An extra entry is folded into the base entry it
    shares a name or alias with (base name kept, extra's category, aliases
    unioned); otherwise it is appended. Afterwards every alias belongs to one
    entry only and no alias is another entry's canonical name.
    """
    merged: "OrderedDict[str, SkillEntry]" = OrderedDict()
    owner: Dict[str, str] = {}

    def claim(key: str, entry: SkillEntry) -> None:
        for alias in entry.aliases:
            owner.setdefault(skill_key(alias), key)

    for entry in base:
        if entry.key in merged:
            entry = merged[entry.key].merged(entry)
        merged[entry.key] = entry
        claim(entry.key, entry)

    for entry in extra:
        if not entry.key:
            continue
        target = _fold_target(entry, merged, owner)
        if target is None:
            merged[entry.key] = entry
            claim(entry.key, entry)
        else:
            merged[target] = merged[target].merged(entry)
            claim(target, merged[target])

    claimed = set()
    out = []
    for key, entry in merged.items():
        aliases = []
        for alias in entry.aliases:
            k = skill_key(alias)
            if k in claimed or (k != key and k in merged):
                continue
            claimed.add(k)
            aliases.append(alias)
        if len(aliases) != len(entry.aliases):
            entry = SkillEntry(name=entry.name, category=entry.category, aliases=tuple(aliases))
        out.append(entry)
    return out


class SkillCatalogue:
    """
    Ordered collection of SkillEntry, static vocabulary first, store entries
    merged in (see merge_entries).

    Every build is published as one CatalogueView and swapped in whole, so a
    reader never sees a half-built or dropped view. `revision` moves with each
    build; consumers that precompute things from the entries (the extractor's
    patterns) know when to redo them.
    """

    def __init__(
        self,
        store: Optional[SkillStore] = None,
        static_entries: Optional[Iterable[SkillEntry]] = None,
        retry_after: float = STORE_RETRY_SECONDS,
    ):
        self.store = store
        self.retry_after = retry_after
        self._static = list(EXTRACTION_VOCABULARY if static_entries is None else static_entries)
        # entries learned at runtime (add() or store hits); survive refresh()
        self._local: List[SkillEntry] = []
        self._view: Optional[CatalogueView] = None
        self._stale = True
        self._lock = threading.Lock()
        self.revision = 0

    def _store_call(self, op: str, *args, default=None):
        if self.store is None:
            return default
        try:
            return getattr(self.store, op)(*args)
        except STORE_ERRORS as e:
            logger.warning("skill store %s failed, using static skills: %s", op, e)
            return default

    def _needs_build(self, view: Optional[CatalogueView]) -> bool:
        if view is None or self._stale:
            return True
        return view.retry_at is not None and time.monotonic() >= view.retry_at

    def _build(self) -> CatalogueView:
        # cleared before reading, so a refresh() racing this build still counts
        self._stale = False
        stored = self._store_call("all_entries", default=None)
        retry_at = None
        if self.store is not None and stored is None:
            retry_at = time.monotonic() + self.retry_after

        entries = merge_entries(self._static, list(stored or []) + list(self._local))
        by_name = {e.key: e for e in entries}
        by_alias = {skill_key(a): e for e in entries for a in e.aliases}

        self.revision += 1
        view = CatalogueView(entries, by_name, by_alias, self.revision, retry_at)
        self._view = view
        logger.debug(
            "skill catalogue rebuilt: %d entries (revision %d%s)",
            len(entries), view.revision, ", store unavailable" if retry_at is not None else "",
        )
        return view

    def view(self) -> CatalogueView:
        """The current build, rebuilding first when it is stale or due a store retry."""
        view = self._view
        if self._needs_build(view):
            with self._lock:
                view = self._view
                if self._needs_build(view):
                    view = self._build()
        return view

    def refresh(self) -> None:
        """Mark the view stale; the next read re-reads the store."""
        self._stale = True

    def entries(self) -> List[SkillEntry]:
        return list(self.view().entries)

    def __len__(self):
        return len(self.view().entries)

    def current_revision(self) -> int:
        return self.view().revision

    def by_name(self, term: str) -> Optional[SkillEntry]:
        return self.view().by_name.get(skill_key(term))

    def by_alias(self, term: str) -> Optional[SkillEntry]:
        return self.view().by_alias.get(skill_key(term))

    def _lookup(self, key: str) -> Optional[SkillEntry]:
        view = self.view()
        return view.by_name.get(key) or view.by_alias.get(key)

    def find(self, term: str) -> Optional[SkillEntry]:
        """
        Canonical name first, then alias. On a miss the store is asked
        directly, which picks up skills other processes added since the
        last refresh.
        """
        key = skill_key(term)
        if not key:
            return None
        entry = self._lookup(key)
        if entry is not None:
            return entry
        entry = self._store_call("find", term)
        if entry is None:
            return None
        self._local.append(entry)
        self.refresh()
        # the stored entry may have been folded into a synonym
        return self._lookup(key) or entry

    def add(self, name: str, category: str = "General", aliases: Sequence[str] = ()) -> bool:
        """
        Register a skill. Returns False when the name is already known,
        as a canonical name or as an alias.
        The entry is usable right away, whether or not the store took it.
        """
        entry = SkillEntry(name=name, category=category, aliases=tuple(aliases or ()))
        if not entry.key or self._lookup(entry.key) is not None:
            return False
        stored = self._store_call("add", entry.name, entry.category, list(entry.aliases), default=False)
        logger.info("new skill %r (%s)%s", entry.name, entry.category, "" if stored else " [not persisted]")
        self._local.append(entry)
        self.refresh()
        return True


@lru_cache()
def get_default_catalogue() -> SkillCatalogue:
    """
    Process-wide catalogue. Backed by the configured database unless
    SKILLS_DB_OFFLINE is set.
    """
    from jobboard.config import get_settings
    from jobboard.db import get_engine

    if get_settings().skills_db_offline:
        logger.info("SKILLS_DB_OFFLINE set: skill catalogue runs on static data only")
        return SkillCatalogue()
    return SkillCatalogue(store=SQLSkillStore(get_engine()))
