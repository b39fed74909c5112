# jobboard/services/normalizer.py
import logging
from typing import Dict, Iterable, List, Optional

from .catalogue import SkillCatalogue, get_default_catalogue
from .entries import skill_key
from .vocabulary import FALLBACK_ALIASES, seed_entries

logger = logging.getLogger(__name__)


def _seed_indexes():
    names: Dict[str, str] = {}
    aliases: Dict[str, str] = {}
    categories: Dict[str, str] = {}
    for entry in seed_entries():
        names.setdefault(entry.key, entry.name)
        categories.setdefault(entry.key, entry.category)
        for a in entry.aliases:
            aliases.setdefault(skill_key(a), entry.name)
    return names, aliases, categories


_SEED_NAMES, _SEED_ALIASES, _SEED_CATEGORIES = _seed_indexes()
_FALLBACK = {skill_key(k): v for k, v in FALLBACK_ALIASES.items()}


def seed_category(name: str) -> Optional[str]:
    """Category SEED_SKILLS files a canonical name under, or None for non-seed names."""
    return _SEED_CATEGORIES.get(skill_key(name))


class SkillNormalizer:
    """
    Maps free-form skill strings to canonical catalogue names.

    Resolution order, first hit wins:
      1. exact canonical name in the catalogue
      2. alias of a catalogue entry
      3. FALLBACK_ALIASES
      4. SEED_SKILLS, canonical name then alias
    Anything else comes back as the trimmed input. Lookups are
    case-insensitive; a canonical name always beats another entry's alias.
    """

    def __init__(self, catalogue: Optional[SkillCatalogue] = None):
        self.catalogue = catalogue

    def _get_catalogue(self) -> SkillCatalogue:
        return self.catalogue if self.catalogue is not None else get_default_catalogue()

    def normalize_skill(self, token: str) -> str:
        raw = str(token).strip() if token is not None else ""
        key = skill_key(raw)
        if not key:
            return ""

        entry = self._get_catalogue().find(raw)
        if entry is not None:
            return entry.name
        if key in _FALLBACK:
            return _FALLBACK[key]
        if key in _SEED_NAMES:
            return _SEED_NAMES[key]
        if key in _SEED_ALIASES:
            return _SEED_ALIASES[key]
        return raw

    def normalize_skills(self, tokens: Optional[Iterable[str]]) -> List[str]:
        """Canonical names for tokens, empties dropped, case-insensitive duplicates dropped, order kept."""
        seen = set()
        out = []
        for token in tokens or []:
            name = self.normalize_skill(token)
            key = skill_key(name)
            if not key or key in seen:
                continue
            seen.add(key)
            out.append(name)
        return out


def normalize_skill(token: str, catalogue: Optional[SkillCatalogue] = None) -> str:
    return SkillNormalizer(catalogue).normalize_skill(token)


def normalize_skills(tokens: Optional[Iterable[str]], catalogue: Optional[SkillCatalogue] = None) -> List[str]:
    return SkillNormalizer(catalogue).normalize_skills(tokens)
