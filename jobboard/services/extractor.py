# jobboard/services/extractor.py
"""
Catalogue-driven skill extraction.

Every alias becomes a tolerant regex: its tokens may be separated by any mix
of space, hyphen, underscore, dot or slash in the text, so "Node.js",
"node js" and "node-js" all hit the alias "node js". Matches must sit on
word-ish boundaries: no letter or digit on either side, and no "+"/"#"
glued on (so "c" never matches inside "c++"). A dot counts as part of the
word only when a letter or digit is on its far side: "react.js" does not
contain "react", but "... and React." does.
"""
import re
import logging
import weakref
from typing import List, Optional, Pattern, Tuple

from jobboard.config import get_settings
from .catalogue import SkillCatalogue, get_default_catalogue
from .entries import SkillEntry
from .text import normalize_text

logger = logging.getLogger(__name__)

TOKEN_SPLIT = re.compile(r"[\s._/-]+")
# what may stand between two alias tokens in the text
SEP = r"[-_\s./]*"
LEFT_BOUNDARY = r"(?<![^\W_])(?<![+#])(?<![^\W_]\.)"
RIGHT_BOUNDARY = r"(?![^\W_])(?![+#])(?!\.[^\W_])"


def alias_pattern(alias: str) -> Optional[str]:
    """Regex source for one alias, or None when the alias has no tokens."""
    raw = str(alias or "").strip().lower()
    tokens = [re.escape(t) for t in TOKEN_SPLIT.split(raw) if t]
    if not tokens:
        return None
    return SEP.join(tokens)


def compile_alias(alias: str) -> Optional[Pattern]:
    pattern = alias_pattern(alias)
    if pattern is None:
        return None
    return re.compile(LEFT_BOUNDARY + "(" + pattern + ")" + RIGHT_BOUNDARY, re.IGNORECASE)


def entry_matchers(entry: SkillEntry) -> List[Pattern]:
    # an entry without aliases is found by its canonical name
    terms = entry.aliases or (entry.name,)
    return [rx for rx in (compile_alias(t) for t in terms) if rx is not None]


def _sort_names(names) -> List[str]:
    return sorted(names, key=lambda n: (n.casefold(), n))


class SkillExtractor:
    """
    Finds catalogue skills in free text.

    Patterns are compiled once per catalogue revision and reused for every
    call; adding a skill to the catalogue triggers a rebuild on the next
    extract().
    """

    def __init__(self, catalogue: Optional[SkillCatalogue] = None, debug: Optional[bool] = None):
        self.catalogue = catalogue
        self.debug = get_settings().skill_debug if debug is None else debug
        # (catalogue revision, compiled matchers), replaced as one value
        self._compiled: Tuple[Optional[int], List[Tuple[str, List[Pattern]]]] = (None, [])

    def _get_catalogue(self) -> SkillCatalogue:
        return self.catalogue if self.catalogue is not None else get_default_catalogue()

    def matchers(self) -> List[Tuple[str, List[Pattern]]]:
        view = self._get_catalogue().view()
        revision, arena = self._compiled
        if revision != view.revision:
            arena = [(e.name, entry_matchers(e)) for e in view.entries]
            self._compiled = (view.revision, arena)
            logger.debug("compiled skill matchers for %d entries", len(arena))
        return arena

    def extract(self, text: str) -> List[str]:
        """
        Canonical names of every catalogue skill mentioned in text, sorted
        alphabetically. Never raises; no text or no hits gives [].
        """
        normalized = normalize_text(text)
        if not normalized:
            return []

        found = set()
        for name, patterns in self.matchers():
            for rx in patterns:
                if rx.search(normalized):
                    found.add(name)
                    break

        result = _sort_names(found)
        if self.debug:
            logger.info("SKILL_DEBUG matches: %s", result)
            logger.info("SKILL_DEBUG sample: %s", normalized[:600])
        return result


_extractors: "weakref.WeakKeyDictionary[SkillCatalogue, SkillExtractor]" = weakref.WeakKeyDictionary()


def extractor_for(catalogue: Optional[SkillCatalogue] = None) -> SkillExtractor:
    catalogue = catalogue if catalogue is not None else get_default_catalogue()
    extractor = _extractors.get(catalogue)
    if extractor is None:
        extractor = _extractors[catalogue] = SkillExtractor(catalogue)
    return extractor


def extract_skills(text: str, catalogue: Optional[SkillCatalogue] = None) -> List[str]:
    return extractor_for(catalogue).extract(text)
