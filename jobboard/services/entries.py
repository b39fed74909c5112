# jobboard/services/entries.py
import re
import json
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Tuple

_DASHES = re.compile("[\u2010-\u2015]")
_SPACES = re.compile(r"\s+")


def skill_key(value: Any) -> str:
    """Case-insensitive lookup key for a skill name or alias."""
    if value is None:
        return ""
    s = _DASHES.sub("-", str(value).strip())
    s = _SPACES.sub(" ", s)
    return s.casefold()


def unique_ci(values: Iterable[Any]) -> List[str]:
    """Stripped, non-empty strings, case-insensitive de-duplicated, first occurrence wins."""
    seen = set()
    out = []
    for v in values:
        s = str(v).strip() if v is not None else ""
        k = skill_key(s)
        if not k or k in seen:
            continue
        seen.add(k)
        out.append(s)
    return out


def parse_aliases(value: Any) -> List[str]:
    """
    Aliases as stored: a JSON array string or an actual list.
    Anything else (bad JSON, a dict, a number) reads as no aliases.
    """
    try:
        v = json.loads(value) if isinstance(value, (str, bytes)) else value
    except (ValueError, UnicodeDecodeError):
        return []
    if not isinstance(v, (list, tuple)):
        return []
    return unique_ci(a for a in v if isinstance(a, str))


@dataclass(frozen=True)
class SkillEntry:
    name: str
    category: str = "General"
    aliases: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "name", str(self.name).strip())
        object.__setattr__(self, "category", (self.category or "General").strip() or "General")
        object.__setattr__(self, "aliases", tuple(unique_ci(self.aliases or ())))

    @property
    def key(self) -> str:
        return skill_key(self.name)

    def merged(self, other: "SkillEntry") -> "SkillEntry":
        """
        This entry with other folded in: other's category, other's aliases
        appended, and other's name kept as an alias when it differs.
        """
        renamed = (other.name,) if other.key != self.key else ()
        return SkillEntry(name=self.name, category=other.category, aliases=self.aliases + renamed + other.aliases)
