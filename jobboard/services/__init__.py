"""
Skill extraction, normalization and matching for the job board.

The four operations the rest of the app calls:
- normalize_text(raw) -> str
- extract_skills(text) -> sorted canonical names found in the text
- normalize_skills(tokens) -> canonical names, de-duplicated, order kept
- compute_match(required, nice, candidate) -> MatchResult
"""
from .catalogue import SkillCatalogue, SQLSkillStore, get_default_catalogue
from .entries import SkillEntry
from .extractor import SkillExtractor, extract_skills
from .normalizer import SkillNormalizer, normalize_skill, normalize_skills
from .scoring import MatchResult, compute_match
from .text import normalize_text

__all__ = [
    "MatchResult",
    "SQLSkillStore",
    "SkillCatalogue",
    "SkillEntry",
    "SkillExtractor",
    "SkillNormalizer",
    "compute_match",
    "extract_skills",
    "get_default_catalogue",
    "normalize_skill",
    "normalize_skills",
    "normalize_text",
]
