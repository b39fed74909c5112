# jobboard/services/postings.py
"""
Helpers for the job and application flows that sit around the skill core:
turning loosely-typed skill fields into lists, preparing a posting's skills
(normalize, categorize, register new ones) and scoring an application.
"""
import json
import logging
from typing import Any, List, Optional
from pydantic import BaseModel

from .catalogue import SkillCatalogue, get_default_catalogue
from .categories import infer_category
from .extractor import extract_skills
from .normalizer import SkillNormalizer, seed_category
from .scoring import MatchResult, compute_match

logger = logging.getLogger(__name__)


def _clean(items) -> List[str]:
    out = []
    for item in items:
        if isinstance(item, dict):
            item = item.get("name")
        if item is None:
            continue
        s = str(item).strip()
        if s:
            out.append(s)
    return out


def parse_skill_list(value: Any) -> List[str]:
    """
    Skills fields arrive as real lists, JSON array strings ('["a","b"]') or
    CSV strings ("a, b"). Returns a list of non-empty stripped strings.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return _clean(value)
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return []
        if (s.startswith("[") and s.endswith("]")) or (s.startswith('"') and s.endswith('"')):
            try:
                parsed = json.loads(s)
            except ValueError:
                parsed = None
            if isinstance(parsed, list):
                return _clean(parsed)
            if isinstance(parsed, str):
                s = parsed
        return _clean(s.split(","))
    return _clean([value])


class JobSkills(BaseModel):
    category: str
    required: List[str] = []
    nice: List[str] = []
    # skills this posting introduced to the catalogue
    added: List[str] = []


def prepare_job_skills(
    title: str,
    required: Any,
    nice: Any = None,
    catalogue: Optional[SkillCatalogue] = None,
    category: Optional[str] = None,
) -> JobSkills:
    """
    Normalizes a posting's required / nice-to-have skills and adds the ones the
    catalogue does not know yet. Seed skills keep their seed category; the rest
    are filed under `category` (inferred from the title when not given).
    """
    catalogue = catalogue if catalogue is not None else get_default_catalogue()
    normalizer = SkillNormalizer(catalogue)
    category = category or infer_category(title)

    added: List[str] = []

    def register(names: List[str]) -> None:
        for name in names:
            if catalogue.find(name) is None and catalogue.add(name, seed_category(name) or category):
                added.append(name)

    # required first, so nice-to-have spellings resolve to what it just added
    req = normalizer.normalize_skills(parse_skill_list(required))
    register(req)
    nice_skills = normalizer.normalize_skills(parse_skill_list(nice))
    register(nice_skills)

    if added:
        logger.info("job %r (%s) added %d new skills: %s", title, category, len(added), added)

    return JobSkills(category=category, required=req, nice=nice_skills, added=added)


def score_application(
    required: Any,
    nice: Any,
    candidate_skills: Any,
    catalogue: Optional[SkillCatalogue] = None,
) -> MatchResult:
    """Match report for an applicant; its score is the application's match_percentage."""
    normalizer = SkillNormalizer(catalogue)
    return compute_match(
        normalizer.normalize_skills(parse_skill_list(required)),
        normalizer.normalize_skills(parse_skill_list(nice)),
        normalizer.normalize_skills(parse_skill_list(candidate_skills)),
    )


def skills_from_resume(text: str, catalogue: Optional[SkillCatalogue] = None) -> List[str]:
    """Resume text -> canonical skill names (extract, then normalize)."""
    return SkillNormalizer(catalogue).normalize_skills(extract_skills(text, catalogue))
