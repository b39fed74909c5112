# jobboard/services/scoring.py
import math
from typing import Any, Dict, Iterable, List, Optional
from pydantic import BaseModel, Field

# required skills dominate the score
REQUIRED_WEIGHT = 0.8
NICE_WEIGHT = 0.2


class MatchResult(BaseModel):
    score: int = Field(0, ge=0, le=100)
    required_pct: int = Field(0, ge=0, le=100)
    nice_pct: int = Field(0, ge=0, le=100)
    required_matches: List[str] = []
    nice_matches: List[str] = []
    missing_required: List[str] = []

    def to_dict(self) -> Dict[str, Any]:
        """camelCase payload, as stored next to an application's match_percentage."""
        return {
            "score": self.score,
            "requiredPct": self.required_pct,
            "nicePct": self.nice_pct,
            "requiredMatches": list(self.required_matches),
            "niceMatches": list(self.nice_matches),
            "missingRequired": list(self.missing_required),
        }


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _ordered_set(values: Optional[Iterable[str]]) -> List[str]:
    seen = set()
    out = []
    for v in values or []:
        if v not in seen:
            seen.add(v)
            out.append(v)
    return out


def _coverage(wanted: List[str], have: set) -> float:
    if not wanted:
        return 0.0
    return len([s for s in wanted if s in have]) / len(wanted) * 100.0


def compute_match(required: Iterable[str], nice: Iterable[str], candidate: Iterable[str]) -> MatchResult:
    """
    Weighted skill match: 80% required coverage, 20% nice-to-have coverage.

    Inputs are canonical names (run them through normalize_skills first);
    membership is exact. A job with no listed skills scores 0, not 100.

    Returns:
      MatchResult with score/required_pct/nice_pct in 0..100 and the matching
      and missing skills in the order of `required` / `nice`.
    """
    req = _ordered_set(required)
    nice_set = _ordered_set(nice)
    cand = set(_ordered_set(candidate))

    required_raw = _coverage(req, cand)
    nice_raw = _coverage(nice_set, cand)

    return MatchResult(
        score=round_half_up(required_raw * REQUIRED_WEIGHT + nice_raw * NICE_WEIGHT),
        required_pct=round_half_up(required_raw),
        nice_pct=round_half_up(nice_raw),
        required_matches=[s for s in req if s in cand],
        nice_matches=[s for s in nice_set if s in cand],
        missing_required=[s for s in req if s not in cand],
    )
