# jobboard/services/categories.py
from typing import List, Tuple

DEFAULT_CATEGORY = "General"

# checked in order; the first group with a keyword in the title wins
CATEGORY_KEYWORDS: List[Tuple[str, Tuple[str, ...]]] = [
    ("IT & Technology", ("developer", "engineer", "programmer")),
    ("Finance & Accounting", ("accountant", "finance", "banker")),
    ("Marketing & Sales", ("marketing", "sales", "advertising")),
    ("Healthcare", ("nurse", "doctor", "medical")),
    ("Education", ("teacher", "professor", "educator")),
    ("Design & Creative", ("designer", "artist", "creative")),
]


def infer_category(job_title: str) -> str:
    """Category for skills first seen on a job posting, guessed from its title."""
    title = (job_title or "").lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(k in title for k in keywords):
            return category
    return DEFAULT_CATEGORY
