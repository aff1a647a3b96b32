"""
Candidate to job matching.

The match score is a percentage between 55.0 and 98.0 with one decimal.
Matching skills and missing skills are both drawn from :data:`SKILLS`;
missing skills are drawn from what is left after the matching ones are
taken, so the two lists never overlap.
"""

from __future__ import annotations

import logging

from .hashing import hash_text
from .picker import pick
from .pools import RECOMMENDATION_SUMMARIES, SKILLS
from .schema import MatchResult
from .validate import require_text

logger = logging.getLogger(__name__)

MATCH_FLOOR_TENTHS = 550
MATCH_CEILING_TENTHS = 980
MATCH_SPREAD_TENTHS = 450

# (minimum score, tier), checked in order
RECOMMENDATION_THRESHOLDS = (
    (85.0, "strong_match"),
    (72.0, "good_match"),
    (60.0, "partial_match"),
)


def match_tenths_from_seed(seed: int) -> int:
    """Raw match percentage in tenths of a percent, clamped to 55.0-98.0."""
    raw = MATCH_FLOOR_TENTHS + seed % MATCH_SPREAD_TENTHS
    return max(MATCH_FLOOR_TENTHS, min(MATCH_CEILING_TENTHS, raw))


def recommend(match_score: float) -> str:
    """Map a match percentage onto its recommendation tier."""
    for threshold, tier in RECOMMENDATION_THRESHOLDS:
        if match_score >= threshold:
            return tier
    return "weak_match"


def synthesize_match(resume_text: str, job_description: str) -> MatchResult:
    """Match résumé text against a job description.

    Raises:
        InvalidInputError: If either argument is not a string.
    """
    require_text(resume_text, "resume_text")
    require_text(job_description, "job_description")
    seed = hash_text((resume_text + job_description).lower())
    logger.debug("Match seed: %d", seed)

    match_score = match_tenths_from_seed(seed) / 10
    matching = pick(SKILLS, seed + 10, 3 + seed % 5)
    remaining = [skill for skill in SKILLS if skill not in matching]
    missing = pick(remaining, seed + 20, 1 + seed % 4)
    recommendation = recommend(match_score)
    return MatchResult(
        match_score=match_score,
        matching_skills=tuple(matching),
        missing_skills=tuple(missing),
        recommendation=recommendation,
        summary=RECOMMENDATION_SUMMARIES[recommendation],
    )
