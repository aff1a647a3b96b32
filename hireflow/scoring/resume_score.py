"""
Résumé scoring.

Produces a score between 6.0 and 9.5 with a templated summary, three
strengths and one or two concerns.  The score floor and ceiling are a
product decision: the scorer never reports an alarming result.
"""

from __future__ import annotations

import logging

from .hashing import hash_text
from .picker import pick
from .pools import CONCERNS, FOCUS_AREAS, FOCUS_SKILLS, STRENGTHS, SUMMARY_TEMPLATES
from .schema import ScoreResult
from .validate import require_text

logger = logging.getLogger(__name__)

# Scores are computed in hundredths then rounded half-up to tenths.
_BASE_HUNDREDTHS = 600
_SPREAD = 350
_MAX_TENTHS = 95


def score_from_seed(seed: int) -> float:
    hundredths = _BASE_HUNDREDTHS + seed % _SPREAD
    tenths = min(_MAX_TENTHS, (hundredths + 5) // 10)
    return tenths / 10


def synthesize_score(candidate_name: str, job_description: str) -> ScoreResult:
    """Score a candidate for a job.

    Args:
        candidate_name: Name of the candidate.
        job_description: Full text of the job posting.

    Returns:
        A :class:`ScoreResult`.  Identical inputs, ignoring case,
        always give an identical result.

    Raises:
        InvalidInputError: If either argument is not a string.
    """
    require_text(candidate_name, "candidate_name")
    require_text(job_description, "job_description")
    seed = hash_text((candidate_name + job_description).lower())
    logger.debug("Score seed for %r: %d", candidate_name, seed)

    template = SUMMARY_TEMPLATES[seed % len(SUMMARY_TEMPLATES)]
    summary = template.format(
        years=3 + seed % 10,
        area=FOCUS_AREAS[seed % len(FOCUS_AREAS)],
        skill=FOCUS_SKILLS[(seed + 3) % len(FOCUS_SKILLS)],
    )
    return ScoreResult(
        score=score_from_seed(seed),
        summary=summary,
        strengths=tuple(pick(STRENGTHS, seed + 1, 3)),
        concerns=tuple(pick(CONCERNS, seed + 2, 1 + seed % 2)),
    )
