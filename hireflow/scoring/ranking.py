"""
Candidate ranking for a single job.

Each candidate gets its own seed from name and job description.  The
seed yields a whole-number match percentage (55-98) and two key
strengths.  Candidates are then ordered by the composite of their prior
score and that match percentage; Python's sort is stable, so equal
composites keep the order they were given in.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Union

from .hashing import hash_text
from .match import MATCH_CEILING_TENTHS, MATCH_FLOOR_TENTHS, MATCH_SPREAD_TENTHS
from .picker import pick
from .pools import STRENGTHS
from .schema import CandidateInput, RankedCandidate, composite_score
from .validate import coerce_candidates, require_text

logger = logging.getLogger(__name__)

CandidateLike = Union[CandidateInput, Mapping[str, object]]


def match_percentage_from_seed(seed: int) -> int:
    tenths = MATCH_FLOOR_TENTHS + seed % MATCH_SPREAD_TENTHS
    percent = (tenths + 5) // 10
    return max(MATCH_FLOOR_TENTHS // 10, min(MATCH_CEILING_TENTHS // 10, percent))


def synthesize_ranking(candidates: Iterable[CandidateLike], job_description: str) -> List[RankedCandidate]:
    """Rank candidates for a job, best first.

    Args:
        candidates: :class:`CandidateInput` objects or mappings with
            ``id``, ``name`` and an optional ``prior_score``.
        job_description: Full text of the job posting.

    Returns:
        Ranked candidates with ``rank`` set to 1..N.

    Raises:
        InvalidInputError: If the description is not a string or a
            candidate is malformed.
    """
    require_text(job_description, "job_description")
    inputs = coerce_candidates(candidates)

    scored = []
    for cand in inputs:
        seed = hash_text((cand.name + job_description).lower())
        score = cand.prior_score if cand.prior_score is not None else 0.0
        percent = match_percentage_from_seed(seed)
        strengths = tuple(pick(STRENGTHS, seed + 5, 2))
        scored.append((composite_score(score, percent), cand, score, percent, strengths))

    scored.sort(key=lambda entry: entry[0], reverse=True)
    return [
        RankedCandidate(
            candidate_id=cand.id,
            candidate_name=cand.name,
            score=score,
            match_percentage=percent,
            key_strengths=strengths,
            rank=position,
        )
        for position, (_, cand, score, percent, strengths) in enumerate(scored, start=1)
    ]
