"""Interview question selection from the fixed question bank."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List

from .hashing import hash_text
from .picker import pick
from .pools import QUESTION_BANK
from .schema import InterviewQuestion
from .validate import require_text

logger = logging.getLogger(__name__)


def synthesize_questions(job_description: str, candidate_resume: str) -> List[InterviewQuestion]:
    """Select between five and eight distinct questions for an interview.

    Raises:
        InvalidInputError: If either argument is not a string.
    """
    require_text(job_description, "job_description")
    require_text(candidate_resume, "candidate_resume")
    seed = hash_text((job_description + candidate_resume).lower())
    logger.debug("Question seed: %d", seed)
    count = 5 + seed % 4
    return [replace(q) for q in pick(QUESTION_BANK, seed + 30, count)]
