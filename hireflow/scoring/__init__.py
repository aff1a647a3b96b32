"""
Deterministic pseudo-AI scoring.

The ``scoring`` package imitates an external AI scoring service.  Four
operations are offered:

* résumé scoring - a 6.0-9.5 score with summary, strengths and concerns;
* matching - a 55-98% match with matching and missing skills and a
  recommendation tier;
* interview questions - five to eight questions from a fixed bank;
* ranking - candidates ordered by prior score and match percentage.

Every result is derived from a hash of the input text, so the same
input always produces the same output.  :class:`ScoringEngine` wraps
the synthesizers with a simulated, cancellable latency.
"""

from .engine import (  # noqa: F401
    ScoringEngine,
    generate_interview_questions,
    get_default_engine,
    match_candidate_to_job,
    rank_candidates,
    score_resume,
)
from .hashing import hash_text  # noqa: F401
from .match import recommend, synthesize_match  # noqa: F401
from .picker import pick  # noqa: F401
from .questions import synthesize_questions  # noqa: F401
from .ranking import synthesize_ranking  # noqa: F401
from .resume_score import synthesize_score  # noqa: F401
from .schema import (  # noqa: F401
    CandidateInput,
    InterviewQuestion,
    MatchResult,
    RankedCandidate,
    ScoreResult,
)
from .summary import format_ai_summary, parse_ai_summary  # noqa: F401
