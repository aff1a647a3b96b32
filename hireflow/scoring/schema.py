"""
Result schema for the scoring engine.

Each operation of :class:`~hireflow.scoring.engine.ScoringEngine`
returns one of the frozen dataclasses below.  They are created fresh
for every call and carry no behaviour beyond conversion to plain
dictionaries for JSON or CSV output.  Lists are stored as tuples so a
result cannot be mutated after it has been handed out.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional, Tuple

RECOMMENDATIONS = ("strong_match", "good_match", "partial_match", "weak_match")
QUESTION_CATEGORIES = ("technical", "behavioral", "situational", "culture_fit")
QUESTION_DIFFICULTIES = ("easy", "medium", "hard")


def _as_dict(obj) -> Dict[str, object]:
    data = asdict(obj)
    for key, value in data.items():
        if isinstance(value, tuple):
            data[key] = list(value)
    return data


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of scoring a candidate against a job description."""

    score: float
    summary: str
    strengths: Tuple[str, ...]
    concerns: Tuple[str, ...]

    def to_dict(self) -> Dict[str, object]:
        return _as_dict(self)


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching résumé text against a job description."""

    match_score: float
    matching_skills: Tuple[str, ...]
    missing_skills: Tuple[str, ...]
    recommendation: str
    summary: str

    def to_dict(self) -> Dict[str, object]:
        return _as_dict(self)


@dataclass(frozen=True)
class InterviewQuestion:
    """One entry of the interview question bank."""

    question: str
    category: str
    difficulty: str
    follow_up: str

    def to_dict(self) -> Dict[str, object]:
        return _as_dict(self)


@dataclass(frozen=True)
class CandidateInput:
    """A candidate handed to the ranking operation."""

    id: str
    name: str
    prior_score: Optional[float] = None


@dataclass(frozen=True)
class RankedCandidate:
    """A candidate's position in a ranking for one job."""

    candidate_id: str
    candidate_name: str
    score: float
    match_percentage: int
    key_strengths: Tuple[str, ...]
    rank: int

    @property
    def composite(self) -> float:
        return composite_score(self.score, self.match_percentage)

    def to_dict(self) -> Dict[str, object]:
        return _as_dict(self)


SCORE_WEIGHT = 0.4
MATCH_WEIGHT = 0.6


def composite_score(score: float, match_percentage: float) -> float:
    """Weighted combination used to order ranked candidates."""
    return score * SCORE_WEIGHT + match_percentage * MATCH_WEIGHT
