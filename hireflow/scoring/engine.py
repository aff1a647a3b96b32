"""
Awaitable scoring engine.

:class:`ScoringEngine` is the boundary the rest of an application talks
to.  Each operation validates its arguments, waits for the configured
simulated latency, then runs the matching synthesizer.  The wait stands
in for a call to a real inference service; it is the only place that
would change if one were plugged in.

Waiting is cooperative.  Cancelling the awaiting task cancels the
sleep, and every operation accepts an ``abort`` event which, when set
before the wait is over, stops the call with :class:`ScoringAborted`.
The ``sleep`` coroutine function is injectable so tests can run without
waiting.
"""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import Awaitable, Callable, Iterable, List, Optional

from ..config import EngineConfig
from ..errors import ScoringAborted
from .match import synthesize_match
from .questions import synthesize_questions
from .ranking import CandidateLike, synthesize_ranking
from .resume_score import synthesize_score
from .schema import InterviewQuestion, MatchResult, RankedCandidate, ScoreResult
from .validate import coerce_candidates, require_text

logger = logging.getLogger(__name__)

Sleeper = Callable[[float], Awaitable[None]]


class ScoringEngine:
    """Deterministic pseudo-AI scoring with simulated latency."""

    def __init__(self, config: Optional[EngineConfig] = None, sleep: Optional[Sleeper] = None) -> None:
        self.config = config or EngineConfig()
        self._sleep: Sleeper = sleep or asyncio.sleep

    async def _wait(self, operation: str, abort: Optional[asyncio.Event]) -> None:
        seconds = self.config.delay_for(operation)
        if abort is None:
            if seconds > 0:
                await self._sleep(seconds)
            return
        if abort.is_set():
            raise ScoringAborted(operation)
        sleeper = asyncio.ensure_future(self._sleep(seconds))
        watcher = asyncio.ensure_future(abort.wait())
        try:
            done, _ = await asyncio.wait({sleeper, watcher}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in (sleeper, watcher):
                if not task.done():
                    task.cancel()
        if sleeper not in done:
            logger.info("%s aborted by caller", operation)
            raise ScoringAborted(operation)
        sleeper.result()

    async def score_resume(
        self,
        candidate_name: str,
        job_description: str,
        abort: Optional[asyncio.Event] = None,
    ) -> ScoreResult:
        """Score a candidate against a job description."""
        require_text(candidate_name, "candidate_name")
        require_text(job_description, "job_description")
        await self._wait("score", abort)
        result = synthesize_score(candidate_name, job_description)
        logger.info("Scored candidate %r - score %.1f", candidate_name, result.score)
        return result

    async def match_candidate_to_job(
        self,
        resume_text: str,
        job_description: str,
        abort: Optional[asyncio.Event] = None,
    ) -> MatchResult:
        """Estimate how well résumé text fits a job description."""
        require_text(resume_text, "resume_text")
        require_text(job_description, "job_description")
        await self._wait("match", abort)
        result = synthesize_match(resume_text, job_description)
        logger.info("Match analysis complete - score %.1f%% (%s)", result.match_score, result.recommendation)
        return result

    async def generate_interview_questions(
        self,
        job_description: str,
        candidate_resume: str = "",
        abort: Optional[asyncio.Event] = None,
    ) -> List[InterviewQuestion]:
        """Pick interview questions for a job and optional résumé."""
        require_text(job_description, "job_description")
        require_text(candidate_resume, "candidate_resume")
        await self._wait("questions", abort)
        questions = synthesize_questions(job_description, candidate_resume)
        logger.info("Generated %d interview questions", len(questions))
        return questions

    async def rank_candidates(
        self,
        candidates: Iterable[CandidateLike],
        job_description: str,
        abort: Optional[asyncio.Event] = None,
    ) -> List[RankedCandidate]:
        """Rank candidates for a job, best first."""
        require_text(job_description, "job_description")
        inputs = coerce_candidates(candidates)
        await self._wait("rank", abort)
        ranked = synthesize_ranking(inputs, job_description)
        logger.info("Ranked %d candidates for job", len(ranked))
        return ranked


@lru_cache()
def get_default_engine() -> ScoringEngine:
    """Return the engine used by the module-level shortcuts."""
    return ScoringEngine()


async def score_resume(candidate_name: str, job_description: str) -> ScoreResult:
    return await get_default_engine().score_resume(candidate_name, job_description)


async def match_candidate_to_job(resume_text: str, job_description: str) -> MatchResult:
    return await get_default_engine().match_candidate_to_job(resume_text, job_description)


async def generate_interview_questions(job_description: str, candidate_resume: str = "") -> List[InterviewQuestion]:
    return await get_default_engine().generate_interview_questions(job_description, candidate_resume)


async def rank_candidates(candidates: Iterable[CandidateLike], job_description: str) -> List[RankedCandidate]:
    return await get_default_engine().rank_candidates(candidates, job_description)
