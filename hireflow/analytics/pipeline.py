"""
Hiring pipeline analytics.

Summarises candidates, jobs and interviews into the figures shown on
the analytics and dashboard views: the stage funnel, time to hire,
conversion per location and per job, six months of application and
interview trends and interview outcomes.  All functions are pure; the
reference time ``now`` is passed in so results are reproducible.
"""

from __future__ import annotations

import logging
import math
from collections import OrderedDict
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence

from ..records.schema import (
    CANDIDATE_STAGES,
    INTERVIEW_STATUSES,
    INTERVIEWED_STAGES,
    CandidateRecord,
    InterviewRecord,
    JobRecord,
)

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "Remote"
TREND_MONTHS = 6
# Reported when nobody has been hired yet.
PLACEHOLDER_TIME_TO_HIRE = {"average": 28, "min": 14, "max": 45}

_CUMULATIVE_STAGES = ["applied", "screening", "interview", "offer", "hired"]


def _round_half_up(value: float, digits: int = 0):
    factor = 10 ** digits
    rounded = math.floor(value * factor + 0.5) / factor
    return int(rounded) if digits == 0 else rounded


def _naive_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


def _average_score(candidates: Iterable[CandidateRecord]) -> float:
    # Zero counts as unscored, like an empty score.
    scores = [c.ai_score for c in candidates if c.ai_score]
    if not scores:
        return 0
    return _round_half_up(sum(scores) / len(scores), 1)


def _conversion_rate(hired: int, total: int) -> int:
    return _round_half_up(hired / total * 100) if total else 0


def stage_funnel(candidates: Sequence[CandidateRecord]) -> Dict[str, int]:
    """Number of candidates currently in each stage."""
    funnel = OrderedDict((stage, 0) for stage in CANDIDATE_STAGES)
    for c in candidates:
        if c.stage in funnel:
            funnel[c.stage] += 1
    return dict(funnel)


def cumulative_funnel(candidates: Sequence[CandidateRecord]) -> Dict[str, int]:
    """Candidates who reached each stage, rejected candidates excluded
    from every stage but ``applied``."""
    result = {"applied": len(candidates)}
    for i, stage in enumerate(_CUMULATIVE_STAGES[1:], start=1):
        reached = _CUMULATIVE_STAGES[i:]
        result[stage] = sum(1 for c in candidates if c.stage in reached)
    return result


def time_to_hire(candidates: Sequence[CandidateRecord], now: datetime) -> Dict[str, int]:
    hired = [c for c in candidates if c.stage == "hired"]
    if not hired:
        return dict(PLACEHOLDER_TIME_TO_HIRE, hired_count=0)
    now = _naive_utc(now)
    days = [
        max(1, math.floor((now - _naive_utc(c.applied_at)).total_seconds() / 86400))
        for c in hired
    ]
    return {
        "average": _round_half_up(sum(days) / len(days)),
        "min": min(days),
        "max": max(days),
        "hired_count": len(hired),
    }


def _group_stats(group: Sequence[CandidateRecord]) -> Dict[str, object]:
    hired = sum(1 for c in group if c.stage == "hired")
    return {
        "total_candidates": len(group),
        "hired_count": hired,
        "interviewed_count": sum(1 for c in group if c.stage in INTERVIEWED_STAGES),
        "conversion_rate": _conversion_rate(hired, len(group)),
        "avg_ai_score": _average_score(group),
    }


def source_effectiveness(
    candidates: Sequence[CandidateRecord], jobs: Sequence[JobRecord]
) -> List[Dict[str, object]]:
    """Per-location totals, using the job's location as the source."""
    location_of = {job.job_id: job.location or DEFAULT_LOCATION for job in jobs}
    groups: "OrderedDict[str, List[CandidateRecord]]" = OrderedDict()
    for c in candidates:
        loc = location_of.get(c.job_id, DEFAULT_LOCATION)
        groups.setdefault(loc, []).append(c)
    return [dict(source=loc, **_group_stats(group)) for loc, group in groups.items()]


def job_stats(candidates: Sequence[CandidateRecord], jobs: Sequence[JobRecord]) -> List[Dict[str, object]]:
    stats = []
    for job in jobs:
        group = [c for c in candidates if c.job_id == job.job_id]
        entry: Dict[str, object] = {
            "job_id": job.job_id,
            "job_title": job.title,
            "status": job.status,
            "location": job.location or DEFAULT_LOCATION,
        }
        entry.update(_group_stats(group))
        stats.append(entry)
    return stats


def _month_start(year: int, month: int) -> datetime:
    # month may be out of range; normalise into the right year
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return datetime(year, month, 1)


def monthly_trends(
    candidates: Sequence[CandidateRecord],
    interviews: Sequence[InterviewRecord],
    now: datetime,
    months: int = TREND_MONTHS,
) -> List[Dict[str, object]]:
    """Applications and interviews per calendar month, oldest first."""
    now = _naive_utc(now)
    applied = [_naive_utc(c.applied_at) for c in candidates]
    scheduled = [_naive_utc(i.scheduled_at) for i in interviews]
    trends = []
    for back in range(months - 1, -1, -1):
        start = _month_start(now.year, now.month - back)
        end = _month_start(now.year, now.month - back + 1)
        trends.append(
            {
                "month": start.strftime("%b %Y"),
                "applications": sum(1 for d in applied if start <= d < end),
                "interviews": sum(1 for d in scheduled if start <= d < end),
            }
        )
    return trends


def interviews_by_status(interviews: Sequence[InterviewRecord]) -> Dict[str, int]:
    counts = OrderedDict((status, 0) for status in INTERVIEW_STATUSES)
    for interview in interviews:
        if interview.status in counts:
            counts[interview.status] += 1
    return dict(counts)


def dashboard_stats(
    candidates: Sequence[CandidateRecord],
    interviews: Sequence[InterviewRecord],
    now: datetime,
) -> Dict[str, object]:
    """Headline figures: average AI score and interviews scheduled today."""
    today = _naive_utc(now).date()
    return {
        "avg_ai_score": _average_score(candidates),
        "interviews_today": sum(
            1
            for i in interviews
            if i.status == "scheduled" and _naive_utc(i.scheduled_at).date() == today
        ),
    }


def compute_analytics(
    candidates: Iterable[CandidateRecord],
    jobs: Iterable[JobRecord],
    interviews: Iterable[InterviewRecord],
    now: Optional[datetime] = None,
) -> Dict[str, object]:
    """Compute every analytics section for one organisation's records.

    Args:
        candidates: All candidates.
        jobs: All jobs.
        interviews: All interviews.
        now: Reference time; the current UTC time when omitted.

    Returns:
        A JSON-serialisable dictionary with the keys ``funnel``,
        ``cumulative_funnel``, ``time_to_hire``, ``source_effectiveness``,
        ``job_stats``, ``monthly_trends``, ``interviews_by_status``,
        ``totals`` and ``dashboard``.
    """
    candidates = list(candidates)
    jobs = list(jobs)
    interviews = list(interviews)
    if now is None:
        now = datetime.now(timezone.utc)
    report = {
        "funnel": stage_funnel(candidates),
        "cumulative_funnel": cumulative_funnel(candidates),
        "time_to_hire": time_to_hire(candidates, now),
        "source_effectiveness": source_effectiveness(candidates, jobs),
        "job_stats": job_stats(candidates, jobs),
        "monthly_trends": monthly_trends(candidates, interviews, now),
        "interviews_by_status": interviews_by_status(interviews),
        "totals": {
            "total_candidates": len(candidates),
            "total_jobs": len(jobs),
            "total_interviews": len(interviews),
            "active_jobs": sum(1 for j in jobs if j.status == "active"),
        },
        "dashboard": dashboard_stats(candidates, interviews, now),
    }
    logger.info(
        "Computed analytics for %d candidates, %d jobs, %d interviews",
        len(candidates),
        len(jobs),
        len(interviews),
    )
    return report
