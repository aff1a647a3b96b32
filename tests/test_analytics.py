from datetime import datetime, timezone

import pytest

from hireflow.analytics import compute_analytics, cumulative_funnel, stage_funnel, time_to_hire
from hireflow.analytics.pipeline import (
    dashboard_stats,
    interviews_by_status,
    job_stats,
    monthly_trends,
    source_effectiveness,
)
from hireflow.records import CandidateRecord, InterviewRecord, JobRecord

NOW = datetime(2026, 3, 15, 12)


def _candidate(cid, job_id, stage, applied_at, ai_score=None):
    return CandidateRecord(
        candidate_id=cid,
        name=f"Candidate {cid}",
        email=f"{cid}@example.com",
        job_id=job_id,
        stage=stage,
        applied_at=applied_at,
        ai_score=ai_score,
    )


@pytest.fixture
def jobs():
    return [
        JobRecord("job_fe", "Frontend Engineer", "Build UIs", "San Francisco, CA", "active", None),
        JobRecord("job_be", "Backend Developer", "Build APIs", None, "closed", None),
    ]


@pytest.fixture
def candidates():
    return [
        _candidate("c1", "job_fe", "applied", datetime(2026, 1, 5)),
        _candidate("c2", "job_be", "screening", datetime(2026, 2, 10)),
        _candidate("c3", "job_fe", "interview", datetime(2026, 3, 1), ai_score=8.0),
        _candidate("c4", "job_fe", "hired", datetime(2026, 3, 5, 12), ai_score=9.0),
        _candidate("c5", "job_be", "rejected", datetime(2025, 10, 20)),
    ]


@pytest.fixture
def interviews():
    return [
        InterviewRecord("i1", "c3", datetime(2026, 3, 15, 9), "scheduled"),
        InterviewRecord("i2", "c4", datetime(2026, 3, 15, 15), "cancelled"),
        InterviewRecord("i3", "c4", datetime(2026, 2, 20), "completed"),
        InterviewRecord("i4", "c2", datetime(2026, 3, 16), "scheduled"),
    ]


def test_stage_funnel_counts_every_stage(candidates):
    assert stage_funnel(candidates) == {
        "applied": 1,
        "screening": 1,
        "interview": 1,
        "offer": 0,
        "hired": 1,
        "rejected": 1,
    }


def test_cumulative_funnel_excludes_rejected_after_applied(candidates):
    assert cumulative_funnel(candidates) == {
        "applied": 5,
        "screening": 3,
        "interview": 2,
        "offer": 1,
        "hired": 1,
    }


def test_time_to_hire_in_days(candidates):
    assert time_to_hire(candidates, NOW) == {"average": 10, "min": 10, "max": 10, "hired_count": 1}


def test_time_to_hire_placeholder_without_hires(candidates):
    not_hired = [c for c in candidates if c.stage != "hired"]
    assert time_to_hire(not_hired, NOW) == {"average": 28, "min": 14, "max": 45, "hired_count": 0}


def test_time_to_hire_accepts_aware_now(candidates):
    aware = datetime(2026, 3, 15, 12, tzinfo=timezone.utc)
    assert time_to_hire(candidates, aware)["average"] == 10


def test_source_effectiveness_groups_by_job_location(candidates, jobs):
    sources = source_effectiveness(candidates, jobs)
    assert [s["source"] for s in sources] == ["San Francisco, CA", "Remote"]
    sf, remote = sources
    assert sf["total_candidates"] == 3
    assert sf["hired_count"] == 1
    assert sf["interviewed_count"] == 2
    assert sf["conversion_rate"] == 33
    assert sf["avg_ai_score"] == 8.5
    assert remote["total_candidates"] == 2
    assert remote["conversion_rate"] == 0
    assert remote["avg_ai_score"] == 0


def test_job_stats_per_job(candidates, jobs):
    stats = job_stats(candidates, jobs)
    assert [s["job_id"] for s in stats] == ["job_fe", "job_be"]
    assert stats[0]["job_title"] == "Frontend Engineer"
    assert stats[1]["location"] == "Remote"
    assert stats[1]["status"] == "closed"
    assert stats[1]["interviewed_count"] == 0


def test_monthly_trends_cover_six_months(candidates, interviews):
    trends = monthly_trends(candidates, interviews, NOW)
    assert [t["month"] for t in trends] == [
        "Oct 2025",
        "Nov 2025",
        "Dec 2025",
        "Jan 2026",
        "Feb 2026",
        "Mar 2026",
    ]
    assert [t["applications"] for t in trends] == [1, 0, 0, 1, 1, 2]
    assert [t["interviews"] for t in trends] == [0, 0, 0, 0, 1, 3]


def test_interviews_by_status(interviews):
    assert interviews_by_status(interviews) == {
        "scheduled": 2,
        "completed": 1,
        "cancelled": 1,
        "no_show": 0,
    }


def test_dashboard_counts_scheduled_interviews_today(candidates, interviews):
    assert dashboard_stats(candidates, interviews, NOW) == {"avg_ai_score": 8.5, "interviews_today": 1}


def test_compute_analytics_sections(candidates, jobs, interviews):
    report = compute_analytics(candidates, jobs, interviews, now=NOW)
    assert set(report) == {
        "funnel",
        "cumulative_funnel",
        "time_to_hire",
        "source_effectiveness",
        "job_stats",
        "monthly_trends",
        "interviews_by_status",
        "totals",
        "dashboard",
    }
    assert report["totals"] == {
        "total_candidates": 5,
        "total_jobs": 2,
        "total_interviews": 4,
        "active_jobs": 1,
    }


def test_compute_analytics_on_empty_records():
    report = compute_analytics([], [], [], now=NOW)
    assert report["cumulative_funnel"]["applied"] == 0
    assert report["source_effectiveness"] == []
    assert report["dashboard"] == {"avg_ai_score": 0, "interviews_today": 0}
    assert len(report["monthly_trends"]) == 6


def test_zero_scores_are_left_out_of_averages(candidates, jobs, interviews):
    with_zero = candidates + [_candidate("c6", "job_fe", "applied", datetime(2026, 3, 2), ai_score=0.0)]
    sf = source_effectiveness(with_zero, jobs)[0]
    assert sf["total_candidates"] == 4
    assert sf["avg_ai_score"] == 8.5
    assert dashboard_stats(with_zero, interviews, NOW)["avg_ai_score"] == 8.5
