"""
Pipeline record schema.

Jobs, candidates and interviews as the hiring pipeline stores them.
The CSV column order of each record is given by its ``*_HEADERS``
list; dates are ISO-8601 strings in CSV and :class:`datetime` objects
in memory.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

CANDIDATE_STAGES = ["applied", "screening", "interview", "offer", "hired", "rejected"]
# Stages that count as having passed through interviewing.
INTERVIEWED_STAGES = ["interview", "offer", "hired"]
JOB_STATUSES = ["active", "paused", "closed", "draft"]
INTERVIEW_STATUSES = ["scheduled", "completed", "cancelled", "no_show"]

JOB_HEADERS = ["job_id", "title", "description", "location", "status", "created_at"]

CANDIDATE_HEADERS = [
    "candidate_id", "name", "email", "job_id", "stage",
    "applied_at", "ai_score", "ai_summary",
]

INTERVIEW_HEADERS = [
    "interview_id", "candidate_id", "scheduled_at", "status",
    "interview_type", "duration_min",
]

RANKING_HEADERS = [
    "rank", "candidate_id", "candidate_name", "score",
    "match_percentage", "composite", "key_strengths",
]


@dataclass
class JobRecord:
    job_id: str
    title: str
    description: str
    location: Optional[str]
    status: str                   # one of JOB_STATUSES
    created_at: Optional[datetime]


@dataclass
class CandidateRecord:
    candidate_id: str
    name: str
    email: str
    job_id: str
    stage: str                    # one of CANDIDATE_STAGES
    applied_at: datetime
    ai_score: Optional[float] = None
    ai_summary: Optional[str] = None

    def to_csv_row(self) -> List[str]:
        return [
            self.candidate_id,
            self.name,
            self.email,
            self.job_id,
            self.stage,
            self.applied_at.isoformat(),
            "" if self.ai_score is None else f"{self.ai_score:.1f}",
            self.ai_summary or "",
        ]


@dataclass
class InterviewRecord:
    interview_id: str
    candidate_id: str
    scheduled_at: datetime
    status: str                   # one of INTERVIEW_STATUSES
    interview_type: str = "video"
    duration_min: int = 60
