"""
CSV readers for pipeline records.

Each loader reads a header-row CSV and converts the string columns
back into typed record fields.  Empty optional columns become ``None``.
A value that cannot be converted raises :class:`RecordError` naming
the file and line.
"""

from __future__ import annotations

import csv
import logging
import math
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

from ..errors import RecordError
from .schema import (
    CANDIDATE_STAGES,
    INTERVIEW_STATUSES,
    JOB_STATUSES,
    CandidateRecord,
    InterviewRecord,
    JobRecord,
)

logger = logging.getLogger(__name__)

R = TypeVar("R")


def parse_datetime(value: str) -> datetime:
    """Parse an ISO-8601 date or datetime; a trailing ``Z`` means UTC."""
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _optional(row: Dict[str, str], key: str) -> Optional[str]:
    value = (row.get(key) or "").strip()
    return value or None


def _choice(value: str, allowed: Sequence[str], field_name: str) -> str:
    value = value.strip().lower()
    if value not in allowed:
        raise ValueError(f"{field_name} '{value}' is not one of {', '.join(allowed)}")
    return value


def _read_rows(path: str, convert: Callable[[Dict[str, str]], R]) -> List[R]:
    records: List[R] = []
    with open(path, "r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for row in reader:
            try:
                records.append(convert(row))
            except (KeyError, TypeError, ValueError) as exc:
                raise RecordError(f"{path}, line {reader.line_num}: {exc}") from exc
    logger.debug("Loaded %d records from %s", len(records), path)
    return records


def _job_from_row(row: Dict[str, str]) -> JobRecord:
    created = _optional(row, "created_at")
    return JobRecord(
        job_id=row["job_id"],
        title=row.get("title", ""),
        description=row.get("description", ""),
        location=_optional(row, "location"),
        status=_choice(row.get("status") or "active", JOB_STATUSES, "status"),
        created_at=parse_datetime(created) if created else None,
    )


def _score(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    score = float(value)
    if not math.isfinite(score):
        raise ValueError(f"ai_score must be a finite number, got '{value}'")
    return score


def _candidate_from_row(row: Dict[str, str]) -> CandidateRecord:
    score = _optional(row, "ai_score")
    return CandidateRecord(
        candidate_id=row["candidate_id"],
        name=row.get("name", ""),
        email=row.get("email", ""),
        job_id=row["job_id"],
        stage=_choice(row.get("stage") or "applied", CANDIDATE_STAGES, "stage"),
        applied_at=parse_datetime(row["applied_at"]),
        ai_score=_score(score),
        ai_summary=_optional(row, "ai_summary"),
    )


def _interview_from_row(row: Dict[str, str]) -> InterviewRecord:
    duration = _optional(row, "duration_min")
    return InterviewRecord(
        interview_id=row["interview_id"],
        candidate_id=row["candidate_id"],
        scheduled_at=parse_datetime(row["scheduled_at"]),
        status=_choice(row.get("status") or "scheduled", INTERVIEW_STATUSES, "status"),
        interview_type=_optional(row, "interview_type") or "video",
        duration_min=int(duration) if duration else 60,
    )


def load_jobs_csv(path: str) -> List[JobRecord]:
    return _read_rows(path, _job_from_row)


def load_candidates_csv(path: str) -> List[CandidateRecord]:
    return _read_rows(path, _candidate_from_row)


def load_interviews_csv(path: str) -> List[InterviewRecord]:
    return _read_rows(path, _interview_from_row)
