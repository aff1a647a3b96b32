"""
Hiring pipeline records.

Jobs, candidates and interviews are kept as CSV files by the command
line tools.  This package defines the record dataclasses and the
readers and writers for those files.
"""

from .schema import (  # noqa: F401
    CANDIDATE_STAGES,
    INTERVIEW_STATUSES,
    JOB_STATUSES,
    CandidateRecord,
    InterviewRecord,
    JobRecord,
)
from .read_csv import load_candidates_csv, load_interviews_csv, load_jobs_csv  # noqa: F401
from .write_csv import write_candidates_csv, write_rankings_csv  # noqa: F401
