"""
CSV writers for pipeline records and rankings.

Files are overwritten and written as UTF-8.  List columns are joined
with ``"; "``.
"""

from __future__ import annotations

import csv
from typing import Iterable

from ..scoring.schema import RankedCandidate
from .schema import CANDIDATE_HEADERS, RANKING_HEADERS, CandidateRecord


def write_candidates_csv(candidates: Iterable[CandidateRecord], path: str) -> None:
    """Write candidates to a CSV file in :data:`CANDIDATE_HEADERS` order."""
    with open(path, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CANDIDATE_HEADERS)
        for candidate in candidates:
            writer.writerow(candidate.to_csv_row())


def write_rankings_csv(ranked: Iterable[RankedCandidate], path: str) -> None:
    """Write a ranking to a CSV file, best candidate first."""
    with open(path, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=RANKING_HEADERS)
        writer.writeheader()
        for entry in ranked:
            writer.writerow(
                {
                    "rank": entry.rank,
                    "candidate_id": entry.candidate_id,
                    "candidate_name": entry.candidate_name,
                    "score": f"{entry.score:.1f}",
                    "match_percentage": entry.match_percentage,
                    "composite": f"{entry.composite:.2f}",
                    "key_strengths": "; ".join(entry.key_strengths),
                }
            )
