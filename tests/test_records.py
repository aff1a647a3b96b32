"""
Unittest suite for the pipeline record CSV files.

Records are written to a temporary directory, read back and compared.
Malformed rows must raise ``RecordError`` with the offending line.
"""

from __future__ import annotations

import csv
import tempfile
import unittest
from datetime import datetime, timezone
from pathlib import Path

from hireflow.errors import RecordError
from hireflow.records import (
    CandidateRecord,
    load_candidates_csv,
    load_interviews_csv,
    load_jobs_csv,
    write_candidates_csv,
    write_rankings_csv,
)
from hireflow.records.schema import CANDIDATE_HEADERS, RANKING_HEADERS
from hireflow.scoring import synthesize_ranking


class TestRecordsCsv(unittest.TestCase):
    """Reading and writing pipeline records."""

    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.temp_dir.name)

    def tearDown(self) -> None:
        self.temp_dir.cleanup()

    def _write(self, name: str, text: str) -> str:
        path = self.root / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    def test_load_jobs(self) -> None:
        path = self._write(
            "jobs.csv",
            "job_id,title,description,location,status,created_at\n"
            "job_fe,Frontend Engineer,Build UIs,\"San Francisco, CA\",active,2026-01-10\n"
            "job_be,Backend Developer,Build APIs,,Paused,\n",
        )
        jobs = load_jobs_csv(path)
        self.assertEqual([j.job_id for j in jobs], ["job_fe", "job_be"])
        self.assertEqual(jobs[0].location, "San Francisco, CA")
        self.assertEqual(jobs[0].created_at, datetime(2026, 1, 10))
        self.assertIsNone(jobs[1].location)
        self.assertEqual(jobs[1].status, "paused")
        self.assertIsNone(jobs[1].created_at)

    def test_candidates_round_trip(self) -> None:
        candidates = [
            CandidateRecord(
                candidate_id="c1",
                name="Sarah Chen",
                email="sarah@example.com",
                job_id="job_fe",
                stage="interview",
                applied_at=datetime(2026, 2, 1, 9, 30),
                ai_score=8.7,
                ai_summary="Good fit.\n\nStrengths: A; B\n\nConcerns: C",
            ),
            CandidateRecord(
                candidate_id="c2",
                name="Marcus Johnson",
                email="marcus@example.com",
                job_id="job_be",
                stage="applied",
                applied_at=datetime(2026, 2, 3, tzinfo=timezone.utc),
            ),
        ]
        path = str(self.root / "candidates.csv")
        write_candidates_csv(candidates, path)
        with open(path, newline="", encoding="utf-8") as f:
            header = next(csv.reader(f))
        self.assertEqual(header, CANDIDATE_HEADERS)
        self.assertEqual(load_candidates_csv(path), candidates)

    def test_load_interviews_defaults(self) -> None:
        path = self._write(
            "interviews.csv",
            "interview_id,candidate_id,scheduled_at,status,interview_type,duration_min\n"
            "i1,c1,2026-03-15T10:00:00Z,scheduled,,\n"
            "i2,c2,2026-03-16T14:00:00,no_show,onsite,45\n",
        )
        interviews = load_interviews_csv(path)
        self.assertEqual(interviews[0].scheduled_at, datetime(2026, 3, 15, 10, tzinfo=timezone.utc))
        self.assertEqual(interviews[0].interview_type, "video")
        self.assertEqual(interviews[0].duration_min, 60)
        self.assertEqual(interviews[1].status, "no_show")
        self.assertEqual(interviews[1].duration_min, 45)

    def test_bad_rows_raise_record_error(self) -> None:
        bad_stage = self._write(
            "bad_stage.csv",
            "candidate_id,name,email,job_id,stage,applied_at,ai_score,ai_summary\n"
            "c1,Ann,ann@example.com,job_fe,sleeping,2026-01-01,,\n",
        )
        with self.assertRaises(RecordError) as ctx:
            load_candidates_csv(bad_stage)
        self.assertIn("line 2", str(ctx.exception))

        bad_score = self._write(
            "bad_score.csv",
            "candidate_id,name,email,job_id,stage,applied_at,ai_score,ai_summary\n"
            "c1,Ann,ann@example.com,job_fe,applied,2026-01-01,high,\n",
        )
        with self.assertRaises(RecordError):
            load_candidates_csv(bad_score)

        bad_date = self._write(
            "bad_date.csv",
            "interview_id,candidate_id,scheduled_at,status\n"
            "i1,c1,tomorrow,scheduled\n",
        )
        with self.assertRaises(RecordError):
            load_interviews_csv(bad_date)

    def test_non_finite_score_raises_record_error(self) -> None:
        for value in ("nan", "inf", "-Infinity"):
            path = self._write(
                f"score_{value}.csv",
                "candidate_id,name,email,job_id,stage,applied_at,ai_score,ai_summary\n"
                f"c1,Ann,ann@example.com,job_fe,applied,2026-01-01,{value},\n",
            )
            with self.subTest(value=value):
                with self.assertRaises(RecordError) as ctx:
                    load_candidates_csv(path)
                self.assertIn("finite", str(ctx.exception))

    def test_write_rankings(self) -> None:
        ranked = synthesize_ranking(
            [{"id": "a", "name": "Ann", "prior_score": 8.0}, {"id": "b", "name": "Bo"}],
            "Frontend role",
        )
        path = str(self.root / "ranking.csv")
        write_rankings_csv(ranked, path)
        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        self.assertEqual(list(rows[0].keys()), RANKING_HEADERS)
        self.assertEqual([row["rank"] for row in rows], ["1", "2"])
        self.assertEqual(rows[0]["candidate_id"], ranked[0].candidate_id)
        self.assertEqual(rows[0]["key_strengths"], "; ".join(ranked[0].key_strengths))


if __name__ == "__main__":
    unittest.main()
