"""
Command line interface for hireflow.

Subcommands run the scoring engine on ad-hoc text or on the pipeline's
CSV records: scoring a single candidate or every candidate, matching,
interview question generation, ranking the candidates of a job,
computing hiring analytics and printing a ranking report.  The CLI is
intentionally thin and delegates the work to the ``scoring``,
``records`` and ``analytics`` packages.

Results are printed as JSON unless ``--out`` names a file.
"""

from __future__ import annotations

import argparse
import asyncio
import csv
import json
import logging
import sys
from dataclasses import replace
from typing import Dict, List, Optional

from .analytics import compute_analytics
from .config import EngineConfig, load_config
from .errors import HireflowError
from .records import (
    CandidateRecord,
    JobRecord,
    load_candidates_csv,
    load_interviews_csv,
    load_jobs_csv,
    write_candidates_csv,
    write_rankings_csv,
)
from .records.read_csv import parse_datetime
from .scoring import CandidateInput, ScoringEngine, format_ai_summary
from .scoring.summary import resume_text_for

logger = logging.getLogger("hireflow.cli")


def _read_text(text: Optional[str], path: Optional[str]) -> str:
    if path:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    return text or ""


def _emit(payload: object, out: Optional[str]) -> None:
    rendered = json.dumps(payload, indent=2, ensure_ascii=False)
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(rendered + "\n")
        logger.info("Wrote %s", out)
    else:
        print(rendered)


def _jobs_by_id(path: str) -> Dict[str, JobRecord]:
    return {job.job_id: job for job in load_jobs_csv(path)}


def _find(records: Dict[str, object], key: str, kind: str):
    try:
        return records[key]
    except KeyError:
        raise HireflowError(f"{kind} '{key}' not found") from None


def _engine(args: argparse.Namespace) -> ScoringEngine:
    return ScoringEngine(args.engine_config)


def cmd_score(args: argparse.Namespace) -> None:
    """Score one candidate against a job description."""
    job_text = _read_text(args.job_text, args.job_file)
    result = asyncio.run(_engine(args).score_resume(args.name, job_text))
    _emit(result.to_dict(), args.out)


def cmd_score_all(args: argparse.Namespace) -> None:
    """Score every candidate against its job and write them back."""
    jobs = _jobs_by_id(args.jobs)
    candidates = load_candidates_csv(args.candidates)
    engine = _engine(args)

    descriptions = [_find(jobs, c.job_id, "Job").description for c in candidates]

    async def _score_all() -> List[CandidateRecord]:
        results = await asyncio.gather(
            *(engine.score_resume(c.name, text) for c, text in zip(candidates, descriptions))
        )
        return [
            replace(c, ai_score=r.score, ai_summary=format_ai_summary(r))
            for c, r in zip(candidates, results)
        ]

    scored = asyncio.run(_score_all())
    write_candidates_csv(scored, args.out)
    logger.info("Scored %d candidates into %s", len(scored), args.out)


def cmd_match(args: argparse.Namespace) -> None:
    """Match résumé text, or a stored candidate, against a job."""
    if args.candidates:
        if not (args.jobs and args.candidate_id and args.job_id):
            raise HireflowError("--candidates requires --jobs, --candidate-id and --job-id")
        candidates = {c.candidate_id: c for c in load_candidates_csv(args.candidates)}
        candidate = _find(candidates, args.candidate_id, "Candidate")
        job = _find(_jobs_by_id(args.jobs), args.job_id, "Job")
        resume_text = resume_text_for(candidate.ai_summary, candidate.name)
        job_text = job.description
    else:
        resume_text = _read_text(args.resume_text, args.resume_file)
        job_text = _read_text(args.job_text, args.job_file)
    result = asyncio.run(_engine(args).match_candidate_to_job(resume_text, job_text))
    _emit(result.to_dict(), args.out)


def cmd_questions(args: argparse.Namespace) -> None:
    """Generate interview questions for a job."""
    job_text = _read_text(args.job_text, args.job_file)
    resume_text = _read_text(args.resume_text, args.resume_file)
    questions = asyncio.run(_engine(args).generate_interview_questions(job_text, resume_text))
    _emit([q.to_dict() for q in questions], args.out)


def cmd_rank(args: argparse.Namespace) -> None:
    """Rank the candidates who applied to one job and write a CSV."""
    job = _find(_jobs_by_id(args.jobs), args.job_id, "Job")
    applicants = [
        CandidateInput(id=c.candidate_id, name=c.name, prior_score=c.ai_score)
        for c in load_candidates_csv(args.candidates)
        if c.job_id == job.job_id
    ]
    if not applicants:
        logger.warning("No candidates applied to job %s", job.job_id)
    ranked = asyncio.run(_engine(args).rank_candidates(applicants, job.description))
    topk = args.topk or len(ranked)
    write_rankings_csv(ranked[:topk], args.out)
    logger.info("Wrote %d ranked candidates to %s", min(topk, len(ranked)), args.out)


def cmd_analytics(args: argparse.Namespace) -> None:
    """Compute hiring analytics from the record CSVs."""
    interviews = load_interviews_csv(args.interviews) if args.interviews else []
    now = parse_datetime(args.now) if args.now else None
    report = compute_analytics(
        load_candidates_csv(args.candidates),
        load_jobs_csv(args.jobs),
        interviews,
        now=now,
    )
    _emit(report, args.out)


def cmd_report(args: argparse.Namespace) -> None:
    """Print a simple report from a ranking CSV."""
    with open(args.ranking, "r", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        rows = list(reader)
    limit = args.limit or len(rows)
    for row in rows[:limit]:
        print(
            f"{int(row['rank']):02d}. {row['candidate_name']} – "
            f"score {row['score']}, match {row['match_percentage']}%"
        )
        if row["key_strengths"]:
            print(f"   Strengths: {row['key_strengths']}")
        print()


def _add_text_source(parser: argparse.ArgumentParser, name: str, required: bool) -> None:
    group = parser.add_mutually_exclusive_group(required=required)
    group.add_argument(f"--{name}-text", dest=f"{name}_text", help=f"{name.capitalize()} text")
    group.add_argument(f"--{name}-file", dest=f"{name}_file", help=f"Path to a {name} text file")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hireflow", description="Recruitment pipeline scoring tools")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--no-latency", action="store_true", help="Skip the simulated AI latency")
    parser.add_argument("--log-level", help="Logging level (overrides config)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Score
    score_cmd = subparsers.add_parser("score", help="Score one candidate")
    score_cmd.add_argument("--name", required=True, help="Candidate name")
    _add_text_source(score_cmd, "job", required=True)
    score_cmd.add_argument("--out", help="Output JSON path")
    score_cmd.set_defaults(func=cmd_score)

    # Score every stored candidate
    score_all_cmd = subparsers.add_parser("score-all", help="Score every candidate in a CSV")
    score_all_cmd.add_argument("--candidates", required=True, help="Candidates CSV")
    score_all_cmd.add_argument("--jobs", required=True, help="Jobs CSV")
    score_all_cmd.add_argument("--out", required=True, help="Output candidates CSV")
    score_all_cmd.set_defaults(func=cmd_score_all)

    # Match
    match_cmd = subparsers.add_parser("match", help="Match a résumé to a job")
    _add_text_source(match_cmd, "resume", required=False)
    _add_text_source(match_cmd, "job", required=False)
    match_cmd.add_argument("--candidates", help="Candidates CSV (match a stored candidate)")
    match_cmd.add_argument("--jobs", help="Jobs CSV")
    match_cmd.add_argument("--candidate-id", dest="candidate_id", help="Stored candidate id")
    match_cmd.add_argument("--job-id", dest="job_id", help="Stored job id")
    match_cmd.add_argument("--out", help="Output JSON path")
    match_cmd.set_defaults(func=cmd_match)

    # Questions
    questions_cmd = subparsers.add_parser("questions", help="Generate interview questions")
    _add_text_source(questions_cmd, "job", required=True)
    _add_text_source(questions_cmd, "resume", required=False)
    questions_cmd.add_argument("--out", help="Output JSON path")
    questions_cmd.set_defaults(func=cmd_questions)

    # Rank
    rank_cmd = subparsers.add_parser("rank", help="Rank the candidates of a job")
    rank_cmd.add_argument("--candidates", required=True, help="Candidates CSV")
    rank_cmd.add_argument("--jobs", required=True, help="Jobs CSV")
    rank_cmd.add_argument("--job-id", dest="job_id", required=True, help="Job to rank for")
    rank_cmd.add_argument("--topk", type=int, default=0, help="Keep only the best K candidates")
    rank_cmd.add_argument("--out", default="ranking.csv", help="Output CSV path")
    rank_cmd.set_defaults(func=cmd_rank)

    # Analytics
    analytics_cmd = subparsers.add_parser("analytics", help="Compute hiring analytics")
    analytics_cmd.add_argument("--candidates", required=True, help="Candidates CSV")
    analytics_cmd.add_argument("--jobs", required=True, help="Jobs CSV")
    analytics_cmd.add_argument("--interviews", help="Interviews CSV")
    analytics_cmd.add_argument("--now", help="Reference time (ISO-8601), defaults to now")
    analytics_cmd.add_argument("--out", help="Output JSON path")
    analytics_cmd.set_defaults(func=cmd_analytics)

    # Report
    report_cmd = subparsers.add_parser("report", help="Print a ranking CSV as text")
    report_cmd.add_argument("--ranking", required=True, help="Path to ranking CSV")
    report_cmd.add_argument("--limit", type=int, default=20, help="Number of candidates to display")
    report_cmd.set_defaults(func=cmd_report)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config: EngineConfig = load_config(args.config)
        if args.no_latency:
            config = replace(config, simulate_latency=False)
        if args.log_level:
            config = replace(config, log_level=args.log_level.upper())
    except HireflowError as exc:
        parser.error(str(exc))
    logging.basicConfig(level=config.log_level, format="[%(levelname)s] %(message)s")
    args.engine_config = config
    try:
        args.func(args)
    except HireflowError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
