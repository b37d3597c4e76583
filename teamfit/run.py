"""
Command-line runner for the compatibility engine.

Usage:
    python -m teamfit.run rank --data data/sample_pool.json --project p1
    python -m teamfit.run suggest --data data/sample_pool.json --project p1 --team-size 3
    python -m teamfit.run pair --data data/sample_pool.json alice bob
    python -m teamfit.run diagnose --data data/sample_pool.json

Commands:
1. rank: rank a project's applicants against the project and existing members
2. suggest: recommend teams from a project's applicants
3. pair: show every term of one pairwise score
4. diagnose: score distribution and symmetry report for the whole pool
"""

import argparse
import itertools
import logging
import sys
from typing import Any, Dict, List, Optional

import pandas as pd

from .configs.loader import load_config, validate_config, get_config_value
from .data_loading.loaders import CandidatePool, load_pool
from .evaluation.metrics import create_evaluation_report
from .fusion.weights import EngineConfig
from .matching.engine import CompatibilityEngine

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging level from config."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(level)


def build_engine(config_path: Optional[str], log_level: Optional[str] = None) -> CompatibilityEngine:
    """
    Create an engine from an optional YAML file.

    Args:
        config_path: Path to the configuration file, or None for defaults
        log_level: Overrides global.log_level when given

    Returns:
        Configured CompatibilityEngine

    Raises:
        ValueError: If the configuration has blocking issues
    """
    config: Dict[str, Any] = {}
    if config_path:
        config = load_config(config_path)
        issues = validate_config(config)
        for issue in issues:
            logger.warning(f"Config issue: {issue}")

    setup_logging(log_level or get_config_value(config, "global.log_level", "INFO"))
    return CompatibilityEngine(EngineConfig.from_config(config))


def run_rank(
    engine: CompatibilityEngine,
    pool: CandidatePool,
    project_id: str,
    member_ids: Optional[List[str]] = None
) -> pd.DataFrame:
    """Ranking of a project's applicants as a DataFrame."""
    project = pool.get_project(project_id)
    results = engine.rank_candidates(project, pool.candidates_for(project_id), member_ids or [], pool.profiles)
    columns = ["freelancer_id", "project_score", "avg_member_score", "total_score"]
    return pd.DataFrame([r.to_dict() for r in results], columns=columns)


def run_suggest(
    engine: CompatibilityEngine,
    pool: CandidatePool,
    project_id: str,
    team_size: Optional[int] = None
) -> pd.DataFrame:
    """Team suggestions for a project as a DataFrame."""
    project = pool.get_project(project_id)
    suggestions = engine.suggest_teams(project, pool.candidates_for(project_id), team_size, pool.profiles)
    rows = [{"members": ", ".join(s.members), "avg_score": s.avg_score} for s in suggestions]
    return pd.DataFrame(rows, columns=["members", "avg_score"])


def run_pair(engine: CompatibilityEngine, pool: CandidatePool, id_a: str, id_b: str) -> pd.DataFrame:
    """
    Pairwise breakdown as a one-column DataFrame.

    Raises:
        KeyError: If either profile is missing
    """
    for user_id in (id_a, id_b):
        if user_id not in pool.profiles:
            raise KeyError(f"Unknown freelancer: {user_id}")
    breakdown = engine.pairwise_breakdown(pool.profiles[id_a], pool.profiles[id_b])
    return pd.DataFrame.from_dict(breakdown.to_dict(), orient="index", columns=[f"{id_a} / {id_b}"])


def run_diagnose(engine: CompatibilityEngine, pool: CandidatePool, output: Optional[str] = None) -> str:
    """
    Evaluation report over every pair in the pool.

    Raises:
        ValueError: If the pool has fewer than two profiles
    """
    ids = list(pool.profiles)
    if len(ids) < 2:
        raise ValueError("Diagnostics need at least two profiles")
    pairs = [(pool.profiles[a], pool.profiles[b]) for a, b in itertools.combinations(ids, 2)]
    scores = engine.score_pairs(pairs)
    report = create_evaluation_report("pairwise", scores, profiles=pool.profiles, engine=engine)
    if output:
        report.save(output)
    return report.summary()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Score freelancers against projects and each other"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file (defaults apply when omitted)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (overrides global.log_level)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    rank = subparsers.add_parser("rank", help="Rank a project's applicants")
    rank.add_argument("--data", required=True, help="Pool JSON file")
    rank.add_argument("--project", required=True, help="Project id")
    rank.add_argument("--members", nargs="*", default=[], help="Existing member ids")

    suggest = subparsers.add_parser("suggest", help="Suggest teams for a project")
    suggest.add_argument("--data", required=True, help="Pool JSON file")
    suggest.add_argument("--project", required=True, help="Project id")
    suggest.add_argument("--team-size", type=int, default=None, help="Members per team (project's size when omitted)")

    pair = subparsers.add_parser("pair", help="Show a pairwise breakdown")
    pair.add_argument("--data", required=True, help="Pool JSON file")
    pair.add_argument("freelancer_a")
    pair.add_argument("freelancer_b")

    diagnose = subparsers.add_parser("diagnose", help="Report score diagnostics for the pool")
    diagnose.add_argument("--data", required=True, help="Pool JSON file")
    diagnose.add_argument("--output", default=None, help="Save the report as JSON")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the runner."""
    args = build_parser().parse_args(argv)

    try:
        engine = build_engine(args.config, args.log_level)
        pool = load_pool(args.data)

        if args.command == "rank":
            print(run_rank(engine, pool, args.project, args.members).to_string(index=False))
        elif args.command == "suggest":
            print(run_suggest(engine, pool, args.project, args.team_size).to_string(index=False))
        elif args.command == "pair":
            print(run_pair(engine, pool, args.freelancer_a, args.freelancer_b).to_string())
        elif args.command == "diagnose":
            print(run_diagnose(engine, pool, args.output))
        return 0
    except Exception as e:
        logger.exception(f"Command {args.command} failed with error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
