"""
Smoke test for loading and scoring the sample pool.

This script validates that:
1. The configuration loads and validates
2. The sample pool loads into typed records
3. Every engine operation runs on it
4. Pairwise scores are symmetric and in range

Usage:
    python scripts/smoke_test.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import itertools
import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def run_smoke_test():
    """Run smoke tests on loading and scoring."""

    logger.info("=" * 60)
    logger.info("SMOKE TEST: Loading and Scoring")
    logger.info("=" * 60)

    from teamfit.configs import load_config, validate_config
    from teamfit.data_loading import load_pool
    from teamfit.evaluation import check_pairwise_symmetry, compute_pairwise_matrix
    from teamfit.fusion import EngineConfig
    from teamfit.matching import CompatibilityEngine

    results = {}

    # =========================================================================
    # Configuration
    # =========================================================================
    try:
        config_path = project_root / "configs" / "config.yaml"
        config = load_config(str(config_path))
        issues = validate_config(config)
        for issue in issues:
            logger.warning(f"  Config issue: {issue}")
        engine = CompatibilityEngine(EngineConfig.from_config(config))
        results["config"] = "PASSED" if not issues else f"FAILED - {len(issues)} issues"
    except Exception as e:
        logger.error(f"  CONFIG TEST FAILED: {e}")
        results["config"] = f"FAILED - {e}"
        engine = CompatibilityEngine()

    # =========================================================================
    # Sample pool
    # =========================================================================
    try:
        pool = load_pool(str(project_root / "data" / "sample_pool.json"))
        logger.info(f"  Profiles: {len(pool.profiles)}")
        logger.info(f"  Projects: {len(pool.projects)}")
        results["loading"] = "PASSED"
    except Exception as e:
        logger.error(f"  LOADING TEST FAILED: {e}")
        results["loading"] = f"FAILED - {e}"
        pool = None

    # =========================================================================
    # Engine operations
    # =========================================================================
    if pool is not None:
        try:
            for project_id, project in pool.projects.items():
                candidates = pool.candidates_for(project_id)
                ranking = engine.rank_candidates(project, candidates, [], pool.profiles)
                logger.info(f"  {project_id} ranking: {[(r.freelancer_id, r.total_score) for r in ranking]}")
                teams = engine.suggest_teams(project, candidates, None, pool.profiles)
                logger.info(f"  {project_id} teams: {[(t.members, t.avg_score) for t in teams]}")

            out_of_range = [
                (a, b) for a, b in itertools.combinations(pool.profiles, 2)
                if not 0 <= engine.score_pairwise(pool.profiles[a], pool.profiles[b]) <= 100
            ]
            symmetry = check_pairwise_symmetry(pool.profiles, engine)
            logger.info("\n" + compute_pairwise_matrix(pool.profiles, engine).to_string())

            if out_of_range or not symmetry.is_symmetric:
                results["scoring"] = f"FAILED - range {out_of_range}, asymmetric {symmetry.asymmetric_pairs}"
            else:
                results["scoring"] = "PASSED"
        except Exception as e:
            logger.error(f"  SCORING TEST FAILED: {e}")
            results["scoring"] = f"FAILED - {e}"
            import traceback
            traceback.print_exc()

    # =========================================================================
    # Summary
    # =========================================================================
    logger.info("\n" + "=" * 60)
    logger.info("SMOKE TEST SUMMARY")
    logger.info("=" * 60)

    all_passed = True
    for step in ["config", "loading", "scoring"]:
        status = results.get(step, "NOT RUN")
        logger.info(f"  {step}: {status}")
        if status != "PASSED":
            all_passed = False

    if all_passed:
        logger.info("\n  ALL TESTS PASSED")
        return 0
    else:
        logger.error("\n  SOME TESTS FAILED")
        return 1


if __name__ == "__main__":
    sys.exit(run_smoke_test())
