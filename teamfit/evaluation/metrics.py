"""
Diagnostics for compatibility scores.

Scores are rule-based, so there is nothing to validate against; the
diagnostics describe how the engine behaves on a pool:
1. Score distribution analysis
2. Pairwise symmetry check (score(A, B) must equal score(B, A))
3. Scoring mode coverage (quiz vs legacy pairs)
"""

import itertools
import json
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional, Sequence

import numpy as np
import pandas as pd

from ..matching.engine import CompatibilityEngine
from ..matching.schema import FreelancerProfile

logger = logging.getLogger(__name__)


@dataclass
class ScoreDistributionStats:
    """Statistics about score distribution."""
    mean: float
    std: float
    min: float
    max: float
    quantiles: Dict[str, float]  # e.g., {"p10": 42.0, "p50": 61.0, "p90": 78.0}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mean": float(self.mean),
            "std": float(self.std),
            "min": float(self.min),
            "max": float(self.max),
            "quantiles": {k: float(v) for k, v in self.quantiles.items()}
        }


@dataclass
class SymmetryCheck:
    """Results of the pairwise symmetry check."""
    n_pairs: int
    n_asymmetric: int
    asymmetric_pairs: List[List[str]] = field(default_factory=list)

    @property
    def is_symmetric(self) -> bool:
        return self.n_asymmetric == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n_pairs": int(self.n_pairs),
            "n_asymmetric": int(self.n_asymmetric),
            "is_symmetric": self.is_symmetric,
            "asymmetric_pairs": [list(p) for p in self.asymmetric_pairs],
        }


@dataclass
class EvaluationReport:
    """
    Diagnostics report for a set of scores.

    Contains distribution statistics and, when profiles are supplied,
    the symmetry check and scoring mode counts.
    """
    name: str
    distribution_stats: ScoreDistributionStats
    symmetry_check: Optional[SymmetryCheck] = None
    additional_metrics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "name": self.name,
            "distribution_stats": self.distribution_stats.to_dict(),
            "additional_metrics": self.additional_metrics
        }
        if self.symmetry_check:
            result["symmetry_check"] = self.symmetry_check.to_dict()
        return result

    def save(self, filepath: str) -> None:
        """Save report to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved evaluation report to {filepath}")

    def summary(self) -> str:
        """Generate text summary of the report."""
        lines = [
            f"Evaluation Report: {self.name}",
            "=" * 50,
            "",
            "Score Distribution:",
            f"  Mean: {self.distribution_stats.mean:.2f}",
            f"  Std:  {self.distribution_stats.std:.2f}",
            f"  Min:  {self.distribution_stats.min:.0f}",
            f"  Max:  {self.distribution_stats.max:.0f}",
        ]

        for q_name, q_value in self.distribution_stats.quantiles.items():
            lines.append(f"  {q_name}: {q_value:.2f}")

        if self.symmetry_check:
            lines.extend([
                "",
                "Symmetry Check:",
                f"  Pairs checked: {self.symmetry_check.n_pairs}",
                f"  Is symmetric: {self.symmetry_check.is_symmetric}",
            ])

        if self.additional_metrics:
            lines.extend(["", "Additional Metrics:"])
            for key, value in self.additional_metrics.items():
                lines.append(f"  {key}: {value}")

        return "\n".join(lines)


def compute_score_distribution_stats(
    scores: Sequence[float],
    quantiles: List[float] = [0.1, 0.25, 0.5, 0.75, 0.9]
) -> ScoreDistributionStats:
    """
    Compute distribution statistics for scores.

    Args:
        scores: Compatibility scores
        quantiles: Quantile values to compute (default: p10, p25, p50, p75, p90)

    Returns:
        ScoreDistributionStats instance

    Raises:
        ValueError: If there are no scores
    """
    scores = np.asarray(scores, dtype=float)
    if scores.size == 0:
        raise ValueError("Cannot compute distribution stats for an empty score set")

    quantile_dict = {
        f"p{int(q * 100)}": float(np.percentile(scores, q * 100))
        for q in quantiles
    }

    return ScoreDistributionStats(
        mean=float(np.mean(scores)),
        std=float(np.std(scores)),
        min=float(np.min(scores)),
        max=float(np.max(scores)),
        quantiles=quantile_dict
    )


def compute_pairwise_matrix(
    profiles: Dict[str, FreelancerProfile],
    engine: Optional[CompatibilityEngine] = None
) -> pd.DataFrame:
    """
    Score every pair of profiles.

    The diagonal is set to 100 by convention; self-pairs are not scored.

    Args:
        profiles: Freelancer id -> profile
        engine: Engine to score with (defaults when None)

    Returns:
        Symmetric DataFrame indexed and columned by freelancer id
    """
    engine = engine or CompatibilityEngine()
    ids = list(profiles)
    matrix = pd.DataFrame(100, index=ids, columns=ids, dtype=int)
    for a, b in itertools.combinations(ids, 2):
        score = engine.score_pairwise(profiles[a], profiles[b])
        matrix.loc[a, b] = score
        matrix.loc[b, a] = score
    logger.info(f"Computed pairwise matrix for {len(ids)} profiles")
    return matrix


def check_pairwise_symmetry(
    profiles: Dict[str, FreelancerProfile],
    engine: Optional[CompatibilityEngine] = None
) -> SymmetryCheck:
    """
    Score every pair in both orders and report any mismatch.

    Args:
        profiles: Freelancer id -> profile
        engine: Engine to score with (defaults when None)

    Returns:
        SymmetryCheck instance
    """
    engine = engine or CompatibilityEngine()
    asymmetric = []
    n_pairs = 0
    for a, b in itertools.combinations(list(profiles), 2):
        n_pairs += 1
        forward = engine.score_pairwise(profiles[a], profiles[b])
        backward = engine.score_pairwise(profiles[b], profiles[a])
        if forward != backward:
            logger.warning(f"Asymmetric pair {a}/{b}: {forward} vs {backward}")
            asymmetric.append([a, b])
    return SymmetryCheck(n_pairs=n_pairs, n_asymmetric=len(asymmetric), asymmetric_pairs=asymmetric)


def create_evaluation_report(
    name: str,
    scores: Sequence[float],
    profiles: Optional[Dict[str, FreelancerProfile]] = None,
    engine: Optional[CompatibilityEngine] = None,
    quantiles: List[float] = [0.1, 0.25, 0.5, 0.75, 0.9]
) -> EvaluationReport:
    """
    Create a complete evaluation report.

    Args:
        name: Report name
        scores: Scores to summarize
        profiles: Profiles for the symmetry check and mode counts
        engine: Engine to score with (defaults when None)
        quantiles: Quantiles to compute

    Returns:
        EvaluationReport instance
    """
    dist_stats = compute_score_distribution_stats(scores, quantiles)

    symmetry = None
    additional = {}
    if profiles is not None:
        engine = engine or CompatibilityEngine()
        symmetry = check_pairwise_symmetry(profiles, engine)
        n_quiz = sum(1 for p in profiles.values() if p.quiz is not None)
        n_profiles = len(profiles)
        additional["n_profiles"] = n_profiles
        additional["n_quiz_profiles"] = n_quiz
        additional["n_quiz_pairs"] = n_quiz * (n_quiz - 1) // 2
        additional["n_legacy_pairs"] = n_profiles * (n_profiles - 1) // 2 - additional["n_quiz_pairs"]

    return EvaluationReport(
        name=name,
        distribution_stats=dist_stats,
        symmetry_check=symmetry,
        additional_metrics=additional
    )
