"""Evaluation module for score diagnostics."""

from .metrics import (
    compute_score_distribution_stats,
    compute_pairwise_matrix,
    check_pairwise_symmetry,
    EvaluationReport,
    create_evaluation_report
)

__all__ = [
    "compute_score_distribution_stats",
    "compute_pairwise_matrix",
    "check_pairwise_symmetry",
    "EvaluationReport",
    "create_evaluation_report"
]
