"""
Compatibility & Team-Formation Engine

This package scores freelancers against client projects and against each
other, ranks a project's applicants and searches candidate subsets for
well-matched teams.

Key Design Decisions:
- Pure functions over caller-supplied snapshots; no global profile store
- Personality is a tagged union: structured quiz result or legacy vector
- One weighted-sum combiner with configurable weights per scoring path
- Team search is a bounded sample (50 subsets), not an exhaustive optimum
- External scoring backends fall back to the rule-based engine on failure
"""

from .matching import (
    CompatibilityEngine,
    FallbackStrategy,
    AlgorithmicStrategy,
    ScoringStrategy,
)
from .preprocessing import normalize_big_five
from .scoring import score_pairwise, score_project, pairwise_breakdown, project_breakdown
from .ranking import rank_candidates
from .team_search import suggest_teams

__version__ = "1.0.0"

__all__ = [
    "CompatibilityEngine",
    "FallbackStrategy",
    "AlgorithmicStrategy",
    "ScoringStrategy",
    "normalize_big_five",
    "score_pairwise",
    "score_project",
    "pairwise_breakdown",
    "project_breakdown",
    "rank_candidates",
    "suggest_teams",
]
