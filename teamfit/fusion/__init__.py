"""Weighted combination of compatibility terms."""

from .weights import (
    EngineConfig,
    PairwiseWeights,
    ProjectWeights,
    RankingConfig,
    TeamSearchConfig,
    to_score,
    weighted_sum,
)

__all__ = [
    "EngineConfig",
    "PairwiseWeights",
    "ProjectWeights",
    "RankingConfig",
    "TeamSearchConfig",
    "to_score",
    "weighted_sum",
]
