"""
Trait normalizer for quiz answers.

Handles:
- Reverse scoring of inverted items
- Big Five aggregate computation (0-100 per trait)
- Likert agreement scoring for legacy personality vectors

Big Five Formula:
    trait = clamp(round((mean(items after reverse scoring) - scale_min) * 25), 0, 100)

The factor 25 maps the 1-5 Likert range onto 0-100. Neuroticism keeps its
inverted semantics: a higher score means less stable.
"""

import logging
from typing import Dict, Any, Optional, Sequence

import numpy as np
import pandas as pd

from ..fusion.weights import to_score
from ..matching.schema import (
    BigFiveScores,
    PersonalityAssessment,
    LIKERT_MIDPOINT,
    LIKERT_MIN,
    LIKERT_MAX,
)

logger = logging.getLogger(__name__)

# Quiz item -> Big Five mapping; items in reverse_scored count as (6 - answer)
BIG_FIVE_MAPPING: Dict[str, Any] = {
    "scale": {"min": 1, "max": 5},
    "dimensions": {
        "extraversion": {
            "items": ["leadership", "brainstormer", "listener"],
            "reverse_scored": ["listener"],
        },
        "openness": {
            "items": ["traditionalism", "brainstormer", "adaptable"],
            "reverse_scored": ["traditionalism"],
        },
        "agreeableness": {
            "items": ["peacekeeper", "listener", "challenger"],
            "reverse_scored": ["challenger"],
        },
        "conscientiousness": {
            "items": ["leadership", "traditionalism", "calm_under_pressure", "challenger"],
            "reverse_scored": [],
        },
        "neuroticism": {
            "items": ["control_need", "calm_under_pressure", "adaptable"],
            "reverse_scored": ["calm_under_pressure", "adaptable"],
        },
    },
}

# Minimum compared length for legacy vectors
LEGACY_VECTOR_LENGTH = 20


class TraitNormalizer:
    """
    Converts personality answers into Big Five scores.

    Attributes:
        mapping: Item to Big Five dimension mapping
        scale_min: Lowest Likert answer
        scale_max: Highest Likert answer
    """

    def __init__(self, mapping: Optional[Dict[str, Any]] = None):
        self.mapping = mapping or BIG_FIVE_MAPPING
        self.scale_min = self.mapping["scale"]["min"]
        self.scale_max = self.mapping["scale"]["max"]
        self.points_per_step = 100.0 / (self.scale_max - self.scale_min)

    def _item_value(self, answers: Dict[str, int], item: str, reverse_scored: Sequence[str]) -> int:
        """
        Read one answer, applying reverse scoring.

        Reverse scoring formula: new_value = (scale_max + scale_min) - original_value
        """
        value = answers[item]
        if item in reverse_scored:
            return (self.scale_max + self.scale_min) - value
        return value

    def normalize(self, assessment: PersonalityAssessment) -> BigFiveScores:
        """
        Compute Big Five scores for one assessment.

        Args:
            assessment: Personality answers (already defaulted and clamped)

        Returns:
            BigFiveScores with every trait in [0, 100]
        """
        answers = assessment.to_dict()
        traits = {}
        for dim_key, dim_config in self.mapping["dimensions"].items():
            reverse_scored = dim_config.get("reverse_scored", [])
            values = [self._item_value(answers, item, reverse_scored) for item in dim_config["items"]]
            traits[dim_key] = float(to_score((np.mean(values) - self.scale_min) * self.points_per_step))
        return BigFiveScores(**traits)

    def normalize_frame(self, assessments: Dict[str, PersonalityAssessment]) -> pd.DataFrame:
        """
        Compute Big Five scores for several assessments.

        Args:
            assessments: Identifier -> assessment

        Returns:
            DataFrame indexed by identifier with one column per trait
        """
        rows = {key: self.normalize(a).to_dict() for key, a in assessments.items()}
        df = pd.DataFrame.from_dict(rows, orient="index", columns=BigFiveScores.TRAITS)
        logger.debug(f"Normalized {len(df)} assessments")
        return df


_DEFAULT_NORMALIZER = TraitNormalizer()


def normalize_big_five(assessment: PersonalityAssessment) -> BigFiveScores:
    """Big Five scores for an assessment, using the default item mapping."""
    return _DEFAULT_NORMALIZER.normalize(assessment)


def _pad_vector(values: Sequence[Optional[float]], length: int) -> np.ndarray:
    """Pad with the midpoint, replace missing (None or 0) items with it and clamp to 1-5."""
    padded = np.full(length, float(LIKERT_MIDPOINT))
    for i, v in enumerate(values):
        if v is not None and v != 0:
            padded[i] = np.clip(float(v), LIKERT_MIN, LIKERT_MAX)
    return padded


def likert_agreement(a: Sequence[Optional[float]], b: Sequence[Optional[float]]) -> int:
    """
    Agreement between two legacy Likert vectors.

    Each item scores by absolute difference:
    0 -> +2, 1 -> +1, 2 -> 0, 3 or more -> -2.
    The sum is rescaled linearly from [-2n, +2n] to [0, 100].

    Vectors are compared over max(20, len(a), len(b)) items; missing or
    zero items count as the midpoint 3.

    Args:
        a: First vector
        b: Second vector

    Returns:
        Agreement score in [0, 100]
    """
    n = max(LEGACY_VECTOR_LENGTH, len(a), len(b))
    diff = np.abs(_pad_vector(a, n) - _pad_vector(b, n))
    points = np.select([diff == 0, diff == 1, diff >= 3], [2, 1, -2], default=0)
    raw = float(points.sum())
    return to_score((raw + 2 * n) / (4 * n) * 100)


def neutral_agreement(vector: Sequence[Optional[float]]) -> int:
    """Agreement of a legacy vector with an all-midpoint vector."""
    return likert_agreement(vector, [LIKERT_MIDPOINT] * len(vector))
