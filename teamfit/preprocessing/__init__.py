"""Preprocessing module for quiz answers and legacy personality vectors."""

from .trait_normalizer import (
    BIG_FIVE_MAPPING,
    TraitNormalizer,
    likert_agreement,
    neutral_agreement,
    normalize_big_five,
)

__all__ = [
    "BIG_FIVE_MAPPING",
    "TraitNormalizer",
    "likert_agreement",
    "neutral_agreement",
    "normalize_big_five",
]
