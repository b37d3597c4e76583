"""
Matching module: data model, engine facade and scoring strategies.
"""

from .schema import (
    AvailabilityGrid,
    BigFiveScores,
    CandidateScore,
    FreelancerProfile,
    LegacyPersonality,
    PersonalityAssessment,
    Project,
    QuizResult,
    SchedulingAssessment,
    TeamSuggestion,
    WorkStyleAssessment,
)
from .engine import CompatibilityEngine, create_engine
from .strategies import AlgorithmicStrategy, FallbackStrategy, ScoringStrategy

__all__ = [
    "AvailabilityGrid",
    "BigFiveScores",
    "CandidateScore",
    "FreelancerProfile",
    "LegacyPersonality",
    "PersonalityAssessment",
    "Project",
    "QuizResult",
    "SchedulingAssessment",
    "TeamSuggestion",
    "WorkStyleAssessment",
    "CompatibilityEngine",
    "create_engine",
    "AlgorithmicStrategy",
    "FallbackStrategy",
    "ScoringStrategy",
]
