"""
Weighted combination of per-dimension compatibility terms.

Every score the engine returns is a weighted sum of 0-100 terms. This module
holds the weight tables, the thresholds that go with them, and the single
rounding helper all final scores pass through.

Combination Formula:
    final_score = clamp(round_half_up(sum(w_i * term_i)), 0, 100)

Weight groups:
- Pairwise (quiz path): personality, work style, scheduling, skills
- Pairwise (legacy path): personality, skills, availability closeness
- Project (quiz path): personality, work-style bonus, skills, availability
- Project (legacy path): personality, skills, availability

Each group must sum to 1 so a profile that maxes every term scores 100.
"""

import json
import logging
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, List

import numpy as np

logger = logging.getLogger(__name__)

WEIGHT_TOLERANCE = 0.01


def to_score(value: float) -> int:
    """Round half-up and clamp to an integer in [0, 100]."""
    return int(np.clip(np.floor(float(value) + 0.5), 0, 100))


def weighted_sum(terms: Dict[str, float], weights: Dict[str, float]) -> float:
    """
    Combine named terms with matching weights.

    Args:
        terms: Term name -> value in [0, 100]
        weights: Term name -> weight

    Returns:
        Unrounded weighted sum

    Raises:
        ValueError: If a weighted term is missing
    """
    missing = [name for name in weights if name not in terms]
    if missing:
        raise ValueError(f"Missing terms for weights: {missing}")
    return float(sum(weights[name] * float(terms[name]) for name in weights))


def _check_weight_group(name: str, weights: Dict[str, float]) -> None:
    negative = {k: v for k, v in weights.items() if v < 0}
    if negative:
        raise ValueError(f"{name} weights must be non-negative, got {negative}")
    total = sum(weights.values())
    if abs(total - 1.0) > WEIGHT_TOLERANCE:
        raise ValueError(f"{name} weights must sum to 1, got {total:.3f}")


def _check_score(name: str, value: float) -> None:
    if not 0 <= value <= 100:
        raise ValueError(f"{name} must be in [0, 100], got {value}")


class _JsonConfig:
    """Shared dict and JSON persistence for config dataclasses."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]):
        """Create from dictionary."""
        return cls(**d)

    def save(self, filepath: str) -> None:
        """Save to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved {type(self).__name__} to {filepath}")

    @classmethod
    def load(cls, filepath: str):
        """Load from JSON file."""
        with open(filepath, "r") as f:
            d = json.load(f)
        return cls.from_dict(d)


@dataclass
class PairwiseWeights(_JsonConfig):
    """
    Weights for freelancer-to-freelancer scoring.

    The quiz path applies when both profiles carry a quiz result; any other
    pair falls back to the legacy path.
    """
    personality: float = 0.25
    work_style: float = 0.35
    scheduling: float = 0.25
    skills: float = 0.15
    legacy_personality: float = 0.50
    legacy_skills: float = 0.30
    legacy_availability: float = 0.20

    def quiz_weights(self) -> Dict[str, float]:
        return {
            "personality": self.personality,
            "work_style": self.work_style,
            "scheduling": self.scheduling,
            "skills": self.skills,
        }

    def legacy_weights(self) -> Dict[str, float]:
        return {
            "personality": self.legacy_personality,
            "skills": self.legacy_skills,
            "availability": self.legacy_availability,
        }

    def validate(self) -> None:
        """Validate configuration values."""
        _check_weight_group("Pairwise quiz", self.quiz_weights())
        _check_weight_group("Pairwise legacy", self.legacy_weights())

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "PairwiseWeights":
        """Create from main config dictionary."""
        section = config.get("pairwise", {})
        quiz = section.get("quiz", {})
        legacy = section.get("legacy", {})
        defaults = cls()
        return cls(
            personality=quiz.get("personality", defaults.personality),
            work_style=quiz.get("work_style", defaults.work_style),
            scheduling=quiz.get("scheduling", defaults.scheduling),
            skills=quiz.get("skills", defaults.skills),
            legacy_personality=legacy.get("personality", defaults.legacy_personality),
            legacy_skills=legacy.get("skills", defaults.legacy_skills),
            legacy_availability=legacy.get("availability", defaults.legacy_availability),
        )


@dataclass
class ProjectWeights(_JsonConfig):
    """
    Weights and thresholds for freelancer-to-project scoring.

    Attributes:
        points_per_proficiency: Skill points per proficiency level of a matched skill
        missing_skill_penalty: Points lost per unmatched required skill
        experience_level_penalty: Points lost per proficiency level below the
            project's expected level, per matched skill
        availability_tiers: [min_hours, score] pairs, descending by hours
        availability_floor: Score below the lowest tier
    """
    personality: float = 0.25
    work_style: float = 0.25
    skills: float = 0.30
    availability: float = 0.20
    legacy_personality: float = 0.30
    legacy_skills: float = 0.50
    legacy_availability: float = 0.20
    points_per_proficiency: float = 20.0
    missing_skill_penalty: float = 30.0
    experience_level_penalty: float = 10.0
    availability_tiers: List[List[float]] = field(
        default_factory=lambda: [[40, 100], [30, 85], [20, 70], [10, 50]]
    )
    availability_floor: float = 25.0

    def quiz_weights(self) -> Dict[str, float]:
        return {
            "personality": self.personality,
            "work_style": self.work_style,
            "skills": self.skills,
            "availability": self.availability,
        }

    def legacy_weights(self) -> Dict[str, float]:
        return {
            "personality": self.legacy_personality,
            "skills": self.legacy_skills,
            "availability": self.legacy_availability,
        }

    def validate(self) -> None:
        """Validate configuration values."""
        _check_weight_group("Project quiz", self.quiz_weights())
        _check_weight_group("Project legacy", self.legacy_weights())
        if self.points_per_proficiency <= 0:
            raise ValueError(f"points_per_proficiency must be positive, got {self.points_per_proficiency}")
        if self.missing_skill_penalty < 0:
            raise ValueError(f"missing_skill_penalty must be non-negative, got {self.missing_skill_penalty}")
        if self.experience_level_penalty < 0:
            raise ValueError(
                f"experience_level_penalty must be non-negative, got {self.experience_level_penalty}")
        if not self.availability_tiers:
            raise ValueError("availability_tiers must not be empty")
        for hours, score in self.availability_tiers:
            _check_score("Availability tier score", score)
        hours = [t[0] for t in self.availability_tiers]
        scores = [t[1] for t in self.availability_tiers]
        if any(h1 <= h2 for h1, h2 in zip(hours, hours[1:])):
            raise ValueError(f"availability_tiers hours must be strictly descending, got {hours}")
        if any(s1 < s2 for s1, s2 in zip(scores, scores[1:])):
            raise ValueError(f"availability_tiers scores must be non-increasing, got {scores}")
        _check_score("availability_floor", self.availability_floor)
        if self.availability_floor > scores[-1]:
            raise ValueError(
                f"availability_floor must not exceed the lowest tier score, got {self.availability_floor}")

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ProjectWeights":
        """Create from main config dictionary."""
        section = config.get("project", {})
        quiz = section.get("quiz", {})
        legacy = section.get("legacy", {})
        skills = section.get("skills", {})
        availability = section.get("availability", {})
        defaults = cls()
        return cls(
            personality=quiz.get("personality", defaults.personality),
            work_style=quiz.get("work_style", defaults.work_style),
            skills=quiz.get("skills", defaults.skills),
            availability=quiz.get("availability", defaults.availability),
            legacy_personality=legacy.get("personality", defaults.legacy_personality),
            legacy_skills=legacy.get("skills", defaults.legacy_skills),
            legacy_availability=legacy.get("availability", defaults.legacy_availability),
            points_per_proficiency=skills.get("points_per_proficiency", defaults.points_per_proficiency),
            missing_skill_penalty=skills.get("missing_skill_penalty", defaults.missing_skill_penalty),
            experience_level_penalty=skills.get("experience_level_penalty", defaults.experience_level_penalty),
            availability_tiers=availability.get("tiers", defaults.availability_tiers),
            availability_floor=availability.get("floor", defaults.availability_floor),
        )


@dataclass
class RankingConfig(_JsonConfig):
    """
    Blend of project fit and fit with the existing team.

    Attributes:
        project_weight: Weight of the project score
        member_weight: Weight of the average member score
        no_member_score: Member score used when the team is still empty
    """
    project_weight: float = 0.6
    member_weight: float = 0.4
    no_member_score: float = 100.0

    def validate(self) -> None:
        """Validate configuration values."""
        _check_weight_group("Ranking", {"project": self.project_weight, "member": self.member_weight})
        _check_score("no_member_score", self.no_member_score)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "RankingConfig":
        """Create from main config dictionary."""
        section = config.get("ranking", {})
        defaults = cls()
        return cls(
            project_weight=section.get("project_weight", defaults.project_weight),
            member_weight=section.get("member_weight", defaults.member_weight),
            no_member_score=section.get("no_member_score", defaults.no_member_score),
        )


@dataclass
class TeamSearchConfig(_JsonConfig):
    """
    Bounds for the team search.

    Attributes:
        max_combinations: Subsets evaluated before the search stops
        top_k: Suggestions returned
        insufficient_pool_score: Placeholder score when the pool is smaller
            than the team size
    """
    max_combinations: int = 50
    top_k: int = 5
    insufficient_pool_score: float = 50.0

    def validate(self) -> None:
        """Validate configuration values."""
        if self.max_combinations < 1:
            raise ValueError(f"max_combinations must be >= 1, got {self.max_combinations}")
        if self.top_k < 1:
            raise ValueError(f"top_k must be >= 1, got {self.top_k}")
        _check_score("insufficient_pool_score", self.insufficient_pool_score)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "TeamSearchConfig":
        """Create from main config dictionary."""
        section = config.get("team_search", {})
        defaults = cls()
        return cls(
            max_combinations=int(section.get("max_combinations", defaults.max_combinations)),
            top_k=int(section.get("top_k", defaults.top_k)),
            insufficient_pool_score=section.get("insufficient_pool_score", defaults.insufficient_pool_score),
        )


@dataclass
class EngineConfig(_JsonConfig):
    """All engine weights and bounds; defaults reproduce the reference scoring."""
    pairwise: PairwiseWeights = field(default_factory=PairwiseWeights)
    project: ProjectWeights = field(default_factory=ProjectWeights)
    ranking: RankingConfig = field(default_factory=RankingConfig)
    team_search: TeamSearchConfig = field(default_factory=TeamSearchConfig)

    def validate(self) -> None:
        """Validate every group."""
        self.pairwise.validate()
        self.project.validate()
        self.ranking.validate()
        self.team_search.validate()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "EngineConfig":
        """Create from the nested dictionary produced by to_dict()."""
        return cls(
            pairwise=PairwiseWeights.from_dict(d.get("pairwise", {})),
            project=ProjectWeights.from_dict(d.get("project", {})),
            ranking=RankingConfig.from_dict(d.get("ranking", {})),
            team_search=TeamSearchConfig.from_dict(d.get("team_search", {})),
        )

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "EngineConfig":
        """Create from main config dictionary."""
        engine_config = cls(
            pairwise=PairwiseWeights.from_config(config),
            project=ProjectWeights.from_config(config),
            ranking=RankingConfig.from_config(config),
            team_search=TeamSearchConfig.from_config(config),
        )
        engine_config.validate()
        return engine_config
