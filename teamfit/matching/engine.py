"""
Compatibility engine facade.

This module exposes the engine's operations behind one configured object:
1. Pairwise scoring of two freelancers
2. Project fit of one freelancer
3. Candidate ranking for a project
4. Team suggestions for a project
5. Big Five normalization of quiz answers

The engine holds only its weight configuration. Profiles and projects are
passed in per call and never retained or mutated, so one engine can serve
concurrent callers.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from ..fusion.weights import EngineConfig
from ..preprocessing.trait_normalizer import normalize_big_five
from ..ranking.candidate_ranker import CandidateRanker
from ..scoring.pairwise import pairwise_breakdown
from ..scoring.project import project_breakdown
from ..team_search.generator import TeamSearch
from .schema import (
    BigFiveScores,
    CandidateScore,
    FreelancerProfile,
    PairwiseBreakdown,
    PersonalityAssessment,
    Project,
    ProjectBreakdown,
    TeamSuggestion,
)

logger = logging.getLogger(__name__)


class CompatibilityEngine:
    """
    Configured entry point for all scoring operations.

    Attributes:
        config: Validated EngineConfig
        ranker: CandidateRanker sharing the engine's weights
        team_search: TeamSearch sharing the engine's weights
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """
        Initialize the engine.

        Args:
            config: Weights and bounds (defaults when None)

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or EngineConfig()
        self.config.validate()
        self.ranker = CandidateRanker(self.config.ranking, self.config.pairwise, self.config.project)
        self.team_search = TeamSearch(self.config.team_search, self.config.pairwise, self.config.project)

    def pairwise_breakdown(self, a: FreelancerProfile, b: FreelancerProfile) -> PairwiseBreakdown:
        return pairwise_breakdown(a, b, self.config.pairwise)

    def score_pairwise(self, a: FreelancerProfile, b: FreelancerProfile) -> int:
        """Compatibility of two freelancers in [0, 100]."""
        return self.pairwise_breakdown(a, b).final_score

    def project_breakdown(self, profile: FreelancerProfile, project: Project) -> ProjectBreakdown:
        return project_breakdown(profile, project, self.config.project)

    def score_project(self, profile: FreelancerProfile, project: Project) -> int:
        """Fit of a freelancer for a project in [0, 100]."""
        return self.project_breakdown(profile, project).final_score

    def rank_candidates(
        self,
        project: Project,
        candidate_ids: Sequence[str],
        existing_member_ids: Sequence[str],
        profiles: Dict[str, FreelancerProfile],
    ) -> List[CandidateScore]:
        """Rank candidates for a project, best first."""
        return self.ranker.rank(project, candidate_ids, existing_member_ids, profiles)

    def suggest_teams(
        self,
        project: Project,
        candidate_ids: Sequence[str],
        team_size: Optional[int],
        profiles: Dict[str, FreelancerProfile],
    ) -> List[TeamSuggestion]:
        """Suggest teams for a project, best first."""
        return self.team_search.suggest(project, candidate_ids, team_size, profiles)

    @staticmethod
    def normalize_big_five(assessment: PersonalityAssessment) -> BigFiveScores:
        return normalize_big_five(assessment)

    def score_pairs(self, pairs: Sequence[Tuple[FreelancerProfile, FreelancerProfile]]) -> List[int]:
        """
        Compute pairwise scores for multiple pairs.

        Args:
            pairs: List of (profile_a, profile_b) tuples

        Returns:
            List of scores in input order
        """
        return [self.score_pairwise(a, b) for a, b in pairs]


def create_engine(config_path: Optional[str] = None) -> CompatibilityEngine:
    """
    Factory function to create a CompatibilityEngine.

    Args:
        config_path: Optional YAML configuration file

    Returns:
        Configured CompatibilityEngine instance
    """
    if config_path is None:
        return CompatibilityEngine()

    from ..configs.loader import load_config

    config = EngineConfig.from_config(load_config(config_path))
    logger.info(f"Created engine from {config_path}")
    return CompatibilityEngine(config)
