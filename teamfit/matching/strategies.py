"""
Interchangeable scoring backends.

The algorithmic engine is one implementation of the scoring contract; an
external backend (for example a hosted model) can be another. Callers that
use an external backend wrap it in FallbackStrategy so any failure is
answered by the algorithmic engine for the same inputs.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..fusion.weights import to_score
from .engine import CompatibilityEngine
from .schema import CandidateScore, FreelancerProfile, Project, TeamSuggestion

logger = logging.getLogger(__name__)


class ScoringStrategy(ABC):
    """Scoring contract shared by every backend."""

    name = "abstract"

    @abstractmethod
    def score_pairwise(self, a: FreelancerProfile, b: FreelancerProfile) -> int:
        ...

    @abstractmethod
    def score_project(self, profile: FreelancerProfile, project: Project) -> int:
        ...

    @abstractmethod
    def rank_candidates(
        self,
        project: Project,
        candidate_ids: Sequence[str],
        existing_member_ids: Sequence[str],
        profiles: Dict[str, FreelancerProfile],
    ) -> List[CandidateScore]:
        ...

    @abstractmethod
    def suggest_teams(
        self,
        project: Project,
        candidate_ids: Sequence[str],
        team_size: Optional[int],
        profiles: Dict[str, FreelancerProfile],
    ) -> List[TeamSuggestion]:
        ...


class AlgorithmicStrategy(ScoringStrategy):
    """The rule-based engine as a strategy."""

    name = "algorithmic"

    def __init__(self, engine: Optional[CompatibilityEngine] = None):
        self.engine = engine or CompatibilityEngine()

    def score_pairwise(self, a, b):
        return self.engine.score_pairwise(a, b)

    def score_project(self, profile, project):
        return self.engine.score_project(profile, project)

    def rank_candidates(self, project, candidate_ids, existing_member_ids, profiles):
        return self.engine.rank_candidates(project, candidate_ids, existing_member_ids, profiles)

    def suggest_teams(self, project, candidate_ids, team_size, profiles):
        return self.engine.suggest_teams(project, candidate_ids, team_size, profiles)


def _clamp_candidate(score: CandidateScore) -> CandidateScore:
    return replace(
        score,
        project_score=to_score(score.project_score),
        avg_member_score=to_score(score.avg_member_score),
        total_score=to_score(score.total_score),
    )


class FallbackStrategy(ScoringStrategy):
    """
    Try a primary backend, answer with the fallback on any failure.

    Scores returned by the primary are clamped to [0, 100]. A primary
    result that cannot be read as scores counts as a failure.

    Attributes:
        primary: Preferred backend
        fallback: Backend used when the primary raises
    """

    name = "fallback"

    def __init__(self, primary: ScoringStrategy, fallback: Optional[ScoringStrategy] = None):
        self.primary = primary
        self.fallback = fallback or AlgorithmicStrategy()

    def _call(self, operation: str, clean: Callable[[Any], Any], *args):
        try:
            return clean(getattr(self.primary, operation)(*args))
        except Exception as e:
            logger.warning(
                f"{self.primary.name} backend failed in {operation} ({e}); "
                f"using {self.fallback.name} result"
            )
            return getattr(self.fallback, operation)(*args)

    def score_pairwise(self, a, b):
        return self._call("score_pairwise", to_score, a, b)

    def score_project(self, profile, project):
        return self._call("score_project", to_score, profile, project)

    def rank_candidates(self, project, candidate_ids, existing_member_ids, profiles):
        return self._call(
            "rank_candidates",
            lambda results: [_clamp_candidate(r) for r in results],
            project, candidate_ids, existing_member_ids, profiles,
        )

    def suggest_teams(self, project, candidate_ids, team_size, profiles):
        return self._call(
            "suggest_teams",
            lambda suggestions: [replace(s, avg_score=to_score(s.avg_score)) for s in suggestions],
            project, candidate_ids, team_size, profiles,
        )
