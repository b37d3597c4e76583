"""
Team search over candidate subsets.

This module recommends teams of a target size from a project's candidate
pool.

Key Design Decisions:
- Subsets are unordered and drawn in lexicographic order of the pool
- Enumeration is lazy and stops after max_combinations subsets (50), so for
  large pools the result is a sample of the subset space, not the optimum
- Each subset scores the mean of its members' project scores and every
  unordered member pair's pairwise score
- Ties keep enumeration order
- A pool smaller than the team size yields one placeholder suggestion
"""

import itertools
import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..fusion.weights import PairwiseWeights, ProjectWeights, TeamSearchConfig, to_score
from ..matching.schema import FreelancerProfile, Project, TeamSuggestion
from ..scoring.pairwise import score_pairwise
from ..scoring.project import score_project

logger = logging.getLogger(__name__)


def iter_bounded_combinations(pool: Sequence[str], size: int, limit: int) -> Iterator[Tuple[str, ...]]:
    """
    Yield at most `limit` subsets of `size` members from `pool`.

    Subsets come in the depth-first order of itertools.combinations:
    the first member varies slowest.
    """
    return itertools.islice(itertools.combinations(pool, size), limit)


class TeamSearch:
    """
    Bounded search for well-matched teams.

    Attributes:
        config: Search bounds (combination cap, result count, placeholder score)
        pairwise_weights: Weights for member-to-member scores
        project_weights: Weights for member-to-project scores
    """

    def __init__(
        self,
        config: Optional[TeamSearchConfig] = None,
        pairwise_weights: Optional[PairwiseWeights] = None,
        project_weights: Optional[ProjectWeights] = None,
    ):
        self.config = config or TeamSearchConfig()
        self.pairwise_weights = pairwise_weights or PairwiseWeights()
        self.project_weights = project_weights or ProjectWeights()

    def _resolve_pool(self, candidate_ids: Sequence[str], profiles: Dict[str, FreelancerProfile]) -> List[str]:
        """Candidates with a profile, first occurrence only."""
        pool = [c for c in dict.fromkeys(candidate_ids) if c in profiles]
        skipped = len(set(candidate_ids)) - len(pool)
        if skipped:
            logger.warning(f"Skipping {skipped} candidates without a profile")
        return pool

    def suggest(
        self,
        project: Project,
        candidate_ids: Sequence[str],
        team_size: Optional[int],
        profiles: Dict[str, FreelancerProfile],
    ) -> List[TeamSuggestion]:
        """
        Suggest the best teams found within the combination cap.

        Args:
            project: Project being staffed
            candidate_ids: Candidate pool
            team_size: Members per team (project.team_size when None)
            profiles: Identifier -> profile for every candidate

        Returns:
            Up to top_k suggestions, best first. An empty pool yields no
            suggestions; a pool smaller than the team size yields the whole
            pool with the placeholder score.

        Raises:
            ValueError: If team_size is below 1
        """
        k = project.team_size if team_size is None else int(team_size)
        if k < 1:
            raise ValueError(f"team_size must be >= 1, got {team_size}")

        pool = self._resolve_pool(candidate_ids, profiles)
        if not pool:
            logger.info(f"No candidates to search for project {project.id}")
            return []
        if len(pool) < k:
            logger.info(f"Pool of {len(pool)} is smaller than team size {k} for project {project.id}")
            return [TeamSuggestion(members=list(pool), avg_score=to_score(self.config.insufficient_pool_score))]

        project_scores: Dict[str, int] = {}
        pair_scores: Dict[Tuple[str, str], int] = {}

        def project_score(member: str) -> int:
            if member not in project_scores:
                project_scores[member] = score_project(profiles[member], project, self.project_weights)
            return project_scores[member]

        def pair_score(a: str, b: str) -> int:
            key = (a, b) if a <= b else (b, a)
            if key not in pair_scores:
                pair_scores[key] = score_pairwise(profiles[a], profiles[b], self.pairwise_weights)
            return pair_scores[key]

        suggestions = []
        for members in iter_bounded_combinations(pool, k, self.config.max_combinations):
            scores = [project_score(m) for m in members]
            scores.extend(pair_score(a, b) for a, b in itertools.combinations(members, 2))
            avg_score = to_score(sum(scores) / len(scores))
            logger.debug(f"Team {members}: {avg_score}")
            suggestions.append(TeamSuggestion(members=list(members), avg_score=avg_score))

        cap_hit = len(suggestions) == self.config.max_combinations
        logger.info(
            f"Evaluated {len(suggestions)} teams of {k} from {len(pool)} candidates "
            f"for project {project.id}" + (" (combination cap reached)" if cap_hit else "")
        )

        suggestions.sort(key=lambda s: -s.avg_score)
        return suggestions[:self.config.top_k]


def suggest_teams(
    project: Project,
    candidate_ids: Sequence[str],
    team_size: Optional[int],
    profiles: Dict[str, FreelancerProfile],
) -> List[TeamSuggestion]:
    """Suggest teams with the default weights and bounds."""
    return TeamSearch().suggest(project, candidate_ids, team_size, profiles)
