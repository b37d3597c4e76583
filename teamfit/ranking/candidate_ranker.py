"""
Candidate ranking for a project.

Ranks applicants by a blend of their own project fit and their average
pairwise fit with the members already on the team.

Ranking Formula:
    total = round(project_weight * project_score + member_weight * avg_member_score)

Key Design Decisions:
- Candidates without a resolvable profile are skipped, not scored
- Existing members without a resolvable profile are ignored
- Identity comes from the keys of the profile map, never from the profile record
- An empty team gives every candidate the no-member score (100)
- Ties keep the input order (stable sort)
"""

import logging
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..fusion.weights import PairwiseWeights, ProjectWeights, RankingConfig, to_score
from ..matching.schema import CandidateScore, FreelancerProfile, Project
from ..scoring.pairwise import score_pairwise
from ..scoring.project import score_project

logger = logging.getLogger(__name__)


class CandidateRanker:
    """
    Ranks a project's applicant pool.

    Attributes:
        config: Ranking blend weights
        pairwise_weights: Weights for candidate-to-member scores
        project_weights: Weights for candidate-to-project scores
    """

    def __init__(
        self,
        config: Optional[RankingConfig] = None,
        pairwise_weights: Optional[PairwiseWeights] = None,
        project_weights: Optional[ProjectWeights] = None,
    ):
        self.config = config or RankingConfig()
        self.pairwise_weights = pairwise_weights or PairwiseWeights()
        self.project_weights = project_weights or ProjectWeights()

    def score_candidate(
        self,
        candidate_id: str,
        candidate: FreelancerProfile,
        project: Project,
        members: Sequence[FreelancerProfile],
    ) -> CandidateScore:
        """
        Score one candidate against the project and the current team.

        Args:
            candidate_id: Candidate identifier from the caller's profile map
            candidate: Candidate profile
            project: Project being staffed
            members: Resolved profiles of existing members

        Returns:
            CandidateScore for the candidate
        """
        project_score = score_project(candidate, project, self.project_weights)
        member_scores = [
            score_pairwise(candidate, member, self.pairwise_weights)
            for member in members
        ]
        if member_scores:
            avg_member_score = to_score(np.mean(member_scores))
        else:
            avg_member_score = to_score(self.config.no_member_score)

        total_score = to_score(
            self.config.project_weight * project_score
            + self.config.member_weight * avg_member_score
        )
        return CandidateScore(
            freelancer_id=candidate_id,
            project_score=project_score,
            avg_member_score=avg_member_score,
            total_score=total_score,
        )

    def rank(
        self,
        project: Project,
        candidate_ids: Sequence[str],
        existing_member_ids: Sequence[str],
        profiles: Dict[str, FreelancerProfile],
    ) -> List[CandidateScore]:
        """
        Rank candidates, best first.

        Args:
            project: Project being staffed
            candidate_ids: Applicant identifiers, in input order
            existing_member_ids: Identifiers of members already on the team
            profiles: Identifier -> profile for everyone involved

        Returns:
            CandidateScore list sorted descending by total_score
        """
        members = [profiles[m] for m in existing_member_ids if m in profiles]
        unresolved_members = len(existing_member_ids) - len(members)
        if unresolved_members:
            logger.warning(f"Ignoring {unresolved_members} existing members without a profile")

        results = []
        for candidate_id in candidate_ids:
            candidate = profiles.get(candidate_id)
            if candidate is None:
                logger.warning(f"Skipping candidate {candidate_id}: no profile")
                continue
            result = self.score_candidate(candidate_id, candidate, project, members)
            logger.debug(
                f"Candidate {candidate_id}: project={result.project_score} "
                f"members={result.avg_member_score} total={result.total_score}"
            )
            results.append(result)

        results.sort(key=lambda r: -r.total_score)
        logger.info(
            f"Ranked {len(results)} of {len(candidate_ids)} candidates for project {project.id} "
            f"({len(members)} existing members)"
        )
        return results


def rank_candidates(
    project: Project,
    candidate_ids: Sequence[str],
    existing_member_ids: Sequence[str],
    profiles: Dict[str, FreelancerProfile],
) -> List[CandidateScore]:
    """Rank candidates with the default weights."""
    return CandidateRanker().rank(project, candidate_ids, existing_member_ids, profiles)
