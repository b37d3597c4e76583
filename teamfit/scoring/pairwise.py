"""
Pairwise compatibility between two freelancers.

This module scores the relationship between two profiles (Person A and
Person B), independent of any project.

Pairwise Terms (quiz path, both profiles carry a quiz result):
- Personality: Big Five blend rewarding similar conscientiousness and
  agreeableness, complementary extraversion, jointly low neuroticism and
  mild diversity in openness
- Work style: ordinal distance on grade and deadline, role complementarity,
  complementary coping styles
- Scheduling: response time, meeting format, availability grid overlap,
  flexibility, commitment load
- Skills: two-tier reward for complementary skill sets

Legacy path (either profile lacks a quiz result):
- Personality: Likert agreement of the legacy vectors
- Skills: same two-tier complement term
- Availability: three-tier closeness of weekly hours

Every term is symmetric in (A, B), so the final score is too.
"""

import logging
from typing import Dict, Optional

import numpy as np

from ..fusion.weights import PairwiseWeights, to_score, weighted_sum
from ..matching.schema import (
    BigFiveScores,
    FreelancerProfile,
    MissingWorkResponse,
    PairwiseBreakdown,
    SchedulingAssessment,
    TeamRole,
    VagueTaskResponse,
    WorkStyleAssessment,
)
from ..preprocessing.trait_normalizer import likert_agreement

logger = logging.getLogger(__name__)

# Ordinal distance -> points
GRADE_DISTANCE_POINTS = {0: 30, 1: 20, 2: 8, 3: 0}
DEADLINE_DISTANCE_POINTS = {0: 30, 1: 20, 2: 8, 3: 0}
RESPONSE_TIME_DISTANCE_POINTS = {0: 20, 1: 14, 2: 6, 3: 0}
MEETING_FORMAT_DISTANCE_POINTS = {0: 20, 1: 12, 2: 4, 3: 0}
FLEXIBILITY_DISTANCE_POINTS = {0: 15, 1: 8, 2: 0}
COMMITMENT_DIFF_POINTS = {0: 15, 1: 10, 2: 5}

ROLE_SAME_POINTS = 8
ROLE_DIFFERENT_POINTS = 12
ROLE_LEADER_WORKHORSE_POINTS = 20

VAGUE_TASK_POINTS = {"complementary": 12, "identical": 8, "other": 3}
MISSING_WORK_POINTS = {"complementary": 8, "identical": 5, "other": 2}

GRID_OVERLAP_POINTS = 30
GRID_BOTH_EMPTY_POINTS = 15

SKILL_COMPLEMENT_HIGH = 80.0
SKILL_COMPLEMENT_LOW = 60.0

# (max hours difference, score); anything wider scores AVAILABILITY_CLOSENESS_FLOOR
AVAILABILITY_CLOSENESS_TIERS = [(10, 90.0), (20, 70.0)]
AVAILABILITY_CLOSENESS_FLOOR = 50.0

# Openness differences near this value score best
OPENNESS_TARGET_GAP = 20


def personality_term(a: BigFiveScores, b: BigFiveScores) -> float:
    """
    Big Five compatibility in [0, 100].

    Components (weight):
    - Similar conscientiousness (0.25): 100 - |c1 - c2|
    - Similar agreeableness (0.20): 100 - |a1 - a2|
    - Complementary extraversion (0.20): 100 - |e1 + e2 - 100|
    - Jointly low neuroticism (0.20): 100 - mean(n1, n2)
    - Mild openness diversity (0.15): 100 - 1.25 * |gap - 20|
    """
    conscientiousness = 100 - abs(a.conscientiousness - b.conscientiousness)
    agreeableness = 100 - abs(a.agreeableness - b.agreeableness)
    extraversion = 100 - abs(a.extraversion + b.extraversion - 100)
    stability = 100 - (a.neuroticism + b.neuroticism) / 2
    openness_gap = abs(a.openness - b.openness)
    openness = float(np.clip(100 - abs(openness_gap - OPENNESS_TARGET_GAP) * 1.25, 0, 100))

    score = (
        0.25 * conscientiousness
        + 0.20 * agreeableness
        + 0.20 * extraversion
        + 0.20 * stability
        + 0.15 * openness
    )
    return float(np.clip(score, 0, 100))


def _coping_points(
    first,
    second,
    proactive: set,
    passive,
    points: Dict[str, int],
) -> int:
    """Complementary when one side is proactive and the other passive."""
    if (first in proactive and second == passive) or (second in proactive and first == passive):
        return points["complementary"]
    if first == second:
        return points["identical"]
    return points["other"]


def _role_points(first: TeamRole, second: TeamRole) -> int:
    if {first, second} == {TeamRole.LEADER, TeamRole.WORKHORSE}:
        return ROLE_LEADER_WORKHORSE_POINTS
    if first == second:
        return ROLE_SAME_POINTS
    return ROLE_DIFFERENT_POINTS


def work_style_term(a: WorkStyleAssessment, b: WorkStyleAssessment) -> float:
    """
    Work style compatibility, additive and capped at 100.

    Grade expectation and deadline style score by ordinal distance; team
    roles reward difference (leader with workhorse most); coping styles
    reward one proactive and one waiting partner over identical styles.
    """
    points = 0
    points += GRADE_DISTANCE_POINTS[abs(a.grade_expectation.ordinal - b.grade_expectation.ordinal)]
    points += DEADLINE_DISTANCE_POINTS[abs(a.deadline_style.ordinal - b.deadline_style.ordinal)]
    points += _role_points(a.team_role, b.team_role)
    points += _coping_points(
        a.vague_task_response, b.vague_task_response,
        {VagueTaskResponse.INITIATIVE, VagueTaskResponse.PROPOSE}, VagueTaskResponse.WAIT,
        VAGUE_TASK_POINTS,
    )
    points += _coping_points(
        a.missing_work_response, b.missing_work_response,
        {MissingWorkResponse.DO_IT, MissingWorkResponse.CHECK_IN}, MissingWorkResponse.WAIT,
        MISSING_WORK_POINTS,
    )
    return float(min(points, 100))


def grid_overlap_points(a: SchedulingAssessment, b: SchedulingAssessment) -> float:
    """Jaccard overlap of available cells scaled to 30; two empty grids get 15."""
    cells_a = a.availability_grid.cells
    cells_b = b.availability_grid.cells
    either = int(np.logical_or(cells_a, cells_b).sum())
    if either == 0:
        return float(GRID_BOTH_EMPTY_POINTS)
    both = int(np.logical_and(cells_a, cells_b).sum())
    return GRID_OVERLAP_POINTS * both / either


def scheduling_term(a: SchedulingAssessment, b: SchedulingAssessment) -> float:
    """Scheduling compatibility, additive and capped at 100."""
    points = 0.0
    points += RESPONSE_TIME_DISTANCE_POINTS[abs(a.response_time.ordinal - b.response_time.ordinal)]
    points += MEETING_FORMAT_DISTANCE_POINTS[abs(a.meeting_format.ordinal - b.meeting_format.ordinal)]
    points += grid_overlap_points(a, b)
    points += FLEXIBILITY_DISTANCE_POINTS[abs(a.flexibility.ordinal - b.flexibility.ordinal)]
    busy_diff = abs(a.commitments.busy_count - b.commitments.busy_count)
    points += COMMITMENT_DIFF_POINTS.get(busy_diff, 0)
    return float(min(points, 100.0))


def skill_complement_term(skills_a: Dict[str, int], skills_b: Dict[str, int]) -> float:
    """
    Two-tier reward for complementary skill sets.

    Args:
        skills_a: Lowercased skill name -> proficiency for A
        skills_b: Lowercased skill name -> proficiency for B

    Returns:
        80 when the pair has more unique skills than shared ones, else 60
    """
    names_a = set(skills_a)
    names_b = set(skills_b)
    overlap = len(names_a & names_b)
    unique = len(names_a ^ names_b)
    return SKILL_COMPLEMENT_HIGH if unique > overlap else SKILL_COMPLEMENT_LOW


def availability_closeness(hours_a: float, hours_b: float) -> float:
    """Three-tier closeness of weekly hours."""
    diff = abs(hours_a - hours_b)
    for max_diff, score in AVAILABILITY_CLOSENESS_TIERS:
        if diff < max_diff:
            return score
    return AVAILABILITY_CLOSENESS_FLOOR


def pairwise_breakdown(
    a: FreelancerProfile,
    b: FreelancerProfile,
    weights: Optional[PairwiseWeights] = None,
) -> PairwiseBreakdown:
    """
    Score two freelancers and keep every term.

    Args:
        a: First profile
        b: Second profile
        weights: Term weights (defaults when None)

    Returns:
        PairwiseBreakdown with mode "quiz" or "legacy"
    """
    weights = weights or PairwiseWeights()
    skills = skill_complement_term(a.skill_map(), b.skill_map())
    quiz_a, quiz_b = a.quiz, b.quiz

    if quiz_a is not None and quiz_b is not None:
        terms = {
            "personality": personality_term(quiz_a.big_five, quiz_b.big_five),
            "work_style": work_style_term(quiz_a.work_style, quiz_b.work_style),
            "scheduling": scheduling_term(quiz_a.scheduling, quiz_b.scheduling),
            "skills": skills,
        }
        final_score = to_score(weighted_sum(terms, weights.quiz_weights()))
        breakdown = PairwiseBreakdown(
            mode="quiz",
            personality=round(terms["personality"], 2),
            work_style=round(terms["work_style"], 2),
            scheduling=round(terms["scheduling"], 2),
            skills=skills,
            final_score=final_score,
        )
    else:
        terms = {
            "personality": float(likert_agreement(
                a.personality.legacy_vector(), b.personality.legacy_vector())),
            "skills": skills,
            "availability": availability_closeness(
                a.availability.hours_per_week, b.availability.hours_per_week),
        }
        final_score = to_score(weighted_sum(terms, weights.legacy_weights()))
        breakdown = PairwiseBreakdown(
            mode="legacy",
            personality=terms["personality"],
            skills=skills,
            availability=terms["availability"],
            final_score=final_score,
        )

    logger.debug(f"Pairwise {a.user_id}<->{b.user_id} ({breakdown.mode}): {final_score}")
    return breakdown


def score_pairwise(
    a: FreelancerProfile,
    b: FreelancerProfile,
    weights: Optional[PairwiseWeights] = None,
) -> int:
    """Compatibility of two freelancers in [0, 100]; symmetric in (a, b)."""
    return pairwise_breakdown(a, b, weights).final_score
