"""
Fit of one freelancer for one project.

Project Terms:
- Skills: proficiency points per matched required skill, a fixed penalty
  per unmatched one, rescaled from [-penalty * n, 100 * n] to [0, 100]
- Availability: step function on weekly hours
- Personality: Big Five profile suited to project work (quiz path) or
  agreement with a neutral vector (legacy path)
- Work-style bonus (quiz path only): ambitious grade expectation and
  early or on-time deadline style
"""

import logging
from typing import Dict, List, Optional

import numpy as np

from ..fusion.weights import ProjectWeights, to_score, weighted_sum
from ..matching.schema import (
    BigFiveScores,
    DeadlineStyle,
    ExperienceLevel,
    FreelancerProfile,
    GradeExpectation,
    Project,
    ProjectBreakdown,
    WorkStyleAssessment,
)
from ..preprocessing.trait_normalizer import neutral_agreement

logger = logging.getLogger(__name__)

EXPECTED_PROFICIENCY = {
    ExperienceLevel.ENTRY: 1,
    ExperienceLevel.INTERMEDIATE: 2,
    ExperienceLevel.SENIOR: 3,
    ExperienceLevel.EXPERT: 4,
}

GRADE_BONUS = {
    GradeExpectation.A: 50,
    GradeExpectation.B_PLUS: 40,
    GradeExpectation.B: 25,
    GradeExpectation.PASSING: 10,
}

DEADLINE_BONUS = {
    DeadlineStyle.EARLY: 50,
    DeadlineStyle.ONTIME: 40,
    DeadlineStyle.LAST_MINUTE: 15,
    DeadlineStyle.PRESSURE: 10,
}

# Openness around this value suits project work best
OPENNESS_TARGET = 70

MAX_PROFICIENCY = 5


def skill_score(
    skills: Dict[str, int],
    required_skills: List[str],
    experience_level: Optional[ExperienceLevel] = None,
    weights: Optional[ProjectWeights] = None,
) -> int:
    """
    Skill coverage of a project's requirements.

    Args:
        skills: Lowercased skill name -> proficiency (1-5)
        required_skills: Skill names the project asks for
        experience_level: When set, matched skills below the expected
            proficiency lose points per missing level
        weights: Point values (defaults when None)

    Returns:
        Skill term in [0, 100]; 100 when nothing is required
    """
    weights = weights or ProjectWeights()
    if not required_skills:
        return 100

    expected = EXPECTED_PROFICIENCY.get(ExperienceLevel(experience_level)) if experience_level else None
    raw = 0.0
    for required in required_skills:
        proficiency = skills.get(required.strip().lower())
        if proficiency is None:
            raw -= weights.missing_skill_penalty
            continue
        points = proficiency * weights.points_per_proficiency
        if expected is not None and proficiency < expected:
            points -= (expected - proficiency) * weights.experience_level_penalty
            points = max(points, -weights.missing_skill_penalty)
        raw += points

    n = len(required_skills)
    min_raw = -weights.missing_skill_penalty * n
    max_raw = weights.points_per_proficiency * MAX_PROFICIENCY * n
    return to_score((raw - min_raw) / (max_raw - min_raw) * 100)


def availability_score(hours_per_week: float, weights: Optional[ProjectWeights] = None) -> int:
    """Tiered availability term: >=40 -> 100, >=30 -> 85, >=20 -> 70, >=10 -> 50, else 25."""
    weights = weights or ProjectWeights()
    for min_hours, score in weights.availability_tiers:
        if hours_per_week >= min_hours:
            return to_score(score)
    return to_score(weights.availability_floor)


def project_personality_term(big_five: BigFiveScores) -> float:
    """
    Big Five suitability for project work in [0, 100].

    Favors high conscientiousness (0.35), low neuroticism (0.25),
    openness near 70 (0.20) and agreeableness (0.20).
    """
    openness = float(np.clip(100 - abs(big_five.openness - OPENNESS_TARGET) * 100 / OPENNESS_TARGET, 0, 100))
    score = (
        0.35 * big_five.conscientiousness
        + 0.25 * (100 - big_five.neuroticism)
        + 0.20 * openness
        + 0.20 * big_five.agreeableness
    )
    return float(np.clip(score, 0, 100))


def work_style_bonus(work_style: WorkStyleAssessment) -> float:
    """Grade expectation bonus plus deadline style bonus, at most 100."""
    return float(min(GRADE_BONUS[work_style.grade_expectation] + DEADLINE_BONUS[work_style.deadline_style], 100))


def project_breakdown(
    profile: FreelancerProfile,
    project: Project,
    weights: Optional[ProjectWeights] = None,
) -> ProjectBreakdown:
    """
    Score a freelancer against a project and keep every term.

    Args:
        profile: Freelancer profile
        project: Project requirements
        weights: Term weights (defaults when None)

    Returns:
        ProjectBreakdown with mode "quiz" or "legacy"
    """
    weights = weights or ProjectWeights()
    skills = skill_score(profile.skill_map(), project.required_skills, project.experience_level, weights)
    availability = availability_score(profile.availability.hours_per_week, weights)
    quiz = profile.quiz

    if quiz is not None:
        terms = {
            "personality": project_personality_term(quiz.big_five),
            "work_style": work_style_bonus(quiz.work_style),
            "skills": skills,
            "availability": availability,
        }
        final_score = to_score(weighted_sum(terms, weights.quiz_weights()))
        breakdown = ProjectBreakdown(
            mode="quiz",
            skills=skills,
            availability=availability,
            personality=round(terms["personality"], 2),
            work_style=terms["work_style"],
            final_score=final_score,
        )
    else:
        terms = {
            "personality": float(neutral_agreement(profile.personality.legacy_vector())),
            "skills": skills,
            "availability": availability,
        }
        final_score = to_score(weighted_sum(terms, weights.legacy_weights()))
        breakdown = ProjectBreakdown(
            mode="legacy",
            skills=skills,
            availability=availability,
            personality=terms["personality"],
            final_score=final_score,
        )

    logger.debug(f"Project fit {profile.user_id} -> {project.id} ({breakdown.mode}): {final_score}")
    return breakdown


def score_project(
    profile: FreelancerProfile,
    project: Project,
    weights: Optional[ProjectWeights] = None,
) -> int:
    """Fit of a freelancer for a project in [0, 100]."""
    return project_breakdown(profile, project, weights).final_score
