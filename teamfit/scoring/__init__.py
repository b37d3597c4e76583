"""Pairwise and project compatibility scoring."""

from .pairwise import (
    availability_closeness,
    pairwise_breakdown,
    personality_term,
    scheduling_term,
    score_pairwise,
    skill_complement_term,
    work_style_term,
)
from .project import (
    availability_score,
    project_breakdown,
    project_personality_term,
    score_project,
    skill_score,
    work_style_bonus,
)

__all__ = [
    "availability_closeness",
    "pairwise_breakdown",
    "personality_term",
    "scheduling_term",
    "score_pairwise",
    "skill_complement_term",
    "work_style_term",
    "availability_score",
    "project_breakdown",
    "project_personality_term",
    "score_project",
    "skill_score",
    "work_style_bonus",
]
