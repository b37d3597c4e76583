"""
Pytest fixtures building profiles and projects.
"""

from pathlib import Path

import pytest

from teamfit.matching.schema import (
    Availability,
    FreelancerProfile,
    LegacyPersonality,
    PersonalityAssessment,
    Project,
    QuizResult,
    SchedulingAssessment,
    SkillEntry,
    WorkStyleAssessment,
    AvailabilityGrid,
    ScheduleCommitments,
)

REPO_ROOT = Path(__file__).parent.parent

WEEKDAY_AFTERNOONS = {day: {"afternoon": True} for day in ["monday", "tuesday", "wednesday", "thursday", "friday"]}


def build_quiz(
    answers=None,
    grade="B",
    deadline="ontime",
    vague="propose",
    missing="checkIn",
    role="specialist",
    response="sameDay",
    meeting="video",
    flexibility="somewhat",
    commitments=None,
    grid=None,
):
    """QuizResult with middle-of-the-road defaults."""
    return QuizResult(
        personality=PersonalityAssessment.from_vector(answers if answers is not None else [3] * 9),
        work_style=WorkStyleAssessment(
            grade_expectation=grade,
            deadline_style=deadline,
            vague_task_response=vague,
            missing_work_response=missing,
            team_role=role,
        ),
        scheduling=SchedulingAssessment(
            response_time=response,
            meeting_format=meeting,
            commitments=ScheduleCommitments(**(commitments or {})),
            availability_grid=AvailabilityGrid.from_dict(grid if grid is not None else WEEKDAY_AFTERNOONS),
            flexibility=flexibility,
        ),
    )


def build_profile(user_id, skills=None, hours=30, quiz=None, legacy=None):
    """FreelancerProfile from a {skill: proficiency} dict; legacy vector unless a quiz is given."""
    personality = quiz if quiz is not None else LegacyPersonality(answers=list(legacy or [3] * 20))
    return FreelancerProfile(
        user_id=user_id,
        skills=[SkillEntry(skill=name, proficiency=p) for name, p in (skills or {}).items()],
        availability=Availability(hours_per_week=hours),
        personality=personality,
    )


@pytest.fixture
def make_quiz():
    return build_quiz


@pytest.fixture
def make_profile():
    return build_profile


@pytest.fixture
def web_project():
    return Project(id="p1", required_skills=["React", "TypeScript", "Node.js"], team_size=3)


@pytest.fixture
def sample_pool_path():
    return str(REPO_ROOT / "data" / "sample_pool.json")


@pytest.fixture
def config_path():
    return str(REPO_ROOT / "configs" / "config.yaml")


@pytest.fixture
def mixed_profiles():
    """Quiz, legacy and mixed profiles for symmetry and range checks."""
    return {
        "q_mid": build_profile("q_mid", {"React": 3}, 30, quiz=build_quiz()),
        "q_low": build_profile(
            "q_low", {"Python": 5, "Django": 2}, 12,
            quiz=build_quiz(answers=[1] * 9, grade="A", deadline="early", vague="initiative",
                            missing="doIt", role="leader", response="1-2hours", meeting="inPerson",
                            flexibility="very", grid={"monday": {"morning": True}}),
        ),
        "q_high": build_profile(
            "q_high", {"Python": 2, "Go": 4}, 45,
            quiz=build_quiz(answers=[5] * 9, grade="passing", deadline="pressure", vague="wait",
                            missing="wait", role="workhorse", response="fewDays", meeting="async",
                            flexibility="notAtAll",
                            commitments={"works_20_plus_hours": True, "long_commute": True},
                            grid={}),
        ),
        "q_empty_grid": build_profile("q_empty_grid", {}, 0, quiz=build_quiz(grid={})),
        "l_mid": build_profile("l_mid", {"React": 4, "Node.js": 4}, 25),
        "l_mixed": build_profile("l_mixed", {"Go": 1}, 50, legacy=[1, 5, 2, 4, 0, 3, 5, 1]),
        "l_empty": build_profile("l_empty", {}, 0, legacy=[]),
    }
