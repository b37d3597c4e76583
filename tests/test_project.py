import pytest

from teamfit.fusion.weights import ProjectWeights
from teamfit.matching.schema import BigFiveScores, Project, WorkStyleAssessment
from teamfit.scoring.project import (
    availability_score,
    project_breakdown,
    project_personality_term,
    score_project,
    skill_score,
    work_style_bonus,
)


class TestSkillScore:

    def test_example_profile_against_web_project(self):
        # raw = 5*20 + 4*20 - 30 = 150, rescaled from [-90, 300]
        assert skill_score({"react": 5, "typescript": 4}, ["React", "TypeScript", "Node.js"]) == 62

    def test_no_requirements_scores_100(self):
        assert skill_score({}, []) == 100
        assert skill_score({"react": 1}, []) == 100

    def test_bounds(self):
        assert skill_score({}, ["React", "Go"]) == 0
        assert skill_score({"react": 5, "go": 5}, ["React", "Go"]) == 100

    def test_case_insensitive_lookup(self):
        assert skill_score({"node.js": 5}, ["Node.JS"]) == 100

    def test_monotonic_in_proficiency(self):
        required = ["React", "TypeScript"]
        scores = [skill_score({"react": p, "typescript": 3}, required) for p in range(1, 6)]
        assert scores == sorted(scores)
        assert skill_score({"typescript": 3}, required) <= scores[0]

    def test_monotonic_with_experience_level(self):
        scores = [skill_score({"react": p}, ["React"], "expert") for p in range(1, 6)]
        assert scores == sorted(scores)

    def test_experience_level_penalizes_low_proficiency(self):
        # 20 - 2 levels * 10 = 0, rescaled from [-30, 100]
        assert skill_score({"react": 1}, ["React"], "senior") == 23
        assert skill_score({"react": 1}, ["React"]) == 38
        assert skill_score({"react": 5}, ["React"], "expert") == 100

    def test_experience_penalty_never_exceeds_missing_penalty(self):
        weights = ProjectWeights(experience_level_penalty=50)
        assert skill_score({"react": 1}, ["React"], "expert", weights) == skill_score({}, ["React"], None, weights)


class TestAvailabilityScore:

    @pytest.mark.parametrize("hours,expected", [
        (60, 100), (40, 100), (39.5, 85), (30, 85), (20, 70), (10, 50), (9, 25), (0, 25),
    ])
    def test_tiers(self, hours, expected):
        assert availability_score(hours) == expected

    def test_custom_tiers(self):
        weights = ProjectWeights(availability_tiers=[[20, 90]], availability_floor=10)
        assert availability_score(25, weights) == 90
        assert availability_score(5, weights) == 10


class TestPersonalityAndWorkStyle:

    def test_conscientiousness_raises_fit(self):
        assert project_personality_term(BigFiveScores(conscientiousness=90)) > \
            project_personality_term(BigFiveScores(conscientiousness=10))

    def test_neuroticism_lowers_fit(self):
        assert project_personality_term(BigFiveScores(neuroticism=10)) > \
            project_personality_term(BigFiveScores(neuroticism=90))

    def test_openness_near_seventy_preferred(self):
        assert project_personality_term(BigFiveScores(openness=70)) > \
            project_personality_term(BigFiveScores(openness=100))

    def test_work_style_bonus(self):
        assert work_style_bonus(WorkStyleAssessment(grade_expectation="A", deadline_style="early")) == 100
        assert work_style_bonus(WorkStyleAssessment(grade_expectation="passing", deadline_style="pressure")) == 20


class TestScoreProject:

    def test_example_scenario_lands_mid_range(self, make_profile, make_quiz, web_project):
        profile = make_profile("p1", {"React": 5, "TypeScript": 4}, 30, quiz=make_quiz(grade="B", deadline="ontime"))
        breakdown = project_breakdown(profile, web_project)

        assert breakdown.mode == "quiz"
        assert breakdown.skills == 62
        assert breakdown.availability == 85
        assert 50 <= breakdown.final_score <= 75
        assert score_project(profile, web_project) == score_project(profile, web_project)

    def test_legacy_path(self, make_profile):
        profile = make_profile("l", {}, 40, legacy=[3] * 20)
        breakdown = project_breakdown(profile, Project(id="open"))
        assert breakdown.mode == "legacy"
        assert breakdown.work_style is None
        assert breakdown.final_score == 100

    def test_no_requirements_skill_term(self, mixed_profiles):
        project = Project(id="open", required_skills=[])
        for profile in mixed_profiles.values():
            assert project_breakdown(profile, project).skills == 100

    def test_range(self, mixed_profiles, web_project):
        for profile in mixed_profiles.values():
            score = score_project(profile, web_project)
            assert isinstance(score, int)
            assert 0 <= score <= 100

    def test_better_skills_never_lower_score(self, make_profile, make_quiz, web_project):
        weaker = make_profile("w", {"React": 2}, 30, quiz=make_quiz())
        stronger = make_profile("s", {"React": 5}, 30, quiz=make_quiz())
        assert score_project(stronger, web_project) >= score_project(weaker, web_project)

    def test_experience_level_from_project(self, make_profile):
        profile = make_profile("l", {"React": 1}, 40)
        junior = Project(id="j", required_skills=["React"], experience_level="entry")
        senior = Project(id="s", required_skills=["React"], experience_level="senior")
        assert project_breakdown(profile, junior).skills > project_breakdown(profile, senior).skills
