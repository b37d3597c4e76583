import pytest
import yaml

from teamfit.configs.loader import get_config_value, load_config, validate_config
from teamfit.fusion.weights import (
    EngineConfig,
    PairwiseWeights,
    ProjectWeights,
    RankingConfig,
    TeamSearchConfig,
    to_score,
    weighted_sum,
)
from teamfit.matching.engine import CompatibilityEngine, create_engine


class TestLoadConfig:

    def test_repository_config_reproduces_defaults(self, config_path):
        config = load_config(config_path)
        assert validate_config(config) == []
        assert EngineConfig.from_config(config) == EngineConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ValueError):
            load_config(str(path))

    def test_get_config_value(self):
        config = {"team_search": {"max_combinations": 20}}
        assert get_config_value(config, "team_search.max_combinations") == 20
        assert get_config_value(config, "team_search.top_k", 5) == 5
        assert get_config_value(config, "missing.path") is None


class TestValidateConfig:

    def test_reports_weights_not_summing_to_one(self):
        issues = validate_config({"pairwise": {"quiz": {"personality": 0.5, "work_style": 0.5, "skills": 0.5}}})
        assert any("pairwise.quiz" in issue for issue in issues)

    def test_partial_weight_group_keeps_defaults(self, config_path):
        config = load_config(config_path)
        del config["pairwise"]["quiz"]["scheduling"]
        del config["project"]["legacy"]["availability"]

        assert validate_config(config) == []
        assert EngineConfig.from_config(config) == EngineConfig()

    def test_partial_weight_group_is_checked_with_defaults(self):
        issues = validate_config({"pairwise": {"quiz": {"personality": 0.5}}})
        assert len(issues) == 1
        assert issues[0].startswith("pairwise.quiz weights don't sum to 1")

    def test_reports_negative_weights(self):
        issues = validate_config({"project": {"legacy": {"personality": -0.2, "skills": 1.0, "availability": 0.2}}})
        assert any("non-negative" in issue for issue in issues)

    def test_reports_unordered_tiers(self):
        issues = validate_config({"project": {"availability": {"tiers": [[10, 50], [40, 100]]}}})
        assert len(issues) == 2

    def test_reports_unknown_sections_and_bad_bounds(self):
        issues = validate_config({"fusion": {}, "team_search": {"max_combinations": 0, "top_k": 0}})
        assert len(issues) == 3

    def test_reports_bad_log_level(self):
        assert validate_config({"global": {"log_level": "LOUD"}}) == ["Invalid global.log_level: LOUD"]


class TestWeightConfigs:

    def test_defaults_are_valid(self):
        EngineConfig().validate()

    def test_pairwise_weights_must_sum_to_one(self):
        with pytest.raises(ValueError, match="sum to 1"):
            PairwiseWeights(personality=0.9).validate()

    def test_negative_weights_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            ProjectWeights(legacy_personality=-0.1, legacy_skills=0.9).validate()

    def test_tiers_must_be_monotonic(self):
        with pytest.raises(ValueError):
            ProjectWeights(availability_tiers=[[40, 80], [30, 90]]).validate()
        with pytest.raises(ValueError):
            ProjectWeights(availability_tiers=[[30, 100], [30, 85]]).validate()

    def test_floor_must_not_exceed_lowest_tier(self):
        with pytest.raises(ValueError):
            ProjectWeights(availability_floor=60).validate()

    def test_search_bounds(self):
        with pytest.raises(ValueError):
            TeamSearchConfig(max_combinations=0).validate()
        with pytest.raises(ValueError):
            TeamSearchConfig(top_k=0).validate()
        with pytest.raises(ValueError):
            TeamSearchConfig(insufficient_pool_score=120).validate()

    def test_ranking_weights(self):
        with pytest.raises(ValueError):
            RankingConfig(project_weight=0.7).validate()

    def test_partial_config_keeps_other_defaults(self):
        config = EngineConfig.from_config({"ranking": {"project_weight": 0.5, "member_weight": 0.5}})
        assert config.ranking.project_weight == 0.5
        assert config.ranking.no_member_score == 100
        assert config.pairwise == PairwiseWeights()

    def test_invalid_config_rejected_on_load(self):
        with pytest.raises(ValueError):
            EngineConfig.from_config({"team_search": {"top_k": 0}})

    def test_save_and_load(self, tmp_path):
        config = EngineConfig(team_search=TeamSearchConfig(max_combinations=10))
        path = str(tmp_path / "engine.json")
        config.save(path)
        assert EngineConfig.load(path) == config


class TestCombination:

    @pytest.mark.parametrize("value,expected", [
        (49.5, 50), (49.49, 49), (-3, 0), (100.4, 100), (250, 100), (0.5, 1),
    ])
    def test_to_score(self, value, expected):
        assert to_score(value) == expected

    def test_weighted_sum(self):
        assert weighted_sum({"a": 100, "b": 50}, {"a": 0.25, "b": 0.75}) == pytest.approx(62.5)

    def test_weighted_sum_requires_every_term(self):
        with pytest.raises(ValueError):
            weighted_sum({"a": 100}, {"a": 0.5, "b": 0.5})


class TestEngineFromConfig:

    def test_create_engine_from_yaml(self, tmp_path, pair_profiles, web_project):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"ranking": {"project_weight": 1.0, "member_weight": 0.0}}))
        engine = create_engine(str(path))
        profiles = {p.user_id: p for p in pair_profiles}
        for result in engine.rank_candidates(web_project, ["a", "b"], ["a"], profiles):
            assert result.total_score == result.project_score

    def test_engine_rejects_invalid_config(self):
        with pytest.raises(ValueError):
            CompatibilityEngine(EngineConfig(pairwise=PairwiseWeights(skills=0.9)))


@pytest.fixture
def pair_profiles(make_profile, make_quiz):
    return [make_profile("a", {"React": 5}, 40, quiz=make_quiz()), make_profile("b", {"Go": 3}, 10)]
