import logging

import pytest

from teamfit.fusion.weights import RankingConfig
from teamfit.matching.schema import FreelancerProfile
from teamfit.ranking.candidate_ranker import CandidateRanker, rank_candidates
from teamfit.scoring.pairwise import score_pairwise
from teamfit.scoring.project import score_project


@pytest.fixture
def profiles(make_profile, make_quiz):
    return {
        "ana": make_profile("ana", {"React": 5, "TypeScript": 4, "Node.js": 3}, 40, quiz=make_quiz(grade="A")),
        "ben": make_profile("ben", {"React": 2}, 12, quiz=make_quiz(answers=[1] * 9)),
        "cai": make_profile("cai", {"Node.js": 4}, 25),
        "dee": make_profile("dee", {"TypeScript": 3}, 30, quiz=make_quiz(role="workhorse")),
    }


class TestRankCandidates:

    def test_sorted_descending(self, profiles, web_project):
        results = rank_candidates(web_project, ["ben", "cai", "ana"], ["dee"], profiles)
        totals = [r.total_score for r in results]
        assert totals == sorted(totals, reverse=True)

    def test_no_existing_members_gives_full_member_score(self, profiles, web_project):
        results = rank_candidates(web_project, list(profiles), [], profiles)
        assert len(results) == 4
        assert all(r.avg_member_score == 100 for r in results)

    def test_total_blends_project_and_member_scores(self, profiles, web_project):
        result = rank_candidates(web_project, ["ana"], ["ben", "cai"], profiles)[0]
        member_scores = [score_pairwise(profiles["ana"], profiles[m]) for m in ["ben", "cai"]]
        expected_avg = int(sum(member_scores) / 2 + 0.5)

        assert result.project_score == score_project(profiles["ana"], web_project)
        assert result.avg_member_score == expected_avg
        assert result.total_score == int(result.project_score * 0.6 + expected_avg * 0.4 + 0.5)

    def test_unknown_candidates_are_skipped(self, profiles, web_project, caplog):
        with caplog.at_level(logging.WARNING):
            results = rank_candidates(web_project, ["ghost", "ana"], [], profiles)
        assert [r.freelancer_id for r in results] == ["ana"]
        assert "ghost" in caplog.text

    def test_unknown_members_are_ignored(self, profiles, web_project):
        with_ghost = rank_candidates(web_project, ["ana"], ["ghost", "ben"], profiles)
        without_ghost = rank_candidates(web_project, ["ana"], ["ben"], profiles)
        assert with_ghost == without_ghost

    def test_candidate_listed_as_member_is_scored_like_any_member(self, profiles, web_project):
        result = rank_candidates(web_project, ["ana"], ["ana"], profiles)[0]
        assert result.avg_member_score == score_pairwise(profiles["ana"], profiles["ana"])

    def test_identity_comes_from_profile_map_keys(self, web_project):
        profiles = {
            "alice": FreelancerProfile.from_dict({"personality": [5] * 20}),
            "bob": FreelancerProfile.from_dict({"personality": [1] * 20}),
        }
        assert profiles["alice"].user_id == profiles["bob"].user_id == ""

        result = rank_candidates(web_project, ["alice"], ["bob"], profiles)[0]
        assert result.freelancer_id == "alice"
        assert result.avg_member_score == score_pairwise(profiles["alice"], profiles["bob"])
        assert result.avg_member_score < 100

    def test_ties_keep_input_order(self, make_profile, web_project):
        twins = {
            "zed": make_profile("zed", {"React": 3}, 20),
            "amy": make_profile("amy", {"React": 3}, 20),
        }
        results = rank_candidates(web_project, ["zed", "amy"], [], twins)
        assert [r.freelancer_id for r in results] == ["zed", "amy"]
        assert results[0].total_score == results[1].total_score

    def test_empty_pool(self, profiles, web_project):
        assert rank_candidates(web_project, [], ["ana"], profiles) == []

    def test_profiles_are_not_mutated(self, profiles, web_project):
        before = {k: p.to_dict() for k, p in profiles.items()}
        rank_candidates(web_project, list(profiles), ["dee"], profiles)
        assert {k: p.to_dict() for k, p in profiles.items()} == before


class TestCandidateRanker:

    def test_project_only_weighting(self, profiles, web_project):
        ranker = CandidateRanker(RankingConfig(project_weight=1.0, member_weight=0.0))
        for result in ranker.rank(web_project, list(profiles), ["dee"], profiles):
            assert result.total_score == result.project_score

    def test_custom_no_member_score(self, profiles, web_project):
        ranker = CandidateRanker(RankingConfig(no_member_score=50))
        result = ranker.rank(web_project, ["ben"], [], profiles)[0]
        assert result.avg_member_score == 50
