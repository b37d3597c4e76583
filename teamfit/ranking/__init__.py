"""Candidate ranking module."""

from .candidate_ranker import CandidateRanker, rank_candidates

__all__ = ["CandidateRanker", "rank_candidates"]
