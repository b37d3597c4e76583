"""Data loading module for profile and project snapshots."""

from .loaders import CandidatePool, load_pool, load_profiles, load_projects

__all__ = ["CandidatePool", "load_pool", "load_profiles", "load_projects"]
