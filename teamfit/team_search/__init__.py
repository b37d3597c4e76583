"""Team search module."""

from .generator import TeamSearch, iter_bounded_combinations, suggest_teams

__all__ = ["TeamSearch", "iter_bounded_combinations", "suggest_teams"]
