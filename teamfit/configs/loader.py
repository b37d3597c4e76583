"""
Configuration loading and validation.

This module handles loading of YAML configuration files and
validates that weight groups and search bounds are usable.
"""

import logging
from pathlib import Path
from typing import Dict, Any, List, Optional

import yaml

from ..fusion.weights import PairwiseWeights, ProjectWeights

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def load_config(filepath: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        filepath: Path to the YAML configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is empty
        yaml.YAMLError: If YAML is invalid
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    logger.info(f"Loading configuration from {filepath}")
    with open(filepath, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        raise ValueError(f"Configuration file is empty: {filepath}")

    return config


def _check_weights(
    issues: List[str],
    name: str,
    weights: Dict[str, Any],
    defaults: Optional[Dict[str, float]] = None
) -> None:
    if not weights:
        return
    # Keys left out of the file keep their default
    weights = {**(defaults or {}), **weights}
    negative = [k for k, v in weights.items() if v < 0]
    if negative:
        issues.append(f"{name} weights must be non-negative: {negative}")
    total = sum(weights.values())
    if abs(total - 1.0) > 0.01:
        issues.append(f"{name} weights don't sum to 1: {total}")


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration dictionary

    Returns:
        List of warning/error messages (empty if valid)
    """
    issues = []

    # Every section is optional; defaults apply when absent
    known_sections = ["global", "pairwise", "project", "ranking", "team_search"]
    for section in config:
        if section not in known_sections:
            issues.append(f"Unknown section: {section}")

    if "global" in config:
        level = str(config["global"].get("log_level", "INFO")).upper()
        if level not in VALID_LOG_LEVELS:
            issues.append(f"Invalid global.log_level: {level}")

    for section, defaults in [("pairwise", PairwiseWeights()), ("project", ProjectWeights())]:
        if section in config:
            _check_weights(issues, f"{section}.quiz", config[section].get("quiz", {}), defaults.quiz_weights())
            _check_weights(issues, f"{section}.legacy", config[section].get("legacy", {}), defaults.legacy_weights())

    if "project" in config:
        tiers = config["project"].get("availability", {}).get("tiers")
        if tiers:
            hours = [t[0] for t in tiers]
            scores = [t[1] for t in tiers]
            if hours != sorted(hours, reverse=True) or len(set(hours)) != len(hours):
                issues.append(f"project.availability.tiers hours must be strictly descending: {hours}")
            if scores != sorted(scores, reverse=True):
                issues.append(f"project.availability.tiers scores must be non-increasing: {scores}")

    if "ranking" in config:
        ranking = config["ranking"]
        _check_weights(issues, "ranking", {
            "project_weight": ranking.get("project_weight", 0.6),
            "member_weight": ranking.get("member_weight", 0.4),
        })

    if "team_search" in config:
        search = config["team_search"]
        if search.get("max_combinations", 50) < 1:
            issues.append(f"team_search.max_combinations must be >= 1, got {search['max_combinations']}")
        if search.get("top_k", 5) < 1:
            issues.append(f"team_search.top_k must be >= 1, got {search['top_k']}")

    return issues


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "team_search.max_combinations")
        default: Default value if path doesn't exist

    Returns:
        Configuration value or default
    """
    keys = path.split(".")
    value = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value
