"""
Configuration loading and validation.

This module handles loading of YAML configuration files and
validates the sections used by the matcher.
"""

import logging
from pathlib import Path
from typing import Dict, Any, List

import yaml

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = ["global", "data", "scoring"]
WEIGHT_NAMES = ["destination_bonus", "destination_ratio", "dates",
                "interests", "budget", "style"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


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


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration dictionary

    Returns:
        List of warning/error messages (empty if valid)
    """
    issues = []

    for section in REQUIRED_SECTIONS:
        if section not in config:
            issues.append(f"Missing required section: {section}")

    if "global" in config:
        log_level = str((config["global"] or {}).get("log_level", "INFO")).upper()
        if log_level not in LOG_LEVELS:
            issues.append(f"Unknown global.log_level: {log_level}")

    if "data" in config:
        if "profiles_path" not in (config["data"] or {}):
            issues.append("Missing data.profiles_path")

    # Check scoring weights sum to 1
    if "scoring" in config:
        scoring = config["scoring"] or {}
        weights = scoring.get("weights", {}) or {}

        unknown = [name for name in weights if name not in WEIGHT_NAMES]
        if unknown:
            issues.append(f"Unknown scoring weights: {unknown}")

        non_numeric = [name for name, value in weights.items() if not _is_number(value)]
        if non_numeric:
            issues.append(f"Scoring weights must be numbers: {non_numeric}")

        missing = [name for name in WEIGHT_NAMES if name not in weights]
        if missing:
            issues.append(f"Missing scoring weights (defaults used): {missing}")
        elif not non_numeric:
            total = sum(weights[name] for name in WEIGHT_NAMES)
            if abs(total - 1.0) > 0.01:
                issues.append(f"Scoring weights don't sum to 1: {total}")

        negative = [name for name, value in weights.items() if _is_number(value) and value < 0]
        if negative:
            issues.append(f"Scoring weights must be non-negative: {negative}")

        sensitivity = scoring.get("budget_sensitivity", 60.0)
        if not _is_number(sensitivity):
            issues.append(f"scoring.budget_sensitivity must be a number, got {sensitivity!r}")
        elif sensitivity <= 0:
            issues.append(f"scoring.budget_sensitivity must be positive, got {sensitivity}")

    return issues


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "scoring.weights.dates")
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
