"""
Scoring weights configuration.

Holds the fixed weights used to combine the five sub-metrics into one
compatibility score, plus the budget sensitivity constant.

Score Formula:
    raw = destination_bonus * (dest_ratio > 0)
        + destination_ratio * dest_ratio
        + dates * date_overlap
        + interests * jaccard
        + budget * budget_similarity
        + style * style_match
    score = round(clip(raw, 0, 1) * 100)
"""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, Any
import json

from .metrics import DEFAULT_BUDGET_SENSITIVITY

logger = logging.getLogger(__name__)

WEIGHT_TOLERANCE = 0.01


@dataclass(frozen=True)
class ScoringConfig:
    """
    Configuration for compatibility aggregation.

    The destination term is split in two: a binary bonus for sharing any
    destination at all, and a proportional term on the overlap ratio.

    Attributes:
        weight_destination_bonus: Weight of the any-shared-destination gate
        weight_destination_ratio: Weight of the destination overlap ratio
        weight_dates: Weight of the date overlap ratio
        weight_interests: Weight of the interest Jaccard similarity
        weight_budget: Weight of the budget similarity
        weight_style: Weight of the travel style match
        budget_sensitivity: Budget gap (per day) at which budget similarity is 0
    """
    weight_destination_bonus: float = 0.30
    weight_destination_ratio: float = 0.20
    weight_dates: float = 0.20
    weight_interests: float = 0.15
    weight_budget: float = 0.10
    weight_style: float = 0.05
    budget_sensitivity: float = DEFAULT_BUDGET_SENSITIVITY

    def validate(self) -> None:
        """Validate configuration values."""
        weights = self.get_weights()
        for name, value in weights.items():
            if value < 0:
                raise ValueError(f"Weight '{name}' must be non-negative, got {value}")
        total = sum(weights.values())
        if abs(total - 1.0) > WEIGHT_TOLERANCE:
            raise ValueError(f"Scoring weights must sum to 1, got {total:.4f}")
        if self.budget_sensitivity <= 0:
            raise ValueError(f"budget_sensitivity must be positive, got {self.budget_sensitivity}")

    def get_weights(self) -> Dict[str, float]:
        """
        Get the metric weights keyed by metric name.

        Returns:
            Dictionary of the six weights
        """
        return {
            "destination_bonus": self.weight_destination_bonus,
            "destination_ratio": self.weight_destination_ratio,
            "dates": self.weight_dates,
            "interests": self.weight_interests,
            "budget": self.weight_budget,
            "style": self.weight_style,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ScoringConfig":
        """Create from dictionary."""
        return cls(**d)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ScoringConfig":
        """
        Create from main config dictionary.

        Args:
            config: Main config dictionary with an optional "scoring" section

        Returns:
            ScoringConfig instance (defaults for anything not set)
        """
        scoring_config = config.get("scoring", {}) or {}
        weights = scoring_config.get("weights", {}) or {}
        defaults = cls()

        return cls(
            weight_destination_bonus=weights.get("destination_bonus", defaults.weight_destination_bonus),
            weight_destination_ratio=weights.get("destination_ratio", defaults.weight_destination_ratio),
            weight_dates=weights.get("dates", defaults.weight_dates),
            weight_interests=weights.get("interests", defaults.weight_interests),
            weight_budget=weights.get("budget", defaults.weight_budget),
            weight_style=weights.get("style", defaults.weight_style),
            budget_sensitivity=scoring_config.get("budget_sensitivity", defaults.budget_sensitivity)
        )

    def save(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved scoring config to {filepath}")

    @classmethod
    def load(cls, filepath: str) -> "ScoringConfig":
        """Load configuration from JSON file."""
        with open(filepath, "r") as f:
            d = json.load(f)
        return cls.from_dict(d)
