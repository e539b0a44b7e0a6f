"""
Command-line runner for the trip partner matcher.

Usage:
    python -m tripmatch.run --config configs/config.yaml

The runner performs the following steps:
1. Load and validate configuration
2. Load traveler profiles and pick the reference traveler
3. Score every candidate against the reference
4. Log per-candidate scores and a distribution summary
5. Optionally write the results table to CSV or JSON
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Any, Optional

import pandas as pd

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging level from config."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(level)


def run_matching(
    config_path: str,
    profiles_path: Optional[str] = None,
    reference_id: Optional[str] = None,
    output_path: Optional[str] = None
) -> Dict[str, Any]:
    """
    Score all candidates in a profile file against one reference traveler.

    Args:
        config_path: Path to the configuration YAML file
        profiles_path: If provided, overrides data.profiles_path
        reference_id: If provided, overrides data.reference_id
        output_path: If provided, write results here (.csv or .json)

    Returns:
        Dictionary with the results DataFrame, score statistics and the
        reference identifier
    """
    from .configs import load_config, validate_config, get_config_value
    from .data_loading import load_profiles, load_profiles_csv, find_profile
    from .scoring import ScoringConfig, evaluate_candidates
    from .evaluation import compute_score_distribution_stats

    config = load_config(config_path)
    issues = validate_config(config)
    for issue in issues:
        logger.warning(f"Config issue: {issue}")

    setup_logging(get_config_value(config, "global.log_level", "INFO"))

    scoring_config = ScoringConfig.from_config(config)
    scoring_config.validate()
    logger.info(f"Scoring weights: {scoring_config.get_weights()}, "
                f"budget_sensitivity={scoring_config.budget_sensitivity}")

    # Load profiles
    path = profiles_path or get_config_value(config, "data.profiles_path")
    if not path:
        raise ValueError("No profiles path given (data.profiles_path or --profiles)")

    if Path(path).suffix.lower() == ".csv":
        reference = None
        travelers = load_profiles_csv(path)
    else:
        collection = load_profiles(path)
        reference, travelers = collection.reference, collection.travelers

    wanted_id = reference_id or get_config_value(config, "data.reference_id")
    if wanted_id is not None:
        pool = list(travelers) + ([reference] if reference else [])
        reference = find_profile(pool, wanted_id)
    if reference is None:
        raise ValueError("No reference traveler: set data.reference_id or add a 'reference' record")

    logger.info(f"Reference traveler: {reference.identifier} ({reference.name or 'unnamed'})")

    # Score candidates
    results = evaluate_candidates(reference, travelers, scoring_config)
    for row in results.itertuples(index=False):
        shared = ", ".join(row.common_destinations) or "none"
        logger.info(f"  {row.identifier} {row.name}: {row.score}% (shared: {shared})")

    stats = None
    if len(results) > 0:
        stats = compute_score_distribution_stats(results["score"].to_numpy())
        for line in stats.summary().splitlines():
            logger.info(line)
    else:
        logger.warning("No candidates to score")

    if output_path:
        save_results(results, output_path)

    return {
        "reference_id": reference.identifier,
        "results": results,
        "stats": stats,
    }


def save_results(results: pd.DataFrame, output_path: str) -> None:
    """
    Write a results table to CSV or JSON, chosen by file suffix.

    List-valued cells are joined with ";" in CSV output.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if path.suffix.lower() == ".json":
        results.to_json(path, orient="records", indent=2)
    else:
        table = results.copy()
        table["common_destinations"] = table["common_destinations"].map(";".join)
        table.to_csv(path, index=False)

    logger.info(f"Saved {len(results)} results to {output_path}")


def main(argv=None):
    """Main entry point for the matcher."""
    parser = argparse.ArgumentParser(
        description="Score candidate travel partners against a reference traveler"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="configs/config.yaml",
        help="Path to configuration file"
    )
    parser.add_argument(
        "--profiles",
        type=str,
        default=None,
        help="Profile file (YAML, JSON or CSV; overrides config)"
    )
    parser.add_argument(
        "--reference",
        type=str,
        default=None,
        help="Identifier of the reference traveler (overrides config)"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write results to this .csv or .json file"
    )

    args = parser.parse_args(argv)

    try:
        run_matching(
            args.config,
            profiles_path=args.profiles,
            reference_id=args.reference,
            output_path=args.output
        )
        logger.info("Matching completed successfully")
        return 0
    except Exception as e:
        logger.exception(f"Matching failed with error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
