"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for settings that are valid but probably unintended.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    scoring = config_dict.get("scoring") or {}
    if not isinstance(scoring, dict):
        return warning_messages

    base = scoring.get("base_match_points", 2)
    penalty = scoring.get("stop_term_penalty", 3)
    min_score = scoring.get("min_score", 2)

    if isinstance(base, int) and isinstance(penalty, int) and isinstance(min_score, int):
        if base - penalty >= min_score:
            warning_messages.append(
                f"stop_term_penalty ({penalty}) does not push a base match ({base}) "
                f"below min_score ({min_score}); stop terms will be reported as skills"
            )
        if min_score > base:
            warning_messages.append(
                f"min_score ({min_score}) is above base_match_points ({base}); "
                "only skills reinforced by shared phrases will be reported"
            )

    # Reinforcement compares resume phrases with job-side grams of these sizes;
    # with no size in common it can never fire.
    job_sizes = scoring.get("job_phrase_sizes")
    resume_sizes = scoring.get("resume_phrase_sizes", [2, 3])
    if isinstance(job_sizes, list) and isinstance(resume_sizes, list):
        if job_sizes and not set(job_sizes) & set(resume_sizes):
            warning_messages.append(
                f"job_phrase_sizes {job_sizes} share no size with resume_phrase_sizes "
                f"{resume_sizes}; phrase reinforcement is disabled"
            )

    extra_terms = scoring.get("extra_stop_terms", [])
    if isinstance(extra_terms, list):
        normalized = [t.strip().lower() for t in extra_terms if isinstance(t, str)]
        duplicates = sorted({t for t in normalized if normalized.count(t) > 1})
        if duplicates:
            warning_messages.append(
                f"Duplicate extra_stop_terms will be deduplicated: {', '.join(duplicates)}"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
