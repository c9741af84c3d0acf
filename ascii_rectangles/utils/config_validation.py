"""
Lightweight configuration validation to catch bad script settings early.
"""

from typing import Any

OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_config(config: Any) -> None:
    """
    Validate the settings the scripts rely on.
    Raises ValueError on invalid values.
    """
    num_workers = config.get("extraction.num_workers", 1)
    output_format = config.get("output.format", "text")
    log_level = config.get("logging.level", "INFO")

    if not isinstance(num_workers, int) or isinstance(num_workers, bool) or num_workers < 1:
        raise ValueError(
            f"extraction.num_workers must be a positive integer, got {num_workers!r}."
        )

    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unsupported output.format '{output_format}'. Use one of {', '.join(OUTPUT_FORMATS)}."
        )

    if str(log_level).upper() not in LOG_LEVELS:
        raise ValueError(
            f"Unsupported logging.level '{log_level}'. Use one of {', '.join(LOG_LEVELS)}."
        )
