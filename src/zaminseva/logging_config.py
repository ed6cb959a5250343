from __future__ import annotations

import logging
import os

# Per-property component breakdowns are logged here at DEBUG
SCORING_LOGGER = "zaminseva.locality"

_configured = False

def configure_logging(level: str | int | None = None, scoring_level: str | int | None = None) -> None:
    """Configure root logging and the scoring logger once.

    Root level priority: explicit arg > ZAMINSEVA_LOG_LEVEL > DEBUG if
    ZAMINSEVA_ENV=dev > INFO.

    ``scoring_level`` (or ZAMINSEVA_SCORING_LOG_LEVEL) sets the
    ``zaminseva.locality`` logger on its own, so score breakdowns can be
    traced without turning the whole process to DEBUG. Unset, it inherits
    the root level.

    Safe no-op if already configured.
    """
    global _configured
    if _configured:
        return
    env_level = os.getenv("ZAMINSEVA_LOG_LEVEL")
    if level is None:
        if env_level:
            level = env_level
        elif os.getenv("ZAMINSEVA_ENV", "").lower() == "dev":
            level = "DEBUG"
        else:
            level = "INFO"
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if scoring_level is None:
        scoring_level = os.getenv("ZAMINSEVA_SCORING_LOG_LEVEL") or None
    if scoring_level is not None:
        if isinstance(scoring_level, str):
            scoring_level = scoring_level.upper()
        logging.getLogger(SCORING_LOGGER).setLevel(scoring_level)
    _configured = True
