"""Logging setup for the dashboard service.

Levels come from Settings, one field per category, so the activity trail
can stay verbose while HTTP client chatter and uvicorn access lines are
kept quiet.

    from dashboard.infrastructure.logging.log_config import setup_logging
    setup_logging(settings)   # once, from the FastAPI lifespan
"""

import logging
import sys

from dashboard.config import Settings, get_settings

_DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field -> logger names it governs
LOG_CATEGORIES: dict[str, tuple[str, ...]] = {
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_activity": (
        "DashboardController",
        "dashboard.application.services",
    ),
    "log_level_backend": (
        "dashboard.infrastructure.supabase",
        "dashboard.infrastructure.seed",
    ),
}


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply root and per-category levels; returns the level set per category."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    # uvicorn installs its own handlers; pytest and scripts do not
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {}
    for field, logger_names in LOG_CATEGORIES.items():
        level = _parse_level(getattr(settings, field, "INFO"))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
        applied[field] = level

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s %s",
        logging.getLevelName(root.level),
        " ".join(f"{field[len('log_level_'):]}={logging.getLevelName(level)}" for field, level in applied.items()),
    )
    return applied


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names map to INFO."""
    numeric = getattr(logging, str(raw).upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
