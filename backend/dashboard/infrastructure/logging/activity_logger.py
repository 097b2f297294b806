"""Colored activity logger — ANSI-colored console logging for dashboard intents.

Provides an ActivityLogger with color-coded output per activity stage,
making it easy to follow what a session did in the terminal.

Color scheme:
    🟢 Green   — Auth
    🔵 Blue    — Navigation / Modal
    🟡 Yellow  — Clients
    🟣 Magenta — Projects
    🟠 Cyan    — Invoices / Profile
    🔴 Red     — Errors / rejected intents
"""

import logging
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


# ── Activity Stage Definitions ───────────────────────────────────────

class ActivityStage:
    """Predefined activity stages with colors and icons."""

    AUTH = ("AUTH", _Colors.GREEN, "🔑")
    NAVIGATION = ("NAVIGATE", _Colors.BLUE, "🧭")
    MODAL = ("MODAL", _Colors.BLUE, "🪟")
    CLIENT = ("CLIENT", _Colors.YELLOW, "🏢")
    PROJECT = ("PROJECT", _Colors.MAGENTA, "📁")
    INVOICE = ("INVOICE", _Colors.CYAN, "🧾")
    PROFILE = ("PROFILE", _Colors.CYAN, "👤")
    ERROR = ("ERROR", _Colors.RED, "❌")


# ── ActivityLogger ───────────────────────────────────────────────────

class ActivityLogger:
    """Color-coded logger for dashboard activity.

    Usage:
        log = ActivityLogger("DashboardController")
        log.event(ActivityStage.CLIENT, "Client created", id=12, name="Acme")
        log.rejected(ActivityStage.AUTH, "Login failed", email="a@b.c")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)
        self._component = component_name

    def event(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log an applied intent with its stage color."""
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        formatted += self._format_details(kwargs)
        self._logger.info(formatted)

    def rejected(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log an intent that left the store unchanged."""
        label, _, icon = stage
        formatted = (
            f"{_Colors.RED}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.RED}✗ {message}{_Colors.RESET}"
        )
        formatted += self._format_details(kwargs)
        self._logger.warning(formatted)

    def detail(self, message: str, **kwargs: Any) -> None:
        """Log additional detail (gray/dimmed)."""
        formatted = f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}"
        formatted += self._format_details(kwargs)
        self._logger.debug(formatted)

    @staticmethod
    def _format_details(kwargs: dict[str, Any]) -> str:
        if not kwargs:
            return ""
        details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
        return f" {_Colors.GRAY}({details}){_Colors.RESET}"
