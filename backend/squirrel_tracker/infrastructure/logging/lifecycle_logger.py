"""Colored lifecycle logger — ANSI-colored console output for sighting actions.

Every controller action (refresh, save, favorite toggle, local removal)
gets its own color so a sighting's path from form to store to table can
be followed in the terminal.

Color scheme:
    🔵 Blue    — Refresh / list
    🟢 Green   — Create
    🟠 Cyan    — Update
    🟣 Magenta — Favorite toggle
    🟡 Yellow  — Local removal
    🔴 Red     — Errors
    ⚪ Gray    — Counts
"""

import logging
from typing import Any


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


class LifecycleStage:
    """Predefined controller stages with colors and icons."""

    REFRESH = ("REFRESH", _Colors.BLUE, "🔄")
    CREATE = ("CREATE", _Colors.GREEN, "➕")
    UPDATE = ("UPDATE", _Colors.CYAN, "✏️")
    FAVORITE = ("FAVORITE", _Colors.MAGENTA, "❤️")
    REMOVE = ("REMOVE", _Colors.YELLOW, "🗑️")


class LifecycleLogger:
    """Color-coded logger for the sighting controller.

    Usage:
        log = LifecycleLogger("SightingController")
        log.step_start(LifecycleStage.CREATE, "Saving Chippy")
        log.step_complete(LifecycleStage.CREATE, "Saved", id="abc123")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    @staticmethod
    def _details(kwargs: dict[str, Any]) -> str:
        if not kwargs:
            return ""
        details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
        return f" {_Colors.GRAY}({details}){_Colors.RESET}"

    def step_start(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        self._logger.info(formatted + self._details(kwargs))

    def step_complete(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}"
        )
        self._logger.info(formatted + self._details(kwargs))

    def step_error(self, stage: tuple[str, str, str], message: str, reason: str | None = None) -> None:
        """Log a failed step in red; failures are reported, not raised."""
        label, _, _ = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if reason:
            formatted += f" {_Colors.DIM}→ {reason}{_Colors.RESET}"
        self._logger.warning(formatted)

    def stats(self, **kwargs: Any) -> None:
        parts = [f"{k}: {v}" for k, v in kwargs.items()]
        self._logger.info(f"   {_Colors.GRAY}📈 {' | '.join(parts)}{_Colors.RESET}")
