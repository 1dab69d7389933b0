"""JSON-based settings persistence for the mini calendar."""

import json
import logging
import os

from calendar_widget import CalendarWidget, InvalidDisableTarget

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".mini-calendar-widget.json")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_DEFAULTS = {
    "selector": ".calendar",
    "week_starts": 1,
    "previous_symbol": "◀",
    "next_symbol": "▶",
    "disabled_days": [],
    "log_level": "INFO",
}


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    settings["disabled_days"] = []
    try:
        with open(path or _SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
        if not isinstance(stored, dict):
            return settings
        for key in ("selector", "previous_symbol", "next_symbol"):
            if key in stored and isinstance(stored[key], str):
                settings[key] = stored[key]
        week_starts = stored.get("week_starts")
        if isinstance(week_starts, int) and not isinstance(week_starts, bool) \
                and 0 <= week_starts <= 6:
            settings["week_starts"] = week_starts
        if "disabled_days" in stored and isinstance(stored["disabled_days"], list):
            settings["disabled_days"] = [
                d for d in stored["disabled_days"]
                if isinstance(d, int) and not isinstance(d, bool)
            ]
        level = stored.get("log_level")
        if isinstance(level, str) and level.upper() in _LOG_LEVELS:
            settings["log_level"] = level.upper()
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        pass
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    with open(path or _SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


def widget_options(settings: dict) -> dict:
    """Keyword arguments for ``CalendarWidget`` taken from the settings."""
    return {
        key: settings[key]
        for key in ("selector", "week_starts", "previous_symbol", "next_symbol")
    }


def apply_disabled_days(widget: CalendarWidget, settings: dict) -> None:
    """Disable the configured days in the displayed month, skipping absent ones."""
    if not settings["disabled_days"]:
        return
    try:
        widget.disable_days(settings["disabled_days"])
    except InvalidDisableTarget as exc:
        logger.info("Not disabled in %s: %s", widget.title, exc.rejected)
