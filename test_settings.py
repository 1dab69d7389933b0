"""Settings persistence round trips through a temporary file."""

import json
import os
import tempfile
import unittest
from datetime import date

from calendar_widget import CalendarWidget
from settings import apply_disabled_days, load_settings, save_settings, widget_options
from test_calendar_widget import RecordingRenderer


class SettingsTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, "settings.json")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, data) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f)

    def test_defaults_when_missing(self) -> None:
        settings = load_settings(self.path)
        self.assertEqual(settings["selector"], ".calendar")
        self.assertEqual(settings["week_starts"], 1)
        self.assertEqual(settings["disabled_days"], [])
        self.assertEqual(settings["log_level"], "INFO")

    def test_save_then_load(self) -> None:
        settings = load_settings(self.path)
        settings["week_starts"] = 0
        settings["next_symbol"] = ">"
        settings["disabled_days"] = [7, 14]
        save_settings(settings, self.path)
        loaded = load_settings(self.path)
        self.assertEqual(loaded["week_starts"], 0)
        self.assertEqual(loaded["next_symbol"], ">")
        self.assertEqual(loaded["disabled_days"], [7, 14])

    def test_bad_values_fall_back(self) -> None:
        self._write({
            "week_starts": 9,
            "selector": 3,
            "disabled_days": [1, "2", True, 3],
            "log_level": "verbose",
        })
        settings = load_settings(self.path)
        self.assertEqual(settings["week_starts"], 1)
        self.assertEqual(settings["selector"], ".calendar")
        self.assertEqual(settings["disabled_days"], [1, 3])
        self.assertEqual(settings["log_level"], "INFO")

    def test_boolean_is_not_a_week_start(self) -> None:
        self._write({"week_starts": True})
        self.assertEqual(load_settings(self.path)["week_starts"], 1)

    def test_corrupt_file(self) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("{not json")
        self.assertEqual(load_settings(self.path)["week_starts"], 1)

    def test_log_level_normalised(self) -> None:
        self._write({"log_level": "debug"})
        self.assertEqual(load_settings(self.path)["log_level"], "DEBUG")

    def test_widget_options(self) -> None:
        self._write({"week_starts": 6, "previous_symbol": "<"})
        options = widget_options(load_settings(self.path))
        self.assertEqual(options, {
            "selector": ".calendar",
            "week_starts": 6,
            "previous_symbol": "<",
            "next_symbol": "▶",
        })

    def test_defaults_not_shared(self) -> None:
        first = load_settings(self.path)
        first["disabled_days"].append(5)
        self.assertEqual(load_settings(self.path)["disabled_days"], [])


class ApplyDisabledDaysTests(unittest.TestCase):
    def _widget(self, today: date) -> CalendarWidget:
        return CalendarWidget(RecordingRenderer(), today=today)

    def test_applies_configured_days(self) -> None:
        widget = self._widget(date(2024, 1, 17))
        apply_disabled_days(widget, {"disabled_days": [7, 14]})
        self.assertEqual(widget.disabled_days, {7, 14})

    def test_absent_days_are_logged_not_raised(self) -> None:
        widget = self._widget(date(2023, 2, 10))
        with self.assertLogs("settings", level="INFO") as logs:
            apply_disabled_days(widget, {"disabled_days": [7, 30, 31]})
        self.assertEqual(widget.disabled_days, {7})
        self.assertIn("[30, 31]", logs.output[0])

    def test_nothing_configured(self) -> None:
        widget = self._widget(date(2024, 1, 17))
        renders = widget._renderer.renders
        apply_disabled_days(widget, {"disabled_days": []})
        self.assertEqual(widget.disabled_days, frozenset())
        self.assertEqual(widget._renderer.renders, renders)


if __name__ == "__main__":
    unittest.main()
