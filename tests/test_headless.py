"""
Tests for the headless runner CLI and the preset library.
"""

import pytest

from boids import Flock
from tools import headless
from tools.presets import PRESETS, get_preset_list, get_preset_overrides


class TestParseNumber:

    @pytest.mark.parametrize("text, expected", [
        ("125", 125),
        ("1k", 1000),
        ("2.5K", 2500),
        ("1m", 1_000_000),
    ])
    def test_suffixes(self, text, expected):
        assert headless.parse_number(text) == expected

    def test_garbage(self):
        with pytest.raises(ValueError):
            headless.parse_number("lots")


class TestMain:

    def test_clean_run(self, capsys):
        assert headless.main(["-n", "12", "-t", "5", "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert "[Flock] Initialized 12 boids" in out
        assert "All invariants hold" in out

    def test_periodic_report(self, capsys):
        headless.main(["-n", "6", "-t", "4", "--seed", "1", "--every", "2"])
        out = capsys.readouterr().out
        assert "tick      2" in out
        assert "tick      4" in out

    def test_invalid_boids(self, capsys):
        assert headless.main(["-n", "many", "-t", "1"]) == 2
        assert "Invalid boids value" in capsys.readouterr().out

    def test_negative_ticks(self):
        assert headless.main(["-n", "3", "-t", "-1"]) == 2

    def test_preset_and_reset_flag(self, capsys):
        assert headless.main(["--preset", "calm", "-n", "8", "-t", "3", "--reset-acceleration"]) == 0
        assert "Using preset: calm" in capsys.readouterr().out

    def test_list_presets(self, capsys):
        assert headless.main(["--list-presets"]) == 0
        out = capsys.readouterr().out
        for key in PRESETS:
            assert key in out

    def test_zero_ticks(self):
        assert headless.main(["-n", "4", "-t", "0"]) == 0


class TestPresets:

    def test_sorted_by_category(self):
        categories = [preset["category"] for _, preset in get_preset_list()]
        assert categories.index("REFERENCE") < categories.index("SCALE")

    @pytest.mark.parametrize("key", sorted(PRESETS))
    def test_overrides_accepted_by_flock(self, key):
        overrides = get_preset_overrides(key)
        overrides.pop("count", None)
        overrides.pop("backend", None)
        flock = Flock(num_boids=4, seed=0, **overrides)
        flock.update()

    def test_overrides_are_copies(self):
        get_preset_overrides("swarm")["count"] = 1
        assert PRESETS["swarm"]["overrides"]["count"] == 400
