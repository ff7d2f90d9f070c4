from __future__ import annotations

from wordingo.game.modes.catalog import GUESS_MODES, level_mode


def test_level_mode_points_grow_with_difficulty() -> None:
    assert [level_mode(level).points for level in (1, 2, 3)] == [100, 150, 200]


def test_level_mode_clamps_out_of_range_levels() -> None:
    assert level_mode(0).code == "level_1"
    assert level_mode(7).code == "level_3"


def test_guess_modes_table() -> None:
    assert {code: (mode.max_attempts, mode.points) for code, mode in GUESS_MODES.items()} == {
        "standard": (6, 100),
        "jumble": (3, 150),
        "sudden": (1, 250),
    }
    assert [code for code, mode in GUESS_MODES.items() if mode.scrambled_clue] == ["jumble"]
