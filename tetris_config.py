"""Tunable game constants"""
from typing import Any, Dict

CONFIG: Dict[str, Any] = {
    "COLS": 10,
    "ROWS": 20,
    "INITIAL_DROP_INTERVAL_MS": 1000,
    "SPEEDUP_PER_LEVEL_MS": 50,
    "LINES_PER_LEVEL": 10,
    "MIN_DROP_INTERVAL_MS": 100,
    "CELL_SIZE": 30,
    "FPS": 60,
    "KEY_REPEAT_DELAY_MS": 170,
    "KEY_REPEAT_INTERVAL_MS": 50,
    "SEED": None,
}

# Widest/tallest piece (I) needs a 4x4 box to spawn
MIN_GRID = 4


def make_config(**overrides) -> Dict[str, Any]:
    """Return a validated copy of CONFIG with overrides applied.

    Raises ValueError for unknown keys or values the engine cannot run with.
    """
    unknown = set(overrides) - set(CONFIG)
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(sorted(unknown))}")
    cfg = dict(CONFIG)
    cfg.update(overrides)

    if cfg["COLS"] < MIN_GRID or cfg["ROWS"] < MIN_GRID:
        raise ValueError(f"grid must be at least {MIN_GRID}x{MIN_GRID}, got {cfg['COLS']}x{cfg['ROWS']}")
    for key in ("INITIAL_DROP_INTERVAL_MS", "MIN_DROP_INTERVAL_MS", "CELL_SIZE", "FPS"):
        if cfg[key] <= 0:
            raise ValueError(f"{key} must be positive, got {cfg[key]}")
    if cfg["SPEEDUP_PER_LEVEL_MS"] < 0:
        raise ValueError("SPEEDUP_PER_LEVEL_MS must not be negative")
    if cfg["LINES_PER_LEVEL"] < 1:
        raise ValueError("LINES_PER_LEVEL must be at least 1")
    return cfg
