"""Line-clear scoring and level/gravity progression"""
from typing import Any, Dict

from tetris_config import CONFIG

LINE_SCORES = [40, 100, 300, 1200]


def line_score(cleared: int, level: int) -> int:
    """Points for clearing `cleared` rows in one lock at `level`.

    More than four rows in one lock scores as four.
    """
    if cleared <= 0:
        return 0
    return LINE_SCORES[min(cleared, len(LINE_SCORES)) - 1] * level


def level_for_lines(lines: int, lines_per_level: int = 10) -> int:
    return lines // lines_per_level + 1


def drop_interval(level: int, config: Dict[str, Any] = CONFIG) -> int:
    """Milliseconds between automatic one-row drops at `level`."""
    base = config["INITIAL_DROP_INTERVAL_MS"]
    step = config["SPEEDUP_PER_LEVEL_MS"]
    return max(config["MIN_DROP_INTERVAL_MS"], base - (level - 1) * step)
