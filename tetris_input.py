"""Keyboard -> game action mapping"""
from typing import Dict, Optional

import pygame

from tetris_config import CONFIG
from tetris_game import Action

KEYMAP: Dict[int, Action] = {
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_UP: Action.ROTATE,
    pygame.K_SPACE: Action.HARD_DROP,
    pygame.K_p: Action.TOGGLE_PAUSE,
    pygame.K_RETURN: Action.RESTART,
    pygame.K_KP_ENTER: Action.RESTART,
    pygame.K_r: Action.RESTART,
}


def action_for_key(key: int) -> Optional[Action]:
    return KEYMAP.get(key)


def enable_key_repeat(config=CONFIG):
    # Held keys move the piece through SDL's own key repeat
    pygame.key.set_repeat(config["KEY_REPEAT_DELAY_MS"], config["KEY_REPEAT_INTERVAL_MS"])
