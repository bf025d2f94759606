from __future__ import annotations

from typing import Dict, Optional

import pygame

from tetris_engine.game import Action


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_UP: Action.ROTATE_CW,
    pygame.K_z: Action.ROTATE_CCW,
    pygame.K_SPACE: Action.HARD_DROP,
    pygame.K_p: Action.PAUSE,
    pygame.K_q: Action.QUIT,
    pygame.K_ESCAPE: Action.QUIT,
}

# pygame reports letters by their lowercase key code; the typed character
# distinguishes shifted input.
CHAR_TO_ACTION: Dict[str, Action] = {
    " ": Action.HARD_DROP,
    "z": Action.ROTATE_CCW,
    "Z": Action.ROTATE_CCW,
    "p": Action.PAUSE,
    "P": Action.PAUSE,
    "q": Action.QUIT,
    "Q": Action.QUIT,
}


def action_for_key(key: Optional[int], unicode: str = "") -> Action:
    """Translate a key code (and optionally its typed character) to an Action."""
    if key is None:
        return Action.NONE
    action = KEY_TO_ACTION.get(key)
    if action is not None:
        return action
    return CHAR_TO_ACTION.get(unicode, Action.INVALID)
