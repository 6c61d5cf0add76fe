"""Key event -> game action mapping"""
from typing import Optional
import pygame

KEYMAP = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_DOWN: "down",
    pygame.K_UP: "up",
    pygame.K_SPACE: "hard_drop",
}


def action_for_event(e) -> Optional[str]:
    if e.type != pygame.KEYDOWN: return None
    return KEYMAP.get(e.key)
