"""Pygame event plumbing: keyboard -> logical action, and the tick timer event"""
from typing import Optional
import pygame
from tetris_piece import CONFIRM, DOWN, LEFT, RIGHT, ROTATE

TICK_EVENT = pygame.USEREVENT + 1

KEY_ACTIONS = {
    pygame.K_UP: ROTATE,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_DOWN: DOWN,
    pygame.K_SPACE: CONFIRM,
}


def action_for(event) -> Optional[str]:
    """Logical action for a KEYDOWN event, None for anything else."""
    if event.type != pygame.KEYDOWN:
        return None
    return KEY_ACTIONS.get(event.key)


class PygameTicker:
    """Posts TICK_EVENT to the pygame queue every interval.

    pygame keeps one timer per event type, so set_timer() replaces any
    pending timer and an interval of 0 cancels it.
    """

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self.interval_ms: Optional[int] = None

    @property
    def active(self) -> bool:
        return self.interval_ms is not None

    def start(self, interval_ms: int):
        self.stop()
        pygame.time.set_timer(self.event_type, interval_ms)
        self.interval_ms = interval_ms

    def stop(self):
        pygame.time.set_timer(self.event_type, 0)
        self.interval_ms = None
