"""
Keyboard input handling for Classic Pong
"""

import pygame

from classic_pong.core.match import InputFlags

# Exactly five logical inputs, no remapping
KEY_BINDINGS: dict[int, str] = {
    pygame.K_a: "left1",
    pygame.K_d: "right1",
    pygame.K_LEFT: "left2",
    pygame.K_RIGHT: "right2",
    pygame.K_SPACE: "restart",
}


def store_input(flags: InputFlags, key: int, pressed: bool) -> None:
    """Record a key press or release; unbound keys are ignored"""
    flag_name = KEY_BINDINGS.get(key)
    if flag_name is not None:
        setattr(flags, flag_name, pressed)


class InputManager:
    """Turns pygame events into held-key flags"""

    def __init__(self, flags: InputFlags) -> None:
        self.flags = flags

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle pygame events

        Returns:
            "quit" when the window was closed, None otherwise
        """
        if event.type == pygame.KEYDOWN:
            store_input(self.flags, event.key, True)
        elif event.type == pygame.KEYUP:
            store_input(self.flags, event.key, False)
        elif event.type == pygame.QUIT:
            return "quit"

        return None
