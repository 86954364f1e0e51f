"""
Keyboard to input-vector mapping for the pygame front-end
"""

import math

import pygame

FORWARD_KEYS = (pygame.K_w, pygame.K_UP)
BACKWARD_KEYS = (pygame.K_s, pygame.K_DOWN)
STRAFE_LEFT_KEYS = (pygame.K_a,)
STRAFE_RIGHT_KEYS = (pygame.K_d,)
TURN_LEFT_KEYS = (pygame.K_q, pygame.K_LEFT)
TURN_RIGHT_KEYS = (pygame.K_e, pygame.K_RIGHT)


def _axis(keys, negative, positive):
    value = 0.0
    if any(keys[k] for k in negative):
        value -= 1.0
    if any(keys[k] for k in positive):
        value += 1.0
    return value


class KeyboardInputMapper:
    """
    Turns held keys into the two per-frame input vectors

    move = (strafe, forward), look = (yaw, 0). Opposite keys cancel out
    and diagonals are scaled back onto the unit circle.
    """
    def __init__(self):
        self.move = (0.0, 0.0)
        self.look = (0.0, 0.0)

    def sample(self, keys):
        """
        Args:
            keys: Anything indexable by pygame key constants, normally
                  pygame.key.get_pressed()

        Returns:
            (move, look) tuple of 2D vectors
        """
        strafe = _axis(keys, STRAFE_LEFT_KEYS, STRAFE_RIGHT_KEYS)
        forward = _axis(keys, BACKWARD_KEYS, FORWARD_KEYS)
        yaw = _axis(keys, TURN_LEFT_KEYS, TURN_RIGHT_KEYS)

        length = math.hypot(strafe, forward)
        if length > 1.0:
            strafe /= length
            forward /= length

        self.move = (strafe, forward)
        self.look = (yaw, 0.0)
        return self.move, self.look

    def reset(self):
        """Forget held input, e.g. when a level starts"""
        self.move = (0.0, 0.0)
        self.look = (0.0, 0.0)
