import math
from collections import defaultdict

import pygame
import pytest

from game.input_mapper import KeyboardInputMapper


def pressed(*keys):
    state = defaultdict(bool)
    for key in keys:
        state[key] = True
    return state


def test_no_keys():
    assert KeyboardInputMapper().sample(pressed()) == ((0.0, 0.0), (0.0, 0.0))


def test_forward_and_strafe():
    move, look = KeyboardInputMapper().sample(pressed(pygame.K_w, pygame.K_d))
    assert move == pytest.approx((math.sqrt(0.5), math.sqrt(0.5)))
    assert math.hypot(*move) <= 1.0 + 1e-9
    assert look == (0.0, 0.0)


def test_arrows_match_letters():
    mapper = KeyboardInputMapper()
    assert mapper.sample(pressed(pygame.K_UP)) == mapper.sample(pressed(pygame.K_w))
    assert mapper.sample(pressed(pygame.K_LEFT)) == mapper.sample(pressed(pygame.K_q))
    assert mapper.sample(pressed(pygame.K_RIGHT))[1] == (1.0, 0.0)


def test_opposite_keys_cancel():
    move, look = KeyboardInputMapper().sample(
        pressed(pygame.K_w, pygame.K_s, pygame.K_q, pygame.K_e))
    assert move == (0.0, 0.0)
    assert look == (0.0, 0.0)


def test_reset():
    mapper = KeyboardInputMapper()
    mapper.sample(pressed(pygame.K_s, pygame.K_a))
    assert mapper.move == pytest.approx((-math.sqrt(0.5), -math.sqrt(0.5)))
    mapper.reset()
    assert mapper.move == (0.0, 0.0)


def test_single_axis_keeps_full_speed():
    move, _ = KeyboardInputMapper().sample(pressed(pygame.K_a))
    assert move == (-1.0, 0.0)
