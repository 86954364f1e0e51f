import logging

import pytest

from game.game_state import GameStateManager, GamePhase, IllegalTransition, TRANSITIONS


def test_starts_in_menu():
    manager = GameStateManager()
    assert manager.is_state(GamePhase.MENU)
    assert not manager.is_active()
    assert manager.get_state_name() == "MENU"


def test_normal_run():
    manager = GameStateManager()
    for phase in (GamePhase.MEMORIZE, GamePhase.PLAYING, GamePhase.MAP_PEEK,
                  GamePhase.PLAYING, GamePhase.LEVEL_COMPLETE, GamePhase.MEMORIZE):
        manager.transition_to(phase)
        assert manager.current_state is phase
    assert manager.is_active()
    assert manager.has_countdown()


@pytest.mark.parametrize("path,bad", [
    ([], GamePhase.PLAYING),
    ([], GamePhase.GAME_OVER),
    ([GamePhase.MEMORIZE], GamePhase.LEVEL_COMPLETE),
    ([GamePhase.MEMORIZE, GamePhase.PLAYING, GamePhase.GAME_OVER], GamePhase.PLAYING),
])
def test_illegal_transitions(path, bad):
    manager = GameStateManager()
    for phase in path:
        manager.transition_to(phase)
    current = manager.current_state

    with pytest.raises(IllegalTransition) as info:
        manager.transition_to(bad)

    assert info.value.current is current
    assert info.value.requested is bad
    assert manager.current_state is current


def test_every_phase_has_a_way_out():
    for phase in GamePhase:
        assert TRANSITIONS[phase]


def test_transition_context_is_logged(caplog):
    manager = GameStateManager()
    with caplog.at_level(logging.INFO, logger="game.game_state"):
        manager.transition_to(GamePhase.MEMORIZE, level_index=3)

    assert "MENU -> MEMORIZE" in caplog.text
    assert "level_index" in caplog.text
