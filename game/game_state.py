"""
Game State Machine - game phases and the transitions allowed between them
"""

import logging
from enum import Enum, auto

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Game phases"""
    MENU = auto()
    MEMORIZE = auto()
    PLAYING = auto()
    MAP_PEEK = auto()
    LEVEL_COMPLETE = auto()
    GAME_OVER = auto()


# Phases in which the simulation driver keeps running
ACTIVE_PHASES = frozenset({GamePhase.MEMORIZE, GamePhase.PLAYING, GamePhase.MAP_PEEK})

# Phases showing the overhead map with a countdown
COUNTDOWN_PHASES = frozenset({GamePhase.MEMORIZE, GamePhase.MAP_PEEK})

TRANSITIONS = {
    GamePhase.MENU: {GamePhase.MEMORIZE},
    GamePhase.MEMORIZE: {GamePhase.PLAYING, GamePhase.MEMORIZE, GamePhase.MENU},
    GamePhase.PLAYING: {
        GamePhase.MAP_PEEK, GamePhase.LEVEL_COMPLETE, GamePhase.GAME_OVER,
        GamePhase.MEMORIZE, GamePhase.MENU,
    },
    GamePhase.MAP_PEEK: {GamePhase.PLAYING, GamePhase.MEMORIZE, GamePhase.MENU},
    GamePhase.LEVEL_COMPLETE: {GamePhase.MEMORIZE, GamePhase.MENU},
    GamePhase.GAME_OVER: {GamePhase.MENU, GamePhase.MEMORIZE},
}


class IllegalTransition(RuntimeError):
    """Raised when a phase change is not in the transition table"""

    def __init__(self, current, requested):
        super().__init__(f"cannot go from {current.name} to {requested.name}")
        self.current = current
        self.requested = requested


class GameStateManager:
    """
    Tracks the current phase and enforces the transition table
    """
    def __init__(self):
        self.current_state = GamePhase.MENU

    def can_transition(self, new_state):
        return new_state in TRANSITIONS[self.current_state]

    def transition_to(self, new_state, **kwargs):
        """
        Transition to a new state

        Args:
            new_state: GamePhase enum value
            **kwargs: Context written to the transition log line

        Raises:
            IllegalTransition: if the table does not allow the move
        """
        if not self.can_transition(new_state):
            raise IllegalTransition(self.current_state, new_state)

        logger.info("Phase %s -> %s %s", self.current_state.name, new_state.name, kwargs or "")
        self.current_state = new_state

    def is_state(self, state):
        """Check if current state matches"""
        return self.current_state == state

    def is_active(self):
        """Check if the simulation should be driven"""
        return self.current_state in ACTIVE_PHASES

    def has_countdown(self):
        return self.current_state in COUNTDOWN_PHASES

    def get_state_name(self):
        """Get current state name"""
        return self.current_state.name

    def __repr__(self):
        return f"GameStateManager(state={self.current_state.name})"
