"""
Game session - the per-frame simulation and everything it owns

One GameSession holds the active level, the player, the phase machine,
countdowns, the ability cooldown and the pending timed effects.
"""

import logging
import random
from dataclasses import dataclass

from game.collision import CollisionHandler
from game.game_state import GameStateManager, GamePhase, IllegalTransition
from game.level_manager import LevelManager
from game.timers import EventScheduler
from entities.player import Player
from entities.powerup import PowerUpType
from maze.maze_core import bfs_shortest_path
from utils.constants import (
    STARTING_LIVES, MEMORIZE_TIME, PEEK_TIME, ABILITY_COOLDOWN, ABILITY_RANGE,
    INVULNERABILITY_DURATION, REVEAL_DURATION, MOVE_DEADZONE, LOOK_DEADZONE
)
from utils.helpers import outside_deadzone

logger = logging.getLogger(__name__)

NO_INPUT = (0.0, 0.0)


@dataclass(frozen=True)
class PowerUpView:
    id: str
    x: float
    z: float
    type: PowerUpType
    collected: bool


@dataclass(frozen=True)
class RenderSnapshot:
    """Read-only view of everything a renderer needs for one frame"""
    grid: object                  # read-only numpy view
    start_pos: tuple
    goal_pos: tuple
    player_pos: tuple
    player_heading: float
    elapsed: float
    obstacles: tuple              # Obstacle objects (immutable)
    obstacle_positions: tuple     # ((id, (x, z)), ...) at `elapsed`
    powerups: tuple               # PowerUpView, ...
    revealed_path: tuple          # ((x, z), ...), empty when inactive


@dataclass(frozen=True)
class HudState:
    player_pos: tuple
    player_heading: float
    lives: int
    level_index: int
    ability_ready: bool
    ability_cooldown: int
    phase: GamePhase
    countdown: int
    paused: bool


class GameSession:
    """
    Owns the active level and advances it frame by frame

    Inputs are two vectors with components in [-1, 1]:
    move = (strafe, forward) and look = (yaw, unused).
    """
    def __init__(self, rng=None):
        self.rng = rng or random
        self.level_manager = LevelManager(self.rng)
        self.state_manager = GameStateManager()
        self.collision_handler = CollisionHandler()
        self.scheduler = EventScheduler()

        self.level = None
        self.level_index = 0
        self.player = Player(0, 0, lives=STARTING_LIVES)

        # Countdown shown during MEMORIZE / MAP_PEEK
        self.timer = 0
        self.paused = False

        # Area-clear ability
        self.ability_cooldown = 0
        self.ability_ready = False

        # Shortest path overlay from MAP_REVEAL
        self.revealed_path = ()

        self.move_input = NO_INPUT
        self.look_input = NO_INPUT

        # Cancellation tokens for timed effects
        self._invulnerability_event = None
        self._reveal_event = None

    # ---------- Properties ----------

    @property
    def phase(self):
        return self.state_manager.current_state

    @property
    def elapsed(self):
        """Simulation time of the current level, frozen outside PLAYING"""
        return self.scheduler.now

    @property
    def lives(self):
        return self.player.lives

    # ---------- Level flow ----------

    def new_game(self):
        """Fresh run from the first level with full lives"""
        self.player.lives = STARTING_LIVES
        self.start_level(0)

    def start_level(self, level_index):
        """
        Build a level and enter MEMORIZE

        Everything tied to the previous level is dropped first: pending
        timed effects, inputs, cooldown, revealed path and pause.

        Raises:
            IllegalTransition: if no lives are left, only new_game() leaves GAME_OVER
        """
        if not self.player.is_alive():
            raise IllegalTransition(self.phase, GamePhase.MEMORIZE)

        level = self.level_manager.create_level(level_index)

        self.scheduler.reset()
        self._invulnerability_event = None
        self._reveal_event = None

        self.level = level
        self.level_index = level_index
        self.player.reset_position(level.start_pos[0], level.start_pos[1], level.start_heading)

        self.move_input = NO_INPUT
        self.look_input = NO_INPUT
        self.paused = False
        self.ability_cooldown = 0
        self.ability_ready = False
        self.revealed_path = ()

        self.state_manager.transition_to(GamePhase.MEMORIZE, level_index=level_index)
        self.timer = MEMORIZE_TIME

    def restart_level(self):
        """
        Rebuild the current level index, keeping lives

        Raises:
            RuntimeError: if no level has been started yet
            IllegalTransition: if no lives are left, only new_game() leaves GAME_OVER
        """
        if self.level is None:
            raise RuntimeError("no level has been started yet")
        self.start_level(self.level_index)

    def next_level(self):
        """Proceed after LEVEL_COMPLETE"""
        if not self.state_manager.is_state(GamePhase.LEVEL_COMPLETE):
            raise IllegalTransition(self.phase, GamePhase.MEMORIZE)
        self.start_level(self.level_index + 1)

    def return_to_menu(self):
        if self.state_manager.is_state(GamePhase.MENU):
            return
        self.scheduler.cancel_all()
        self.paused = False
        self.revealed_path = ()
        self.state_manager.transition_to(GamePhase.MENU)

    def enter_map_peek(self):
        """Show the overhead map again for PEEK_TIME seconds"""
        if self.paused or not self.state_manager.is_state(GamePhase.PLAYING):
            return False
        self.state_manager.transition_to(GamePhase.MAP_PEEK)
        self.timer = PEEK_TIME
        return True

    def skip_countdown(self):
        """Leave MEMORIZE / MAP_PEEK right away"""
        if not self.state_manager.has_countdown():
            return False
        self.timer = 0
        self.state_manager.transition_to(GamePhase.PLAYING)
        return True

    def pause(self):
        if self.paused or not self.state_manager.is_active():
            return False
        self.paused = True
        self.move_input = NO_INPUT
        self.look_input = NO_INPUT
        logger.info("Paused at t=%.2f", self.elapsed)
        return True

    def resume(self):
        if not self.paused:
            return False
        self.paused = False
        logger.info("Resumed at t=%.2f", self.elapsed)
        return True

    # ---------- Clocks ----------

    def tick_second(self):
        """One wall-clock second: countdown and ability cooldown"""
        if self.paused:
            return

        if self.state_manager.has_countdown() and self.timer > 0:
            self.timer -= 1
            if self.timer <= 0:
                self.timer = 0
                self.state_manager.transition_to(GamePhase.PLAYING)

        if self.ability_cooldown > 0:
            self.ability_cooldown = max(0, self.ability_cooldown - 1)

    def update(self, dt, move=None, look=None):
        """
        Advance the simulation by dt seconds

        Order matters: turn, move, advance time, then hazards, pickups and
        the goal all read the freshly moved position.

        Returns:
            True if the tick ran
        """
        if self.paused:
            return False

        if move is not None:
            self.move_input = move
        if look is not None:
            self.look_input = look

        if not self.state_manager.is_state(GamePhase.PLAYING):
            return False

        player = self.player
        look_x = self.look_input[0]
        if abs(look_x) > LOOK_DEADZONE:
            player.rotate(look_x, dt)

        if outside_deadzone(self.move_input, MOVE_DEADZONE):
            strafe, forward = self.move_input
            player.move(forward, strafe, self.level.grid, dt)

        self.scheduler.advance(dt)

        result = self.collision_handler.check_player_position(
            player,
            self.level.obstacle_manager,
            self.level.powerup_manager,
            self.level.goal_pos,
            self.elapsed,
        )

        self.ability_ready = result['ability_in_range'] and self.ability_cooldown == 0

        if result['hit'] is not None and not player.invulnerable:
            logger.debug("Hit by %s at t=%.2f", result['hit'].id, self.elapsed)
            self.apply_hit()
            if not self.state_manager.is_state(GamePhase.PLAYING):
                return True

        for powerup in result['powerups']:
            self._collect_powerup(powerup)

        if result['reached_goal']:
            self.state_manager.transition_to(GamePhase.LEVEL_COMPLETE, level_index=self.level_index)
        return True

    # ---------- Gameplay events ----------

    def apply_hit(self):
        """
        Take one hit from a hazard

        Ignored while invulnerable. Losing the last life ends the game,
        otherwise a short invulnerability window starts.

        Returns:
            True if a life was lost
        """
        if not self.state_manager.is_state(GamePhase.PLAYING):
            return False
        if not self.player.take_hit():
            return False

        logger.info("Player hit, %d lives left", self.player.lives)
        if not self.player.is_alive():
            self.scheduler.cancel_all()
            self.state_manager.transition_to(GamePhase.GAME_OVER, level_index=self.level_index)
            return True

        self.player.invulnerable = True
        self.scheduler.cancel(self._invulnerability_event)
        self._invulnerability_event = self.scheduler.schedule(
            INVULNERABILITY_DURATION, self._end_invulnerability, name="invulnerability")
        return True

    def _end_invulnerability(self):
        self.player.invulnerable = False
        self._invulnerability_event = None

    def trigger_ability(self):
        """
        Area-clear: destroy every obstacle within ABILITY_RANGE

        Positions are recomputed at the current simulation time, the same
        clock the per-tick proximity check uses.

        Returns:
            List of removed obstacles, empty if the ability was not usable
        """
        if self.paused or not self.state_manager.is_state(GamePhase.PLAYING):
            return []
        if self.ability_cooldown > 0:
            return []

        px, pz = self.player.position
        obstacles = self.level.obstacle_manager
        if not obstacles.any_in_range(px, pz, ABILITY_RANGE, self.elapsed):
            self.ability_ready = False
            return []

        removed = obstacles.remove_in_range(px, pz, ABILITY_RANGE, self.elapsed)
        self.ability_cooldown = ABILITY_COOLDOWN
        self.ability_ready = False
        logger.info("Area clear removed %s", [o.id for o in removed])
        return removed

    def _collect_powerup(self, powerup):
        if not powerup.collect():
            return

        logger.debug("Collected %s (%s)", powerup.id, powerup.type.name)
        if powerup.type is PowerUpType.EXTRA_LIFE:
            self.player.add_life()
        elif powerup.type is PowerUpType.MAP_REVEAL:
            self.revealed_path = tuple(
                bfs_shortest_path(self.level.grid, self.player.position, self.level.goal_pos))
            self.scheduler.cancel(self._reveal_event)
            self._reveal_event = self.scheduler.schedule(
                REVEAL_DURATION, self._clear_revealed_path, name="reveal")

    def _clear_revealed_path(self):
        self.revealed_path = ()
        self._reveal_event = None

    # ---------- Read-only views ----------

    def snapshot(self):
        """Frame data for the renderer"""
        if self.level is None:
            raise RuntimeError("no level has been started yet")

        grid = self.level.grid.view()
        grid.flags.writeable = False
        t = self.elapsed
        obstacles = tuple(self.level.obstacles)
        return RenderSnapshot(
            grid=grid,
            start_pos=self.level.start_pos,
            goal_pos=self.level.goal_pos,
            player_pos=self.player.position,
            player_heading=self.player.heading,
            elapsed=t,
            obstacles=obstacles,
            obstacle_positions=tuple(self.level.obstacle_manager.positions_at(t).items()),
            powerups=tuple(PowerUpView(p.id, p.x, p.z, p.type, p.collected)
                           for p in self.level.powerups),
            revealed_path=self.revealed_path,
        )

    def hud(self):
        """Values for the HUD and radar"""
        return HudState(
            player_pos=self.player.position,
            player_heading=self.player.heading,
            lives=self.player.lives,
            level_index=self.level_index,
            ability_ready=self.ability_ready,
            ability_cooldown=self.ability_cooldown,
            phase=self.phase,
            countdown=self.timer,
            paused=self.paused,
        )

    def __repr__(self):
        return (f"GameSession(phase={self.phase.name}, level={self.level_index}, "
                f"lives={self.player.lives}, paused={self.paused})")
