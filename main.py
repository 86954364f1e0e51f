"""
Memory Maze - top-down pygame front-end
Reads session snapshots, never changes game rules
"""

import logging
import math

import pygame

from game.session import GameSession
from game.game_loop import SimulationDriver
from game.game_state import GamePhase
from game.input_mapper import KeyboardInputMapper
from entities.powerup import PowerUpType
from maze.difficulty import get_level_name, get_level_description
from utils.constants import CELL_SIZE, FPS, PANEL_H, WALL, START, PLAYER_RADIUS
from utils.colors import (
    COLOR_BG, COLOR_MAZE_BG, COLOR_WALL, COLOR_PLAYER, COLOR_GOAL, COLOR_START,
    COLOR_REVEAL_PATH, COLOR_TEXT, COLOR_TEXT_HIGHLIGHT, COLOR_TEXT_DIM, COLOR_PANEL_BG,
    COLOR_POWERUP_REVEAL, COLOR_POWERUP_LIFE, COLOR_MENU_OVERLAY
)
from utils.helpers import clamp, distance, format_time
from config import (
    GAME_TITLE, GAME_VERSION, WINDOW_MAX_W, WINDOW_MAX_H, MIN_CELL_PX, VISION_RADIUS,
    FONT_NAME, FONT_SIZE, BIG_FONT_SIZE, LOG_LEVEL, LOG_FORMAT
)

logger = logging.getLogger(__name__)


class MazeGame:
    """
    Main game class
    """
    def __init__(self):
        pygame.init()
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")

        self.session = GameSession()
        self.driver = SimulationDriver(self.session)
        self.input = KeyboardInputMapper()

        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        self.big_font = pygame.font.SysFont(FONT_NAME, BIG_FONT_SIZE, bold=True)

        self.cell_px = CELL_SIZE
        self.screen = pygame.display.set_mode((WINDOW_MAX_W // 2, WINDOW_MAX_H // 2))
        self.running = True

    # ---------- Level flow ----------

    def _begin_level(self, action):
        action()
        self.input.reset()
        self._resize_screen_for_level()
        self.driver.start()
        self.driver.reset_clock()

    def _resize_screen_for_level(self):
        size = self.session.level.size
        fit = min(WINDOW_MAX_W // size, (WINDOW_MAX_H - PANEL_H) // size)
        self.cell_px = clamp(fit, MIN_CELL_PX, CELL_SIZE)
        self.screen = pygame.display.set_mode((size * self.cell_px, size * self.cell_px + PANEL_H))

    # ---------- Events ----------

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

    def _handle_keydown(self, key):
        session = self.session
        phase = session.phase

        if key == pygame.K_ESCAPE:
            self.running = False
        elif phase == GamePhase.MENU:
            if key == pygame.K_RETURN:
                self._begin_level(session.new_game)
        elif phase == GamePhase.LEVEL_COMPLETE:
            if key == pygame.K_RETURN:
                self._begin_level(session.next_level)
        elif phase == GamePhase.GAME_OVER:
            if key == pygame.K_RETURN:
                self._begin_level(session.new_game)
            elif key == pygame.K_BACKSPACE:
                session.return_to_menu()
        else:
            self._handle_playing_input(key)

    def _handle_playing_input(self, key):
        session = self.session
        if key == pygame.K_p:
            if session.paused:
                session.resume()
            else:
                session.pause()
        elif key == pygame.K_r:
            self._begin_level(session.restart_level)
        elif key == pygame.K_RETURN:
            session.skip_countdown()
        elif key == pygame.K_m:
            session.enter_map_peek()
        elif key == pygame.K_SPACE:
            session.trigger_ability()

    # ---------- Update ----------

    def update(self, dt):
        if not self.driver.running:
            return
        move, look = self.input.sample(pygame.key.get_pressed())
        self.driver.advance(dt, move, look)

    # ---------- Render ----------

    def render(self):
        self.screen.fill(COLOR_BG)
        if self.session.phase is GamePhase.MENU:
            self._render_menu()
        else:
            self._render_level()
            self._render_panel()
            self._render_overlay()
        pygame.display.flip()

    def _cell_rect(self, x, z, pad=0):
        c = self.cell_px
        return pygame.Rect(int(x * c) + pad, int(z * c) + pad, c - pad * 2, c - pad * 2)

    def _to_screen(self, x, z):
        c = self.cell_px
        return int(x * c + c / 2), int(z * c + c / 2)

    def _render_level(self):
        snap = self.session.snapshot()
        height, width = snap.grid.shape
        px, pz = snap.player_pos
        pygame.draw.rect(self.screen, COLOR_MAZE_BG, (0, 0, width * self.cell_px, height * self.cell_px))

        # While playing only the walls next to the player are shown
        blind = self.session.phase == GamePhase.PLAYING
        for z in range(height):
            for x in range(width):
                if blind and distance(px, pz, x, z) > VISION_RADIUS:
                    continue
                state = snap.grid[z, x]
                if state == WALL:
                    pygame.draw.rect(self.screen, COLOR_WALL, self._cell_rect(x, z))
                elif state == START:
                    pygame.draw.rect(self.screen, COLOR_START, self._cell_rect(x, z, pad=4))

        pygame.draw.rect(self.screen, COLOR_GOAL, self._cell_rect(*snap.goal_pos, pad=4), border_radius=6)

        for x, z in snap.revealed_path:
            pygame.draw.circle(self.screen, COLOR_REVEAL_PATH, self._to_screen(x, z), max(2, self.cell_px // 8))

        for powerup in snap.powerups:
            if powerup.collected:
                continue
            color = COLOR_POWERUP_LIFE if powerup.type is PowerUpType.EXTRA_LIFE else COLOR_POWERUP_REVEAL
            pygame.draw.circle(self.screen, color, self._to_screen(powerup.x, powerup.z), self.cell_px // 4)

        for obstacle, (_, pos) in zip(snap.obstacles, snap.obstacle_positions):
            pygame.draw.circle(self.screen, obstacle.get_color(), self._to_screen(*pos), int(self.cell_px * 0.35))

        center = self._to_screen(px, pz)
        radius = max(3, int(self.cell_px * PLAYER_RADIUS))
        pygame.draw.circle(self.screen, COLOR_PLAYER, center, radius)
        tip = (center[0] - math.sin(snap.player_heading) * radius * 2,
               center[1] - math.cos(snap.player_heading) * radius * 2)
        pygame.draw.line(self.screen, COLOR_PLAYER, center, tip, 2)

    def _render_panel(self):
        hud = self.session.hud()
        panel_y = self.screen.get_height() - PANEL_H
        pygame.draw.rect(self.screen, COLOR_PANEL_BG, (0, panel_y, self.screen.get_width(), PANEL_H))

        if hud.ability_ready:
            ability = "READY"
        elif hud.ability_cooldown:
            ability = f"{hud.ability_cooldown}s"
        else:
            ability = "--"

        status = f"Phase: {hud.phase.name}"
        if hud.countdown:
            status += f"  {hud.countdown}s"
        status += f"  Time: {format_time(self.session.elapsed)}"

        info_lines = [
            (f"{get_level_name(hud.level_index)}  Lives: {hud.lives}  Ability: {ability}", COLOR_TEXT),
            (status, COLOR_TEXT),
            ("WASD move | Q/E turn | SPACE clear | M map | P pause | R restart", COLOR_TEXT_DIM),
        ]
        for i, (line, color) in enumerate(info_lines):
            text = self.font.render(line, True, color)
            self.screen.blit(text, (10, panel_y + 8 + i * 22))

    def _render_overlay(self):
        phase = self.session.phase
        messages = {
            GamePhase.LEVEL_COMPLETE: "SECTOR CLEARED - ENTER",
            GamePhase.GAME_OVER: "GAME OVER - ENTER",
        }
        if self.session.paused:
            text = "SYSTEM PAUSED"
        else:
            text = messages.get(phase)
            if phase == GamePhase.MEMORIZE:
                self._render_briefing()
        if not text:
            return

        overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        overlay.fill(COLOR_MENU_OVERLAY)
        self.screen.blit(overlay, (0, 0))
        label = self.big_font.render(text, True, COLOR_TEXT_HIGHLIGHT)
        self.screen.blit(label, (self.screen.get_width() // 2 - label.get_width() // 2,
                                 self.screen.get_height() // 2 - label.get_height() // 2))

    def _render_briefing(self):
        lines = get_level_description(self.session.level_index).splitlines()
        for i, line in enumerate(lines):
            text = self.font.render(line, True, COLOR_TEXT_HIGHLIGHT if i == 0 else COLOR_TEXT_DIM)
            self.screen.blit(text, (8, 8 + i * 20))

    def _render_menu(self):
        title = self.big_font.render(GAME_TITLE.upper(), True, COLOR_TEXT_HIGHLIGHT)
        hint = self.font.render("ENTER to start, ESC to quit", True, COLOR_TEXT)
        w, h = self.screen.get_size()
        self.screen.blit(title, (w // 2 - title.get_width() // 2, h // 2 - 40))
        self.screen.blit(hint, (w // 2 - hint.get_width() // 2, h // 2 + 10))

    # ---------- Main loop ----------

    def run(self):
        try:
            while self.running:
                dt = self.clock.tick(FPS) / 1000.0
                self.handle_events()
                self.update(dt)
                self.render()
        finally:
            self.driver.stop()
            pygame.quit()
            logger.info("Game closed.")


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    MazeGame().run()


if __name__ == "__main__":
    main()
