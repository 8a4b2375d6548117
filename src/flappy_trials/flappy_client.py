"""
flappy_client.py

Local pygame front end: owns the frame clock and countdown timer, turns key
and mouse events into controller inputs, prompts for a leaderboard name and
draws controller snapshots.
"""

import pygame
from typing import Optional

from .constants import (
    ACTOR_FRAME_FPS, ACTOR_FRAMES, COUNTDOWN_INTERVAL_MS, FIELD_HEIGHT, FIELD_WIDTH,
    RENDER_FPS
)
from .data_models import GameSnapshot, RoundState
from .round_controller import RoundController

MAX_NAME_LENGTH = 16


class FlappyClient:
    def __init__(self, controller: RoundController):
        pygame.init()
        self.controller = controller
        self.screen = pygame.display.set_mode((FIELD_WIDTH, FIELD_HEIGHT))
        pygame.display.set_caption(f"Flappy Trials ({controller.difficulty.name})")

        # Time Management
        self.clock = pygame.time.Clock()
        self.countdown_timer_ms = 0

        # Name prompt state
        self.name_buffer = ""

        # Actor animation
        self.actor_frame = 0
        self.actor_frame_tick = 0

        self.large_font = pygame.font.Font(None, 40)
        self.font = pygame.font.Font(None, 24)

    def run(self):
        """The main client execution loop."""
        print(f"Flappy Trials started. Difficulty: {self.controller.difficulty.name}.")
        running = True
        while running:
            elapsed_ms = self.clock.tick(RENDER_FPS)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif self._awaiting_name():
                    self._handle_name_event(event)
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    self._handle_game_event(event)

            # --- Countdown (coarse timer) ---
            if self.controller.state is RoundState.COUNTDOWN:
                self.countdown_timer_ms += elapsed_ms
                while (self.controller.state is RoundState.COUNTDOWN
                       and self.countdown_timer_ms >= COUNTDOWN_INTERVAL_MS):
                    self.countdown_timer_ms -= COUNTDOWN_INTERVAL_MS
                    self.controller.countdown_tick()
                if self.controller.state is RoundState.ACTIVE:
                    print(f"Round started. Attempts left: {self.controller.attempts_left}")
            else:
                self.countdown_timer_ms = 0

            # --- Frame tick ---
            if self.controller.state is RoundState.ACTIVE:
                self._animate_actor()
                self.controller.tick()
                if self.controller.state is not RoundState.ACTIVE:
                    self._on_round_end()

            self._draw_game(self.controller.snapshot())

        print("Exiting.")
        pygame.quit()

    # -------- Input --------

    def _handle_game_event(self, event):
        if (event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE) or event.type == pygame.MOUSEBUTTONDOWN:
            self.controller.jump()
        elif event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_s):
            self.controller.start()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_n:
            if self.controller.reset_player():
                print("Next player.")

    def _awaiting_name(self) -> bool:
        return self.controller.session.pending_total is not None

    def _handle_name_event(self, event):
        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_RETURN:
            self._submit_name(self.name_buffer)
        elif event.key == pygame.K_ESCAPE:
            self._submit_name(None)
        elif event.key == pygame.K_BACKSPACE:
            self.name_buffer = self.name_buffer[:-1]
        elif event.unicode and event.unicode.isprintable() and len(self.name_buffer) < MAX_NAME_LENGTH:
            self.name_buffer += event.unicode

    def _submit_name(self, name: Optional[str]):
        entry = self.controller.submit_name(name)
        self.name_buffer = ""
        if entry is not None:
            print(f"Leaderboard entry added: {entry.score} - {entry.name}")

    def _on_round_end(self):
        print(f"Round over. Score: {self.controller.last_round_score}")
        if self.controller.session.is_session_over():
            print(f"Session over. Total: {self.controller.session.total_score()}")
            if self._awaiting_name():
                print("Top 3! Enter your name.")

    def _animate_actor(self):
        self.actor_frame_tick += 1
        if self.actor_frame_tick >= RENDER_FPS / ACTOR_FRAME_FPS:
            self.actor_frame = (self.actor_frame + 1) % ACTOR_FRAMES
            self.actor_frame_tick = 0

    # -------- Rendering --------

    def _draw_game(self, snap: GameSnapshot):
        """Renders one snapshot using Pygame."""
        screen = self.screen
        screen.fill((0, 191, 255))
        white = (255, 255, 255)
        black = (0, 0, 0)

        # Obstacles
        column_color = (0, 150, 0)
        for o in snap.obstacles:
            pygame.draw.rect(screen, column_color, (o.x, 0, o.width, o.gap_top))
            pygame.draw.rect(screen, column_color, (o.x, o.gap_bottom, o.width, FIELD_HEIGHT - o.gap_bottom))

        # Actor, with a wing accent that cycles through the animation frames
        a = snap.actor
        pygame.draw.rect(screen, (255, 220, 0), (a.x, a.y, a.w, a.h))
        wing_y = a.y + a.h * (0.2 + 0.15 * self.actor_frame)
        pygame.draw.rect(screen, (255, 140, 0), (a.x + 4, wing_y, a.w / 2, 4))

        # HUD
        score_text = self.large_font.render(str(snap.score), True, black)
        screen.blit(score_text, (FIELD_WIDTH // 2 - score_text.get_width() // 2, 30))

        attempts = self.font.render(f"Attempts left: {snap.attempts_left}", True, white)
        screen.blit(attempts, (10, 10))

        for i, row in enumerate(self.controller.leaderboard.format_rows()):
            txt = self.font.render(row, True, white)
            screen.blit(txt, (FIELD_WIDTH - 150, 10 + i * 22))

        if snap.state is RoundState.COUNTDOWN:
            self._center(str(snap.countdown), FIELD_HEIGHT // 2 - 20, white, self.large_font)
        elif snap.state is RoundState.IDLE:
            if snap.last_round_score is not None:
                self._center(f"Last round: {snap.last_round_score}", FIELD_HEIGHT // 2 - 40, white)
            self._center("Enter / S = Start", FIELD_HEIGHT // 2, white)
        elif snap.state is RoundState.ENDED:
            total = sum(snap.session_scores)
            self._center(f"Session total: {total}", FIELD_HEIGHT // 2 - 40, white, self.large_font)
            if snap.pending_total is not None:
                self._center("Top 3! Enter your name:", FIELD_HEIGHT // 2, white)
                self._center(self.name_buffer + "_", FIELD_HEIGHT // 2 + 30, white, self.large_font)
            else:
                self._center("N = Next player", FIELD_HEIGHT // 2, white)

        instr = self.font.render("Space / Click = Jump | Esc = Quit", True, (200, 200, 200))
        screen.blit(instr, (10, FIELD_HEIGHT - 30))

        pygame.display.flip()

    def _center(self, text: str, y: int, color, font=None):
        surf = (font or self.font).render(text, True, color)
        self.screen.blit(surf, (FIELD_WIDTH // 2 - surf.get_width() // 2, y))
