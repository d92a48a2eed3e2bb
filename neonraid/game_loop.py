"""Main game loop and game state management."""

from typing import Optional

import pygame

from neonraid.config.config import (
    BACKGROUND_COLOR,
    END_SCREEN_DELAY_MS,
    FPS,
    FRAME_DURATION_MS,
    LEVEL_TRANSITION_MS,
    SCORE_PER_HIT,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WINDOW_TITLE,
)
from neonraid.collision import find_player_collision, find_projectile_hits
from neonraid.enemy import Enemy
from neonraid.game_state import GameState
from neonraid.input_state import InputState
from neonraid.levels import LevelOutcome
from neonraid.logger import get_logger
from neonraid.particle import ParticleSystem
from neonraid.player import Player
from neonraid.projectile import Projectile
from neonraid.screens import ScreenManager, ScreenName
from neonraid.session import Session
from neonraid.sound_manager import SoundManager

# Get logger for this module
logger = get_logger(__name__)

# Longest frame fed to the virtual clock, so a stalled window doesn't skip transitions
MAX_FRAME_MS: int = 100


class Game:
    """Main game class managing the game loop, state, and events."""

    def __init__(
        self,
        screen: Optional[pygame.Surface] = None,
        sound_manager=None,
        screen_manager: Optional[ScreenManager] = None,
        input_state: Optional[InputState] = None,
        fps: int = FPS,
        muted: bool = False,
    ) -> None:
        """Initializes the game.

        Args:
            screen: Surface to render into; opens a window when omitted
            sound_manager: Audio collaborator; a SoundManager when omitted
            screen_manager: UI collaborator; a ScreenManager when omitted
            input_state: Keyboard state; a fresh InputState when omitted
            fps: Target frame rate for run()
            muted: Start with sound muted (only used for the default SoundManager)
        """
        pygame.init()
        logger.info("Initializing game")

        if screen is None:
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)
        self.screen = screen

        self.clock = pygame.time.Clock()
        self.fps = fps
        self.is_running = True

        self.sound_manager = sound_manager if sound_manager is not None else SoundManager(muted)
        self.screens = screen_manager if screen_manager is not None else ScreenManager()
        self.input_state = input_state if input_state is not None else InputState()

        self.session = Session()
        self.screens.switch(ScreenName.START)

    @property
    def state(self) -> GameState:
        return self.session.state

    # ------------------------------------------------------------------
    # Session control
    # ------------------------------------------------------------------

    def start_session(self) -> None:
        """Start a brand-new play-through.

        Allowed from every state; whatever was happening is discarded.
        """
        session = self.session
        session.reset()
        session.player = Player(session.projectiles, self.sound_manager)

        self._update_scoreboard()
        self.screens.switch(ScreenName.HUD)
        session.state = GameState.PLAYING

        self.sound_manager.start_background()
        logger.info("New session started")

    def end_game(self, outcome: GameState) -> None:
        """Finish the session with GAMEOVER or VICTORY.

        Args:
            outcome: The terminal state to enter
        """
        if not outcome.is_terminal:
            raise ValueError(f"{outcome} is not a terminal state")

        session = self.session
        session.state = outcome
        session.clear_combat()

        self.sound_manager.stop_background()
        if outcome == GameState.GAMEOVER:
            self.sound_manager.play_game_over()
            logger.warning("Game over - Player destroyed! Score: %d", session.score)
        else:
            logger.info("Victory! Score: %d", session.score)

        session.scheduler.schedule(END_SCREEN_DELAY_MS, lambda: self._show_final_score(outcome))

    def _show_final_score(self, outcome: GameState) -> None:
        # A restart during the delay makes this stale
        if self.session.state != outcome:
            return
        if outcome == GameState.GAMEOVER:
            self.screens.set_final_score(self.session.score)
            self.screens.switch(ScreenName.GAME_OVER)
        else:
            self.screens.set_victory_score(self.session.score)
            self.screens.switch(ScreenName.VICTORY)

    def _start_level_transition(self) -> None:
        """Move to the next level and pause the action for the transition window."""
        session = self.session
        session.state = GameState.TRANSITION
        level = session.levels.advance()
        self.screens.set_level_title(level)
        self.screens.switch(ScreenName.TRANSITION)
        session.clear_combat()

        session.scheduler.schedule(LEVEL_TRANSITION_MS, lambda: self._finish_level_transition(level))

    def _finish_level_transition(self, level: int) -> None:
        session = self.session
        if session.state != GameState.TRANSITION or session.level != level:
            return
        self.screens.switch(ScreenName.HUD)
        self._update_scoreboard()
        session.state = GameState.PLAYING
        logger.info("Level %d started", level)

    def _update_scoreboard(self) -> None:
        self.screens.update_scoreboard(self.session.score, self.session.level)

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Starts and manages the main game loop."""
        dt_ms = FRAME_DURATION_MS
        while self.is_running:
            self._handle_events()
            self.step(dt_ms)
            self.render()
            pygame.display.flip()
            dt_ms = min(self.clock.tick(self.fps), MAX_FRAME_MS)

        self.sound_manager.stop_background()
        pygame.quit()

    def step(self, dt_ms: float = FRAME_DURATION_MS) -> None:
        """Advance the game by one frame.

        Args:
            dt_ms: Milliseconds since the previous frame
        """
        session = self.session

        # Delayed transitions fire before anything moves
        session.scheduler.advance(dt_ms)

        session.starfield.update()

        if session.state == GameState.PLAYING:
            self._update_playing()

        # Explosions keep animating in every state
        session.particles.update()

        session.compact()

        if session.state != GameState.START:
            session.tick += 1

    def _update_playing(self) -> None:
        session = self.session
        session.player.update(self.input_state, session.now_ms)
        session.projectiles.update()
        session.enemies.update()
        self._spawn_enemies()
        self._handle_collisions()

    def _spawn_enemies(self) -> None:
        """Spawn one enemy whenever the tick counter hits the level's spawn interval."""
        config = self.session.levels.config
        if self.session.tick % config.spawn_interval == 0:
            self.session.enemies.add(Enemy.from_level(config))
            logger.debug("Spawned enemy at tick %d", self.session.tick)

    def _handle_collisions(self) -> None:
        """Checks and handles collisions between game objects."""
        session = self.session

        # Projectiles vs enemies
        for projectile, enemy in find_projectile_hits(session.projectiles, session.enemies):
            self._process_enemy_destruction(projectile, enemy)
            # A level change or victory clears the field mid-scan
            if session.state != GameState.PLAYING:
                return

        # Player vs enemies
        enemy = find_player_collision(session.player, session.enemies)
        if enemy is not None:
            self._handle_game_over()

    def _process_enemy_destruction(self, projectile: Projectile, enemy: Enemy) -> None:
        """Score a projectile hit and blow up the enemy."""
        session = self.session
        projectile.marked_for_deletion = True
        enemy.marked_for_deletion = True

        session.particles.extend(ParticleSystem.create_explosion(enemy.center, enemy.color))

        session.score += SCORE_PER_HIT
        self._update_scoreboard()
        logger.debug("Enemy destroyed at (%.0f, %.0f), score %d", *enemy.center, session.score)

        self._check_level_progression()

    def _check_level_progression(self) -> None:
        session = self.session
        if session.state != GameState.PLAYING:
            return

        outcome = session.levels.evaluate(session.score)
        if outcome == LevelOutcome.ADVANCE:
            self._start_level_transition()
        elif outcome == LevelOutcome.VICTORY:
            self.end_game(GameState.VICTORY)

    def _handle_game_over(self) -> None:
        """Handles the player being hit by an enemy."""
        player = self.session.player
        self.session.particles.extend(ParticleSystem.create_explosion(player.center, player.color))
        self.end_game(GameState.GAMEOVER)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def _handle_events(self) -> None:
        """Process all pending pygame events."""
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Process a single event."""
        if event.type == pygame.QUIT:
            self.is_running = False
            return

        # Movement and fire keys only feed the held-key state
        if self.input_state.handle_event(event):
            return

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.is_running = False
            elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                # Same as clicking the active screen's button
                if self.screens.button_label is not None:
                    self.start_session()
            elif event.key == pygame.K_m:
                self.sound_manager.toggle_mute()
            elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                self.sound_manager.set_volume(self.sound_manager.volume - 0.1)
                logger.info(f"Volume: {self.sound_manager.volume:.1f}")
            elif event.key in (pygame.K_PLUS, pygame.K_KP_PLUS, pygame.K_EQUALS):
                self.sound_manager.set_volume(self.sound_manager.volume + 0.1)
                logger.info(f"Volume: {self.sound_manager.volume:.1f}")

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.screens.button_hit(event.pos):
                self.start_session()

        elif event.type == pygame.WINDOWFOCUSLOST:
            # Key releases are not delivered while unfocused
            self.input_state.release_all()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, surface: Optional[pygame.Surface] = None) -> None:
        """Draws the game state to the screen."""
        surface = surface if surface is not None else self.screen
        session = self.session

        surface.fill(BACKGROUND_COLOR)
        session.starfield.draw(surface)

        # Ships stay on screen as a freeze-frame once the game has ended
        if session.state in (GameState.PLAYING, GameState.GAMEOVER, GameState.VICTORY):
            if session.player is not None:
                session.player.draw(surface)
            session.projectiles.draw(surface)
            session.enemies.draw(surface)

        session.particles.draw(surface)

        self.screens.draw(surface)
