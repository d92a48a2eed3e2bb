"""Sound manager for the game."""

from typing import Dict, Optional

import numpy as np
import pygame

from neonraid.config.config import DEFAULT_SOUND_VOLUME, SAMPLE_RATE
from neonraid.logger import get_logger
from neonraid.utils.sound_generator import SoundGenerator

# Get a logger for this module
logger = get_logger(__name__)


class SoundManager:
    """Plays the synthesized cues through the pygame mixer.

    The game only ever fires cues and never waits on them. If the mixer
    cannot be opened every cue becomes a no-op.
    """

    def __init__(self, muted: bool = False, volume: float = DEFAULT_SOUND_VOLUME) -> None:
        """Initialize the sound manager.

        Args:
            muted: Start with all sound silenced
            volume: Master volume (0.0 to 1.0)
        """
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        self.muted = muted
        self.volume = max(0.0, min(1.0, volume))

        # Whether the background loop should be audible right now
        self.background_active = False

        self.enabled = self._init_mixer()
        if self.enabled:
            self._load_sounds()

    def _init_mixer(self) -> bool:
        """Ensure pygame mixer is initialized."""
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16)
        except pygame.error as e:
            logger.warning(f"Audio unavailable, continuing without sound: {e}")
            return False
        return True

    def _load_sounds(self) -> None:
        """Synthesize every cue at the mixer's sample rate."""
        frequency, _, _ = pygame.mixer.get_init()
        generator = SoundGenerator(frequency)

        cues = {
            "shoot": generator.generate_shoot(),
            "game_over": generator.generate_game_over(),
            "background": generator.generate_background(),
        }
        for name, samples in cues.items():
            sound = self._make_sound(samples)
            if sound is not None:
                sound.set_volume(self.volume)
                self.sounds[name] = sound
                logger.debug(f"Synthesized sound: {name} ({len(samples)} samples)")

    def _make_sound(self, samples: np.ndarray) -> Optional[pygame.mixer.Sound]:
        """Convert float samples to the mixer's format and wrap them in a Sound.

        Args:
            samples: Mono samples in [-1.0, 1.0]

        Returns:
            The Sound, or None if the mixer format is not supported
        """
        _, size, channels = pygame.mixer.get_init()

        if abs(size) == 16:
            data = (samples * 32767).astype(np.int16)
        elif abs(size) == 32:
            data = samples.astype(np.float32)
        else:
            logger.warning(f"Unsupported mixer sample size {size}; sound disabled")
            return None

        if channels > 1:
            data = np.repeat(data[:, np.newaxis], channels, axis=1)

        try:
            return pygame.sndarray.make_sound(np.ascontiguousarray(data))
        except (pygame.error, ValueError) as e:
            logger.error(f"Failed to create sound: {e}")
            return None

    def play(self, name: str, loops: int = 0) -> Optional[pygame.mixer.Channel]:
        """Play a sound effect.

        Args:
            name: Name of the sound to play
            loops: Extra repeats (-1 = forever)

        Returns:
            The channel playing the sound, or None if nothing was played
        """
        if not self.enabled or self.muted:
            return None

        sound = self.sounds.get(name)
        if sound is None:
            logger.warning(f"Sound {name} not found")
            return None

        try:
            return sound.play(loops=loops)
        except pygame.error as e:
            logger.error(f"Failed to play sound {name}: {e}")
            return None

    def play_shoot(self) -> None:
        self.play("shoot")

    def play_game_over(self) -> None:
        self.play("game_over")

    def start_background(self) -> None:
        """Start the looping background tone, replacing any loop already running."""
        self.stop_background()
        self.background_active = True
        self.play("background", loops=-1)

    def stop_background(self) -> None:
        """Stop the looping background tone."""
        self.background_active = False
        sound = self.sounds.get("background")
        if sound is not None:
            sound.stop()

    def set_volume(self, volume: float) -> None:
        """Set the volume for all sounds.

        Args:
            volume: Volume level (0.0 to 1.0)
        """
        # Clamp volume to valid range
        self.volume = max(0.0, min(1.0, volume))

        for sound in self.sounds.values():
            sound.set_volume(self.volume)

    def toggle_mute(self) -> bool:
        """Silence or restore all sound.

        Returns:
            True if sound is now muted
        """
        self.muted = not self.muted
        background = self.sounds.get("background")

        if self.muted:
            if background is not None:
                background.stop()
            logger.info("Sound muted")
        else:
            if self.background_active:
                self.play("background", loops=-1)
            logger.info("Sound unmuted")

        return self.muted
