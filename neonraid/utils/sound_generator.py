"""Procedural sound effects generator for the game."""

import numpy as np

from neonraid.config.config import (
    BACKGROUND_FREQ,
    BACKGROUND_GAIN,
    BACKGROUND_LOOP_S,
    GAME_OVER_DURATION_S,
    GAME_OVER_FREQ_END,
    GAME_OVER_FREQ_START,
    GAME_OVER_GAIN,
    RAMP_FLOOR_GAIN,
    SAMPLE_RATE,
    SHOOT_DURATION_S,
    SHOOT_FREQ_END,
    SHOOT_FREQ_START,
    SHOOT_GAIN,
)


class SoundGenerator:
    """
    Synthesizes the game's sound cues as float sample arrays.

    Every generator returns a mono numpy array with values in [-1.0, 1.0];
    converting to the mixer's sample format is left to the caller.
    """

    def __init__(self, sample_rate: int = SAMPLE_RATE):
        """
        Initialize the sound generator.

        Args:
            sample_rate: Sample rate for generated sounds (default: 44100 Hz)
        """
        self.sample_rate = sample_rate

    def _num_samples(self, duration: float) -> int:
        return max(1, int(round(self.sample_rate * duration)))

    def _exponential_ramp(self, start: float, end: float, num_samples: int) -> np.ndarray:
        """
        Build a curve moving geometrically from start towards end.

        Args:
            start: Value at the first sample (must be > 0)
            end: Value reached at the end of the ramp (must be > 0)
            num_samples: Length of the curve

        Returns:
            Array of num_samples values
        """
        progress = np.arange(num_samples) / num_samples
        return start * (end / start) ** progress

    def _phase(self, frequencies: np.ndarray) -> np.ndarray:
        """Integrate a per-sample frequency curve into an oscillator phase (radians)."""
        steps = 2 * np.pi * frequencies / self.sample_rate
        return np.concatenate(([0.0], np.cumsum(steps[:-1])))

    def _square(self, phase: np.ndarray) -> np.ndarray:
        return np.where(np.sin(phase) >= 0, 1.0, -1.0)

    def _sawtooth(self, phase: np.ndarray) -> np.ndarray:
        return 2.0 * ((phase / (2 * np.pi)) % 1.0) - 1.0

    def generate_sweep(
        self,
        waveform: str,
        duration: float,
        freq_start: float,
        freq_end: float,
        gain: float,
    ) -> np.ndarray:
        """
        Generate a tone whose pitch and volume both fall exponentially.

        Args:
            waveform: "square", "sawtooth" or "sine"
            duration: Sound length in seconds
            freq_start: Starting frequency in Hz
            freq_end: Ending frequency in Hz
            gain: Starting gain; fades to RAMP_FLOOR_GAIN

        Returns:
            Float samples in [-1.0, 1.0]

        Raises:
            ValueError: If the waveform name is unknown
        """
        num_samples = self._num_samples(duration)
        phase = self._phase(self._exponential_ramp(freq_start, freq_end, num_samples))

        if waveform == "square":
            wave = self._square(phase)
        elif waveform == "sawtooth":
            wave = self._sawtooth(phase)
        elif waveform == "sine":
            wave = np.sin(phase)
        else:
            raise ValueError(f"Unknown waveform: {waveform}")

        envelope = self._exponential_ramp(gain, RAMP_FLOOR_GAIN, num_samples)
        return np.clip(wave * envelope, -1.0, 1.0)

    def generate_shoot(self) -> np.ndarray:
        """Short descending square-wave blip."""
        return self.generate_sweep(
            "square", SHOOT_DURATION_S, SHOOT_FREQ_START, SHOOT_FREQ_END, SHOOT_GAIN
        )

    def generate_game_over(self) -> np.ndarray:
        """Long descending sawtooth groan."""
        return self.generate_sweep(
            "sawtooth",
            GAME_OVER_DURATION_S,
            GAME_OVER_FREQ_START,
            GAME_OVER_FREQ_END,
            GAME_OVER_GAIN,
        )

    def generate_background(self) -> np.ndarray:
        """
        Generate one loop of the background hum.

        The loop length is rounded to a whole number of cycles so that playing
        it back-to-back has no click at the seam.
        """
        cycles = max(1, round(BACKGROUND_FREQ * BACKGROUND_LOOP_S))
        num_samples = self._num_samples(cycles / BACKGROUND_FREQ)
        t = np.arange(num_samples) / num_samples
        return BACKGROUND_GAIN * np.sin(2 * np.pi * cycles * t)
