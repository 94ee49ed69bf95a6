# -*- coding: utf-8 -*-
"""
src/dragstyle/core/tones.py

Synthesis of the short feedback tones announced on every step change.

Tone ids run from 200 to 900 in steps of 100. Tone 500 is concert A
(440 Hz) and every 100 steps moves a whole tone up or down, so heavier
weights and larger sizes sound higher.
"""

import logging
from typing import Dict, Tuple

import numpy as np

logger = logging.getLogger(__name__)

REFERENCE_TONE_ID = 500
REFERENCE_FREQUENCY = 440.0
DEFAULT_SAMPLE_RATE = 44100
DEFAULT_DURATION_MS = 60
DEFAULT_VOLUME = 0.4
FADE_MS = 8


def tone_frequency(tone_id: int) -> float:
    """Returns the pitch in Hz for a tone id."""
    semitones = 2 * (tone_id - REFERENCE_TONE_ID) / 100
    return REFERENCE_FREQUENCY * 2 ** (semitones / 12)


def synthesize_tone(tone_id: int,
                    sample_rate: int = DEFAULT_SAMPLE_RATE,
                    duration_ms: int = DEFAULT_DURATION_MS,
                    volume: float = DEFAULT_VOLUME) -> np.ndarray:
    """
    Renders a tone as mono signed 16-bit PCM.

    A short linear fade is applied at both ends so the tone starts and stops
    without clicks.

    Args:
        tone_id (int): The tone to render.
        sample_rate (int): Samples per second.
        duration_ms (int): Length of the tone.
        volume (float): Peak amplitude, 0.0 to 1.0. Values outside are clipped.

    Returns:
        np.ndarray: An int16 array of `sample_rate * duration_ms / 1000` samples.
    """
    n_samples = max(1, int(sample_rate * duration_ms / 1000))
    t = np.arange(n_samples) / sample_rate
    wave = np.sin(2 * np.pi * tone_frequency(tone_id) * t)

    fade = min(n_samples // 2, int(sample_rate * FADE_MS / 1000))
    if fade > 0:
        ramp = np.linspace(0.0, 1.0, fade)
        wave[:fade] *= ramp
        wave[-fade:] *= ramp[::-1]

    amplitude = float(np.clip(volume, 0.0, 1.0)) * np.iinfo(np.int16).max
    return (wave * amplitude).astype(np.int16)


class ToneBank:
    """
    Caches synthesized tone buffers keyed by tone id.
    """

    def __init__(self, sample_rate: int = DEFAULT_SAMPLE_RATE,
                 duration_ms: int = DEFAULT_DURATION_MS,
                 volume: float = DEFAULT_VOLUME):
        self.sample_rate = sample_rate
        self.duration_ms = duration_ms
        self.volume = volume
        self._cache: Dict[int, np.ndarray] = {}

    def samples(self, tone_id: int) -> np.ndarray:
        if tone_id not in self._cache:
            self._cache[tone_id] = synthesize_tone(tone_id, self.sample_rate, self.duration_ms, self.volume)
            logger.debug(f"Synthesized tone {tone_id} ({tone_frequency(tone_id):.1f} Hz).")
        return self._cache[tone_id]

    def pcm_bytes(self, tone_id: int) -> bytes:
        """The tone as little-endian 16-bit PCM, ready for an audio sink."""
        return self.samples(tone_id).astype("<i2").tobytes()

    def cached_ids(self) -> Tuple[int, ...]:
        return tuple(sorted(self._cache))


if __name__ == '__main__':
    bank = ToneBank()
    print("--- Feedback tones ---")
    for tone_id in range(200, 1000, 100):
        samples = bank.samples(tone_id)
        print(f"{tone_id}: {tone_frequency(tone_id):7.1f} Hz, {len(samples)} samples, peak {np.abs(samples).max()}")
