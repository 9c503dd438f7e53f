# mindful/audio/synth.py
import math

import numpy as np

SAMPLE_RATE = 44100
TWO_PI = 2.0 * math.pi


class SineOscillator:
    """Block-wise sine. Phase carries over between blocks so there are no clicks."""

    def __init__(self, frequency: float, gain: float, samplerate: int = SAMPLE_RATE):
        self.frequency = float(frequency)
        self.gain = float(gain)
        self.samplerate = int(samplerate)
        self._phase = 0.0
        self._step = TWO_PI * self.frequency / self.samplerate

    def render(self, frames: int) -> np.ndarray:
        if frames <= 0:
            return np.zeros(0, dtype=np.float32)
        angles = self._phase + self._step * np.arange(frames, dtype=np.float64)
        self._phase = (self._phase + self._step * frames) % TWO_PI
        return (self.gain * np.sin(angles)).astype(np.float32)


def exponential_envelope(start: float, end: float, frames: int) -> np.ndarray:
    # same curve as Web Audio's exponentialRampToValueAtTime; both ends must be > 0
    if frames <= 0:
        return np.zeros(0, dtype=np.float32)
    if start <= 0 or end <= 0:
        raise ValueError("exponential ramp needs positive start and end")
    t = np.linspace(0.0, 1.0, frames, dtype=np.float64)
    return (start * (end / start) ** t).astype(np.float32)


def chime_samples(
    frequency: float,
    start_gain: float,
    end_gain: float,
    seconds: float,
    samplerate: int = SAMPLE_RATE,
) -> np.ndarray:
    frames = int(round(seconds * samplerate))
    osc = SineOscillator(frequency, 1.0, samplerate)
    return osc.render(frames) * exponential_envelope(start_gain, end_gain, frames)
