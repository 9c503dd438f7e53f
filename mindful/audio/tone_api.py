from __future__ import annotations
from abc import ABC, abstractmethod


class AudioUnavailable(RuntimeError):
    """Host cannot play sound (no PortAudio, no output device, stream error)."""


class ToneHandle(ABC):
    """A continuous tone that is already playing."""

    @abstractmethod
    def close(self) -> None:
        """Stop playback and release the stream. Safe to call twice."""
        raise NotImplementedError


class AudioBackend(ABC):
    """Where tones actually come out. Swapped for a fake in tests."""

    @abstractmethod
    def open_tone(self, frequency: float, gain: float) -> ToneHandle:
        """Start a continuous sine at `frequency` Hz and return its handle."""
        raise NotImplementedError

    @abstractmethod
    def play_chime(self, frequency: float, start_gain: float, end_gain: float, seconds: float) -> None:
        """Fire-and-forget decaying sine. Stops and releases itself."""
        raise NotImplementedError

    def close(self) -> None:
        pass


class _SilentTone(ToneHandle):
    def close(self) -> None:
        pass


class SilentBackend(AudioBackend):
    """No audio device: every sound is a no-op, the timer still runs."""

    def open_tone(self, frequency: float, gain: float) -> ToneHandle:
        return _SilentTone()

    def play_chime(self, frequency: float, start_gain: float, end_gain: float, seconds: float) -> None:
        return None
