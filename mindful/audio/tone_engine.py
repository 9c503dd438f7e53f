# mindful/audio/tone_engine.py
import logging
from typing import Optional

from mindful.audio.tone_api import AudioBackend, AudioUnavailable, ToneHandle

logger = logging.getLogger(__name__)

AMBIENT_HZ = 200.0
AMBIENT_GAIN = 0.03

CHIME_HZ = 528.0
CHIME_START_GAIN = 0.1
CHIME_END_GAIN = 0.01
CHIME_SECONDS = 1.0


class ToneEngine:
    """
    Two independent sounds:
    - ambient drone while a session runs (at most one handle alive)
    - one-shot completion chime (fire-and-forget, never cancelled)

    Audio errors are logged and dropped; they never reach the countdown.
    """

    def __init__(self, backend: AudioBackend, enabled: bool = True):
        self.backend = backend
        self.enabled = bool(enabled)
        self._ambient: Optional[ToneHandle] = None

    @property
    def ambient_playing(self) -> bool:
        return self._ambient is not None

    def start_ambient(self) -> None:
        if not self.enabled or self._ambient is not None:
            return
        try:
            self._ambient = self.backend.open_tone(AMBIENT_HZ, AMBIENT_GAIN)
        except AudioUnavailable as e:
            logger.warning("Ambient tone unavailable: %s", e)
            self._ambient = None

    def stop_ambient(self) -> None:
        handle, self._ambient = self._ambient, None
        if handle is None:
            return
        try:
            handle.close()
        except AudioUnavailable as e:
            logger.warning("Ambient tone did not close cleanly: %s", e)

    def play_completion_chime(self) -> None:
        if not self.enabled:
            return
        try:
            self.backend.play_chime(CHIME_HZ, CHIME_START_GAIN, CHIME_END_GAIN, CHIME_SECONDS)
        except AudioUnavailable as e:
            logger.warning("Completion chime unavailable: %s", e)

    def toggle_enabled(self, session_active: bool = False) -> bool:
        self.enabled = not self.enabled
        if not self.enabled:
            self.stop_ambient()
        elif session_active:
            self.start_ambient()
        return self.enabled

    def close(self) -> None:
        self.stop_ambient()
        try:
            self.backend.close()
        except AudioUnavailable as e:
            logger.warning("Audio backend did not close cleanly: %s", e)
