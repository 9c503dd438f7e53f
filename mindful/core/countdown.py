# mindful/core/countdown.py
import logging

from PySide6.QtCore import QObject, QTimer, Signal

from mindful.audio.tone_engine import ToneEngine

logger = logging.getLogger(__name__)

DURATION_CHOICES = (2, 3, 5, 10, 15, 20, 60)
DEFAULT_MINUTES = 5
TICK_INTERVAL_MS = 1000


class CountdownController(QObject):
    """
    Meditation countdown.

    States: idle / running.
    - start(): idle -> running (needs remaining > 0), starts ambient tone
    - pause(): running -> idle, keeps remaining
    - reset(): -> idle, remaining back to full duration
    - tick() reaching zero while running: -> idle, +1 session, chime

    The QTimer is the only scheduled work. It is stopped on every edge out of
    running so no tick can land after pause/reset/completion.
    """
    changed = Signal()
    completed = Signal(int)  # sessions completed so far

    def __init__(self, tones: ToneEngine, minutes: int = DEFAULT_MINUTES, parent=None):
        super().__init__(parent)
        if minutes not in DURATION_CHOICES:
            raise ValueError(f"unsupported duration: {minutes!r}")

        self.tones = tones
        self._minutes = int(minutes)
        self._remaining = self._minutes * 60
        self._active = False
        self._sessions = 0

        self.timer = QTimer(self)
        self.timer.setInterval(TICK_INTERVAL_MS)
        self.timer.timeout.connect(self.tick)

    # -----------------------
    # State
    # -----------------------

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def total_seconds(self) -> int:
        return self._minutes * 60

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def elapsed(self) -> int:
        return self.total_seconds - self._remaining

    @property
    def active(self) -> bool:
        return self._active

    @property
    def sound_enabled(self) -> bool:
        return self.tones.enabled

    @property
    def sessions_completed(self) -> int:
        return self._sessions

    # -----------------------
    # Controls
    # -----------------------

    def set_duration(self, minutes: int) -> bool:
        if self._active:
            logger.debug("Duration change ignored while running")
            return False
        if minutes not in DURATION_CHOICES:
            logger.debug("Duration %r is not one of %s", minutes, DURATION_CHOICES)
            return False

        self._minutes = int(minutes)
        self._remaining = self._minutes * 60
        self.changed.emit()
        return True

    def start(self) -> bool:
        if self._active or self._remaining <= 0:
            logger.debug("Start ignored (active=%s, remaining=%s)", self._active, self._remaining)
            return False

        self._active = True
        self.timer.start()
        self.tones.start_ambient()
        self.changed.emit()
        return True

    def pause(self) -> bool:
        if not self._active:
            return False

        self._go_idle()
        self.changed.emit()
        return True

    def toggle(self) -> bool:
        if self._active:
            self.pause()
        else:
            self.start()
        return self._active

    def reset(self) -> None:
        self._go_idle()
        self._remaining = self.total_seconds
        self.changed.emit()

    def toggle_sound(self) -> bool:
        enabled = self.tones.toggle_enabled(session_active=self._active)
        self.changed.emit()
        return enabled

    def tick(self) -> None:
        if self._remaining > 0:
            self._remaining -= 1

        if self._active and self._remaining == 0:
            self._complete()
        self.changed.emit()

    def shutdown(self) -> None:
        self._go_idle()
        self.tones.close()

    # -----------------------
    # Internals
    # -----------------------

    def _go_idle(self) -> None:
        self._active = False
        if self.timer.isActive():
            self.timer.stop()
        self.tones.stop_ambient()

    def _complete(self) -> None:
        self._go_idle()
        self._sessions += 1
        logger.info("Session complete (%d min), %d today", self._minutes, self._sessions)
        self.tones.play_completion_chime()
        self.completed.emit(self._sessions)
