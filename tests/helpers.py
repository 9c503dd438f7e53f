from __future__ import annotations

import os
from typing import List, Tuple

from mindful.audio.tone_api import AudioBackend, AudioUnavailable, ToneHandle


def qt_app():
    """One Qt application for the whole test run, offscreen when widgets are importable."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    try:
        from PySide6.QtWidgets import QApplication
    except ImportError:
        from PySide6.QtCore import QCoreApplication
        return QCoreApplication.instance() or QCoreApplication([])
    return QApplication.instance() or QApplication([])


def widgets_available() -> bool:
    app = qt_app()
    try:
        from PySide6.QtWidgets import QApplication
    except ImportError:
        return False
    return isinstance(app, QApplication)


class FakeTone(ToneHandle):
    def __init__(self, backend: "FakeAudioBackend", frequency: float, gain: float) -> None:
        self.backend = backend
        self.frequency = frequency
        self.gain = gain
        self.closed = False
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        if not self.closed:
            self.closed = True
            self.backend.live.remove(self)


class FakeAudioBackend(AudioBackend):
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.opened: List[FakeTone] = []
        self.live: List[FakeTone] = []
        self.chimes: List[Tuple[float, float, float, float]] = []
        self.closed = False

    def open_tone(self, frequency: float, gain: float) -> ToneHandle:
        if self.fail:
            raise AudioUnavailable("no device")
        tone = FakeTone(self, frequency, gain)
        self.opened.append(tone)
        self.live.append(tone)
        return tone

    def play_chime(self, frequency: float, start_gain: float, end_gain: float, seconds: float) -> None:
        if self.fail:
            raise AudioUnavailable("no device")
        self.chimes.append((frequency, start_gain, end_gain, seconds))

    def close(self) -> None:
        self.closed = True
