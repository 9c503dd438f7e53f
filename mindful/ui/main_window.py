# mindful/ui/main_window.py
import logging
import sys

from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QGraphicsDropShadowEffect,
)
from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QColor, QPainterPath, QRegion, QGuiApplication

from mindful.audio.backend import open_backend
from mindful.audio.tone_api import AudioBackend
from mindful.audio.tone_engine import ToneEngine
from mindful.core.countdown import CountdownController
from mindful.core.log import setup_logging
from mindful.core.settings_store import AppSettings, SettingsStore
from mindful.ui.meditation import MeditationScreen
from mindful.ui.style import APP_QSS
from mindful.ui.titlebar import TitleBar

logger = logging.getLogger(__name__)

ORG = "Mindful"
APP = "Mindful Moments"


class MainWindow(QMainWindow):
    def __init__(self, settings: AppSettings, backend: AudioBackend):
        super().__init__()

        self.setWindowTitle(APP)

        self.setWindowFlag(Qt.FramelessWindowHint, True)
        self.setAttribute(Qt.WA_TranslucentBackground, True)

        self._radius = 24
        self._shadow_margin = 22

        # one engine + one controller per window
        self.tones = ToneEngine(backend, enabled=settings.sound_enabled)
        self.controller = CountdownController(self.tones, minutes=settings.default_minutes, parent=self)

        outer = QWidget()
        outer_layout = QVBoxLayout(outer)
        outer_layout.setContentsMargins(
            self._shadow_margin,
            self._shadow_margin,
            self._shadow_margin,
            self._shadow_margin,
        )
        outer_layout.setSpacing(0)

        self.container = QWidget()
        self.container.setObjectName("appContainer")
        self.container.setStyleSheet(f"""
            QWidget#appContainer {{
                background: rgba(255, 255, 255, 0.96);
                border-radius: {self._radius}px;
            }}
        """)

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(42)
        shadow.setOffset(0, 10)
        shadow.setColor(QColor(76, 29, 149, 90))
        self.container.setGraphicsEffect(shadow)

        container_layout = QVBoxLayout(self.container)
        container_layout.setContentsMargins(6, 6, 6, 6)
        container_layout.setSpacing(0)

        self.titlebar = TitleBar(self, APP)
        self.meditation = MeditationScreen(self.controller)

        container_layout.addWidget(self.titlebar)
        container_layout.addWidget(self.meditation)
        outer_layout.addWidget(self.container)
        self.setCentralWidget(outer)

        self._place_safely()

    def _place_safely(self):
        screen = QGuiApplication.primaryScreen()
        if screen:
            g = screen.availableGeometry()
            self.move(g.x() + 80, g.y() + 80)

    def _apply_rounded_mask(self):
        w, h = self.width(), self.height()
        m, r = self._shadow_margin, self._radius
        rect = QRectF(m, m, w - 2 * m, h - 2 * m)
        path = QPainterPath()
        path.addRoundedRect(rect, r, r)
        self.setMask(QRegion(path.toFillPolygon().toPolygon()))

    def showEvent(self, event):
        super().showEvent(event)
        self._apply_rounded_mask()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._apply_rounded_mask()

    def closeEvent(self, event):
        try:
            self.controller.shutdown()
        finally:
            super().closeEvent(event)


def launch_app():
    app = QApplication(sys.argv)
    app.setOrganizationName(ORG)
    app.setApplicationName(APP)
    app.setStyleSheet(APP_QSS)

    settings = SettingsStore().load()
    setup_logging(settings.log_level)
    logger.info("Starting %s (%d min, sound %s)", APP, settings.default_minutes,
                "on" if settings.sound_enabled else "off")

    window = MainWindow(settings, open_backend())
    window.show()
    sys.exit(app.exec())
