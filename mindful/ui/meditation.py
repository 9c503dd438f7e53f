# mindful/ui/meditation.py
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame, QButtonGroup
)
from PySide6.QtCore import Qt

from mindful.core.countdown import CountdownController, DURATION_CHOICES
from mindful.core.presenter import duration_label, present
from mindful.ui.progress_ring import ProgressRing


class MeditationScreen(QWidget):
    """
    The whole app on one card:
    - ring with time + status
    - duration chooser (hidden while a session runs)
    - reset / play-pause / sound buttons
    - sessions completed since launch
    """
    def __init__(self, controller: CountdownController):
        super().__init__()
        self.controller = controller

        root = QVBoxLayout(self)
        root.setContentsMargins(32, 20, 32, 28)
        root.setSpacing(16)

        title = QLabel("Mindful Moments")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-size: 28px; font-weight: 300;")

        subtitle = QLabel("Find your inner peace")
        subtitle.setObjectName("muted")
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setStyleSheet("font-size: 13px;")

        self.ring = ProgressRing()

        # --- Duration chooser
        self.duration_box = QWidget()
        dur_layout = QVBoxLayout(self.duration_box)
        dur_layout.setContentsMargins(0, 0, 0, 0)
        dur_layout.setSpacing(10)

        dur_title = QLabel("Session Duration")
        dur_title.setAlignment(Qt.AlignCenter)
        dur_title.setStyleSheet("font-size: 13px; font-weight: 600; color: #374151;")

        dur_row = QHBoxLayout()
        dur_row.setSpacing(6)
        dur_row.addStretch(1)

        self.duration_group = QButtonGroup(self)
        self.duration_group.setExclusive(True)
        self.duration_buttons = {}
        for minutes in DURATION_CHOICES:
            b = QPushButton(duration_label(minutes))
            b.setObjectName("duration")
            b.setCheckable(True)
            b.setCursor(Qt.PointingHandCursor)
            b.clicked.connect(lambda _checked=False, m=minutes: self._choose_duration(m))
            self.duration_group.addButton(b)
            self.duration_buttons[minutes] = b
            dur_row.addWidget(b)
        dur_row.addStretch(1)

        dur_layout.addWidget(dur_title)
        dur_layout.addLayout(dur_row)

        # --- Controls
        controls = QHBoxLayout()
        controls.setSpacing(16)
        controls.addStretch(1)

        self.reset_btn = QPushButton("↺")
        self.reset_btn.setObjectName("round")
        self.reset_btn.setFixedSize(52, 52)
        self.reset_btn.setToolTip("Reset")
        self.reset_btn.clicked.connect(self.controller.reset)

        self.play_btn = QPushButton("▶")
        self.play_btn.setObjectName("primary")
        self.play_btn.setFixedSize(72, 72)
        self.play_btn.clicked.connect(self.controller.toggle)

        self.sound_btn = QPushButton("🔊")
        self.sound_btn.setObjectName("round")
        self.sound_btn.setFixedSize(52, 52)
        self.sound_btn.clicked.connect(self.controller.toggle_sound)

        for b in (self.reset_btn, self.play_btn, self.sound_btn):
            b.setCursor(Qt.PointingHandCursor)
            controls.addWidget(b)
        controls.addStretch(1)

        # --- Footer
        line = QFrame()
        line.setFrameShape(QFrame.HLine)
        line.setStyleSheet("color: #e5e7eb;")

        self.sessions_label = QLabel("")
        self.sessions_label.setObjectName("muted")
        self.sessions_label.setAlignment(Qt.AlignCenter)
        self.sessions_label.setTextFormat(Qt.RichText)

        root.addWidget(title)
        root.addWidget(subtitle)
        root.addSpacing(6)
        root.addWidget(self.ring, 0, Qt.AlignCenter)
        root.addWidget(self.duration_box)
        root.addLayout(controls)
        root.addWidget(line)
        root.addWidget(self.sessions_label)

        self.controller.changed.connect(self.refresh)
        self.refresh()

    def _choose_duration(self, minutes: int):
        # same button again keeps a paused session's progress
        if minutes == self.controller.minutes:
            self.refresh()
            return
        self.controller.set_duration(minutes)

    def refresh(self):
        v = present(self.controller)

        self.ring.set_view(v.time_text, v.status, v.ring_offset)

        self.duration_box.setVisible(not v.active)
        btn = self.duration_buttons.get(v.minutes)
        if btn is not None and not btn.isChecked():
            btn.setChecked(True)

        self.play_btn.setText("⏸" if v.active else "▶")
        self.play_btn.setToolTip("Pause" if v.active else "Start")

        self.sound_btn.setText("🔊" if v.sound_enabled else "🔇")
        self.sound_btn.setToolTip("Mute" if v.sound_enabled else "Unmute")

        self.sessions_label.setText(
            "Sessions completed today: "
            f"<span style='font-weight: 700; color: #9333ea;'>{v.sessions_completed}</span>"
        )
