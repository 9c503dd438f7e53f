from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QPushButton
from PySide6.QtCore import Qt, QPoint


class TitleBar(QWidget):
    """
    Title bar for the frameless window:
    - drag anywhere on the bar to move
    - minimize and close buttons
    """
    def __init__(self, window, title: str = "Mindful Moments"):
        super().__init__()
        self._window = window
        self._drag_pos: QPoint | None = None

        self.setFixedHeight(40)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 6, 10, 6)
        layout.setSpacing(8)

        self.title = QLabel(title)
        self.title.setObjectName("muted")
        self.title.setStyleSheet("font-size: 12px; font-weight: 600; letter-spacing: 0.4px;")

        self.min_btn = self._btn("—")
        self.close_btn = self._btn("✕")

        self.min_btn.clicked.connect(self._window.showMinimized)
        self.close_btn.clicked.connect(self._window.close)

        layout.addWidget(self.title)
        layout.addStretch(1)
        layout.addWidget(self.min_btn)
        layout.addWidget(self.close_btn)

    def _btn(self, text: str) -> QPushButton:
        b = QPushButton(text)
        b.setFixedSize(30, 26)
        b.setCursor(Qt.PointingHandCursor)
        b.setStyleSheet("""
            QPushButton {
                background: transparent;
                border-radius: 8px;
                padding: 0px;
                font-weight: 700;
                color: #9ca3af;
            }
            QPushButton:hover { background: rgba(99,102,241,0.12); color: #4b5563; }
        """)
        return b

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self._drag_pos = event.globalPosition().toPoint() - self._window.frameGeometry().topLeft()
            event.accept()

    def mouseMoveEvent(self, event):
        if self._drag_pos is not None and event.buttons() & Qt.LeftButton:
            self._window.move(event.globalPosition().toPoint() - self._drag_pos)
            event.accept()

    def mouseReleaseEvent(self, event):
        self._drag_pos = None
        event.accept()
