from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel
from PySide6.QtCore import Qt, QRectF, QPointF
from PySide6.QtGui import QPainter, QPen, QBrush, QColor, QLinearGradient

from mindful.core.presenter import RING_CIRCUMFERENCE, RING_RADIUS
from mindful.ui.style import RING_FROM, RING_TO, RING_TRACK

STROKE = 8


class ProgressRing(QWidget):
    """Circular countdown indicator with the time and status in the middle."""

    def __init__(self):
        super().__init__()
        side = 2 * (RING_RADIUS + 20)
        self.setFixedSize(side, side)
        self._offset = RING_CIRCUMFERENCE

        lay = QVBoxLayout(self)
        lay.setAlignment(Qt.AlignCenter)
        lay.setSpacing(4)

        self.time_label = QLabel("0:00")
        self.time_label.setAlignment(Qt.AlignCenter)
        self.time_label.setStyleSheet("font-size: 60px; font-weight: 300;")

        self.status_label = QLabel("")
        self.status_label.setObjectName("muted")
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setStyleSheet("font-size: 13px;")

        lay.addWidget(self.time_label)
        lay.addWidget(self.status_label)

    def set_view(self, time_text: str, status: str, ring_offset: float):
        self.time_label.setText(time_text)
        self.status_label.setText(status)
        self._offset = float(ring_offset)
        self.update()

    def paintEvent(self, event):
        p = QPainter(self)
        p.setRenderHint(QPainter.Antialiasing, True)

        center = QPointF(self.width() / 2, self.height() / 2)
        rect = QRectF(center.x() - RING_RADIUS, center.y() - RING_RADIUS,
                      2 * RING_RADIUS, 2 * RING_RADIUS)

        track = QPen(QColor(RING_TRACK), STROKE)
        p.setPen(track)
        p.drawEllipse(rect)

        filled = max(0.0, RING_CIRCUMFERENCE - self._offset)
        if filled > 0.0:
            grad = QLinearGradient(rect.topLeft(), rect.bottomRight())
            grad.setColorAt(0.0, QColor(RING_FROM))
            grad.setColorAt(1.0, QColor(RING_TO))

            pen = QPen(QBrush(grad), STROKE)
            pen.setCapStyle(Qt.RoundCap)
            p.setPen(pen)

            # Qt angles are 1/16 degree, counter-clockwise from 3 o'clock
            span = int(round(360 * 16 * filled / RING_CIRCUMFERENCE))
            p.drawArc(rect, 90 * 16, -span)

        p.end()
