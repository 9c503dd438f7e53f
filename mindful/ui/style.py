import sys

if sys.platform == "darwin":
    FONT_STACK = 'Helvetica Neue","Arial'
elif sys.platform.startswith("win"):
    FONT_STACK = 'Segoe UI","Arial'
else:
    FONT_STACK = 'DejaVu Sans","Arial'

ACCENT_FROM = "#6366f1"   # indigo-500
ACCENT_TO = "#a855f7"     # purple-500
RING_FROM = "#818cf8"
RING_TO = "#c084fc"
RING_TRACK = "#e5e7eb"
TEXT = "#1f2937"
MUTED = "#6b7280"

APP_QSS = f"""
QMainWindow, QWidget {{
    background: transparent;
    color: {TEXT};
    font-family: "{FONT_STACK}";
    font-size: 14px;
}}

QLabel#muted {{
    color: {MUTED};
}}

QPushButton {{
    background: #f3f4f6;
    border: none;
    padding: 8px 14px;
    border-radius: 16px;
    font-weight: 600;
    color: #4b5563;
}}
QPushButton:hover {{ background: #e5e7eb; }}

QPushButton#duration:checked {{
    background: qlineargradient(x1:0, y1:0, x2:1, y2:0, stop:0 {ACCENT_FROM}, stop:1 {ACCENT_TO});
    color: white;
}}

QPushButton#primary {{
    background: qlineargradient(x1:0, y1:0, x2:1, y2:0, stop:0 {ACCENT_FROM}, stop:1 {ACCENT_TO});
    color: white;
    border-radius: 36px;
    font-size: 26px;
}}
QPushButton#primary:hover {{
    background: qlineargradient(x1:0, y1:0, x2:1, y2:0, stop:0 #4f46e5, stop:1 #9333ea);
}}

QPushButton#round {{
    border-radius: 26px;
    font-size: 18px;
}}
"""
