from PyQt6.QtWidgets import QPushButton, QFrame, QLabel, QVBoxLayout
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPainter, QColor, QBrush

class ModeButton(QPushButton):
    """
    A checkable button for one timer mode. Enter selects the mode,
    Left/Right move focus to the neighbouring mode button.
    """
    mode_selected = pyqtSignal(object)

    def __init__(self, mode, parent=None):
        super().__init__(mode.label, parent)
        self.mode = mode
        self.setCheckable(True)
        self.setObjectName("ModeButton")
        self.clicked.connect(lambda: self.mode_selected.emit(self.mode))

    def keyPressEvent(self, event):
        key = event.key()

        if key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self.mode_selected.emit(self.mode)
            event.accept()
            return

        elif key in (Qt.Key.Key_Left, Qt.Key.Key_Right):
            self.focusNextPrevChild(key == Qt.Key.Key_Right)
            event.accept()
            return

        super().keyPressEvent(event)

class RoundedFrame(QFrame):
    """
    A custom QFrame that draws itself with rounded corners.
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self.radius = 15
        self.background_color = QColor("#FFFFFF")

    def set_properties(self, radius, background_color):
        self.radius = radius
        self.background_color = QColor(background_color)
        self.update() # Trigger a repaint

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(self.background_color))
        painter.drawRoundedRect(self.rect(), self.radius, self.radius)

class TimeDisplay(RoundedFrame):
    """The big mm:ss readout, tinted per mode."""
    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(30, 20, 30, 20)

        self.label = QLabel("25:00")
        self.label.setObjectName("TimeDisplay")
        self.label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.label)

    def set_time(self, time_str, background_color):
        self.label.setText(time_str)
        self.set_properties(self.radius, background_color)
