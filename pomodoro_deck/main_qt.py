import sys
import logging
from PyQt6.QtWidgets import QApplication, QMainWindow, QWidget, QVBoxLayout, QMessageBox, QStatusBar, QLabel
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtCore import Qt
from dotenv import find_dotenv, load_dotenv

from .utils.config_manager import get_log_level, load_settings
from .utils.pomodoro_timer_qt import PomodoroTimer
from .utils.timer_engine import ConfigError, Mode
from .panels_qt.timer_panel_qt import TimerPanel

logger = logging.getLogger(__name__)


class PomodoroDeckApp(QMainWindow):
    def __init__(self, settings=None):
        super().__init__()

        self.setWindowFlag(Qt.WindowType.FramelessWindowHint)
        self.drag_pos = None

        self.theme = {
            'bg': '#fbfaf5',
            'panel_bg': '#f2ede4',
            'text_fg': '#4d4d4d',
            'select_bg': '#a0522d',
            'accent_work': '#bc4749',
            'accent_short_break': '#556b2f',
            'accent_long_break': '#7297A0',
            'accent_gray': '#C3B091',
            'text_fg_light': '#fbfaf5',
        }

        self.pomodoro_timer = PomodoroTimer(settings, parent=self)

        self.init_ui()
        self.apply_stylesheet()
        self.create_actions()

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.drag_pos = event.globalPosition().toPoint() - self.frameGeometry().topLeft()
            event.accept()

    def mouseMoveEvent(self, event):
        if self.drag_pos is not None:
            self.move(event.globalPosition().toPoint() - self.drag_pos)
            event.accept()

    def mouseReleaseEvent(self, event):
        self.drag_pos = None
        event.accept()

    def mode_color(self, mode):
        return self.theme[f"accent_{mode.value}"]

    def init_ui(self):
        self.setWindowTitle("Pomodoro Deck")
        self.setGeometry(100, 100, 520, 460)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(10, 10, 10, 10)
        main_layout.setSpacing(10)

        self.create_status_bar()
        self.setStatusBar(self.status_bar)

        self.timer_panel = TimerPanel(self, self.pomodoro_timer)
        main_layout.addWidget(self.timer_panel, 1)

        self.pomodoro_timer.time_updated.connect(self.update_pomodoro_display)
        self.pomodoro_timer.interval_completed.connect(self.on_interval_completed)
        self.pomodoro_timer.emit_update()

    def apply_stylesheet(self):
        qss = f"""
            QMainWindow, QWidget {{
                background-color: {self.theme['bg']};
                font-family: Georgia;
                color: {self.theme['text_fg']};
            }}
            QFrame#TimerPanel {{
                background-color: {self.theme['panel_bg']};
                border-radius: 15px;
                border: 1px solid #e3d9c9;
            }}
            #PanelHeader {{
                font-size: 14pt;
                font-weight: bold;
                padding: 0 0 5px 0;
                background-color: transparent;
                border-bottom: 1px solid #e3d9c9;
            }}
            #TimeDisplay {{
                font-size: 56pt;
                font-weight: bold;
                background-color: transparent;
                color: {self.theme['text_fg_light']};
            }}
            #SessionInfo {{ font-size: 12pt; }}
            QStatusBar {{
                background-color: {self.theme['bg']};
                border-top: 1px solid #e3d9c9;
            }}
            QStatusBar QLabel {{
                color: {self.theme['text_fg']};
                font-size: 12pt;
                border: none;
                padding: 0 5px;
            }}
            QPushButton {{
                background-color: {self.theme['accent_gray']};
                color: {self.theme['text_fg']};
                border: none;
                padding: 8px 20px;
                font-size: 14pt;
                border-radius: 8px;
            }}
            QPushButton:hover {{ background-color: #A99A7F; }}
            QPushButton:disabled {{ color: #a8a8a8; }}
            QPushButton:checked, QPushButton:focus {{
                background-color: {self.theme['select_bg']};
                color: {self.theme['text_fg_light']};
                outline: none;
            }}
        """
        self.setStyleSheet(qss)

    def create_status_bar(self):
        self.status_bar = QStatusBar()
        self.pomodoro_label = QLabel("Work 25:00")
        self.sessions_label = QLabel("0 sessions")
        self.status_bar.addWidget(self.pomodoro_label)
        self.status_bar.addPermanentWidget(self.sessions_label)

    def update_pomodoro_display(self, time_str, mode_value, is_running):
        mode = Mode(mode_value)
        self.pomodoro_label.setText(f"{mode.label} {time_str}")
        color = self.mode_color(mode) if is_running else self.theme['text_fg']
        self.pomodoro_label.setStyleSheet(f"color: {color}; font-weight: bold;")
        self.sessions_label.setText(f"{self.pomodoro_timer.engine.sessions_completed} sessions")
        self.setWindowTitle(f"{time_str} - Pomodoro Deck")

    def on_interval_completed(self, finished_value, next_value):
        self.status_bar.showMessage(f"{Mode(finished_value).label} complete. Next: {Mode(next_value).label}", 5000)

    def create_actions(self):
        action_definitions = {
            "Quit": ("Ctrl+Q", self.close),
            "Start/Pause": ("Space", self.pomodoro_timer.start_stop),
            "Reset": ("Ctrl+R", self.pomodoro_timer.reset),
            "Work": ("Ctrl+1", lambda: self.pomodoro_timer.change_mode(Mode.WORK)),
            "Short Break": ("Ctrl+2", lambda: self.pomodoro_timer.change_mode(Mode.SHORT_BREAK)),
            "Long Break": ("Ctrl+3", lambda: self.pomodoro_timer.change_mode(Mode.LONG_BREAK)),
            "Focus Controls": ("Ctrl+O", self.timer_panel.focus_controls),
            "Toggle Fullscreen": ("F11", self.toggle_fullscreen),
        }

        actions = []
        for name, (shortcut, slot) in action_definitions.items():
            action = QAction(name, self)
            action.setShortcut(QKeySequence(shortcut))
            action.triggered.connect(slot)
            actions.append(action)

        self.addActions(actions)

    def toggle_fullscreen(self):
        if self.isFullScreen():
            self.showNormal()
        else:
            self.showFullScreen()


def main():
    load_dotenv(find_dotenv(usecwd=True))
    logging.basicConfig(level=get_log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = QApplication(sys.argv)
    app.setQuitOnLastWindowClosed(True)

    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error("Invalid timer settings: %s", e)
        QMessageBox.critical(None, "Configuration Error", f"The timer settings are invalid.\n\n{e}")
        return 1

    main_win = PomodoroDeckApp(settings)
    main_win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
