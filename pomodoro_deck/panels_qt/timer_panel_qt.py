# pomodoro_deck/panels_qt/timer_panel_qt.py
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QFrame, QLabel, QPushButton
from PyQt6.QtCore import Qt, QTimer
from pomodoro_deck.ui.widgets_qt import ModeButton, TimeDisplay
from pomodoro_deck.utils.nav_qt import install_panel_navigation_filter
from pomodoro_deck.utils.timer_engine import Mode

class TimerPanel(QWidget):
    """
    Renders a PomodoroTimer and forwards button presses to it.
    Holds no timer state of its own; everything is re-read from snapshots.
    """
    def __init__(self, app_instance, timer, parent=None):
        super().__init__(parent)
        self.app = app_instance
        self.timer = timer

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)

        container = QFrame()
        container.setObjectName("TimerPanel")
        main_layout.addWidget(container)

        content_layout = QVBoxLayout(container)
        content_layout.setContentsMargins(25, 25, 25, 25)
        content_layout.setSpacing(15)

        self.header_label = QLabel("Pomodoro Timer")
        self.header_label.setObjectName("PanelHeader")
        content_layout.addWidget(self.header_label)

        mode_row = QHBoxLayout()
        self.mode_buttons = {}
        for mode in Mode:
            button = ModeButton(mode)
            button.mode_selected.connect(self.timer.change_mode)
            mode_row.addWidget(button)
            self.mode_buttons[mode] = button
        content_layout.addLayout(mode_row)

        self.time_display = TimeDisplay()
        content_layout.addWidget(self.time_display)

        self.mode_label = QLabel()
        self.mode_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        content_layout.addWidget(self.mode_label)

        control_row = QHBoxLayout()
        self.start_button = QPushButton("Start")
        self.start_button.clicked.connect(self.timer.start)
        self.pause_button = QPushButton("Pause")
        self.pause_button.clicked.connect(self.timer.pause)
        self.reset_button = QPushButton("Reset")
        self.reset_button.clicked.connect(self.timer.reset)
        for button in (self.start_button, self.pause_button, self.reset_button):
            control_row.addWidget(button)
        content_layout.addLayout(control_row)

        self.sessions_label = QLabel()
        self.sessions_label.setObjectName("SessionInfo")
        self.sessions_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        content_layout.addWidget(self.sessions_label)

        self.timer.state_changed.connect(self.update_display)
        self.update_display(self.timer.snapshot())

        # Children exist once the constructor returns; install after that.
        QTimer.singleShot(0, lambda: install_panel_navigation_filter(self))

    def update_display(self, snapshot):
        for mode, button in self.mode_buttons.items():
            button.setChecked(mode == snapshot.mode)

        self.time_display.set_time(snapshot.time_display, self.app.mode_color(snapshot.mode))
        self.mode_label.setText(f"Current mode: {snapshot.mode_label}")
        self.sessions_label.setText(f"Completed sessions: {snapshot.sessions_completed}")

        self.start_button.setEnabled(not snapshot.is_active)
        self.pause_button.setEnabled(snapshot.is_active)

    def focus_controls(self):
        target = self.pause_button if self.pause_button.isEnabled() else self.start_button
        target.setFocus()
