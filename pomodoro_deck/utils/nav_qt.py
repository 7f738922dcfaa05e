# pomodoro_deck/utils/nav_qt.py
from PyQt6.QtCore import Qt, QObject, QEvent

class PanelNavFilter(QObject):
    """Ctrl+arrow keys move focus between the controls of a panel."""
    def __init__(self, panel, parent=None):
        super().__init__(parent)
        self.panel = panel

    def eventFilter(self, obj, event):
        if event.type() == QEvent.Type.KeyPress and event.modifiers() == Qt.KeyboardModifier.ControlModifier:
            if event.key() in (Qt.Key.Key_Left, Qt.Key.Key_Right, Qt.Key.Key_Up, Qt.Key.Key_Down):
                self.panel.focusNextPrevChild(event.key() not in (Qt.Key.Key_Left, Qt.Key.Key_Up))
                return True
        return super().eventFilter(obj, event)

def install_panel_navigation_filter(panel):
    panel._nav_filter = PanelNavFilter(panel)
    for child in [panel] + panel.findChildren(QObject):
        if child.isWidgetType():
            child.installEventFilter(panel._nav_filter)
