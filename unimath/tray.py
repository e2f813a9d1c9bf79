"""System tray icon with context menu for UniMath."""
import logging
from PyQt5.QtWidgets import (
    QSystemTrayIcon, QMenu, QAction, QApplication,
)
from PyQt5.QtGui import QIcon, QPixmap, QPainter, QColor, QFont
from PyQt5.QtCore import Qt

logger = logging.getLogger(__name__)


def _create_icon(enabled: bool) -> QIcon:
    """Create a simple colored icon indicating enabled/disabled state."""
    size = 64
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.transparent)
    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing)

    color = QColor(0x3F, 0x51, 0xB5) if enabled else QColor(0x9E, 0x9E, 0x9E)
    painter.setBrush(color)
    painter.setPen(Qt.NoPen)
    painter.drawRoundedRect(4, 4, size - 8, size - 8, 10, 10)

    painter.setPen(QColor(255, 255, 255))
    painter.setFont(QFont("Sans", 30, QFont.Bold))
    painter.drawText(pixmap.rect(), Qt.AlignCenter, "∑")

    painter.end()
    return QIcon(pixmap)


class TrayIcon(QSystemTrayIcon):
    """System tray icon with enable/disable, trigger keys and the symbol table."""

    def __init__(self, config, daemon, parent=None):
        super().__init__(parent)
        self.config = config
        self.daemon = daemon
        self._symbols_window = None

        self._update_state()
        self._build_menu()

        self.activated.connect(self._on_activated)

    def _build_menu(self):
        menu = QMenu()

        self._toggle_action = QAction("Disable" if self.config.enabled else "Enable", menu)
        self._toggle_action.triggered.connect(self._toggle_enabled)
        menu.addAction(self._toggle_action)

        menu.addSeparator()

        trigger_menu = menu.addMenu("Convert on")

        self._trigger_space = QAction("Space", trigger_menu)
        self._trigger_space.setCheckable(True)
        self._trigger_space.setChecked(self.config.trigger_space)
        self._trigger_space.toggled.connect(self._set_trigger_space)
        trigger_menu.addAction(self._trigger_space)

        self._trigger_tab = QAction("Tab", trigger_menu)
        self._trigger_tab.setCheckable(True)
        self._trigger_tab.setChecked(self.config.trigger_tab)
        self._trigger_tab.toggled.connect(self._set_trigger_tab)
        trigger_menu.addAction(self._trigger_tab)

        symbols_action = QAction("Symbol table...", menu)
        symbols_action.triggered.connect(self._open_symbols)
        menu.addAction(symbols_action)

        menu.addSeparator()

        quit_action = QAction("Quit", menu)
        quit_action.triggered.connect(self._quit)
        menu.addAction(quit_action)

        self.setContextMenu(menu)

    def _update_state(self):
        enabled = self.config.enabled
        self.setIcon(_create_icon(enabled))
        self.setToolTip("UniMath" + (" [ON]" if enabled else " [OFF]"))

    def _toggle_enabled(self):
        self.config.enabled = not self.config.enabled
        self._toggle_action.setText("Disable" if self.config.enabled else "Enable")
        self._update_state()
        logger.info("Toggled: %s", "enabled" if self.config.enabled else "disabled")

    def _set_trigger_space(self, checked: bool):
        self.config.trigger_space = checked
        logger.info("Convert on space: %s", checked)

    def _set_trigger_tab(self, checked: bool):
        self.config.trigger_tab = checked
        logger.info("Convert on tab: %s", checked)

    def _open_symbols(self):
        from unimath.symbols_ui import SymbolTableWindow
        if self._symbols_window is None:
            self._symbols_window = SymbolTableWindow(self.daemon.engine)
        self._symbols_window.show()
        self._symbols_window.raise_()
        self._symbols_window.activateWindow()

    def _quit(self):
        self.daemon.stop()
        QApplication.quit()

    def _on_activated(self, reason):
        if reason == QSystemTrayIcon.Trigger:  # left click
            self._toggle_enabled()
