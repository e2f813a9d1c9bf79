"""Symbol table window (Qt) — browse and copy the escape words."""
import logging
from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QLineEdit, QTableWidget, QTableWidgetItem, QHeaderView,
    QApplication, QStatusBar,
)
from PyQt5.QtGui import QFont

from unimath.completer import suggest
from unimath.symbols import MATH_ALPHABETS

logger = logging.getLogger(__name__)


class SymbolTableWindow(QMainWindow):
    """Filterable list of escape words and the symbols they produce."""

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine

        self.setWindowTitle("UniMath — Symbol table")
        self.setMinimumWidth(420)
        self.setMinimumHeight(560)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        filter_row = QHBoxLayout()
        filter_row.addWidget(QLabel("Escape word:"))
        self._filter_input = QLineEdit("\\")
        self._filter_input.setPlaceholderText("\\al")
        self._filter_input.textChanged.connect(self._refresh)
        filter_row.addWidget(self._filter_input)
        layout.addLayout(filter_row)

        self._preview = QLabel("")
        self._preview.setFont(QFont("Sans", 16))
        layout.addWidget(self._preview)

        self._table = QTableWidget(0, 2)
        self._table.setHorizontalHeaderLabels(["Escape word", "Symbol"])
        self._table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self._table.verticalHeader().setVisible(False)
        self._table.setEditTriggers(QTableWidget.NoEditTriggers)
        self._table.cellDoubleClicked.connect(self._copy_symbol)
        layout.addWidget(self._table)

        hint = ", ".join(f"{prefix}:…" for prefix in MATH_ALPHABETS)
        help_label = QLabel(
            "Type an escape word then space or tab.\n"
            "\\_xyz subscript, \\^xyz superscript, \\b:xyz bold,\n"
            f"alphabets: {hint}"
        )
        help_label.setWordWrap(True)
        layout.addWidget(help_label)

        self.setStatusBar(QStatusBar())
        self._refresh(self._filter_input.text())

    def _refresh(self, text: str):
        """Show the completions for text, and what committing it would produce."""
        text = text.strip()
        matches = suggest(text, self.engine.codes)
        self._table.setRowCount(len(matches))
        for row, (key, value) in enumerate(matches):
            self._table.setItem(row, 0, QTableWidgetItem(key))
            self._table.setItem(row, 1, QTableWidgetItem(value))

        replacement = self.engine.evaluate(text, len(text))
        self._preview.setText(f"→ {replacement.text}" if replacement else "")
        self.statusBar().showMessage(f"{len(matches)} matching escape words")

    def _copy_symbol(self, row: int, column: int):
        item = self._table.item(row, 1)
        if item is None:
            return
        QApplication.clipboard().setText(item.text())
        self.statusBar().showMessage(f"Copied {item.text()}")
        logger.debug("Copied %r to clipboard", item.text())
