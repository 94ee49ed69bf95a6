# -*- coding: utf-8 -*-
"""
src/dragstyle/gui/editor_window.py

The memo window: a rich-text editor with the floating style menu.

The window owns the QTextEdit that serves as the document engine. Whenever
the selection changes, the style controller re-reads the selection and the
floating menu is placed just above it, or hidden if nothing is selected.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QPoint
from PyQt6.QtGui import QAction, QFont, QKeySequence, QTextCursor
from PyQt6.QtWidgets import QMainWindow, QTextEdit, QWidget

from ..core.axis import SIZE_AXIS, WEIGHT_AXIS
from ..core.gesture import FloatingStyleController
from ..utils.clipboard_manager import copy_to_clipboard
from .floating_menu import FloatingStyleMenu

logger = logging.getLogger(__name__)

WINDOW_TITLE = "DragStyle Memo"
MENU_OFFSET_Y = 8  # Pixels between the selection and the floating menu
STATUS_TIMEOUT_MS = 3000

SAMPLE_HTML = (
    "<p>Select a few words of this memo.</p>"
    "<p>Tap <b>B</b> to switch between regular and bold, or press and drag it sideways "
    "to step through every weight from thin to black. Tap <b>A</b> to cycle between "
    "body text, subheading and heading sizes, or drag it for single steps.</p>"
)


class EditorWindow(QMainWindow):
    """
    Main window hosting the memo editor and its floating style menu.
    """

    def __init__(self, parent: QWidget = None):
        super().__init__(parent)
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(720, 480)

        self.editor = QTextEdit(self)
        base_font = QFont(self.editor.font())
        base_font.setPointSize(SIZE_AXIS.default)
        base_font.setWeight(QFont.Weight(WEIGHT_AXIS.default))
        self.editor.document().setDefaultFont(base_font)
        self.setCentralWidget(self.editor)

        self.controller: Optional[FloatingStyleController] = None
        self.menu: Optional[FloatingStyleMenu] = None

        self._setup_actions()
        self.statusBar()

    def _setup_actions(self):
        """Creates the File menu."""
        file_menu = self.menuBar().addMenu("&File")

        copy_action = QAction("Copy Text", self)
        copy_action.setShortcut(QKeySequence("Ctrl+Shift+C"))
        copy_action.triggered.connect(self.copy_text)
        file_menu.addAction(copy_action)

        file_menu.addSeparator()

        quit_action = QAction("Quit", self)
        quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

    def bind(self, controller: FloatingStyleController):
        """
        Connects the window to a style controller and creates the floating
        menu for it. Must be called once, before the window is shown.
        """
        self.controller = controller
        self.menu = FloatingStyleMenu(controller, self.editor)
        self.menu.gesture_finished.connect(self._on_gesture_finished)
        controller.add_listener(self.position_menu)
        self.editor.selectionChanged.connect(self._on_selection_changed)
        logger.info("Floating style menu bound to the editor.")

    def set_content(self, html: str):
        self.editor.setHtml(html or SAMPLE_HTML)

    def _on_selection_changed(self):
        if self.controller is not None:
            self.controller.refresh()

    def _on_gesture_finished(self, axis_name: str, value: int):
        self.statusBar().showMessage(f"{axis_name.capitalize()}: {value}", STATUS_TIMEOUT_MS)

    def position_menu(self):
        """
        Places the floating menu centred above the start of the selection,
        or below it if there is no room above.
        """
        if self.menu is None or self.controller is None or not self.controller.visible:
            return

        cursor = self.editor.textCursor()
        start = QTextCursor(self.editor.document())
        start.setPosition(cursor.selectionStart())
        caret = self.editor.cursorRect(start)
        anchor = self.editor.viewport().mapTo(self.editor, caret.topLeft())

        x = anchor.x() - self.menu.width() // 2
        x = max(0, min(x, self.editor.width() - self.menu.width()))
        y = anchor.y() - self.menu.height() - MENU_OFFSET_Y
        if y < 0:
            y = anchor.y() + caret.height() + MENU_OFFSET_Y

        self.menu.move(QPoint(x, y))
        self.menu.raise_()

    def copy_text(self) -> bool:
        copied = copy_to_clipboard(self.editor.toPlainText())
        message = "Text copied to clipboard." if copied else "Could not copy to clipboard."
        self.statusBar().showMessage(message, STATUS_TIMEOUT_MS)
        return copied
