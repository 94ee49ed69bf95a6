# -*- coding: utf-8 -*-
"""
src/dragstyle/gui/qt_document.py

Adapts a QTextEdit to the document engine interface used by the style
controls.

Weight maps onto QTextCharFormat.fontWeight (Qt 6 uses the same 100..900
scale as CSS) and size onto the character point size.
"""

import logging
from typing import Dict, Optional

from PyQt6.QtGui import QTextCharFormat, QTextCursor, QTextFormat
from PyQt6.QtWidgets import QTextEdit

from ..core.axis import SIZE_AXIS, WEIGHT_AXIS
from ..core.document import EditorSelection

logger = logging.getLogger(__name__)


class QtTextDocument:
    """
    Document engine backed by a QTextEdit widget.
    """

    def __init__(self, edit: QTextEdit):
        self.edit = edit

    def _cursor_for(self, selection: EditorSelection) -> QTextCursor:
        """Builds a cursor spanning `selection`, clipped to the document."""
        last = max(0, self.edit.document().characterCount() - 1)
        cursor = QTextCursor(self.edit.document())
        cursor.setPosition(min(selection.start, last))
        cursor.setPosition(min(selection.end, last), QTextCursor.MoveMode.KeepAnchor)
        return cursor

    def get_selection(self) -> Optional[EditorSelection]:
        cursor = self.edit.textCursor()
        if not cursor.hasSelection():
            return None
        return EditorSelection(cursor.selectionStart(), cursor.selectionEnd())

    def set_selection(self, selection: EditorSelection) -> None:
        self.edit.setTextCursor(self._cursor_for(selection))

    def _format_at(self, selection: EditorSelection) -> QTextCharFormat:
        # charFormat() reports the character before the cursor position
        cursor = self._cursor_for(EditorSelection(selection.start, selection.start + 1))
        return cursor.charFormat()

    def get_style_attributes(self, selection: EditorSelection) -> Dict[str, int]:
        fmt = self._format_at(selection)
        attributes = {}
        if fmt.hasProperty(QTextFormat.Property.FontWeight):
            attributes[WEIGHT_AXIS.attribute] = int(fmt.fontWeight())
        if fmt.fontPointSize() > 0:
            attributes[SIZE_AXIS.attribute] = int(round(fmt.fontPointSize()))
        return attributes

    def set_style_attribute(self, name: str, value: int, selection: EditorSelection) -> None:
        fmt = QTextCharFormat()
        if name == WEIGHT_AXIS.attribute:
            fmt.setFontWeight(int(value))
        elif name == SIZE_AXIS.attribute:
            fmt.setFontPointSize(float(value))
        else:
            logger.warning(f"Unsupported style attribute '{name}' ignored.")
            return
        self._cursor_for(selection).mergeCharFormat(fmt)

    def toggle_flag(self, name: str, selection: EditorSelection) -> None:
        current = self._format_at(selection)
        fmt = QTextCharFormat()
        if name == "italic":
            fmt.setFontItalic(not current.fontItalic())
        elif name == "underline":
            fmt.setFontUnderline(not current.fontUnderline())
        elif name == "strikethrough":
            fmt.setFontStrikeOut(not current.fontStrikeOut())
        else:
            logger.warning(f"Unsupported style flag '{name}' ignored.")
            return
        self._cursor_for(selection).mergeCharFormat(fmt)

    def is_flag_active(self, name: str, selection: EditorSelection) -> bool:
        fmt = self._format_at(selection)
        return {
            "italic": fmt.fontItalic(),
            "underline": fmt.fontUnderline(),
            "strikethrough": fmt.fontStrikeOut(),
        }.get(name, False)

    def plain_text(self) -> str:
        return self.edit.toPlainText()

    def to_html(self) -> str:
        return self.edit.toHtml()

    def from_html(self, content: str) -> None:
        self.edit.setHtml(content)
