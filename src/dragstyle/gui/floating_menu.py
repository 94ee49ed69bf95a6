# -*- coding: utf-8 -*-
"""
src/dragstyle/gui/floating_menu.py

Defines the FloatingStyleMenu widget shown above the text selection.

The menu is a single custom-painted widget. In its normal mode it shows four
controls: weight ("B"), size ("A"), italic and underline. Pressing the
weight or size control starts a gesture on that axis; because Qt grabs the
mouse for the widget that received the press, move and release events keep
arriving even after the pointer has left the menu. While an axis is being
dragged, the menu swaps its controls for that axis's step picker, one tick
per legal value, with the current value highlighted and presets emphasised.
The picker stays open after the drag ends; the next click either picks a
tick or, anywhere else on the menu, closes it.

A tap result settles with a bounce animation. Drag updates are painted
immediately with no animation so the picker tracks the pointer exactly.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QEasingCurve, QPoint, QPointF, QPropertyAnimation, QRect, QRectF, Qt, pyqtProperty, pyqtSignal
from PyQt6.QtGui import QColor, QCursor, QFont, QMouseEvent, QPainter, QPen
from PyQt6.QtWidgets import QWidget

from ..core.axis import DiscreteStyleAxis, SIZE_AXIS, WEIGHT_AXIS
from ..core.gesture import FloatingStyleController, GestureOutcome, GestureState

logger = logging.getLogger(__name__)

CURRENT_COLOR = QColor("#3b82f6")
PRESET_COLOR = QColor("#94a3b8")
STEP_COLOR = QColor("#e2e8f0")
GLYPH_COLOR = QColor("#1f2937")
ACTIVE_BACKGROUND = QColor("#e5e7eb")
BACKGROUND = QColor(255, 255, 255, 245)
BORDER = QColor("#d1d5db")


class FloatingStyleMenu(QWidget):
    """
    Floating controls bound to a FloatingStyleController.
    """
    # Emitted after a gesture ends, with the axis name and its final value.
    gesture_finished = pyqtSignal(str, int)

    PADDING = 6
    CELL = 36
    TICK = 28
    TICK_BAR = 8
    BOUNCE_MS = 450

    BUTTONS = (
        (WEIGHT_AXIS.name, "B"),
        (SIZE_AXIS.name, "A"),
        ("italic", "I"),
        ("underline", "U"),
    )

    def __init__(self, controller: FloatingStyleController, parent: QWidget = None):
        super().__init__(parent)
        self.controller = controller
        self._mode: Optional[str] = None
        self._bounce_axis: Optional[str] = None
        self._indicator_scale = 1.0

        self._bounce = QPropertyAnimation(self, b"indicatorScale", self)
        self._bounce.setDuration(self.BOUNCE_MS)
        self._bounce.setStartValue(1.4)
        self._bounce.setEndValue(1.0)
        self._bounce.setEasingCurve(QEasingCurve(QEasingCurve.Type.OutBounce))

        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self._apply_size()
        self.setVisible(controller.visible)

        controller.add_listener(self._on_controller_changed)

    # --- Animated property ---

    def _get_indicator_scale(self) -> float:
        return self._indicator_scale

    def _set_indicator_scale(self, value: float):
        self._indicator_scale = value
        self.update()

    indicatorScale = pyqtProperty(float, fget=_get_indicator_scale, fset=_set_indicator_scale)

    # --- Geometry ---

    def _apply_size(self):
        axis = self.controller.expanded_axis
        count = len(axis.values) if axis is not None else len(self.BUTTONS)
        cell = self.TICK if axis is not None else self.CELL
        self.setFixedSize(2 * self.PADDING + count * cell, 2 * self.PADDING + self.CELL + self.TICK_BAR)

    def button_rect(self, index: int) -> QRect:
        return QRect(self.PADDING + index * self.CELL, self.PADDING, self.CELL, self.CELL)

    def tick_rect(self, index: int) -> QRect:
        return QRect(self.PADDING + index * self.TICK, self.PADDING, self.TICK, self.CELL + self.TICK_BAR)

    def button_at(self, pos: QPoint) -> Optional[str]:
        for index, (name, _) in enumerate(self.BUTTONS):
            if self.button_rect(index).contains(pos):
                return name
        return None

    def tick_at(self, axis: DiscreteStyleAxis, pos: QPoint) -> Optional[int]:
        for index, value in enumerate(axis.values):
            if self.tick_rect(index).contains(pos):
                return value
        return None

    # --- Controller updates ---

    def _on_controller_changed(self):
        axis = self.controller.expanded_axis
        mode = axis.name if axis is not None else None
        if mode != self._mode:
            self._mode = mode
            self._apply_size()

        owner = self.controller.owner
        if owner is not None and self.controller.controller(owner).state is GestureState.DRAGGING:
            self._bounce.stop()
            self._indicator_scale = 1.0

        self.setVisible(self.controller.visible)
        self.update()

    def _start_bounce(self, axis_name: str):
        self._bounce_axis = axis_name
        self._bounce.stop()
        self._bounce.start()

    # --- Mouse handling ---

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return

        pos = event.position().toPoint()
        expanded = self.controller.expanded_axis
        if expanded is not None:
            value = self.tick_at(expanded, pos)
            if value is not None:
                self.controller.select(expanded.name, value)
                self.gesture_finished.emit(expanded.name, self.controller.value(expanded.name))
            else:
                # A click off the ticks only closes the picker.
                self.controller.collapse()
            event.accept()
            return

        name = self.button_at(pos)
        if name in self.controller.controllers:
            self.controller.press(name, event.globalPosition().x())
        elif name is not None:
            self.controller.toggle_flag(name)
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent):
        if self.controller.owner is not None:
            self.controller.move(event.globalPosition().x())
            event.accept()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent):
        owner = self.controller.owner
        if event.button() != Qt.MouseButton.LeftButton or owner is None:
            super().mouseReleaseEvent(event)
            return

        axis_controller = self.controller.controller(owner)
        outcome = self.controller.release()
        if outcome is GestureOutcome.TAP and axis_controller.animate:
            self._start_bounce(owner)
        logger.debug(f"Gesture on '{owner}' finished as {outcome.value} with value {axis_controller.value}.")
        self.gesture_finished.emit(owner, axis_controller.value)
        event.accept()

    # --- Painting ---

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        painter.setPen(QPen(BORDER, 1))
        painter.setBrush(BACKGROUND)
        painter.drawRoundedRect(QRectF(self.rect()).adjusted(0.5, 0.5, -0.5, -0.5), 8, 8)

        axis = self.controller.expanded_axis
        if axis is not None:
            self._paint_step_picker(painter, axis)
        else:
            self._paint_buttons(painter)

    def _glyph_font(self, axis: DiscreteStyleAxis, value: int) -> QFont:
        font = QFont(self.font())
        if axis.attribute == WEIGHT_AXIS.attribute:
            font.setWeight(QFont.Weight(value))
            font.setPixelSize(18)
        else:
            font.setPixelSize(value)
        return font

    def _draw_glyph(self, painter: QPainter, rect: QRect, text: str, font: QFont, color: QColor, scale: float = 1.0):
        painter.save()
        painter.translate(QPointF(rect.center()))
        painter.scale(scale, scale)
        painter.setFont(font)
        painter.setPen(color)
        box = QRectF(-rect.width() / 2, -rect.height() / 2, rect.width(), rect.height())
        painter.drawText(box, Qt.AlignmentFlag.AlignCenter, text)
        painter.restore()

    def _paint_buttons(self, painter: QPainter):
        weight = self.controller.value(WEIGHT_AXIS.name)
        size = self.controller.value(SIZE_AXIS.name)

        for index, (name, label) in enumerate(self.BUTTONS):
            rect = self.button_rect(index)
            font = QFont(self.font())
            font.setPixelSize(18)
            if name == WEIGHT_AXIS.name:
                active = weight >= 700
                font.setWeight(QFont.Weight(weight))
            elif name == SIZE_AXIS.name:
                active = False
                font.setPixelSize(22 if size >= 24 else 18 if size >= 20 else 14)
            else:
                active = self.controller.is_flag_active(name)
                font.setItalic(name == "italic")
                font.setUnderline(name == "underline")

            if active:
                painter.setPen(Qt.PenStyle.NoPen)
                painter.setBrush(ACTIVE_BACKGROUND)
                painter.drawRoundedRect(QRectF(rect).adjusted(2, 2, -2, -2), 4, 4)

            scale = self._indicator_scale if name == self._bounce_axis else 1.0
            self._draw_glyph(painter, rect, label, font, GLYPH_COLOR, scale)

    def _paint_step_picker(self, painter: QPainter, axis: DiscreteStyleAxis):
        current = self.controller.value(axis.name)
        label = "B" if axis.attribute == WEIGHT_AXIS.attribute else "A"
        current_scale = 1.5 if label == "B" else 1.1

        for index, step in enumerate(axis.values):
            rect = self.tick_rect(index)
            is_current = step == current
            color = CURRENT_COLOR if is_current else PRESET_COLOR if axis.is_preset(step) else STEP_COLOR

            glyph_rect = QRect(rect.left(), rect.top(), rect.width(), self.CELL)
            self._draw_glyph(painter, glyph_rect, label, self._glyph_font(axis, step), color,
                             current_scale if is_current else 1.0)

            bar_scale = 1.5 if is_current else 1.2 if axis.is_preset(step) else 1.0
            bar_width = 2 * bar_scale
            bar_height = (self.TICK_BAR - 2) * bar_scale
            bar = QRectF(rect.center().x() - bar_width / 2, rect.bottom() - bar_height, bar_width, bar_height)
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(color)
            painter.drawRoundedRect(bar, 1, 1)
