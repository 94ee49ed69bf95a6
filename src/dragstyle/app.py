# -*- coding: utf-8 -*-
"""
src/dragstyle/app.py

Core application controller for DragStyle.

This module contains the main application class, `DragStyleApp`, which builds
the memo window and wires the document engine, the feedback tone player, the
style applicator and the gesture controller together.
"""

import logging
from dataclasses import replace
from typing import Optional

from .config import Config, get_config
from .core.applicator import StyleApplicator
from .core.axis import SIZE_AXIS, WEIGHT_AXIS
from .core.document import NullTonePlayer, TonePlayer
from .core.gesture import FloatingStyleController
from .core.tones import ToneBank
from .gui.editor_window import EditorWindow
from .gui.qt_document import QtTextDocument
from .gui.tone_player import QtTonePlayer

logger = logging.getLogger(__name__)


class DragStyleApp:
    """
    The main application controller. Owns the window and the style pipeline.
    """

    def __init__(self, config: Optional[Config] = None, tone_player: Optional[TonePlayer] = None):
        """
        Args:
            config (Config, optional): Settings to use. Defaults to the
                process-wide configuration.
            tone_player (TonePlayer, optional): Overrides the Qt tone player,
                e.g. with a NullTonePlayer for headless runs.
        """
        self.config = config or get_config()
        self.window = EditorWindow()
        self.document = QtTextDocument(self.window.editor)
        self.tone_player = tone_player or self._create_tone_player()
        self.applicator = StyleApplicator(self.document, self.tone_player)

        axes = (
            replace(WEIGHT_AXIS, sensitivity=self.config.weight_sensitivity),
            replace(SIZE_AXIS, sensitivity=self.config.size_sensitivity),
        )
        self.controller = FloatingStyleController(self.applicator, axes, self.config.drag_threshold)

        self.window.bind(self.controller)
        self.window.set_content(self.config.initial_html)
        logger.info(f"DragStyle initialized (drag threshold {self.config.drag_threshold}, "
                    f"tones {'on' if self.config.tones_enabled else 'off'}).")

    def _create_tone_player(self) -> TonePlayer:
        if not self.config.tones_enabled:
            return NullTonePlayer()
        bank = ToneBank(duration_ms=self.config.tone_duration_ms, volume=self.config.volume)
        return QtTonePlayer(bank)

    def show(self):
        self.window.show()
        self.window.editor.setFocus()

    def quit_app(self):
        """Stops tone playback and closes the window."""
        logger.info("Quitting DragStyle...")
        if isinstance(self.tone_player, QtTonePlayer):
            self.tone_player.stop()
        self.window.close()
