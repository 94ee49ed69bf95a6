# -*- coding: utf-8 -*-
"""
src/dragstyle/core/applicator.py

The Style Applicator bridges committed axis values to the document engine
and to the Segment Store, and announces quantized value changes with a
feedback tone.
"""

import logging
from typing import Dict, Optional

from .axis import DiscreteStyleAxis
from .document import DocumentEngine, EditorSelection, NullTonePlayer, TonePlayer
from .segments import SegmentStore, SelectionRange

logger = logging.getLogger(__name__)


class StyleApplicator:
    """
    Applies axis values to the currently tracked selection of a document.

    The selection is captured once, when a gesture starts, and reused for
    every update until it is released. After each style mutation the same
    selection is set on the engine again so the user keeps their selection
    while dragging.
    """

    def __init__(self, document: DocumentEngine, tones: Optional[TonePlayer] = None):
        self.document = document
        self.tones = tones or NullTonePlayer()
        self._selection: Optional[EditorSelection] = None
        self._last_announced: Dict[str, int] = {}

    @property
    def tracked_selection(self) -> Optional[EditorSelection]:
        return self._selection

    def track(self, selection: Optional[EditorSelection]) -> None:
        self._selection = selection

    def release_selection(self) -> None:
        self._selection = None

    def apply(self, axis: DiscreteStyleAxis, value: int) -> bool:
        """
        Sets `value` for `axis` on the tracked selection and announces it.

        Returns:
            bool: False if no selection is tracked and nothing was applied.
        """
        selection = self._selection
        if selection is None:
            logger.debug(f"No tracked selection; {axis.name}={value} not applied.")
            return False

        self.document.set_style_attribute(axis.attribute, value, selection)
        self.document.set_selection(selection)
        self.announce(axis, value)
        return True

    def announce(self, axis: DiscreteStyleAxis, value: int) -> bool:
        """
        Plays the tone mapped to `value` if it differs from the last value
        announced on this axis.

        Returns:
            bool: True if a tone was triggered.
        """
        if self._last_announced.get(axis.name) == value:
            return False
        self._last_announced[axis.name] = value

        tone_id = axis.tone_for(value)
        if tone_id is None:
            logger.debug(f"No tone mapped for {axis.name}={value}.")
            return False
        try:
            self.tones.play(tone_id)
        except Exception as e:
            # Tone playback is best effort; a broken device never blocks styling.
            logger.debug(f"Tone {tone_id} could not be played: {e}")
            return False
        return True

    def last_announced(self, axis: DiscreteStyleAxis) -> Optional[int]:
        return self._last_announced.get(axis.name)

    def reset_announced(self, axis: DiscreteStyleAxis, value: Optional[int] = None) -> None:
        """Sets the announcement baseline without playing anything."""
        if value is None:
            self._last_announced.pop(axis.name, None)
        else:
            self._last_announced[axis.name] = value

    def toggle_flag(self, name: str) -> bool:
        """Flips a boolean flag such as italic on the engine's current selection."""
        selection = self._selection or self.document.get_selection()
        if selection is None:
            return False
        self.document.toggle_flag(name, selection)
        self.document.set_selection(selection)
        return True

    def toggle_segment_style(self, store: SegmentStore, selection: SelectionRange, key: str) -> Optional[SelectionRange]:
        """
        Flips `key` over `selection` in a Segment Store, splitting the
        boundary segments first.

        Returns:
            The range of the restyled segments, or None if the selection does
            not resolve against the store.
        """
        isolated = store.toggle_span(selection, key)
        if isolated is not None:
            logger.info(f"Toggled '{key}' on segments {isolated.start_segment_id}..{isolated.end_segment_id}.")
        return isolated
