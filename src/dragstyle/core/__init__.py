# -*- coding: utf-8 -*-
"""
The Core Package for DragStyle.

This package holds the toolkit-independent logic:
- `segments`: the Segment Store, split and toggle operations on styled text.
- `axis`: the discrete style axes (weight, size) and their quantization rules.
- `gesture`: per-axis press/drag/release state machines.
- `applicator`: applies committed values to a document and plays feedback tones.
- `document`: the interfaces of the external document engine and tone device.
- `tones`: synthesis of the feedback tones.
"""

from .applicator import StyleApplicator
from .axis import AXES, SIZE_AXIS, WEIGHT_AXIS, DiscreteStyleAxis, get_axis
from .document import EditorSelection, InMemoryDocument, NullTonePlayer
from .gesture import AxisGestureController, FloatingStyleController, GestureOutcome, GestureState
from .segments import Segment, SegmentStore, SegmentStyle, SelectionRange

__all__ = [
    "AXES",
    "AxisGestureController",
    "DiscreteStyleAxis",
    "EditorSelection",
    "FloatingStyleController",
    "GestureOutcome",
    "GestureState",
    "InMemoryDocument",
    "NullTonePlayer",
    "SIZE_AXIS",
    "Segment",
    "SegmentStore",
    "SegmentStyle",
    "SelectionRange",
    "StyleApplicator",
    "WEIGHT_AXIS",
    "get_axis",
]
