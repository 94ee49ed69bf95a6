# -*- coding: utf-8 -*-
"""
src/dragstyle/core/segments.py

The Segment Store: an ordered sequence of immutable styled text fragments.

A document is modelled as a tuple of `Segment` objects whose texts,
concatenated in order, give the plain text. Style may only change at a
segment boundary, so restyling a sub-range is always done in two steps:
split the affected segments so the range covers whole segments, then flip
a style flag on those segments.

All functions in this module are pure. They never mutate their input and
never raise on a range that refers to unknown segments; such a range simply
leaves the sequence unchanged.
"""

import logging
import uuid
from dataclasses import dataclass, field, fields, replace
from typing import Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

STYLE_KEYS = ("bold", "italic", "underline", "strikethrough")


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class SegmentStyle:
    """Independent boolean style flags carried by a segment."""
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False

    def toggled(self, key: str) -> "SegmentStyle":
        """
        Returns a copy of this style with one flag flipped.

        Args:
            key (str): One of `STYLE_KEYS`.

        Raises:
            ValueError: If `key` is not a known style flag.
        """
        if key not in STYLE_KEYS:
            raise ValueError(f"Unknown style flag '{key}'. Expected one of {STYLE_KEYS}.")
        return replace(self, **{key: not getattr(self, key)})

    def active_flags(self) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(self) if getattr(self, f.name))


@dataclass(frozen=True)
class Segment:
    """A minimal styled text fragment with a unique, stable identifier."""
    id: str
    text: str
    style: SegmentStyle = field(default_factory=SegmentStyle)

    @classmethod
    def create(cls, text: str, style: Optional[SegmentStyle] = None) -> "Segment":
        return cls(id=_new_id(), text=text, style=style or SegmentStyle())


@dataclass(frozen=True)
class SelectionRange:
    """
    A span of the Segment Store identified by segment id and character offset.

    Offsets are inclusive indices into the referenced segment's text. A range
    whose ids and offsets are equal denotes a single character.
    """
    start_segment_id: str
    start_offset: int
    end_segment_id: str
    end_offset: int

    @property
    def is_single_segment(self) -> bool:
        return self.start_segment_id == self.end_segment_id

    def bounds(self) -> Tuple[int, int]:
        """The (min, max) of the two offsets."""
        return min(self.start_offset, self.end_offset), max(self.start_offset, self.end_offset)


@dataclass(frozen=True)
class StyleRange:
    """A run of plain-text characters [start, end) sharing one style."""
    start: int
    end: int
    style: SegmentStyle


def split_segments_for_range(segments: Sequence[Segment], selection: SelectionRange) -> Tuple[Segment, ...]:
    """
    Splits the segment named by `selection.start_segment_id` into up to three
    new segments: the text before the selected offsets, the selected text
    (both offsets inclusive), and the text after it.

    Each piece gets a fresh id and inherits the original style. Pieces with
    empty text are dropped, and every other segment passes through unchanged.

    Args:
        segments (Sequence[Segment]): The current segment sequence.
        selection (SelectionRange): The range whose start segment is split.

    Returns:
        Tuple[Segment, ...]: The new sequence, with the target segment
        replaced in place.
    """
    low, high = selection.bounds()
    result: List[Segment] = []
    for seg in segments:
        if seg.id != selection.start_segment_id:
            result.append(seg)
            continue

        pieces = (seg.text[:low], seg.text[low:high + 1], seg.text[high + 1:])
        result.extend(Segment(id=_new_id(), text=piece, style=seg.style) for piece in pieces if piece)
    return tuple(result)


def apply_style_to_range(segments: Sequence[Segment], selection: SelectionRange, key: str) -> Tuple[Segment, ...]:
    """
    Flips the style flag `key` on every segment from the range's start
    segment through its end segment, inclusive, in sequence order.

    The range does not need to be ordered: whichever of the two segments
    comes first in the sequence opens the span. If only one of the two ids
    is present, only that segment is toggled. If neither is, the sequence is
    returned unchanged.

    Callers wanting to restyle part of a segment must split first, see
    `isolate_range`.
    """
    positions = [i for i, seg in enumerate(segments)
                 if seg.id in (selection.start_segment_id, selection.end_segment_id)]
    if not positions:
        return tuple(segments)

    first, last = positions[0], positions[-1]
    return tuple(
        replace(seg, style=seg.style.toggled(key)) if first <= i <= last else seg
        for i, seg in enumerate(segments)
    )


def is_char_selected(selection: Optional[SelectionRange], segment_id: str, char_index: int) -> bool:
    """
    True if `char_index` of the segment `segment_id` lies inside `selection`.

    Only single-segment selections are resolved; a range spanning several
    segments always yields False.
    """
    if selection is None:
        return False
    if selection.start_segment_id != segment_id or selection.end_segment_id != segment_id:
        return False
    low, high = selection.bounds()
    return low <= char_index <= high


def _split_at(segments: Sequence[Segment], segment_id: str, low: int, high: int) -> Tuple[Tuple[Segment, ...], Optional[str]]:
    """Splits one segment and reports the id of the piece covering [low, high]."""
    target = find_segment(segments, segment_id)
    if target is None:
        return tuple(segments), None

    low = max(0, low)
    if low >= len(target.text) or high < low:
        return tuple(segments), None
    split = split_segments_for_range(segments, SelectionRange(segment_id, low, segment_id, high))
    original_index = next(i for i, seg in enumerate(segments) if seg.id == segment_id)
    # Pieces preceding the selected one: only a non-empty left piece
    selected_index = original_index + (1 if low > 0 else 0)
    return split, split[selected_index].id


def isolate_range(segments: Sequence[Segment], selection: SelectionRange) -> Tuple[Tuple[Segment, ...], Optional[SelectionRange]]:
    """
    Splits the boundary segments of `selection` so that exactly the selected
    characters occupy whole segments.

    Args:
        segments (Sequence[Segment]): The current segment sequence.
        selection (SelectionRange): The range to isolate. For a multi-segment
            range, the start segment is selected from `start_offset` to its
            end and the end segment from its beginning to `end_offset`.

    Returns:
        A tuple of the new sequence and a range naming the first and last
        isolated segments, or `(segments, None)` if either id is unknown or
        the start segment comes after the end segment.
    """
    ids = [seg.id for seg in segments]
    if selection.start_segment_id not in ids or selection.end_segment_id not in ids:
        return tuple(segments), None

    if selection.is_single_segment:
        low, high = selection.bounds()
        result, isolated_id = _split_at(segments, selection.start_segment_id, low, high)
        if isolated_id is None:
            return result, None
        isolated = find_segment(result, isolated_id)
        return result, SelectionRange(isolated_id, 0, isolated_id, len(isolated.text) - 1)

    if ids.index(selection.start_segment_id) > ids.index(selection.end_segment_id):
        return tuple(segments), None

    start_seg = find_segment(segments, selection.start_segment_id)
    result, first_id = _split_at(segments, start_seg.id, selection.start_offset, len(start_seg.text) - 1)
    result, last_id = _split_at(result, selection.end_segment_id, 0, selection.end_offset)
    if first_id is None or last_id is None:
        return tuple(segments), None

    last = find_segment(result, last_id)
    return result, SelectionRange(first_id, 0, last_id, len(last.text) - 1)


def find_segment(segments: Iterable[Segment], segment_id: str) -> Optional[Segment]:
    return next((seg for seg in segments if seg.id == segment_id), None)


def segments_from_text(text: str, style: Optional[SegmentStyle] = None) -> Tuple[Segment, ...]:
    """Builds the initial sequence for a document: one segment, or none for empty text."""
    return (Segment.create(text, style),) if text else ()


def plain_text(segments: Iterable[Segment]) -> str:
    return "".join(seg.text for seg in segments)


def style_ranges(segments: Iterable[Segment]) -> Tuple[StyleRange, ...]:
    """
    Flattens segments into style runs over the plain text.

    Adjacent segments with equal styles are merged into a single run, so the
    result describes the document independently of where it was split.
    """
    runs: List[StyleRange] = []
    position = 0
    for seg in segments:
        end = position + len(seg.text)
        if runs and runs[-1].style == seg.style and runs[-1].end == position:
            runs[-1] = StyleRange(runs[-1].start, end, seg.style)
        elif seg.text:
            runs.append(StyleRange(position, end, seg.style))
        position = end
    return tuple(runs)


class SegmentStore:
    """
    A mutable holder for a segment sequence built on the pure functions
    above. Each operation replaces the held tuple with a new one.
    """

    def __init__(self, segments: Iterable[Segment] = ()):
        self._segments: Tuple[Segment, ...] = tuple(segments)

    @classmethod
    def from_text(cls, text: str) -> "SegmentStore":
        return cls(segments_from_text(text))

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return self._segments

    @property
    def text(self) -> str:
        return plain_text(self._segments)

    def find(self, segment_id: str) -> Optional[Segment]:
        return find_segment(self._segments, segment_id)

    def split(self, selection: SelectionRange) -> Tuple[Segment, ...]:
        before = len(self._segments)
        self._segments = split_segments_for_range(self._segments, selection)
        logger.debug(f"Split segment {selection.start_segment_id}: {before} -> {len(self._segments)} segments.")
        return self._segments

    def toggle(self, selection: SelectionRange, key: str) -> Tuple[Segment, ...]:
        self._segments = apply_style_to_range(self._segments, selection, key)
        logger.debug(f"Toggled '{key}' from {selection.start_segment_id} to {selection.end_segment_id}.")
        return self._segments

    def toggle_span(self, selection: SelectionRange, key: str) -> Optional[SelectionRange]:
        """
        Isolates `selection` into whole segments and flips `key` on them.

        Returns:
            The range of the isolated segments, or None if the selection did
            not resolve against this store (in which case nothing changes).
        """
        segments, isolated = isolate_range(self._segments, selection)
        if isolated is None:
            logger.debug("Selection does not resolve against the store; nothing toggled.")
            return None
        self._segments = apply_style_to_range(segments, isolated, key)
        return isolated

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self):
        return iter(self._segments)


if __name__ == '__main__':
    store = SegmentStore.from_text("Drag to restyle this memo")
    first = store.segments[0]

    # Bold "restyle" (offsets 8..14 inclusive), then italicise "this memo".
    store.toggle_span(SelectionRange(first.id, 8, first.id, 14), "bold")
    tail = store.segments[-1]
    store.toggle_span(SelectionRange(tail.id, 1, tail.id, len(tail.text) - 1), "italic")

    for run in style_ranges(store.segments):
        flags = ", ".join(run.style.active_flags()) or "plain"
        print(f"[{run.start:2d}, {run.end:2d}) {store.text[run.start:run.end]!r}: {flags}")
