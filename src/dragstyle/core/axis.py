# -*- coding: utf-8 -*-
"""
src/dragstyle/core/axis.py

Discrete style axes: the ordered sets of legal values for one style
dimension, and the rules for reaching them by drag or by tap.

Two axes are defined, text weight (100..900 in steps of 100) and text size
(16..24 in unit steps). Each axis knows how to turn a scaled pointer
displacement into a legal value, which value a tap moves to, and which
feedback tone announces each value.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping, Optional, Tuple


def js_round(x: float) -> int:
    """
    Rounds half up, so 5.5 -> 6 and -0.5 -> 0.

    Python's built-in round() rounds half to even, which would turn the
    weight candidate for 550 into 500 instead of 600.
    """
    return int(math.floor(x + 0.5))


@dataclass(frozen=True)
class DiscreteStyleAxis:
    """
    One independently steppable style dimension.

    Attributes:
        name (str): Identifier of the axis, e.g. "weight".
        attribute (str): The document engine attribute the axis drives.
        values (Tuple[int, ...]): Legal values, strictly increasing.
        presets (Tuple[int, ...]): Visually emphasised values, a subset of `values`.
        sensitivity (float): Multiplier applied to the pointer X coordinate.
        default (int): Value assumed when the document reports none.
        quantizer (Callable[[int, float], int]): Maps (start value, scaled
            delta) to an unclamped candidate value.
        toggler (Callable[[int], int]): Maps the current value to the value a
            tap commits.
        tones (Mapping[int, int]): Feedback tone id for each value.
    """
    name: str
    attribute: str
    values: Tuple[int, ...]
    presets: Tuple[int, ...]
    sensitivity: float
    default: int
    quantizer: Callable[[int, float], int] = field(compare=False)
    toggler: Callable[[int], int] = field(compare=False)
    tones: Mapping[int, int] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        if not self.values:
            raise ValueError(f"Axis '{self.name}' needs at least one value.")
        if any(a >= b for a, b in zip(self.values, self.values[1:])):
            raise ValueError(f"Axis '{self.name}' values must be strictly increasing.")
        stray = [p for p in self.presets if p not in self.values]
        if stray:
            raise ValueError(f"Axis '{self.name}' presets {stray} are not legal values.")
        if self.default not in self.values:
            raise ValueError(f"Axis '{self.name}' default {self.default} is not a legal value.")

    @property
    def minimum(self) -> int:
        return self.values[0]

    @property
    def maximum(self) -> int:
        return self.values[-1]

    def __contains__(self, value) -> bool:
        return value in self.values

    def clamp(self, value: float) -> int:
        """Clamps to the axis bounds and snaps onto the nearest legal value."""
        bounded = max(self.minimum, min(self.maximum, value))
        return min(self.values, key=lambda v: (abs(v - bounded), v))

    def candidate(self, start_value: int, delta: float) -> int:
        """The legal value a drag of `delta` scaled units from `start_value` resolves to."""
        return self.clamp(self.quantizer(start_value, delta))

    def toggle(self, current: int) -> int:
        """The value a tap commits when the axis currently holds `current`."""
        return self.toggler(current)

    def tone_for(self, value: int) -> Optional[int]:
        return self.tones.get(value)

    def is_preset(self, value: int) -> bool:
        return value in self.presets


def _weight_candidate(start_value: int, delta: float) -> int:
    return js_round((start_value + delta) / 100) * 100


def _weight_toggle(current: int) -> int:
    return 400 if current >= 700 else 700


def _size_candidate(start_value: int, delta: float) -> int:
    return js_round(start_value + delta / 20)


def _size_toggle(current: int) -> int:
    # body -> subheading -> heading -> body
    if current == 24:
        return 16
    if current == 20:
        return 24
    return 20


WEIGHT_AXIS = DiscreteStyleAxis(
    name="weight",
    attribute="weight",
    values=tuple(range(100, 1000, 100)),
    presets=(400, 700),
    sensitivity=5,
    default=400,
    quantizer=_weight_candidate,
    toggler=_weight_toggle,
    tones={100: 200, 200: 300, 300: 400, 400: 500, 500: 600,
           600: 700, 700: 800, 800: 900, 900: 900},
)

SIZE_AXIS = DiscreteStyleAxis(
    name="size",
    attribute="size",
    values=tuple(range(16, 25)),
    presets=(16, 20, 24),
    sensitivity=2,
    default=16,
    quantizer=_size_candidate,
    toggler=_size_toggle,
    tones={16: 200, 17: 300, 18: 400, 19: 500, 20: 600,
           21: 700, 22: 800, 23: 800, 24: 900},
)

AXES: Dict[str, DiscreteStyleAxis] = {axis.name: axis for axis in (WEIGHT_AXIS, SIZE_AXIS)}


def get_axis(name: str) -> DiscreteStyleAxis:
    """
    Looks up a registered axis by name.

    Raises:
        KeyError: If no axis with that name is registered.
    """
    try:
        return AXES[name]
    except KeyError:
        raise KeyError(f"Unknown style axis '{name}'. Known axes: {sorted(AXES)}") from None


if __name__ == '__main__':
    # Walks each axis through a few drags and taps from its default value.
    for axis in AXES.values():
        print(f"--- {axis.name} (default {axis.default}, presets {axis.presets}) ---")
        for pixels in (-60, -20, 0, 20, 60):
            delta = pixels * axis.sensitivity
            value = axis.candidate(axis.default, delta)
            print(f"drag {pixels:+4d} px -> {value} (tone {axis.tone_for(value)})")

        value = axis.default
        taps = [value]
        for _ in range(len(axis.presets)):
            value = axis.toggle(value)
            taps.append(value)
        print(f"taps: {' -> '.join(str(v) for v in taps)}")
