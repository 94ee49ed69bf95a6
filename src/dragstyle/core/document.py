# -*- coding: utf-8 -*-
"""
src/dragstyle/core/document.py

Interfaces of the collaborators the style controls depend on.

The rich-text document engine and the feedback tone device live outside the
core. This module describes what the core needs from them as Protocols, and
provides trivial implementations for headless use and for tests.
"""

import html
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, Tuple

from bs4 import BeautifulSoup, NavigableString

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditorSelection:
    """A non-empty span [start, end) in the document engine's plain text."""
    start: int
    end: int

    @classmethod
    def of(cls, anchor: int, position: int) -> "EditorSelection":
        return cls(min(anchor, position), max(anchor, position))

    def __len__(self) -> int:
        return self.end - self.start


class DocumentEngine(Protocol):
    def get_selection(self) -> Optional[EditorSelection]:
        ...

    def get_style_attributes(self, selection: EditorSelection) -> Dict[str, int]:
        ...

    def set_style_attribute(self, name: str, value: int, selection: EditorSelection) -> None:
        ...

    def set_selection(self, selection: EditorSelection) -> None:
        ...

    def toggle_flag(self, name: str, selection: EditorSelection) -> None:
        ...

    def is_flag_active(self, name: str, selection: EditorSelection) -> bool:
        ...

    def plain_text(self) -> str:
        ...

    def to_html(self) -> str:
        ...

    def from_html(self, content: str) -> None:
        ...


class TonePlayer(Protocol):
    def play(self, tone_id: int) -> None:
        ...


class NullTonePlayer:
    """A tone device that plays nothing."""

    def play(self, tone_id: int) -> None:
        pass


class InMemoryDocument:
    """
    A minimal document engine that keeps one attribute dictionary per
    character. Used when no widget toolkit is available and in tests.

    The HTML form wraps each run of equally styled characters in a <span>
    with inline CSS, and `from_html` reads that form back.
    """

    FLAGS = ("italic", "underline", "strikethrough")

    def __init__(self, text: str = "", defaults: Optional[Dict[str, int]] = None):
        self.defaults = dict(defaults or {})
        self._text = text
        self._attributes: List[Dict[str, object]] = [{} for _ in text]
        self._selection: Optional[EditorSelection] = None

    def get_selection(self) -> Optional[EditorSelection]:
        return self._selection

    def set_selection(self, selection: Optional[EditorSelection]) -> None:
        if selection is not None and (selection.start < 0 or selection.end > len(self._text) or not len(selection)):
            logger.debug(f"Ignoring out-of-bounds selection {selection}.")
            selection = None
        self._selection = selection

    def get_style_attributes(self, selection: EditorSelection) -> Dict[str, int]:
        result = dict(self.defaults)
        if selection.start < len(self._attributes):
            attrs = self._attributes[selection.start]
            result.update({k: v for k, v in attrs.items() if k not in self.FLAGS})
        return result

    def set_style_attribute(self, name: str, value: int, selection: EditorSelection) -> None:
        for attrs in self._attributes[selection.start:selection.end]:
            attrs[name] = value

    def toggle_flag(self, name: str, selection: EditorSelection) -> None:
        span = self._attributes[selection.start:selection.end]
        enable = not all(attrs.get(name) for attrs in span)
        for attrs in span:
            attrs[name] = enable

    def is_flag_active(self, name: str, selection: EditorSelection) -> bool:
        span = self._attributes[selection.start:selection.end]
        return bool(span) and all(attrs.get(name) for attrs in span)

    def attributes_at(self, index: int) -> Dict[str, object]:
        return dict(self._attributes[index])

    def plain_text(self) -> str:
        return self._text

    def _runs(self) -> List[Tuple[str, Dict[str, object]]]:
        runs: List[Tuple[str, Dict[str, object]]] = []
        for char, attrs in zip(self._text, self._attributes):
            if runs and runs[-1][1] == attrs:
                runs[-1] = (runs[-1][0] + char, attrs)
            else:
                runs.append((char, attrs))
        return runs

    def to_html(self) -> str:
        parts = []
        for text, attrs in self._runs():
            css = []
            if "weight" in attrs:
                css.append(f"font-weight: {attrs['weight']}")
            if "size" in attrs:
                css.append(f"font-size: {attrs['size']}px")
            if attrs.get("italic"):
                css.append("font-style: italic")
            decorations = [line for flag, line in (("underline", "underline"), ("strikethrough", "line-through"))
                           if attrs.get(flag)]
            if decorations:
                css.append(f"text-decoration: {' '.join(decorations)}")
            escaped = html.escape(text)
            parts.append(f'<span style="{"; ".join(css)}">{escaped}</span>' if css else escaped)
        return f"<p>{''.join(parts)}</p>"

    def from_html(self, content: str) -> None:
        runs = read_styled_runs(content)
        self._text = "".join(text for text, _ in runs)
        self._attributes = [dict(attrs) for text, attrs in runs for _ in text]
        self._selection = None


def _parse_span_style(style: str) -> Dict[str, object]:
    """Maps the inline CSS written by `InMemoryDocument.to_html` to attributes."""
    attrs: Dict[str, object] = {}
    for declaration in style.split(";"):
        prop, _, value = declaration.partition(":")
        prop, value = prop.strip().lower(), value.strip().lower()
        if prop == "font-weight" and value.isdigit():
            attrs["weight"] = int(value)
        elif prop == "font-size" and value.endswith("px") and value[:-2].isdigit():
            attrs["size"] = int(value[:-2])
        elif prop == "font-style" and value == "italic":
            attrs["italic"] = True
        elif prop == "text-decoration":
            lines = value.split()
            if "underline" in lines:
                attrs["underline"] = True
            if "line-through" in lines:
                attrs["strikethrough"] = True
    return attrs


def read_styled_runs(content: str) -> List[Tuple[str, Dict[str, object]]]:
    """
    Splits HTML into (text, attributes) runs in document order. Each text node
    inherits the styles of every enclosing <span>, inner spans winning.
    """
    soup = BeautifulSoup(content, "lxml")
    runs: List[Tuple[str, Dict[str, object]]] = []
    for node in soup.find_all(string=True):
        # Skip comments, doctypes and other special strings.
        if type(node) is not NavigableString or not node:
            continue
        attrs: Dict[str, object] = {}
        for span in reversed(node.find_parents("span")):
            attrs.update(_parse_span_style(span.get("style") or ""))
        runs.append((str(node), attrs))
    return runs
