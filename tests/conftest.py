import os

import pytest

# Widget tests run without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from dragstyle.core.applicator import StyleApplicator
from dragstyle.core.document import EditorSelection, InMemoryDocument


class RecordingTonePlayer:
    """Tone device that remembers every tone it was asked to play."""

    def __init__(self):
        self.played = []

    def play(self, tone_id):
        self.played.append(tone_id)


@pytest.fixture
def tones():
    return RecordingTonePlayer()


@pytest.fixture
def document():
    doc = InMemoryDocument("Hello styled world", defaults={"weight": 400, "size": 16})
    doc.set_selection(EditorSelection(6, 12))
    return doc


@pytest.fixture
def applicator(document, tones):
    applicator = StyleApplicator(document, tones)
    applicator.track(document.get_selection())
    return applicator
