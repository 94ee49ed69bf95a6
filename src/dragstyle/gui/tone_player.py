# -*- coding: utf-8 -*-
"""
src/dragstyle/gui/tone_player.py

Fire-and-forget playback of feedback tones through Qt Multimedia.

Tones are synthesized in memory by the ToneBank and streamed to the default
audio output with a QAudioSink. Starting a tone stops the previous one, so
fast drags never queue up sound. If no usable output device exists,
playback is disabled for the rest of the session and every call to play()
is a silent no-op.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QBuffer, QByteArray, QIODevice
from PyQt6.QtMultimedia import QAudio, QAudioDevice, QAudioFormat, QAudioSink, QMediaDevices

from ..core.tones import ToneBank

logger = logging.getLogger(__name__)


class QtTonePlayer:
    """
    Plays ToneBank tones on the default audio output.

    Attributes:
        bank (ToneBank): Source of the PCM data.
        enabled (bool): False once playback has been disabled, either by
            configuration or because no output device is usable.
    """

    def __init__(self, bank: ToneBank, enabled: bool = True):
        self.bank = bank
        self.enabled = enabled
        self._sink: Optional[QAudioSink] = None
        self._buffer: Optional[QBuffer] = None
        self._device: Optional[QAudioDevice] = None

        self._format = QAudioFormat()
        self._format.setSampleRate(bank.sample_rate)
        self._format.setChannelCount(1)
        self._format.setSampleFormat(QAudioFormat.SampleFormat.Int16)

        if self.enabled:
            self._open_device()

    def _open_device(self):
        device = QMediaDevices.defaultAudioOutput()
        if device.isNull():
            self._disable("No audio output device found")
            return
        if not device.isFormatSupported(self._format):
            self._disable(f"Audio device '{device.description()}' does not support 16-bit mono PCM")
            return
        self._device = device
        logger.info(f"Feedback tones will play on '{device.description()}'.")

    def _disable(self, reason: str):
        logger.warning(f"{reason}; feedback tones disabled.")
        self.enabled = False

    def play(self, tone_id: int) -> None:
        if not self.enabled or self._device is None:
            return

        self.stop()
        buffer = QBuffer()
        buffer.setData(QByteArray(self.bank.pcm_bytes(tone_id)))
        buffer.open(QIODevice.OpenModeFlag.ReadOnly)

        sink = QAudioSink(self._device, self._format)
        # Both must outlive this call for the sink to keep pulling data.
        self._sink, self._buffer = sink, buffer
        sink.start(buffer)
        if sink.error() != QAudio.Error.NoError:
            self.stop()
            self._disable(f"Tone {tone_id} failed to start ({sink.error()})")

    def stop(self) -> None:
        if self._sink is not None:
            self._sink.stop()
            self._sink = None
        if self._buffer is not None:
            self._buffer.close()
            self._buffer = None
