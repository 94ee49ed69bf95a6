"""
Exports the feedback tones used by DragStyle as WAV files.

Every tone id referenced by a style axis is rendered with the same
synthesis the application uses at runtime, so the files can be auditioned
or handed to a sound designer as a reference.

Usage:
    python scripts/export_tones.py [output_dir] [--duration-ms 60] [--volume 0.4]
"""

import argparse
import logging
import sys
import wave
from pathlib import Path

from dragstyle.core.axis import AXES
from dragstyle.core.tones import DEFAULT_DURATION_MS, DEFAULT_VOLUME, ToneBank, tone_frequency

logger = logging.getLogger("export_tones")


def export_tones(output_dir: Path, duration_ms: int = DEFAULT_DURATION_MS, volume: float = DEFAULT_VOLUME) -> list:
    """
    Writes one mono 16-bit WAV file per tone id.

    Args:
        output_dir (Path): Directory to write into. Created if missing.
        duration_ms (int): Length of each tone.
        volume (float): Peak amplitude between 0.0 and 1.0.

    Returns:
        list: The paths of the written files.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    bank = ToneBank(duration_ms=duration_ms, volume=volume)
    tone_ids = sorted({tone for axis in AXES.values() for tone in axis.tones.values()})

    written = []
    for tone_id in tone_ids:
        path = output_dir / f"{tone_id}.wav"
        with wave.open(str(path), "wb") as wav:
            wav.setnchannels(1)
            wav.setsampwidth(2)
            wav.setframerate(bank.sample_rate)
            wav.writeframes(bank.pcm_bytes(tone_id))
        logger.info(f"Wrote {path} ({tone_frequency(tone_id):.1f} Hz)")
        written.append(path)
    return written


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Export DragStyle feedback tones as WAV files.")
    parser.add_argument("output_dir", nargs="?", default="sounds", type=Path)
    parser.add_argument("--duration-ms", type=int, default=DEFAULT_DURATION_MS)
    parser.add_argument("--volume", type=float, default=DEFAULT_VOLUME)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    try:
        written = export_tones(args.output_dir, args.duration_ms, args.volume)
    except OSError as e:
        logger.error(f"Could not write tones to {args.output_dir}: {e}")
        return 1
    logger.info(f"Exported {len(written)} tones to {args.output_dir}.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
