# -*- coding: utf-8 -*-
"""
src/dragstyle/utils/clipboard_manager.py

Exports memo text to the system clipboard through pyperclip.
"""

import logging

import pyperclip

logger = logging.getLogger(__name__)

CLIPBOARD_HINT = "On Linux, install 'xclip', 'xsel' or 'wl-clipboard' to enable copying."


def copy_to_clipboard(text: str) -> bool:
    """
    Places `text` on the system clipboard.

    Args:
        text (str): The plain text of the memo.

    Returns:
        bool: False if no clipboard backend is available; the failure is
            logged rather than raised so the editor keeps running.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.warning(f"Clipboard unavailable ({e}). {CLIPBOARD_HINT}")
        return False
    logger.info(f"Copied {len(text)} characters to the clipboard.")
    return True


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    sample = "Drag to restyle this memo"
    if copy_to_clipboard(sample):
        pasted = pyperclip.paste()
        print(f"Clipboard now holds: {pasted!r} ({'matches' if pasted == sample else 'MISMATCH'})")
    else:
        print("Copy failed; see the log above.")
