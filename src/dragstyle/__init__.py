# -*- coding: utf-8 -*-
"""
DragStyle Application Package.

This package contains the styled-text segment model, the gesture controllers
that turn drags into discrete weight and size steps, and the PyQt6 memo
editor built on top of them.

The `core` sub-package has no widget toolkit dependency beyond numpy and can
be used on its own; `gui` and `app` provide the desktop front end.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
