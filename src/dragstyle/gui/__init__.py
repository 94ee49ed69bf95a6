# -*- coding: utf-8 -*-
"""
The GUI Package for DragStyle.

This package contains all user interface components, built using the PyQt6
framework: the memo window, the floating style menu, the QTextEdit adapter
that serves as the document engine, and the Qt Multimedia tone player.
"""
