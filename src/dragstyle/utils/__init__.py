# -*- coding: utf-8 -*-
"""
The Utilities Package for DragStyle.

Helper modules that support the application but are not part of the style
model itself, such as clipboard access.
"""
