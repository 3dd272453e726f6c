"""
iconbuild - SVG icon module generator

Turns a directory of raw SVG icons, grouped by theme, into generated Python
modules: one module per icon variant, an index re-exporting every icon and a
manifest of the icon names available per theme.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

__version__ = "1.0.0"
__author__ = "NeatCode Labs"
__email__ = "neatcodelabs@gmail.com"
