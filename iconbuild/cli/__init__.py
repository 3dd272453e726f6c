"""
Command-line interface for iconbuild.
"""

# SPDX-License-Identifier: GPL-3.0-or-later
