#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-2.0-only
#/**
#* OOPS Banner Generator
#* GPLv2 Open Source. Use is subject to license terms.
#* DO NOT ALTER OR REMOVE COPYRIGHT NOTICES OR THIS FILE HEADER.
#*
#*/
#/*
#*   Copyright (C) 2026 by Bryan Biedenkapp N2PLL
#*
#*   This program is free software; you can redistribute it and/or modify
#*   it under the terms of the GNU General Public License as published by
#*   the Free Software Foundation; either version 2 of the License, or
#*   (at your option) any later version.
#*
#*   This program is distributed in the hope that it will be useful,
#*   but WITHOUT ANY WARRANTY; without even the implied warranty of
#*   MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#*   GNU General Public License for more details.
#*
#*   You should have received a copy of the GNU General Public License
#*   along with this program; if not, write to the Free Software
#*   Foundation, Inc., 675 Mass Ave, Cambridge, MA 02139, USA.
#*/
"""
bannergen - OOPS Banner Generator

Character set definition
Fixed 7-row glyph patterns shared by every catalog variant
"""

from typing import Dict, Tuple


# Rows per glyph
GLYPH_HEIGHT = 7

# Width of the blank glyph used for unknown characters
BLANK_WIDTH = 3

# Row widths differ between characters and are kept exactly as drawn
CHARACTER_SET: Dict[str, Tuple[str, ...]] = {
    'O': (
        " *** ",
        "**  **",
        "**  **",
        "**  **",
        "**  **",
        "**  **",
        " *** ",
    ),
    'P': (
        "****** ",
        "**  **",
        "**  **",
        "****** ",
        "**     ",
        "**     ",
        "**     ",
    ),
    'S': (
        "*****",
        "**   ",
        "**   ",
        " *** ",
        "   **",
        "   **",
        "*****",
    ),
}

# Only registered by the extended character set
SPACE_GLYPH: Tuple[str, ...] = ("   ",) * GLYPH_HEIGHT


def blank_glyph(height: int = GLYPH_HEIGHT, width: int = BLANK_WIDTH) -> Tuple[str, ...]:
    """Build a glyph of blank rows"""
    return (" " * width,) * height


def get_character_set(include_space: bool = False) -> Dict[str, Tuple[str, ...]]:
    """
    Get a copy of the character set definition
    
    Args:
        include_space: Also register the space glyph (extended character set)
    
    Returns:
        Mapping of character to glyph rows
    """
    charset = dict(CHARACTER_SET)
    if include_space:
        charset[' '] = SPACE_GLYPH
    return charset
