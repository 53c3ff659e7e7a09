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

Banner Renderer
Interleaves glyph rows across a message, one output line per glyph row
"""

from typing import List, Optional

from rich.console import Console

from catalog import BannerError, Glyph, PatternCatalog
from glyphs import BLANK_WIDTH, GLYPH_HEIGHT, blank_glyph


# Spacing appended after every character's row segment
DEFAULT_SEPARATOR = "  "

# Unknown character policies
POLICY_FALLBACK = 'fallback'
POLICY_ERROR = 'error'

POLICIES = {
    POLICY_FALLBACK: 'Substitute the space glyph (or a blank glyph) for unknown characters',
    POLICY_ERROR: 'Fail the render on the first unknown character',
}


class RenderError(BannerError):
    """Raised when a banner cannot be rendered"""


class UnsupportedCharacterError(RenderError):
    """Raised when a message character has no glyph in the catalog"""
    
    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"Unsupported character {character!r} at position {position}")


def resolve_glyph(character: str, position: int, catalog: PatternCatalog,
                  height: int, policy: str) -> Glyph:
    """
    Get the glyph to draw for one message character
    
    Args:
        character: Message character
        position: Index of the character in the message
        catalog: Pattern catalog
        height: Render height
        policy: Unknown character policy
    
    Returns:
        Glyph rows for the character
    """
    glyph = catalog.lookup(character)
    if glyph is not None:
        return glyph
    
    if policy == POLICY_ERROR:
        raise UnsupportedCharacterError(character, position)
    
    space = catalog.lookup(' ')
    if space is not None and len(space) >= height:
        return space
    return blank_glyph(height, BLANK_WIDTH)


def render(message: str, catalog: PatternCatalog, height: int = GLYPH_HEIGHT,
           separator: str = DEFAULT_SEPARATOR, policy: str = POLICY_FALLBACK) -> List[str]:
    """
    Render a message as banner lines
    
    Args:
        message: Characters to render (may be empty)
        catalog: Pattern catalog to draw glyphs from
        height: Number of glyph rows to render
        separator: Spacing appended after every character's row
        policy: Unknown character policy ('fallback' or 'error')
    
    Returns:
        Exactly `height` lines, top row first
    """
    if isinstance(height, bool) or not isinstance(height, int) or height < 1:
        raise RenderError(f"Height must be a positive integer, got {height!r}")
    if policy not in POLICIES:
        raise RenderError(f"Unknown policy: {policy}")
    
    glyphs = [resolve_glyph(character, position, catalog, height, policy)
              for position, character in enumerate(message)]
    
    for position, glyph in enumerate(glyphs):
        if len(glyph) < height:
            raise RenderError(f"Glyph for {message[position]!r} has {len(glyph)} rows, "
                              f"cannot render {height}")
    
    lines = []
    for row in range(height):
        line = []
        for glyph in glyphs:
            line.append(glyph[row])
            line.append(separator)
        lines.append(''.join(line))
    
    return lines


def format_banner(lines: List[str]) -> str:
    """Join banner lines into a single block of text"""
    return "\n".join(lines)


class BannerRenderer:
    """Renders messages through a fixed catalog and layout"""
    
    def __init__(self, catalog: PatternCatalog, height: Optional[int] = None,
                 separator: str = DEFAULT_SEPARATOR, policy: str = POLICY_FALLBACK):
        """
        Initialize banner renderer
        
        Args:
            catalog: Pattern catalog
            height: Rows per glyph (defaults to the catalog height)
            separator: Spacing appended after every character's row
            policy: Unknown character policy
        """
        self.catalog = catalog
        self.height = height if height is not None else (catalog.height or GLYPH_HEIGHT)
        self.separator = separator
        self.policy = policy
    
    def render(self, message: str) -> List[str]:
        return render(message, self.catalog, self.height, self.separator, self.policy)
    
    def format(self, message: str) -> str:
        return format_banner(self.render(message))
    
    def display(self, message: str, console: Console) -> None:
        """Write the banner to a console, one line per glyph row"""
        for line in self.render(message):
            console.out(line, highlight=False)
