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

Pattern Catalog
Character to glyph lookup tables, built once and read-only afterwards
"""

from typing import Dict, Iterator, List, Optional, Tuple

from glyphs import get_character_set


Glyph = Tuple[str, ...]


class BannerError(ValueError):
    """Base class for banner generation errors"""


class CatalogError(BannerError):
    """Raised when a catalog cannot be built"""


class GlyphHeightError(CatalogError):
    """Raised when glyphs of different heights are mixed in one catalog"""
    
    def __init__(self, character: str, height: int, expected: int):
        self.character = character
        self.height = height
        self.expected = expected
        super().__init__(f"Glyph for {character!r} has {height} rows, expected {expected}")


class CharacterPattern:
    """Represents a single character and its glyph rows"""
    
    def __init__(self, character: str, pattern: Glyph):
        """
        Initialize character pattern
        
        Args:
            character: Single character this pattern draws
            pattern: Glyph rows, top row first
        """
        if len(character) != 1:
            raise CatalogError(f"Pattern key must be a single character, got {character!r}")
        if not pattern:
            raise CatalogError(f"Glyph for {character!r} has no rows")
        self.character = character
        self.pattern = tuple(pattern)
    
    @property
    def height(self) -> int:
        return len(self.pattern)
    
    @property
    def widths(self) -> List[int]:
        return [len(row) for row in self.pattern]
    
    def __repr__(self) -> str:
        return f"CharacterPattern({self.character!r}, height={self.height})"


class PatternCatalog:
    """Base class for character pattern catalogs"""
    
    variant = ''
    
    def __init__(self, patterns: List[CharacterPattern]):
        self._height = self._check_heights(patterns)
    
    @staticmethod
    def _check_heights(patterns: List[CharacterPattern]) -> int:
        """Reject catalogs mixing glyph heights, returning the shared height"""
        if not patterns:
            return 0
        expected = patterns[0].height
        for entry in patterns[1:]:
            if entry.height != expected:
                raise GlyphHeightError(entry.character, entry.height, expected)
        return expected
    
    @property
    def height(self) -> int:
        """Row count shared by every glyph in the catalog"""
        return self._height
    
    def lookup(self, character: str) -> Optional[Glyph]:
        """
        Get the glyph for a character
        
        Args:
            character: Character to look up (exact match)
        
        Returns:
            Glyph rows, or None if the character is not in the catalog
        """
        raise NotImplementedError
    
    def characters(self) -> List[str]:
        """Characters registered in the catalog, in registration order"""
        raise NotImplementedError
    
    def items(self) -> Iterator[Tuple[str, Glyph]]:
        for character in self.characters():
            yield character, self.lookup(character)
    
    def __contains__(self, character: object) -> bool:
        return isinstance(character, str) and self.lookup(character) is not None
    
    def __len__(self) -> int:
        return len(self.characters())
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}({''.join(self.characters())!r}, height={self.height})"


class ListPatternCatalog(PatternCatalog):
    """Catalog stored as a linear list of character patterns"""
    
    variant = 'list'
    
    def __init__(self, patterns: List[CharacterPattern]):
        super().__init__(patterns)
        self._entries: Tuple[CharacterPattern, ...] = tuple(patterns)
    
    def lookup(self, character: str) -> Optional[Glyph]:
        for entry in self._entries:
            if entry.character == character:
                return entry.pattern
        return None
    
    def characters(self) -> List[str]:
        return [entry.character for entry in self._entries]


class MapPatternCatalog(PatternCatalog):
    """Catalog stored as a direct character to glyph mapping"""
    
    variant = 'map'
    
    def __init__(self, patterns: List[CharacterPattern]):
        super().__init__(patterns)
        self._patterns: Dict[str, Glyph] = {entry.character: entry.pattern for entry in patterns}
    
    def lookup(self, character: str) -> Optional[Glyph]:
        return self._patterns.get(character)
    
    def characters(self) -> List[str]:
        return list(self._patterns)


# Catalog classes by variant name
CATALOG_CLASSES = {
    'list': ListPatternCatalog,
    'map': MapPatternCatalog,
}

# Whether the variant registers the space glyph unless told otherwise
SPACE_DEFAULTS = {
    'list': True,
    'map': False,
}

# Available catalog variants
CATALOG_VARIANTS = {
    'list': 'Linear list of character patterns (includes space)',
    'map': 'Direct character to glyph mapping',
}


def build_catalog(variant: str = 'map', include_space: Optional[bool] = None) -> PatternCatalog:
    """
    Build a populated pattern catalog
    
    Args:
        variant: Storage variant ('list' or 'map')
        include_space: Register the space glyph; None uses the variant default
    
    Returns:
        Catalog with entries for 'O', 'P', 'S' (and ' ' when extended)
    """
    if variant not in CATALOG_CLASSES:
        raise CatalogError(f"Unknown catalog variant: {variant}")
    
    if include_space is None:
        include_space = SPACE_DEFAULTS[variant]
    
    return catalog_from_mapping(get_character_set(include_space), variant)


def catalog_from_mapping(mapping: Dict[str, Glyph], variant: str = 'map') -> PatternCatalog:
    """
    Build a catalog from an arbitrary character to glyph mapping
    
    Raises:
        GlyphHeightError: if the glyphs do not all share one height
    """
    if variant not in CATALOG_CLASSES:
        raise CatalogError(f"Unknown catalog variant: {variant}")
    patterns = [CharacterPattern(character, rows) for character, rows in mapping.items()]
    return CATALOG_CLASSES[variant](patterns)