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
bannergen Package
Glyph catalog and banner renderer for the OOPS Banner Generator
"""

__version__ = "1.1.0"
__author__ = "Bryan Biedenkapp N2PLL"
__license__ = "GPL-2.0-only"

from catalog import PatternCatalog, ListPatternCatalog, MapPatternCatalog, build_catalog
from config_manager import BannerConfig, ConfigValidator
from renderer import BannerRenderer, UnsupportedCharacterError, render

__all__ = [
    'PatternCatalog',
    'ListPatternCatalog',
    'MapPatternCatalog',
    'build_catalog',
    'BannerConfig',
    'ConfigValidator',
    'BannerRenderer',
    'UnsupportedCharacterError',
    'render',
]
