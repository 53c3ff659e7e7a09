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
Core module for managing banner configuration files
"""

import yaml
import copy
from pathlib import Path
from typing import Dict, Any, Optional, List
from rich.console import Console

from catalog import CATALOG_VARIANTS, build_catalog
from glyphs import GLYPH_HEIGHT
from renderer import DEFAULT_SEPARATOR, POLICIES, POLICY_ERROR


# Possible locations for bannergen.yml
CONFIG_PATHS = [
    Path('/etc/bannergen/bannergen.yml'),
    Path('./bannergen.yml'),
]

DEFAULT_MESSAGE = "OOPS"

DEFAULT_CONFIG: Dict[str, Any] = {
    'banner': {
        'message': DEFAULT_MESSAGE,
        'height': GLYPH_HEIGHT,
        'separator': DEFAULT_SEPARATOR,
        'policy': 'fallback',
    },
    'catalog': {
        'variant': 'map',
        'includeSpace': None,
    },
}

err_console = Console(stderr=True)


def find_config() -> Optional[Path]:
    """Find the first bannergen.yml in the search paths"""
    for path in CONFIG_PATHS:
        if path.exists():
            return path
    return None


def get_default_config() -> Dict[str, Any]:
    """Get a fresh copy of the built-in configuration"""
    return copy.deepcopy(DEFAULT_CONFIG)


class ConfigValidator:
    """Validates banner configuration values"""
    
    @staticmethod
    def validate_height(height: Any) -> bool:
        """Validate render height (1 to glyph height)"""
        if isinstance(height, bool) or not isinstance(height, int):
            return False
        return 1 <= height <= GLYPH_HEIGHT
    
    @staticmethod
    def validate_separator(separator: Any) -> bool:
        """Validate separator is a single line of text"""
        return isinstance(separator, str) and '\n' not in separator
    
    @staticmethod
    def validate_message(message: Any) -> bool:
        """Validate message is a single line of text"""
        return isinstance(message, str) and '\n' not in message
    
    @staticmethod
    def validate_policy(policy: Any) -> bool:
        return policy in POLICIES
    
    @staticmethod
    def validate_variant(variant: Any) -> bool:
        return variant in CATALOG_VARIANTS


class BannerConfig:
    """Banner configuration manager"""
    
    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager
        
        Args:
            config_path: Path to existing config file to load
        """
        self.config_path = config_path
        self.config: Dict[str, Any] = get_default_config()
        self.validator = ConfigValidator()
        
        if config_path:
            self.load(config_path)
    
    def load(self, config_path: Path) -> None:
        """Load configuration from YAML file"""
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
        if config is None:
            config = {}
        if not isinstance(config, dict):
            raise ValueError(f"Configuration must be a mapping: {config_path}")
        self.config = config
        self.config_path = config_path
    
    def save(self, output_path: Optional[Path] = None) -> None:
        """Save configuration to YAML file"""
        path = output_path or self.config_path
        if not path:
            raise ValueError("No output path specified")
        
        # Create backup if file exists
        if path.exists():
            backup_path = path.with_suffix(path.suffix + '.bak')
            path.replace(backup_path)
        
        with open(path, 'w') as f:
            yaml.dump(self.config, f, default_flow_style=False, sort_keys=False)
        self.config_path = path
    
    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation
        
        Args:
            key_path: Path to value (e.g., 'banner.message')
            default: Default value if not found
        """
        keys = key_path.split('.')
        value = self.config
        
        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        
        return value
    
    def set(self, key_path: str, value: Any) -> None:
        """
        Set configuration value using dot notation
        
        Args:
            key_path: Path to value (e.g., 'banner.message')
            value: Value to set
        """
        keys = key_path.split('.')
        config = self.config
        
        # Navigate to the parent dict
        for key in keys[:-1]:
            if not isinstance(config.get(key), dict):
                config[key] = {}
            config = config[key]
        
        config[keys[-1]] = value
    
    def validate(self) -> List[str]:
        """
        Validate configuration
        
        Returns:
            List of error messages (empty if valid)
        """
        errors = []
        
        message = self.get('banner.message', DEFAULT_MESSAGE)
        if not self.validator.validate_message(message):
            errors.append("Invalid banner.message (must be a single line of text)")
        
        height = self.get('banner.height', GLYPH_HEIGHT)
        if not self.validator.validate_height(height):
            errors.append(f"Invalid banner.height (must be 1-{GLYPH_HEIGHT})")
        
        if not self.validator.validate_separator(self.get('banner.separator', DEFAULT_SEPARATOR)):
            errors.append("Invalid banner.separator (must be a single line of text)")
        
        policy = self.get('banner.policy', 'fallback')
        if not self.validator.validate_policy(policy):
            errors.append(f"Invalid banner.policy (must be one of: {', '.join(POLICIES)})")
        
        variant = self.get('catalog.variant', 'map')
        if not self.validator.validate_variant(variant):
            errors.append(f"Invalid catalog.variant (must be one of: {', '.join(CATALOG_VARIANTS)})")
        
        include_space = self.get('catalog.includeSpace')
        if include_space is not None and not isinstance(include_space, bool):
            errors.append("Invalid catalog.includeSpace (must be true, false or empty)")
        
        # Strict rendering needs every message character in the catalog
        if (not errors) and policy == POLICY_ERROR:
            catalog = build_catalog(variant, include_space)
            missing = sorted({c for c in message if c not in catalog})
            if missing:
                errors.append(f"banner.message has unsupported characters: {''.join(missing)!r}")
        
        return errors
    
    def get_summary(self) -> Dict[str, Any]:
        """Get configuration summary"""
        return {
            'source': str(self.config_path) if self.config_path else 'built-in defaults',
            'message': self.get('banner.message', DEFAULT_MESSAGE),
            'height': self.get('banner.height', GLYPH_HEIGHT),
            'separator': self.get('banner.separator', DEFAULT_SEPARATOR),
            'policy': self.get('banner.policy', 'fallback'),
            'variant': self.get('catalog.variant', 'map'),
            'include_space': self.get('catalog.includeSpace'),
        }


def load_config(config_path: Optional[Path] = None) -> BannerConfig:
    """
    Load banner configuration
    
    An explicit path must exist and parse. Otherwise the search paths are
    tried and the built-in defaults are used if none is usable.
    """
    if config_path:
        return BannerConfig(config_path)
    
    found = find_config()
    if found:
        try:
            return BannerConfig(found)
        except (OSError, ValueError, yaml.YAMLError) as e:
            err_console.print(f"[yellow]Warning:[/yellow] Could not load {found}: {e}")
    
    return BannerConfig()
