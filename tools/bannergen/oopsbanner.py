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

Command-line interface for rendering banners and managing configurations
"""

import argparse
import sys
from pathlib import Path
from typing import Optional
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from catalog import CATALOG_VARIANTS, build_catalog
from config_manager import BannerConfig, load_config
from renderer import BannerRenderer, DEFAULT_SEPARATOR, POLICIES
from version import __VER__

console = Console()
err_console = Console(stderr=True)


def verbose(args, message: str) -> None:
    """Print a diagnostic line when running verbose"""
    if getattr(args, 'verbose', False):
        err_console.print(f"[dim]{escape(message)}[/dim]")


def build_renderer(config: BannerConfig) -> BannerRenderer:
    """Create a renderer from configuration"""
    catalog = build_catalog(config.get('catalog.variant', 'map'),
                            config.get('catalog.includeSpace'))
    return BannerRenderer(
        catalog,
        height=config.get('banner.height', catalog.height),
        separator=config.get('banner.separator', DEFAULT_SEPARATOR),
        policy=config.get('banner.policy', 'fallback'),
    )


def cmd_render(args):
    """Render banner to the console"""
    try:
        if getattr(args, 'builtin', False):
            config = BannerConfig()
        else:
            config = load_config(Path(args.config) if getattr(args, 'config', None) else None)
        
        # Apply command line overrides
        if getattr(args, 'message', None) is not None:
            config.set('banner.message', args.message)
        if getattr(args, 'separator', None) is not None:
            config.set('banner.separator', args.separator)
        if getattr(args, 'height', None) is not None:
            config.set('banner.height', args.height)
        if getattr(args, 'policy', None) is not None:
            config.set('banner.policy', args.policy)
        if getattr(args, 'variant', None) is not None:
            config.set('catalog.variant', args.variant)
        if getattr(args, 'include_space', None) is not None:
            config.set('catalog.includeSpace', args.include_space)
        
        errors = config.validate()
        if errors:
            err_console.print(f"[red]✗[/red] Configuration has {len(errors)} error(s):\n")
            for error in errors:
                err_console.print(f"  [red]•[/red] {error}")
            sys.exit(1)
        
        summary = config.get_summary()
        verbose(args, f"config: {summary['source']}")
        verbose(args, f"catalog: {summary['variant']}, height: {summary['height']}, "
                      f"separator: {summary['separator']!r}, policy: {summary['policy']}")
        
        renderer = build_renderer(config)
        renderer.display(summary['message'], console)
    
    except FileNotFoundError as e:
        err_console.print(f"[red]Error:[/red] File not found: {e.filename}")
        sys.exit(1)
    except OSError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except (ValueError, yaml.YAMLError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


def cmd_glyphs(args):
    """List catalog glyphs"""
    try:
        catalog = build_catalog(args.variant, args.include_space)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    
    table = Table(title=f"Glyphs ({catalog.variant} catalog)")
    table.add_column("Character", style="cyan")
    table.add_column("Height", style="yellow")
    table.add_column("Row Widths", style="yellow")
    
    for character, glyph in catalog.items():
        table.add_row(repr(character), str(len(glyph)), ", ".join(str(len(row)) for row in glyph))
    
    console.print(table)


def cmd_variants(args):
    """List catalog variants"""
    table = Table(title="Catalog Variants")
    table.add_column("Variant", style="cyan")
    table.add_column("Description", style="yellow")
    
    for name in sorted(CATALOG_VARIANTS.keys()):
        table.add_row(name, CATALOG_VARIANTS[name])
    
    console.print(table)


def cmd_config_create(args):
    """Create new configuration with defaults"""
    try:
        config = BannerConfig()
        
        if args.message is not None:
            config.set('banner.message', args.message)
        if args.policy is not None:
            config.set('banner.policy', args.policy)
        if args.variant is not None:
            config.set('catalog.variant', args.variant)
        
        errors = config.validate()
        if errors:
            err_console.print(f"[red]✗[/red] Configuration has {len(errors)} error(s):\n")
            for error in errors:
                err_console.print(f"  [red]•[/red] {error}")
            sys.exit(1)
        
        output = Path(args.output)
        config.save(output)
        console.print(f"[green]✓[/green] Configuration created: {output}")
    
    except (OSError, ValueError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


def cmd_config_validate(args):
    """Validate configuration file"""
    try:
        config = BannerConfig(Path(args.config))
        errors = config.validate()
        
        if errors:
            console.print(f"[red]✗[/red] Configuration has {len(errors)} error(s):\n")
            for error in errors:
                console.print(f"  [red]•[/red] {error}")
            sys.exit(1)
        else:
            console.print(f"[green]✓[/green] Configuration is valid: {args.config}")
            
            # Show summary if requested
            if args.summary:
                summary = config.get_summary()
                table = Table(title="Configuration Summary")
                table.add_column("Parameter", style="cyan")
                table.add_column("Value", style="yellow")
                
                table.add_row("Message", summary['message'])
                table.add_row("Height", str(summary['height']))
                table.add_row("Separator", repr(summary['separator']))
                table.add_row("Policy", summary['policy'])
                table.add_row("Catalog", summary['variant'])
                include_space = summary['include_space']
                table.add_row("Space Glyph", "Default" if include_space is None
                              else ("Yes" if include_space else "No"))
                
                console.print()
                console.print(table)
    
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {args.config}")
        sys.exit(1)
    except OSError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except (ValueError, yaml.YAMLError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


def cmd_config_edit(args):
    """Edit configuration value"""
    try:
        config_path = Path(args.config)
        config = BannerConfig(config_path)
        
        # Get current value
        current = config.get(args.key)
        console.print(f"Current value of '{args.key}': {current!r}")
        
        # Try to preserve type
        if isinstance(current, bool):
            new_value = args.value.lower() in ('true', '1', 'yes', 'on')
        elif isinstance(current, int):
            new_value = int(args.value)
        elif isinstance(current, float):
            new_value = float(args.value)
        elif current is None:
            new_value = yaml.safe_load(args.value)
        else:
            new_value = args.value
        
        config.set(args.key, new_value)
        config.save(config_path)
        
        console.print(f"[green]✓[/green] Updated '{args.key}' to: {new_value!r}")
        
        # Validate after edit
        errors = config.validate()
        if errors:
            console.print("\n[yellow]Validation warnings after edit:[/yellow]")
            for error in errors:
                console.print(f"  • {error}")
    
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {args.config}")
        sys.exit(1)
    except OSError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except (ValueError, yaml.YAMLError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


def main(argv: Optional[list] = None):
    description = f"""
OOPS Banner Generator {__VER__}

Prints the OOPS banner when run without a command"""
    
    parser = argparse.ArgumentParser(
        prog='oopsbanner',
        description=description,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__VER__}")
    parser.add_argument('--verbose', '-v', action='store_true', help='Print diagnostics to stderr')
    
    subparsers = parser.add_subparsers(dest='command', help='Commands')
    
    # render command
    render_parser = subparsers.add_parser('render', help='Render a banner')
    render_parser.add_argument('--config', '-c', help='Configuration file path')
    render_parser.add_argument('--message', '-m', help='Message to render')
    render_parser.add_argument('--separator', help='Spacing after each character')
    render_parser.add_argument('--height', type=int, help='Rows per glyph')
    render_parser.add_argument('--policy', choices=list(POLICIES.keys()),
                               help='Unknown character policy')
    render_parser.add_argument('--variant', choices=list(CATALOG_VARIANTS.keys()),
                               help='Catalog variant')
    render_parser.add_argument('--include-space', dest='include_space', action='store_true',
                               help='Register the space glyph')
    render_parser.add_argument('--no-space', dest='include_space', action='store_false',
                               help='Do not register the space glyph')
    render_parser.set_defaults(func=cmd_render, include_space=None)
    
    # glyphs command
    glyphs_parser = subparsers.add_parser('glyphs', help='List catalog glyphs')
    glyphs_parser.add_argument('--variant', choices=list(CATALOG_VARIANTS.keys()), default='map',
                               help='Catalog variant (default: map)')
    glyphs_parser.add_argument('--include-space', dest='include_space', action='store_true',
                               help='Register the space glyph')
    glyphs_parser.set_defaults(func=cmd_glyphs, include_space=None)
    
    # variants command
    variants_parser = subparsers.add_parser('variants', help='List catalog variants')
    variants_parser.set_defaults(func=cmd_variants)
    
    # config commands
    config_parser = subparsers.add_parser('config', help='Configuration management')
    config_sub = config_parser.add_subparsers(dest='config_command', help='Config commands')
    
    # config create
    create_parser = config_sub.add_parser('create', help='Create configuration with defaults')
    create_parser.add_argument('--output', '-o', required=True, help='Output file path')
    create_parser.add_argument('--message', help='Banner message')
    create_parser.add_argument('--policy', choices=list(POLICIES.keys()),
                               help='Unknown character policy')
    create_parser.add_argument('--variant', choices=list(CATALOG_VARIANTS.keys()),
                               help='Catalog variant')
    create_parser.set_defaults(func=cmd_config_create)
    
    # config validate
    validate_parser = config_sub.add_parser('validate', help='Validate configuration')
    validate_parser.add_argument('config', help='Configuration file path')
    validate_parser.add_argument('--summary', '-s', action='store_true', help='Show summary')
    validate_parser.set_defaults(func=cmd_config_validate)
    
    # config edit
    edit_parser = config_sub.add_parser('edit', help='Edit configuration value')
    edit_parser.add_argument('config', help='Configuration file path')
    edit_parser.add_argument('key', help='Configuration key (dot notation)')
    edit_parser.add_argument('value', help='New value')
    edit_parser.set_defaults(func=cmd_config_edit)
    
    args = parser.parse_args(argv)
    
    if args.command is None:
        # Default run ignores configuration files
        args.builtin = True
        cmd_render(args)
        return
    
    if hasattr(args, 'func'):
        args.func(args)
    else:
        config_parser.print_help()


if __name__ == '__main__':
    main()
