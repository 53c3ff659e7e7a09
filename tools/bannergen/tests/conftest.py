"""
Pytest configuration and shared fixtures for bannergen tests.
"""
import io
from pathlib import Path

import pytest
from rich.console import Console

import config_manager
import oopsbanner
from catalog import build_catalog


@pytest.fixture
def map_catalog():
    """Catalog without the space glyph."""
    return build_catalog('map')


@pytest.fixture
def list_catalog():
    """Catalog with the space glyph."""
    return build_catalog('list')


@pytest.fixture(params=['list', 'map'])
def catalog(request):
    """Each catalog variant in turn."""
    return build_catalog(request.param)


class CapturedConsole:
    """Wide plain-text consoles writing into buffers."""

    def __init__(self):
        self.out_buffer = io.StringIO()
        self.err_buffer = io.StringIO()
        self.out = Console(file=self.out_buffer, width=200, color_system=None)
        self.err = Console(file=self.err_buffer, width=200, color_system=None)

    @property
    def stdout(self) -> str:
        return self.out_buffer.getvalue()

    @property
    def stderr(self) -> str:
        return self.err_buffer.getvalue()


@pytest.fixture
def captured(monkeypatch):
    """Redirect the CLI consoles into buffers."""
    consoles = CapturedConsole()
    monkeypatch.setattr(oopsbanner, 'console', consoles.out)
    monkeypatch.setattr(oopsbanner, 'err_console', consoles.err)
    monkeypatch.setattr(config_manager, 'err_console', consoles.err)
    return consoles


@pytest.fixture
def no_config_search(monkeypatch, tmp_path):
    """Point the configuration search paths at an empty directory."""
    monkeypatch.setattr(config_manager, 'CONFIG_PATHS', [tmp_path / 'missing.yml'])
    return tmp_path


@pytest.fixture
def config_file(tmp_path) -> Path:
    """A valid configuration file."""
    path = tmp_path / 'bannergen.yml'
    path.write_text(
        "banner:\n"
        "  message: SOP\n"
        "  height: 7\n"
        "  separator: '|'\n"
        "  policy: fallback\n"
        "catalog:\n"
        "  variant: list\n"
        "  includeSpace: null\n"
    )
    return path
