"""
Banner configuration tests.
"""
from pathlib import Path

import pytest
import yaml

import config_manager
from config_manager import (
    DEFAULT_CONFIG, BannerConfig, ConfigValidator, find_config, get_default_config, load_config,
)


class TestConfigValidator:
    """Test individual value checks."""

    @pytest.mark.parametrize("height,valid", [(1, True), (7, True), (0, False), (8, False),
                                              (True, False), ("7", False)])
    def test_height(self, height, valid):
        assert ConfigValidator.validate_height(height) is valid

    def test_separator(self):
        assert ConfigValidator.validate_separator("  ")
        assert ConfigValidator.validate_separator("")
        assert not ConfigValidator.validate_separator("a\nb")
        assert not ConfigValidator.validate_separator(2)

    def test_message(self):
        assert ConfigValidator.validate_message("OOPS")
        assert ConfigValidator.validate_message("")
        assert not ConfigValidator.validate_message(None)

    def test_policy(self):
        assert ConfigValidator.validate_policy('fallback')
        assert ConfigValidator.validate_policy('error')
        assert not ConfigValidator.validate_policy('recurse')

    def test_variant(self):
        assert ConfigValidator.validate_variant('list')
        assert not ConfigValidator.validate_variant('hash')


class TestBannerConfig:
    """Test configuration access."""

    def test_defaults(self):
        config = BannerConfig()
        assert config.get('banner.message') == "OOPS"
        assert config.get('banner.height') == 7
        assert config.get('banner.separator') == "  "
        assert config.get('banner.policy') == 'fallback'
        assert config.get('catalog.variant') == 'map'
        assert config.get('catalog.includeSpace') is None
        assert config.validate() == []

    def test_default_config_is_a_copy(self):
        config = get_default_config()
        config['banner']['message'] = "SOS"
        assert DEFAULT_CONFIG['banner']['message'] == "OOPS"

    def test_get_missing(self):
        config = BannerConfig()
        assert config.get('banner.colour') is None
        assert config.get('banner.message.length', 'n/a') == 'n/a'

    def test_set_creates_sections(self):
        config = BannerConfig()
        config.set('output.stream', 'stdout')
        assert config.get('output.stream') == 'stdout'

    def test_set_replaces_scalar_section(self):
        config = BannerConfig()
        config.set('banner.message.text', 'X')
        assert config.get('banner.message') == {'text': 'X'}

    def test_load(self, config_file):
        config = BannerConfig(config_file)
        assert config.config_path == config_file
        assert config.get('banner.message') == "SOP"
        assert config.get('banner.separator') == "|"
        assert config.get('catalog.variant') == 'list'

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            BannerConfig(tmp_path / 'nope.yml')

    def test_load_empty_file(self, tmp_path):
        path = tmp_path / 'empty.yml'
        path.write_text("")
        config = BannerConfig(path)
        assert config.config == {}
        assert config.get('banner.message', 'OOPS') == 'OOPS'
        assert config.validate() == []

    def test_load_non_mapping(self, tmp_path):
        path = tmp_path / 'list.yml'
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="mapping"):
            BannerConfig(path)

    def test_save_round_trip(self, tmp_path):
        path = tmp_path / 'out.yml'
        config = BannerConfig()
        config.set('banner.message', 'SOS')
        config.save(path)
        assert yaml.safe_load(path.read_text())['banner']['message'] == 'SOS'
        assert BannerConfig(path).get('banner.message') == 'SOS'

    def test_save_creates_backup(self, config_file):
        config = BannerConfig(config_file)
        original = config_file.read_text()
        config.set('banner.height', 3)
        config.save()
        backup = config_file.with_suffix('.yml.bak')
        assert backup.read_text() == original
        assert BannerConfig(config_file).get('banner.height') == 3

    def test_save_without_path(self):
        with pytest.raises(ValueError, match="No output path"):
            BannerConfig().save()

    def test_summary(self, config_file):
        summary = BannerConfig(config_file).get_summary()
        assert summary['source'] == str(config_file)
        assert summary['message'] == 'SOP'
        assert summary['variant'] == 'list'
        assert BannerConfig().get_summary()['source'] == 'built-in defaults'


class TestValidate:
    """Test whole-configuration validation."""

    def test_invalid_values(self):
        config = BannerConfig()
        config.set('banner.height', 12)
        config.set('banner.policy', 'ignore')
        config.set('catalog.variant', 'tree')
        config.set('catalog.includeSpace', 'yes')
        errors = config.validate()
        assert len(errors) == 4
        assert any('banner.height' in e for e in errors)
        assert any('banner.policy' in e for e in errors)
        assert any('catalog.variant' in e for e in errors)
        assert any('catalog.includeSpace' in e for e in errors)

    def test_multiline_message(self):
        config = BannerConfig()
        config.set('banner.message', "OO\nPS")
        assert config.validate() == ["Invalid banner.message (must be a single line of text)"]

    def test_error_policy_checks_message(self):
        config = BannerConfig()
        config.set('banner.policy', 'error')
        config.set('banner.message', 'OOPS!?')
        errors = config.validate()
        assert len(errors) == 1
        assert "'!?'" in errors[0]

    def test_error_policy_with_space_glyph(self):
        config = BannerConfig()
        config.set('banner.policy', 'error')
        config.set('banner.message', 'OOPS OOPS')
        assert len(config.validate()) == 1
        config.set('catalog.includeSpace', True)
        assert config.validate() == []

    def test_fallback_policy_allows_any_message(self):
        config = BannerConfig()
        config.set('banner.message', 'hello!')
        assert config.validate() == []


class TestLoadConfig:
    """Test configuration discovery."""

    def test_defaults_when_nothing_found(self, no_config_search):
        assert find_config() is None
        config = load_config()
        assert config.config_path is None
        assert config.get('banner.message') == 'OOPS'

    def test_search_path(self, monkeypatch, config_file):
        monkeypatch.setattr(config_manager, 'CONFIG_PATHS', [config_file.parent / 'x.yml', config_file])
        assert find_config() == config_file
        assert load_config().get('banner.message') == 'SOP'

    def test_broken_search_file_falls_back(self, monkeypatch, tmp_path, captured):
        path = tmp_path / 'bannergen.yml'
        path.write_text("banner: [unclosed\n")
        monkeypatch.setattr(config_manager, 'CONFIG_PATHS', [path])
        config = load_config()
        assert config.config_path is None
        assert "Warning:" in captured.stderr
        assert str(path) in captured.stderr

    def test_search_paths_outside_install_dir(self):
        module_dir = Path(config_manager.__file__).parent
        assert all(path.parent != module_dir for path in config_manager.CONFIG_PATHS)

    def test_explicit_path_must_exist(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / 'missing.yml')

    def test_explicit_broken_path_raises(self, tmp_path):
        path = tmp_path / 'broken.yml'
        path.write_text("banner: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            load_config(path)
