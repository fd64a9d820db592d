"""
Tests for settings loading — vimforge.yml parsing and validation.
"""

import textwrap
from pathlib import Path

import pytest

from vimforge.core.config.loader import ConfigError, find_settings_file, load_settings
from vimforge.core.models import Dialect, PluginManager, Settings
from vimforge.core.use_cases.config_check import check_config


class TestFindSettingsFile:
    def test_finds_in_directory(self, settings_file: Path):
        assert find_settings_file(settings_file.parent) == settings_file

    def test_walks_up(self, settings_file: Path):
        nested = settings_file.parent / "a" / "b"
        nested.mkdir(parents=True)
        assert find_settings_file(nested) == settings_file

    def test_none_when_absent(self, isolated_cwd: Path):
        assert find_settings_file() is None


class TestLoadSettings:
    def test_full_file(self, settings_file: Path):
        s = load_settings(settings_file)
        assert s.defaults.dialect is Dialect.VIMSCRIPT
        assert s.defaults.lua_manager is PluginManager.PACKER
        assert s.defaults.vimscript_manager is PluginManager.DEIN
        assert s.defaults.scope == "o"
        assert s.web.port == 9001

    def test_defaults_when_nothing_found(self, isolated_cwd: Path):
        s = load_settings()
        assert s == Settings()
        assert s.defaults.dialect is Dialect.LUA
        assert s.defaults.manager_for(Dialect.LUA) is PluginManager.LAZY
        assert s.defaults.manager_for(Dialect.VIMSCRIPT) is PluginManager.VIM_PLUG

    def test_partial_file(self, tmp_path: Path):
        path = tmp_path / "vimforge.yml"
        path.write_text("web:\n  port: 8123\n")
        s = load_settings(path)
        assert s.web.port == 8123
        assert s.defaults.dialect is Dialect.LUA

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "vimforge.yml"
        path.write_text("")
        assert load_settings(path) == Settings()

    def test_explicit_missing_path(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "vimforge.yml"
        path.write_text("defaults: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "vimforge.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_settings(path)

    def test_manager_from_wrong_dialect(self, tmp_path: Path):
        path = tmp_path / "vimforge.yml"
        path.write_text("defaults:\n  lua_manager: vim-plug\n")
        with pytest.raises(ConfigError, match="not a lua plugin manager"):
            load_settings(path)

    def test_unknown_key(self, tmp_path: Path):
        path = tmp_path / "vimforge.yml"
        path.write_text("defaults:\n  colour: blue\n")
        with pytest.raises(ConfigError, match="Invalid settings"):
            load_settings(path)


class TestCheckConfig:
    def test_valid(self, settings_file: Path):
        result = check_config(settings_file)
        assert result.valid
        assert result.errors == []
        d = result.to_dict()
        assert d["settings"]["defaults"]["dialect"] == "vimscript"

    def test_missing_file_warns(self, isolated_cwd: Path):
        result = check_config()
        assert result.valid
        assert any("defaults apply" in w for w in result.warnings)

    def test_invalid(self, tmp_path: Path):
        path = tmp_path / "vimforge.yml"
        path.write_text("web:\n  port: 0\n")
        result = check_config(path)
        assert not result.valid
        assert result.errors
        assert result.to_dict()["settings"] is None

    def test_public_bind_warns(self, tmp_path: Path):
        path = tmp_path / "vimforge.yml"
        path.write_text(textwrap.dedent("""\
            web:
              host: 0.0.0.0
        """))
        result = check_config(path)
        assert result.valid
        assert any("0.0.0.0" in w for w in result.warnings)
