"""
Tests for YAML configuration and environment settings.
"""

import logging
from pathlib import Path

import pytest

from sqlstruct.config_loader import ConfigLoader, GeneratorConfig
from sqlstruct.models import RawColumnMatch
from sqlstruct.rendering import OutputType
from sqlstruct.settings import Settings, get_settings

PROJECT_ROOT = Path(__file__).parent.parent


class TestConfigLoader:

    def test_project_config(self):
        config = ConfigLoader(PROJECT_ROOT / "config").load_config()
        assert config.config_name == "default"
        assert config.default_modes == [OutputType.SQL_WITH_JSON, OutputType.SB]
        assert config.align_fields is True
        assert config.naming_overrides == {}
        assert config.strict_types is False

    def test_default_dir(self):
        assert ConfigLoader().config_dir == PROJECT_ROOT / "config"

    def test_custom_values(self, write_config):
        config_dir = write_config(
            "config_name: team\n"
            "output:\n"
            "  default_modes: [sql]\n"
            "  align_fields: false\n"
            "naming:\n"
            "  overrides:\n"
            "    API: API\n"
            "    oauth: OAuth\n"
            "types:\n"
            "  strict: true\n"
        )
        config = ConfigLoader(config_dir).load_config()
        assert config.config_name == "team"
        assert config.default_modes == [OutputType.SQL]
        assert config.align_fields is False
        assert config.naming_overrides == {"api": "API", "oauth": "OAuth"}
        assert config.strict_types is True

    def test_empty_file_uses_defaults(self, write_config):
        config = ConfigLoader(write_config("")).load_config()
        assert config == GeneratorConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader(tmp_path).load_config()

    def test_unknown_mode(self, write_config):
        config_dir = write_config("output:\n  default_modes: [xml]\n")
        with pytest.raises(ValueError, match="Unknown output mode 'xml'"):
            ConfigLoader(config_dir).load_config()

    def test_overrides_must_be_mapping(self, write_config):
        config_dir = write_config("naming:\n  overrides: [api]\n")
        with pytest.raises(ValueError):
            ConfigLoader(config_dir).load_config()


class TestGeneratorConfig:

    def test_build_normalizer(self):
        config = GeneratorConfig(naming_overrides={"api": "API"})
        column = config.build_normalizer().normalize_column(RawColumnMatch("api_id", "int", ""))
        assert column.name == "APIID"

    def test_build_renderer(self):
        assert GeneratorConfig(align_fields=False).build_renderer().align_fields is False


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.config_dir is None
        assert settings.log_level_value == logging.WARNING

    def test_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SQLSTRUCT_CONFIG_DIR", str(tmp_path))
        monkeypatch.setenv("SQLSTRUCT_LOG_LEVEL", "debug")
        settings = get_settings()
        assert settings.config_dir == tmp_path
        assert settings.log_level_value == logging.DEBUG

    def test_unknown_level_falls_back(self):
        assert Settings(log_level="chatty").log_level_value == logging.WARNING
