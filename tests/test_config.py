"""Tests for config loading and validation."""

import pytest

from resume_contracts.config import (
    CONFIG_ENV_VAR,
    AppConfig,
    OutputConfig,
    load_config,
)


class TestConfig:
    def test_defaults(self):
        """Defaults match a missing config file."""
        config = AppConfig()
        assert config.validation.strict_layout is False
        assert config.resolver.default_distribution == "70-30"
        assert config.resolver.validate_output is True
        assert config.output.indent == 2
        assert config.logging.level == "WARNING"

    def test_load_config_defaults(self, tmp_path):
        """Loading from non-existent path returns defaults."""
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config == AppConfig()

    def test_load_config_from_yaml(self, tmp_path):
        """Values from YAML override defaults."""
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text(
            "validation:\n  strict_layout: true\nresolver:\n  default_distribution: '60-40'\n"
        )
        config = load_config(yaml_path)
        assert config.validation.strict_layout is True
        assert config.resolver.default_distribution == "60-40"
        # Defaults for unspecified
        assert config.output.indent == 2

    def test_empty_yaml(self, tmp_path):
        """An empty file gives the defaults."""
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("")
        assert load_config(yaml_path) == AppConfig()

    def test_empty_sections(self, tmp_path):
        """Sections with no keys fall back to their defaults."""
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("validation:\nresolver:\noutput:\nlogging:\n")
        assert load_config(yaml_path) == AppConfig()

    def test_env_var_path(self, tmp_path, monkeypatch):
        """RESUME_CONTRACTS_CONFIG points at the file to load."""
        yaml_path = tmp_path / "custom.yaml"
        yaml_path.write_text("output:\n  indent: 4\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(yaml_path))
        assert load_config().output.indent == 4

    def test_cwd_config(self, tmp_path, monkeypatch):
        """config.yaml in the working directory is picked up."""
        (tmp_path / "config.yaml").write_text("logging:\n  level: DEBUG\n")
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.chdir(tmp_path)
        assert load_config().logging.level == "DEBUG"

    def test_no_config_anywhere(self, tmp_path, monkeypatch):
        """No file anywhere gives the defaults."""
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.chdir(tmp_path)
        assert load_config() == AppConfig()

    def test_frozen_config(self):
        """Config objects cannot be changed after loading."""
        config = OutputConfig()
        with pytest.raises(AttributeError):
            config.indent = 4


class TestConfigValidation:
    def test_invalid_distribution(self, tmp_path):
        """Only known column distributions are accepted."""
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("resolver:\n  default_distribution: '80-20'\n")
        with pytest.raises(ValueError, match="default_distribution"):
            load_config(yaml)

    def test_invalid_indent(self, tmp_path):
        """Indent must be between 0 and 8."""
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("output:\n  indent: 12\n")
        with pytest.raises(ValueError, match="indent"):
            load_config(yaml)

    def test_invalid_log_level(self, tmp_path):
        """Unknown log levels are rejected."""
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("logging:\n  level: LOUD\n")
        with pytest.raises(ValueError, match="level"):
            load_config(yaml)

    def test_unknown_key(self, tmp_path):
        """Keys the dataclass does not define raise TypeError."""
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("output:\n  colour: true\n")
        with pytest.raises(TypeError):
            load_config(yaml)

    def test_string_flag_rejected(self, tmp_path):
        """Quoted booleans are not read as flags."""
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("validation:\n  strict_layout: 'no'\n")
        with pytest.raises(ValueError, match="strict_layout"):
            load_config(yaml)

    def test_string_validate_output_rejected(self, tmp_path):
        """validate_output must be a real boolean."""
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("resolver:\n  validate_output: 'yes'\n")
        with pytest.raises(ValueError, match="validate_output"):
            load_config(yaml)
