"""Tests for configuration loading."""

import pytest

from cypoints.config import CYPOINTS_CONFIG, DEFAULT_CONFIG, config_path, load_config
from cypoints.errors import ConfigError


def test_defaults_without_file():
    assert config_path() is None
    assert load_config() == DEFAULT_CONFIG


def test_explicit_file_overrides(tmp_path):
    path = tmp_path / 'cfg.yaml'
    path.write_text("defaults:\n  n: 5\nserver:\n  port: 9001\n")
    config = load_config(path)
    assert config["defaults"]["n"] == 5
    assert config["defaults"]["subdivisions"] == DEFAULT_CONFIG["defaults"]["subdivisions"]
    assert config["server"]["port"] == 9001


def test_environment_variable(tmp_path, monkeypatch):
    path = tmp_path / 'env.yaml'
    path.write_text("logging:\n  level: DEBUG\n")
    monkeypatch.setenv(CYPOINTS_CONFIG, str(path))
    assert config_path() == path
    assert load_config()["logging"]["level"] == "DEBUG"


def test_user_config_dir(tmp_path):
    user = tmp_path / '.config' / 'cypoints'
    user.mkdir(parents=True)
    (user / 'config.yaml').write_text("defaults:\n  alpha: 1.5\n")
    assert load_config()["defaults"]["alpha"] == 1.5


def test_returned_config_is_a_copy(tmp_path):
    path = tmp_path / 'copy.yaml'
    path.write_text("defaults:\n  n: 2\n")
    first = load_config(path)
    first["defaults"]["n"] = 99
    assert load_config(path)["defaults"]["n"] == 2


def test_empty_file(tmp_path):
    path = tmp_path / 'empty.yaml'
    path.write_text("")
    assert load_config(path) == DEFAULT_CONFIG


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / 'missing.yaml')


def test_malformed_yaml(tmp_path):
    path = tmp_path / 'bad.yaml'
    path.write_text("defaults: [unclosed\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_unknown_section(tmp_path):
    path = tmp_path / 'unknown.yaml'
    path.write_text("colors:\n  z: red\n")
    with pytest.raises(ConfigError, match="unknown section"):
        load_config(path)


def test_non_mapping(tmp_path):
    path = tmp_path / 'list.yaml'
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigError):
        load_config(path)
