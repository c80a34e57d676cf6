"""Configuration loading for the command line and the HTTP service.

Configuration is an optional YAML file:

    defaults:
      n: 3
      alpha: 0.7853981633974483
      subdivisions: 16
    server:
      host: 127.0.0.1
      port: 8000
    logging:
      level: INFO

Search order:
    1. Explicit path passed to ``load_config``
    2. File named by the CYPOINTS_CONFIG environment variable
    3. User config file (~/.config/cypoints/config.yaml)

Keys missing from the file keep their built-in values.
"""

from __future__ import annotations

import copy
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from cypoints.errors import ConfigError

__all__ = [
    "CYPOINTS_CONFIG",
    "DEFAULT_CONFIG",
    "config_path",
    "load_config",
    "clear_cache",
]

# Environment variable naming a config file
CYPOINTS_CONFIG = "CYPOINTS_CONFIG"

_USER_CONFIG = Path("~/.config/cypoints/config.yaml")

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "defaults": {
        "n": 3,
        "alpha": 0.7853981633974483,
        "subdivisions": 16,
    },
    "server": {
        "host": "127.0.0.1",
        "port": 8000,
    },
    "logging": {
        "level": "INFO",
    },
}


def clear_cache() -> None:
    """Forget previously loaded configuration files."""
    _load_cached.cache_clear()


def config_path(path: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """Return the config file to use, or ``None`` if there is none."""
    if path is not None:
        return Path(path).expanduser()
    env_path = os.environ.get(CYPOINTS_CONFIG)
    if env_path:
        return Path(env_path.strip()).expanduser()
    user = _USER_CONFIG.expanduser()
    if user.is_file():
        return user
    return None


def _merge(base: Dict[str, Dict[str, Any]], override: Dict[str, Any], source: Path) -> None:
    for section, values in override.items():
        if section not in base:
            raise ConfigError(f"{source}: unknown section '{section}'")
        if values is None:
            continue
        if not isinstance(values, dict):
            raise ConfigError(f"{source}: section '{section}' must be a mapping")
        base[section].update(values)


@lru_cache(maxsize=None)
def _load_cached(path: Optional[Path]) -> Dict[str, Dict[str, Any]]:
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is None:
        return config
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"malformed config file {path}: {exc}") from exc

    if data is None:
        return config
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    _merge(config, data, path)
    return config


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Dict[str, Any]]:
    """Load configuration, merged over ``DEFAULT_CONFIG``.

    Parameters
    ----------
    path : str or Path, optional
        Explicit config file. When omitted the environment variable and the
        user config directory are consulted.

    Returns
    -------
    dict
        A fresh copy of the merged configuration.

    Raises
    ------
    ConfigError
        If the file cannot be read, is not valid YAML, or has the wrong shape.
    """
    return copy.deepcopy(_load_cached(config_path(path)))
