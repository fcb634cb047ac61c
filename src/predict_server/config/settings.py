"""
Configuration management for the prediction server.

Settings are resolved in three layers: built-in defaults, an optional YAML
file, then environment variables.

Environment variables:
  ``PREDICT_SERVER_CONFIG``
      Optional path to a YAML file with any of the keys below.
  ``MODEL_PATH``
      Path to the joblib model artifact.
  ``HOST`` / ``PORT``
      Listening address.
  ``LOG_LEVEL``
      Root logging level name.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PREDICT_SERVER_CONFIG"

# Levels understood by both logging and uvicorn.
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}

_ENV_KEYS = {
    "model_path": "MODEL_PATH",
    "host": "HOST",
    "port": "PORT",
    "log_level": "LOG_LEVEL",
}


@dataclass(frozen=True)
class ServerSettings:
    """Resolved settings consumed by the bootstrap."""

    model_path: str = "models/model.joblib"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"


def _load_yaml(file_path: Path) -> Dict[str, Any]:
    """Load a YAML settings file that must contain a mapping."""
    with open(file_path, "r") as file:
        data = yaml.safe_load(file)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {file_path} must contain a mapping")
    known = {f.name for f in fields(ServerSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        logger.warning("Ignoring unknown configuration keys in %s: %s", file_path, unknown)
    return {key: value for key, value in data.items() if key in known}


def _parse_port(raw: Any) -> int:
    try:
        port = int(str(raw).strip())
    except ValueError:
        raise ConfigurationError(f"Invalid port: {raw!r}") from None
    if not 0 < port < 65536:
        raise ConfigurationError(f"Port out of range: {port}")
    return port


def _parse_log_level(raw: Any) -> str:
    level = str(raw).strip().upper()
    level = _LEVEL_ALIASES.get(level, level)
    if level not in _LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level: {raw!r}")
    return level


def load_settings(
    config_file: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> ServerSettings:
    """
    Resolve settings from defaults, an optional YAML file and the environment.

    Args:
        config_file: YAML file path; falls back to ``PREDICT_SERVER_CONFIG``.
        environ: Environment mapping, ``os.environ`` when omitted.
        overrides: Highest-priority values (e.g. command-line options);
            ``None`` entries are ignored.

    Returns:
        The resolved settings.

    Raises:
        ConfigurationError: if the file is missing or not a mapping, the
            port is not a valid TCP port, or the log level is unknown.
    """
    env = os.environ if environ is None else environ
    values: Dict[str, Any] = {}

    path = config_file or env.get(CONFIG_ENV_VAR)
    if path:
        path = Path(path).expanduser()
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")
        values.update(_load_yaml(path))
        logger.info("Loaded configuration from %s", path)

    for name, env_key in _ENV_KEYS.items():
        if env.get(env_key):
            values[name] = env[env_key]

    for name, value in (overrides or {}).items():
        if value is not None:
            values[name] = value

    if "port" in values:
        values["port"] = _parse_port(values["port"])
    if "log_level" in values:
        values["log_level"] = _parse_log_level(values["log_level"])
    for name in ("model_path", "host"):
        if name in values:
            values[name] = str(values[name])
    return replace(ServerSettings(), **values)
