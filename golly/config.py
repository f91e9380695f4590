"""Loading of the connection settings from a YAML file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_PATH = "config.yml"
DEFAULT_HOST = "localhost"
DEFAULT_PORT = "11434"
DEFAULT_MODEL = "llama3.2"

_DEFAULTS_NOTICE = (
    "Using default configuration: host:",
    DEFAULT_HOST,
    "port:",
    DEFAULT_PORT,
    "model:",
    DEFAULT_MODEL,
)


@dataclass
class Config:
    """Where the Ollama server lives and which model to use."""

    host: str = DEFAULT_HOST
    port: str = DEFAULT_PORT
    model: str = DEFAULT_MODEL


def _scalar_text(value: Any, key: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ValueError(f"field {key!r} must be a scalar")


def _parse(text: str) -> Config:
    document = yaml.safe_load(text)
    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise ValueError("configuration must be a mapping")
    return Config(
        host=_scalar_text(document.get("host"), "host") or DEFAULT_HOST,
        port=_scalar_text(document.get("port"), "port") or DEFAULT_PORT,
        model=_scalar_text(document.get("model"), "model") or DEFAULT_MODEL,
    )


def load_config(file_path: str = "") -> Config:
    """Read the configuration file, falling back to defaults on any problem."""
    path = Path(file_path or DEFAULT_CONFIG_PATH)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        print("Error reading config file:", exc)
        print(*_DEFAULTS_NOTICE)
        return Config()

    try:
        config = _parse(text)
    except (yaml.YAMLError, ValueError) as exc:
        print("Error parsing config file:", exc)
        print(*_DEFAULTS_NOTICE)
        return Config()

    print(
        "Configuration loaded successfully: host:",
        config.host,
        "port:",
        config.port,
        "model:",
        config.model,
    )
    return config