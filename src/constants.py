"""Constants used in the project."""

from __future__ import annotations

import os
from enum import Enum
from typing import Any, Dict, Optional

import yaml


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    INVALID_INPUT = 1
    EXIT_MISS = 3


class KnownSchemes(Enum):
    """Versioning schemes with a built-in comparator.

    Args:
        Enum (string): vers scheme tokens.
    """

    ALPINE = "apk"
    DEBIAN = "deb"
    GENERIC = "generic"
    GOLANG = "golang"
    MAVEN = "maven"
    NPM = "npm"
    PYPI = "pypi"
    RPM = "rpm"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    URI_SCHEME = "vers"
    SUPPORTED_SCHEMES = [scheme.value for scheme in KnownSchemes]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
    ENV_LOG_LEVEL = "VERSRANGE_LOG_LEVEL"
    ENV_CONFIG = "VERSRANGE_CONFIG"
    DEFAULT_CONFIG_PATH = os.path.join("~", ".config", "versrange", "config.yml")

    # Version provider priorities
    PRIORITY_LOWEST = 0
    PRIORITY_BUILTIN = 50


def _resolve_config_path(path: Optional[str]) -> Optional[str]:
    """Return the first configuration path that exists, or None."""
    candidates = [path, os.environ.get(Constants.ENV_CONFIG), Constants.DEFAULT_CONFIG_PATH]
    for candidate in candidates:
        if not candidate:
            continue
        expanded = os.path.expanduser(candidate)
        if os.path.isfile(expanded):
            return expanded
        if candidate is path:
            raise ConfigError(f"Config file not found: {candidate}")
    return None


def load_yaml_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the YAML configuration file.

    Lookup order is the explicit ``path``, then the file named by the
    ``VERSRANGE_CONFIG`` environment variable, then the default location.

    Args:
        path: Explicit configuration file path.

    Returns:
        The parsed mapping, empty when no configuration file exists.

    Raises:
        ConfigError: If an explicit file is missing or a file is not a valid mapping.
    """
    resolved = _resolve_config_path(path)
    if resolved is None:
        return {}
    try:
        with open(resolved, "r", encoding="utf-8") as fh:
            cfg = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to load config {resolved}: {exc}") from exc
    if not isinstance(cfg, dict):
        raise ConfigError(f"Config {resolved} must contain a mapping, got {type(cfg).__name__}")
    return cfg
