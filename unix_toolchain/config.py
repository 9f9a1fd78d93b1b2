"""Toolchain configuration from YAML files and environment variables.

Example ``toolchain.yaml``::

    executable_dir: /opt/swift/usr/bin
    fallback: none
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

import yaml

from .darwin import XcrunFallback, default_fallback
from .errors import ConfigError
from .interfaces import ToolFallbackInterface

CONFIG_ENV_VAR = "UNIX_TOOLCHAIN_CONFIG"
EXECUTABLE_DIR_ENV_VAR = "UNIX_TOOLCHAIN_EXECUTABLE_DIR"
FALLBACK_ENV_VAR = "UNIX_TOOLCHAIN_FALLBACK"

FALLBACK_MODES = ("auto", "xcrun", "none")


@dataclass(frozen=True)
class ToolchainConfig:
    """Construction-time settings for a GenericUnixToolchain."""
    executable_dir: Optional[str] = None   # None: directory of the running driver
    fallback: str = "auto"                 # auto | xcrun | none


def _validate_fallback(mode: str, source: str) -> str:
    if mode not in FALLBACK_MODES:
        raise ConfigError(
            f"{source}: fallback must be one of {', '.join(FALLBACK_MODES)}, got {mode!r}"
        )
    return mode


def load_config(path: str) -> ToolchainConfig:
    """Parse a YAML toolchain config file.

    Raises:
        ConfigError: If the document is not a mapping or has bad values.
        OSError: If the file cannot be read.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: invalid YAML: {e}") from e

    if data is None:
        return ToolchainConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config file (expected mapping): {path}")

    unknown = sorted(set(data) - {"executable_dir", "fallback"})
    if unknown:
        raise ConfigError(f"{path}: unknown keys: {', '.join(map(str, unknown))}")

    executable_dir = data.get("executable_dir")
    if executable_dir is not None and not isinstance(executable_dir, str):
        raise ConfigError(f"{path}: executable_dir must be a string")

    fallback = str(data.get("fallback", "auto"))
    return ToolchainConfig(
        executable_dir=executable_dir,
        fallback=_validate_fallback(fallback, path),
    )


def config_from_env(env: Optional[Mapping[str, str]] = None) -> ToolchainConfig:
    """Build a config from ``UNIX_TOOLCHAIN_*`` environment variables.

    The file named by ``UNIX_TOOLCHAIN_CONFIG`` is loaded first, then
    ``UNIX_TOOLCHAIN_EXECUTABLE_DIR`` and ``UNIX_TOOLCHAIN_FALLBACK``
    override its values.
    """
    if env is None:
        env = os.environ

    config_path = env.get(CONFIG_ENV_VAR)
    config = load_config(config_path) if config_path else ToolchainConfig()

    executable_dir = env.get(EXECUTABLE_DIR_ENV_VAR)
    if executable_dir:
        config = replace(config, executable_dir=executable_dir)
    fallback = env.get(FALLBACK_ENV_VAR)
    if fallback:
        config = replace(config, fallback=_validate_fallback(fallback, FALLBACK_ENV_VAR))
    return config


def make_fallback(mode: str, env: Optional[Mapping[str, str]] = None) -> Optional[ToolFallbackInterface]:
    """Instantiate the fallback selected by a config ``fallback`` value."""
    if mode == "auto":
        return default_fallback(env)
    if mode == "xcrun":
        return XcrunFallback(env)
    if mode == "none":
        return None
    raise ConfigError(f"unknown fallback mode: {mode!r}")
