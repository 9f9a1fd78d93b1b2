"""Exceptions raised by toolchain resolution and configuration."""

from __future__ import annotations


class ToolNotFoundError(Exception):
    """Raised when an executable cannot be located by any lookup stage."""

    def __init__(self, tool: str):
        super().__init__(f"unable to find tool: {tool}")
        self.tool = tool


class ConfigError(ValueError):
    """Raised when a toolchain configuration file is malformed."""
