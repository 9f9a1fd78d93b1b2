"""
Unix Toolchain - tool resolution for a compiler driver

Finds compiler, linker and utility executables for the driver and
answers naming questions about linker outputs and sanitizer runtimes.
"""

from .interfaces import (
    FileSystemInterface,
    ToolFallbackInterface,
)

from .errors import ToolNotFoundError, ConfigError
from .models import Tool, LinkOutputType, Sanitizer
from .triple import Triple
from .search_paths import get_env_search_paths, lookup_executable_path
from .darwin import XcrunFallback, default_fallback
from .config import ToolchainConfig, load_config, config_from_env, make_fallback
from .toolchain import GenericUnixToolchain, driver_executable_dir

__version__ = "0.1.0"

__all__ = [
    "FileSystemInterface",
    "ToolFallbackInterface",
    "ToolNotFoundError",
    "ConfigError",
    "Tool",
    "LinkOutputType",
    "Sanitizer",
    "Triple",
    "get_env_search_paths",
    "lookup_executable_path",
    "XcrunFallback",
    "default_fallback",
    "ToolchainConfig",
    "load_config",
    "config_from_env",
    "make_fallback",
    "GenericUnixToolchain",
    "driver_executable_dir",
]
