"""Toolchain for Unix-like systems.

Resolves tool executables for the compiler driver and answers the
platform's naming questions (linker output names, sanitizer runtime
library names).

Lookup order for an executable:

1. The directory holding the running driver, so a packaged toolchain
   uses the tools shipped next to it.
2. The directories in ``PATH``, in order.
3. The platform fallback, if one is configured (``xcrun`` on macOS).

Paths are never cached; every lookup probes the filesystem again.
"""

from __future__ import annotations

import logging
import os
import sys
from types import MappingProxyType
from typing import Mapping, Optional, assert_never, cast

from .config import ToolchainConfig, make_fallback
from .darwin import default_fallback
from .errors import ToolNotFoundError
from .implementations import RealFileSystem
from .interfaces import FileSystemInterface, ToolFallbackInterface
from .models import LinkOutputType, Sanitizer, Tool
from .search_paths import get_env_search_paths, lookup_executable_path
from .triple import Triple

logger = logging.getLogger(__name__)

# Distinguishes "pick the host default" from an explicit fallback=None.
_HOST_DEFAULT = object()


def driver_executable_dir() -> str:
    """Directory containing the running driver executable.

    Uses ``sys.argv[0]`` when it names a real file (an installed console
    script), otherwise the directory of the Python interpreter. Under
    ``python -m``, argv[0] is a package's ``__main__.py``, so the
    interpreter's directory is used then too.
    """
    argv0 = sys.argv[0] if sys.argv else ""
    if argv0 and os.path.basename(argv0) != "__main__.py" and os.path.isfile(argv0):
        return os.path.dirname(os.path.realpath(argv0))
    return os.path.dirname(os.path.realpath(sys.executable))


class GenericUnixToolchain:
    """Toolchain for Unix-like systems.

    The environment and the search paths derived from its ``PATH`` are
    captured once at construction and never change afterwards, so one
    instance can be shared between threads.

    Args:
        env: Process environment; only ``PATH`` is read for lookups.
        executable_dir: Directory searched before PATH. Defaults to the
            directory of the running driver. A relative value is resolved
            against the working directory at construction.
        fallback: Platform fallback consulted last. Defaults to the host
            fallback; pass None to disable it.
        fs: Filesystem probe, defaults to the real filesystem.
    """

    def __init__(
        self,
        env: Mapping[str, str],
        executable_dir: Optional[str] = None,
        fallback: Optional[ToolFallbackInterface] | object = _HOST_DEFAULT,
        fs: Optional[FileSystemInterface] = None,
    ):
        self._env: Mapping[str, str] = MappingProxyType(dict(env))
        self._fs = fs or RealFileSystem()
        self._cwd = self._fs.current_working_directory()
        executable_dir = executable_dir or driver_executable_dir()
        if not os.path.isabs(executable_dir):
            if self._cwd is None:
                raise ValueError(
                    f"cannot resolve relative executable_dir {executable_dir!r}: "
                    "working directory is unavailable"
                )
            executable_dir = os.path.join(self._cwd, executable_dir)
        self._executable_dir = os.path.normpath(executable_dir)
        self._search_paths = get_env_search_paths(self._env.get("PATH"), self._cwd)
        if fallback is _HOST_DEFAULT:
            fallback = default_fallback(self._env)
        self._fallback = cast(Optional[ToolFallbackInterface], fallback)

    @classmethod
    def from_config(
        cls,
        env: Mapping[str, str],
        config: ToolchainConfig,
        fs: Optional[FileSystemInterface] = None,
    ) -> GenericUnixToolchain:
        """Build a toolchain from a ToolchainConfig."""
        return cls(
            env,
            executable_dir=config.executable_dir,
            fallback=make_fallback(config.fallback, env),
            fs=fs,
        )

    @property
    def env(self) -> Mapping[str, str]:
        """Read-only view of the environment captured at construction."""
        return self._env

    @property
    def search_paths(self) -> tuple[str, ...]:
        return self._search_paths

    @property
    def executable_dir(self) -> str:
        return self._executable_dir

    @property
    def fallback(self) -> Optional[ToolFallbackInterface]:
        return self._fallback

    # ------------------------------------------------------------------
    # Tool lookup
    # ------------------------------------------------------------------

    def lookup(self, executable: str) -> str:
        """Resolve executable to an absolute path.

        Looks next to the driver first, then in the PATH search paths,
        then asks the platform fallback. A name containing ``/`` is a
        path: it is checked directly (relative to the working directory
        captured at construction) and no other stage is tried.

        Args:
            executable: Executable to look for (e.g. ``swift``).

        Returns:
            Absolute path of the executable.

        Raises:
            ToolNotFoundError: If no stage finds the executable. Errors
                from the fallback propagate unchanged.
        """
        if os.sep in executable:
            path = lookup_executable_path(executable, (), self._fs, cwd=self._cwd)
            if path:
                logger.debug("Using %s as given: %s", executable, path)
                return path
            raise ToolNotFoundError(executable)

        path = lookup_executable_path(executable, [self._executable_dir], self._fs)
        if path:
            logger.debug("Found %s next to the driver: %s", executable, path)
            return path

        path = lookup_executable_path(executable, self._search_paths, self._fs)
        if path:
            logger.debug("Found %s on PATH: %s", executable, path)
            return path

        if self._fallback is not None:
            logger.debug("%s not on PATH, delegating to %s", executable, type(self._fallback).__name__)
            return self._fallback.find_tool(executable)

        raise ToolNotFoundError(executable)

    def get_tool_path(self, tool: Tool) -> str:
        """Resolve the executable that plays the given tool role."""
        return self.lookup(tool.executable_name)

    # ------------------------------------------------------------------
    # Naming policy
    # ------------------------------------------------------------------

    def make_linker_output_filename(self, module_name: str, output_type: LinkOutputType) -> str:
        """File name the linker writes for module_name."""
        if output_type is LinkOutputType.EXECUTABLE:
            return module_name
        elif output_type is LinkOutputType.DYNAMIC_LIBRARY:
            return f"lib{module_name}.so"
        elif output_type is LinkOutputType.STATIC_LIBRARY:
            return f"lib{module_name}.a"
        else:
            assert_never(output_type)

    def runtime_library_name(self, sanitizer: Sanitizer, target_triple: Triple, is_shared: bool) -> str:
        """Name of the clang runtime library for a sanitizer.

        Always the static archive name; is_shared does not change it on
        generic Unix.
        """
        return f"libclang_rt.{sanitizer.library_name}-{target_triple.arch_name}.a"

    def default_sdk_path(self) -> Optional[str]:
        """Generic Unix has no SDK root."""
        return None

    @property
    def should_store_invocation_in_debug_info(self) -> bool:
        return False
