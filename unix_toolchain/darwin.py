"""Tool discovery through ``xcrun`` for macOS hosts.

Xcode keeps linkers and debug utilities inside the active developer
directory, which is usually not on PATH. ``xcrun --find`` knows where
they live.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import Callable, Mapping, Optional

from .errors import ToolNotFoundError
from .interfaces import ToolFallbackInterface

logger = logging.getLogger(__name__)

XCRUN_TIMEOUT = 10.0


class XcrunFallback(ToolFallbackInterface):
    """Resolve tools with ``xcrun --find <tool>``.

    Args:
        env: Environment passed to xcrun (``DEVELOPER_DIR`` and
            ``SDKROOT`` select the toolchain it reports).
        runner: ``subprocess.run`` compatible callable, injectable for tests.
    """

    def __init__(
        self,
        env: Optional[Mapping[str, str]] = None,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        self._env = dict(env) if env is not None else None
        self._runner = runner

    def find_tool(self, executable: str) -> str:
        logger.debug("Asking xcrun for %s", executable)
        try:
            result = self._runner(
                ["xcrun", "--find", executable],
                capture_output=True,
                text=True,
                timeout=XCRUN_TIMEOUT,
                env=self._env,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("xcrun failed for %s: %s", executable, e)
            raise ToolNotFoundError(executable) from e

        path = (result.stdout or "").strip()
        if result.returncode != 0 or not path:
            logger.debug("xcrun could not find %s (exit %s)", executable, result.returncode)
            raise ToolNotFoundError(executable)
        return path


def default_fallback(env: Optional[Mapping[str, str]] = None) -> Optional[ToolFallbackInterface]:
    """Return the platform fallback for the host, or None if there is none."""
    if sys.platform == "darwin":
        return XcrunFallback(env)
    return None
