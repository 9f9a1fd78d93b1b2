"""
Mock implementations for testing.

These classes implement the abstract interfaces with in-memory behavior
suitable for unit testing without a real toolchain installed.
"""

import os
from typing import Dict, List, Optional, Set

from .errors import ToolNotFoundError
from .interfaces import FileSystemInterface, ToolFallbackInterface


class MockFileSystem(FileSystemInterface):
    """
    In-memory file system for testing.

    Test code registers files with add_file() and inspects probe order
    with get_probes().
    """

    def __init__(self, files: Optional[List[str]] = None, cwd: Optional[str] = "/"):
        self._files: Set[str] = set()
        self._cwd = cwd
        self._probes: List[str] = []
        for path in files or []:
            self.add_file(path)

    def is_file(self, path: str) -> bool:
        self._probes.append(path)
        return os.path.normpath(path) in self._files

    def current_working_directory(self) -> Optional[str]:
        return self._cwd

    # Test helpers

    def add_file(self, path: str) -> None:
        """Register a file at path."""
        self._files.add(os.path.normpath(path))

    def remove_file(self, path: str) -> None:
        """Forget a previously registered file."""
        self._files.discard(os.path.normpath(path))

    def get_probes(self) -> List[str]:
        """Get every path passed to is_file(), in order."""
        return list(self._probes)

    def clear_probes(self) -> None:
        self._probes.clear()


class MockToolFallback(ToolFallbackInterface):
    """
    Mock platform fallback for testing.

    Resolves executables from a fixed name -> path table and records
    every request.
    """

    def __init__(self, tools: Optional[Dict[str, str]] = None):
        self._tools: Dict[str, str] = dict(tools or {})
        self.requests: List[str] = []

    def find_tool(self, executable: str) -> str:
        self.requests.append(executable)
        if executable not in self._tools:
            raise ToolNotFoundError(executable)
        return self._tools[executable]

    def add_tool(self, executable: str, path: str) -> None:
        self._tools[executable] = path
