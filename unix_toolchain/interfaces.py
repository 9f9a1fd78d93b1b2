"""
Interfaces for toolchain resolution.

Abstract base classes for the pluggable pieces of the resolver. The
filesystem probe and the platform fallback are injected so lookups can
be tested without touching real tool installations.
"""

from abc import ABC, abstractmethod
from typing import Optional


class FileSystemInterface(ABC):
    """
    Abstract interface for the filesystem probes a lookup performs.

    Implementations:
    - RealFileSystem: os.path based checks
    - MockFileSystem: In-memory for testing
    """

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Check if a regular file exists at path."""
        pass

    @abstractmethod
    def current_working_directory(self) -> Optional[str]:
        """Return the current working directory, or None if it is gone."""
        pass


class ToolFallbackInterface(ABC):
    """
    Abstract interface for platform-specific tool discovery.

    Consulted only after the co-located directory and the PATH entries
    have been searched.

    Implementations:
    - XcrunFallback: asks ``xcrun`` on macOS hosts
    - MockToolFallback: For unit testing
    """

    @abstractmethod
    def find_tool(self, executable: str) -> str:
        """Return the absolute path of executable.

        Raises ToolNotFoundError if the tool cannot be found.
        """
        pass
