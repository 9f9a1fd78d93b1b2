"""
Real implementations of interfaces for production use.
"""

import os
from typing import Optional

from .interfaces import FileSystemInterface


class RealFileSystem(FileSystemInterface):
    """
    Real file system implementation.
    """

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def current_working_directory(self) -> Optional[str]:
        try:
            return os.getcwd()
        except FileNotFoundError:
            # cwd was deleted out from under us
            return None
