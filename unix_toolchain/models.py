"""
Tool roles, link output kinds and sanitizers known to the toolchain.
"""

from __future__ import annotations

from enum import Enum
from typing import assert_never


class Tool(Enum):
    """Logical tool roles a compiler driver invokes."""

    SWIFT_COMPILER = "swift-compiler"
    STATIC_LINKER = "static-linker"
    DYNAMIC_LINKER = "dynamic-linker"
    CLANG = "clang"
    SWIFT_AUTOLINK_EXTRACT = "swift-autolink-extract"
    DSYMUTIL = "dsymutil"

    @property
    def executable_name(self) -> str:
        """Canonical executable name looked up for this role."""
        if self is Tool.SWIFT_COMPILER:
            return "swift"
        elif self is Tool.STATIC_LINKER:
            return "ar"
        elif self is Tool.DYNAMIC_LINKER:
            return "clang"
        elif self is Tool.CLANG:
            return "clang"
        elif self is Tool.SWIFT_AUTOLINK_EXTRACT:
            return "swift-autolink-extract"
        elif self is Tool.DSYMUTIL:
            return "dsymutil"
        else:
            assert_never(self)

    @classmethod
    def from_name(cls, name: str) -> Tool:
        """Parse a tool from its CLI spelling or member name."""
        return _parse_enum(cls, name)


class LinkOutputType(Enum):
    """Kind of artifact the linker produces."""

    EXECUTABLE = "executable"
    DYNAMIC_LIBRARY = "dynamic-library"
    STATIC_LIBRARY = "static-library"

    @classmethod
    def from_name(cls, name: str) -> LinkOutputType:
        return _parse_enum(cls, name)


class Sanitizer(Enum):
    """Runtime sanitizers that ship a clang runtime library."""

    ADDRESS = "address"
    THREAD = "thread"
    UNDEFINED_BEHAVIOR = "undefined"
    FUZZER = "fuzzer"
    SCUDO = "scudo"

    @property
    def library_name(self) -> str:
        """Short name used in ``libclang_rt.<name>-<arch>`` file names."""
        return _SANITIZER_LIBRARY_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> Sanitizer:
        """Parse a sanitizer from its CLI spelling, member name or library name."""
        for sanitizer, library_name in _SANITIZER_LIBRARY_NAMES.items():
            if name == library_name:
                return sanitizer
        return _parse_enum(cls, name)


_SANITIZER_LIBRARY_NAMES: dict[Sanitizer, str] = {
    Sanitizer.ADDRESS: "asan",
    Sanitizer.THREAD: "tsan",
    Sanitizer.UNDEFINED_BEHAVIOR: "ubsan",
    Sanitizer.FUZZER: "fuzzer",
    Sanitizer.SCUDO: "scudo",
}

if set(_SANITIZER_LIBRARY_NAMES) != set(Sanitizer):
    raise RuntimeError("every Sanitizer needs a runtime library name")


def _parse_enum(enum_cls, name: str):
    try:
        return enum_cls(name)
    except ValueError:
        pass
    try:
        return enum_cls[name.upper().replace("-", "_")]
    except KeyError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"unknown {enum_cls.__name__} {name!r} (expected one of: {choices})") from None
