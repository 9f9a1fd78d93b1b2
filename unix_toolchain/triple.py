"""Target triple parsing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Triple:
    """A compilation target such as ``x86_64-unknown-linux-gnu``.

    Only the pieces the toolchain needs are split out; ``arch_name`` is
    the first component exactly as written.
    """

    triple: str
    arch_name: str
    vendor: str = "unknown"
    os_name: str = "unknown"
    environment: str = ""

    @classmethod
    def parse(cls, triple: str) -> Triple:
        """Parse a ``arch-vendor-os[-environment]`` string.

        Raises:
            ValueError: If triple is empty or has no architecture.
        """
        text = triple.strip()
        if not text:
            raise ValueError("target triple must not be empty")
        parts = text.split("-", 3)
        if not parts[0]:
            raise ValueError(f"target triple has no architecture: {triple!r}")
        return cls(
            triple=text,
            arch_name=parts[0],
            vendor=parts[1] if len(parts) > 1 and parts[1] else "unknown",
            os_name=parts[2] if len(parts) > 2 and parts[2] else "unknown",
            environment=parts[3] if len(parts) > 3 else "",
        )

    def __str__(self) -> str:
        return self.triple
