"""Operating-system identifiers used by the locality checks.

The Docker endpoint conventions differ per host OS (unix sockets on
macOS/Linux, named pipes on Windows), so both the domain layer and the
adapters share this single enum.
"""

from __future__ import annotations

import sys
from enum import Enum


class OperatingSystem(str, Enum):
    """Host operating systems Docker Desktop ships for."""

    DARWIN = "darwin"
    WINDOWS = "windows"
    LINUX = "linux"

    @classmethod
    def current(cls) -> "OperatingSystem | None":
        """Map `sys.platform` to a supported OS, or None when unsupported."""

        return cls.parse(sys.platform)

    @classmethod
    def parse(cls, value: str | None) -> "OperatingSystem | None":
        """Lenient parse: accepts `sys.platform` values and GOOS-style names."""

        raw = (value or "").strip().lower()
        if raw.startswith("win"):
            return cls.WINDOWS
        if raw in {"darwin", "macos", "mac"}:
            return cls.DARWIN
        if raw.startswith("linux"):
            return cls.LINUX
        return None

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return {
            OperatingSystem.DARWIN: "macOS",
            OperatingSystem.WINDOWS: "Windows",
            OperatingSystem.LINUX: "Linux",
        }[self]
