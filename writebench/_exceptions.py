from __future__ import annotations

from pathlib import Path


class WBError(Exception):
    """Base class for every error raised by writebench."""


class WBConfigError(WBError, ValueError):
    """Raised when benchmark parameters are rejected before any file is written."""


class WBWriteError(WBError, OSError):
    """Raised when a file of a round cannot be created, written or closed. Subclass of OSError."""
    def __init__(self, path: Path | str, cause: OSError) -> None:
        self.path = Path(path)
        self.cause = cause
        message = f"cannot write {self.path}: {cause.strerror or cause}"
        if cause.errno is not None:
            super().__init__(cause.errno, message)
        else:
            super().__init__(message)


class WBPayloadError(WBError, MemoryError):
    """Raised when the fixed payload buffer cannot be allocated."""
    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(f"cannot allocate a payload buffer of {size} bytes")
