from pathlib import Path
from typing import Optional


class StripperError(Exception):
    """Base user-facing application error."""


class StripperFileError(StripperError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class RulesFileError(StripperFileError):
    pass


class EnumerationError(StripperFileError):
    """A directory entry could not be read while walking the tree."""

    def __init__(self, path: Path, cause: Optional[OSError] = None) -> None:
        self.cause = cause
        detail = cause.strerror if cause is not None and cause.strerror else str(cause)
        super().__init__(path=path, message=f"Cannot read entry ({detail})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnumerationError):
            return NotImplemented
        return self.path == other.path and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.path, self.message))
