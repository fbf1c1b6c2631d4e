"""Run configuration for a selection pass."""

from dataclasses import dataclass
from enum import Enum

from stripper.constants import DEFAULT_ROOT


class ErrorPolicy(str, Enum):
    ABORT = "abort"
    COLLECT = "collect"


@dataclass(frozen=True)
class SelectionConfig:
    root: str = DEFAULT_ROOT
    prune: bool = False
    on_error: ErrorPolicy = ErrorPolicy.ABORT
    case_insensitive: bool = False
