from typing import Final


PROG_NAME: Final[str] = "stripper"
USAGE: Final[str] = f"Usage: {PROG_NAME} <ignore-file>"
ENV_PREFIX: Final[str] = "STRIPPER"

DEFAULT_ROOT: Final[str] = "."

COMMENT_PREFIX: Final[str] = "#"
NEGATION_PREFIX: Final[str] = "!"
BYTE_ORDER_MARK: Final[str] = "\ufeff"
