"""Compile gitignore-style lines into an ordered rule set."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from stripper.constants import BYTE_ORDER_MARK, COMMENT_PREFIX, NEGATION_PREFIX
from stripper.errors import RulesFileError
from stripper.rules.models import Rule, RuleSet

logger = logging.getLogger(__name__)

_TRAILING_WHITESPACE = (" ", "\t")


def read_rules_file(path: Path) -> list[str]:
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError as exc:
        raise RulesFileError(path, "Rules file not found") from exc
    except OSError as exc:
        raise RulesFileError(path, f"Cannot read rules file ({exc.strerror})") from exc
    lines = text.splitlines()
    logger.debug("read %d lines from %s", len(lines), path)
    return lines


def compile_rules(lines: Iterable[str], case_insensitive: bool = False) -> RuleSet:
    rules: list[Rule] = []
    for line_number, raw in enumerate(lines, start=1):
        if line_number == 1:
            raw = raw.lstrip(BYTE_ORDER_MARK)
        rule = compile_line(
            raw,
            sequence_index=len(rules),
            line_number=line_number,
            case_insensitive=case_insensitive,
        )
        if rule is None:
            continue
        rules.append(rule)
    logger.debug("compiled %d rules", len(rules))
    return RuleSet(rules=tuple(rules), case_insensitive=case_insensitive)


def compile_line(
    raw: str,
    sequence_index: int = 0,
    line_number: int = 0,
    case_insensitive: bool = False,
) -> Optional[Rule]:
    """Compile one rules-file line, or return None for blanks and comments.

    Malformed patterns are never rejected: an unterminated character class or
    a stray backslash simply matches literally.
    """
    line = _strip_trailing_whitespace(raw.rstrip("\r\n"))
    stripped = line.lstrip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None

    pattern = line
    text = line
    negated = False
    if text.startswith("\\" + COMMENT_PREFIX) or text.startswith("\\" + NEGATION_PREFIX):
        text = text[1:]
    elif text.startswith(NEGATION_PREFIX):
        negated = True
        text = text[1:]

    anchored = False
    if text.startswith("/"):
        anchored = True
        text = text[1:]

    directory_only = False
    if text.endswith("/") and not _is_escaped(text, len(text) - 1):
        directory_only = True
        text = text[:-1]

    segments = [segment for segment in _split_unescaped(text) if segment]
    if not segments:
        logger.debug("line %d reduces to an empty pattern, skipped", line_number)
        return None
    if len(segments) > 1:
        anchored = True
    if case_insensitive:
        segments = [segment.lower() for segment in segments]

    return Rule(
        sequence_index=sequence_index,
        segments=tuple(segments),
        negated=negated,
        anchored=anchored,
        directory_only=directory_only,
        pattern=pattern,
        line_number=line_number,
    )


def _is_escaped(text: str, index: int) -> bool:
    backslashes = 0
    index -= 1
    while index >= 0 and text[index] == "\\":
        backslashes += 1
        index -= 1
    return backslashes % 2 == 1


def _strip_trailing_whitespace(line: str) -> str:
    end = len(line)
    while end > 0 and line[end - 1] in _TRAILING_WHITESPACE:
        if _is_escaped(line, end - 1):
            break
        end -= 1
    return line[:end]


def _split_unescaped(text: str) -> list[str]:
    parts: list[str] = []
    current: list[str] = []
    escaped = False
    for char in text:
        if escaped:
            current.append(char)
            escaped = False
        elif char == "\\":
            current.append(char)
            escaped = True
        elif char == "/":
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return parts
