"""Single path-component glob matching.

A segment never spans a ``/``, so the matcher only deals with one component
at a time:

- ``*`` matches any run of characters, including none
- ``?`` matches exactly one character
- ``[abc]``, ``[a-z]`` match one character from the class; ``[!a]`` and
  ``[^a]`` negate it, and a ``]`` placed first is literal
- ``\\x`` matches ``x`` literally

An unterminated ``[`` is taken literally rather than rejected.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    LITERAL = "literal"
    ANY_CHAR = "any_char"
    STAR = "star"
    CLASS = "class"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    char: str = ""
    negated: bool = False
    ranges: tuple[tuple[str, str], ...] = ()

    def accepts(self, char: str) -> bool:
        if self.kind == TokenKind.ANY_CHAR:
            return True
        if self.kind == TokenKind.LITERAL:
            return self.char == char
        inside = any(low <= char <= high for low, high in self.ranges)
        return inside != self.negated


@functools.lru_cache(maxsize=1024)
def tokenize(segment: str) -> tuple[Token, ...]:
    tokens: list[Token] = []
    index = 0
    while index < len(segment):
        char = segment[index]
        if char == "\\" and index + 1 < len(segment):
            tokens.append(Token(TokenKind.LITERAL, char=segment[index + 1]))
            index += 2
            continue
        if char == "*":
            # runs of stars collapse, "a**b" behaves like "a*b" inside a component
            if not tokens or tokens[-1].kind != TokenKind.STAR:
                tokens.append(Token(TokenKind.STAR))
            index += 1
            continue
        if char == "?":
            tokens.append(Token(TokenKind.ANY_CHAR))
            index += 1
            continue
        if char == "[":
            parsed = _parse_class(segment, index)
            if parsed is not None:
                token, index = parsed
                tokens.append(token)
                continue
        tokens.append(Token(TokenKind.LITERAL, char=char))
        index += 1
    return tuple(tokens)


def _parse_class(segment: str, start: int) -> tuple[Token, int] | None:
    index = start + 1
    negated = False
    if index < len(segment) and segment[index] in ("!", "^"):
        negated = True
        index += 1

    ranges: list[tuple[str, str]] = []
    first = True
    while index < len(segment):
        char = segment[index]
        if char == "]" and not first:
            return Token(TokenKind.CLASS, negated=negated, ranges=tuple(ranges)), index + 1
        first = False
        if char == "\\" and index + 1 < len(segment):
            index += 1
            char = segment[index]
        low = char
        index += 1
        if (
            index + 1 < len(segment)
            and segment[index] == "-"
            and segment[index + 1] != "]"
        ):
            high = segment[index + 1]
            index += 2
            if high == "\\" and index < len(segment):
                high = segment[index]
                index += 1
            ranges.append((low, high))
        else:
            ranges.append((low, low))
    return None


def match_component(segment: str, name: str) -> bool:
    tokens = tokenize(segment)
    token_pos = 0
    name_pos = 0
    star_token = -1
    star_name = 0

    while name_pos < len(name):
        if token_pos < len(tokens):
            token = tokens[token_pos]
            if token.kind == TokenKind.STAR:
                star_token = token_pos
                star_name = name_pos
                token_pos += 1
                continue
            if token.accepts(name[name_pos]):
                token_pos += 1
                name_pos += 1
                continue
        if star_token < 0:
            return False
        # backtrack: let the last star swallow one more character
        star_name += 1
        name_pos = star_name
        token_pos = star_token + 1

    while token_pos < len(tokens) and tokens[token_pos].kind == TokenKind.STAR:
        token_pos += 1
    return token_pos == len(tokens)
