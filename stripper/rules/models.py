"""Compiled ignore-rule data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


DOUBLE_STAR = "**"


@dataclass(frozen=True)
class Rule:
    sequence_index: int
    segments: tuple[str, ...]
    negated: bool = False
    anchored: bool = False
    directory_only: bool = False
    pattern: str = ""
    line_number: int = 0

    def describe(self) -> str:
        return f"{self.line_number}:{self.pattern}"


@dataclass(frozen=True)
class RuleSet:
    rules: tuple[Rule, ...] = ()
    case_insensitive: bool = False

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __getitem__(self, index: int) -> Rule:
        return self.rules[index]

    def is_empty(self) -> bool:
        return not self.rules


class MatchKind(str, Enum):
    IGNORED = "ignored"
    NOT_IGNORED = "not_ignored"


@dataclass(frozen=True)
class MatchOutcome:
    kind: MatchKind
    rule_index: Optional[int] = None
    whitelist_index: Optional[int] = None

    @classmethod
    def ignored(cls, rule_index: int) -> "MatchOutcome":
        return cls(kind=MatchKind.IGNORED, rule_index=rule_index)

    @classmethod
    def not_ignored(cls, whitelist_index: Optional[int] = None) -> "MatchOutcome":
        return cls(kind=MatchKind.NOT_IGNORED, whitelist_index=whitelist_index)

    @property
    def is_ignored(self) -> bool:
        return self.kind == MatchKind.IGNORED
