"""Evaluate a compiled rule set against a single path."""

from __future__ import annotations

import os
from typing import Optional, Sequence

from stripper.rules.glob import match_component
from stripper.rules.models import DOUBLE_STAR, MatchOutcome, Rule, RuleSet


def split_components(path: str | os.PathLike[str]) -> list[str]:
    text = os.fspath(path)
    if os.sep != "/":
        text = text.replace(os.sep, "/")
    return [part for part in text.split("/") if part and part != "."]


def matched(ruleset: RuleSet, path: str | os.PathLike[str], is_dir: bool) -> MatchOutcome:
    """Classify ``path`` under gitignore precedence.

    Every rule is tried in order and the last one that matches decides: a
    plain rule makes the path ignored, a negated one makes it not ignored.
    Parent directories are not consulted; an ignored directory does not make
    its children ignored here.
    """
    components = split_components(path)
    if ruleset.case_insensitive:
        components = [part.lower() for part in components]

    best: Optional[Rule] = None
    for rule in ruleset:
        if not rule_matches(rule, components, is_dir):
            continue
        if best is None or rule.sequence_index > best.sequence_index:
            best = rule

    if best is None:
        return MatchOutcome.not_ignored()
    if best.negated:
        return MatchOutcome.not_ignored(whitelist_index=best.sequence_index)
    return MatchOutcome.ignored(best.sequence_index)


def rule_matches(rule: Rule, components: Sequence[str], is_dir: bool) -> bool:
    if rule.directory_only and not is_dir:
        return False
    if not components:
        return False
    if rule.anchored:
        return match_segments(rule.segments, components)
    return any(
        match_segments(rule.segments, components[offset:])
        for offset in range(len(components))
    )


def match_segments(segments: Sequence[str], components: Sequence[str]) -> bool:
    """Match all of ``segments`` against all of ``components``.

    ``**`` consumes zero or more whole components, except in trailing
    position after other segments where it needs at least one (``foo/**``
    covers what is inside ``foo`` but not ``foo`` itself).
    """
    if not segments:
        return not components

    head = segments[0]
    if head == DOUBLE_STAR:
        rest = segments[1:]
        if not rest:
            return bool(components)
        return any(
            match_segments(rest, components[skip:])
            for skip in range(len(components) + 1)
        )

    if not components:
        return False
    if not match_component(head, components[0]):
        return False
    return match_segments(segments[1:], components[1:])
