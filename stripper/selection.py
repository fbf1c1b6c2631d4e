"""Keep only the walked entries that the rule set ignores."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from stripper.config import ErrorPolicy, SelectionConfig
from stripper.errors import EnumerationError
from stripper.rules.matcher import matched
from stripper.rules.models import MatchOutcome, Rule, RuleSet
from stripper.walker import PathObservation, WalkItem, walk_tree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectedEntry:
    observation: PathObservation
    rule: Rule

    @property
    def path(self) -> str:
        return self.observation.path


@dataclass
class SelectionReport:
    visited: int = 0
    selected: int = 0
    pruned: int = 0
    errors: list[EnumerationError] = field(default_factory=list)

    def is_valid(self) -> bool:
        return not self.errors

    def summary(self) -> dict[str, int]:
        return {
            "visited": self.visited,
            "selected": self.selected,
            "pruned": self.pruned,
            "errors": len(self.errors),
        }


def classify(
    observations: Iterable[WalkItem], ruleset: RuleSet, root: Optional[str] = None
) -> Iterator[tuple[WalkItem, Optional[MatchOutcome]]]:
    """Pair each item with its outcome; errors get ``None``.

    Paths are matched relative to ``root`` when one is given, so anchored
    rules stay anchored to the walk root rather than the working directory.
    """
    for item in observations:
        if isinstance(item, EnumerationError):
            yield item, None
            continue
        path = item.path if root is None else os.path.relpath(item.path, root)
        yield item, matched(ruleset, path, item.is_dir)


def select(observations: Iterable[WalkItem], ruleset: RuleSet) -> Iterator[WalkItem]:
    """Lazily filter ``observations`` down to ignored entries.

    Enumeration errors are forwarded untouched and in order.
    """
    for item, outcome in classify(observations, ruleset):
        if outcome is None or outcome.is_ignored:
            yield item


def select_tree(
    ruleset: RuleSet,
    config: SelectionConfig | None = None,
    report: SelectionReport | None = None,
) -> Iterator[SelectedEntry]:
    """Walk ``config.root`` and yield every ignored entry with its rule.

    With ``config.prune`` an ignored directory is yielded but not descended
    into. Enumeration errors either abort the walk by being raised, or are
    recorded on ``report`` so the walk continues, depending on
    ``config.on_error``.
    """
    config = config or SelectionConfig()
    report = report if report is not None else SelectionReport()
    pending_prune: set[str] = set()

    def skip_dir(observation: PathObservation) -> bool:
        if observation.path not in pending_prune:
            return False
        pending_prune.discard(observation.path)
        report.pruned += 1
        logger.debug("not descending into %s", observation.path)
        return True

    walk = walk_tree(config.root, skip_dir=skip_dir if config.prune else None)
    for item, outcome in classify(walk, ruleset, root=config.root):
        if isinstance(item, EnumerationError):
            if config.on_error == ErrorPolicy.ABORT:
                raise item
            logger.debug("%s", item)
            report.errors.append(item)
            continue

        report.visited += 1
        if outcome is None or not outcome.is_ignored or outcome.rule_index is None:
            continue

        rule = ruleset[outcome.rule_index]
        logger.debug("%s ignored by rule %s", item.path, rule.describe())
        if config.prune and item.is_dir:
            pending_prune.add(item.path)
        report.selected += 1
        yield SelectedEntry(observation=item, rule=rule)
