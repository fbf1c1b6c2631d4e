"""Deterministic pre-order walk of a directory tree."""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from stripper.constants import DEFAULT_ROOT
from stripper.errors import EnumerationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathObservation:
    path: str
    is_dir: bool

    @classmethod
    def file(cls, path: str) -> "PathObservation":
        return cls(path=path, is_dir=False)

    @classmethod
    def dir(cls, path: str) -> "PathObservation":
        return cls(path=path, is_dir=True)


WalkItem = Union[PathObservation, EnumerationError]
SkipDir = Callable[[PathObservation], bool]


def walk_tree(root: str = DEFAULT_ROOT, skip_dir: Optional[SkipDir] = None) -> Iterator[WalkItem]:
    """Yield ``root`` and everything below it, parents before children.

    Entries within a directory come in bytewise name order so that runs are
    reproducible. Symlinks are reported but never followed. A directory that
    cannot be listed yields an ``EnumerationError`` and the walk moves on to
    its siblings. ``skip_dir`` is asked, after a directory has been yielded,
    whether to leave its contents out.
    """
    try:
        root_stat = os.stat(root)
    except OSError as exc:
        yield EnumerationError(Path(root), exc)
        return

    observation = PathObservation(path=root, is_dir=stat.S_ISDIR(root_stat.st_mode))
    yield observation
    if observation.is_dir and not _should_skip(observation, skip_dir):
        yield from _walk_children(root, skip_dir)


def _should_skip(observation: PathObservation, skip_dir: Optional[SkipDir]) -> bool:
    if skip_dir is None:
        return False
    return skip_dir(observation)


def _walk_children(directory: str, skip_dir: Optional[SkipDir]) -> Iterator[WalkItem]:
    try:
        with os.scandir(directory) as handle:
            entries = sorted(handle, key=lambda entry: os.fsencode(entry.name))
    except OSError as exc:
        logger.debug("cannot list %s: %s", directory, exc)
        yield EnumerationError(Path(directory), exc)
        return

    for entry in entries:
        path = os.path.join(directory, entry.name)
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as exc:
            yield EnumerationError(Path(path), exc)
            continue

        observation = PathObservation(path=path, is_dir=is_dir)
        yield observation
        if is_dir and not _should_skip(observation, skip_dir):
            yield from _walk_children(path, skip_dir)
