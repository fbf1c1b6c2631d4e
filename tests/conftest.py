import sys
from pathlib import Path
from typing import Callable

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture
def build_ruleset():
    from stripper.rules import compile_rules

    def _build(*lines: str, case_insensitive: bool = False):
        return compile_rules(list(lines), case_insensitive=case_insensitive)

    return _build


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Create files (and their parents) from relative paths; a trailing / makes a directory."""

    def _make(*entries: str, base: Path | None = None) -> Path:
        root = base or tmp_path
        for entry in entries:
            target = root / entry
            if entry.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("", encoding="utf-8")
        return root

    return _make


@pytest.fixture
def rules_file(tmp_path: Path) -> Callable[..., Path]:
    def _write(*lines: str, name: str = ".stripignore") -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cli_runner(tmp_path: Path, monkeypatch) -> CliRunner:
    monkeypatch.chdir(tmp_path)
    for name in ("STRIPPER_ROOT", "STRIPPER_PRUNE", "STRIPPER_ON_ERROR", "STRIPPER_IGNORE_CASE"):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()
