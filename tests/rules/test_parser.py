"""Tests for compiling ignore-file lines into rules."""

from pathlib import Path

import pytest

from stripper.errors import RulesFileError
from stripper.rules.parser import compile_line, compile_rules, read_rules_file


def test_plain_name_is_unanchored() -> None:
    rule = compile_line("build")
    assert rule is not None
    assert rule.segments == ("build",)
    assert rule.anchored is False
    assert rule.negated is False
    assert rule.directory_only is False


def test_leading_slash_anchors() -> None:
    rule = compile_line("/build")
    assert rule.anchored is True
    assert rule.segments == ("build",)


def test_embedded_slash_anchors() -> None:
    rule = compile_line("docs/build")
    assert rule.anchored is True
    assert rule.segments == ("docs", "build")


def test_trailing_slash_is_directory_only_and_not_anchoring() -> None:
    rule = compile_line("out/")
    assert rule.directory_only is True
    assert rule.anchored is False
    assert rule.segments == ("out",)


def test_negation_is_stripped() -> None:
    rule = compile_line("!keep.log")
    assert rule.negated is True
    assert rule.segments == ("keep.log",)


def test_negated_anchored_directory() -> None:
    rule = compile_line("!/vendor/")
    assert rule.negated is True
    assert rule.anchored is True
    assert rule.directory_only is True
    assert rule.segments == ("vendor",)


def test_escaped_hash_and_bang_are_literal() -> None:
    hashed = compile_line("\\#notes")
    banged = compile_line("\\!important")
    assert hashed.segments == ("#notes",)
    assert banged.segments == ("!important",)
    assert banged.negated is False


@pytest.mark.parametrize("line", ["", "   ", "\t", "# comment", "   # indented comment"])
def test_blank_and_comment_lines_are_skipped(line: str) -> None:
    assert compile_line(line) is None


def test_trailing_whitespace_stripped_unless_escaped() -> None:
    assert compile_line("foo   ").segments == ("foo",)
    assert compile_line("foo\\ ").segments == ("foo\\ ",)


def test_pattern_reducing_to_nothing_is_skipped() -> None:
    assert compile_line("/") is None
    assert compile_line("!") is None


def test_double_slashes_collapse() -> None:
    assert compile_line("a//b").segments == ("a", "b")


def test_double_star_segments_kept() -> None:
    rule = compile_line("**/logs/**")
    assert rule.segments == ("**", "logs", "**")


def test_sequence_index_skips_comments() -> None:
    ruleset = compile_rules(["# header", "", "*.log", "# more", "!keep.log"])
    assert [rule.sequence_index for rule in ruleset] == [0, 1]
    assert [rule.line_number for rule in ruleset] == [3, 5]
    assert ruleset[1].pattern == "!keep.log"


def test_compile_never_raises_on_odd_lines() -> None:
    ruleset = compile_rules(["[unterminated", "\\", "***", "a\\/b"])
    assert len(ruleset) == 4


def test_byte_order_mark_removed_from_first_line() -> None:
    ruleset = compile_rules(["\ufeffbuild", "\ufeffother"])
    assert ruleset[0].segments == ("build",)
    assert ruleset[1].segments == ("\ufeffother",)


def test_line_endings_removed() -> None:
    ruleset = compile_rules(["build\r\n", "dist\n"])
    assert [rule.segments for rule in ruleset] == [("build",), ("dist",)]


def test_case_insensitive_lowers_segments() -> None:
    ruleset = compile_rules(["Build/*.LOG"], case_insensitive=True)
    assert ruleset.case_insensitive is True
    assert ruleset[0].segments == ("build", "*.log")


def test_empty_input_gives_empty_ruleset() -> None:
    ruleset = compile_rules([])
    assert ruleset.is_empty()
    assert len(ruleset) == 0


def test_read_rules_file(tmp_path: Path) -> None:
    path = tmp_path / ".gitignore"
    path.write_text("*.pyc\n# comment\n__pycache__/\n", encoding="utf-8")
    assert read_rules_file(path) == ["*.pyc", "# comment", "__pycache__/"]


def test_read_rules_file_missing(tmp_path: Path) -> None:
    with pytest.raises(RulesFileError, match="not found"):
        read_rules_file(tmp_path / "missing")


def test_read_rules_file_directory(tmp_path: Path) -> None:
    with pytest.raises(RulesFileError):
        read_rules_file(tmp_path)


def test_read_rules_file_replaces_bad_bytes(tmp_path: Path) -> None:
    path = tmp_path / "rules"
    path.write_bytes(b"ok\n\xffbad\n")
    lines = read_rules_file(path)
    assert lines[0] == "ok"
    assert lines[1].endswith("bad")
