from __future__ import annotations

import pytest

from osh.errors import ErrorKind, ShellError
from osh.parser import ArgumentVector, check_background, normalize, tokenize


def test_normalize_trims_and_collapses_spaces() -> None:
    assert normalize("  ls   -la  ") == "ls -la"


def test_normalize_blank_input_is_none() -> None:
    assert normalize("") is None
    assert normalize("     ") is None
    assert normalize("\n\n") is None
    assert normalize(None) is None


def test_normalize_newlines_become_single_separator() -> None:
    assert normalize("echo\n\nhi\n") == "echo hi"
    assert normalize("echo \n hi") == "echo hi"


def test_normalize_drops_non_printable() -> None:
    assert normalize("ec\x07ho\x00 hi") == "echo hi"
    # tabs are not separators
    assert normalize("ls\t-la") == "ls-la"


def test_normalize_keeps_unicode_text() -> None:
    assert normalize(" cat  café.txt ") == "cat café.txt"


@pytest.mark.parametrize(
    "raw",
    ["  ls   -la  ", "a\x01 \x01 b", "\n x \n\n y ", "sleep 5 &", " \x7f echo  hi \t"],
)
def test_normalize_is_idempotent(raw: str) -> None:
    once = normalize(raw)
    assert normalize(once) == once


def test_tokenize_splits_on_spaces() -> None:
    assert tokenize("ls -la").argv() == ["ls", "-la"]


@pytest.mark.parametrize("line", ["ls -la", "echo a b c", "sleep 5 &", "!!", "! 3"])
def test_tokens_rejoin_to_the_normalized_line(line: str) -> None:
    assert " ".join(tokenize(line)) == line


def test_tokenize_background_marker_is_its_own_token() -> None:
    assert tokenize("sleep 5 &").argv() == ["sleep", "5", "&"]


def test_tokenize_drops_tokens_past_capacity() -> None:
    line = " ".join(str(i) for i in range(100))
    args = tokenize(line)
    assert len(args) == 80
    assert args[-1] == "79"


def test_tokenize_cuts_long_tokens() -> None:
    args = tokenize("echo " + "x" * 200 + " tail")
    assert args.argv() == ["echo", "x" * 128, "tail"]


def test_tokenize_none_is_input_unavailable() -> None:
    with pytest.raises(ShellError) as exc:
        tokenize(None)
    assert exc.value.kind is ErrorKind.INPUT_UNAVAILABLE
    assert not exc.value.fatal


def test_argument_vector_refuses_push_when_full() -> None:
    args = ArgumentVector(capacity=2)
    assert args.push("a")
    assert args.push("b")
    assert args.full()
    assert not args.push("c")
    assert args.argv() == ["a", "b"]
    assert args.pop() == "b"
    assert not args.full()


def test_check_background_strips_trailing_ampersand() -> None:
    args = tokenize("sleep 5 &")
    assert check_background(args)
    assert args.argv() == ["sleep", "5"]


def test_check_background_without_marker() -> None:
    args = tokenize("ls -la")
    assert not check_background(args)
    assert args.argv() == ["ls", "-la"]


def test_lone_ampersand_is_not_a_background_request() -> None:
    args = tokenize("&")
    assert not check_background(args)
    assert args.argv() == ["&"]
