from __future__ import annotations

import pytest

from qtcmd.options import (
    INVALID,
    NO_MATCH,
    CompositeOption,
    ScalarOption,
    SubCommand,
    SwitchOption,
)


@pytest.fixture
def log() -> SubCommand:
    options = CompositeOption(
        [SwitchOption("oneline", "1", "test"), ScalarOption("ref", "r", "HEAD", "test")],
        {"oneline": False, "ref": "HEAD"},
    )
    return SubCommand("log", options, "test")


def test_unknown_token_before_subcommand_is_no_match(log: SubCommand) -> None:
    tokens = ["-x", "log", "-1"]

    assert log.parse(tokens) is NO_MATCH
    assert tokens == ["-x", "log", "-1"]


def test_empty_stream_is_no_match(log: SubCommand) -> None:
    assert log.parse([]) is NO_MATCH


def test_leftover_token_is_invalid(log: SubCommand) -> None:
    tokens = ["log", "-1", "-x"]

    assert log.parse(tokens) is INVALID
    assert tokens == ["-x"]


def test_subcommand_without_options_uses_defaults(log: SubCommand) -> None:
    tokens = ["log"]

    assert log.parse(tokens) == {
        "subcommand": "log",
        "options": {"oneline": False, "ref": "HEAD"},
    }
    assert tokens == []


def test_subcommand_consumes_all_options(log: SubCommand) -> None:
    tokens = ["log", "--ref", "develop"]

    assert log.parse(tokens) == {
        "subcommand": "log",
        "options": {"oneline": False, "ref": "develop"},
    }
    assert tokens == []


def test_nested_subcommand_failure_propagates() -> None:
    inner = SubCommand("show", CompositeOption([SwitchOption("all", "a")], {"all": False}))
    outer = SubCommand("remote", CompositeOption([inner]))
    tokens = ["remote", "show", "-a", "-z"]

    assert outer.parse(tokens) is INVALID
    assert tokens == ["-z"]


def test_nested_subcommand_result() -> None:
    inner = SubCommand("show", CompositeOption([SwitchOption("all", "a")], {"all": False}))
    outer = SubCommand("remote", CompositeOption([inner]))

    assert outer.parse(["remote", "show", "-a"]) == {
        "subcommand": "remote",
        "options": {"subcommand": "show", "options": {"all": True}},
    }
