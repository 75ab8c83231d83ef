from __future__ import annotations

import pytest

from qtcmd.options import NO_MATCH, ScalarOption


@pytest.fixture
def no_default() -> ScalarOption:
    return ScalarOption("name", "n", None, "test")


@pytest.fixture
def with_default() -> ScalarOption:
    return ScalarOption("name", "n", "takesi", "test")


@pytest.mark.parametrize("flag", ["-n", "--name"])
def test_scalar_consumes_flag_and_value(no_default: ScalarOption, flag: str) -> None:
    tokens = [flag, "takesi", "rest"]

    assert no_default.parse(tokens) == {"name": "takesi"}
    assert tokens == ["rest"]


@pytest.mark.parametrize("tokens", [["-x", "takesi", "rest"], ["--hoge", "takesi", "rest"], []])
def test_scalar_mismatch_is_no_match(no_default: ScalarOption, tokens: list) -> None:
    before = list(tokens)

    assert no_default.parse(tokens) is NO_MATCH
    assert tokens == before


def test_omitted_value_without_default_is_no_match(no_default: ScalarOption) -> None:
    tokens = ["--name", "-t", "rest"]

    assert no_default.parse(tokens) is NO_MATCH
    assert tokens == ["--name", "-t", "rest"]


def test_last_token_without_default_is_no_match(no_default: ScalarOption) -> None:
    tokens = ["--name"]

    assert no_default.parse(tokens) is NO_MATCH
    assert tokens == ["--name"]


def test_explicit_value_overrides_default(with_default: ScalarOption) -> None:
    tokens = ["-n", "sigeru", "rest"]

    assert with_default.parse(tokens) == {"name": "sigeru"}
    assert tokens == ["rest"]


def test_omitted_value_uses_default(with_default: ScalarOption) -> None:
    tokens = ["--name", "-x"]

    assert with_default.parse(tokens) == {"name": "takesi"}
    assert tokens == ["-x"]


def test_last_token_uses_default(with_default: ScalarOption) -> None:
    tokens = ["--name"]

    assert with_default.parse(tokens) == {"name": "takesi"}
    assert tokens == []


def test_falsy_default_still_counts_as_default() -> None:
    opt = ScalarOption("name", "n", False, "test")
    tokens = ["--name", "-t", "rest"]

    assert opt.parse(tokens) == {"name": False}
    assert tokens == ["-t", "rest"]


def test_dash_prefixed_value_reads_as_omitted(with_default: ScalarOption) -> None:
    tokens = ["--name", "-1"]

    assert with_default.parse(tokens) == {"name": "takesi"}
    assert tokens == ["-1"]


def test_scalar_display_name(no_default: ScalarOption, with_default: ScalarOption) -> None:
    assert no_default.display_name == "-n, --name <value>"
    assert with_default.display_name == "-n, --name <value> [takesi]"
    assert ScalarOption("id").display_name == "--id <value>"
