from __future__ import annotations

from pathlib import Path

from qtcmd.options import GrammarValidator, scalar, subcommand, switch


def test_validate_siblings_accepts_distinct_names() -> None:
    declarations = [switch("help", "h"), scalar("user", "u"), subcommand("push", "test", [switch("update", "u")])]

    assert GrammarValidator.validate_siblings(declarations) == (True, None)


def test_validate_siblings_reports_conflicting_flag() -> None:
    valid, error = GrammarValidator.validate_siblings([switch("help", "h"), scalar("title", "h")])

    assert not valid
    assert "-h" in error
    assert "--help" in error


def test_validate_file(tmp_path: Path) -> None:
    article = tmp_path / "article.md"
    article.write_text("# hello", encoding="utf-8")

    assert GrammarValidator.validate_file(str(article)) == (True, None)
    assert GrammarValidator.validate_file(None)[0] is False
    assert GrammarValidator.validate_file(str(tmp_path / "missing.md"))[0] is False
    assert GrammarValidator.validate_file(str(tmp_path))[0] is False


def test_validate_credential() -> None:
    assert GrammarValidator.validate_credential("user", "takesi") == (True, None)
    assert GrammarValidator.validate_credential("user", "  ") == (False, "No user specified (use --user)")
    assert GrammarValidator.validate_credential("token", None)[0] is False


def test_validate_update_requires_id() -> None:
    assert GrammarValidator.validate_update(True, None)[0] is False
    assert GrammarValidator.validate_update(True, "abc") == (True, None)
    assert GrammarValidator.validate_update(False, None) == (True, None)


def test_validate_push_arguments_collects_all_errors() -> None:
    errors = GrammarValidator.validate_push_arguments({"file": None, "update": True, "id": None}, None, None)

    assert errors == [
        "No file specified (use --file)",
        "No user specified (use --user)",
        "No token specified (use --token)",
        "--update requires --id",
    ]
