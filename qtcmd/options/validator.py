"""
Validation module for qtcmd option grammars and parsed values

Handles build-time checks of option declarations (duplicate names, reserved
result keys) and post-parse checks of the values the push command needs.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

RESERVED_KEYS = ("subcommand", "options")


class GrammarValidator:
    """Validates option declarations and parsed option values"""

    @classmethod
    def validate_siblings(cls, declarations: Sequence[Any]) -> Tuple[bool, Optional[str]]:
        """
        Validate one level of sibling declarations

        Args:
            declarations: OptionSpec declarations sharing one composite

        Returns:
            Tuple of (is_valid, error_message)
        """
        flags: Dict[str, str] = {}
        keys = set()
        subcommands = set()

        for declaration in declarations:
            if declaration.kind == "subcommand":
                if declaration.long_name in subcommands:
                    return False, f"Duplicate subcommand '{declaration.long_name}'"
                subcommands.add(declaration.long_name)
                continue

            if declaration.long_name in RESERVED_KEYS:
                return False, f"Option name '{declaration.long_name}' is reserved"

            if declaration.long_name in keys:
                return False, f"Duplicate option '--{declaration.long_name}'"
            keys.add(declaration.long_name)

            for flag in declaration.flags():
                if flag in flags:
                    return False, (
                        f"Option '--{declaration.long_name}' reuses flag '{flag}' "
                        f"already declared by '--{flags[flag]}'"
                    )
                flags[flag] = declaration.long_name

        return True, None

    @classmethod
    def validate_file(cls, file: Optional[str]) -> Tuple[bool, Optional[str]]:
        """Validate the article file argument"""
        if not file:
            return False, "No file specified (use --file)"

        if not Path(file).is_file():
            return False, f"{file} does not exist"

        return True, None

    @classmethod
    def validate_credential(cls, name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
        """Validate a --user / --token value"""
        if not value or not value.strip():
            return False, f"No {name} specified (use --{name})"

        return True, None

    @classmethod
    def validate_update(cls, update: bool, item_id: Optional[str]) -> Tuple[bool, Optional[str]]:
        """An update needs the id of the item to patch"""
        if update and not item_id:
            return False, "--update requires --id"

        return True, None

    @classmethod
    def validate_push_arguments(
        cls, options: Dict[str, Any], user: Optional[str], token: Optional[str]
    ) -> List[str]:
        """
        Validate everything the push command needs at once

        Args:
            options: Parsed options of the push subcommand
            user: Top-level --user value
            token: Top-level --token value

        Returns:
            List of error messages (empty if all valid)
        """
        errors = []

        checks = [
            cls.validate_file(options.get("file")),
            cls.validate_credential("user", user),
            cls.validate_credential("token", token),
            cls.validate_update(bool(options.get("update")), options.get("id")),
        ]
        for valid, error in checks:
            if not valid:
                errors.append(error)

        return errors
