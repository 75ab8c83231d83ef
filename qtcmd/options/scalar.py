"""
qtcmd.options.scalar - Value-bearing flag option

A scalar consumes its flag and the following token. When the value is
omitted (end of stream, or the next token starts with ``-``) the default is
used if there is one; without a default the option reports NO_MATCH so a
later sibling can still claim the token.

Known limitation: a value that legitimately begins with ``-`` cannot be
passed, it is read as an omitted value.
"""

from typing import Any, List, Optional

from .base import FlagOption, NO_MATCH, ParseResult


class ScalarOption(FlagOption):
    """Flag followed by one value token, e.g. ``--user takesi``"""

    def __init__(
        self,
        long_name: str,
        short_name: Optional[str] = None,
        default: Any = None,
        description: str = "",
    ):
        super().__init__(long_name, short_name, description)
        self.default = default

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def display_name(self) -> str:
        name = f"{super().display_name} <value>"
        if self.has_default:
            name += f" [{self.default}]"
        return name

    def parse(self, tokens: List[str]) -> ParseResult:
        if not self.matches(tokens):
            return NO_MATCH

        if len(tokens) < 2 or tokens[1].startswith("-"):
            if not self.has_default:
                return NO_MATCH
            del tokens[0]
            return {self.long_name: self.default}

        value = tokens[1]
        del tokens[:2]
        return {self.long_name: value}
