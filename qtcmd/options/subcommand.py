"""
qtcmd.options.subcommand - Named nested grammar

Once the subcommand name matches there is no backtracking: the nested
grammar has to consume every remaining token, otherwise the whole parse is
INVALID.
"""

from typing import List

from .base import INVALID, NO_MATCH, Option, ParseResult, is_failure
from .composite import CompositeOption, INDENT

SUBCOMMAND_KEY = "subcommand"
OPTIONS_KEY = "options"


class SubCommand(Option):
    """Subcommand such as ``push``, wrapping its own CompositeOption"""

    def __init__(self, name: str, options: CompositeOption, description: str = ""):
        super().__init__(description)
        self.name = name
        self.options = options

    @property
    def display_name(self) -> str:
        return self.name

    def help_lines(self) -> List[str]:
        lines = super().help_lines()
        nested = self.options.format_help(indent=INDENT)
        if nested:
            lines.extend(nested.splitlines())
        return lines

    def parse(self, tokens: List[str]) -> ParseResult:
        if not tokens or tokens[0] != self.name:
            return NO_MATCH

        del tokens[0]
        options = self.options.parse(tokens)

        # Leftover tokens mean an option the nested grammar does not know
        if is_failure(options) or tokens:
            return INVALID

        return {SUBCOMMAND_KEY: self.name, OPTIONS_KEY: options}

    def __repr__(self):
        return f"SubCommand({self.name!r})"
