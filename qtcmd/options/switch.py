"""
qtcmd.options.switch - Boolean flag option
"""

from typing import List

from .base import FlagOption, NO_MATCH, ParseResult


class SwitchOption(FlagOption):
    """Boolean flag such as ``-h, --help``"""

    def parse(self, tokens: List[str]) -> ParseResult:
        if not self.matches(tokens):
            return NO_MATCH

        del tokens[0]
        return {self.long_name: True}
