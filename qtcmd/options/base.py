"""
qtcmd.options.base - Common option interface and parse outcomes

Every parseable element (switch, scalar, subcommand, composite) implements
``parse(tokens)`` over a shared, destructively consumed list of strings and
returns either a mapping of results or one of the ParseFailure markers.
"""

import enum
from typing import Any, Dict, List, Optional, Union


class ParseFailure(enum.Enum):
    """Terminal outcomes of Option.parse that are not a result mapping"""

    # Option does not apply to the current token, stream untouched
    NO_MATCH = "no_match"
    # Input is malformed or left unconsumed tokens, stream partially consumed
    INVALID = "invalid"

    def __repr__(self):
        return self.name


NO_MATCH = ParseFailure.NO_MATCH
INVALID = ParseFailure.INVALID

ParseResult = Union[Dict[str, Any], ParseFailure]


def is_failure(result: ParseResult) -> bool:
    """Check whether a parse result is one of the failure markers"""
    return isinstance(result, ParseFailure)


class Option:
    """Base class for all parseable command line elements"""

    def __init__(self, description: str = ""):
        self.description = description

    @property
    def display_name(self) -> str:
        return ""

    def parse(self, tokens: List[str]) -> ParseResult:
        raise NotImplementedError

    def help_lines(self) -> List[str]:
        """Description lines shown next to display_name in help output"""
        return self.description.splitlines() or [""]


class FlagOption(Option):
    """Option matched by ``-short`` or ``--long``"""

    def __init__(self, long_name: str, short_name: Optional[str] = None, description: str = ""):
        super().__init__(description)
        self.long_name = long_name
        self.short_name = short_name

    @property
    def flags(self) -> List[str]:
        """Tokens that select this option, short form first"""
        flags = []
        if self.short_name:
            flags.append(f"-{self.short_name}")
        flags.append(f"--{self.long_name}")
        return flags

    @property
    def display_name(self) -> str:
        return ", ".join(self.flags)

    def matches(self, tokens: List[str]) -> bool:
        return bool(tokens) and tokens[0] in self.flags

    def __repr__(self):
        return f"{self.__class__.__name__}({self.long_name!r}, short_name={self.short_name!r})"
