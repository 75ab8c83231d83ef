"""
qtcmd.options.composite - Greedy matcher over a set of sibling options

Each round scans the members in declaration order and merges the result of
the first one that applies to the head of the stream. Parsing ends when the
stream is empty; a round in which nothing applies is an INVALID parse and the
unknown token is left at the head of the stream.
"""

from typing import Any, Dict, List, Optional, Sequence

from .base import INVALID, NO_MATCH, Option, ParseResult

SPACER = " "
INDENT = 2


class CompositeOption(Option):
    """Ordered collection of sibling options sharing one defaults table"""

    def __init__(
        self,
        options: Sequence[Option],
        defaults: Optional[Dict[str, Any]] = None,
    ):
        super().__init__()
        self.options = list(options)
        self.defaults = dict(defaults or {})

    def parse(self, tokens: List[str]) -> ParseResult:
        result = dict(self.defaults)

        while tokens:
            for option in self.options:
                matched = option.parse(tokens)
                if matched is NO_MATCH:
                    continue
                if matched is INVALID:
                    return INVALID
                result.update(matched)
                break
            else:
                return INVALID

        return result

    def format_help(self, indent: int = 0) -> str:
        """
        Render the option table as aligned two-column text

        Args:
            indent: Number of spaces prefixed to every line

        Returns:
            str: Help text, one or more lines per option
        """
        if not self.options:
            return ""

        width = max(len(option.display_name) for option in self.options)
        prefix = SPACER * indent
        continuation = prefix + SPACER * (width + INDENT)

        lines = []
        for option in self.options:
            first, *rest = option.help_lines()
            head = prefix + option.display_name.ljust(width) + SPACER * INDENT + first
            lines.append(head.rstrip())
            lines.extend((continuation + line).rstrip() if line else "" for line in rest)

        return "\n".join(lines)

    def __str__(self):
        return self.format_help()
