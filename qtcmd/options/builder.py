"""
qtcmd.options.builder - Declarative grammar construction

A grammar is written as a list of OptionSpec declarations and compiled by
build_options() into a CompositeOption tree. Declaration order is kept, it
decides which sibling wins when two could match the same token.

Example:
    grammar = build_options([
        switch("help", "h", description="Show help"),
        scalar("name", "n", default="takesi", description="Name to use"),
        subcommand("log", "Show history", [
            switch("oneline", "1", description="One line per entry"),
        ]),
    ])
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .base import Option
from .composite import CompositeOption
from .scalar import ScalarOption
from .subcommand import SubCommand
from .switch import SwitchOption
from .validator import GrammarValidator

SWITCH = "switch"
SCALAR = "scalar"
SUBCOMMAND = "subcommand"


class GrammarError(ValueError):
    """Raised when option declarations do not form a usable grammar"""


@dataclass(frozen=True)
class OptionSpec:
    """One option declaration"""

    kind: str
    long_name: str
    short_name: Optional[str] = None
    default: Any = None
    description: str = ""
    children: Tuple["OptionSpec", ...] = field(default_factory=tuple)

    def flags(self) -> List[str]:
        if self.kind == SUBCOMMAND:
            return [self.long_name]
        flags = [f"--{self.long_name}"]
        if self.short_name:
            flags.insert(0, f"-{self.short_name}")
        return flags


def switch(long_name: str, short_name: Optional[str] = None, description: str = "") -> OptionSpec:
    """Declare a boolean flag, defaulting to False"""
    return OptionSpec(SWITCH, long_name, short_name, False, description)


def scalar(
    long_name: str,
    short_name: Optional[str] = None,
    default: Any = None,
    description: str = "",
) -> OptionSpec:
    """Declare a flag taking one value; None means no default"""
    return OptionSpec(SCALAR, long_name, short_name, default, description)


def subcommand(name: str, description: str, children: Sequence[OptionSpec]) -> OptionSpec:
    """Declare a subcommand with its own nested options"""
    return OptionSpec(SUBCOMMAND, name, None, None, description, tuple(children))


def _build_option(decl: OptionSpec) -> Option:
    if decl.kind == SWITCH:
        return SwitchOption(decl.long_name, decl.short_name, decl.description)
    if decl.kind == SCALAR:
        return ScalarOption(decl.long_name, decl.short_name, decl.default, decl.description)
    if decl.kind == SUBCOMMAND:
        return SubCommand(decl.long_name, build_options(decl.children), decl.description)
    raise GrammarError(f"Unknown option kind '{decl.kind}' for '{decl.long_name}'")


def build_options(declarations: Sequence[OptionSpec]) -> CompositeOption:
    """
    Compile declarations into a CompositeOption

    Args:
        declarations: Sibling declarations in match order

    Returns:
        CompositeOption: Parser with its defaults table

    Raises:
        GrammarError: On duplicate names or reserved result keys
    """
    valid, error = GrammarValidator.validate_siblings(declarations)
    if not valid:
        raise GrammarError(error)

    options = []
    defaults: Dict[str, Any] = {}
    for declaration in declarations:
        options.append(_build_option(declaration))
        if declaration.kind != SUBCOMMAND:
            defaults[declaration.long_name] = declaration.default

    return CompositeOption(options, defaults)
