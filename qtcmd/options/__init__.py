"""
qtcmd.options - Command line option grammar

Provides the switch, scalar, subcommand and composite options, the
declarative builder that assembles them, and grammar validation.
"""

from .base import INVALID, NO_MATCH, Option, ParseFailure, ParseResult, is_failure
from .switch import SwitchOption
from .scalar import ScalarOption
from .composite import CompositeOption
from .subcommand import OPTIONS_KEY, SUBCOMMAND_KEY, SubCommand
from .builder import GrammarError, OptionSpec, build_options, scalar, subcommand, switch
from .validator import GrammarValidator

__all__ = [
    "Option",            # Common interface
    "ParseFailure",      # NO_MATCH / INVALID markers
    "ParseResult",
    "NO_MATCH",
    "INVALID",
    "is_failure",
    "SwitchOption",
    "ScalarOption",
    "CompositeOption",
    "SubCommand",
    "SUBCOMMAND_KEY",
    "OPTIONS_KEY",
    "OptionSpec",        # Declarations
    "build_options",
    "switch",
    "scalar",
    "subcommand",
    "GrammarError",
    "GrammarValidator",  # For testing/validation
]
