"""
qtcmd - Qiita command line client

A small declarative command line option framework (switches, scalar options
and nested subcommands) and the qtcmd tool built on it, which posts Markdown
files to Qiita.
"""

__version__ = "0.1.0"
__license__ = "GPL-3.0"

from .options import (
    CompositeOption,
    GrammarError,
    INVALID,
    NO_MATCH,
    OptionSpec,
    ScalarOption,
    SubCommand,
    SwitchOption,
    build_options,
    scalar,
    subcommand,
    switch,
)
from .config import Settings, load_settings
from .qiita import QiitaClient

__all__ = [
    "CompositeOption",
    "GrammarError",
    "INVALID",
    "NO_MATCH",
    "OptionSpec",
    "ScalarOption",
    "SubCommand",
    "SwitchOption",
    "build_options",
    "scalar",
    "subcommand",
    "switch",
    "Settings",
    "load_settings",
    "QiitaClient",
]
