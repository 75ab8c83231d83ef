#!/usr/bin/env python3
"""
qtcmd - Post Markdown files to Qiita from the command line

Parses the command line against the qtcmd grammar and dispatches to the
matched subcommand. Only the push handler talks to the Qiita API.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

import requests

from . import __version__
from .config import Settings, load_settings
from .grammar import ROOT_OPTIONS, USAGE, format_help
from .options import OPTIONS_KEY, SUBCOMMAND_KEY, GrammarValidator, ParseResult, is_failure
from .qiita import QiitaClient
from .tags import parse_tags

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def setup_logging(level: str = "warning", log_file: Optional[Path] = None):
    """Setup console logging, plus a rotating log file when configured"""
    log_level = LOG_LEVELS.get(level, logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s %(message)s", datefmt="%Y/%m/%d %H:%M:%S"
            )
        )
        root_logger.addHandler(file_handler)


class Cli:
    """Parses an argument vector and runs the requested action"""

    def __init__(
        self,
        argv: Sequence[str],
        settings: Optional[Settings] = None,
        client_factory: Callable[..., QiitaClient] = QiitaClient,
    ):
        self.argv = list(argv)
        self.settings = settings or Settings()
        self.client_factory = client_factory

        # Parse a copy, the remaining tokens are kept for error reporting
        self.tokens: List[str] = list(self.argv)
        self.result: ParseResult = ROOT_OPTIONS.parse(self.tokens)
        logging.debug("Parsed %s -> %r", self.argv, self.result)

    def invoke(self) -> int:
        """Run the action selected by the command line and return the exit code"""
        if not self.argv:
            return self.help()
        if is_failure(self.result):
            return self.usage_error()

        if self.result.get("help"):
            return self.help()
        if self.result.get("version"):
            return self.version()
        if self.result.get(SUBCOMMAND_KEY) == "push":
            return self.push()

        return self.help()

    def help(self) -> int:
        print(format_help())
        return EXIT_OK

    def version(self) -> int:
        print(f"qtcmd version {__version__}")
        return EXIT_OK

    def usage_error(self) -> int:
        if self.tokens:
            print(f"Invalid argument: {self.tokens[0]}", file=sys.stderr)
        else:
            print(f"Invalid arguments: {' '.join(self.argv)}", file=sys.stderr)
        print(f"Usage: {USAGE}", file=sys.stderr)
        print("Try 'qtcmd --help' for more information.", file=sys.stderr)
        return EXIT_USAGE

    def push(self) -> int:
        """Create or update a Qiita item from a local file"""
        options: Dict[str, Any] = self.result[OPTIONS_KEY]
        user = self.result.get("user")
        token = self.result.get("token")

        errors = GrammarValidator.validate_push_arguments(options, user, token)
        if errors:
            for error in errors:
                print(f"Error: {error}", file=sys.stderr)
            return EXIT_ERROR

        file = Path(options["file"])
        try:
            body = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logging.error("Cannot read %s: %s", file, e)
            print(f"Error: cannot read {file}", file=sys.stderr)
            return EXIT_ERROR

        item_args = {
            "title": options.get("title") or file.stem,
            "tags": parse_tags(options.get("tags")),
            "body": body,
            "is_private": bool(options.get("private")),
            "gist": bool(options.get("gist")),
            "tweet": bool(options.get("tweet")),
        }

        try:
            with self.client_factory(token, user, self.settings) as client:
                if options.get("id"):
                    logging.info("Updating item %s from %s", options["id"], file)
                    item = client.patch_item(options["id"], **item_args)
                else:
                    logging.info("Posting new item from %s", file)
                    item = client.post_item(**item_args)
        except requests.exceptions.HTTPError as e:
            logging.error("Qiita rejected the request: %s", e)
            print(f"Error: Qiita rejected the request ({e})", file=sys.stderr)
            return EXIT_ERROR
        except requests.exceptions.RequestException as e:
            logging.error("Cannot connect to Qiita: %s", e)
            print("Error: cannot connect to Qiita", file=sys.stderr)
            return EXIT_ERROR

        print(item.get("url") or item.get("id", ""))
        return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main application entry point"""
    settings = load_settings()
    setup_logging(settings.log_level, Path(settings.log_file) if settings.log_file else None)

    try:
        cli = Cli(sys.argv[1:] if argv is None else argv, settings=settings)
        return cli.invoke()
    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
