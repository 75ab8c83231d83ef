"""
qtcmd.grammar - Command line grammar of the qtcmd tool

Declaration order matters: when two options could take the same token the
one declared first wins.
"""

from .options import build_options, scalar, subcommand, switch

PUSH_OPTIONS = [
    switch("update", "u", "Update an existing item"),
    scalar("id", "id", description="Id of the item to update"),
    scalar("title", "h", description="Title of the item\nDefaults to the file name"),
    switch("gist", "g", "Post code blocks to Gist"),
    switch("tweet", "w", "Post to Twitter"),
    switch("private", "p", "Post as a private item"),
    scalar("tags", "t", description='Comma separated tags, ex) --tags "Qiita,Ruby[1.8,1.9]"'),
    scalar("file", "f", description="Markdown file to post"),
]

ROOT_DECLARATIONS = [
    switch("version", "v", "Show version and exit"),
    switch("help", "h", "Show this help and exit"),
    scalar("user", "u", description="Run as the given user"),
    scalar("token", "t", description="Access token to authenticate with"),
    subcommand("push", "Send an item to Qiita", PUSH_OPTIONS),
]

ROOT_OPTIONS = build_options(ROOT_DECLARATIONS)

USAGE = "qtcmd [options] subcommand [args]"


def format_help() -> str:
    """Full help text: usage line followed by the option table"""
    return f"{USAGE}\n{ROOT_OPTIONS.format_help()}"
