# codebundle/parsing/parser.py
from __future__ import annotations

import argparse
import shlex
from typing import List, NoReturn

from codebundle.constants import PROG_NAME, RSP_FILENAME
from codebundle.core.errors import UsageError
from codebundle.parsing.values import bool_arg


class BundleArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises `UsageError` instead of exiting.

    Argument files (`@file`) are split like a shell command line, so a response
    file holding a single line such as `bundle --language python --output x`
    expands into separate tokens. Lines starting with `#` are skipped; a `#`
    inside a word (`c#`) is kept.
    """

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)

    def convert_arg_line_to_args(self, arg_line: str) -> List[str]:
        if arg_line.lstrip().startswith("#"):
            return []
        return shlex.split(arg_line)


def _add_bundle_command(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser(
        "bundle",
        help="Bundle code files into a single file",
        description="Bundle code files under the current directory into a single file.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument(
        "--language",
        "--l",
        metavar="LANG",
        dest="language",
        required=True,
        help=(
            "Programming language to include: csharp|c#, java, python, javascript,\n"
            "cpp|c++, or 'all' for every supported extension."
        ),
    )
    p.add_argument(
        "--output",
        "--o",
        metavar="PATH",
        dest="output",
        help="Output bundle file path. Missing parent directories are created.",
    )
    p.add_argument(
        "--note",
        "--n",
        nargs="?",
        const=True,
        default=False,
        type=bool_arg,
        metavar="BOOL",
        dest="note",
        help="Include source code location as comments (// Source: <path>).",
    )
    p.add_argument(
        "--sort",
        "--s",
        metavar="ORDER",
        dest="sort",
        default="name",
        help="Sort order: 'name' (file name) or 'type' (extension, then name). Default: name.",
    )
    p.add_argument(
        "--remove-empty-lines",
        "--r",
        nargs="?",
        const=True,
        default=False,
        type=bool_arg,
        metavar="BOOL",
        dest="remove_empty_lines",
        help="Remove empty and whitespace-only lines from source code.",
    )
    p.add_argument(
        "--author",
        "-a",
        metavar="NAME",
        dest="author",
        help="Name of the file creator, written as a '// Author:' header.",
    )


def _build_parser() -> BundleArgumentParser:
    """Build the top-level CLI parser with its `bundle` and `create-rsp` subcommands."""
    p = BundleArgumentParser(
        prog=PROG_NAME,
        formatter_class=argparse.RawTextHelpFormatter,
        fromfile_prefix_chars="@",
        description=(
            "codebundle – bundle source files into a single text file.\n"
            f"Arguments may be read from a file: {PROG_NAME} @{RSP_FILENAME}"
        ),
    )
    p.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit diagnostics on stderr as JSON lines (or set CODEBUNDLE_JSON_LOGS=1).",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Verbose diagnostics (DEBUG level).",
    )
    p.add_argument(
        "--version",
        action="store_true",
        dest="show_version",
        help="Print the version and exit.",
    )

    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    _add_bundle_command(sub)
    sub.add_parser(
        "create-rsp",
        help="Create a response file with bundle command",
        description=f"Interactively collect bundle options and save them to {RSP_FILENAME}.",
    )
    return p
