#!/usr/bin/env python3
"""CLI entry point: argparse, logging setup, config loading, run_chat."""

from __future__ import annotations

import argparse
import logging
import sys

from ata import __version__
from ata.config import DEFAULT_CONFIG_PATH, load_config
from ata.errors import ConfigNotFoundError, ConfigParseError
from ata.shortcuts import print_shortcuts
from chat_cli import run_chat

PROG = "ata"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Ask the Terminal Anything (ATA): OpenAI GPT in the terminal.",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=DEFAULT_CONFIG_PATH,
        metavar="PATH",
        help=f"Path to the configuration TOML file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--print-shortcuts",
        action="store_true",
        help="Print the keyboard shortcuts and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log requests and replies to stderr.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def usage_message(prog: str = PROG) -> str:
    return f"Usage: `{prog} --config=<Path to ata.toml>` or have ata.toml in the current dir."


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # httpx logs every request at INFO; keep it out of the chat
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if args.print_shortcuts:
        print_shortcuts()
        return

    try:
        config = load_config(args.config)
    except ConfigNotFoundError:
        print(usage_message(), file=sys.stderr)
        sys.exit(1)
    except ConfigParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    run_chat(config)


if __name__ == "__main__":
    main()
