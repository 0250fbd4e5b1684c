"""CLI entrypoint for cargo-script."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cargo_script import __version__
from cargo_script.config import ScriptConfig, default_config_path, load_config
from cargo_script.constants.branding import (
    CACHE_CLEARED_MESSAGE,
    CARGO_SUBCOMMAND,
    CLI_DESCRIPTION,
    CLI_USAGE,
    NO_ARGS_MESSAGE,
    PROG_NAME,
)
from cargo_script.exceptions import ConfigError, InternalError, ToolchainError, UserError
from cargo_script.runner import clear_cache, run_script


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        usage=CLI_USAGE,
        description=CLI_DESCRIPTION,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("script", nargs="?", help="Script file (with or without extension) to execute.")
    parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help="Additional arguments passed to the script.",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--expr",
        action="store_true",
        help="Execute <script> as a literal expression and display the result.",
    )
    mode.add_argument(
        "--loop",
        action="store_true",
        help="Execute <script> as a literal closure once for each line from stdin.",
    )
    parser.add_argument(
        "--count",
        action="store_true",
        help="Invoke the loop closure with two arguments: line, and line number.",
    )
    parser.add_argument("--build-only", action="store_true", help="Build the script, but don't run it.")
    parser.add_argument("--clear-cache", action="store_true", help="Clears out the script cache.")
    parser.add_argument("--debug", action="store_true", help="Build a debug executable, not an optimised one.")
    parser.add_argument(
        "--dep",
        action="append",
        default=[],
        metavar="SPEC",
        help="Add an additional Cargo dependency. Each SPEC can be either just the package name "
        "(which will assume the latest version) or a full `name=version` spec (repeat for multiple).",
    )
    parser.add_argument("--force", action="store_true", help="Force the script to be rebuilt.")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help=f"Config file (default: {str(default_config_path()).replace('%', '%%')}, used only if it exists)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log cache decisions and build steps")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    argv = list(sys.argv[1:] if argv is None else argv)
    # `cargo script ...` invokes us as `cargo-script script ...`.
    if argv and argv[0] == CARGO_SUBCOMMAND:
        argv = argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    if args.count and not args.loop:
        parser.error("--count requires --loop")

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.script is None:
        if args.clear_cache:
            return _clear_cache(config)
        print(NO_ARGS_MESSAGE, file=sys.stderr)
        return 2

    try:
        if args.clear_cache:
            # Acts as --force for this run, and replaces the age-based sweep.
            clear_cache(config)
        return run_script(
            args.script,
            config=config,
            args=args.args,
            expr=args.expr,
            loop=args.loop,
            count=args.count,
            deps=args.dep,
            debug=args.debug,
            force=args.force,
            build_only=args.build_only,
            sweep=not args.clear_cache,
        )
    except UserError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ToolchainError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except (InternalError, OSError) as exc:
        print(f"internal error: {exc}", file=sys.stderr)
        return 1


def _clear_cache(config: ScriptConfig) -> int:
    try:
        clear_cache(config)
    except OSError as exc:
        print(f"internal error: {exc}", file=sys.stderr)
        return 1
    print(CACHE_CLEARED_MESSAGE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
