"""CLI entry-point for env_scaffold.

Usage:
    python -m env_scaffold [ROOT] [--no-gitignore] [--json] [-v]
    python -m env_scaffold examples [ROOT] [--no-gitignore] [--json] [-v]
    python -m env_scaffold list [ROOT] [--no-gitignore] [--json]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from env_scaffold import __version__
from env_scaffold.api import list_examples, scaffold_examples
from env_scaffold.errors import ScaffoldError
from env_scaffold.utils import ExitCode, stable_json_dump

_logger = logging.getLogger("env_scaffold")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Project root to search for .env.example files (default: cwd).",
    )
    p.add_argument(
        "--gitignore",
        dest="use_gitignore",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Skip files matched by <root>/.gitignore (default: on).",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the result as JSON to stdout.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log pipeline steps to stderr.",
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="env-scaffold",
        description="Create .env files from .env.example templates.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = p.add_subparsers(dest="command")

    # ── examples subcommand ─────────────────────────────────────────
    ex_p = sub.add_parser(
        "examples",
        help="Create .env from .env.example files.",
    )
    _add_common_args(ex_p)

    # ── list subcommand ─────────────────────────────────────────────
    ls_p = sub.add_parser(
        "list",
        help="List the .env.example files that would be offered.",
    )
    _add_common_args(ls_p)

    return p


_KNOWN_COMMANDS = {"examples", "list"}


def _handle_list(args: argparse.Namespace) -> int:
    """Dispatch ``env-scaffold list [ROOT]``."""
    root: Path = args.root.resolve()
    try:
        files = list_examples(root, use_gitignore=args.use_gitignore)
    except ScaffoldError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return ExitCode.ERROR

    rel = [p.relative_to(root).as_posix() for p in files]
    if args.json_out:
        stable_json_dump({"root": root, "files": rel}, sys.stdout)
    elif not rel:
        print("No .env.example files found.", file=sys.stderr)
    else:
        for r in rel:
            print(r)
    return ExitCode.SUCCESS


def _handle_examples(args: argparse.Namespace) -> int:
    """Dispatch ``env-scaffold examples [ROOT]``."""
    from env_scaffold.ui.console import ConsolePrompter, ConsoleSelector

    root: Path = args.root.resolve()
    try:
        result, result_dict = scaffold_examples(
            root,
            selector=ConsoleSelector(),
            prompter=ConsolePrompter(),
            use_gitignore=args.use_gitignore,
        )
    except ScaffoldError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return ExitCode.ERROR

    if not result.cancelled and not result.selected:
        print("No files selected. Exiting...", file=sys.stderr)
    else:
        for w in result.written:
            print(f"wrote {w.target.relative_to(root).as_posix()}", file=sys.stderr)

    if args.json_out:
        stable_json_dump(result_dict, sys.stdout)
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = ok/cancelled, 2 = error)."""
    effective_argv = list(argv) if argv is not None else sys.argv[1:]

    # `env-scaffold <root>` and bare `env-scaffold` mean `examples`.
    first_positional = next(
        (a for a in effective_argv if not a.startswith("-")), None
    )
    if first_positional not in _KNOWN_COMMANDS and not {"-h", "--help", "--version"} & set(effective_argv):
        effective_argv = ["examples", *effective_argv]

    args = _build_parser().parse_args(effective_argv)
    _configure_logging(args.verbose)
    _logger.debug("env-scaffold %s: %s", __version__, args)

    if args.command == "list":
        return _handle_list(args)
    return _handle_examples(args)


if __name__ == "__main__":
    raise SystemExit(main())
