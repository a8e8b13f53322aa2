"""``plugsmith plugin create`` command line."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from plugsmith.config import get_settings
from plugsmith.errors import InvalidNameError, PluginError
from plugsmith.logging_setup import setup_logging
from plugsmith.naming import NAME_RULE, is_valid_name
from plugsmith.project import find_project_root
from plugsmith.scaffold import create_plugin

logger = logging.getLogger(__name__)

PROMPT = "Enter a new plugin name: "


def prompt_for_name(
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> str:
    """Ask until a valid plugin name is entered. EOF aborts with InvalidNameError."""
    while True:
        try:
            answer = input_fn(PROMPT)
        except EOFError as exc:
            raise InvalidNameError("Invalid plugin name: no name entered") from exc
        if is_valid_name(answer):
            return answer
        output(NAME_RULE)


def _is_interactive(args: argparse.Namespace) -> bool:
    if args.non_interactive or not get_settings().interactive:
        return False
    return sys.stdin.isatty()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="plugsmith", description="Framework plugin tooling")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    contexts = parser.add_subparsers(dest="context", required=True)

    plugin = contexts.add_parser("plugin", help="Plugin commands")
    actions = plugin.add_subparsers(dest="action", required=True)

    create = actions.add_parser(
        "create",
        help="Creates scaffolding for a new plugin",
        description="Creates scaffolding for a new plugin. usage: plugsmith plugin create <plugin>",
    )
    create.add_argument("name", nargs="?", default=None, help="The name of your plugin")
    create.add_argument(
        "-s",
        "--skipNpm",
        dest="skip_npm",
        action="store_true",
        help="Skip NPM linking",
    )
    create.add_argument(
        "--project-root",
        default=None,
        help="Project root containing s-project.json (default: search upward from cwd)",
    )
    create.add_argument(
        "--non-interactive",
        action="store_true",
        help="Never prompt; fail when the name is missing",
    )
    create.add_argument("--json", action="store_true", help="Print the result as JSON")
    create.set_defaults(handler=_plugin_create)
    return parser


def _plugin_create(args: argparse.Namespace) -> int:
    settings = get_settings()

    name = args.name
    if not name:
        if not _is_interactive(args):
            raise InvalidNameError("Invalid plugin name: name is required")
        name = prompt_for_name()

    start = Path(args.project_root) if args.project_root else None
    project_root = find_project_root(start)

    descriptor = create_plugin(
        name,
        project_root=project_root,
        skip_link=args.skip_npm,
        templates_dir=settings.templates_dir,
        npm_command=settings.npm_command,
    )

    if args.json:
        print(json.dumps({"status": "ok", **descriptor.to_dict()}, indent=2))
    else:
        print(f'Successfully created plugin scaffold with the name: "{descriptor.name}"')
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    setup_logging("DEBUG" if args.verbose else get_settings().log_level)

    try:
        return args.handler(args)
    except PluginError as exc:
        logger.debug("plugin %s failed", args.action, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
