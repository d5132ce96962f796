"""Command-line entry point and interactive menu loop."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from termcolor import colored

from nitroterm.menu import get_user_input, print_banner, show_help, show_menu
from nitroterm.version_check import check_for_updates
from nitroterm.version_management import (
    VERSION,
    bump_and_release,
    show_version_history,
)

BUMP_TYPES = ("patch", "minor", "major")
VERSION_ACTIONS = (*BUMP_TYPES, "show", "history")
EXIT_WORDS = frozenset({"0", "exit", "quit", "q"})

_VERSION_MENU_CHOICES = {
    "1": "patch",
    "patch": "patch",
    "2": "minor",
    "minor": "minor",
    "3": "major",
    "major": "major",
    "4": "show",
    "show": "show",
    "5": "history",
    "history": "history",
}


class _UsageError(Exception):
    """Raised instead of exiting when the command line cannot be parsed."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``nitroterm`` command."""
    parser = _Parser(
        prog="nitroterm",
        description="A terminal tool for project management and automation",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    commands = parser.add_subparsers(dest="command")

    version = commands.add_parser("version", help="Manage project versioning")
    actions = version.add_subparsers(dest="action")
    actions.add_parser("patch", help="Bump patch version")
    actions.add_parser("minor", help="Bump minor version")
    actions.add_parser("major", help="Bump major version")
    actions.add_parser("show", help="Show current version")
    actions.add_parser("history", help="Show version history")
    return parser


def _current_version_line() -> str:
    return colored(f"Current version: v{VERSION}", "cyan", attrs=["bold"])


def _failure_text(action: str | None) -> str:
    if action in BUMP_TYPES:
        return f"Failed to bump {action} version"
    return "Failed to show version history"


def run_version_command(action: str | None) -> None:
    """Bump, list or show the version; any other action shows the current version.

    Errors from bumping or reading history propagate to the caller.
    """
    if action in BUMP_TYPES:
        bump_and_release(action)
    elif action == "history":
        show_version_history()
    else:
        print(_current_version_line())


def _pause() -> None:
    print("\n" + colored("Press Enter to continue...", attrs=["dark"]))
    get_user_input()


def _interactive_version() -> None:
    print("\n" + colored("🏷️  Version Management", "cyan", attrs=["bold"]))
    print(colored("═" * 30, attrs=["dark"]))
    options = (
        "Bump patch version (x.x.X)",
        "Bump minor version (x.X.0)",
        "Bump major version (X.0.0)",
        "Show current version",
        "Show version history",
    )
    for number, text in enumerate(options, start=1):
        print(f"  {colored(f'{number}.', attrs=['dark'])} {text}")
    print("\n" + colored("Select option (1-5): ", "cyan"), end="")

    action = _VERSION_MENU_CHOICES.get(get_user_input(), "show")
    if action == "show":
        print("\n" + _current_version_line())
    else:
        try:
            run_version_command(action)
        except (ValueError, OSError) as exc:
            print(colored(f"❌ {_failure_text(action)}: {exc}", "red"))
    _pause()


def _interactive_help() -> None:
    show_help()
    _pause()


def _unknown_command(text: str) -> None:
    print(f"{colored('❌ Unknown command:', 'red')} {colored(text, 'yellow')}")
    print(colored("Please choose a valid option (1-9) or type the command name.", attrs=["dark"]))
    print(colored("Type 'help' for more information.", attrs=["dark"]))
    print()


_MENU_ACTIONS: dict[str, Callable[[], None]] = {
    "8": _interactive_version,
    "version": _interactive_version,
    "9": _interactive_help,
    "help": _interactive_help,
}


def run_interactive_mode() -> None:
    """Show the banner and serve the menu until the user exits or input ends."""
    print_banner()
    try:
        check_for_updates(VERSION, False)
    except Exception:  # the start-up check must never stop the menu
        pass

    while True:
        try:
            show_menu()
            choice = get_user_input()
            if choice in EXIT_WORDS:
                print(colored(f"\n👋 Thank you for using Nitroterm v{VERSION}!", "green"))
                return
            handler = _MENU_ACTIONS.get(choice)
            if handler is None:
                _unknown_command(choice)
            else:
                handler()
        except EOFError:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except _UsageError:
        run_interactive_mode()
        return 0

    if args.command != "version":
        run_interactive_mode()
        return 0

    action = args.action
    if action in BUMP_TYPES:
        print(colored(f"🔄 Bumping {action} version...", "yellow"))
    try:
        run_version_command(action)
    except (ValueError, OSError) as exc:
        print(colored(f"❌ {_failure_text(action)}: {exc}", "red"), file=sys.stderr)
        return 1
    return 0