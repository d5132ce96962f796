"""Banner, main menu, help screen and prompt for interactive use."""

from __future__ import annotations

import os
import sys

from termcolor import colored

from nitroterm.version_management import VERSION

BANNER_LINES = (
    "      ███╗   ██╗██╗████████╗██████╗  ██████╗ ██╗  ██╗██╗████████╗     ",
    "      ████╗  ██║██║╚══██╔══╝██╔══██╗██╔═══██╗██║ ██╔╝██║╚══██╔══╝     ",
    "      ██╔██╗ ██║██║   ██║   ██████╔╝██║   ██║█████╔╝ ██║   ██║        ",
    "      ██║╚██╗██║██║   ██║   ██╔══██╗██║   ██║██╔═██╗ ██║   ██║        ",
    "      ██║ ╚████║██║   ██║   ██║  ██║╚██████╔╝██║  ██╗██║   ██║        ",
    "      ╚═╝  ╚═══╝╚═╝   ╚═╝   ╚═╝  ╚═╝ ╚═════╝ ╚═╝  ╚═╝╚═╝   ╚═╝        ",
)

DEFAULT_PROMPT = "🚀 nitroterm > "
CONSOLE_TITLE = "🚀 Nitroterm Terminal Tool"

_BOX_TOP = "╔══════════════════════════════════════════════════════════════════════╗"
_BOX_EMPTY = "║                                                                      ║"
_BOX_TAGLINE = "║       A terminal tool for project management and automation for      ║"
_BOX_BOTTOM = "╚══════════════════════════════════════════════════════════════════════╝"
_BOX_EDGE = "║"

# Gradient end points: blue at the top left, green at the bottom right.
_START_RGB = (65.0, 105.0, 225.0)
_END_RGB = (0.0, 255.0, 127.0)
_LINE_WEIGHT = 20.0


def _to_byte(value: float) -> int:
    return max(0, min(255, int(value)))


def banner_colour(
    line_index: int, char_index: int, line_length: int, line_count: int
) -> tuple[int, int, int]:
    """Return the (r, g, b) gradient colour for one banner character."""
    denominator = line_length + line_count * _LINE_WEIGHT
    if denominator == 0:
        raise ValueError("banner has no extent")
    progress = (char_index + line_index * _LINE_WEIGHT) / denominator
    return tuple(
        _to_byte(start + progress * (end - start))
        for start, end in zip(_START_RGB, _END_RGB)
    )  # type: ignore[return-value]


def _truecolor_bold(text: str, rgb: tuple[int, int, int]) -> str:
    red, green, blue = rgb
    return f"\x1b[1;38;2;{red};{green};{blue}m{text}\x1b[0m"


def _set_console_title() -> None:
    if os.name == "nt":
        sys.stdout.write(f"\x1b]0;{CONSOLE_TITLE}\x07")
        sys.stdout.flush()


def print_banner() -> None:
    """Print the framed, gradient-coloured start-up banner."""
    _set_console_title()

    for frame_line in (_BOX_TOP, _BOX_EMPTY, _BOX_TAGLINE, _BOX_EMPTY):
        print(colored(frame_line, "cyan"))

    edge = colored(_BOX_EDGE, "cyan")
    line_count = len(BANNER_LINES)
    for line_index, line in enumerate(BANNER_LINES):
        # The gradient spans the encoded width of a line, not its character count.
        line_length = len(line.encode("utf-8"))
        painted = "".join(
            _truecolor_bold(ch, banner_colour(line_index, char_index, line_length, line_count))
            for char_index, ch in enumerate(line)
        )
        print(f"{edge}{painted}{edge}")

    for frame_line in (_BOX_EMPTY, _BOX_EMPTY, _BOX_EMPTY, _BOX_EMPTY, _BOX_BOTTOM):
        print(colored(frame_line, "cyan"))
    print()


_TOOLS = (
    ("1. 🎁 create-release", "Create a new release"),
    ("2. 📦 release-notes", "Generate release notes from git commits"),
    ("3. 📝 update-dependencies", "Analyze and update project dependencies"),
    ("4. 🌍 sync-translations", "Sync translations using Gemini AI"),
    ("5. 🔍 code-quality", "Run code quality checks (lint, format, security)"),
)
_COLLABORATION = (("6. 🏷️ github-labels", "Manage GitHub repository labels"),)
_SETTINGS = (
    ("7. ⚙️ config", "Manage configuration settings"),
    ("8. 🏷️ version", "Manage project versioning"),
    ("9. ❓ help", "Show this help menu"),
)


def show_menu() -> None:
    """Print the numbered main menu."""
    print(colored(f" Nitroterm v{VERSION}", "blue", attrs=["dark", "bold"]))
    print()
    sections = (
        (" 🚀 Tools", "yellow", _TOOLS, "green"),
        (" 🤝 Collaboration", "cyan", _COLLABORATION, "green"),
        (" ⚙️ Settings", "cyan", _SETTINGS, "blue"),
    )
    for title, title_colour, entries, entry_colour in sections:
        print(colored(title, title_colour, attrs=["bold"]))
        print()
        for label, description in entries:
            print(f"  {colored(label, entry_colour)} {description}")
        print()
    print(f"  {colored('0  🚪 exit', 'red')}")
    print()


_HELP_COMMANDS = (
    ("🚀 create-release", "Create a comprehensive release", "green"),
    ("📦 release-notes", "Generate comprehensive release notes from git history", "green"),
    ("📝 update-dependencies", "Scan and update project dependencies", "green"),
    ("🌍 sync-translations", "Sync translations using Gemini AI", "green"),
    ("🔍 code-quality", "Run code quality checks (lint, format, security)", "green"),
    ("🏷️ github-labels", "Manage GitHub repository labels", "green"),
    ("⚙️  config", "Manage configuration settings", "blue"),
    ("🏷️  version", "Manage project versioning", "blue"),
    ("❓ help", "Show this help information", "blue"),
    ("🚪 exit", "Exit the application", "red"),
)

_HELP_EXAMPLES = (
    ("Create release:", "nitroterm create-release v1.0.0"),
    ("Direct command:", "nitroterm release-notes"),
    ("Sync translations:", "nitroterm sync-translations"),
    ("Code quality:", "nitroterm code-quality --path ./my-project"),
    ("GitHub labels:", "nitroterm github-labels --dry-run"),
    ("Config management:", "nitroterm config show"),
    ("Version bump:", "nitroterm version patch"),
    ("Interactive mode:", "nitroterm (then select option)"),
)


def show_help() -> None:
    """Print the list of commands and usage examples."""
    version = colored(f"v{VERSION}", "green", attrs=["bold"])
    print()
    print(colored(f"❓ NITROKIT {version} - Project Management Tool", "cyan", attrs=["bold"]))
    print(colored("═" * 50, attrs=["dark"]))
    print()
    print(colored("Available Commands:", "yellow", attrs=["bold"]))
    for name, description, colour in _HELP_COMMANDS:
        print(f"  {colored(name, colour)} - {description}")
    print()
    print(colored("Usage Examples:", "yellow", attrs=["bold"]))
    for label, example in _HELP_EXAMPLES:
        print(f"  {colored(label, attrs=['dark'])} {example}")
    print()
    print(colored(f"Nitroterm v{VERSION}", attrs=["dark"]))


def get_user_input(prompt: str | None = None) -> str:
    """Show ``prompt`` and return the next input line, trimmed.

    Raises EOFError when standard input is exhausted.
    """
    text = DEFAULT_PROMPT if prompt is None else prompt
    print(colored(text, "cyan", attrs=["bold"]), end="", flush=True)
    line = sys.stdin.readline()
    if not line:
        raise EOFError("end of input")
    return line.strip()