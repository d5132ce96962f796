"""Bumping the project version, tagging and pushing releases."""

from __future__ import annotations

import os
import re
import subprocess
from itertools import islice
from pathlib import Path

from termcolor import colored

VERSION = "0.1.0-alpha.2"

_U32_MAX = 2**32 - 1
_NUMBER = re.compile(r"\+?[0-9]+")


class VersionError(ValueError):
    """Raised for malformed versions or unknown bump types."""


def _parse_component(text: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise VersionError(f"invalid version component: {text!r}")
    value = int(text)
    if value > _U32_MAX:
        raise VersionError(f"version component too large: {text!r}")
    return value


def bump_version(bump_type: str, current: str) -> str:
    """Return ``current`` (``MAJOR.MINOR.PATCH``) bumped by ``bump_type``."""
    parts = current.split(".")
    if len(parts) != 3:
        raise VersionError("Invalid version format")
    major, minor, patch = (_parse_component(part) for part in parts)

    if bump_type == "major":
        return f"{major + 1}.0.0"
    if bump_type == "minor":
        return f"{major}.{minor + 1}.0"
    if bump_type == "patch":
        return f"{major}.{minor}.{patch + 1}"
    raise VersionError(f"Invalid bump type: {bump_type}")


def update_cargo_toml(
    new_version: str,
    current_version: str = VERSION,
    path: str | os.PathLike[str] = "Cargo.toml",
) -> None:
    """Replace the ``version = "..."`` entry in the manifest."""
    manifest = Path(path)
    with open(manifest, encoding="utf-8", newline="") as handle:
        content = handle.read()
    updated = content.replace(
        f'version = "{current_version}"',
        f'version = "{new_version}"',
    )
    with open(manifest, "w", encoding="utf-8", newline="") as handle:
        handle.write(updated)
    print(f"✅ Updated {manifest.name}")


def _git(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(["git", *args], capture_output=True, check=False)


def _decode(output: bytes | None) -> str:
    return (output or b"").decode("utf-8", errors="replace")


def get_latest_tag() -> str | None:
    """Return the most recent tag reachable from HEAD, or None."""
    result = _git("describe", "--tags", "--abbrev=0")
    if result.returncode == 0:
        return _decode(result.stdout).strip()
    return None


def create_git_tag(version: str, message: str | None = None) -> None:
    """Commit the manifest, create an annotated tag and push both."""
    tag_name = f"v{version}"
    _git("add", "Cargo.toml")
    _git("commit", "-m", f"bump: version {version}")
    _git("tag", "-a", tag_name, "-m", message if message is not None else f"Release {tag_name}")
    _git("push", "origin", "main")
    _git("push", "origin", tag_name)
    print(f"✅ Created and pushed tag: {colored(tag_name, 'green')}")


def show_version_history() -> None:
    """Print up to ten version tags, newest first."""
    print(colored("📋 Version History:", "cyan", attrs=["bold"]))
    print(colored("═" * 40, attrs=["dark"]))

    result = _git("tag", "--sort=-version:refname", "-l", "v*")
    if result.returncode != 0:
        print(colored("Failed to retrieve version history.", "red"))
        return

    tags = _decode(result.stdout)
    if not tags.strip():
        print(colored("No version tags found.", attrs=["dark"]))
        return
    for tag in islice(tags.splitlines(), 10):
        print(f"  📌 {colored(tag.strip(), 'green')}")


def bump_and_release(
    bump_type: str,
    message: str | None = None,
    current_version: str = VERSION,
) -> str:
    """Bump the version, update the manifest, tag and push; return the new version."""
    new_version = bump_version(bump_type, current_version)
    print(f"🔄 Bumping version from {current_version} to {new_version}")
    update_cargo_toml(new_version, current_version)
    create_git_tag(new_version, message)
    print(f"🎉 Successfully released version {colored(new_version, 'green')}")
    return new_version