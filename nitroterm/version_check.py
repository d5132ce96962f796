"""Checking GitHub for a newer nitroterm release, with a local cache."""

from __future__ import annotations

import http.client
import json
import time
import urllib.error
import urllib.request
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import semver
from termcolor import colored

GITHUB_API_URL = "https://api.github.com/repos/nitroterm/nitroterm/releases/latest"
CACHE_FILE = ".nitroterm_version_cache.json"
CHECK_INTERVAL_HOURS = 24
REQUEST_TIMEOUT_SECONDS = 10
USER_AGENT = "nitroterm"


class UpdateCheckError(Exception):
    """Raised when the release information cannot be fetched."""


def _typed_fields(cls: type, data: Any) -> dict[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object for {cls.__name__}")
    values = {}
    for field in fields(cls):
        if field.name not in data:
            raise ValueError(f"missing field `{field.name}`")
        value = data[field.name]
        expected = field.type
        if expected == "bool":
            ok = isinstance(value, bool)
        elif expected == "int":
            ok = isinstance(value, int) and not isinstance(value, bool) and value >= 0
        else:
            ok = isinstance(value, str)
        if not ok:
            raise ValueError(f"invalid type for field `{field.name}`")
        values[field.name] = value
    return values


@dataclass
class GitHubRelease:
    tag_name: str
    name: str
    published_at: str
    html_url: str
    prerelease: bool

    @classmethod
    def from_dict(cls, data: Any) -> GitHubRelease:
        return cls(**_typed_fields(cls, data))


@dataclass
class VersionCache:
    last_check: int
    latest_version: str
    check_interval_hours: int

    @classmethod
    def from_dict(cls, data: Any) -> VersionCache:
        return cls(**_typed_fields(cls, data))


def check_for_updates(current_version: str, force_check: bool = False) -> None:
    """Report whether a newer release exists; silent on failure unless forced."""
    if not force_check and not should_check_for_updates():
        return

    try:
        release = fetch_latest_version()
    except (UpdateCheckError, OSError, ValueError, http.client.HTTPException) as exc:
        if force_check:
            print(colored(f"⚠️  Could not check for updates: {exc}", "yellow"))
        return

    save_version_cache(release.tag_name)

    try:
        comparison = compare_versions(current_version, release.tag_name)
    except ValueError:
        return

    if comparison < 0:
        show_update_available(release, current_version)
    elif comparison == 0:
        if force_check:
            print(colored("✅ You're using the latest version!", "green"))
    elif force_check:
        print(colored("🚀 You're using a development version!", "yellow"))


def fetch_latest_version() -> GitHubRelease:
    """Fetch the latest published release from the GitHub API."""
    request = urllib.request.Request(GITHUB_API_URL, headers={"User-Agent": USER_AGENT})
    try:
        with urllib.request.urlopen(request, timeout=REQUEST_TIMEOUT_SECONDS) as response:
            status = response.status
            body = response.read()
    except urllib.error.HTTPError as exc:
        raise UpdateCheckError(f"GitHub API returned status: {exc.code} {exc.reason}") from exc

    if not 200 <= status < 300:
        raise UpdateCheckError(f"GitHub API returned status: {status}")
    return GitHubRelease.from_dict(json.loads(body))


def should_check_for_updates() -> bool:
    """True when there is no cache or the cached check is old enough."""
    cache = load_version_cache()
    if cache is None:
        return True
    hours_since_check = (int(time.time()) - cache.last_check) // 3600
    return hours_since_check >= cache.check_interval_hours


def load_version_cache() -> VersionCache | None:
    """Read the cache file; None if it is missing or unreadable."""
    try:
        content = Path(CACHE_FILE).read_text(encoding="utf-8")
        return VersionCache.from_dict(json.loads(content))
    except (OSError, ValueError):
        return None


def save_version_cache(latest_version: str) -> None:
    """Record the latest known version and the time of this check."""
    cache = VersionCache(
        last_check=int(time.time()),
        latest_version=latest_version,
        check_interval_hours=CHECK_INTERVAL_HOURS,
    )
    try:
        Path(CACHE_FILE).write_text(json.dumps(asdict(cache), indent=2), encoding="utf-8")
    except OSError:
        pass


def compare_versions(current: str, latest: str) -> int:
    """Compare two semantic versions: -1, 0 or 1. Raises ValueError if invalid."""
    current_ver = semver.Version.parse(clean_version_string(current))
    latest_ver = semver.Version.parse(clean_version_string(latest))
    return current_ver.compare(latest_ver)


def clean_version_string(version: str) -> str:
    """Drop any leading ``v`` characters."""
    return version.lstrip("v")


def show_update_available(release: GitHubRelease, current_version: str) -> None:
    """Print the notice that a newer release is available."""
    rule = colored("═" * 50, attrs=["dark"])
    bullet = colored("•", attrs=["dark"])
    print()
    print(colored("🎉 NEW VERSION AVAILABLE!", "green", attrs=["bold"]))
    print(rule)
    print(
        f"{colored('Current version:', attrs=['dark'])} "
        f"{colored(current_version, 'yellow')} → "
        f"{colored(release.tag_name, 'green', attrs=['bold'])}"
    )
    print(f"{colored('Release:', attrs=['dark'])} {release.name}")
    print(f"{colored('Download:', attrs=['dark'])} {colored(release.html_url, 'blue', attrs=['underline'])}")
    print()
    print(colored("📦 Update options:", "yellow", attrs=["bold"]))
    print(f"  {bullet} Download from GitHub releases")
    print(f"  {bullet} Build from source: git pull && cargo build --release")
    print(f"  {bullet} Use package manager (if available)")
    print()
    print(colored("💡 Tip: Run 'nitroterm --check-updates' to check again", attrs=["dark"]))
    print(rule)
    print()