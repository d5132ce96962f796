"""Project-level settings for nitroterm."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Config:
    """Basic project settings used by the release tooling."""

    project_name: str = "nitroterm"
    git_remote: str = "origin"
    release_format: str = "markdown"

    @classmethod
    def load_config(cls) -> Config:
        """Return the active configuration (currently the defaults)."""
        return cls()