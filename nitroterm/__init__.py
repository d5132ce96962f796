"""Version bumps, git release tagging, update checks and an interactive terminal menu."""

__version__ = "0.1.0a2"

__all__ = ["__version__"]