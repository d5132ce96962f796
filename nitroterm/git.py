"""Opening git repositories on disk."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


class GitError(Exception):
    """Raised when a path does not hold a usable git repository."""


def _is_git_dir(path: Path) -> bool:
    return (path / "HEAD").is_file() and (path / "objects").is_dir() and (path / "refs").is_dir()


def _read_gitdir_link(link: Path) -> Path:
    content = link.read_text(encoding="utf-8").strip()
    prefix = "gitdir:"
    if not content.startswith(prefix):
        raise GitError(f"invalid gitfile format: {link}")
    target = Path(content[len(prefix):].strip())
    if not target.is_absolute():
        target = link.parent / target
    return target


@dataclass(frozen=True)
class Repository:
    """A git repository: its git directory and, unless bare, its working tree."""

    git_dir: Path
    workdir: Path | None

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> Repository:
        """Open the repository at exactly ``path`` (no search of parent directories)."""
        root = Path(path)
        if not root.exists():
            raise GitError(f"failed to resolve path '{path}': No such file or directory")

        dotgit = root / ".git"
        if dotgit.is_dir():
            git_dir, workdir = dotgit, root
        elif dotgit.is_file():
            git_dir, workdir = _read_gitdir_link(dotgit), root
        elif _is_git_dir(root):
            git_dir = root
            workdir = root.parent if root.name == ".git" else None
        else:
            raise GitError(f"could not find repository at '{path}'")

        if not _is_git_dir(git_dir):
            raise GitError(f"'{git_dir}' is not a valid git directory")
        return cls(git_dir=git_dir, workdir=workdir)

    @property
    def is_bare(self) -> bool:
        """True when the repository has no working tree."""
        return self.workdir is None

    def head(self) -> str:
        """Return the reference HEAD points at, or the commit id when detached."""
        content = (self.git_dir / "HEAD").read_text(encoding="utf-8").strip()
        prefix = "ref:"
        if content.startswith(prefix):
            return content[len(prefix):].strip()
        return content


def get_repository(path: str | os.PathLike[str]) -> Repository:
    """Open the git repository at ``path``."""
    return Repository.open(path)