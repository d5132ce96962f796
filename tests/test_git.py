import pytest

from nitroterm.git import GitError, Repository, get_repository


def _make_git_dir(directory, head="ref: refs/heads/main\n"):
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "HEAD").write_text(head)
    (directory / "objects").mkdir()
    (directory / "refs").mkdir()
    return directory


def test_open_working_tree(tmp_path):
    _make_git_dir(tmp_path / ".git")
    repo = get_repository(tmp_path)
    assert repo.git_dir == tmp_path / ".git"
    assert repo.workdir == tmp_path
    assert repo.is_bare is False


def test_head_reference(tmp_path):
    _make_git_dir(tmp_path / ".git")
    assert get_repository(str(tmp_path)).head() == "refs/heads/main"


def test_detached_head_returns_commit_id(tmp_path):
    commit = "a" * 40
    _make_git_dir(tmp_path / ".git", head=commit + "\n")
    assert get_repository(tmp_path).head() == commit


def test_open_bare_repository(tmp_path):
    bare = _make_git_dir(tmp_path / "project.git")
    repo = Repository.open(bare)
    assert repo.git_dir == bare
    assert repo.workdir is None
    assert repo.is_bare is True


def test_open_git_dir_directly_has_parent_workdir(tmp_path):
    git_dir = _make_git_dir(tmp_path / ".git")
    repo = get_repository(git_dir)
    assert repo.workdir == tmp_path


def test_gitdir_link_file(tmp_path):
    real = _make_git_dir(tmp_path / "store" / "worktree.git")
    checkout = tmp_path / "checkout"
    checkout.mkdir()
    (checkout / ".git").write_text("gitdir: ../store/worktree.git\n")
    repo = get_repository(checkout)
    assert repo.git_dir.resolve() == real.resolve()
    assert repo.workdir == checkout


def test_plain_directory_raises(tmp_path):
    with pytest.raises(GitError):
        get_repository(tmp_path)


def test_missing_path_raises(tmp_path):
    with pytest.raises(GitError):
        get_repository(tmp_path / "nowhere")


def test_incomplete_git_dir_raises(tmp_path):
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    with pytest.raises(GitError):
        get_repository(tmp_path)