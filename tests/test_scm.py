from __future__ import annotations

from pathlib import Path

import pytest

from cthing_publishing.config import PublishingConfig
from cthing_publishing.scm import canonical_scm, read_git_remote, scm_from_remote


def _write_git_config(root: Path, content: str) -> Path:
    git_dir = root / ".git"
    git_dir.mkdir()
    (git_dir / "config").write_text(content, encoding="utf-8")
    return root


def test_canonical_scm(config: PublishingConfig) -> None:
    scm = canonical_scm(config, "myproject")

    assert scm.url == "https://github.com/cthing/myproject"
    assert scm.connection == "scm:git:https://github.com/cthing/myproject.git"
    assert scm.developer_connection == "scm:git:git@github.com:cthing/myproject.git"


@pytest.mark.parametrize(
    ("remote", "connection", "developer_connection", "browse"),
    [
        (
            "git@github.com:cthing/myproject.git",
            "scm:git:git://github.com/cthing/myproject.git",
            "scm:git:ssh://git@github.com/cthing/myproject.git",
            "https://github.com/cthing/myproject",
        ),
        (
            "ssh://www.host.com/dir1/dir2/repo.git",
            "scm:git:git://www.host.com/dir1/dir2/repo.git",
            "scm:git:ssh://www.host.com/dir1/dir2/repo.git",
            "https://www.host.com/dir1/dir2/repo",
        ),
        (
            "ssh://joe@www.host.com:8080/dir1/dir2/repo.git",
            "scm:git:git://www.host.com:8080/dir1/dir2/repo.git",
            "scm:git:ssh://joe@www.host.com:8080/dir1/dir2/repo.git",
            "https://www.host.com/dir1/dir2/repo",
        ),
        (
            "git+ssh://joe@www.host.com/joe/dir1/dir2/repo.git",
            "scm:git:git://www.host.com/joe/dir1/dir2/repo.git",
            "scm:git:ssh://joe@www.host.com/joe/dir1/dir2/repo.git",
            "https://www.host.com/joe/dir1/dir2/repo",
        ),
        (
            "git://www.host.com/dir1/dir2/repo.git",
            "scm:git:git://www.host.com/dir1/dir2/repo.git",
            "scm:git:git://www.host.com/dir1/dir2/repo.git",
            "https://www.host.com/dir1/dir2/repo",
        ),
        (
            "https://www.host.com/dir1/dir2/repo.git",
            "scm:git:https://www.host.com/dir1/dir2/repo.git",
            "scm:git:https://www.host.com/dir1/dir2/repo.git",
            "https://www.host.com/dir1/dir2/repo",
        ),
        (
            "/dir1/dir2/repo",
            "scm:git:file:///dir1/dir2/repo",
            "scm:git:file:///dir1/dir2/repo",
            "file:///dir1/dir2/repo",
        ),
    ],
)
def test_scm_from_remote(remote: str, connection: str, developer_connection: str, browse: str) -> None:
    scm = scm_from_remote(remote)

    assert scm.connection == connection
    assert scm.developer_connection == developer_connection
    assert scm.url == browse


def test_read_git_remote_without_git_dir(tmp_path: Path) -> None:
    assert read_git_remote(tmp_path) is None


def test_read_git_remote_without_remote(tmp_path: Path) -> None:
    root = _write_git_config(
        tmp_path,
        """[core]
\trepositoryformatversion = 0
\tfilemode = true
\tbare = false
""",
    )
    assert read_git_remote(root) is None


def test_read_git_remote_without_url(tmp_path: Path) -> None:
    root = _write_git_config(
        tmp_path,
        """[core]
\tbare = false
[remote "origin"]
\tfetch = +refs/heads/*:refs/remotes/origin/*
[branch "master"]
\tremote = origin
\turl = git@github.com:cthing/wrong.git
""",
    )
    assert read_git_remote(root) is None


def test_read_git_remote(tmp_path: Path) -> None:
    root = _write_git_config(
        tmp_path,
        """[core]
\tbare = false
[remote "origin"]
\turl = git@github.com:cthing/myproject.git
\tfetch = +refs/heads/*:refs/remotes/origin/*
[remote "upstream"]
\turl = https://github.com/other/myproject.git
""",
    )
    assert read_git_remote(root) == "git@github.com:cthing/myproject.git"


def test_canonical_scm_raw_clone_urls(config: PublishingConfig) -> None:
    scm = canonical_scm(config, "myproject")

    assert scm.https_url == "https://github.com/cthing/myproject.git"
    assert scm.ssh_url == "git@github.com:cthing/myproject.git"


def test_read_git_remote_with_undecodable_bytes(tmp_path: Path) -> None:
    git_dir = tmp_path / ".git"
    git_dir.mkdir()
    (git_dir / "config").write_bytes(
        b'[user]\n\tname = Ren\xe9\n[remote "origin"]\n\turl = git@github.com:cthing/p.git\n'
    )

    assert read_git_remote(tmp_path) == "git@github.com:cthing/p.git"
