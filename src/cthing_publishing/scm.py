"""Source control URLs for publication descriptors.

The descriptor always uses the organization's canonical repository URLs.
Reading the remote of a local checkout is offered so that tooling can report
where a project actually lives.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from urllib.parse import urlsplit

from cthing_publishing.config import PublishingConfig
from cthing_publishing.models import ScmBlock

log = logging.getLogger(__name__)


_REMOTE_SECTION_RE = re.compile(r'\s*\[remote\s+".+"\]')
_SECTION_START_RE = re.compile(r"\s*\[")
_REMOTE_URL_RE = re.compile(r"\s*url\s*=\s*(\S+)\s*")
_GIT_EXTENSION_RE = re.compile(r"\.git$")

SCM_PREFIX = "scm:git:"


def canonical_scm(config: PublishingConfig, name: str) -> ScmBlock:
    """Build the organization SCM URLs for a project.

    Args:
        config: Organization constants.
        name: Project name, already validated for URL use.

    Returns:
        Browse URL `{base}/{name}`, raw HTTPS and SSH clone URLs, and their
        `scm:git:` connection forms.
    """
    browse = f"{config.scm_base_url}/{name}"
    https_url = f"{browse}.git"
    ssh_url = f"git@{config.scm_host}:{config.scm_owner}/{name}.git"
    return ScmBlock(
        url=browse,
        connection=f"{SCM_PREFIX}{https_url}",
        developer_connection=f"{SCM_PREFIX}{ssh_url}",
        https_url=https_url,
        ssh_url=ssh_url,
    )


def _normalize_remote_url(url: str) -> str:
    if url.startswith("/"):
        return "file://" + url
    if url.startswith("git@"):
        return "ssh://" + url.replace(":", "/")
    if url.startswith("git+ssh:"):
        return "ssh:" + url[len("git+ssh:"):]
    return url


def scm_from_remote(url: str) -> ScmBlock:
    """Derive SCM URLs from a git remote URL.

    Handles scp-like (`git@host:path`), `ssh://`, `git+ssh://`, `git://`,
    `https://` and absolute path remotes.
    """
    normalized = _normalize_remote_url(url)
    parts = urlsplit(normalized)
    host = parts.hostname or ""
    path = parts.path

    if parts.scheme == "ssh":
        port = f":{parts.port}" if parts.port is not None else ""
        connection = f"{SCM_PREFIX}git://{host}{port}{path}"
    else:
        connection = f"{SCM_PREFIX}{normalized}"

    if parts.scheme == "file":
        browse = normalized
    else:
        browse = "https://" + host + _GIT_EXTENSION_RE.sub("", path)

    return ScmBlock(url=browse, connection=connection, developer_connection=f"{SCM_PREFIX}{normalized}")


def read_git_remote(root: Path) -> str | None:
    """Return the URL of the first remote in `{root}/.git/config`.

    Returns:
        The remote URL, or None if there is no config file, no remote section,
        or the first remote section has no url. An unreadable config file is
        treated as having no remote; undecodable bytes are replaced.
    """
    config_file = root / ".git" / "config"
    if not config_file.is_file():
        return None
    try:
        text = config_file.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        log.debug("Cannot read %s: %s", config_file, exc)
        return None

    in_remote = False
    for line in text.splitlines():
        if _REMOTE_SECTION_RE.fullmatch(line):
            in_remote = True
            continue
        if in_remote:
            if _SECTION_START_RE.match(line):
                return None
            m = _REMOTE_URL_RE.fullmatch(line)
            if m:
                return m.group(1)
    return None
