"""Parsing of repository remote URLs."""

from dataclasses import dataclass

from ghswitch.errors import RemoteUrlError


@dataclass(frozen=True)
class RepoRef:
    """Owner and repository name taken from a remote URL."""

    owner: str
    name: str

    def ssh_url(self, host: str, user: str = "git") -> str:
        return f"{user}@{host}:{self.owner}/{self.name}.git"


def parse_repo_url(url: str, hostname: str = "github.com") -> RepoRef:
    """
    Extract owner and repository from an SSH or HTTPS remote URL.

    Supports ``git@<hostname>:owner/repo.git`` and
    ``https://<hostname>/owner/repo.git`` (``.git`` optional).

    Raises:
        RemoteUrlError: If the URL has another shape.
    """
    ssh_prefix = f"git@{hostname}:"
    https_prefix = f"https://{hostname}/"

    if url.startswith(ssh_prefix):
        rest, kind = url[len(ssh_prefix):], "SSH"
    elif url.startswith(https_prefix):
        rest, kind = url[len(https_prefix):], "HTTPS"
    else:
        raise RemoteUrlError("unsupported URL format")

    parts = rest.split("/")
    if len(parts) != 2 or not all(parts):
        raise RemoteUrlError(f"invalid {kind} URL format")

    owner, repo = parts
    repo = repo.removesuffix(".git")
    if not repo:
        raise RemoteUrlError(f"invalid {kind} URL format")
    return RepoRef(owner=owner, name=repo)
