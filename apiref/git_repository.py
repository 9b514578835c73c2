"""Access to the cached clone of the documented repository."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from apiref.errors import RepositoryError
from apiref.working_tree import WorkingTree

logger = logging.getLogger(__name__)


class GitRepository:
    """A local git clone whose single working tree is checked out tag by tag.

    Every call blocks until git returns; a failing command raises
    ``RepositoryError`` and is never retried.
    """

    def __init__(self, path: Path) -> None:
        """Bind the repository to its cache directory."""
        self.path = path
        self.checked_out: str | None = None

    def _run(self, args: Sequence[str], cwd: Path | None = None) -> str:
        cmd = ["git", *args]
        logger.debug("$ %s", " ".join(cmd))
        try:
            proc = subprocess.run(
                cmd,
                check=True,
                capture_output=True,
                text=True,
                cwd=cwd or self.path,
            )
        except FileNotFoundError as e:
            msg = f"git is not available: {e}"
            raise RepositoryError(msg) from e
        except subprocess.CalledProcessError as e:
            msg = f"git {' '.join(args)} failed: {(e.stderr or '').strip()}"
            raise RepositoryError(msg) from e
        return proc.stdout

    def exists(self) -> bool:
        """Whether the cache directory already holds a clone."""
        return (self.path / ".git").exists()

    def clone(self, url: str) -> None:
        """Shallow-clone ``url`` with its tags into the cache directory."""
        self.path.mkdir(parents=True, exist_ok=True)
        logger.info("Cloning %s into %s", url, self.path)
        self._run(
            ["clone", "--depth", "1", "--tags", url, str(self.path)],
            cwd=self.path.parent,
        )

    def fetch_tags(self) -> None:
        """Fetch every tag from the remote."""
        logger.info("Fetching all tags from the repository...")
        self._run(["fetch", "--tags"])

    def clean(self) -> None:
        """Remove untracked files from the working tree."""
        self._run(["clean", "-f"])

    def tags(self) -> list[str]:
        """List the tags known to the clone."""
        out = self._run(["tag", "--list"])
        return [line.strip() for line in out.splitlines() if line.strip()]

    def checkout(self, tag: str) -> WorkingTree:
        """Check out a tag and return a handle on the resulting tree."""
        self._run(["checkout", tag])
        self.checked_out = tag
        return WorkingTree(path=self.path, label=tag)
