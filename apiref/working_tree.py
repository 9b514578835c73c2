"""Handle for a directory tree the documentation is read from."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class WorkingTree:
    """A checked-out source tree.

    ``label`` names what is currently checked out (a tag, or ``"current"``
    for the live project tree) and is only used for reporting.
    """

    path: Path
    label: str

    def source_dir(self, subdir: str) -> Path:
        """Return the directory holding the annotated sources."""
        return self.path / subdir
