"""File tree abstraction the sync reads and writes through.

Paths are workspace-relative POSIX strings. Writes are staged and only
reach disk on ``flush()``, so a run either applies all of its changes or,
when aborted, none of them.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class FileChange:
    path: str
    content: str


class Tree(Protocol):
    def read(self, path: str) -> str | None: ...

    def exists(self, path: str) -> bool: ...

    def write(self, path: str, content: str) -> None: ...

    def list_changes(self) -> list[FileChange]: ...


class MemoryTree:
    """In-memory tree, used by tests and embedders."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})
        self._changes: dict[str, str] = {}

    def read(self, path: str) -> str | None:
        return self.files.get(path)

    def exists(self, path: str) -> bool:
        return path in self.files

    def write(self, path: str, content: str) -> None:
        self.files[path] = content
        self._changes[path] = content

    def list_changes(self) -> list[FileChange]:
        return [FileChange(p, c) for p, c in sorted(self._changes.items())]


class FsTree:
    """Disk-backed tree with staged writes.

    A staged write shadows the disk copy for later reads in the same run.
    """

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)
        self._changes: dict[str, str] = {}

    def _abs(self, path: str) -> Path:
        return self.root / path

    def read(self, path: str) -> str | None:
        if path in self._changes:
            return self._changes[path]
        target = self._abs(path)
        if not target.is_file():
            return None
        with open(target, encoding="utf-8", errors="surrogateescape", newline="") as f:
            return f.read()

    def exists(self, path: str) -> bool:
        return path in self._changes or self._abs(path).is_file()

    def write(self, path: str, content: str) -> None:
        self._changes[path] = content

    def list_changes(self) -> list[FileChange]:
        return [FileChange(p, c) for p, c in sorted(self._changes.items())]

    def flush(self) -> list[str]:
        """Write staged changes to disk and return the paths written.

        Each file is written to a temporary sibling and moved into place,
        keeping the permission bits of the file it replaces. Bytes that are
        not valid UTF-8 round-trip unchanged.
        """
        written = []
        for change in self.list_changes():
            # write through symlinks to the file they point at
            target = self._abs(change.path).resolve()
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.")
            try:
                with os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
                    f.write(change.content)
                if target.exists():
                    shutil.copymode(target, tmp)
                else:
                    os.chmod(tmp, 0o666 & ~_current_umask())
                os.replace(tmp, target)
            except BaseException:
                os.unlink(tmp)
                raise
            written.append(change.path)
        self._changes.clear()
        return written


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask
