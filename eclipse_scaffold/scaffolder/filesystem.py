"""Filesystem capability used by the folder provisioner.

The provisioner only needs three operations: an existence check, a
single-level ``mkdir`` and a UTF-8 text write.  ``LocalFileSystem`` performs
them on disk in a worker thread so the event loop stays responsive;
``MemoryFileSystem`` keeps everything in a dictionary and backs both the test
suite and ``--dry-run``.
"""

from __future__ import annotations

import asyncio
import errno
import os
from pathlib import Path, PurePath
from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Minimal async filesystem interface."""

    async def exists(self, path: PurePath) -> bool: ...

    async def mkdir(self, path: PurePath) -> None: ...

    async def write_file(self, path: PurePath, content: str) -> None: ...


# ---------------------------------------------------------------------------
# Local disk
# ---------------------------------------------------------------------------


class LocalFileSystem:
    """Real filesystem access with blocking calls offloaded to threads."""

    async def exists(self, path: PurePath) -> bool:
        return await asyncio.to_thread(os.path.lexists, path)

    async def mkdir(self, path: PurePath) -> None:
        # Non-recursive and never exist_ok: a racing creator surfaces as an error.
        await asyncio.to_thread(Path(path).mkdir)

    async def write_file(self, path: PurePath, content: str) -> None:
        await asyncio.to_thread(_write_file, Path(path), content)


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: write *content* as UTF-8 without newline translation."""
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(content)


# ---------------------------------------------------------------------------
# In memory
# ---------------------------------------------------------------------------


def _raise(code: int, path: PurePath) -> None:
    raise OSError(code, os.strerror(code), str(path))


class MemoryFileSystem:
    """Dictionary-backed filesystem.

    Directories map to ``None`` and files map to their text.  Only the
    directories passed to the constructor (and their ancestors) exist
    initially.
    """

    def __init__(self, directories: Iterable[str | PurePath] = ()) -> None:
        self.entries: dict[PurePath, str | None] = {}
        for directory in directories:
            path = PurePath(directory)
            for parent in reversed(path.parents):
                self.entries.setdefault(parent, None)
            self.entries[path] = None

    # -- FileSystem interface ------------------------------------------------

    async def exists(self, path: PurePath) -> bool:
        return PurePath(path) in self.entries

    async def mkdir(self, path: PurePath) -> None:
        path = PurePath(path)
        if path in self.entries:
            _raise(errno.EEXIST, path)
        self._check_parent(path)
        self.entries[path] = None

    async def write_file(self, path: PurePath, content: str) -> None:
        path = PurePath(path)
        if self.is_dir(path):
            _raise(errno.EISDIR, path)
        self._check_parent(path)
        self.entries[path] = content

    # -- Inspection ----------------------------------------------------------

    def is_dir(self, path: str | PurePath) -> bool:
        path = PurePath(path)
        return path in self.entries and self.entries[path] is None

    def read_file(self, path: str | PurePath) -> str:
        path = PurePath(path)
        content = self.entries.get(path)
        if content is None:
            _raise(errno.EISDIR if path in self.entries else errno.ENOENT, path)
        return content

    def listdir(self, path: str | PurePath) -> list[str]:
        """Return the sorted names of the direct children of *path*."""
        path = PurePath(path)
        if not self.is_dir(path):
            _raise(errno.ENOTDIR if path in self.entries else errno.ENOENT, path)
        return sorted(entry.name for entry in self.entries if entry.parent == path and entry != path)

    def _check_parent(self, path: PurePath) -> None:
        parent = path.parent
        if parent not in self.entries:
            _raise(errno.ENOENT, parent)
        if self.entries[parent] is not None:
            _raise(errno.ENOTDIR, parent)
