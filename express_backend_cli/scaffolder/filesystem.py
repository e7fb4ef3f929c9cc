"""File-system capability used to persist a generated project.

The scaffolder only ever needs three operations: check whether a path exists,
create a directory, and write a text file.  :class:`LocalFileSystem` runs them
against the real disk in a worker thread; tests substitute an in-memory
implementation of :class:`FileSystem`.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """The narrow set of file-system operations the generator relies on."""

    async def exists(self, path: Path) -> bool: ...

    async def ensure_dir(self, path: Path) -> Path: ...

    async def write_file(self, path: Path, content: str) -> Path: ...


class LocalFileSystem:
    """:class:`FileSystem` backed by :mod:`pathlib`."""

    async def exists(self, path: Path) -> bool:
        return await asyncio.to_thread(Path(path).exists)

    async def ensure_dir(self, path: Path) -> Path:
        """Create *path* and any missing parents."""
        target = Path(path)
        await asyncio.to_thread(target.mkdir, parents=True, exist_ok=True)
        return target

    async def write_file(self, path: Path, content: str) -> Path:
        """Write *content* as UTF-8, creating parent directories as needed."""
        target = Path(path)
        await asyncio.to_thread(_write_file, target, content)
        return target


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
