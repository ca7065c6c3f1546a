"""
samplekit Test Directory

Scratch directories for tests that need real files.

Each TestDir lives under a shared root (DEFAULT_TEST_DIR, "test_dir.tmp"
unless told otherwise) in a subdirectory named after the test and the
calling thread, so parallel tests never share files. The subdirectory is
removed when the TestDir is closed, or when it is garbage collected,
unless delete_on_terminate is cleared.
"""

from __future__ import annotations

import logging
import shutil
import threading
import weakref
from pathlib import Path
from types import TracebackType
from typing import Optional, Union

from samplekit.core.constants import DEFAULT_TEST_DIR

__all__ = ["TestDir"]

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class TestDir:
    """
    Per-thread scratch directory with file helpers.

    Args:
        name: Test name; the directory is "<name>-<thread id>".
        root: Parent directory, created if missing. Must not be a
            filesystem root.
        delete_on_terminate: Remove the directory on close() or when the
            TestDir is garbage collected.

    Examples:
        >>> with TestDir("doc_example") as td:
        ...     _ = td.create_test_file("f", b"data")
        ...     td.read_test_file("f")
        b'data'
    """

    # Keep pytest from collecting this class as a test case
    __test__ = False

    def __init__(
        self,
        name: str,
        root: PathLike = DEFAULT_TEST_DIR,
        delete_on_terminate: bool = True,
    ) -> None:
        root_path = Path(root)
        if root_path.resolve().parent == root_path.resolve():
            raise ValueError(f"Refusing to use filesystem root as test directory: {root}")

        self._path = root_path / f"{name}-{threading.get_ident()}"
        self._closed = False
        self._finalizer: Optional[weakref.finalize] = None

        if self._path.is_file() or self._path.is_symlink():
            self._path.unlink()
        self._path.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Created test directory {self._path}")
        self.delete_on_terminate = delete_on_terminate

    @property
    def path(self) -> Path:
        """Path of the test directory."""
        return self._path

    @property
    def delete_on_terminate(self) -> bool:
        """
        Remove the directory on close() or when this object is collected.

        True by default.
        """
        return self._delete_on_terminate

    @delete_on_terminate.setter
    def delete_on_terminate(self, value: bool) -> None:
        self._delete_on_terminate = bool(value)
        if self._finalizer is not None:
            self._finalizer.detach()
            self._finalizer = None
        if self._delete_on_terminate and not self._closed:
            self._finalizer = weakref.finalize(self, shutil.rmtree, self._path, True)

    def __enter__(self) -> TestDir:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"TestDir({str(self._path)!r})"

    def close(self) -> None:
        """Remove the directory if delete_on_terminate is set. Idempotent."""
        if self._closed:
            return
        self._closed = True
        if self._finalizer is not None:
            self._finalizer()
            self._finalizer = None
            logger.debug(f"Removed test directory {self._path}")

    def reset(self) -> None:
        """Delete everything inside the directory, keeping the directory."""
        for entry in self._path.iterdir():
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()

    def get_test_file_path(self, name: str) -> Path:
        """Path of a file inside the test directory (it may not exist)."""
        return self._path / name

    def create_test_file(self, name: str, contents: bytes) -> Path:
        """
        Create (or overwrite) a test file.

        Args:
            name: File name relative to the test directory.
            contents: Bytes to write.

        Returns:
            Path of the written file.
        """
        path = self.get_test_file_path(name)
        path.write_bytes(contents)
        return path

    def touch_test_file(self, name: str) -> Path:
        """Create an empty test file; same as create_test_file(name, b"")."""
        return self.create_test_file(name, b"")

    def read_test_file(self, name: str) -> bytes:
        """Read the full contents of a test file."""
        return self.get_test_file_path(name).read_bytes()

    def delete_test_file(self, name: str) -> None:
        """Delete a test file. Does nothing if it does not exist."""
        path = self.get_test_file_path(name)
        if path.exists() or path.is_symlink():
            path.unlink()
