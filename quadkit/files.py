"""Loading files, optionally from a configured assets folder."""

from __future__ import annotations

import os

__all__ = [
    "FileError",
    "FileLoader",
    "set_pc_assets_folder",
    "load_file",
    "load_string",
]


class FileError(Exception):
    """A file could not be loaded; ``kind`` is the underlying error."""

    def __init__(self, kind: BaseException, path: str) -> None:
        super().__init__(f"Couldn't load file {path}: {kind}")
        self.kind = kind
        self.path = path


class FileLoader:
    """Loads files, resolving paths against an optional assets folder."""

    def __init__(self, pc_assets_folder: str | None = None) -> None:
        self.pc_assets_folder = pc_assets_folder

    def set_pc_assets_folder(self, path: str | os.PathLike[str]) -> None:
        """Resolve every later path relative to the folder ``path``."""
        self.pc_assets_folder = os.fspath(path)

    def _resolve(self, path: str | os.PathLike[str]) -> str:
        path = os.fspath(path)
        if self.pc_assets_folder is not None:
            return f"{self.pc_assets_folder}/{path}"
        return path

    def load_file(self, path: str | os.PathLike[str]) -> bytes:
        """Return the file's bytes; raise FileError if it cannot be read."""
        resolved = self._resolve(path)
        try:
            with open(resolved, "rb") as handle:
                return handle.read()
        except OSError as exc:
            raise FileError(exc, resolved) from exc

    def load_string(self, path: str | os.PathLike[str]) -> str:
        """Return the file as text, replacing invalid UTF-8 sequences."""
        return self.load_file(path).decode("utf-8", errors="replace")


_default = FileLoader()


def set_pc_assets_folder(path: str | os.PathLike[str]) -> None:
    """Set the assets folder of the shared loader."""
    _default.set_pc_assets_folder(path)


def load_file(path: str | os.PathLike[str]) -> bytes:
    """Load a file's bytes with the shared loader."""
    return _default.load_file(path)


def load_string(path: str | os.PathLike[str]) -> str:
    """Load a file as text with the shared loader."""
    return _default.load_string(path)