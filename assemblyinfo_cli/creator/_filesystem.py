"""
File system and environment collaborators used when writing generated files.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO


class FileSystem(ABC):
    """Opens files on behalf of the objects which write to them."""

    @abstractmethod
    def open_write(self, path: Path) -> BinaryIO:
        """
        Open a writable byte stream for the file at the given ``path``,
        truncating any existing content.

        :raise OSError: If the path cannot be opened for writing.
        """
        raise NotImplementedError


class LocalFileSystem(FileSystem):
    """Opens files on the local disk. Parent directories are never created."""

    def open_write(self, path: Path) -> BinaryIO:
        return Path(path).open("wb")


class Environment:
    """
    The working environment against which relative paths are resolved.

    :param working_directory: The directory relative paths are resolved against.
        Defaults to the current working directory at the time of creation.
    """

    def __init__(self, working_directory: str | Path | None = None):
        self.working_directory = Path(working_directory) if working_directory is not None else Path.cwd()

    def make_absolute(self, path: str | Path) -> Path:
        """Return the given ``path`` unchanged if absolute, or joined to the working directory if relative."""
        path = Path(path)
        if path.is_absolute():
            return path
        return self.working_directory.joinpath(path)
