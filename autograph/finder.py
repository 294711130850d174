"""Recursive source file discovery.

Walks input folders depth-first and returns every file whose name ends with a
recognised source extension.  Within a folder, its own files come before the
files of its subfolders; subfolders are visited in the order the filesystem
lists them.  Results from several input folders are concatenated as-is, so
overlapping folders produce duplicate entries.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from autograph.models import ExecutionParameters
from autograph.utils import ConsoleLog, LogSink


class FileFinder:
    """Finds source files in folders and their subfolders.

    Any failure to list a folder (missing folder, permission denied) raises
    the underlying ``OSError`` and aborts the whole search.
    """

    def __init__(
        self,
        extensions: Iterable[str] = (".swift",),
        log: LogSink | None = None,
    ) -> None:
        self.extensions = tuple(ext.lower() for ext in extensions)
        self.log = log or ConsoleLog()

    def find_files(
        self, folders: Sequence[str], parameters: ExecutionParameters
    ) -> list[Path]:
        """Find source files in each of *folders*, in the given order."""
        files: list[Path] = []
        for folder in folders:
            files.extend(self.find_files_in_folder(folder, parameters))
        return files

    def find_files_in_folder(
        self, folder: str, parameters: ExecutionParameters
    ) -> list[Path]:
        """Find source files in *folder* and below it."""
        root = self.make_absolute_path(folder, parameters.working_directory)
        return [
            path for path in self._scan(root, parameters.verbose)
            if self.is_source_file(path)
        ]

    def is_source_file(self, path: Path) -> bool:
        """Return ``True`` if *path* has a recognised extension, ignoring case."""
        return path.name.lower().endswith(self.extensions)

    @staticmethod
    def make_absolute_path(folder: str, working_directory: str) -> Path:
        """Resolve an input folder argument against the working directory.

        An empty string means the working directory itself, and a path
        starting with ``.`` is appended to it.  Anything else is taken as
        given.
        """
        if not folder:
            return Path(working_directory)
        if folder.startswith("."):
            return Path(working_directory + "/" + folder)
        return Path(folder)

    # -- Internal ----------------------------------------------------------

    def _scan(self, folder: Path, verbose: bool) -> list[Path]:
        if verbose:
            self.log.v(f"Scanning folder: {folder}")

        files: list[Path] = []
        subfolders: list[Path] = []
        for entry in folder.iterdir():
            if entry.is_dir():
                subfolders.append(entry)
            else:
                files.append(entry)

        if verbose and files:
            self.log.v("Found files:\n" + ",\n".join(str(f) for f in files))
        if verbose and subfolders:
            self.log.v("Found subfolders:\n" + ",\n".join(str(d) for d in subfolders))

        for subfolder in subfolders:
            files.extend(self._scan(subfolder, verbose))
        return files
