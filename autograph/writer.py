"""Idempotent persistence of generated implementations.

Writing happens in two passes.  First every implementation's parent directory
is created, so a directory that cannot be created is reported before any file
is touched.  Every missing ancestor is traced and recorded, outermost first.  Then each file is written, unless the file on disk already holds
exactly the same bytes, in which case it is left alone and its modification
time is preserved.

Files are overwritten in place.  There is no temporary file and rename, and
nothing is rolled back when a write fails part way through a batch.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from autograph.models import ExecutionParameters, Implementation, WriteReport
from autograph.utils import ConsoleLog, LogSink


class FileWriter:
    """Writes ``Implementation`` objects to disk, skipping unchanged files."""

    def __init__(self, encoding: str = "utf-8", log: LogSink | None = None) -> None:
        self.encoding = encoding
        self.log = log or ConsoleLog()

    def write(
        self,
        implementations: Sequence[Implementation],
        parameters: ExecutionParameters,
    ) -> WriteReport:
        """Write *implementations* to their file paths.

        Raises:
            OSError: If a directory cannot be created or a file cannot be
                written.  Implementations after the failing one are not
                attempted.
        """
        report = WriteReport()
        self._create_required_folders(implementations, parameters, report)

        for implementation in implementations:
            self._write_file(implementation, parameters, report)

        return report

    # -- Internal ----------------------------------------------------------

    def _create_required_folders(
        self,
        implementations: Sequence[Implementation],
        parameters: ExecutionParameters,
        report: WriteReport,
    ) -> None:
        for implementation in implementations:
            directory = implementation.directory
            if directory.is_dir():
                continue
            missing = _missing_directories(directory)
            if parameters.verbose:
                for folder in missing:
                    self.log.v(f"Creating folder: {folder}")
            directory.mkdir(parents=True, exist_ok=True)
            report.created_dirs.extend(str(folder) for folder in missing)

    def _write_file(
        self,
        implementation: Implementation,
        parameters: ExecutionParameters,
        report: WriteReport,
    ) -> None:
        path = Path(implementation.file_path)
        content = implementation.source_code.encode(self.encoding)

        if _read_existing(path) == content:
            if parameters.verbose:
                self.log.v(f"File {path} didn't change, skipping...")
            report.skipped.append(implementation.file_path)
            return

        if parameters.verbose:
            self.log.v(f"Writing file: {path}")
        path.write_bytes(content)
        report.written.append(implementation.file_path)


def _read_existing(path: Path) -> bytes | None:
    """Return the current bytes at *path*, or ``None`` if it cannot be read."""
    try:
        return path.read_bytes()
    except OSError:
        return None


def _missing_directories(directory: Path) -> list[Path]:
    """Return the directories that must be created for *directory*, outermost first."""
    missing = []
    current = directory
    while not current.exists() and current != current.parent:
        missing.append(current)
        current = current.parent
    missing.reverse()
    return missing
