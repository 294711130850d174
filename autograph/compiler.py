"""Model compiler boundary.

The application hands the discovered source files to a ``ModelCompiler`` and
treats whatever comes back as an opaque model that is only passed on to the
composer.  ``SourceTextCompiler`` is the stock implementation: it loads each
file's text and does no parsing of its own, which is enough for composers that
scan sources themselves and serves as a reference for real compilers.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field
from rich.table import Table

from autograph.errors import CompileError
from autograph.models import ExecutionParameters
from autograph.utils import console


@runtime_checkable
class ModelCompiler(Protocol):
    """Turns discovered source files into a structured model."""

    def compile(self, files: Sequence[Path], parameters: ExecutionParameters) -> Any:
        """Compile *files*, raising ``CompileError`` on failure."""
        ...


# ---------------------------------------------------------------------------
# Source text model
# ---------------------------------------------------------------------------


class SourceFile(BaseModel):
    """A single source file loaded as text."""

    path: Path
    text: str

    @property
    def line_count(self) -> int:
        return len(self.text.splitlines())


class SourceModel(BaseModel):
    """Source files in discovery order."""

    files: list[SourceFile] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.files)

    def by_suffix(self, suffix: str) -> list[SourceFile]:
        """Return files whose name ends with *suffix*, ignoring case."""
        suffix = suffix.lower()
        return [f for f in self.files if f.path.name.lower().endswith(suffix)]

    def print_summary(self) -> None:
        """Print the loaded files as a Rich table."""
        table = Table(title="Compiled sources", show_header=True, header_style="bold cyan")
        table.add_column("File", style="dim")
        table.add_column("Lines", justify="right")
        for source in self.files:
            table.add_row(str(source.path), str(source.line_count))
        console.print(table)


class SourceTextCompiler:
    """Loads every discovered file as text."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def compile(
        self, files: Sequence[Path], parameters: ExecutionParameters
    ) -> SourceModel:
        sources: list[SourceFile] = []
        for path in files:
            try:
                text = Path(path).read_text(encoding=self.encoding)
            except (OSError, UnicodeDecodeError) as exc:
                raise CompileError(f"Cannot read source file {path}: {exc}") from exc
            sources.append(SourceFile(path=path, text=text))

        model = SourceModel(files=sources)
        if parameters.verbose:
            model.print_summary()
        return model
