"""Extension points supplied by concrete generators.

A generator plugs into ``AutographApplication`` with two objects: a
``FolderProvider`` that says where the sources live, and a ``Composer`` that
turns the compiled model into ``Implementation`` objects.  Both are plain
protocols, so any object with the right method works.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol, runtime_checkable

from autograph.models import ExecutionParameters, Implementation


@runtime_checkable
class FolderProvider(Protocol):
    """Supplies the input folders to scan for source files."""

    def provide_input_folders(self, parameters: ExecutionParameters) -> list[str]:
        ...


@runtime_checkable
class Composer(Protocol):
    """Produces generated implementations from a compiled model.

    Implementations should raise ``ComposeError`` when the model cannot be
    composed.
    """

    def compose(self, model: Any, parameters: ExecutionParameters) -> list[Implementation]:
        ...


# ---------------------------------------------------------------------------
# Stock providers
# ---------------------------------------------------------------------------


class StaticFolderProvider:
    """Always returns the same folders."""

    def __init__(self, folders: Sequence[str]) -> None:
        self.folders = list(folders)

    def provide_input_folders(self, parameters: ExecutionParameters) -> list[str]:
        return list(self.folders)


class ParameterFolderProvider:
    """Reads input folders from a command-line flag.

    ``-input Sources/Models,Sources/Entities`` yields two folders.  A missing
    flag, or one with no value, yields no folders.
    """

    def __init__(self, key: str = "-input", separator: str = ",") -> None:
        self.key = key
        self.separator = separator

    def provide_input_folders(self, parameters: ExecutionParameters) -> list[str]:
        value = parameters.get(self.key) or ""
        return [folder.strip() for folder in value.split(self.separator) if folder.strip()]


class EmptyFolderProvider:
    """Provides no folders."""

    def provide_input_folders(self, parameters: ExecutionParameters) -> list[str]:
        return []


# ---------------------------------------------------------------------------
# Stock composers
# ---------------------------------------------------------------------------


class EmptyComposer:
    """Composes nothing."""

    def compose(self, model: Any, parameters: ExecutionParameters) -> list[Implementation]:
        return []


class FunctionComposer:
    """Adapts a plain ``(model, parameters) -> implementations`` callable."""

    def __init__(
        self,
        fn: Callable[[Any, ExecutionParameters], Sequence[Implementation]],
    ) -> None:
        self.fn = fn

    def compose(self, model: Any, parameters: ExecutionParameters) -> list[Implementation]:
        return list(self.fn(model, parameters))
