"""Pydantic v2 models shared by every stage of the generator pipeline.

``ExecutionParameters`` is built once per run from the command line and is
read-only afterwards.  ``Implementation`` is a generated file waiting to be
written, and ``WriteReport`` records what the file writer did with a batch of
them.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


DEFAULT_PROJECT_NAME = "GEN"


# ---------------------------------------------------------------------------
# Execution parameters
# ---------------------------------------------------------------------------


class ExecutionParameters(BaseModel):
    """Application execution parameters received from the command line.

    Attributes:
        project_name: Name used in generated files (``-project_name``).
        verbose: Whether components emit trace output (``-verbose``).
        print_help: Whether the run should only print usage (``-help``).
        working_directory: Current directory of the process, captured when
            the instance is constructed.
        raw: Every flag token seen on the command line mapped to the value
            that followed it, or ``""`` when no value followed.  Read-only.

    Equality and hashing use every field except ``working_directory``, so the
    same command line read in two directories gives equal parameters.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(default=DEFAULT_PROJECT_NAME)
    verbose: bool = Field(default=False)
    print_help: bool = Field(default=False)
    working_directory: str = Field(default_factory=os.getcwd)
    raw: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("raw", mode="after")
    @classmethod
    def _freeze_raw(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("raw")
    def _serialize_raw(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    def _identity(self) -> tuple[Any, ...]:
        return (
            self.project_name,
            self.verbose,
            self.print_help,
            frozenset(self.raw.items()),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExecutionParameters):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the raw value collected for flag *key*."""
        return self.raw.get(key, default)

    def flag(self, key: str) -> bool:
        """Return ``True`` if flag *key* appeared on the command line."""
        return key in self.raw


# ---------------------------------------------------------------------------
# Generated artifacts
# ---------------------------------------------------------------------------


class Implementation(BaseModel):
    """Generated source code together with the file it belongs in."""

    model_config = ConfigDict(frozen=True)

    file_path: str = Field(..., description="Destination path of the generated file")
    source_code: str = Field(..., description="Full text of the generated file")

    @property
    def directory(self) -> Path:
        """Parent directory that must exist before the file can be written."""
        return Path(self.file_path).parent


class WriteReport(BaseModel):
    """Outcome of a ``FileWriter.write`` call."""

    created_dirs: list[str] = Field(default_factory=list)
    written: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of implementations handled, written or skipped."""
        return len(self.written) + len(self.skipped)
