"""Autograph framework configuration.

Settings that belong to the generator itself rather than to a particular
invocation: which file suffixes count as sources, the fallback project name,
and the text encoding used for reading sources and writing artifacts.  Values
are validated by Pydantic at construction time and can be read from JSON or
environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from autograph.models import DEFAULT_PROJECT_NAME


class Config(BaseModel):
    """Global Autograph configuration.

    Usually created once by the CLI entry point or by a generator's ``main``
    and handed to ``AutographApplication``, which builds its default
    components from it.
    """

    source_extensions: list[str] = Field(
        default_factory=lambda: [".swift"],
        description="Recognised source file suffixes, matched case-insensitively",
    )
    default_project_name: str = Field(default=DEFAULT_PROJECT_NAME, min_length=1)
    encoding: str = Field(default="utf-8")

    @field_validator("source_extensions")
    @classmethod
    def _check_extensions(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("at least one source extension is required")
        for ext in value:
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"source extension must look like '.ext', got {ext!r}")
        return value

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: str | Path) -> Path:
        """Persist the configuration to a JSON file.

        Parent directories are created automatically.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: str | Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            AUTOGRAPH_SOURCE_EXTENSIONS (comma separated, e.g. ``.swift,.m``),
            AUTOGRAPH_DEFAULT_PROJECT_NAME, AUTOGRAPH_ENCODING.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("AUTOGRAPH_SOURCE_EXTENSIONS"):
            kwargs["source_extensions"] = [
                ext.strip()
                for ext in os.environ["AUTOGRAPH_SOURCE_EXTENSIONS"].split(",")
                if ext.strip()
            ]
        if os.environ.get("AUTOGRAPH_DEFAULT_PROJECT_NAME"):
            kwargs["default_project_name"] = os.environ["AUTOGRAPH_DEFAULT_PROJECT_NAME"]
        if os.environ.get("AUTOGRAPH_ENCODING"):
            kwargs["encoding"] = os.environ["AUTOGRAPH_ENCODING"]
        return cls(**kwargs)
