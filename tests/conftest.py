"""Shared pytest fixtures for the Autograph test suite.

Provides reusable fixtures for:
- Temporary source trees with mixed-case extensions and nested folders
- Execution parameters bound to a temporary working directory
- An in-memory log sink
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from autograph.models import ExecutionParameters
from autograph.utils import RecordingLog


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture
def recording_log() -> RecordingLog:
    """Log sink that keeps every verbose message."""
    return RecordingLog()


# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------

@pytest.fixture
def parameters(tmp_path: Path) -> ExecutionParameters:
    """Quiet parameters whose working directory is ``tmp_path``."""
    return ExecutionParameters(working_directory=str(tmp_path))


@pytest.fixture
def verbose_parameters(tmp_path: Path) -> ExecutionParameters:
    """Verbose parameters whose working directory is ``tmp_path``."""
    return ExecutionParameters(verbose=True, working_directory=str(tmp_path))


# ---------------------------------------------------------------------------
# Source trees
# ---------------------------------------------------------------------------

@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """A folder holding ``a.swift``, ``a.SWIFT``, ``a.txt`` and ``sub/b.swift``."""
    root = tmp_path / "Sources"
    (root / "sub").mkdir(parents=True)
    (root / "a.swift").write_text("class A {}\n", encoding="utf-8")
    (root / "a.SWIFT").write_text("class AUpper {}\n", encoding="utf-8")
    (root / "a.txt").write_text("not a source\n", encoding="utf-8")
    (root / "sub" / "b.swift").write_text("class B {}\n", encoding="utf-8")
    return root


@pytest.fixture
def model_sources(tmp_path: Path) -> Path:
    """A small project with model classes spread over nested folders."""
    root = tmp_path / "Sources"
    (root / "Models" / "Entities").mkdir(parents=True)
    (root / "Models" / "User.swift").write_text(
        textwrap.dedent("""\
            class User {
                let name: String
                let email: String
            }
        """),
        encoding="utf-8",
    )
    (root / "Models" / "Entities" / "Order.swift").write_text(
        textwrap.dedent("""\
            class Order {
                let id: Int
            }
        """),
        encoding="utf-8",
    )
    (root / "README.md").write_text("# Models\n", encoding="utf-8")
    return root
