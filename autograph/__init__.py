"""Autograph -- scaffolding for source-code generators.

A generator supplies a folder provider and a composer; Autograph parses the
command line, finds source files, compiles them into a model, asks the
composer for implementations and writes the ones whose content changed.

Quick usage::

    import sys

    from autograph import AutographApplication, Implementation, StaticFolderProvider

    class ReadmeComposer:
        def compose(self, model, parameters):
            names = "\\n".join(f.path.name for f in model.files)
            return [Implementation(file_path="Generated/FILES.txt", source_code=names)]

    sys.exit(
        AutographApplication(StaticFolderProvider(["./Sources"]), ReadmeComposer()).run()
    )
"""

from autograph.application import AutographApplication, Stage
from autograph.compiler import ModelCompiler, SourceFile, SourceModel, SourceTextCompiler
from autograph.composer import (
    Composer,
    FolderProvider,
    FunctionComposer,
    ParameterFolderProvider,
    StaticFolderProvider,
)
from autograph.config import Config
from autograph.errors import AutographError, CompileError, ComposeError, ParameterError
from autograph.finder import FileFinder
from autograph.models import ExecutionParameters, Implementation, WriteReport
from autograph.parameters import ExecutionParametersReader
from autograph.utils import ConsoleLog, LogSink, NullLog, RecordingLog
from autograph.writer import FileWriter

__all__ = [
    "AutographApplication",
    "AutographError",
    "CompileError",
    "ComposeError",
    "Composer",
    "Config",
    "ConsoleLog",
    "ExecutionParameters",
    "ExecutionParametersReader",
    "FileFinder",
    "FileWriter",
    "FolderProvider",
    "FunctionComposer",
    "Implementation",
    "LogSink",
    "ModelCompiler",
    "NullLog",
    "ParameterError",
    "ParameterFolderProvider",
    "RecordingLog",
    "SourceFile",
    "SourceModel",
    "SourceTextCompiler",
    "Stage",
    "StaticFolderProvider",
    "WriteReport",
]
