"""Autograph application orchestrator.

Runs a generator as a fixed sequence of stages:

READ PARAMETERS   -- parse the command line (``-help`` stops here with exit 0).
DISCOVER FOLDERS  -- ask the folder provider where the sources are.
FIND FILES        -- collect source files under those folders.
COMPILE           -- turn the files into a model.
COMPOSE           -- ask the composer for implementations.
WRITE             -- write implementations whose content changed.

Any exception aborts the run: it is printed together with the stage that
raised it and ``run`` returns 1.  Files already written stay on disk.

Usage::

    from autograph import AutographApplication, ParameterFolderProvider

    app = AutographApplication(
        folder_provider=ParameterFolderProvider("-input"),
        composer=MyComposer(),
        help_text="-input [folders]\\nComma separated source folders.",
    )
    sys.exit(app.run())
"""

from __future__ import annotations

import sys
import time
import traceback
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from autograph.compiler import ModelCompiler, SourceTextCompiler
from autograph.composer import Composer, EmptyComposer, EmptyFolderProvider, FolderProvider
from autograph.config import Config
from autograph.errors import AutographError
from autograph.finder import FileFinder
from autograph.models import ExecutionParameters, Implementation, WriteReport
from autograph.parameters import ExecutionParametersReader
from autograph.utils import (
    ConsoleLog,
    LogSink,
    console,
    format_duration,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)
from autograph.writer import FileWriter

BASE_HELP = """\
Accepted arguments:

-project_name [name]
Project name to be used in generated files.
If not set, "{default_project_name}" is used as a default project name.

-verbose
Application prints additional verbose information: found input files and folders, successfully saved files etc.

-help
Print this message and exit.
"""


class Stage(str, Enum):
    """Pipeline stages, in execution order."""

    READ_PARAMETERS = "read parameters"
    PRINT_HELP = "print help"
    DISCOVER_FOLDERS = "discover folders"
    FIND_FILES = "find files"
    COMPILE = "compile"
    COMPOSE = "compose"
    WRITE = "write"


class AutographApplication:
    """Drives a source-code generator from command line to disk.

    Every collaborator is injected.  Defaults are built from ``config``; with
    no folder provider and no composer the run is valid but writes nothing.

    Attributes:
        config: Framework configuration.
        stage: The stage currently running, or the last one reached.
        parameters: Parameters of the current run, once read.
        report: What the writer did during the last successful run.
    """

    def __init__(
        self,
        folder_provider: FolderProvider | None = None,
        composer: Composer | None = None,
        *,
        config: Config | None = None,
        compiler: ModelCompiler | None = None,
        reader: ExecutionParametersReader | None = None,
        finder: FileFinder | None = None,
        writer: FileWriter | None = None,
        log: LogSink | None = None,
        help_text: str = "",
    ) -> None:
        self.config = config or Config()
        self.log = log or ConsoleLog()
        self.folder_provider = folder_provider or EmptyFolderProvider()
        self.composer = composer or EmptyComposer()
        self.compiler = compiler or SourceTextCompiler(encoding=self.config.encoding)
        self.reader = reader or ExecutionParametersReader(
            log=self.log, default_project_name=self.config.default_project_name
        )
        self.finder = finder or FileFinder(self.config.source_extensions, log=self.log)
        self.writer = writer or FileWriter(encoding=self.config.encoding, log=self.log)
        self.help_text = help_text

        self.stage: Stage = Stage.READ_PARAMETERS
        self.parameters: ExecutionParameters | None = None
        self.report: WriteReport | None = None

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def run(self, arguments: Sequence[str] | None = None) -> int:
        """Run the generator.

        Args:
            arguments: Command-line tokens.  Defaults to ``sys.argv``.

        Returns:
            Process exit code: 0 on success or after printing help, 1 on
            any error.
        """
        started = time.monotonic()
        self.parameters = None
        self.report = None
        try:
            self.stage = Stage.READ_PARAMETERS
            parameters = self.reader.read(sys.argv if arguments is None else arguments)
            self.parameters = parameters

            if parameters.print_help:
                self.stage = Stage.PRINT_HELP
                self.print_help()
                return 0

            self.stage = Stage.DISCOVER_FOLDERS
            folders = self.folder_provider.provide_input_folders(parameters)

            self.stage = Stage.FIND_FILES
            files = self.finder.find_files(folders, parameters)

            self.stage = Stage.COMPILE
            model = self.compiler.compile(files, parameters)

            self.stage = Stage.COMPOSE
            implementations = self.composer.compose(model, parameters)

            self.stage = Stage.WRITE
            self.report = self.writer.write(implementations, parameters)

        except AutographError as exc:
            print_error(f"Stage '{self.stage.value}' failed: {exc}")
            return 1

        except Exception as exc:
            print_error(f"Stage '{self.stage.value}' failed: {type(exc).__name__}: {exc}")
            if self.parameters is not None and self.parameters.verbose:
                console.print(traceback.format_exc(), style="dim", markup=False, soft_wrap=True)
            return 1

        if parameters.verbose:
            self._print_run_summary(parameters, files, implementations, time.monotonic() - started)
        return 0

    # ------------------------------------------------------------------
    # Help
    # ------------------------------------------------------------------

    def print_help(self) -> None:
        """Print usage, followed by the generator's own help text."""
        text = BASE_HELP.format(default_project_name=self.config.default_project_name)
        if self.help_text:
            text = f"{text}\n{self.help_text.rstrip()}\n"
        console.print(text, markup=False, highlight=False, soft_wrap=True)

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def _print_run_summary(
        self,
        parameters: ExecutionParameters,
        files: Sequence[Path],
        implementations: Sequence[Implementation],
        elapsed: float,
    ) -> None:
        if not implementations:
            print_warning("Composer produced no implementations, nothing was written.")

        data = {
            "Project name": parameters.project_name,
            "Source files": str(len(files)),
            "Implementations": str(len(implementations)),
        }
        if self.report is not None:
            data["Written"] = str(len(self.report.written))
            data["Unchanged"] = str(len(self.report.skipped))
        data["Duration"] = format_duration(elapsed)

        print_summary_table(data, title="Autograph")
        print_success("Generation complete")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """CLI entry point for ``autograph`` and ``python -m autograph``."""
    try:
        config = Config.from_env()
    except ValueError as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)

    app = AutographApplication(config=config)
    sys.exit(app.run())


if __name__ == "__main__":
    main()
