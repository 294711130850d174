"""Command-line parameter parsing.

Turns a flat list of argument tokens into ``ExecutionParameters``.  Any token
starting with ``-`` is a flag; the token right after it is the flag's value
unless it is a flag itself.  Unknown flags are never rejected, they are kept
in ``ExecutionParameters.raw`` for generators to inspect.
"""

from __future__ import annotations

from collections.abc import Sequence

from autograph.errors import ParameterError
from autograph.models import DEFAULT_PROJECT_NAME, ExecutionParameters
from autograph.utils import ConsoleLog, LogSink

VERBOSE_FLAG = "-verbose"
HELP_FLAG = "-help"
PROJECT_NAME_FLAG = "-project_name"


def is_flag(token: str) -> bool:
    """Return ``True`` if *token* looks like a flag."""
    return token.startswith("-")


def _value_after(tokens: Sequence[str], index: int) -> str | None:
    """Return the token following *index* if it exists and is not a flag."""
    if index + 1 < len(tokens) and not is_flag(tokens[index + 1]):
        return tokens[index + 1]
    return None


class ExecutionParametersReader:
    """Builds ``ExecutionParameters`` from command-line tokens.

    Trace messages are only emitted when ``-verbose`` is present; since it may
    appear anywhere in the argument list they are collected during the scan
    and flushed once parsing is finished.
    """

    def __init__(
        self,
        log: LogSink | None = None,
        default_project_name: str = DEFAULT_PROJECT_NAME,
    ) -> None:
        self.log = log or ConsoleLog()
        self.default_project_name = default_project_name

    def read(self, arguments: Sequence[str]) -> ExecutionParameters:
        """Parse *arguments* into ``ExecutionParameters``.

        Args:
            arguments: Argument tokens, with or without the program name.

        Raises:
            ParameterError: If ``-project_name`` is not followed by a value.
        """
        tokens = list(arguments)
        verbose = False
        print_help = False
        project_name = self.default_project_name
        raw: dict[str, str] = {}
        trace: list[str] = []

        for index, token in enumerate(tokens):
            if token == VERBOSE_FLAG:
                verbose = True

            if token == HELP_FLAG:
                print_help = True

            if token == PROJECT_NAME_FLAG:
                value = _value_after(tokens, index)
                if value is None:
                    raise ParameterError(PROJECT_NAME_FLAG)
                project_name = value
                trace.append(f"Project name: {value}")

            if is_flag(token):
                value = _value_after(tokens, index)
                if value is None:
                    raw[token] = ""
                    trace.append(f"Found argument: {token}")
                else:
                    raw[token] = value
                    trace.append(f"Found pair of arguments: {token} = {value}")

        parameters = ExecutionParameters(
            project_name=project_name,
            verbose=verbose,
            print_help=print_help,
            raw=raw,
        )

        if verbose:
            for message in trace:
                self.log.v(message)
            self.log.v(f"Working directory: {parameters.working_directory}")

        return parameters
