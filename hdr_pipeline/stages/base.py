"""
Stage invoker base class

Common command execution and error handling for every tool stage
"""
import os
import re
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable

from hdr_pipeline.core.exceptions import (
    OutputWriteError,
    ParameterParseError,
    StageError,
    ToolExecutionError,
    ToolInvocationError,
)
from hdr_pipeline.core.interfaces import ProcessInvoker, StageResult, ToolchainConfig
from hdr_pipeline.core.logger import get_logger
from hdr_pipeline.core.process import SubprocessInvoker

# optional sign, ASCII digits only
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)


class BaseStage(ABC):
    """
    Wraps exactly one external tool invocation

    Subclasses build the argument list; this class runs the tool, turns any
    StageError into a failed StageResult and never lets it escape.
    """

    name: str = ""
    default_tool: str = ""
    # tool writes the raster to stdout rather than to an -o file
    writes_stdout: bool = True

    def __init__(
        self,
        invoker: ProcessInvoker | None = None,
        logger: Any = None,
        tool_name: str | None = None,
    ):
        self.invoker = invoker or SubprocessInvoker()
        self.logger = logger or get_logger(self.__class__.__name__)
        self.tool_name = tool_name or self.default_tool

    @abstractmethod
    def tool_root(self, config: ToolchainConfig) -> str:
        """Directory holding this stage's binary"""
        pass

    def binary_path(self, config: ToolchainConfig) -> str:
        return os.path.join(self.tool_root(config), self.tool_name)

    def parse_number(self, name: str, value: Any) -> int:
        """
        Parse pixel geometry received as text

        Raises:
            ParameterParseError: value is not a base-10 integer
        """
        text = "" if value is None else str(value).strip()
        if not INTEGER_PATTERN.fullmatch(text):
            raise ParameterParseError(self.name, name, value)
        return int(text)

    def _open_output(self, output_path: str) -> None:
        """Create or truncate the stdout target before the tool is spawned"""
        try:
            open(output_path, "wb").close()
        except OSError as e:
            raise OutputWriteError(self.name, output_path, e)

    def _run_stage(
        self,
        config: ToolchainConfig,
        output_path: str,
        build_args: Callable[[], list],
    ) -> StageResult:
        """Run the tool and report the outcome as a StageResult"""
        started_at = datetime.now()
        command: list[str] = []
        output_path = os.fspath(output_path)
        self.logger.info(f"[{self.name}] started")

        try:
            # callers may hand in pathlib.Path objects
            args = [os.fspath(arg) for arg in build_args()]
            binary = os.fspath(self.binary_path(config))
            command = [binary, *args]
            self.logger.debug(f"[{self.name}] {' '.join(command)}")

            if self.writes_stdout:
                self._open_output(output_path)

            try:
                outcome = self.invoker.run(
                    binary,
                    args,
                    stdout_path=output_path if self.writes_stdout else None,
                )
            except OSError as e:
                raise ToolInvocationError(self.name, binary, e)

            if outcome.returncode != 0:
                raise ToolExecutionError(
                    self.name, self.tool_name, outcome.returncode, outcome.stderr.strip()
                )

        except StageError as e:
            error = f"[{e.stage}] {e.message}"
            self.logger.error(error)
            return StageResult.failure(
                self.name,
                error,
                command=command,
                started_at=started_at,
                completed_at=datetime.now(),
            )

        self.logger.info(f"[{self.name}] done -> {output_path}")
        return StageResult.success(
            self.name,
            output_path,
            command=command,
            started_at=started_at,
            completed_at=datetime.now(),
        )
