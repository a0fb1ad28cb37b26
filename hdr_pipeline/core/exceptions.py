"""
Custom exception classes

Standardized errors raised inside the pipeline layers
"""
from typing import Any


class BaseError(Exception):
    """Base class for every custom exception"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ============================================
# Configuration Errors
# ============================================
class ConfigError(BaseError):
    """Configuration related error"""
    pass


class ConfigNotFoundError(ConfigError):
    """Settings file not found"""
    pass


class ConfigValidationError(ConfigError):
    """Required setting missing or invalid"""
    pass


# ============================================
# Stage Errors
# ============================================
class StageError(BaseError):
    """
    Error raised while running a pipeline stage

    The stage name is kept apart from the message so the stage boundary can
    render a single "[Stage] cause" line for the caller.
    """

    def __init__(self, stage: str, message: str, details: dict[str, Any] | None = None):
        self.stage = stage
        super().__init__(message, details)


class ParameterParseError(StageError):
    """Geometry or dimension text is not a number"""

    def __init__(self, stage: str, name: str, value: Any):
        self.name = name
        self.value = value
        super().__init__(stage, f"invalid {name}: {value!r} is not a number")


class ToolInvocationError(StageError):
    """Tool binary missing or could not be spawned"""

    def __init__(self, stage: str, command: str, cause: Exception):
        self.command = command
        self.cause = cause
        super().__init__(stage, f"could not run {command}: {cause}")


class ToolExecutionError(StageError):
    """Tool exited with a non-zero status"""

    def __init__(self, stage: str, tool: str, returncode: int, stderr: str = ""):
        self.tool = tool
        self.returncode = returncode
        self.stderr = stderr
        message = f"{tool} exited with status {returncode}"
        if stderr:
            message = f"{message}: {stderr}"
        super().__init__(stage, message)


class OutputWriteError(StageError):
    """Stage output file cannot be created"""

    def __init__(self, stage: str, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(stage, f"cannot write {path}: {cause}")
