"""
Core module - shared infrastructure

- config: settings management
- logger: logging service
- exceptions: custom exceptions
- interfaces: core types and interfaces
- process: external process invoker
- preflight: toolchain checks
"""
from hdr_pipeline.core.config import Config, get_config
from hdr_pipeline.core.logger import get_logger, LoggerService, setup_logger_from_config
from hdr_pipeline.core.exceptions import (
    BaseError,
    ConfigError,
    ConfigNotFoundError,
    ConfigValidationError,
    StageError,
    ParameterParseError,
    ToolInvocationError,
    ToolExecutionError,
    OutputWriteError,
)
from hdr_pipeline.core.interfaces import (
    StageStatus,
    ToolchainConfig,
    PipelineArtifacts,
    StageResult,
    ProcessOutcome,
    ProcessInvoker,
)
from hdr_pipeline.core.process import SubprocessInvoker
from hdr_pipeline.core.preflight import PreflightChecker, PreflightResult

__all__ = [
    # Config
    "Config",
    "get_config",
    # Logger
    "get_logger",
    "LoggerService",
    "setup_logger_from_config",
    # Exceptions
    "BaseError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigValidationError",
    "StageError",
    "ParameterParseError",
    "ToolInvocationError",
    "ToolExecutionError",
    "OutputWriteError",
    # Interfaces
    "StageStatus",
    "ToolchainConfig",
    "PipelineArtifacts",
    "StageResult",
    "ProcessOutcome",
    "ProcessInvoker",
    # Process
    "SubprocessInvoker",
    # Preflight
    "PreflightChecker",
    "PreflightResult",
]
