"""
Core interface definitions

Types shared by the stages and the orchestrator
"""
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable


# ============================================
# Enums
# ============================================
class StageStatus(Enum):
    """Stage outcome"""
    SUCCESS = "success"
    FAILED = "failed"


# ============================================
# Data Classes
# ============================================
@dataclass(frozen=True)
class ToolchainConfig:
    """
    Tool locations and working directories for one pipeline run

    Values are kept exactly as given. Bad paths surface when a tool is run.
    """
    radiance_path: str
    hdrgen_path: str
    output_path: str   # not used by any stage yet
    temp_path: str

    @classmethod
    def from_settings(cls, config: Any = None, **overrides: str | None) -> "ToolchainConfig":
        """
        Build from the `toolchain` settings section

        Args:
            config: Config instance (default: get_config())
            **overrides: field values that win over settings, None is ignored

        Returns:
            ToolchainConfig
        """
        if config is None:
            from hdr_pipeline.core.config import get_config
            config = get_config()

        section = config.get_section("toolchain")
        values = {}
        for name in ("radiance_path", "hdrgen_path", "output_path", "temp_path"):
            value = overrides.get(name)
            values[name] = value if value is not None else section.get(name, "")
        return cls(**values)


@dataclass(frozen=True)
class PipelineArtifacts:
    """Intermediate and final file paths, derived from the temp directory only"""
    merged: str
    nullified: str
    cropped: str
    resized: str

    FILE_NAMES = ("output1.hdr", "output2.hdr", "output3.hdr", "output4.hdr")

    @classmethod
    def in_directory(cls, temp_path: str) -> "PipelineArtifacts":
        return cls(*(os.path.join(temp_path, name) for name in cls.FILE_NAMES))

    @property
    def final(self) -> str:
        return self.resized


@dataclass
class StageResult:
    """
    Outcome of one stage: the artifact path on success, a message on failure

    Usage:
        result = merge.execute(config, images, rsp, artifacts.merged)
        result = result.and_then(lambda merged: nullify.execute(config, merged, out))
        if not result.ok:
            print(result.error)
    """
    stage_name: str
    status: StageStatus
    artifact: str | None = None
    error: str | None = None
    command: list[str] = field(default_factory=list)
    started_at: datetime | None = None
    completed_at: datetime | None = None

    @classmethod
    def success(cls, stage_name: str, artifact: str, **kwargs) -> "StageResult":
        return cls(stage_name=stage_name, status=StageStatus.SUCCESS, artifact=artifact, **kwargs)

    @classmethod
    def failure(cls, stage_name: str, error: str, **kwargs) -> "StageResult":
        return cls(stage_name=stage_name, status=StageStatus.FAILED, error=error, **kwargs)

    @property
    def ok(self) -> bool:
        return self.status == StageStatus.SUCCESS

    @property
    def duration_seconds(self) -> float:
        if self.started_at and self.completed_at:
            return (self.completed_at - self.started_at).total_seconds()
        return 0.0

    def and_then(self, func: Callable[[str], "StageResult"]) -> "StageResult":
        """
        Chain the next stage onto a successful result

        Args:
            func: called with this result's artifact path

        Returns:
            func's result, or this result unchanged if it failed
        """
        if not self.ok:
            return self
        return func(self.artifact)

    def to_dict(self) -> dict:
        return {
            "stage": self.stage_name,
            "status": self.status.value,
            "artifact": self.artifact,
            "duration": f"{self.duration_seconds:.1f}s",
            "error": self.error,
        }


@dataclass
class ProcessOutcome:
    """Exit status and captured output of one external process"""
    returncode: int
    stdout: str = ""
    stderr: str = ""


# ============================================
# Abstract Interfaces
# ============================================
class ProcessInvoker(ABC):
    """Runs an external command and waits for it to exit"""

    @abstractmethod
    def run(
        self,
        command: str,
        args: list[str],
        cwd: str | None = None,
        stdout_path: str | None = None,
    ) -> ProcessOutcome:
        """
        Run a command synchronously

        Args:
            command: executable path
            args: command line arguments
            cwd: working directory
            stdout_path: file receiving stdout instead of capturing it

        Returns:
            ProcessOutcome

        Raises:
            OSError: the command could not be started
        """
        pass
