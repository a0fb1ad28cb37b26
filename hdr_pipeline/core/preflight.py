"""
Preflight check module

Verifies the toolchain before a run
- hdrgen, ra_xyze, pcompos and pfilt exist and are executable
- the temp directory exists and is writable
"""
import os
from dataclasses import dataclass, field

from hdr_pipeline.core.interfaces import ToolchainConfig
from hdr_pipeline.core.logger import get_logger


@dataclass
class PreflightResult:
    """Preflight outcome"""
    passed: bool
    tools: dict[str, dict] = field(default_factory=dict)
    temp_dir: dict = field(default_factory=dict)

    @property
    def tools_ok(self) -> bool:
        return all(t.get("available", False) for t in self.tools.values())

    @property
    def temp_dir_ok(self) -> bool:
        return self.temp_dir.get("available", False)

    def get_failures(self) -> list[str]:
        """Every failed check (all are required)"""
        failures = []
        for name, status in self.tools.items():
            if not status.get("available"):
                failures.append(f"{name}: {status.get('error', 'Unknown')}")
        if not self.temp_dir.get("available"):
            failures.append(f"Temp dir: {self.temp_dir.get('error', 'Unknown')}")
        return failures

    def summary(self) -> str:
        lines = [f"Preflight: {'PASSED' if self.passed else 'FAILED'}"]
        for name, status in self.tools.items():
            lines.append(f"  {name}: {'OK' if status.get('available') else 'FAIL'}")
            if status.get("path"):
                lines.append(f"    Path: {status['path']}")
        lines.append(f"  Temp dir: {'OK' if self.temp_dir.get('available') else 'FAIL'}")
        return "\n".join(lines)


class PreflightChecker:
    """
    Preflight checker

    Usage:
        checker = PreflightChecker()
        result = checker.run(config)

        if not result.passed:
            print("Preflight failed:", result.get_failures())
    """

    DEFAULT_TOOLS = {
        "hdrgen": "hdrgen",
        "ra_xyze": "ra_xyze",
        "pcompos": "pcompos",
        "pfilt": "pfilt",
    }

    def __init__(self, tools: dict[str, str] | None = None, logger=None):
        self.logger = logger or get_logger(self.__class__.__name__)
        self.tools = {**self.DEFAULT_TOOLS, **(tools or {})}

    def check_tool(self, path: str) -> dict:
        if not os.path.isfile(path):
            return {"available": False, "path": path, "error": "not found"}
        if not os.access(path, os.X_OK):
            return {"available": False, "path": path, "error": "not executable"}
        return {"available": True, "path": path}

    def check_temp_dir(self, path: str) -> dict:
        if not os.path.isdir(path):
            return {"available": False, "path": path, "error": "directory does not exist"}
        if not os.access(path, os.W_OK):
            return {"available": False, "path": path, "error": "not writable"}
        return {"available": True, "path": path}

    def run(self, config: ToolchainConfig) -> PreflightResult:
        """
        Run every check

        Args:
            config: toolchain paths to verify

        Returns:
            PreflightResult
        """
        roots = {
            "hdrgen": config.hdrgen_path,
            "ra_xyze": config.radiance_path,
            "pcompos": config.radiance_path,
            "pfilt": config.radiance_path,
        }

        tools = {
            name: self.check_tool(os.path.join(roots[name], binary))
            for name, binary in self.tools.items()
        }
        temp_dir = self.check_temp_dir(config.temp_path)

        result = PreflightResult(
            passed=all(t["available"] for t in tools.values()) and temp_dir["available"],
            tools=tools,
            temp_dir=temp_dir,
        )

        if result.passed:
            self.logger.info("Preflight passed")
        else:
            self.logger.warning(f"Preflight failed: {result.get_failures()}")
        return result
