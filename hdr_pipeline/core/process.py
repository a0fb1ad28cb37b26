"""
subprocess-backed process invoker
"""
import os
import subprocess

from hdr_pipeline.core.interfaces import ProcessInvoker, ProcessOutcome
from hdr_pipeline.core.logger import get_logger


class SubprocessInvoker(ProcessInvoker):
    """
    Runs tools with subprocess.run

    There is no timeout: a tool that never exits blocks the caller.

    Usage:
        invoker = SubprocessInvoker()
        outcome = invoker.run("/usr/local/radiance/bin/pfilt",
                              ["-1", "-x", "1000", "-y", "1000", "in.hdr"],
                              stdout_path="out.hdr")
    """

    def __init__(self, logger=None):
        self.logger = logger or get_logger(self.__class__.__name__)

    def run(
        self,
        command: str,
        args: list[str],
        cwd: str | None = None,
        stdout_path: str | None = None,
    ) -> ProcessOutcome:
        argv = [os.fspath(command), *(os.fspath(arg) for arg in args)]
        self.logger.debug(f"exec: {' '.join(argv)}")

        if stdout_path is None:
            result = subprocess.run(argv, cwd=cwd, capture_output=True)
            return ProcessOutcome(
                returncode=result.returncode,
                stdout=result.stdout.decode("utf-8", errors="replace"),
                stderr=result.stderr.decode("utf-8", errors="replace"),
            )

        # HDR rasters go straight to disk
        with open(stdout_path, "wb") as out:
            result = subprocess.run(argv, cwd=cwd, stdout=out, stderr=subprocess.PIPE)

        return ProcessOutcome(
            returncode=result.returncode,
            stderr=result.stderr.decode("utf-8", errors="replace"),
        )
