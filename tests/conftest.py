"""
Shared fixtures

FakeInvoker stands in for the external tools: it records every call and,
unless told to fail, writes the file the tool would have produced.
"""
import os
import sys
from pathlib import Path

import pytest

from hdr_pipeline.core.interfaces import ProcessInvoker, ProcessOutcome, ToolchainConfig


class FakeInvoker(ProcessInvoker):
    """Simulated toolchain keyed by binary name (hdrgen, ra_xyze, pcompos, pfilt)"""

    def __init__(self, outcomes: dict | None = None):
        # name -> ProcessOutcome or an exception to raise
        self.outcomes = outcomes or {}
        self.calls: list[dict] = []

    @property
    def tools_called(self) -> list[str]:
        return [os.path.basename(c["command"]) for c in self.calls]

    def run(self, command, args, cwd=None, stdout_path=None):
        tool = os.path.basename(command)
        self.calls.append(
            {"command": command, "args": list(args), "cwd": cwd, "stdout_path": stdout_path}
        )

        outcome = self.outcomes.get(tool, ProcessOutcome(returncode=0))
        if isinstance(outcome, Exception):
            raise outcome

        if outcome.returncode == 0:
            if stdout_path is not None:
                target = stdout_path
            else:
                target = args[args.index("-o") + 1]
            with open(target, "wb") as f:
                f.write(f"#?RADIANCE\n{tool}\n".encode())

        return outcome


@pytest.fixture
def fake_invoker():
    return FakeInvoker()


@pytest.fixture
def toolchain(tmp_path):
    """ToolchainConfig with a trailing-slash temp directory, like the UI defaults"""
    temp = tmp_path / "tmp"
    temp.mkdir()
    return ToolchainConfig(
        radiance_path="/usr/local/radiance/bin/",
        hdrgen_path="/usr/local/bin/",
        output_path=str(tmp_path / "output") + "/",
        temp_path=str(temp) + "/",
    )


@pytest.fixture
def exposures():
    return ["IMG_0001.JPG", "IMG_0002.JPG", "IMG_0003.JPG"]


@pytest.fixture
def temp_file(toolchain):
    """Path of a file inside the toolchain temp directory"""
    def _path(name: str) -> str:
        return os.path.join(toolchain.temp_path, name)
    return _path


# ===== fake tool scripts for end-to-end runs =====

HDRGEN_SCRIPT = """\
import sys
args = sys.argv[1:]
out = args[args.index("-o") + 1]
images = args[:args.index("-o")]
if not images:
    sys.stderr.write("hdrgen: no input images")
    sys.exit(1)
with open(out, "w") as f:
    f.write("#?RADIANCE\\nEXPOSURE=0.25\\n" + " ".join(images) + "\\n")
"""

FILTER_SCRIPT = """\
import os, sys
source = [a for a in sys.argv[1:] if os.path.isfile(a)][-1]
with open(source) as f:
    body = f.read()
sys.stdout.write(body + "{tool} " + " ".join(sys.argv[1:]) + "\\n")
"""

FAILING_SCRIPT = """\
import sys
sys.stderr.write("{tool}: cannot process input")
sys.exit(2)
"""


def write_tool(directory, name, source):
    path = directory / name
    path.write_text(f"#!{sys.executable}\n" + source)
    path.chmod(0o755)
    return path


@pytest.fixture
def fake_toolchain(tmp_path):
    """
    Directory layout with working stand-ins for hdrgen, ra_xyze, pcompos and pfilt

    Returns the ToolchainConfig pointing at them. Use break_tool() to make
    one of them exit non-zero.
    """
    radiance = tmp_path / "radiance" / "bin"
    hdrgen = tmp_path / "hdrgen"
    temp = tmp_path / "tmp"
    for d in (radiance, hdrgen, temp):
        d.mkdir(parents=True)

    write_tool(hdrgen, "hdrgen", HDRGEN_SCRIPT)
    for tool in ("ra_xyze", "pcompos", "pfilt"):
        write_tool(radiance, tool, FILTER_SCRIPT.replace("{tool}", tool))

    return ToolchainConfig(
        radiance_path=str(radiance) + "/",
        hdrgen_path=str(hdrgen) + "/",
        output_path=str(tmp_path / "output") + "/",
        temp_path=str(temp) + "/",
    )


@pytest.fixture
def break_tool():
    """Replace one fake tool with a script that exits with status 2"""
    def _break(config: ToolchainConfig, tool: str) -> None:
        root = config.hdrgen_path if tool == "hdrgen" else config.radiance_path
        write_tool(Path(root), tool, FAILING_SCRIPT.replace("{tool}", tool))
    return _break
