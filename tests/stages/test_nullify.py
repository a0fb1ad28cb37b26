"""
Nullify stage tests
"""
import os

from hdr_pipeline.core.interfaces import ProcessOutcome
from hdr_pipeline.stages import NullifyExposure


class TestNullifyExposure:
    """NullifyExposure tests"""

    def test_writes_new_file(self, fake_invoker, toolchain, temp_file):
        source = os.path.join(toolchain.temp_path, "output1.hdr")
        target = os.path.join(toolchain.temp_path, "output2.hdr")
        with open(source, "wb") as f:
            f.write(b"merged")

        result = NullifyExposure(invoker=fake_invoker).execute(toolchain, source, target)

        assert result.ok
        assert result.artifact == target
        call = fake_invoker.calls[0]
        assert call["command"] == "/usr/local/radiance/bin/ra_xyze"
        assert call["args"] == ["-r", "-o", source]
        assert call["stdout_path"] == target
        # input left alone
        with open(source, "rb") as f:
            assert f.read() == b"merged"
        assert os.path.exists(target)

    def test_tool_failure(self, fake_invoker, toolchain, temp_file):
        fake_invoker.outcomes["ra_xyze"] = ProcessOutcome(returncode=1, stderr="ra_xyze: bad picture format")

        result = NullifyExposure(invoker=fake_invoker).execute(toolchain, "in.hdr", temp_file("out.hdr"))

        assert not result.ok
        assert result.error == "[Nullify] ra_xyze exited with status 1: ra_xyze: bad picture format"

    def test_permission_denied(self, fake_invoker, toolchain, temp_file):
        fake_invoker.outcomes["ra_xyze"] = PermissionError(13, "Permission denied")

        result = NullifyExposure(invoker=fake_invoker).execute(toolchain, "in.hdr", temp_file("out.hdr"))

        assert not result.ok
        assert "Permission denied" in result.error

    def test_unwritable_output(self, fake_invoker, toolchain):
        """An output that cannot be created is reported as such, not as a spawn failure"""
        target = os.path.join(toolchain.temp_path, "missing", "output2.hdr")

        result = NullifyExposure(invoker=fake_invoker).execute(toolchain, "in.hdr", target)

        assert not result.ok
        assert result.error.startswith(f"[Nullify] cannot write {target}:")
        assert "could not run" not in result.error
        assert fake_invoker.calls == []
