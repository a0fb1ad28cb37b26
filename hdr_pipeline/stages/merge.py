"""
Merge stage: bracketed exposures -> one HDR image (hdrgen)
"""
from hdr_pipeline.core.interfaces import StageResult, ToolchainConfig
from hdr_pipeline.stages.base import BaseStage


class MergeExposures(BaseStage):
    """
    Merge bracketed exposures with a camera response function

    The merged file encodes absolute radiance. Alignment, exposure
    adjustment, flare removal and ghost removal are all turned off.

    Usage:
        stage = MergeExposures()
        result = stage.execute(config, ["a.jpg", "b.jpg"], "camera.rsp", "/tmp/output1.hdr")
    """

    name = "Merge"
    default_tool = "hdrgen"
    writes_stdout = False

    # -a alignment, -e exposure adjustment, -f flare removal, -g ghost removal
    DISABLED_CORRECTIONS = ["-a", "-e", "-f", "-g"]

    def tool_root(self, config: ToolchainConfig) -> str:
        return config.hdrgen_path

    def execute(
        self,
        config: ToolchainConfig,
        input_images: list[str],
        response_function: str,
        output_path: str,
    ) -> StageResult:
        """
        Args:
            config: toolchain paths
            input_images: exposure paths in bracket order, passed unchecked
            response_function: .rsp calibration curve
            output_path: merged HDR file

        Returns:
            StageResult carrying output_path on success
        """
        def build_args() -> list[str]:
            return [
                *input_images,
                "-o", output_path,
                "-r", response_function,
                *self.DISABLED_CORRECTIONS,
            ]

        return self._run_stage(config, output_path, build_args)
