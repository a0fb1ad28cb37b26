"""
Resize stage: resample to the target resolution (pfilt)
"""
from hdr_pipeline.core.interfaces import StageResult, ToolchainConfig
from hdr_pipeline.stages.base import BaseStage


class ResizeImage(BaseStage):
    """Resample the cropped image to xdim x ydim pixels"""

    name = "Resize"
    default_tool = "pfilt"

    def tool_root(self, config: ToolchainConfig) -> str:
        return config.radiance_path

    def execute(
        self,
        config: ToolchainConfig,
        input_path: str,
        output_path: str,
        xdim: str,
        ydim: str,
    ) -> StageResult:
        def build_args() -> list[str]:
            width = self.parse_number("xdim", xdim)
            height = self.parse_number("ydim", ydim)
            # -1 single pass, no exposure change
            return ["-1", "-x", str(width), "-y", str(height), input_path]

        return self._run_stage(config, output_path, build_args)
