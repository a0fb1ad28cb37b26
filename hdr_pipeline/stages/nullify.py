"""
Nullify stage: reset the exposure multiplier to 1.0 (ra_xyze)
"""
from hdr_pipeline.core.interfaces import StageResult, ToolchainConfig
from hdr_pipeline.stages.base import BaseStage


class NullifyExposure(BaseStage):
    """Rewrites the EXPOSURE header so pixel values read as radiance"""

    name = "Nullify"
    default_tool = "ra_xyze"

    def tool_root(self, config: ToolchainConfig) -> str:
        return config.radiance_path

    def execute(self, config: ToolchainConfig, input_path: str, output_path: str) -> StageResult:
        # -r keeps RGB output, -o writes values with EXPOSURE reset to 1
        return self._run_stage(config, output_path, lambda: ["-r", "-o", input_path])
