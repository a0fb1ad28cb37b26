"""
Crop stage: cut the square around the fisheye view (pcompos)
"""
from hdr_pipeline.core.interfaces import StageResult, ToolchainConfig
from hdr_pipeline.stages.base import BaseStage


class CropFisheye(BaseStage):
    """
    Extract the square circumscribing the fisheye circle

    Geometry arrives as text and is parsed here, so a bad value only fails
    once the merge and nullify stages have run.

    Usage:
        stage = CropFisheye()
        result = stage.execute(config, "/tmp/output2.hdr", "/tmp/output3.hdr",
                               diameter="3612", xleft="1019", ydown="74")
    """

    name = "Crop"
    default_tool = "pcompos"

    def tool_root(self, config: ToolchainConfig) -> str:
        return config.radiance_path

    def execute(
        self,
        config: ToolchainConfig,
        input_path: str,
        output_path: str,
        diameter: str,
        xleft: str,
        ydown: str,
    ) -> StageResult:
        """
        Args:
            config: toolchain paths
            input_path: nullified HDR file
            output_path: cropped HDR file
            diameter: fisheye diameter in pixels
            xleft: x of the square's bottom-left corner in pixels
            ydown: y of the square's bottom-left corner in pixels

        Returns:
            StageResult carrying output_path on success
        """
        def build_args() -> list[str]:
            size = self.parse_number("diameter", diameter)
            x = self.parse_number("xleft", xleft)
            y = self.parse_number("ydown", ydown)
            # the image is placed at (-x, -y) on a d x d canvas anchored bottom-left
            return [
                "-x", str(size),
                "-y", str(size),
                "=-+",
                input_path,
                str(-x),
                str(-y),
            ]

        return self._run_stage(config, output_path, build_args)
