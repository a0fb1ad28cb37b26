"""
Pipeline: bracketed exposures -> calibrated, cropped, resized HDR image

Runs Merge -> Nullify -> Crop -> Resize and stops at the first failure
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from hdr_pipeline.core.interfaces import (
    PipelineArtifacts,
    ProcessInvoker,
    StageResult,
    ToolchainConfig,
)
from hdr_pipeline.core.logger import get_logger
from hdr_pipeline.core.preflight import PreflightChecker, PreflightResult
from hdr_pipeline.core.process import SubprocessInvoker
from hdr_pipeline.stages import CropFisheye, MergeExposures, NullifyExposure, ResizeImage


@dataclass
class PipelineResult:
    """Pipeline run outcome"""
    success: bool
    started_at: datetime
    completed_at: datetime | None = None
    artifact: str | None = None
    error: str | None = None
    stages: list[StageResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.success

    @property
    def duration_seconds(self) -> float:
        if self.completed_at:
            return (self.completed_at - self.started_at).total_seconds()
        return 0.0

    def get_stage(self, stage_name: str) -> StageResult | None:
        for stage in self.stages:
            if stage.stage_name == stage_name:
                return stage
        return None

    def to_summary(self) -> dict:
        return {
            "success": self.success,
            "duration": f"{self.duration_seconds:.1f}s",
            "artifact": self.artifact,
            "stages": [s.to_dict() for s in self.stages],
            "error": self.error,
        }


class HDRPipeline:
    """
    HDR generation pipeline

    Each stage reads the previous stage's file from the temp directory, so
    stages run strictly one after another. Intermediates are named
    output1.hdr .. output4.hdr and are overwritten by later runs; nothing is
    cleaned up after a failure.

    Usage:
        pipeline = HDRPipeline()
        result = pipeline.execute(
            config,
            input_images=["IMG_01.JPG", "IMG_02.JPG"],
            response_function="camera.rsp",
            diameter="3612", xleft="1019", ydown="74",
            xdim="1000", ydim="1000",
        )
        if result.success:
            print(result.artifact)
    """

    STAGES = ["Merge", "Nullify", "Crop", "Resize"]

    def __init__(
        self,
        invoker: ProcessInvoker | None = None,
        logger: Any = None,
        tools: dict[str, str] | None = None,
    ):
        """
        Args:
            invoker: runs the external tools (default: SubprocessInvoker)
            logger: log sink shared with the stages (default: loguru)
            tools: binary names keyed hdrgen/ra_xyze/pcompos/pfilt
        """
        self.logger = logger or get_logger(self.__class__.__name__)
        self.invoker = invoker or SubprocessInvoker(logger=logger)
        self.tools = tools or {}

        stage_kwargs = {"invoker": self.invoker, "logger": logger}
        self.merge = MergeExposures(tool_name=self.tools.get("hdrgen"), **stage_kwargs)
        self.nullify = NullifyExposure(tool_name=self.tools.get("ra_xyze"), **stage_kwargs)
        self.crop = CropFisheye(tool_name=self.tools.get("pcompos"), **stage_kwargs)
        self.resize = ResizeImage(tool_name=self.tools.get("pfilt"), **stage_kwargs)

    def preflight_check(self, config: ToolchainConfig) -> PreflightResult:
        """Check tool binaries and the temp directory (optional, never implicit)"""
        checker = PreflightChecker(tools=self.tools, logger=self.logger)
        return checker.run(config)

    def execute(
        self,
        config: ToolchainConfig,
        input_images: list[str],
        response_function: str,
        diameter: str,
        xleft: str,
        ydown: str,
        xdim: str,
        ydim: str,
    ) -> PipelineResult:
        """
        Run all four stages

        Args:
            config: toolchain paths
            input_images: bracketed exposures (JPEG) in order
            response_function: camera response curve (.rsp)
            diameter: fisheye diameter, numeric text
            xleft: bottom-left x of the fisheye square, numeric text
            ydown: bottom-left y of the fisheye square, numeric text
            xdim: target width, numeric text
            ydim: target height, numeric text

        Returns:
            PipelineResult with the final artifact, or the failing stage's error
        """
        result = PipelineResult(success=False, started_at=datetime.now())
        artifacts = PipelineArtifacts.in_directory(config.temp_path)

        self.logger.info("Pipeline started")
        self.logger.info(f"  radiance path: {config.radiance_path}")
        self.logger.info(f"  hdrgen path: {config.hdrgen_path}")
        self.logger.info(f"  output path: {config.output_path}")
        self.logger.info(f"  temp path: {config.temp_path}")
        self.logger.info(f"  input images: {input_images}")
        self.logger.info(f"  response function: {response_function}")
        self.logger.info(f"  geometry: diameter={diameter} xleft={xleft} ydown={ydown}")
        self.logger.info(f"  target: {xdim}x{ydim}")

        def record(stage_result: StageResult) -> StageResult:
            result.stages.append(stage_result)
            return stage_result

        final = (
            record(self.merge.execute(config, input_images, response_function, artifacts.merged))
            .and_then(lambda merged: record(
                self.nullify.execute(config, merged, artifacts.nullified)
            ))
            .and_then(lambda nullified: record(
                self.crop.execute(config, nullified, artifacts.cropped, diameter, xleft, ydown)
            ))
            .and_then(lambda cropped: record(
                self.resize.execute(config, cropped, artifacts.resized, xdim, ydim)
            ))
        )

        result.success = final.ok
        result.artifact = final.artifact
        result.error = final.error
        result.completed_at = datetime.now()

        if result.success:
            self.logger.info(f"Pipeline finished: {result.artifact} ({result.duration_seconds:.1f}s)")
        else:
            self.logger.error(f"Pipeline aborted at {final.stage_name}: {result.error}")

        return result


def run_pipeline(
    radiance_path: str,
    hdrgen_path: str,
    output_path: str,
    temp_path: str,
    input_images: list[str],
    response_function: str,
    diameter: str,
    xleft: str,
    ydown: str,
    xdim: str,
    ydim: str,
    logger: Any = None,
    invoker: ProcessInvoker | None = None,
    tools: dict[str, str] | None = None,
) -> PipelineResult:
    """
    Single entry point: build the configuration once and run the pipeline

    Returns:
        PipelineResult (success with {temp_path}/output4.hdr, or the first error)
    """
    config = ToolchainConfig(
        radiance_path=radiance_path,
        hdrgen_path=hdrgen_path,
        output_path=output_path,
        temp_path=temp_path,
    )
    pipeline = HDRPipeline(invoker=invoker, logger=logger, tools=tools)
    return pipeline.execute(
        config,
        input_images=input_images,
        response_function=response_function,
        diameter=diameter,
        xleft=xleft,
        ydown=ydown,
        xdim=xdim,
        ydim=ydim,
    )
