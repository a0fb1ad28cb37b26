"""
hdr-pipeline

Bracketed exposures -> radiometrically calibrated HDR image, by chaining
hdrgen, ra_xyze, pcompos and pfilt
"""
from hdr_pipeline.core.interfaces import StageResult, StageStatus, ToolchainConfig
from hdr_pipeline.orchestrator import HDRPipeline, PipelineResult, run_pipeline

__version__ = "0.1.0"

__all__ = [
    "HDRPipeline",
    "PipelineResult",
    "StageResult",
    "StageStatus",
    "ToolchainConfig",
    "run_pipeline",
]
