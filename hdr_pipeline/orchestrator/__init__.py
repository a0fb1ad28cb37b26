"""
Orchestrator: runs the stages in order and threads file paths between them
"""
from hdr_pipeline.orchestrator.pipeline import HDRPipeline, PipelineResult, run_pipeline

__all__ = [
    "HDRPipeline",
    "PipelineResult",
    "run_pipeline",
]
