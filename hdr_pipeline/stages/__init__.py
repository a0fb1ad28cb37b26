"""
Stages: one external tool invocation each

Merge -> Nullify -> Crop -> Resize
"""
from hdr_pipeline.stages.base import BaseStage
from hdr_pipeline.stages.merge import MergeExposures
from hdr_pipeline.stages.nullify import NullifyExposure
from hdr_pipeline.stages.crop import CropFisheye
from hdr_pipeline.stages.resize import ResizeImage

__all__ = [
    "BaseStage",
    "MergeExposures",
    "NullifyExposure",
    "CropFisheye",
    "ResizeImage",
]
