"""roomscan core: pipeline runner, base step, shared contracts."""

from .step_base import BaseStep
from .contracts import (
    CapturedObject,
    CapturedRoom,
    CapturedSurface,
    PipelineConfig,
    StepEntry,
    Transform,
)
from .pipeline_runner import run_pipeline, load_pipeline_config
from .logging import setup_logging

__all__ = [
    "BaseStep",
    "PipelineConfig",
    "StepEntry",
    "Transform",
    "CapturedSurface",
    "CapturedObject",
    "CapturedRoom",
    "run_pipeline",
    "load_pipeline_config",
    "setup_logging",
]
