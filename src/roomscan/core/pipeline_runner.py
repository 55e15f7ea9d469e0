"""Pipeline orchestrator: reads pipeline.yaml and executes steps in order."""

from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel

from .contracts import PipelineConfig, StepEntry
from .step_base import BaseStep

logger = logging.getLogger(__name__)


def load_pipeline_config(config_path: Path) -> PipelineConfig:
    """Load and validate pipeline.yaml."""
    with open(config_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return PipelineConfig(**raw)


def load_step_config(config_path: Optional[Path], config_class: type[BaseModel]) -> BaseModel:
    """Load a step-specific YAML config into its Pydantic model.

    A missing ``config_path`` (None) yields the model defaults.
    """
    if config_path is None:
        return config_class()
    with open(config_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return config_class(**raw)


def import_step_class(module_path: str) -> type[BaseStep]:
    """Dynamically import a step class from its module path.

    Expects module_path like 'roomscan.steps.s01_room_export'
    and looks for a class ending in 'Step' in that module's step.py.
    """
    step_module = importlib.import_module(f"{module_path}.step")
    for attr_name in dir(step_module):
        attr = getattr(step_module, attr_name)
        if (
            isinstance(attr, type)
            and hasattr(attr, "run")
            and attr_name.endswith("Step")
            and attr_name != "BaseStep"
        ):
            return attr
    raise ImportError(f"No Step class found in {module_path}.step")


def build_step(entry: StepEntry, data_root: Path) -> BaseStep:
    """Instantiate the step class of a pipeline entry with its config."""
    step_cls = import_step_class(entry.module)
    config_path = Path(entry.config_file) if entry.config_file else None
    step_config = load_step_config(config_path, step_cls.config_type)
    return step_cls(config=step_config, data_root=data_root)


def run_pipeline(config_path: Path) -> dict[str, BaseModel]:
    """Execute the full pipeline from a config file. Returns outputs keyed by step name."""
    pipeline_cfg = load_pipeline_config(config_path)
    data_root = pipeline_cfg.data_root
    results: dict[str, BaseModel] = {}

    enabled_steps = [s for s in pipeline_cfg.steps if s.enabled]
    logger.info(f"Pipeline '{pipeline_cfg.project_name}' with {len(enabled_steps)} steps")

    for entry in enabled_steps:
        logger.info(f"--- Step: {entry.name} ---")

        step_instance = build_step(entry, data_root)
        step_cls = type(step_instance)

        # Static inputs first, then previous step outputs
        input_data = dict(entry.inputs)
        for dep in entry.depends_on:
            if dep not in results:
                raise ValueError(
                    f"Step '{entry.name}' depends on '{dep}', which has not run"
                )
            input_data.update(results[dep].model_dump())

        step_input = step_cls.input_type(**input_data)
        output = step_instance.execute(step_input)
        results[entry.name] = output

    logger.info("Pipeline complete.")
    return results
