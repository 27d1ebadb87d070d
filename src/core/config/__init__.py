"""
Pipeline configuration.
"""

from .pipeline_config import (
    ENV_OVERRIDES,
    PipelineConfig,
    PipelineConfigLoader,
    load_pipeline_config,
)

__all__ = [
    "ENV_OVERRIDES",
    "PipelineConfig",
    "PipelineConfigLoader",
    "load_pipeline_config",
]
