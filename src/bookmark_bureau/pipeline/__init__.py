"""Operation pipelines."""

from .handler import OperationHandler
from .no_pipeline import NoPipeline
from .pipeline import Pipeline, build_chain

__all__ = [
    "NoPipeline",
    "OperationHandler",
    "Pipeline",
    "build_chain",
]
