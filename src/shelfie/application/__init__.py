"""Application layer - use cases and orchestration."""

from .commands import ComputeLayoutCommand
from .dtos import LayoutOutput

__all__ = [
    "ComputeLayoutCommand",
    "LayoutOutput",
]
