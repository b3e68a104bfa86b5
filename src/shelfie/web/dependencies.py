"""FastAPI dependency injection for layout services."""

from typing import Annotated

from fastapi import Depends

from shelfie.application import ComputeLayoutCommand


def get_layout_command() -> ComputeLayoutCommand:
    """Dependency for ComputeLayoutCommand."""
    return ComputeLayoutCommand()


LayoutCommandDep = Annotated[ComputeLayoutCommand, Depends(get_layout_command)]
