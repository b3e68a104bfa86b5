"""Application commands (use cases) for shelf layout."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable

from shelfie.application.config.adapter import config_to_items, resolve_layout_config
from shelfie.application.config.schema import ShelfConfiguration
from shelfie.domain import LayoutConfig, LayoutResult, ShelfLayoutEngine

from .dtos import LayoutOutput

logger = logging.getLogger(__name__)


class ComputeLayoutCommand:
    """Command to lay out the items of a shelf configuration.

    Resolves the breakpoint for the container width, converts configured
    items to millimetres and runs the layout engine. Item indices in the
    returned warnings always refer to positions in the configuration file.
    """

    def __init__(
        self,
        engine_factory: Callable[[LayoutConfig], ShelfLayoutEngine] | None = None,
    ) -> None:
        self.engine_factory = engine_factory or ShelfLayoutEngine

    def execute(
        self,
        config: ShelfConfiguration,
        container_width: float | None = None,
    ) -> LayoutOutput:
        """Execute the layout command.

        Args:
            config: Validated shelf configuration.
            container_width: Width to lay out for; falls back to the
                configuration's ``container_width``.

        Returns:
            LayoutOutput with the computed layout, or with ``errors`` set if
            no width is known or the effective parameters are unusable.
        """
        width = container_width if container_width is not None else config.container_width
        titles = {item.id: item.title for item in config.items if item.title}

        if width is None:
            return LayoutOutput(
                result=LayoutResult(),
                layout_config=resolve_layout_config(config, None)[0],
                titles=titles,
                errors=[
                    "No container width: set container_width in the "
                    "configuration or pass one explicitly"
                ],
            )

        layout_config, breakpoint = resolve_layout_config(config, width)
        conversion = config_to_items(config)
        result = self.engine_factory(layout_config).compute(conversion.items, width)

        item_warnings = [conversion.remap(w) for w in result.item_warnings]
        item_warnings.extend(conversion.warnings)
        item_warnings.sort(key=lambda w: w.index)
        result = replace(result, item_warnings=tuple(item_warnings))

        if item_warnings:
            logger.info("%d configured items excluded", len(item_warnings))

        return LayoutOutput(
            result=result,
            layout_config=layout_config,
            container_width=width,
            breakpoint_width=breakpoint.max_width if breakpoint else None,
            titles=titles,
            errors=list(result.config_errors),
        )
