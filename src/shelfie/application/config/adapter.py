"""Conversion from configuration models to domain objects.

Bridges the Pydantic configuration schema and the layout engine's value
objects: breakpoint resolution, unit conversion and dimension parsing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from shelfie.application.config.schema import (
    BreakpointConfig,
    ItemConfig,
    LayoutOverridesSchema,
    ShelfConfiguration,
)
from shelfie.domain.services.dimensions import (
    MM_PER_UNIT,
    DimensionParseError,
    parse_dimensions,
)
from shelfie.domain.value_objects import ItemWarning, LayoutConfig, PhysicalItem

logger = logging.getLogger(__name__)

__all__ = [
    "ItemConversion",
    "config_to_items",
    "config_to_layout_config",
    "overrides_to_dict",
    "resolve_layout_config",
    "select_breakpoint",
]


@dataclass
class ItemConversion:
    """Items converted from a configuration file.

    Attributes:
        items: Physical items in file order, unparseable ones left out.
        source_indices: For each converted item, its index in the file.
        warnings: Items whose dimension strings could not be parsed.
    """

    items: list[PhysicalItem] = field(default_factory=list)
    source_indices: list[int] = field(default_factory=list)
    warnings: list[ItemWarning] = field(default_factory=list)

    def remap(self, warning: ItemWarning) -> ItemWarning:
        """Rewrite an engine warning's index to the item's file index."""
        return ItemWarning(
            item_id=warning.item_id,
            index=self.source_indices[warning.index],
            reason=warning.reason,
        )


def config_to_layout_config(config: ShelfConfiguration) -> LayoutConfig:
    """Convert the base layout section to a LayoutConfig."""
    return LayoutConfig(**config.layout.model_dump())


def overrides_to_dict(overrides: LayoutOverridesSchema) -> dict:
    """Return only the fields a breakpoint actually sets."""
    return overrides.model_dump(exclude_none=True)


def select_breakpoint(
    breakpoints: list[BreakpointConfig], container_width: float
) -> BreakpointConfig | None:
    """Pick the narrowest breakpoint that still covers ``container_width``.

    Args:
        breakpoints: Breakpoints in any order.
        container_width: Current container width.

    Returns:
        The breakpoint with the smallest ``max_width >= container_width``,
        or None if the container is wider than all of them.
    """
    candidates = [bp for bp in breakpoints if bp.max_width >= container_width]
    if not candidates:
        return None
    return min(candidates, key=lambda bp: bp.max_width)


def resolve_layout_config(
    config: ShelfConfiguration, container_width: float | None
) -> tuple[LayoutConfig, BreakpointConfig | None]:
    """Build the effective LayoutConfig for a container width.

    Args:
        config: Validated configuration.
        container_width: Width being laid out; None skips breakpoints.

    Returns:
        Tuple of (effective layout config, breakpoint applied or None).
    """
    base = config_to_layout_config(config)
    if container_width is None:
        return base, None

    breakpoint = select_breakpoint(config.breakpoints, container_width)
    if breakpoint is None:
        return base, None

    logger.debug(
        "Container width %.1f uses breakpoint max_width=%.1f",
        container_width,
        breakpoint.max_width,
    )
    return base.with_overrides(**overrides_to_dict(breakpoint.layout)), breakpoint


def _item_config_to_domain(item: ItemConfig, unit_factor: float) -> PhysicalItem:
    """Convert one item config, parsing its dimension string if present."""
    if item.dimensions is not None:
        return parse_dimensions(item.dimensions).to_item(item.id)
    return PhysicalItem(
        id=item.id,
        width=item.width * unit_factor,
        height=item.height * unit_factor,
        spine=item.spine * unit_factor,
    )


def config_to_items(config: ShelfConfiguration) -> ItemConversion:
    """Convert configured items to physical items in millimetres.

    Items whose dimension string cannot be parsed are reported in
    ``warnings`` and left out; all numeric items are passed through so the
    engine can judge them.
    """
    unit_factor = MM_PER_UNIT[config.unit.value]
    result = ItemConversion()
    for index, item in enumerate(config.items):
        try:
            physical = _item_config_to_domain(item, unit_factor)
        except DimensionParseError as e:
            logger.warning("Excluding item %r: %s", item.id, e)
            result.warnings.append(
                ItemWarning(item_id=item.id, index=index, reason=str(e))
            )
            continue
        result.items.append(physical)
        result.source_indices.append(index)
    return result
