"""Validation structures and shelf layout advisory checks.

This module provides validation result structures and the checks run by
``shelfie validate``: blocking errors for layout parameters the engine
would reject, and advisories for items and parameters that will lay out
but probably not the way the author intended.
"""

from dataclasses import dataclass, field
from statistics import median
from typing import Any

from shelfie.application.config.adapter import (
    config_to_items,
    config_to_layout_config,
    overrides_to_dict,
    resolve_layout_config,
)
from shelfie.application.config.schema import ShelfConfiguration
from shelfie.domain.services.presentation import GAP_SHARE
from shelfie.domain.value_objects import LayoutConfig, PhysicalItem


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Validation errors indicate configuration issues that must be fixed
    before a layout can be computed.

    Attributes:
        path: JSON path to the invalid field (e.g., "breakpoints[0].layout")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    The configuration can still be laid out, but some items may be
    excluded, clamped or overflow their row.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        """Check if the configuration has any warnings."""
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_layout_parameters(config: ShelfConfiguration) -> ValidationResult:
    """Check the base layout and every breakpoint's effective layout.

    Breakpoint overrides are validated field by field by the schema, but a
    combination (e.g. a ``spine_ratio_min`` override above the base
    ``spine_ratio_max``) only shows up once merged.
    """
    result = ValidationResult()
    base = config_to_layout_config(config)

    for message in base.validate():
        result.add_error(path="layout", message=message)

    for i, breakpoint in enumerate(config.breakpoints):
        effective = base.with_overrides(**overrides_to_dict(breakpoint.layout))
        for message in effective.validate():
            result.add_error(
                path=f"breakpoints[{i}].layout",
                message=message,
                value=breakpoint.max_width,
            )

    if base.jitter_x > base.gutter_x / 2:
        result.add_warning(
            path="layout.jitter_x",
            message=(
                f"jitter_x of {base.jitter_x:g} exceeds half of gutter_x "
                f"({base.gutter_x:g}); offsets are clamped to {GAP_SHARE:.0%} "
                "of the gap"
            ),
            suggestion=f"Use jitter_x <= {base.gutter_x / 2:g}",
        )

    return result


def check_item_advisories(config: ShelfConfiguration) -> ValidationResult:
    """Check items for problems the engine reports or works around.

    Advisories checked:
    - Dimension strings that cannot be parsed
    - Non-positive or non-finite dimensions
    - Duplicate ids (later items are dropped)
    - Heights outside ``max_height_ratio`` of the median (will be clamped)
    - A fixed ``row_count`` larger than the number of items
    """
    result = ValidationResult()
    layout = config_to_layout_config(config)
    conversion = config_to_items(config)

    for warning in conversion.warnings:
        result.add_warning(
            path=f"items[{warning.index}].dimensions",
            message=warning.reason,
            suggestion='Write dimensions like "13 x 20 x 2 cm"',
        )

    seen: set[str] = set()
    valid: list[tuple[int, PhysicalItem]] = []
    for item, index in zip(conversion.items, conversion.source_indices):
        errors = item.validation_errors()
        if errors:
            result.add_warning(
                path=f"items[{index}]",
                message=f"Item '{item.id}' will be excluded: {'; '.join(errors)}",
            )
            continue
        if item.id in seen:
            result.add_warning(
                path=f"items[{index}].id",
                message=f"Duplicate item id '{item.id}'; only the first is laid out",
            )
            continue
        seen.add(item.id)
        valid.append((index, item))

    if valid:
        reference = median(item.height for _, item in valid)
        ratio = layout.max_height_ratio
        for index, item in valid:
            if item.height > reference * ratio or item.height < reference / ratio:
                result.add_warning(
                    path=f"items[{index}].height",
                    message=(
                        f"Item '{item.id}' height {item.height:g}mm is more than "
                        f"{ratio:g}x away from the median {reference:g}mm "
                        "and will be clamped"
                    ),
                    suggestion="Raise layout.max_height_ratio to keep it to scale",
                )

    if layout.row_count is not None and layout.row_count > len(valid):
        result.add_warning(
            path="layout.row_count",
            message=(
                f"row_count {layout.row_count} exceeds the {len(valid)} valid "
                "items; fewer rows will be produced"
            ),
        )

    return result


def check_container_advisories(
    config: ShelfConfiguration, layout: LayoutConfig | None = None
) -> ValidationResult:
    """Check items against the configured container width.

    An item whose projected width at ``target_row_height`` is wider than the
    container gets a row of its own and overflows it. Unless ``layout`` is
    given, the parameters of the breakpoint matching ``container_width``
    are used.
    """
    result = ValidationResult()
    if config.container_width is None:
        result.add_warning(
            path="container_width",
            message="No container_width set; it must be given when laying out",
            suggestion="Pass --width to 'shelfie layout'",
        )
        return result

    if layout is None:
        layout, _ = resolve_layout_config(config, config.container_width)
    conversion = config_to_items(config)
    for item, index in zip(conversion.items, conversion.source_indices):
        if not item.is_valid:
            continue
        projected = item.aspect_ratio * layout.target_row_height
        if projected > config.container_width:
            result.add_warning(
                path=f"items[{index}]",
                message=(
                    f"Item '{item.id}' is {projected:.0f}px wide at the target "
                    f"row height, wider than the {config.container_width:g}px "
                    "container"
                ),
                suggestion="Lower layout.target_row_height",
            )
    return result


def validate_config(config: ShelfConfiguration) -> ValidationResult:
    """Perform full validation of a shelf configuration.

    Schema validation has already happened when ``config`` was built; this
    runs the semantic checks on top of it.

    Args:
        config: A validated ShelfConfiguration instance

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    result.merge(check_layout_parameters(config))
    if not result.is_valid:
        return result

    result.merge(check_item_advisories(config))
    result.merge(check_container_advisories(config))
    return result
