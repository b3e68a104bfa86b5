"""Configuration schema and loading system for shelf layouts.

This package provides JSON-based configuration loading and validation
for shelf layouts. It includes Pydantic models for schema validation, a
configuration loader with comprehensive error handling, CLI override
merging and layout advisory checks.

Public API:
    - ShelfConfiguration: Root configuration model
    - LayoutConfigSchema: Base layout parameters
    - LayoutOverridesSchema: Partial layout parameters for breakpoints
    - BreakpointConfig: Responsive overrides for narrow containers
    - ItemConfig: One catalog item
    - UnitConfig: Unit enum for numeric item dimensions
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply command-line overrides
    - ValidationResult: Container for validation results
    - ValidationError: Blocking validation error
    - ValidationWarning: Non-blocking validation warning
    - validate_config: Perform full configuration validation
    - config_to_items: Convert configured items to domain items
    - resolve_layout_config: Effective layout parameters for a width

Example:
    >>> from pathlib import Path
    >>> from shelfie.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-shelf.json"))
    ...     print(f"{len(config.items)} items")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from shelfie.application.config.adapter import (
    ItemConversion,
    config_to_items,
    config_to_layout_config,
    resolve_layout_config,
    select_breakpoint,
)
from shelfie.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from shelfie.application.config.merger import merge_config_with_cli
from shelfie.application.config.schema import (
    SUPPORTED_VERSIONS,
    BreakpointConfig,
    ItemConfig,
    LayoutConfigSchema,
    LayoutOverridesSchema,
    ShelfConfiguration,
    UnitConfig,
)
from shelfie.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "BreakpointConfig",
    "ConfigError",
    "ItemConfig",
    "ItemConversion",
    "LayoutConfigSchema",
    "LayoutOverridesSchema",
    "ShelfConfiguration",
    "UnitConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_items",
    "config_to_layout_config",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "resolve_layout_config",
    "select_breakpoint",
    "validate_config",
]
