"""
Utilities for the order-form coordinator: configuration, enums, helpers and
logging.
"""

# Configuration management
from .config import read_config, create_default_config, CoordinatorConfig, SlotsConfig

# Enums and constants
from .enums import (
    ComponentKind,
    CoordinatorStatus,
    DEFAULT_SLOTS,
    Event,
    Observation,
    WEEKDAYS,
)

# Helper functions
from .helpers import format_snapshot, parse_date, require_bool, validate_slots

# Logging utilities
from .logger import ThreadLogger, create_console_handler, create_file_handler

__all__ = [
    # Configuration
    "read_config",
    "create_default_config",
    "CoordinatorConfig",
    "SlotsConfig",

    # Enums
    "ComponentKind",
    "CoordinatorStatus",
    "DEFAULT_SLOTS",
    "Event",
    "Observation",
    "WEEKDAYS",

    # Helper functions
    "format_snapshot",
    "parse_date",
    "require_bool",
    "validate_slots",

    # Logging
    "ThreadLogger",
    "create_console_handler",
    "create_file_handler",
]
