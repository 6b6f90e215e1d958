from __future__ import annotations
import yaml
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Dict, Any, Optional, List, Type
from pydantic import BaseModel, Field, field_validator, model_validator, ValidationError

from order_mediator.utils.enums import DEFAULT_SLOTS, WEEKDAYS

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class SlotsConfig(BaseModel):
    """Delivery slot schedule: default slots plus weekday and date overrides"""
    Default: List[str] = Field(default_factory=lambda: list(DEFAULT_SLOTS))
    Weekdays: Dict[str, List[str]] = Field(default_factory=dict)
    Dates: Dict[str, List[str]] = Field(default_factory=dict)

    @field_validator("Weekdays")
    @classmethod
    def check_weekdays(cls, value: Dict[str, List[str]]) -> Dict[str, List[str]]:
        normalised = {}
        for weekday, slots in value.items():
            key = weekday.strip().lower()
            if key not in WEEKDAYS:
                raise ValueError(f"Unknown weekday '{weekday}'")
            normalised[key] = slots
        return normalised

    @field_validator("Dates", mode="before")
    @classmethod
    def stringify_dates(cls, value: Any) -> Any:
        # yaml.safe_load turns unquoted 2025-12-31 keys into date objects
        if isinstance(value, dict):
            return {
                (key.isoformat() if isinstance(key, (date, datetime)) else key): slots
                for key, slots in value.items()
            }
        return value


class CoordinatorConfig(BaseModel):
    """Root configuration for the order-form coordinator"""
    ConsoleLevel: str = "INFO"
    FileLevel: str = "DEBUG"
    LogFile: Optional[str] = None
    ColoredConsole: bool = True
    HandleSignals: bool = False
    EnforceDeliveryLock: bool = False
    HistorySize: int = Field(default=100, ge=1)
    Slots: SlotsConfig = Field(default_factory=SlotsConfig)

    @model_validator(mode='before')
    @classmethod
    def apply_aliases(cls, data):
        """``LogLevel`` is shorthand for ``ConsoleLevel``; a bare ``Slots:`` means defaults"""
        if isinstance(data, dict):
            if "LogLevel" in data and "ConsoleLevel" not in data:
                data["ConsoleLevel"] = data["LogLevel"]
            data.pop("LogLevel", None)
            if data.get("Slots") is None:
                data["Slots"] = {}
        return data

    @field_validator("ConsoleLevel", "FileLevel")
    @classmethod
    def check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level '{value}'. Allowed: {', '.join(sorted(_LOG_LEVELS))}")
        return level


# ────────────────────────────────────────────────────────────────────────────────
# Internal helpers
# ────────────────────────────────────────────────────────────────────────────────

_VALID_SUFFIXES = {".yaml", ".yml"}
REQUIRED_SECTIONS: dict[str, Type] = {"Slots": dict}

def _load_yaml(path: Path) -> Dict[str, Any]:
    """Parse an order-form config file; an empty file yields an empty mapping."""
    try:
        with path.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
    except yaml.YAMLError as err:
        raise ValueError(f"Order-form config {path} is not valid YAML: {err}") from err
    except OSError as err:
        raise OSError(f"Cannot read order-form config {path}: {err}") from err
    if not isinstance(data, dict):
        raise TypeError(f"Order-form config {path} must be a mapping of settings, got {type(data).__name__}")
    return data


def _validate_sections(cfg: dict[str, Any], required: dict[str, Type]) -> None:
    """Check the sections an order-form config cannot do without."""
    for section, expected in required.items():
        if section not in cfg:
            raise KeyError(f"Order-form config has no '{section}' section")
        if not isinstance(cfg[section], expected):
            raise TypeError(
                f"Order-form config section '{section}' must be a {expected.__name__}, "
                f"got {type(cfg[section]).__name__}"
            )

# ────────────────────────────────────────────────────────────────────────────────
# Public API
# ────────────────────────────────────────────────────────────────────────────────

def read_config(path: str | Path, logger: logging.Logger) -> CoordinatorConfig:
    """
    Load a YAML configuration file and return a validated `CoordinatorConfig`.

    Parameters
    ----------
    path : str | Path
        Location of the YAML file (.yaml | .yml).
    logger : logging.Logger
        Logger instance for diagnostics.

    Raises
    ------
    (ValueError, FileNotFoundError, TypeError, KeyError, ValidationError)
        Forwarded exceptions give precise failure causes.
    """
    p = Path(path)

    if p.suffix not in _VALID_SUFFIXES:
        raise ValueError("Config file must have a .yaml or .yml extension")
    if not p.is_file():
        raise FileNotFoundError(p)

    logger.debug(f"Loading configuration from {p}")
    raw_cfg = _load_yaml(p)
    _validate_sections(raw_cfg, REQUIRED_SECTIONS)

    try:
        cfg = CoordinatorConfig(**raw_cfg)
    except ValidationError as err:
        logger.error("Configuration file failed schema validation: %s", err)
        raise

    logger.info(f"Configuration loaded successfully: {p.name}")
    return cfg


def create_default_config(logger: logging.Logger) -> CoordinatorConfig:
    """
    Create the built-in configuration used when no config file is provided:
    the same three slots for every day and no delivery lock.
    """
    logger.info("Creating default coordinator configuration")
    default_config = {
        "ConsoleLevel": "INFO",
        "FileLevel": "DEBUG",
        "EnforceDeliveryLock": False,
        "HistorySize": 100,
        "Slots": {
            "Default": list(DEFAULT_SLOTS),
            "Weekdays": {},
            "Dates": {},
        },
    }

    try:
        return CoordinatorConfig(**default_config)
    except ValidationError as e:
        logger.error(f"Failed to create default configuration: {e}")
        raise ValueError(f"Failed to create default configuration: {e}") from e
