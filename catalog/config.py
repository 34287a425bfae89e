"""Configuration — frozen dataclass from an optional YAML file plus env vars."""

import logging
import os
from dataclasses import dataclass

import yaml

from catalog.store import INITIAL_CAPACITY

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    delimiter: str = "\t"
    encoding: str = "utf-8"
    initial_capacity: int = INITIAL_CAPACITY
    log_level: str = "WARNING"


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(yaml_data: dict | None = None) -> Config:
    """Build Config from YAML data, overridden by MOVIES_* environment variables."""
    yaml_data = yaml_data or {}

    delimiter = os.environ.get("MOVIES_DELIMITER", yaml_data.get("delimiter", Config.delimiter))
    encoding = os.environ.get("MOVIES_ENCODING", yaml_data.get("encoding", Config.encoding))
    initial_capacity = int(
        os.environ.get("MOVIES_INITIAL_CAPACITY",
                       yaml_data.get("initial_capacity", Config.initial_capacity))
    )
    log_level = str(
        os.environ.get("MOVIES_LOG_LEVEL", yaml_data.get("log_level", Config.log_level))
    ).upper()

    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    if initial_capacity < 1:
        raise ValueError(f"initial_capacity must be >= 1, got {initial_capacity}")
    if log_level not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    return Config(
        delimiter=delimiter,
        encoding=encoding,
        initial_capacity=initial_capacity,
        log_level=log_level,
    )
