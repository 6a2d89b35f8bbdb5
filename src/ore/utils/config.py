"""Settings from the optional user configuration file (~/.ore/config.json)."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from ore.models.config import OreConfig

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".ore"
CONFIG_FILE = CONFIG_DIR / "config.json"


@lru_cache(maxsize=1)
def load_config() -> OreConfig:
    """Parse the configuration file once and cache the result.

    A missing file gives the defaults. So does a file that cannot be read,
    is not JSON, or holds a value of the wrong type, after a debug log line.
    """
    try:
        data = json.loads(CONFIG_FILE.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return OreConfig()
    except (OSError, ValueError) as e:
        logger.debug("Ignoring unreadable config %s: %s", CONFIG_FILE, e)
        return OreConfig()

    try:
        return OreConfig.model_validate(data)
    except ValidationError as e:
        logger.debug("Ignoring invalid config %s: %s", CONFIG_FILE, e)
        return OreConfig()


def get_max_file_size() -> int:
    """Default read ceiling for the CLI, from config or the built-in 1 MiB."""
    return load_config().max_file_size


def reload_config() -> None:
    """Drop the cached settings so the next access re-reads the file."""
    load_config.cache_clear()
