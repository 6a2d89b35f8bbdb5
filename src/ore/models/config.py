"""Pydantic model for the user configuration file."""

from pydantic import BaseModel, ConfigDict, Field

from ore.core.analyzer import DEFAULT_MAX_FILE_SIZE


class OreConfig(BaseModel):
    """Settings read from ``~/.ore/config.json``.

    Unknown keys are ignored. Values must have the exact JSON type, so
    ``true`` or ``1.5`` is not accepted as a size.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    max_file_size: int = Field(default=DEFAULT_MAX_FILE_SIZE, ge=0)
    """Default read ceiling in bytes for `ore analyze read` and `functions`."""
