"""Pydantic models for Frida instrumentation scripts."""

from pydantic import BaseModel, ConfigDict


class FridaScript(BaseModel):
    """A named instrumentation script."""

    model_config = ConfigDict(frozen=True)

    name: str
    """Script name (unique within the catalog)."""

    description: str
    """What the script observes or intercepts."""

    script: str
    """JavaScript source for the Frida runtime."""
