"""
Base Configuration

Shared pydantic base for configuration models.
"""

from pydantic import BaseModel, ConfigDict


class BaseConfig(BaseModel):
    """Base class for configuration models. Assignments are validated, unknown fields rejected."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")
