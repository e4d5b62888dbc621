"""Configuration models."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from hostos.models.hostos import OSFamily


class HostOSCtlConfig(BaseModel):
    """hostosctl configuration."""
    log_level: str = Field(default="WARNING")
    default_os_family: Optional[OSFamily] = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    class Config:
        """Pydantic config."""
        extra = "ignore"
