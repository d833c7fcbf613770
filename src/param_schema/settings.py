"""
Validator Middleware Settings.

Provides the Pydantic model configuring how a rejected request is reported.

Example YAML:
    settings:
      validation:
        debug: true            # include error details in 400 responses
        status_code: 400
        error_code: EBADPARAM
        message: bad request
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

DEBUG_ENV_VARS = ("PARAM_SCHEMA_DEBUG", "DEBUG")


class ValidatorSettings(BaseModel):
    """
    Pydantic model for validator middleware settings.

    Attributes:
        debug: Include the validation error list in rejection responses
        status_code: HTTP status of the rejection response
        error_code: Machine-readable error code in the response body
        message: Human-readable message and HTTP status message

    Example:
        >>> settings = ValidatorSettings(debug=True)
        >>> settings.status_code
        400
    """

    debug: bool = Field(
        default=False,
        description="Expose validation errors in the rejection response body",
    )

    status_code: int = Field(
        default=400,
        description="HTTP status code for rejected requests",
    )

    error_code: str = Field(
        default="EBADPARAM",
        description="Error code reported in the rejection response body",
    )

    message: str = Field(
        default="bad request",
        description="Message and status message of the rejection response",
    )

    @field_validator("status_code")
    @classmethod
    def validate_status_code(cls, v):
        """Rejections must be client or server errors."""
        if not 400 <= v <= 599:
            raise ValueError(f"status_code must be between 400 and 599, got {v}")
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "ValidatorSettings":
        """
        Build settings with ``debug`` read from the environment.

        ``PARAM_SCHEMA_DEBUG`` takes precedence over ``DEBUG``; only the
        literal string "true" (any case) turns debug on.
        """
        environ = os.environ if environ is None else environ
        debug = False
        for var in DEBUG_ENV_VARS:
            if var in environ:
                debug = environ[var].strip().lower() == "true"
                break
        overrides.setdefault("debug", debug)
        return cls(**overrides)


def parse_validator_settings(config: dict) -> ValidatorSettings:
    """
    Parse validator settings from a configuration dictionary.

    Args:
        config: Settings-level dictionary; the ``validation`` key is used

    Returns:
        ValidatorSettings, with defaults when the section is absent

    Raises:
        pydantic.ValidationError: If the section is present but invalid
    """
    section = config.get("validation")
    if section is None:
        return ValidatorSettings()
    if not isinstance(section, dict):
        raise ValueError(f"validation settings must be a dict, got {type(section).__name__}")
    return ValidatorSettings(**section)
