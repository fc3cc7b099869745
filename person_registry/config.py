"""
Configuration module for Person Registry

Loads and validates configuration from environment variables.
"""

import os
from typing import Literal
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

MalformedPolicy = Literal["raise", "skip", "pad"]

MALFORMED_POLICIES = ("raise", "skip", "pad")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


class Config:
    """
    Centralized configuration for Person Registry.

    This class provides typed access to all configuration values
    and validates that they hold something the library understands.
    """

    # Delimited-text parsing
    MALFORMED_POLICY: MalformedPolicy = os.getenv("PERSON_REGISTRY_MALFORMED_POLICY", "raise").lower()  # type: ignore
    TRIM_FIELDS: bool = _env_flag("PERSON_REGISTRY_TRIM_FIELDS", "true")

    # Logging
    LOG_LEVEL: str = os.getenv("PERSON_REGISTRY_LOG_LEVEL", "WARNING").upper()

    # Debug
    DEBUG: bool = _env_flag("DEBUG", "false")

    @classmethod
    def validate(cls) -> bool:
        """
        Validate the loaded configuration.

        Returns:
            True if configuration is valid

        Raises:
            ValueError: If any value is not one the library accepts
        """
        errors = []

        if cls.MALFORMED_POLICY not in MALFORMED_POLICIES:
            errors.append(
                f"PERSON_REGISTRY_MALFORMED_POLICY must be one of {', '.join(MALFORMED_POLICIES)}, "
                f"got '{cls.MALFORMED_POLICY}'"
            )

        if cls.LOG_LEVEL not in LOG_LEVELS:
            errors.append(
                f"PERSON_REGISTRY_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{cls.LOG_LEVEL}'"
            )

        if errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            raise ValueError(error_msg)

        return True

    @classmethod
    def effective_log_level(cls) -> str:
        """DEBUG wins over LOG_LEVEL."""
        return "DEBUG" if cls.DEBUG else cls.LOG_LEVEL
