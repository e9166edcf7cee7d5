"""Configuration models and utilities.

Composition itself takes no configuration; these settings only control
how the package logs.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from promptforge.observability.logging import setup_logging
from promptforge.prompts.errors import PromptConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PromptForgeConfig(BaseModel):
    """Package-wide settings.

    Attributes:
        log_level: Standard logging level name
        json_logs: Emit JSON log lines instead of console-formatted ones

    Example:
        >>> config = PromptForgeConfig(log_level="debug")
        >>> config.log_level
        'DEBUG'
    """

    model_config = ConfigDict(frozen=True)

    log_level: str = Field(default="INFO", description="Logging level name")
    json_logs: bool = Field(default=False, description="Use the JSON log renderer")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the level name to upper case and check it is known.

        Args:
            value: The level name to validate

        Returns:
            The upper-cased level name

        Raises:
            ValueError: If the level is not a standard logging level
        """
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def get_default_config() -> PromptForgeConfig:
    """Get the default configuration.

    Returns:
        PromptForgeConfig with default values
    """
    return PromptForgeConfig()


def load_config_from_env() -> PromptForgeConfig:
    """Load configuration from environment variables.

    Automatically loads variables from a .env file if one is present.

    Reads:
    - PROMPTFORGE_LOG_LEVEL: Logging level name (default: INFO)
    - PROMPTFORGE_JSON_LOGS: Enable JSON logs (true/1/yes)

    Returns:
        PromptForgeConfig loaded from the environment

    Raises:
        PromptConfigError: If a variable holds an invalid value

    Example:
        >>> import os
        >>> os.environ["PROMPTFORGE_LOG_LEVEL"] = "warning"
        >>> load_config_from_env().log_level
        'WARNING'
    """
    load_dotenv()

    log_level = os.getenv("PROMPTFORGE_LOG_LEVEL", "INFO")
    json_logs = os.getenv("PROMPTFORGE_JSON_LOGS", "false").lower() in ("true", "1", "yes")

    try:
        return PromptForgeConfig(log_level=log_level, json_logs=json_logs)
    except ValidationError as e:
        raise PromptConfigError("PROMPTFORGE_LOG_LEVEL", e.errors()[0]["msg"]) from e


def configure_logging(config: PromptForgeConfig) -> None:
    """Apply the logging settings from a configuration.

    Args:
        config: Settings to apply
    """
    setup_logging(log_level=config.log_level, json_logs=config.json_logs)
