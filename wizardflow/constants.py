"""Constants and default values for WizardFlow configuration.

This module centralizes all configuration constants and environment variable
settings used by the wizard session and CLI.
"""

import os
from typing import Final

# =============================================================================
# Environment Variable Names
# =============================================================================

ENV_VAR_PREFIX: Final[str] = "WIZARDFLOW_"

ENV_FINALIZE_DELAY: Final[str] = f"{ENV_VAR_PREFIX}FINALIZE_DELAY"
ENV_CONFIRM_PROMPT: Final[str] = f"{ENV_VAR_PREFIX}CONFIRM_PROMPT"
ENV_SUCCESS_MESSAGE: Final[str] = f"{ENV_VAR_PREFIX}SUCCESS_MESSAGE"
ENV_FAILURE_MESSAGE: Final[str] = f"{ENV_VAR_PREFIX}FAILURE_MESSAGE"
ENV_LOG_LEVEL: Final[str] = f"{ENV_VAR_PREFIX}LOG_LEVEL"


# =============================================================================
# Default Configuration Values
# =============================================================================

DEFAULT_FINALIZE_DELAY: Final[float] = 2.0
DEFAULT_CONFIRM_PROMPT: Final[str] = "Close and lose progress?"
DEFAULT_SUCCESS_MESSAGE: Final[str] = "Welcome to Quixess! Your account has been created successfully."
DEFAULT_FAILURE_MESSAGE: Final[str] = "Something went wrong. Please try again."
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# =============================================================================
# File Format Constants
# =============================================================================

FILE_EXT_YAML: Final[str] = "yaml"
FILE_EXT_YML: Final[str] = "yml"
FILE_EXT_JSON: Final[str] = "json"

SUPPORTED_EXTENSIONS: Final[tuple[str, ...]] = (
    FILE_EXT_YAML,
    FILE_EXT_YML,
    FILE_EXT_JSON,
)


# =============================================================================
# Helper Functions
# =============================================================================


def get_env_str(env_var: str, default: str) -> str:
    """
    Get string value from environment variable.

    Args:
        env_var: Environment variable name
        default: Default value if not set

    Returns:
        String value from environment or default
    """
    return os.getenv(env_var, default)


def get_env_float(env_var: str, default: float) -> str | float:
    """
    Get float value from environment variable.

    Unparseable values are returned as the raw string so configuration
    validation can report them.
    """
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return raw


# =============================================================================
# Configuration Value Getters (reads from environment)
# =============================================================================


def get_finalize_delay() -> str | float:
    return get_env_float(ENV_FINALIZE_DELAY, DEFAULT_FINALIZE_DELAY)


def get_confirm_prompt() -> str:
    return get_env_str(ENV_CONFIRM_PROMPT, DEFAULT_CONFIRM_PROMPT)


def get_success_message() -> str:
    return get_env_str(ENV_SUCCESS_MESSAGE, DEFAULT_SUCCESS_MESSAGE)


def get_failure_message() -> str:
    return get_env_str(ENV_FAILURE_MESSAGE, DEFAULT_FAILURE_MESSAGE)


def get_log_level() -> str:
    return get_env_str(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
