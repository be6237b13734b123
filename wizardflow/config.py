# wizardflow/config.py
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypedDict

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from wizardflow.common.exceptions import ConfigurationError
from wizardflow.constants import (
    DEFAULT_CONFIRM_PROMPT,
    DEFAULT_FAILURE_MESSAGE,
    DEFAULT_FINALIZE_DELAY,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SUCCESS_MESSAGE,
    FILE_EXT_JSON,
    LOG_LEVELS,
    SUPPORTED_EXTENSIONS,
    get_confirm_prompt,
    get_failure_message,
    get_finalize_delay,
    get_log_level,
    get_success_message,
)

CONFIG_SECTION = "wizardflow"


class WizardConfigDict(TypedDict, total=False):
    """TypedDict for wizard configuration dictionary"""
    finalize_delay: float
    confirm_prompt: str
    success_message: str
    failure_message: str
    log_level: str


@dataclass(frozen=True)
class WizardConfig:
    """Configuration for a WizardFlow session and its CLI"""

    # Submission settings
    finalize_delay: float = DEFAULT_FINALIZE_DELAY

    # User-facing text
    confirm_prompt: str = DEFAULT_CONFIRM_PROMPT
    success_message: str = DEFAULT_SUCCESS_MESSAGE
    failure_message: str = DEFAULT_FAILURE_MESSAGE

    # Logging
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        """Validate configuration after initialization"""
        self._validate_config()

    @classmethod
    def from_env(cls) -> 'WizardConfig':
        """Create configuration from environment variables using constants module"""
        return cls(
            finalize_delay=get_finalize_delay(),  # type: ignore[arg-type]
            confirm_prompt=get_confirm_prompt(),
            success_message=get_success_message(),
            failure_message=get_failure_message(),
            log_level=get_log_level(),
        )

    @classmethod
    def from_dict(cls, config_dict: WizardConfigDict) -> 'WizardConfig':
        """Create configuration from typed dictionary, rejecting unknown keys"""
        unknown = set(config_dict) - (WizardConfigDict.__required_keys__ | WizardConfigDict.__optional_keys__)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {', '.join(sorted(unknown))}",
                config_key=sorted(unknown)[0],
            )

        log_level = config_dict.get('log_level', DEFAULT_LOG_LEVEL)
        if isinstance(log_level, str):
            log_level = log_level.upper()

        return cls(
            finalize_delay=config_dict.get('finalize_delay', DEFAULT_FINALIZE_DELAY),
            confirm_prompt=config_dict.get('confirm_prompt', DEFAULT_CONFIRM_PROMPT),
            success_message=config_dict.get('success_message', DEFAULT_SUCCESS_MESSAGE),
            failure_message=config_dict.get('failure_message', DEFAULT_FAILURE_MESSAGE),
            log_level=log_level,
        )

    @classmethod
    def from_file(cls, file_path: str | Path) -> 'WizardConfig':
        """
        Load configuration from a YAML or JSON file.

        Settings may sit at the top level or under a ``wizardflow`` section.

        Raises:
            ConfigurationError: If the file cannot be read, parsed or validated
        """
        path = Path(file_path)
        extension = path.suffix.lstrip('.').lower()
        if extension not in SUPPORTED_EXTENSIONS:
            raise ConfigurationError(f"Unsupported config file format: {path.suffix}")

        try:
            with path.open(encoding='utf-8') as handle:
                if extension == FILE_EXT_JSON:
                    data = json.load(handle)
                else:
                    data = YAML(typ='safe', pure=True).load(handle)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Config file not found: {path}") from e
        except (json.JSONDecodeError, YAMLError) as e:
            raise ConfigurationError(f"Error parsing config file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        if CONFIG_SECTION in data:
            data = data[CONFIG_SECTION] or {}
            if not isinstance(data, dict):
                raise ConfigurationError(f"'{CONFIG_SECTION}' section must be a mapping")

        return cls.from_dict(data)

    def _validate_config(self) -> None:
        """Validate configuration values"""
        delay: Any = self.finalize_delay
        if isinstance(delay, bool) or not isinstance(delay, int | float):
            raise ConfigurationError(f"finalize_delay must be a number, got {delay!r}", config_key='finalize_delay')
        if delay < 0:
            raise ConfigurationError("finalize_delay must be non-negative", config_key='finalize_delay')
        object.__setattr__(self, 'finalize_delay', float(delay))

        for key in ('confirm_prompt', 'success_message', 'failure_message'):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(f"{key} must be a non-empty string", config_key=key)

        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log_level: {self.log_level} (expected one of {', '.join(LOG_LEVELS)})",
                config_key='log_level',
            )

    def to_dict(self) -> WizardConfigDict:
        """Convert configuration to typed dictionary"""
        return WizardConfigDict(
            finalize_delay=self.finalize_delay,
            confirm_prompt=self.confirm_prompt,
            success_message=self.success_message,
            failure_message=self.failure_message,
            log_level=self.log_level,
        )

    def __str__(self) -> str:
        return f"WizardConfig(finalize_delay={self.finalize_delay}, log_level={self.log_level})"


# Environment variable reference:
# WIZARDFLOW_FINALIZE_DELAY - Seconds the default finalizer waits (default: 2.0)
# WIZARDFLOW_CONFIRM_PROMPT - Prompt shown when closing a dirty form
# WIZARDFLOW_SUCCESS_MESSAGE - Message shown after a successful finish
# WIZARDFLOW_FAILURE_MESSAGE - Message shown after a failed finish
# WIZARDFLOW_LOG_LEVEL - DEBUG|INFO|WARNING|ERROR|CRITICAL (default: WARNING)
