"""Configuration management for git-commit-lint."""
from pathlib import Path
from datetime import datetime
from typing import Any, Optional, Union, List
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
import tomli
import tomli_w
import os
import re
import sys

from .checks import DEFAULT_MAX_SUBJECT_LENGTH
from .models import CheckSelector

DEFAULT_CONFIG_FILENAME = ".gitcommitlint.toml"
CONFIG_SECTION = "gitcommitlint"

ENV_MAPPING = {
    'GIT_COMMIT_LINT_DISABLE': 'disable',
    'GIT_COMMIT_LINT_WARN': 'warn',
    'GIT_COMMIT_LINT_MAX_SUBJECT_LENGTH': 'max_subject_length',
    'GIT_COMMIT_LINT_ALWAYS_LOG': 'always_log',
    'GIT_COMMIT_LINT_LOG_FILE': 'log_file',
}

STRING_FIELDS = ['disable', 'warn', 'log_file']
BOOLEAN_FIELDS = ['always_log']


def _warn(message: str) -> None:
    print(f"Warning: {message}", file=sys.stderr)


class Config(BaseModel):
    """Configuration settings for git-commit-lint.

    This class defines all configurable options that can be set either
    via the config file, environment variables or command line arguments.
    """

    model_config = ConfigDict(validate_assignment=True)

    disable: CheckSelector = Field(
        default_factory=CheckSelector.none,
        description="Checks to skip entirely: 'all' or a list of check identifiers"
    )

    warn: CheckSelector = Field(
        default_factory=CheckSelector.none,
        description="Checks whose violations are reported as warnings instead of errors"
    )

    max_subject_length: int = Field(
        default=DEFAULT_MAX_SUBJECT_LENGTH,
        gt=0,
        description="Maximum number of characters allowed in the subject line"
    )

    always_log: bool = Field(
        default=False,
        description="Whether to always generate log files"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)"
    )

    @field_validator('disable', 'warn', mode='before')
    @classmethod
    def _parse_selector(cls, value: Any) -> CheckSelector:
        return CheckSelector.parse(value)

    @field_serializer('disable', 'warn')
    def _serialize_selector(self, selector: CheckSelector) -> Union[str, List[str]]:
        return selector.to_value()

    @staticmethod
    def _sanitize_string(value: str) -> str:
        """Strip control characters and overlong values from a setting."""
        if not value:
            return value

        # Remove control characters and null bytes
        value = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)

        # Limit length
        if len(value) > 1000:
            value = value[:1000]

        return value.strip()

    @staticmethod
    def _is_safe_path(path: str) -> bool:
        """Check if a path is safe (no path traversal)."""
        if not path:
            return False

        if '..' in path or path.startswith('/') or '\\' in path:
            return False

        if os.path.isabs(path):
            return False

        return True

    @classmethod
    def load(cls, repo_path: Path) -> 'Config':
        """Load configuration from the config file.

        Args:
            repo_path: Directory holding the config file

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)

            config_section = dict(config_data.get(CONFIG_SECTION, {}))

            for key in STRING_FIELDS:
                if key in config_section and isinstance(config_section[key], str):
                    config_section[key] = cls._sanitize_string(config_section[key])

            if config_section.get('log_file') and not cls._is_safe_path(config_section['log_file']):
                _warn(f"Unsafe log file path '{config_section['log_file']}', using default")
                config_section['log_file'] = None

            return cls(**config_section)
        except (OSError, ValueError, TypeError) as e:
            # If there's any error reading the config, use defaults
            _warn(f"Error reading config file: {e}")
            return cls()

    def save(self, repo_path: Path) -> None:
        """Save configuration to the config file.

        Args:
            repo_path: Directory to write the config file into
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        # TOML has no null, so unset values are left out
        config_dict = {k: v for k, v in self.model_dump().items() if v is not None}

        if config_dict.get('log_file') and not self._is_safe_path(config_dict['log_file']):
            _warn(f"Unsafe log file path '{config_dict['log_file']}', not saving")
            del config_dict['log_file']

        try:
            with config_path.open('wb') as f:
                tomli_w.dump({CONFIG_SECTION: config_dict}, f)
        except OSError as e:
            print(f"Error saving config file: {e}", file=sys.stderr)

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name.
        Otherwise, returns the configured log_file path if set.

        Returns:
            Optional[Path]: Path to the log file, or None if logging is disabled
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            return Path(f"gcl_log-{timestamp}.log")
        elif self.log_file:
            if self._is_safe_path(self.log_file):
                return Path(self.log_file)
            else:
                _warn(f"Unsafe log file path '{self.log_file}', using default")
                return None
        return None

    def __init__(self, **data):
        """Initialize config with environment variable support and sanitization."""
        env_data = {}

        for env_var, field_name in ENV_MAPPING.items():
            if env_var in os.environ:
                value = os.environ[env_var]

                if field_name in STRING_FIELDS:
                    value = self._sanitize_string(value)

                if field_name in BOOLEAN_FIELDS:
                    value = value.lower() in ['true', '1', 'yes', 'on']

                env_data[field_name] = value

        # Explicit values win over the environment
        merged_data = {**env_data, **data}

        super().__init__(**merged_data)
