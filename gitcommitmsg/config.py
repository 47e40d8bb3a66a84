"""Configuration management for git-commit-msg."""
from pathlib import Path
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import tomli
import tomli_w
import os
import re

DEFAULT_CONFIG_FILENAME = ".gitcommitmsg.toml"
CONFIG_SECTION = "gitcommitmsg"

DEFAULT_FORMAT_DOCS_URL = (
    "https://github.com/clns/node-commit-msg/blob/master/CONTRIBUTING.md#commit-message"
)

# Letters, digits, underscore, space and common punctuation. No tabs, no
# angle brackets.
DEFAULT_TITLE_ALLOWED_CHARACTERS = r"""[\w .,:;!?'"`()\[\]{}/\\|+\-=*&^%$#@~]"""


class RuleConfig(BaseModel):
    """Tunable parameters of the commit message rules.

    Instances are immutable. Use ``configure`` to derive a copy with some
    values overridden; the process-wide ``DEFAULT_CONFIG`` is never changed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    title_allowed_characters: str = Field(
        default=DEFAULT_TITLE_ALLOWED_CHARACTERS,
        description="Regex character class matching a single allowed title character"
    )

    title_max_length: Optional[int] = Field(
        default=None,
        gt=0,
        description="Maximum title length, or None to skip the title length rule"
    )

    body_max_line_length: int = Field(
        default=72,
        gt=0,
        description="Body lines longer than this produce a warning"
    )

    format_docs_url: str = Field(
        default=DEFAULT_FORMAT_DOCS_URL,
        description="Documentation linked from the structural format error"
    )

    @field_validator("title_allowed_characters")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid character pattern: {e}") from e
        return value

    def __init__(self, **data):
        """Initialize config with environment variable support.

        Environment values are validated on their own; invalid ones are
        reported and ignored. Explicit values always win.
        """
        env_data = {}

        env_mapping = {
            'GIT_COMMIT_MSG_TITLE_ALLOWED_CHARACTERS': 'title_allowed_characters',
            'GIT_COMMIT_MSG_TITLE_MAX_LENGTH': 'title_max_length',
            'GIT_COMMIT_MSG_BODY_MAX_LINE_LENGTH': 'body_max_line_length',
            'GIT_COMMIT_MSG_FORMAT_DOCS_URL': 'format_docs_url',
        }

        for env_var, field_name in env_mapping.items():
            value = os.environ.get(env_var)
            if value:
                env_data[field_name] = value

        if env_data:
            try:
                env_data = type(self).model_validate(env_data).model_dump(
                    include=set(env_data)
                )
            except ValidationError as e:
                print(f"Warning: Ignoring invalid environment settings: {e}")
                env_data = {}

        merged_data = {**env_data, **data}

        super().__init__(**merged_data)

    def configure(self, **overrides: Any) -> 'RuleConfig':
        """Return a validated copy with the given values overridden.

        ``None`` values are ignored so that unset command line options can be
        passed straight through.
        """
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return type(self).model_validate(data)

    @classmethod
    def load(cls, repo_path: Path) -> 'RuleConfig':
        """Load configuration from the config file.

        Args:
            repo_path: Path to the git repository

        Returns:
            RuleConfig: Configuration with values from file or defaults
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)

            section = config_data.get(CONFIG_SECTION, {})
            if not isinstance(section, dict):
                raise TypeError(f"[{CONFIG_SECTION}] must be a table")

            return cls(**section)
        except Exception as e:
            # If there's any error reading the config, use defaults
            print(f"Warning: Error reading config file: {e}")
            return cls()

    def save(self, repo_path: Path) -> None:
        """Save configuration to the config file.

        Args:
            repo_path: Path to the git repository
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME
        config_dict: Dict[str, Any] = {
            k: v for k, v in self.model_dump().items() if v is not None
        }

        with config_path.open('wb') as f:
            tomli_w.dump({CONFIG_SECTION: config_dict}, f)


# Field defaults only; the environment is applied by RuleConfig() and load().
DEFAULT_CONFIG = RuleConfig.model_validate({})
