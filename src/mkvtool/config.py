"""Configuration management for mkvtool."""

import os
import re
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

ENV_REFERENCE = re.compile(r"\$\{([^}]+)\}")


class SelectionConfig(BaseModel):
    """Default track selection policy."""

    language_priority: List[str] = Field(
        default_factory=list,
        description="Preferred languages, in order ('default' for tracks without a language)",
    )
    ignore: List[str] = Field(
        default_factory=list, description="Ignore tracks with any of these strings in the name"
    )


class FormatConfig(BaseModel):
    """Default formatting masks."""

    print_mask: str = Field(default="%{title}.mkv", description="Mask used by 'print'")
    rename_mask: str = Field(
        default="%{title}.%{container}", description="Mask used by 'rename'"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    format: str = Field(default="text", description="Log format (json or text)")
    level: str = Field(default="warning", description="Log level")
    output: Optional[str] = Field(default=None, description="Optional log file path")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate log format."""
        if v not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        if v.lower() not in ("debug", "info", "warning", "error", "critical"):
            raise ValueError("Invalid log level")
        return v.lower()


class ExecutionConfig(BaseModel):
    """Execution configuration."""

    dry_run: bool = Field(default=False, description="Dry run mode")
    skip_if_correct: bool = Field(
        default=False, description="Skip files where the chosen track is already the only default"
    )


class Config(BaseModel):
    """Main configuration model."""

    selection: SelectionConfig = Field(
        default_factory=SelectionConfig, description="Track selection defaults"
    )
    format: FormatConfig = Field(default_factory=FormatConfig, description="Formatting masks")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")
    execution: ExecutionConfig = Field(
        default_factory=ExecutionConfig, description="Execution configuration"
    )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "Config":
        """Read a YAML configuration file.

        Sections missing from the file keep their defaults. ``${NAME}`` in any
        string value is replaced by the NAME environment variable, so a log
        file can be given as ``output: ${HOME}/mkvtool.log``.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If a referenced variable is unset or a value is invalid
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        document = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(expand_env(document))


def expand_env(value: Any) -> Any:
    """Expand ${NAME} references in every string of a parsed YAML document."""
    if isinstance(value, dict):
        return {key: expand_env(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env(item) for item in value]
    if not isinstance(value, str):
        return value

    def lookup(match):
        name = match.group(1)
        if name not in os.environ:
            raise ValueError(f"configuration references unset environment variable {name!r}")
        return os.environ[name]

    return ENV_REFERENCE.sub(lookup, value)


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """Return the configuration in path, or the built-in defaults."""
    if path is None:
        return Config()
    return Config.from_yaml(path)
