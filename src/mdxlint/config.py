"""Configuration management for mdxlint using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

CONFIG_FILE_NAME = ".mdxlint.json"

RULE_NAMES = (
    "frontmatter",
    "headings",
    "code-blocks",
    "components",
    "internal-links",
)


class OutputFormat(str, Enum):
    """Report output formats."""
    MARKDOWN = "markdown"
    JSON = "json"
    TABLE = "table"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class ProjectConfig(BaseModel):
    """Project configuration section."""
    root: str = "."

    model_config = ConfigDict(extra="forbid")


class DocsConfig(BaseModel):
    """Documentation sources configuration section."""
    dir: str = "docs"
    extension: str = ".mdx"
    base_branch: str = Field(alias="baseBranch", default="master")

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v):
        if not v.startswith("."):
            raise ValueError(f"extension must start with '.', got: {v}")
        return v

    @field_validator("base_branch")
    @classmethod
    def validate_base_branch(cls, v):
        if not v.strip():
            raise ValueError("baseBranch must not be empty")
        return v

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class RulesConfig(BaseModel):
    """Rule selection configuration section."""
    disabled: list[str] = Field(default_factory=list)
    image_lookback: int = Field(alias="imageLookback", default=5)

    @field_validator("disabled")
    @classmethod
    def validate_disabled(cls, v):
        unknown = [name for name in v if name not in RULE_NAMES]
        if unknown:
            raise ValueError(
                f"unknown rule(s) {unknown}; valid rules are {list(RULE_NAMES)}"
            )
        return v

    @field_validator("image_lookback")
    @classmethod
    def validate_image_lookback(cls, v):
        if v < 0:
            raise ValueError("imageLookback must be >= 0")
        return v

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class OutputConfig(BaseModel):
    """Output configuration section."""
    format: OutputFormat = OutputFormat.MARKDOWN

    model_config = ConfigDict(use_enum_values=True, extra="forbid")


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True, extra="forbid")


class MdxlintConfig(BaseModel):
    """Complete mdxlint configuration model."""
    project: ProjectConfig = Field(default_factory=ProjectConfig)
    docs: DocsConfig = Field(default_factory=DocsConfig)
    rules: RulesConfig = Field(default_factory=RulesConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")

    # Directory the configuration was loaded from; project.root is relative to it.
    base_dir: Path | None = Field(default=None, exclude=True)

    @property
    def project_root(self) -> Path:
        """Absolute project root."""
        base = self.base_dir or Path.cwd()
        return (base / self.project.root).resolve()

    @property
    def docs_root(self) -> Path:
        """Absolute content root that internal links resolve against."""
        return self.project_root / self.docs.dir


def load_config(config_path: str | Path | None = None) -> MdxlintConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .mdxlint.json

    Returns:
        MdxlintConfig: Loaded and validated configuration

    Raises:
        FileNotFoundError: If config file specified but not found
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

    if config_path is None:
        return create_default_config()

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {config_path}: {e}")

    if not isinstance(config_data, dict):
        raise ValueError(f"Config file {config_path} must contain a JSON object")

    try:
        config = MdxlintConfig(**config_data)
    except Exception as e:
        raise ValueError(f"Failed to load config from {config_path}: {e}")

    config.base_dir = config_path.resolve().parent
    return config


def find_config_file(
    start_dir: Path | None = None, name: str = CONFIG_FILE_NAME
) -> Path | None:
    """Return the nearest file called ``name`` in ``start_dir`` or its parents.

    The search starts at the current directory when ``start_dir`` is omitted.
    """
    start = Path(start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def create_default_config() -> MdxlintConfig:
    """Create default configuration rooted at the current directory."""
    return MdxlintConfig(base_dir=Path.cwd())
