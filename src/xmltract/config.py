"""
Configuration management using Pydantic Settings.

Defaults for the extractor are loaded, in priority order, from:
- explicit keyword arguments
- environment variables (XMLTRACT_*)
- a .env file in the working directory
- config/xmltract.yaml in the working directory (optional)

Command-line flags override whatever the settings provide.
"""

from typing import Optional, Tuple, Type

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from xmltract.models.outcome import BatchPolicy, TraversalMode
from xmltract.parsers.normalizer import DEFAULT_WHITESPACE

CONFIG_FILE = 'config/xmltract.yaml'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class Settings(BaseSettings):
    """
    Extractor defaults loaded from environment variables and YAML.

    Environment Variables (from .env):
        XMLTRACT_ENCODING: Input encoding forwarded to the parser
        XMLTRACT_MODE: Traversal mode ('stream' or 'tree')
        XMLTRACT_BATCH_POLICY: 'fail-fast' or 'continue'
        XMLTRACT_WHITESPACE: Characters treated as whitespace
        XMLTRACT_LOG_LEVEL: Default logging level name
        XMLTRACT_HUGE_TREE: Lift libxml2 size limits

    Example:
        >>> settings = get_settings()
        >>> settings.encoding
        'UTF-8'
        >>> settings.mode
        <TraversalMode.STREAM: 'stream'>
    """

    encoding: str = Field(
        default="UTF-8",
        min_length=1,
        description="Input character encoding forwarded to the XML parser"
    )

    mode: TraversalMode = Field(
        default=TraversalMode.STREAM,
        description="Traversal strategy"
    )

    batch_policy: BatchPolicy = Field(
        default=BatchPolicy.FAIL_FAST,
        description="Stop at the first failing source, or log it and continue"
    )

    whitespace: str = Field(
        default=DEFAULT_WHITESPACE,
        min_length=1,
        description="Characters the normalizer treats as whitespace"
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level used when neither -q nor -v is given"
    )

    huge_tree: bool = Field(
        default=True,
        description="Disable libxml2 security limits on depth and text size"
    )

    model_config = SettingsConfigDict(
        env_prefix='XMLTRACT_',
        env_file='.env',
        env_file_encoding='utf-8',
        yaml_file=CONFIG_FILE,
        yaml_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept standard level names in any case."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level '{v}'. "
                f"Use one of: {', '.join(LOG_LEVELS)}"
            )
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
        )


# Singleton pattern - loaded once, cached until reset
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get global settings instance (lazy-loaded singleton).

    Returns:
        Singleton Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
