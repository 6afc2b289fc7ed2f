"""Configuration management using Pydantic for validation."""

from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TaggerConfig(BaseSettings):
    """Tokenizer + part-of-speech tagger configuration."""

    backend: Literal["spacy", "nltk"] = "spacy"
    model: str = "en_core_web_sm"
    tag_attribute: Literal["tag", "pos"] = "tag"
    download_resources: bool = False


class ParserConfig(BaseSettings):
    """Dependency parser configuration."""

    model: str = "en_core_web_sm"
    enhanced: bool = True
    collapsed: bool = True


class LexiconConfig(BaseSettings):
    """WordNet lexical database configuration."""

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    wordnet_dir: Optional[str] = Field(default=None)
    download_corpus: bool = False

    @field_validator("wordnet_dir")
    @classmethod
    def blank_dir_is_unset(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty directory setting as not configured."""
        if v is not None and not v.strip():
            return None
        return v


class ExtractionConfig(BaseSettings):
    """Phrase extraction strategy selection."""

    strategy: Literal["auto", "pattern", "dependency"] = "auto"


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    level: str = "INFO"
    format: Literal["json", "text"] = "text"
    file: Optional[str] = None
    max_size_mb: int = 100
    backup_count: int = 5


class Config(BaseSettings):
    """Main configuration class."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
        env_nested_delimiter="__",
    )

    tagger: TaggerConfig = Field(default_factory=TaggerConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
    lexicon: LexiconConfig = Field(default_factory=LexiconConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @staticmethod
    def _deep_merge_dict(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
        """Deep-merge two dicts (overrides win).

        This is used to apply environment-derived overrides on top of YAML defaults.
        """
        merged: Dict[str, Any] = dict(base)
        for key, value in overrides.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = Config._deep_merge_dict(merged[key], value)
            else:
                merged[key] = value
        return merged

    @classmethod
    def from_yaml(cls, yaml_path: str | Path = "config/config.yaml") -> "Config":
        """Load configuration from YAML file and environment variables.

        Precedence (highest to lowest):
        1) Environment variables / .env
        2) YAML file
        3) Model defaults

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance with loaded settings

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML file is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        with open(yaml_path) as f:
            yaml_config = yaml.safe_load(f) or {}

        if not isinstance(yaml_config, dict):
            raise ValueError(f"YAML config root must be a mapping/dict: {yaml_path}")

        env_overrides = cls().model_dump(exclude_defaults=True)

        # Nested BaseSettings don't see plain env vars (WORDNET_DIR) through the
        # parent model, so lexicon overrides are computed separately.
        lexicon_env_overrides = LexiconConfig().model_dump(exclude_defaults=True)
        if lexicon_env_overrides:
            yaml_lexicon = yaml_config.get("lexicon", {})
            env_overrides["lexicon"] = cls._deep_merge_dict(
                yaml_lexicon if isinstance(yaml_lexicon, dict) else {},
                lexicon_env_overrides,
            )

        merged = cls._deep_merge_dict(yaml_config, env_overrides)

        return cls(**merged)

    def validate_config(self) -> None:
        """Validate configuration settings.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.extraction.strategy == "pattern" and self.tagger.backend == "spacy":
            if not self.tagger.model:
                raise ValueError("tagger.model is required for the spaCy tagger backend")
        if self.extraction.strategy == "dependency" and not self.parser.model:
            raise ValueError("parser.model is required for the dependency strategy")
        if self.lexicon.wordnet_dir and not Path(self.lexicon.wordnet_dir).is_dir():
            raise ValueError(f"WordNet directory does not exist: {self.lexicon.wordnet_dir}")


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get or create global configuration instance.

    Returns:
        Global Config instance

    Raises:
        RuntimeError: If configuration hasn't been initialized
    """
    global _config
    if _config is None:
        raise RuntimeError("Configuration not initialized. Call load_config() first.")
    return _config


def load_config(yaml_path: str | Path = "config/config.yaml") -> Config:
    """Load and validate configuration.

    Args:
        yaml_path: Path to YAML configuration file

    Returns:
        Loaded and validated Config instance
    """
    global _config
    _config = Config.from_yaml(yaml_path)
    _config.validate_config()
    return _config


def reset_config() -> None:
    """Reset global configuration (mainly for testing)."""
    global _config
    _config = None
