"""Configuration file persistence for Word Lookup."""

import json
import logging
from dataclasses import asdict
from enum import Enum
from pathlib import Path
from typing import Any

from .config import LookupConfig

logger = logging.getLogger(__name__)


class ConfigFileManager:
    """Manager for configuration persistence.

    This class handles saving and loading lookup configuration to/from a JSON
    file stored in the user's home directory. API keys are left out of the
    file unless explicitly requested; they normally come from the environment.
    """

    CONFIG_FILE = Path.home() / ".word_lookup" / "config.json"

    # Keys never written unless include_secrets=True
    SECRET_KEYS = {"api_key"}

    @classmethod
    def save_config(cls, config: LookupConfig, include_secrets: bool = False) -> None:
        """Save configuration to JSON file.

        Args:
            config: Configuration to save
            include_secrets: Also write the API key

        Raises:
            OSError: If unable to create directory or write file
        """
        cls.CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)

        config_dict = cls._enums_to_values(asdict(config))
        if not include_secrets:
            for key in cls.SECRET_KEYS:
                config_dict.pop(key, None)

        with cls.CONFIG_FILE.open("w", encoding="utf-8") as f:
            json.dump(config_dict, f, indent=2, ensure_ascii=False)

    @classmethod
    def load_config(cls, **overrides) -> LookupConfig:
        """Load configuration from JSON file.

        Args:
            **overrides: Values applied on top of the file contents
                (e.g. an API key read from the environment)

        Returns:
            Loaded configuration, or default configuration if file doesn't exist

        Note:
            If the file exists but is invalid, falls back to default configuration
            and logs a warning.
        """
        if not cls.CONFIG_FILE.exists():
            return LookupConfig(**overrides)

        try:
            with cls.CONFIG_FILE.open("r", encoding="utf-8") as f:
                config_dict = json.load(f)

            if not isinstance(config_dict, dict):
                raise ValueError("config root must be a JSON object")

            config_dict.update(overrides)
            return LookupConfig(**config_dict)

        except (json.JSONDecodeError, TypeError, ValueError) as e:
            logger.warning(f"Invalid config file, using defaults: {e}")
            return LookupConfig(**overrides)

    @classmethod
    def config_exists(cls) -> bool:
        """Check if configuration file exists."""
        return cls.CONFIG_FILE.exists()

    @classmethod
    def delete_config(cls) -> None:
        """Delete the configuration file.

        This forces the application to use default configuration on next load.
        """
        if cls.CONFIG_FILE.exists():
            cls.CONFIG_FILE.unlink()

    @staticmethod
    def _enums_to_values(data: dict[str, Any]) -> dict[str, Any]:
        """Convert Enum members to their plain values for JSON output."""
        return {key: value.value if isinstance(value, Enum) else value for key, value in data.items()}
