"""Configuration management for Word Lookup."""

from .config import LookupConfig
from .config_file import ConfigFileManager
from .defaults import config_from_env, create_default_config

__all__ = ["LookupConfig", "ConfigFileManager", "config_from_env", "create_default_config"]
