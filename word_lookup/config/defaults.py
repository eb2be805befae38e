"""Default configuration values for Word Lookup."""

import logging
import os
from collections.abc import Mapping

from word_lookup.models import ProviderId

from .config import LookupConfig
from .config_file import ConfigFileManager

logger = logging.getLogger(__name__)

ENV_PREFIX = "WORD_LOOKUP_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


def _parse_provider(value: str) -> ProviderId:
    return ProviderId(value.strip().lower())


# Variable suffix -> (config field, parser)
ENV_FIELDS = {
    "DISABLED": ("disabled", _parse_bool),
    "PROVIDER": ("provider", _parse_provider),
    "API_ENDPOINT": ("api_endpoint", str.strip),
    "API_KEY": ("api_key", str.strip),
    "FREE_DICTIONARY_ENDPOINT": ("free_dictionary_endpoint", str.strip),
    "TIMEOUT_MS": ("timeout_ms", int),
    "RETRY_ATTEMPTS": ("retry_attempts", int),
    "CACHE_TTL": ("cache_ttl_seconds", float),
}


def create_default_config(**overrides) -> LookupConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        LookupConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            api_key="secret",
            retry_attempts=3
        )
    """
    return LookupConfig(**overrides)


def config_from_env(
    environ: Mapping[str, str] | None = None,
    *,
    use_file: bool = True,
    **overrides,
) -> LookupConfig:
    """Create a configuration from ``WORD_LOOKUP_*`` environment variables.

    Values are layered: defaults, then the JSON config file (see
    ConfigFileManager), then the environment, then explicit overrides.
    Unparseable values are skipped with a warning so a typo in one variable
    does not take the whole dictionary down.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)
        use_file: Read the saved config file underneath the environment
        **overrides: Values that win over the environment

    Returns:
        LookupConfig built from defaults, file, environment and overrides
    """
    environ = os.environ if environ is None else environ
    values = {}

    for suffix, (field_name, parser) in ENV_FIELDS.items():
        raw = environ.get(f"{ENV_PREFIX}{suffix}")
        if raw is None or raw == "":
            continue
        try:
            values[field_name] = parser(raw)
        except ValueError:
            logger.warning(f"Ignoring invalid value for {ENV_PREFIX}{suffix}: {raw!r}")

    values.update(overrides)
    if use_file:
        return ConfigFileManager.load_config(**values)
    return LookupConfig(**values)
