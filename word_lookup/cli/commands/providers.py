"""CLI command for listing dictionary providers."""

from word_lookup.config import config_from_env
from word_lookup.exceptions import ConfigurationError
from word_lookup.presenters import ConsolePresenter
from word_lookup.services import create_lookup_manager


def providers_command(args) -> int:
    """Execute the providers subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = primary provider usable, 1 = otherwise)
    """
    presenter = ConsolePresenter()

    overrides = {"provider": args.provider} if args.provider else {}
    config = config_from_env(**overrides)

    if config.disabled:
        presenter.show_warning("Dictionary service is disabled (WORD_LOOKUP_DISABLED)")
        return 1

    try:
        manager = create_lookup_manager(config)
    except ConfigurationError as e:
        presenter.show_error(f"{config.provider.value}: {e.message}")
        presenter.show_info("Set WORD_LOOKUP_API_KEY or choose another --provider")
        return 1

    presenter.show_info("\nDictionary Providers:")
    for provider_id in manager.get_available_providers():
        client = manager.get_client(provider_id)
        status = "[OK]" if client.is_available() else "[OFFLINE]"
        primary = " (primary)" if provider_id == config.provider else ""
        presenter.show_info(f"  {status} {provider_id.value}: {client.name}{primary}")

    return 0
