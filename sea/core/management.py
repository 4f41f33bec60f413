import logging
import sys
from typing import List

from sea.core.exceptions import CommandError, ConfigurationError
from sea.core.logging import configure_logging
from sea.core.naming import resolve_observer_names
from sea.core.registry import SignalRegistry
from sea.settings import settings

logger = logging.getLogger(__name__)


def execute_from_command_line(command: str, argv: List[str] | None = None) -> None:
    """Entry point for manage.py commands."""
    argv = argv or []
    configure_logging()

    if command == "resolve":
        _resolve(argv)
        return

    logger.info("Loading settings from %s", settings.environment)
    errors = settings.validate()
    if errors:
        raise ConfigurationError(f"Configuration errors: {errors}")

    registry = SignalRegistry(settings)
    registry.load_signals()

    if command == "check":
        _check(registry)
    elif command == "describe":
        _describe(registry)
    else:
        raise CommandError(f"Unknown command '{command}'. Expected check|describe|resolve.")


def _check(registry: SignalRegistry) -> None:
    """Report that every installed signal bound cleanly."""
    count = len(list(registry.iter_signals()))
    logger.info("%s signal(s) bound without errors", count)
    sys.stdout.write(f"OK: {count} signal(s) bound\n")


def _describe(registry: SignalRegistry) -> None:
    """Print every installed signal with its observers in dispatch order."""
    sys.stdout.write("\n".join(registry.describe()) + "\n")


def _resolve(argv: List[str]) -> None:
    """Show which observers the naming convention expects for a signal."""
    if len(argv) < 2:
        raise CommandError("Usage: resolve <signal_name> <context> [<context> ...]")
    signal_name, contexts = argv[0], argv[1:]
    sys.stdout.write("\n".join(resolve_observer_names(signal_name, contexts)) + "\n")
