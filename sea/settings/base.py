import os
from typing import Dict, List

LIVE = "live"
DOUBLED = "doubled"
SIGNAL_STATES = (LIVE, DOUBLED)


class Settings:
    """Django-inspired settings container with explicit configuration."""

    def __init__(self) -> None:
        self.environment = os.environ.get("SEA_ENV", "base")
        self.log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
        self.log_format = os.environ.get(
            "LOG_FORMAT", "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )

        # State a signal takes when it is first registered on a switch board
        self.default_signal_state = (
            os.environ.get("SEA_SIGNALS_DEFAULT", LIVE).strip().lower()
        )

        # Signals must be declared explicitly; no dynamic discovery.
        installed_signals = os.environ.get("SEA_INSTALLED_SIGNALS", "")
        self.INSTALLED_SIGNALS: List[str] = [
            path.strip() for path in installed_signals.split(",") if path.strip()
        ]

        # Signal name -> dotted path of an object exposing emit(signal)
        self.signal_implementations: Dict[str, str] = {}

    def validate(self) -> dict:
        """Validate configuration and return any errors."""
        errors = {}

        if self.default_signal_state not in SIGNAL_STATES:
            errors["default_signal_state"] = (
                f"SEA_SIGNALS_DEFAULT must be one of {', '.join(SIGNAL_STATES)}, "
                f"got '{self.default_signal_state}'"
            )

        malformed = [path for path in self.INSTALLED_SIGNALS if "." not in path]
        if malformed:
            errors["installed_signals"] = (
                f"Installed signals must be dotted paths: {', '.join(malformed)}"
            )

        malformed = [
            path for path in self.signal_implementations.values() if "." not in path
        ]
        if malformed:
            errors["signal_implementations"] = (
                f"Signal implementations must be dotted paths: {', '.join(malformed)}"
            )

        return errors


settings = Settings()
