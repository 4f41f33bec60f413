import os

from sea.settings.base import LIVE, Settings


class ProdSettings(Settings):
    """Production overrides keep behavior explicit and boring."""

    def __init__(self) -> None:
        super().__init__()
        self.environment = "prod"
        self.log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
        # Doubles never stand in for real observers in production
        self.default_signal_state = LIVE


settings = ProdSettings()
