import os

from sea.settings.base import DOUBLED, Settings


class TestSettings(Settings):
    """Signals start doubled; integration tests opt back in with enable()."""

    __test__ = False

    def __init__(self) -> None:
        super().__init__()
        self.environment = "test"
        self.log_level = os.environ.get("LOG_LEVEL", "DEBUG").upper()
        self.default_signal_state = DOUBLED


settings = TestSettings()
