import importlib
import os

try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


def load_settings():
    """Load the configured settings module (mirrors Django's approach)."""
    module_path = os.environ.get(
        "SEA_SETTINGS_MODULE",
        "sea.settings.base",
    )
    module = importlib.import_module(module_path)
    return getattr(module, "settings")


class LazySettings:
    """Defers loading until first use so app settings can subclass ours."""

    def __init__(self) -> None:
        self._wrapped = None

    def __getattr__(self, name):
        if self._wrapped is None:
            self._wrapped = load_settings()
        return getattr(self._wrapped, name)

    def configure(self, project_settings) -> None:
        """Install an explicit settings object instead of the module one."""
        self._wrapped = project_settings

    @property
    def configured(self) -> bool:
        return self._wrapped is not None


settings = LazySettings()

__all__ = ["settings", "load_settings"]
