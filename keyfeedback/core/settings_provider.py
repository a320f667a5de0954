from keyfeedback.core.config_loader import ConfigLoader
from keyfeedback.core.interfaces import ISettingsProvider
from keyfeedback.core.settings_values import SettingsSnapshot, load_settings


class ConfigSettingsProvider(ISettingsProvider):
    """Serves the feedback settings from keyboard_config.yml."""

    def __init__(self, loader: ConfigLoader = None):
        self.loader = loader or ConfigLoader()
        self._settings = load_settings(self.loader.config)

    def reload(self):
        self.loader.reload()
        self._settings = load_settings(self.loader.config)

    def get_settings(self) -> SettingsSnapshot:
        return self._settings
