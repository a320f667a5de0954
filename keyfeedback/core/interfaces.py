from abc import ABC, abstractmethod

from keyfeedback.core.feedback_policy import SoundVariant, VibrationMode
from keyfeedback.core.settings_values import SettingsSnapshot


class IRingerModeProvider(ABC):
    @abstractmethod
    def get_ringer_mode(self) -> int:
        pass


class ISettingsProvider(ABC):
    @abstractmethod
    def get_settings(self) -> SettingsSnapshot:
        pass


class IAudioSink(ABC):
    @abstractmethod
    def play_sound_effect(self, variant: SoundVariant, volume: float):
        pass


class IHapticSink(ABC):
    @abstractmethod
    def vibrate(self, mode: VibrationMode):
        pass


class IVibrator(ABC):
    @abstractmethod
    def vibrate(self, duration_ms: int):
        pass


class IKeyboardView(ABC):
    @abstractmethod
    def perform_keypress_haptic(self, ignore_global_setting: bool) -> bool:
        pass


class NullAudioSink(IAudioSink):
    def play_sound_effect(self, variant: SoundVariant, volume: float):
        pass


class NullHapticSink(IHapticSink):
    def vibrate(self, mode: VibrationMode):
        pass
