"""
Feedback Policy Module

Decides, for a single key press, whether a key-click should play (and which
one) and whether the device should vibrate (and how).
This module is PURELY DECLARATIVE and does not touch audio or vibration hardware.
"""
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from keyfeedback.core.key_codes import KeyCode
from keyfeedback.core.settings_values import SettingsSnapshot

logger = logging.getLogger(__name__)

# Platform ringer modes
RINGER_MODE_SILENT = 0
RINGER_MODE_VIBRATE = 1
RINGER_MODE_NORMAL = 2


class RingerState(Enum):
    NORMAL = "normal"
    SILENT_OR_VIBRATE_ONLY = "silent_or_vibrate_only"

    @classmethod
    def from_ringer_mode(cls, ringer_mode: int) -> "RingerState":
        if ringer_mode == RINGER_MODE_NORMAL:
            return cls.NORMAL
        return cls.SILENT_OR_VIBRATE_ONLY


class SoundVariant(Enum):
    STANDARD = "standard"
    DELETE = "delete"
    RETURN = "return"
    SPACEBAR = "spacebar"


class VibrationKind(Enum):
    SYSTEM_DEFAULT = "system_default"
    EXPLICIT = "explicit"


@dataclass(frozen=True)
class VibrationMode:
    kind: VibrationKind
    duration_ms: Optional[int] = None

    @classmethod
    def system_default(cls) -> "VibrationMode":
        return cls(VibrationKind.SYSTEM_DEFAULT)

    @classmethod
    def explicit(cls, duration_ms: int) -> "VibrationMode":
        return cls(VibrationKind.EXPLICIT, duration_ms)


@dataclass(frozen=True)
class FeedbackDecision:
    play_sound: bool
    sound_variant: SoundVariant
    volume: float
    vibrate: bool
    vibration_mode: Optional[VibrationMode] = None


_SOUND_VARIANTS = {
    KeyCode.CODE_DELETE: SoundVariant.DELETE,
    KeyCode.CODE_ENTER: SoundVariant.RETURN,
    KeyCode.CODE_SPACE: SoundVariant.SPACEBAR,
}


class FeedbackPolicy:
    """
    Combines the cached ringer state with the user's settings.

    The ringer state is cached because querying the platform audio service on
    every key press is expensive. Until the first refresh it stays
    SILENT_OR_VIBRATE_ONLY, so no sound plays before the ringer mode is known.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._ringer_state = RingerState.SILENT_OR_VIBRATE_ONLY

    @property
    def ringer_state(self) -> RingerState:
        with self._lock:
            return self._ringer_state

    def refresh_ringer_state(self, ringer_state: RingerState):
        with self._lock:
            self._ringer_state = ringer_state
        logger.debug(f"Ringer state refreshed: {ringer_state.value}")

    @staticmethod
    def get_sound_variant(key_code) -> SoundVariant:
        return _SOUND_VARIANTS.get(key_code, SoundVariant.STANDARD)

    def is_sound_on(self, settings: SettingsSnapshot) -> bool:
        return settings.sound_enabled and self.ringer_state == RingerState.NORMAL

    def decide(self, key_code, settings: SettingsSnapshot) -> FeedbackDecision:
        """
        Determines the feedback for a key press.

        Args:
            key_code: The code of the pressed key. Unknown codes get the standard click.
            settings: The user's current SettingsSnapshot.

        Returns:
            FeedbackDecision: volume is 0.0 when no sound plays and
            vibration_mode is None when no vibration fires.
        """
        play_sound = self.is_sound_on(settings)
        volume = settings.fx_volume if play_sound else 0.0

        vibrate = settings.vibration_enabled
        vibration_mode = None
        if vibrate:
            if settings.vibration_duration_ms < 0:
                # Platform keypress haptic, bypassing the global haptics switch
                vibration_mode = VibrationMode.system_default()
            else:
                vibration_mode = VibrationMode.explicit(settings.vibration_duration_ms)

        return FeedbackDecision(
            play_sound=play_sound,
            sound_variant=self.get_sound_variant(key_code),
            volume=volume,
            vibrate=vibrate,
            vibration_mode=vibration_mode,
        )
