"""
Settings Snapshot Module

Immutable view of the user's key-press feedback preferences.
The feedback policy only reads it; persistence belongs to the host.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)


class InvalidSettingsError(ValueError):
    pass


def _to_duration(value) -> int:
    # Reject bools and fractional values
    if isinstance(value, bool):
        raise InvalidSettingsError(f"keypress_vibration_duration must be an integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise InvalidSettingsError(f"keypress_vibration_duration must be an integer, got {value!r}")
    return int(value)


@dataclass(frozen=True)
class SettingsSnapshot:
    sound_enabled: bool = False
    vibration_enabled: bool = False
    fx_volume: float = 1.0
    # Negative means "use the platform's default keypress haptic"
    vibration_duration_ms: int = -1

    @classmethod
    def from_config(cls, section: Optional[Dict[str, Any]]) -> "SettingsSnapshot":
        """
        Builds a snapshot from the `feedback` config section.

        Args:
            section: dict with `sound_on`, `vibrate_on`, `fx_volume` and
                `keypress_vibration_duration`. Missing keys use defaults.

        Raises:
            InvalidSettingsError: if a value is out of range or mistyped.
        """
        section = section or {}
        if not isinstance(section, Mapping):
            raise InvalidSettingsError(f"feedback section must be a mapping, got {type(section).__name__}")
        try:
            snapshot = cls(
                sound_enabled=section.get("sound_on", False),
                vibration_enabled=section.get("vibrate_on", False),
                fx_volume=float(section.get("fx_volume", 1.0)),
                vibration_duration_ms=_to_duration(section.get("keypress_vibration_duration", -1)),
            )
        except (TypeError, ValueError) as e:
            raise InvalidSettingsError(f"Malformed feedback settings: {e}") from e
        snapshot.validate()
        return snapshot

    def validate(self):
        if not isinstance(self.sound_enabled, bool):
            raise InvalidSettingsError(f"sound_on must be a bool, got {self.sound_enabled!r}")
        if not isinstance(self.vibration_enabled, bool):
            raise InvalidSettingsError(f"vibrate_on must be a bool, got {self.vibration_enabled!r}")
        if not 0.0 <= self.fx_volume <= 1.0:
            raise InvalidSettingsError(f"fx_volume must be within [0, 1], got {self.fx_volume}")


def load_settings(config: Optional[Dict[str, Any]]) -> SettingsSnapshot:
    """設定を読み込む。不正な値ならデフォルト設定に戻す。"""
    try:
        if config is not None and not isinstance(config, Mapping):
            raise InvalidSettingsError(f"config must be a mapping, got {type(config).__name__}")
        return SettingsSnapshot.from_config((config or {}).get("feedback"))
    except InvalidSettingsError as e:
        logger.warning(f"Invalid feedback settings, using defaults: {e}")
        return SettingsSnapshot()
