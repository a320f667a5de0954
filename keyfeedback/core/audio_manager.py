import logging
import os
from typing import Dict, Optional, Set

import pygame

from keyfeedback.core.config_loader import ConfigLoader
from keyfeedback.core.feedback_policy import SoundVariant
from keyfeedback.core.interfaces import IAudioSink
from keyfeedback.paths import get_resource_path

logger = logging.getLogger(__name__)


class AudioManager(IAudioSink):
    """pygame.mixer backed key-click player."""

    def __init__(self):
        self.config = ConfigLoader().get("audio") or {}
        if not isinstance(self.config, dict):
            logger.error(f"audio config must be a mapping, got {type(self.config).__name__}")
            self.config = {}
        self.effects_dir = self.config.get("effects_dir", os.path.join("assets", "effects"))
        self._sounds: Dict[SoundVariant, "pygame.mixer.Sound"] = {}
        self._missing: Set[SoundVariant] = set()

        try:
            pygame.mixer.init()
            pygame.mixer.set_num_channels(self.config.get("mixer_channels", 8))
        except pygame.error as e:
            logger.error(f"Audio init failed: {e}")

    def play_sound_effect(self, variant: SoundVariant, volume: float):
        """Play the key-click for `variant` at `volume` (0.0 - 1.0)."""
        if not pygame.mixer.get_init():
            return

        sound = self._get_sound(variant)
        if sound is None:
            return
        try:
            sound.set_volume(volume)
            channel = pygame.mixer.find_channel(True)
            channel.play(sound)
        except pygame.error as e:
            logger.error(f"Failed to play key-click {variant.value}: {e}")

    def _get_sound(self, variant: SoundVariant) -> Optional["pygame.mixer.Sound"]:
        if variant in self._sounds:
            return self._sounds[variant]
        if variant in self._missing:
            return None

        # Path: resources/assets/effects/keypress-{variant}.wav
        base_path = os.path.join(self.effects_dir, f"keypress-{variant.value}")
        path = self._resolve_audio_path(base_path)
        if not path:
            logger.warning(f"Key-click file not found: {base_path}")
            self._missing.add(variant)
            return None
        try:
            sound = pygame.mixer.Sound(path)
        except pygame.error as e:
            logger.error(f"Failed to load key-click {path}: {e}")
            return None
        self._sounds[variant] = sound
        return sound

    def _resolve_audio_path(self, relative_base):
        for ext in [".wav", ".ogg", ".mp3"]:
            path = get_resource_path(relative_base + ext)
            if os.path.exists(path):
                return path
        return None
