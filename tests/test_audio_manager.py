import unittest
from unittest.mock import MagicMock, patch
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Mock pygame before importing the audio manager
mock_sys_modules = {'pygame': MagicMock(), 'pygame.mixer': MagicMock()}
with patch.dict('sys.modules', mock_sys_modules):
    from keyfeedback.core.audio_manager import AudioManager
    from keyfeedback.core.feedback_policy import SoundVariant
    import keyfeedback.core.audio_manager
# patch.dict drops modules imported inside it; keep the pygame-mocked module
# registered so patch("keyfeedback.core.audio_manager...") targets it.
sys.modules['keyfeedback.core.audio_manager'] = keyfeedback.core.audio_manager


class FakePygameError(Exception):
    pass


class TestAudioManager(unittest.TestCase):
    def setUp(self):
        self.mock_pygame = keyfeedback.core.audio_manager.pygame
        self.mock_pygame.reset_mock()
        self.mock_pygame.error = FakePygameError
        self.mock_pygame.mixer.init.side_effect = None
        self.mock_pygame.mixer.get_init.return_value = True

    def test_plays_variant_with_volume(self):
        audio = AudioManager()
        with patch("keyfeedback.core.audio_manager.os.path.exists", return_value=True):
            audio.play_sound_effect(SoundVariant.DELETE, 0.5)

        path = self.mock_pygame.mixer.Sound.call_args[0][0]
        self.assertTrue(path.endswith(os.path.join("effects", "keypress-delete.wav")))
        sound = self.mock_pygame.mixer.Sound.return_value
        sound.set_volume.assert_called_once_with(0.5)
        self.mock_pygame.mixer.find_channel.return_value.play.assert_called_once_with(sound)

    def test_sounds_are_cached(self):
        audio = AudioManager()
        with patch("keyfeedback.core.audio_manager.os.path.exists", return_value=True):
            audio.play_sound_effect(SoundVariant.STANDARD, 1.0)
            audio.play_sound_effect(SoundVariant.STANDARD, 0.2)
        self.mock_pygame.mixer.Sound.assert_called_once()

    def test_noop_without_mixer(self):
        audio = AudioManager()
        self.mock_pygame.mixer.get_init.return_value = False
        audio.play_sound_effect(SoundVariant.RETURN, 1.0)
        self.mock_pygame.mixer.Sound.assert_not_called()

    def test_missing_file(self):
        audio = AudioManager()
        with patch("keyfeedback.core.audio_manager.os.path.exists", return_value=False):
            audio.play_sound_effect(SoundVariant.SPACEBAR, 1.0)
        self.mock_pygame.mixer.Sound.assert_not_called()

    def test_missing_file_warned_once(self):
        audio = AudioManager()
        with patch("keyfeedback.core.audio_manager.os.path.exists", return_value=False) as exists:
            with self.assertLogs("keyfeedback.core.audio_manager", level="WARNING") as logs:
                audio.play_sound_effect(SoundVariant.DELETE, 1.0)
                audio.play_sound_effect(SoundVariant.DELETE, 1.0)
                audio.play_sound_effect(SoundVariant.DELETE, 1.0)
        self.assertEqual(len(logs.output), 1)
        self.assertEqual(exists.call_count, 3)
        self.mock_pygame.mixer.Sound.assert_not_called()

    def test_non_mapping_audio_config(self):
        with patch("keyfeedback.core.audio_manager.ConfigLoader") as loader_cls:
            loader_cls.return_value.get.return_value = ["effects_dir"]
            with self.assertLogs("keyfeedback.core.audio_manager", level="ERROR"):
                audio = AudioManager()
        self.assertEqual(audio.config, {})
        self.mock_pygame.mixer.set_num_channels.assert_called_once_with(8)

    def test_init_failure_is_logged(self):
        self.mock_pygame.mixer.init.side_effect = FakePygameError("no audio device")
        with self.assertLogs("keyfeedback.core.audio_manager", level="ERROR"):
            AudioManager()


if __name__ == '__main__':
    unittest.main()
