"""
キー入力フィードバック管理

設計意図:
- 設定・着信モード・キーの意味の組み合わせは FeedbackPolicy に任せる
- このクラスは決定結果を AudioSink / HapticSink に流すだけ
- 着信モード変更の通知は on_ringer_mode_changed で受け取る
"""
import logging
from typing import Optional

from keyfeedback.core.feedback_policy import FeedbackDecision, FeedbackPolicy, RingerState
from keyfeedback.core.interfaces import IAudioSink, IHapticSink, IRingerModeProvider, ISettingsProvider
from keyfeedback.core.key_codes import KeyCode

logger = logging.getLogger(__name__)


class KeyFeedbackManager:
    def __init__(self, settings_provider: ISettingsProvider, audio_sink: IAudioSink,
                 haptic_sink: IHapticSink, ringer_mode_provider: Optional[IRingerModeProvider] = None,
                 policy: Optional[FeedbackPolicy] = None):
        self.settings_provider = settings_provider
        self.audio_sink = audio_sink
        self.haptic_sink = haptic_sink
        self.ringer_mode_provider = ringer_mode_provider
        self.policy = policy or FeedbackPolicy()
        self._ringer_mode_known = False

    def haptic_and_audio_feedback(self, key_code: int) -> FeedbackDecision:
        """キー押下時のフィードバック。振動を先に、クリック音を後に出す。"""
        decision = self.policy.decide(key_code, self.settings_provider.get_settings())
        if decision.vibrate:
            self.haptic_sink.vibrate(decision.vibration_mode)
        if decision.play_sound:
            self.audio_sink.play_sound_effect(decision.sound_variant, decision.volume)
        return decision

    def vibrate(self) -> FeedbackDecision:
        """振動のみ（長押しなど）"""
        decision = self.policy.decide(KeyCode.CODE_UNSPECIFIED, self.settings_provider.get_settings())
        if decision.vibrate:
            self.haptic_sink.vibrate(decision.vibration_mode)
        return decision

    def on_ringer_mode_changed(self, ringer_mode: Optional[int] = None):
        """着信モード変更通知。値が無ければプロバイダに問い合わせる。"""
        if ringer_mode is None:
            self.update_ringer_mode()
            return
        self._apply_ringer_mode(ringer_mode)

    def on_keyboard_view_available(self):
        # 最初にビューが表示された時だけ問い合わせる
        if not self._ringer_mode_known:
            self.update_ringer_mode()

    def update_ringer_mode(self):
        if self.ringer_mode_provider is None:
            logger.warning("No ringer mode provider; keeping current ringer state")
            return
        self._apply_ringer_mode(self.ringer_mode_provider.get_ringer_mode())

    def _apply_ringer_mode(self, ringer_mode: int):
        self.policy.refresh_ringer_state(RingerState.from_ringer_mode(ringer_mode))
        self._ringer_mode_known = True
