import logging
from typing import Optional

from keyfeedback.core.feedback_policy import VibrationKind, VibrationMode
from keyfeedback.core.interfaces import IHapticSink, IKeyboardView, IVibrator

logger = logging.getLogger(__name__)


class HapticManager(IHapticSink):
    """
    振動フィードバックの実行クラス。
    SYSTEM_DEFAULT はキーボードビューに、EXPLICIT はバイブレーターに委譲する。
    どちらも無ければ何もしない。
    """

    def __init__(self, vibrator: Optional[IVibrator] = None, keyboard_view: Optional[IKeyboardView] = None):
        self.vibrator = vibrator
        self.keyboard_view = keyboard_view

    def set_keyboard_view(self, keyboard_view: Optional[IKeyboardView]):
        self.keyboard_view = keyboard_view

    def vibrate(self, mode: VibrationMode):
        if mode.kind == VibrationKind.SYSTEM_DEFAULT:
            if self.keyboard_view is not None:
                self.keyboard_view.perform_keypress_haptic(ignore_global_setting=True)
            else:
                logger.debug("No keyboard view; skipping system keypress haptic")
        elif self.vibrator is not None:
            self.vibrator.vibrate(mode.duration_ms)
        else:
            logger.debug(f"No vibrator; skipping {mode.duration_ms}ms vibration")
