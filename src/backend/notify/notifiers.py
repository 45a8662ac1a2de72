"""通知出力の実装

DesktopNotifier: plyerによるOSのデスクトップ通知
LogNotifier: 通知内容をログに出力するだけのダミー (ヘッドレス環境用)
"""

from plyer import notification

from .base import BaseNotifier
from config.settings import NotifierType, Settings
from backend.logging import notify_logger as logger

# デスクトップ通知の表示秒数
NOTIFICATION_TIMEOUT = 10
APP_NAME = "Freedom HUD"


class DesktopNotifier(BaseNotifier):
    """デスクトップ通知 (plyer)

    許可はALLOW_NOTIFICATIONS設定で決まる。
    通知の表示はベストエフォートで、OS側の失敗はログに記録してFalseを返す。
    """

    def __init__(self, allowed: bool = True) -> None:
        self._allowed = allowed

    def request_permission(self) -> bool:
        if not self._allowed:
            logger.warning("Desktop notification permission denied by settings")
        return self._allowed

    def notify(self, title: str, message: str) -> bool:
        try:
            notification.notify(
                title=title,
                message=message,
                app_name=APP_NAME,
                timeout=NOTIFICATION_TIMEOUT,
            )
            logger.info(f"Desktop notification sent: {title}")
            return True
        except (NotImplementedError, OSError, ValueError) as e:
            # plyerは対応バックエンドがない環境でNotImplementedErrorを送出する
            logger.error(f"Failed to send desktop notification: {e}")
            return False


class LogNotifier(BaseNotifier):
    """ログ出力のみの通知 (動作確認用)"""

    def __init__(self, allowed: bool = True) -> None:
        self._allowed = allowed
        self.sent: list[tuple[str, str]] = []

    def request_permission(self) -> bool:
        return self._allowed

    def notify(self, title: str, message: str) -> bool:
        logger.info(f"[ALERT] {title}: {message}")
        self.sent.append((title, message))
        return True


def get_notifier(settings: Settings) -> BaseNotifier:
    """設定に応じた通知出力を生成する

    Args:
        settings: アプリケーション設定 (NOTIFIER, ALLOW_NOTIFICATIONSを使用)

    Returns:
        BaseNotifier: 通知出力インスタンス
    """
    if settings.NOTIFIER == NotifierType.LOG:
        return LogNotifier(allowed=settings.ALLOW_NOTIFICATIONS)
    return DesktopNotifier(allowed=settings.ALLOW_NOTIFICATIONS)
