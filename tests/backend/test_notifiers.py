"""backend.notifyのテスト"""

from unittest.mock import MagicMock, patch

from backend.notify import DesktopNotifier, LogNotifier, get_notifier
from config.settings import NotifierType


class TestDesktopNotifier:
    """DesktopNotifierのテスト"""

    @patch("backend.notify.notifiers.notification")
    def test_notify_calls_plyer(self, mock_notification):
        """plyerのnotification.notifyが呼ばれる"""
        notifier = DesktopNotifier()

        assert notifier.notify("Extraction Alert", "Gear up.") is True

        mock_notification.notify.assert_called_once()
        kwargs = mock_notification.notify.call_args.kwargs
        assert kwargs["title"] == "Extraction Alert"
        assert kwargs["message"] == "Gear up."
        assert kwargs["timeout"] == 10

    @patch("backend.notify.notifiers.notification")
    def test_notify_returns_false_without_backend(self, mock_notification):
        """通知バックエンドがない環境ではFalseを返す (例外にしない)"""
        mock_notification.notify.side_effect = NotImplementedError("no backend")
        notifier = DesktopNotifier()

        assert notifier.notify("Extraction Alert", "Gear up.") is False

    def test_permission_follows_setting(self):
        """許可は設定値に従う"""
        assert DesktopNotifier(allowed=True).request_permission() is True
        assert DesktopNotifier(allowed=False).request_permission() is False


class TestLogNotifier:
    """LogNotifierのテスト"""

    def test_notify_records_message(self):
        """送信内容が記録される"""
        notifier = LogNotifier()

        assert notifier.notify("title", "message") is True
        assert notifier.sent == [("title", "message")]

    def test_permission_denied(self):
        """allowed=Falseなら許可されない"""
        assert LogNotifier(allowed=False).request_permission() is False


class TestGetNotifier:
    """get_notifier関数のテスト"""

    def _settings(self, notifier_type, allowed=True):
        settings = MagicMock()
        settings.NOTIFIER = notifier_type
        settings.ALLOW_NOTIFICATIONS = allowed
        return settings

    def test_log_notifier(self):
        notifier = get_notifier(self._settings(NotifierType.LOG))
        assert isinstance(notifier, LogNotifier)

    def test_desktop_notifier(self):
        notifier = get_notifier(self._settings(NotifierType.DESKTOP, allowed=False))
        assert isinstance(notifier, DesktopNotifier)
        assert notifier.request_permission() is False
