from .base import BaseNotifier
from .notifiers import DesktopNotifier, LogNotifier, get_notifier

__all__ = ["BaseNotifier", "DesktopNotifier", "LogNotifier", "get_notifier"]
