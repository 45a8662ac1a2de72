from .settings import LogLevel, NormalizationMode, NotifierType, Settings, Theme

__all__ = ["LogLevel", "NormalizationMode", "NotifierType", "Settings", "Theme"]
