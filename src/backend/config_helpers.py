"""設定取得ヘルパー関数

環境変数やPydantic Settingsから各種設定値を取得する関数群。
モジュールレベルでSettingsをシングルトン化し、効率的にアクセス。
"""

from config.settings import LogLevel, NormalizationMode, Settings, Theme

# 設定のシングルトンインスタンス（モジュールレベルで1回だけ初期化）
_settings = Settings()


def get_settings() -> Settings:
    """設定インスタンスを取得

    Returns:
        Settings: モジュールレベルでキャッシュされた設定
    """
    return _settings


def get_refresh_interval() -> float:
    """フロントエンドのリフレッシュ間隔（秒）を取得

    Returns:
        float: リフレッシュ間隔（秒）
    """
    return _settings.REFRESH_INTERVAL


def get_log_level() -> LogLevel:
    """ログレベルを取得

    Returns:
        LogLevel: ログレベル (Enum)
    """
    return _settings.LOG_LEVEL


def get_theme() -> Theme:
    """UIテーマを取得"""
    return _settings.THEME


def get_kiosk_mode() -> bool:
    """Kioskモード設定を取得

    Returns:
        bool: Kioskモードが有効ならTrue
    """
    return _settings.KIOSK_MODE


def get_baseline_hours() -> int:
    """規定勤務時間（時間）を取得"""
    return _settings.BASELINE_HOURS


def get_normalization_mode() -> NormalizationMode:
    """退勤時刻の正規化方式を取得"""
    return _settings.NORMALIZATION_MODE


def get_notify_lead_minutes() -> int:
    """通知のリード時間（分）を取得"""
    return _settings.NOTIFY_LEAD_MINUTES


def get_input_max_length() -> int:
    """入力欄の最大文字数を取得"""
    return _settings.INPUT_MAX_LENGTH
