import os
from enum import Enum
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"

_TRUTHY = ("1", "true", "yes", "on")


class Theme(str, Enum):
    """HUDの配色 (dark: 黒背景シアン / light: 白背景)"""

    DARK = "dark"
    LIGHT = "light"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class NormalizationMode(str, Enum):
    """退勤時刻の正規化方式

    Attributes:
        SINGLE_STEP: 分の繰り下げ1回・日付の折り返し1回のみ (従来動作)
        MODULAR: 合計分数から剰余で正規化 (範囲外入力でも常に00:00-23:59)
    """

    SINGLE_STEP = "single_step"
    MODULAR = "modular"


class NotifierType(str, Enum):
    """通知の出力先

    Attributes:
        DESKTOP: デスクトップ通知 (plyer)
        LOG: ログ出力のみ (ヘッドレス環境・動作確認用)
    """

    DESKTOP = "desktop"
    LOG = "log"


def _debug_log_requested() -> bool:
    """DEBUG_LOG環境変数が真値か"""
    return os.getenv("DEBUG_LOG", "").lower() in _TRUTHY


def _require_env_file(overrides: dict[str, Any]) -> None:
    """上書き指定なしで.envが無ければ起動させない"""
    if overrides or os.path.exists(ENV_FILE):
        return
    raise FileNotFoundError(
        f"\n❌ {ENV_FILE} not found.\n"
        f"Create it from the template before starting:\n"
        f"  cp .env.example {ENV_FILE}  (Linux/Mac)\n"
        f"  Copy-Item .env.example {ENV_FILE}  (Windows)\n"
    )


class Settings(BaseSettings):
    """退勤時刻HUDの設定

    .env と環境変数から読み込む (環境変数が優先)。
    キーワード引数を渡した場合は.envが無くても生成できる (テスト用)。

    Attributes:
        API_HOST, API_PORT: バックエンドAPIの待受先
        REFRESH_INTERVAL: 通知予約中のHUD自動更新間隔 (秒)
        LOG_LEVEL: 全ロガー共通のレベル。DEBUG_LOG=true でDEBUGに切替
        THEME: HUDの配色
        KIOSK_MODE: ランチャーがChromiumを全画面で開くか
        FRONTEND_API_TIMEOUT: HUDからAPIへのリクエストタイムアウト (秒)
        BASELINE_HOURS: 1日の規定勤務時間 (時間)
        NORMALIZATION_MODE: 退勤時刻の正規化方式
        INPUT_MAX_LENGTH: 入力欄の最大文字数
        NOTIFY_LEAD_MINUTES: 退勤時刻の何分前に通知するか
        NOTIFIER: 通知の出力先
        ALLOW_NOTIFICATIONS: Falseなら通知予約は常に権限拒否になる
    """

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API / HUD
    API_HOST: str = "127.0.0.1"
    API_PORT: int = Field(default=8000, gt=0, le=65535)
    FRONTEND_API_TIMEOUT: float = Field(default=3.0, ge=1.0, le=30.0)
    REFRESH_INTERVAL: float = Field(default=30.0, ge=1.0, le=600.0)
    THEME: Theme = Theme.DARK
    KIOSK_MODE: bool = False
    LOG_LEVEL: LogLevel = LogLevel.INFO

    # 退勤時刻計算
    BASELINE_HOURS: int = Field(default=8, ge=1, le=23)
    NORMALIZATION_MODE: NormalizationMode = NormalizationMode.SINGLE_STEP
    INPUT_MAX_LENGTH: int = Field(default=2, ge=1, le=4)

    # 通知
    NOTIFY_LEAD_MINUTES: int = Field(default=5, ge=0, le=60)
    NOTIFIER: NotifierType = NotifierType.DESKTOP
    ALLOW_NOTIFICATIONS: bool = True

    def __init__(self, **overrides: Any) -> None:
        _require_env_file(overrides)

        # LOG_LEVELの明示指定 (引数・環境変数) はDEBUG_LOGより優先
        explicit_level = "LOG_LEVEL" in overrides or "LOG_LEVEL" in os.environ
        if not explicit_level and _debug_log_requested():
            overrides["LOG_LEVEL"] = LogLevel.DEBUG

        super().__init__(**overrides)
