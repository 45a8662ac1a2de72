from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class AlertState(str, Enum):
    """HUD上の通知予約状態

    Attributes:
        IDLE: 未計算 (入力待ち)
        READY: 計算済み、通知予約可能
        LOCKED: 通知予約済み
    """

    IDLE = "idle"
    READY = "ready"
    LOCKED = "locked"


class SchedulerStatus(str, Enum):
    """バックエンド側スケジューラの状態"""

    IDLE = "idle"
    ARMED = "armed"
    FIRED = "fired"


class AlertPlan(BaseModel):
    """通知スケジュール計画

    退勤時刻からリード時間を引いた通知時刻と、現在時刻からの待機秒数を保持する。

    Attributes:
        target: 退勤予定日時 (過ぎていれば翌日に繰り越し済み)
        notify_at: 通知日時 (target - リード時間)
        delay_seconds: 現在時刻から通知までの秒数 (0以下なら即時通知)
        immediate: 即時通知するかどうか
    """

    target: datetime = Field(..., description="退勤予定日時")
    notify_at: datetime = Field(..., description="通知日時")
    delay_seconds: float = Field(..., description="通知までの待機秒数")
    immediate: bool = Field(..., description="即時通知フラグ")
