"""退勤通知サービス

AlertSchedulerをラップし、APIサーバー内で一元管理するシングルトンサービス。
通知タイマーはAPIプロセスが保持するため、フロントエンドの再描画や
セッションリセットの影響を受けない。
"""

import threading
from datetime import datetime
from typing import Any

from backend.calculators import compute_release_time
from backend.config_helpers import (
    get_baseline_hours,
    get_normalization_mode,
    get_notify_lead_minutes,
    get_settings,
)
from backend.logging import api_logger as logger
from backend.notify import get_notifier
from backend.scheduler import AlertScheduler
from schemas import AlertPlan, CalculationInputs, CalculationResult


class AlertService:
    """退勤通知サービス (シングルトン)

    計算と通知予約をAPIから利用するための窓口。
    """

    _instance: "AlertService | None" = None
    _lock = threading.Lock()
    _initialized: bool = False

    def __new__(cls) -> "AlertService":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        if self._initialized:
            return
        self._initialized = True

        self._settings = get_settings()
        self._baseline_hours = get_baseline_hours()
        self._mode = get_normalization_mode()
        self._scheduler: AlertScheduler | None = None
        self._last_calculated: datetime | None = None

        logger.info(
            f"AlertService initialized (BASELINE_HOURS={self._baseline_hours}, "
            f"NORMALIZATION_MODE={self._mode.value}, "
            f"NOTIFIER={self._settings.NOTIFIER.value})"
        )

    def initialize(self) -> None:
        """通知スケジューラを初期化"""
        if self._scheduler is not None:
            return
        self._scheduler = AlertScheduler(
            get_notifier(self._settings),
            lead_minutes=get_notify_lead_minutes(),
        )
        logger.info("Alert scheduler initialized")

    def shutdown(self) -> bool:
        """予約中の通知を取り消して停止

        Returns:
            bool: 予約中の通知を取り消した場合True
        """
        if self._scheduler is None:
            return False
        cancelled = self._scheduler.cancel()
        logger.info(f"Alert scheduler stopped (cancelled={cancelled})")
        return cancelled

    def is_ready(self) -> bool:
        """通知スケジューラが初期化済みか"""
        return self._scheduler is not None

    def notifications_allowed(self) -> bool:
        """通知が設定で許可されているか"""
        return self._settings.ALLOW_NOTIFICATIONS

    def _require_scheduler(self) -> AlertScheduler:
        if self._scheduler is None:
            raise RuntimeError("AlertService not initialized. Call initialize() first.")
        return self._scheduler

    def calculate(self, inputs: CalculationInputs) -> CalculationResult:
        """退勤時刻を計算

        Args:
            inputs: 入力スナップショット

        Returns:
            CalculationResult: 計算結果
        """
        result = compute_release_time(
            inputs, baseline_hours=self._baseline_hours, mode=self._mode
        )
        self._last_calculated = datetime.now()
        logger.debug(f"Calculated release time: {result.formatted} (valid={result.is_valid})")
        return result

    def arm(self, result: CalculationResult) -> AlertPlan:
        """通知を予約

        Raises:
            InvalidResultError: 入力のない計算結果の場合
            NotificationPermissionError: 通知が許可されなかった場合
        """
        return self._require_scheduler().arm(result)

    def cancel(self) -> bool:
        """予約中の通知を取り消す"""
        return self._require_scheduler().cancel()

    def get_status(self) -> dict[str, Any]:
        """サービス状態を取得

        Returns:
            dict: 状態情報
        """
        if self._scheduler is None:
            status: dict[str, Any] = {
                "status": "idle",
                "formatted": None,
                "target": None,
                "notify_at": None,
                "lead_minutes": get_notify_lead_minutes(),
            }
        else:
            status = self._scheduler.status()

        status["last_calculated"] = (
            self._last_calculated.isoformat() if self._last_calculated else None
        )
        return status


# シングルトンインスタンス
alert_service = AlertService()
