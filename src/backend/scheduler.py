"""退勤通知スケジューラ

計算結果の退勤時刻からリード時間(デフォルト5分)前に1回だけ通知を出す。

- 退勤時刻が現在時刻より前なら翌日の同時刻として扱う
- 通知時刻を既に過ぎていれば即時通知
- 予約済みのタイマーは再予約・キャンセル時に必ず停止する
"""

import threading
from functools import partial
from datetime import datetime, time, timedelta
from typing import Any, Callable

from backend.notify.base import BaseNotifier
from backend.logging import notify_logger as logger
from schemas import AlertPlan, CalculationResult, SchedulerStatus

DEFAULT_LEAD_MINUTES = 5

TimerFactory = Callable[[float, Callable[[], None]], Any]
Clock = Callable[[], datetime]


class InvalidResultError(ValueError):
    """入力のない計算結果で通知予約しようとした"""

    pass


class NotificationPermissionError(Exception):
    """通知の許可が得られなかった (再試行しない)"""

    pass


def resolve_target(hours: int, minutes: int, now: datetime) -> datetime:
    """退勤時刻を日時に変換する

    今日の日付に時・分を合わせ、現在時刻より前なら翌日に繰り越す。
    時・分が範囲外の場合は繰り上がる (例: 25時 → 翌日1時)。

    Args:
        hours: 時
        minutes: 分
        now: 現在日時

    Returns:
        datetime: 退勤予定日時
    """
    midnight = datetime.combine(now.date(), time())
    target = midnight + timedelta(hours=hours, minutes=minutes)
    if target < now:
        target += timedelta(days=1)
    return target


def plan_alert(
    result: CalculationResult,
    now: datetime,
    lead_minutes: int = DEFAULT_LEAD_MINUTES,
) -> AlertPlan:
    """通知スケジュールを計画する

    Args:
        result: 計算結果
        now: 現在日時
        lead_minutes: 退勤時刻の何分前に通知するか

    Returns:
        AlertPlan: 通知計画

    Raises:
        InvalidResultError: is_valid=Falseの計算結果が渡された場合
    """
    if not result.is_valid:
        raise InvalidResultError("Cannot schedule an alert for an empty calculation")

    target = resolve_target(result.hours, result.minutes, now)
    notify_at = target - timedelta(minutes=lead_minutes)
    delay = (notify_at - now).total_seconds()

    return AlertPlan(
        target=target,
        notify_at=notify_at,
        delay_seconds=delay,
        immediate=delay <= 0,
    )


def _default_timer(delay: float, callback: Callable[[], None]) -> threading.Timer:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    return timer


class AlertScheduler:
    """退勤通知のワンショットタイマーを保持するスケジューラ

    同時に予約できる通知は1件のみ。再予約すると前回のタイマーは停止される。

    使用例:
        >>> scheduler = AlertScheduler(LogNotifier())
        >>> plan = scheduler.arm(result)
        >>> scheduler.cancel()
    """

    def __init__(
        self,
        notifier: BaseNotifier,
        lead_minutes: int = DEFAULT_LEAD_MINUTES,
        timer_factory: TimerFactory = _default_timer,
        clock: Clock = datetime.now,
    ) -> None:
        self._notifier = notifier
        self._lead_minutes = lead_minutes
        self._timer_factory = timer_factory
        self._clock = clock
        self._lock = threading.Lock()

        self._timer: Any = None
        self._plan: AlertPlan | None = None
        self._status = SchedulerStatus.IDLE
        self._result: CalculationResult | None = None
        # 予約ごとに進める世代番号。古いタイマーのコールバックを識別する
        self._generation = 0

    @property
    def lead_minutes(self) -> int:
        return self._lead_minutes

    def arm(
        self, result: CalculationResult, now: datetime | None = None
    ) -> AlertPlan:
        """通知を予約する

        Args:
            result: 計算結果 (is_valid=Trueのみ受け付ける)
            now: 現在日時 (Noneの場合はclockから取得)

        Returns:
            AlertPlan: 通知計画

        Raises:
            InvalidResultError: 入力のない計算結果の場合
            NotificationPermissionError: 通知が許可されなかった場合
        """
        if now is None:
            now = self._clock()
        plan = plan_alert(result, now, self._lead_minutes)

        if not self._notifier.request_permission():
            raise NotificationPermissionError(
                "Notification permission denied. Cannot arm release alert."
            )

        with self._lock:
            self._cancel_timer()
            self._generation += 1
            self._plan = plan
            self._result = result

            if plan.immediate:
                logger.info(
                    f"Release at {result.formatted} is within {self._lead_minutes} min, "
                    "notifying immediately"
                )
                self._status = SchedulerStatus.FIRED
            else:
                self._timer = self._timer_factory(
                    plan.delay_seconds, partial(self._fire, self._generation)
                )
                self._timer.start()
                self._status = SchedulerStatus.ARMED
                logger.info(
                    f"Alert armed for {plan.notify_at.isoformat(timespec='seconds')} "
                    f"(release {result.formatted}, delay={plan.delay_seconds:.0f}s)"
                )

        if plan.immediate:
            self._notifier.notify(
                "Extraction Imminent",
                f"Your time will complete in less than {self._lead_minutes} minutes. "
                "Prepare for egress.",
            )

        return plan

    def _fire(self, generation: int) -> None:
        """タイマー満了時のコールバック

        cancel()が間に合わず待機を抜けた旧タイマーは、世代番号が一致しないので何もしない。
        """
        with self._lock:
            if generation != self._generation or self._status is not SchedulerStatus.ARMED:
                logger.debug(f"Ignoring stale alert timer (generation={generation})")
                return
            self._status = SchedulerStatus.FIRED
            self._timer = None

        self._notifier.notify(
            "Extraction Alert",
            f"Your time will complete after {self._lead_minutes} minutes. Gear up.",
        )

    def _cancel_timer(self) -> None:
        """予約中のタイマーを停止 (ロック取得済みで呼ぶこと)"""
        if self._timer is not None:
            self._timer.cancel()
            logger.debug("Previous alert timer cancelled")
            self._timer = None

    def cancel(self) -> bool:
        """予約中の通知を取り消す

        Returns:
            bool: 予約中の通知があり取り消した場合True
        """
        with self._lock:
            was_armed = self._status is SchedulerStatus.ARMED
            self._cancel_timer()
            self._generation += 1
            self._status = SchedulerStatus.IDLE
            self._plan = None
            self._result = None

        if was_armed:
            logger.info("Alert cancelled")
        return was_armed

    def status(self) -> dict[str, Any]:
        """スケジューラ状態を取得

        Returns:
            dict: 状態情報
        """
        with self._lock:
            plan = self._plan
            return {
                "status": self._status.value,
                "formatted": self._result.formatted if self._result else None,
                "target": plan.target.isoformat() if plan else None,
                "notify_at": plan.notify_at.isoformat() if plan else None,
                "lead_minutes": self._lead_minutes,
            }
