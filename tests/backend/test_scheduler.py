"""backend.schedulerのテスト"""

from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from backend.notify import LogNotifier
from backend.scheduler import (
    AlertScheduler,
    InvalidResultError,
    NotificationPermissionError,
    plan_alert,
    resolve_target,
)
from schemas import CalculationResult, SchedulerStatus

NOW = datetime(2025, 6, 2, 12, 0, 0)


def make_result(hours: int, minutes: int, is_valid: bool = True) -> CalculationResult:
    return CalculationResult(
        hours=hours,
        minutes=minutes,
        formatted=f"{hours:02d}:{minutes:02d}",
        is_valid=is_valid,
    )


class FakeTimer:
    """threading.Timerの代わりに開始・停止だけを記録するタイマー"""

    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True


class FakeTimerFactory:
    def __init__(self):
        self.timers: list[FakeTimer] = []

    def __call__(self, delay, callback):
        timer = FakeTimer(delay, callback)
        self.timers.append(timer)
        return timer


class TestResolveTarget:
    """resolve_target関数のテスト"""

    def test_future_time_is_today(self):
        """現在より後の時刻は今日"""
        assert resolve_target(17, 15, NOW) == datetime(2025, 6, 2, 17, 15)

    def test_past_time_rolls_to_tomorrow(self):
        """現在より前の時刻は翌日"""
        assert resolve_target(9, 0, NOW) == datetime(2025, 6, 3, 9, 0)

    def test_same_time_is_today(self):
        """現在時刻ちょうどは繰り越さない"""
        assert resolve_target(12, 0, NOW) == NOW

    def test_out_of_range_values_carry_over(self):
        """範囲外の分は時に繰り上がる"""
        assert resolve_target(16, -39, NOW) == datetime(2025, 6, 2, 15, 21)


class TestPlanAlert:
    """plan_alert関数のテスト"""

    def test_plan_five_minutes_before_release(self):
        """通知時刻は退勤時刻の5分前"""
        plan = plan_alert(make_result(17, 15), NOW)

        assert plan.target == datetime(2025, 6, 2, 17, 15)
        assert plan.notify_at == datetime(2025, 6, 2, 17, 10)
        assert plan.delay_seconds == (5 * 60 + 10) * 60
        assert plan.immediate is False

    def test_plan_immediate_within_lead_time(self):
        """退勤まで5分未満なら即時通知"""
        plan = plan_alert(make_result(12, 3), NOW)

        assert plan.immediate is True
        assert plan.delay_seconds < 0

    def test_plan_immediate_at_exact_lead_time(self):
        """ちょうど5分前なら即時通知"""
        plan = plan_alert(make_result(12, 5), NOW)

        assert plan.delay_seconds == 0
        assert plan.immediate is True

    def test_plan_past_release_schedules_tomorrow(self):
        """退勤時刻を過ぎていれば翌日の5分前に予約"""
        plan = plan_alert(make_result(11, 0), NOW)

        assert plan.target == datetime(2025, 6, 3, 11, 0)
        assert plan.immediate is False
        assert plan.delay_seconds == timedelta(hours=22, minutes=55).total_seconds()

    def test_plan_custom_lead_minutes(self):
        """リード時間を変更できる"""
        plan = plan_alert(make_result(13, 0), NOW, lead_minutes=15)

        assert plan.notify_at == datetime(2025, 6, 2, 12, 45)

    def test_plan_invalid_result_raises(self):
        """入力のない計算結果はInvalidResultError"""
        with pytest.raises(InvalidResultError):
            plan_alert(make_result(8, 0, is_valid=False), NOW)


class TestAlertScheduler:
    """AlertSchedulerクラスのテスト"""

    @pytest.fixture
    def notifier(self):
        notifier = MagicMock()
        notifier.request_permission.return_value = True
        notifier.notify.return_value = True
        return notifier

    @pytest.fixture
    def timers(self):
        return FakeTimerFactory()

    @pytest.fixture
    def scheduler(self, notifier, timers):
        return AlertScheduler(notifier, timer_factory=timers, clock=lambda: NOW)

    def test_arm_starts_timer(self, scheduler, notifier, timers):
        """予約するとタイマーが開始され、通知はまだ出ない"""
        plan = scheduler.arm(make_result(17, 15))

        assert len(timers.timers) == 1
        assert timers.timers[0].started is True
        assert timers.timers[0].delay == plan.delay_seconds
        assert scheduler.status()["status"] == SchedulerStatus.ARMED.value
        notifier.notify.assert_not_called()

    def test_timer_fire_sends_alert(self, scheduler, notifier, timers):
        """タイマー満了で通知が1回出る"""
        scheduler.arm(make_result(17, 15))

        timers.timers[0].callback()

        notifier.notify.assert_called_once_with(
            "Extraction Alert",
            "Your time will complete after 5 minutes. Gear up.",
        )
        assert scheduler.status()["status"] == SchedulerStatus.FIRED.value

    def test_timer_fire_twice_notifies_once(self, scheduler, notifier, timers):
        """満了コールバックが重複しても通知は1回"""
        scheduler.arm(make_result(17, 15))

        timers.timers[0].callback()
        timers.timers[0].callback()

        assert notifier.notify.call_count == 1

    def test_arm_immediate_notifies_now(self, scheduler, notifier, timers):
        """退勤まで5分未満なら即時通知し、タイマーは作らない"""
        plan = scheduler.arm(make_result(12, 3))

        assert plan.immediate is True
        assert timers.timers == []
        notifier.notify.assert_called_once_with(
            "Extraction Imminent",
            "Your time will complete in less than 5 minutes. Prepare for egress.",
        )
        assert scheduler.status()["status"] == SchedulerStatus.FIRED.value

    def test_arm_permission_denied(self, notifier, timers):
        """通知が許可されなければ予約しない"""
        notifier.request_permission.return_value = False
        scheduler = AlertScheduler(notifier, timer_factory=timers, clock=lambda: NOW)

        with pytest.raises(NotificationPermissionError):
            scheduler.arm(make_result(17, 15))

        assert timers.timers == []
        notifier.notify.assert_not_called()
        assert scheduler.status()["status"] == SchedulerStatus.IDLE.value

    def test_arm_invalid_result(self, scheduler, notifier, timers):
        """入力のない計算結果は権限確認前に拒否"""
        with pytest.raises(InvalidResultError):
            scheduler.arm(make_result(8, 0, is_valid=False))

        notifier.request_permission.assert_not_called()
        assert timers.timers == []

    def test_rearm_cancels_previous_timer(self, scheduler, timers):
        """再予約すると前回のタイマーは停止される"""
        scheduler.arm(make_result(17, 15))
        scheduler.arm(make_result(18, 0))

        assert len(timers.timers) == 2
        assert timers.timers[0].cancelled is True
        assert timers.timers[1].cancelled is False
        assert scheduler.status()["formatted"] == "18:00"

    def test_superseded_timer_callback_is_ignored(self, scheduler, notifier, timers):
        """再予約前のタイマーが満了しても新しい予約は消費されない

        cancel()が間に合わず待機を抜けたタイマーを想定し、旧コールバックを直接呼ぶ。
        """
        scheduler.arm(make_result(17, 15))
        scheduler.arm(make_result(18, 0))

        timers.timers[0].callback()

        notifier.notify.assert_not_called()
        assert scheduler.status()["status"] == SchedulerStatus.ARMED.value

        timers.timers[1].callback()

        notifier.notify.assert_called_once()
        assert notifier.notify.call_args[0][0] == "Extraction Alert"
        assert scheduler.status()["status"] == SchedulerStatus.FIRED.value

    def test_callback_after_cancel_and_rearm_is_ignored(self, scheduler, notifier, timers):
        """取り消し後に再予約しても、取り消した予約のタイマーは通知しない"""
        scheduler.arm(make_result(17, 15))
        scheduler.cancel()
        scheduler.arm(make_result(18, 0))

        timers.timers[0].callback()

        notifier.notify.assert_not_called()
        assert scheduler.status()["formatted"] == "18:00"

    def test_cancel_stops_timer(self, scheduler, notifier, timers):
        """取り消すとタイマーが止まり、満了しても通知しない"""
        scheduler.arm(make_result(17, 15))

        assert scheduler.cancel() is True
        assert timers.timers[0].cancelled is True

        timers.timers[0].callback()
        notifier.notify.assert_not_called()
        assert scheduler.status()["status"] == SchedulerStatus.IDLE.value

    def test_cancel_when_idle_returns_false(self, scheduler):
        """予約がなければFalse"""
        assert scheduler.cancel() is False

    def test_status_contents(self, scheduler):
        """状態に予約内容が含まれる"""
        scheduler.arm(make_result(17, 15))

        status = scheduler.status()

        assert status["formatted"] == "17:15"
        assert status["target"] == "2025-06-02T17:15:00"
        assert status["notify_at"] == "2025-06-02T17:10:00"
        assert status["lead_minutes"] == 5

    def test_status_when_idle(self, scheduler):
        """未予約時はNone"""
        status = scheduler.status()

        assert status["status"] == "idle"
        assert status["formatted"] is None
        assert status["target"] is None

    def test_custom_lead_minutes_in_message(self, notifier, timers):
        """通知メッセージにリード時間が入る"""
        scheduler = AlertScheduler(
            notifier, lead_minutes=10, timer_factory=timers, clock=lambda: NOW
        )
        scheduler.arm(make_result(17, 15))
        timers.timers[0].callback()

        title, message = notifier.notify.call_args[0]
        assert title == "Extraction Alert"
        assert "10 minutes" in message

    def test_with_log_notifier(self, timers):
        """LogNotifierと組み合わせて送信履歴が残る"""
        notifier = LogNotifier()
        scheduler = AlertScheduler(notifier, timer_factory=timers, clock=lambda: NOW)

        scheduler.arm(make_result(12, 1))

        assert notifier.sent[0][0] == "Extraction Imminent"

    def test_default_timer_is_daemon_and_cancellable(self):
        """デフォルトタイマーで予約・取り消しできる"""
        notifier = MagicMock()
        notifier.request_permission.return_value = True
        scheduler = AlertScheduler(notifier, clock=lambda: NOW)

        scheduler.arm(make_result(17, 15))
        timer = scheduler._timer

        assert timer.daemon is True
        assert scheduler.cancel() is True
        notifier.notify.assert_not_called()
