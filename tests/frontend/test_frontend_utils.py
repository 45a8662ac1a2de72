"""frontend.utilsのテスト"""

from datetime import datetime

import pytest

from frontend.utils import (
    calculate_clock_angles,
    calculate_sync_rate,
    format_time_hhmm,
    minutes_until_release,
)
from schemas import CalculationInputs, CalculationResult


def make_result(hours: int, minutes: int, is_valid: bool = True) -> CalculationResult:
    return CalculationResult(
        hours=hours,
        minutes=minutes,
        formatted=f"{hours:02d}:{minutes:02d}",
        is_valid=is_valid,
    )


class TestCalculateSyncRate:
    """calculate_sync_rate関数のテスト"""

    def test_half_day(self):
        """4時間で50%"""
        assert calculate_sync_rate(CalculationInputs(completed_hours="4")) == 50.0

    def test_with_minutes(self):
        """分も含めて計算"""
        inputs = CalculationInputs(completed_hours="2", completed_minutes="24")
        assert calculate_sync_rate(inputs) == pytest.approx(30.0)

    def test_clamped_to_100(self):
        """規定時間超過でも100%"""
        assert calculate_sync_rate(CalculationInputs(completed_hours="12")) == 100.0

    def test_clamped_to_0(self):
        """負の入力でも0%"""
        assert calculate_sync_rate(CalculationInputs(completed_hours="-3")) == 0.0

    def test_empty_is_zero(self):
        assert calculate_sync_rate(CalculationInputs()) == 0.0

    def test_custom_baseline(self):
        """規定時間を変更できる"""
        inputs = CalculationInputs(completed_hours="5")
        assert calculate_sync_rate(inputs, baseline_hours=10) == 50.0


class TestCalculateClockAngles:
    """calculate_clock_angles関数のテスト"""

    @pytest.mark.parametrize(
        "hours, minutes, expected",
        [
            (15, 30, (105.0, 180.0)),
            (0, 0, (0.0, 0.0)),
            (12, 0, (0.0, 0.0)),
            (9, 45, (292.5, 270.0)),
            (6, 0, (180.0, 0.0)),
        ],
    )
    def test_angles(self, hours, minutes, expected):
        assert calculate_clock_angles(make_result(hours, minutes)) == expected

    def test_none_result(self):
        """計算結果がなければ両針0度"""
        assert calculate_clock_angles(None) == (0.0, 0.0)

    def test_invalid_result(self):
        """入力なしの計算結果も両針0度"""
        assert calculate_clock_angles(make_result(8, 0, is_valid=False)) == (0.0, 0.0)


class TestFormatTimeHhmm:
    """format_time_hhmm関数のテスト"""

    def test_format_time_basic(self):
        assert format_time_hhmm(125) == "02時間05分"

    def test_format_time_minutes_only(self):
        assert format_time_hhmm(45) == "00時間45分"

    def test_format_time_negative_is_zero(self):
        """負の値は0として扱う"""
        assert format_time_hhmm(-10) == "00時間00分"


class TestMinutesUntilRelease:
    """minutes_until_release関数のテスト"""

    NOW = datetime(2025, 6, 2, 12, 0, 30)

    def test_later_today(self):
        assert minutes_until_release(make_result(13, 0), self.NOW) == 59

    def test_tomorrow(self):
        """過ぎた時刻は翌日までの分数"""
        assert minutes_until_release(make_result(11, 0), self.NOW) == 22 * 60 + 59
