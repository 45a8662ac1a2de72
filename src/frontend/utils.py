"""フロントエンドユーティリティ関数

画面表示に関する汎用的なヘルパー関数を提供する。
"""

from datetime import datetime

from backend.calculators import DEFAULT_BASELINE_HOURS, parse_field
from backend.scheduler import resolve_target
from schemas import CalculationInputs, CalculationResult


def calculate_sync_rate(
    inputs: CalculationInputs, baseline_hours: int = DEFAULT_BASELINE_HOURS
) -> float:
    """勤務済み時間の規定時間に対する割合 (シンクロ率) を計算

    Args:
        inputs: 入力スナップショット (勤務済み時間のみ使用)
        baseline_hours: 規定勤務時間 (時間)

    Returns:
        float: 0.0-100.0 の割合 (%)

    Examples:
        >>> calculate_sync_rate(CalculationInputs(completed_hours="4"))
        50.0
    """
    total_minutes = parse_field(inputs.completed_hours) * 60 + parse_field(
        inputs.completed_minutes
    )
    target_minutes = baseline_hours * 60
    return min(100.0, max(0.0, total_minutes / target_minutes * 100))


def calculate_clock_angles(result: CalculationResult | None) -> tuple[float, float]:
    """アナログ時計の針の角度を計算

    Args:
        result: 計算結果 (Noneまたは無効な場合は両針とも0度)

    Returns:
        tuple[float, float]: (短針の角度, 長針の角度) 12時方向を0度とした時計回り

    Examples:
        >>> calculate_clock_angles(CalculationResult(
        ...     hours=15, minutes=30, formatted="15:30", is_valid=True))
        (105.0, 180.0)
    """
    if result is None or not result.is_valid:
        return (0.0, 0.0)
    hour_angle = (result.hours % 12) / 12 * 360 + result.minutes / 60 * 30
    minute_angle = result.minutes / 60 * 360
    return (hour_angle, minute_angle)


def format_time_hhmm(minutes: int) -> str:
    """分を「HH時間MM分」形式にフォーマット

    Args:
        minutes: 分数 (負の値は0として扱う)

    Returns:
        str: フォーマットされた時間文字列

    Examples:
        >>> format_time_hhmm(125)
        '02時間05分'
        >>> format_time_hhmm(45)
        '00時間45分'
    """
    minutes = max(0, minutes)
    hours = minutes // 60
    mins = minutes % 60
    return f"{hours:02d}時間{mins:02d}分"


def minutes_until_release(result: CalculationResult, now: datetime) -> int:
    """退勤時刻までの残り分数を計算

    退勤時刻が現在時刻より前なら翌日の同時刻までの分数になる。

    Args:
        result: 計算結果
        now: 現在日時

    Returns:
        int: 残り分数 (切り捨て)
    """
    target = resolve_target(result.hours, result.minutes, now)
    return int((target - now).total_seconds() // 60)
