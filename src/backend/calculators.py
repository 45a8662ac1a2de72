"""退勤時刻計算ロジック

勤務済み時間と最終入室時刻から退勤時刻(規定時間を満たす時刻)を計算する関数群。
入力は画面の文字列をそのまま受け取り、例外を送出しない全域関数として実装。
"""

import re

from config.settings import NormalizationMode
from schemas import CalculationInputs, CalculationResult

DEFAULT_BASELINE_HOURS = 8
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24

# 先頭の空白を読み飛ばし、符号と連続するASCII数字だけを取り出す (全角数字は解釈しない)
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_field(raw: str) -> int:
    """入力欄の文字列を整数に変換する

    先頭の整数部分のみを解釈し、解釈できない場合は0を返す。

    Args:
        raw: 入力欄の文字列

    Returns:
        int: 解釈した整数 (空文字・数字なしの場合は0)

    Examples:
        >>> parse_field("12abc")
        12
        >>> parse_field("")
        0
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return 0
    return int(match.group(1))


def compute_release_time(
    inputs: CalculationInputs,
    baseline_hours: int = DEFAULT_BASELINE_HOURS,
    mode: NormalizationMode = NormalizationMode.SINGLE_STEP,
) -> CalculationResult:
    """退勤時刻を計算する

    残り時間 (規定時間 - 勤務済み時間) を最終入室時刻に加算して退勤時刻を求める。

    Args:
        inputs: 入力スナップショット
        baseline_hours: 規定勤務時間 (時間)
        mode: 正規化方式
            SINGLE_STEP: 分の繰り下げ・日付の折り返しを各1回だけ行う。
                範囲外の入力 (分に99など) では分が0-59に収まらないことがある。
            MODULAR: 合計分数を1日の分数で剰余をとって正規化する。

    Returns:
        CalculationResult: 計算結果 (is_validは入力の有無のみを示す)

    Examples:
        >>> compute_release_time(CalculationInputs(
        ...     completed_hours="1", completed_minutes="45",
        ...     last_entry_hours="10", last_entry_minutes="0",
        ... )).formatted
        '16:15'
    """
    comp_h, comp_m, last_h, last_m = (parse_field(v) for v in inputs.raw_fields())

    # 残り時間 (分は0以下になる)
    remain_h = baseline_hours - comp_h
    remain_m = 0 - comp_m

    if mode is NormalizationMode.MODULAR:
        total = (remain_h + last_h) * MINUTES_PER_HOUR + remain_m + last_m
        total %= HOURS_PER_DAY * MINUTES_PER_HOUR
        hours, minutes = divmod(total, MINUTES_PER_HOUR)
    else:
        hours = remain_h + last_h
        minutes = remain_m + last_m

        if minutes < 0:
            hours -= 1
            minutes += MINUTES_PER_HOUR

        if hours < 0:
            hours += HOURS_PER_DAY
        if hours >= HOURS_PER_DAY:
            hours -= HOURS_PER_DAY

    return CalculationResult(
        hours=hours,
        minutes=minutes,
        formatted=f"{hours:02d}:{minutes:02d}",
        is_valid=inputs.has_any_input,
    )
