"""退勤時刻計算エンドポイント

/api/calculate - 入力から退勤時刻を計算
"""

from fastapi import APIRouter

from api.services.alert_service import alert_service
from schemas import CalculationInputs, CalculationResult

router = APIRouter()


@router.post(
    "/calculate", response_model=CalculationResult, response_model_by_alias=True
)
async def calculate(inputs: CalculationInputs) -> CalculationResult:
    """退勤時刻を計算

    不正な数値は0として扱われるため、このエンドポイントは入力内容で失敗しない。

    Args:
        inputs: 4つの入力欄 (completedHrs, completedMins, lastInHrs, lastInMins)

    Returns:
        CalculationResult: 計算結果
    """
    return alert_service.calculate(inputs)
