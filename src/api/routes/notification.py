"""通知予約エンドポイント

GET    /api/notification - 予約状態
POST   /api/notification - 通知予約 (退勤時刻のN分前)
DELETE /api/notification - 予約取り消し
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from api.services.alert_service import alert_service
from backend.logging import api_logger as logger
from backend.scheduler import InvalidResultError, NotificationPermissionError
from schemas import CalculationResult

router = APIRouter()


class ArmResponse(BaseModel):
    """通知予約レスポンス"""

    status: str
    formatted: str
    target: str
    notify_at: str
    delay_seconds: float
    immediate: bool


class NotificationStatusResponse(BaseModel):
    """予約状態レスポンス"""

    status: str
    formatted: str | None
    target: str | None
    notify_at: str | None
    lead_minutes: int
    last_calculated: str | None


class CancelResponse(BaseModel):
    """取り消しレスポンス"""

    cancelled: bool


@router.get("/notification", response_model=NotificationStatusResponse)
async def get_notification_status() -> NotificationStatusResponse:
    """通知予約状態を取得"""
    return NotificationStatusResponse(**alert_service.get_status())


@router.post("/notification", response_model=ArmResponse)
async def arm_notification(result: CalculationResult) -> ArmResponse:
    """通知を予約

    Args:
        result: /api/calculate の計算結果

    Returns:
        ArmResponse: 予約内容

    Raises:
        HTTPException: 入力のない計算結果 (400), 通知が許可されない (403)
    """
    try:
        plan = alert_service.arm(result)
    except InvalidResultError as e:
        logger.warning(f"Rejected alert request: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except NotificationPermissionError as e:
        logger.warning(f"Notification permission denied: {e}")
        raise HTTPException(status_code=403, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to arm notification: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return ArmResponse(
        status="fired" if plan.immediate else "armed",
        formatted=result.formatted,
        target=plan.target.isoformat(),
        notify_at=plan.notify_at.isoformat(),
        delay_seconds=plan.delay_seconds,
        immediate=plan.immediate,
    )


@router.delete("/notification", response_model=CancelResponse)
async def cancel_notification() -> CancelResponse:
    """予約中の通知を取り消す"""
    try:
        return CancelResponse(cancelled=alert_service.cancel())
    except RuntimeError as e:
        logger.error(f"Failed to cancel notification: {e}")
        raise HTTPException(status_code=500, detail=str(e))
