"""システム関連エンドポイント

/api/shutdown - ランチャーからの停止要求
"""

import asyncio
import os
import signal

from fastapi import APIRouter, BackgroundTasks
from pydantic import BaseModel

from api.services.alert_service import alert_service
from backend.logging import api_logger as logger

router = APIRouter()

# レスポンス送信からSIGTERMまでの待ち時間 (秒)
SHUTDOWN_DELAY = 0.5


class ShutdownResponse(BaseModel):
    """シャットダウンレスポンス"""

    status: str
    cancelled_alert: bool
    message: str


async def _terminate_self() -> None:
    await asyncio.sleep(SHUTDOWN_DELAY)
    logger.info("Sending SIGTERM to self")
    os.kill(os.getpid(), signal.SIGTERM)


@router.post("/shutdown", response_model=ShutdownResponse)
async def shutdown_server(background_tasks: BackgroundTasks) -> ShutdownResponse:
    """予約中の通知を取り消し、レスポンス後にAPIプロセスを終了する

    Note:
        このエンドポイント呼び出し後、サーバーは停止する
    """
    logger.info("Shutdown requested via API")
    cancelled = alert_service.shutdown()
    background_tasks.add_task(_terminate_self)

    message = (
        "シャットダウンを開始しました。予約中の通知は取り消されました。"
        if cancelled
        else "シャットダウンを開始しました。"
    )
    return ShutdownResponse(
        status="shutting_down", cancelled_alert=cancelled, message=message
    )
