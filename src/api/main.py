"""FastAPI メインアプリケーション

退勤時刻の計算と退勤前通知のタイマーを受け持つバックエンド。
通知タイマーはこのプロセスが保持し、Streamlit側の再描画とは独立して動く。

起動方法:
    uvicorn src.api.main:app --host 127.0.0.1 --port 8000
"""

import os
import platform
import signal
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI
from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).parent.parent))

load_dotenv()

from api.routes import calculation, notification, system
from api.services.alert_service import alert_service
from backend.logging import api_logger as logger

API_TITLE = "Freedom HUD API"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """起動時にスケジューラを用意し、終了時に予約中の通知を取り消す"""
    logger.info(f"{API_TITLE} starting (pid={os.getpid()})")
    alert_service.initialize()
    try:
        yield
    finally:
        alert_service.shutdown()
        logger.info(f"{API_TITLE} stopped")


app = FastAPI(
    title=API_TITLE,
    description="退勤時刻HUD バックエンドAPI",
    version="1.0.0",
    lifespan=lifespan,
)

for router, tag in (
    (calculation.router, "calculation"),
    (notification.router, "notification"),
    (system.router, "system"),
):
    app.include_router(router, prefix="/api", tags=[tag])


@app.get("/", tags=["root"])
async def root() -> dict[str, str]:
    return {"name": API_TITLE, "docs": "/docs", "health": "/health"}


@app.get("/health", tags=["health"])
async def health_check() -> dict[str, str | int]:
    """生存確認 (ランチャーの起動待ち用)"""
    return {"status": "ok", "pid": os.getpid()}


@app.get("/ready", tags=["health"])
async def readiness_check() -> dict[str, str | bool]:
    """通知予約を受け付けられる状態か

    スケジューラ未初期化なら "unavailable"、
    通知が許可されていなければ "degraded" (計算のみ可能)。
    """
    scheduler_ready = alert_service.is_ready()
    allowed = alert_service.notifications_allowed()

    if not scheduler_ready:
        status = "unavailable"
    elif not allowed:
        status = "degraded"
    else:
        status = "ok"

    return {
        "status": status,
        "scheduler_ready": scheduler_ready,
        "notifications_allowed": allowed,
    }


def install_signal_handlers() -> None:
    """SIGTERM/SIGINTで予約中の通知を取り消してから終了する

    Windowsではuvicornの既定処理に任せる。
    """
    if platform.system() == "Windows":
        return

    def _handle(signum: int, frame: object) -> None:
        logger.info(f"Received signal {signum}, cancelling pending alert")
        alert_service.shutdown()
        sys.exit(0)

    signal.signal(signal.SIGTERM, _handle)
    signal.signal(signal.SIGINT, _handle)


install_signal_handlers()
