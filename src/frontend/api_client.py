"""APIクライアントモジュール

FastAPIバックエンドと通信するためのクライアント。
Streamlitフロントエンドから使用する。

フェイルセーフ機能:
- タイムアウト付きリクエスト (デフォルト3秒)
- 計算はAPI不通時にローカル計算へフォールバック
"""

import httpx
from typing import Any

from backend.calculators import compute_release_time
from backend.config_helpers import get_baseline_hours, get_normalization_mode
from config.settings import Settings
from schemas import CalculationInputs, CalculationResult
from backend.logging import app_logger as logger

# 設定読み込み
_settings = Settings()
API_BASE_URL = f"http://{_settings.API_HOST}:{_settings.API_PORT}"

# タイムアウト設定 (設定ファイルから読み込み)
API_TIMEOUT = _settings.FRONTEND_API_TIMEOUT


class AlertRequestError(Exception):
    """通知予約に失敗した

    Attributes:
        status_code: HTTPステータスコード (通信エラー時はNone)
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    @property
    def permission_denied(self) -> bool:
        return self.status_code == 403


def _get_client() -> httpx.Client:
    """HTTPクライアントを取得"""
    return httpx.Client(base_url=API_BASE_URL, timeout=API_TIMEOUT)


def _compute_locally(inputs: CalculationInputs) -> CalculationResult:
    return compute_release_time(
        inputs,
        baseline_hours=get_baseline_hours(),
        mode=get_normalization_mode(),
    )


def calculate_via_api(inputs: CalculationInputs) -> CalculationResult:
    """APIで退勤時刻を計算

    フェイルセーフ: API通信エラー時はローカルで同じ計算を行う

    Args:
        inputs: 入力スナップショット

    Returns:
        CalculationResult: 計算結果
    """
    try:
        with _get_client() as client:
            response = client.post(
                "/api/calculate", json=inputs.model_dump(by_alias=True)
            )
            response.raise_for_status()
            return CalculationResult.model_validate(response.json())

    except httpx.TimeoutException as e:
        logger.warning(f"API request timeout ({API_TIMEOUT}s): {e}, computing locally")
        return _compute_locally(inputs)

    except httpx.HTTPStatusError as e:
        logger.error(
            f"API returned error: {e.response.status_code} - {e.response.text}, "
            "computing locally"
        )
        return _compute_locally(inputs)

    except httpx.RequestError as e:
        logger.error(f"API connection error: {e}, computing locally")
        return _compute_locally(inputs)


def arm_notification(result: CalculationResult) -> dict[str, Any]:
    """APIに通知予約をリクエスト

    Args:
        result: 計算結果

    Returns:
        dict: 予約内容 (status, target, notify_at, ...)

    Raises:
        AlertRequestError: 予約に失敗した場合 (権限拒否は status_code=403)
    """
    try:
        with _get_client() as client:
            response = client.post(
                "/api/notification", json=result.model_dump(by_alias=True)
            )
            response.raise_for_status()
            return response.json()
    except httpx.HTTPStatusError as e:
        try:
            detail = e.response.json().get("detail", e.response.text)
        except ValueError:
            detail = e.response.text
        logger.error(f"Notification request rejected: {e.response.status_code} - {detail}")
        raise AlertRequestError(str(detail), status_code=e.response.status_code)
    except httpx.RequestError as e:
        logger.error(f"Notification request failed: {e}")
        raise AlertRequestError(f"API通信エラー: {e}")


def cancel_notification() -> bool:
    """予約中の通知の取り消しをリクエスト

    Returns:
        bool: 取り消した場合True (通信エラー時はFalse)
    """
    try:
        with _get_client() as client:
            response = client.delete("/api/notification")
            response.raise_for_status()
            return bool(response.json().get("cancelled", False))
    except httpx.HTTPError as e:
        logger.error(f"Cancel request failed: {e}")
        return False


def get_notification_status() -> dict[str, Any]:
    """APIから通知予約状態を取得

    Returns:
        dict: 状態情報
    """
    try:
        with _get_client() as client:
            response = client.get("/api/notification")
            response.raise_for_status()
            return response.json()
    except httpx.HTTPError as e:
        logger.error(f"Failed to get notification status: {e}")
        return {
            "status": "unknown",
            "formatted": None,
            "target": None,
            "notify_at": None,
            "lead_minutes": _settings.NOTIFY_LEAD_MINUTES,
            "last_calculated": None,
        }


def check_api_health() -> bool:
    """APIサーバーのヘルスチェック

    Returns:
        bool: APIが正常ならTrue
    """
    try:
        with _get_client() as client:
            response = client.get("/health")
            return response.status_code == 200
    except httpx.RequestError:
        return False

