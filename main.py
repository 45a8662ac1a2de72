#!/usr/bin/env python3
"""退勤時刻HUD ランチャー

APIサーバー (計算・通知タイマー) → Streamlit HUD → (KIOSK_MODE=true なら) Chromium
の順に子プロセスを立ち上げ、どれかが落ちるかCtrl+Cで全体を停止する。

    python main.py
"""

import atexit
import signal
import subprocess
import sys
import time
from logging import Logger
from pathlib import Path
from typing import Optional

import httpx

ROOT_DIR = Path(__file__).parent
sys.path.insert(0, str(ROOT_DIR / "src"))

STREAMLIT_PORT = 8501
HUD_SCRIPT = "src/frontend/hud_app.py"
API_STARTUP_TIMEOUT = 30  # 秒
STREAMLIT_STARTUP_DELAY = 3  # 秒
PROCESS_STOP_TIMEOUT = 5  # 秒
MONITOR_INTERVAL = 2  # 秒

API_NAME = "api"
HUD_NAME = "hud"
BROWSER_NAME = "browser"

BROWSER_CANDIDATES = ("chromium-browser", "chromium", "google-chrome")
KIOSK_FLAGS = (
    "--kiosk",
    "--noerrdialogs",
    "--disable-infobars",
    "--no-first-run",
    "--disable-translate",
    "--disable-features=TranslateUI",
)


def api_command(host: str, port: int) -> list[str]:
    return [
        sys.executable, "-m", "uvicorn", "src.api.main:app",
        "--host", host, "--port", str(port),
    ]


def hud_command(port: int = STREAMLIT_PORT) -> list[str]:
    return [
        sys.executable, "-m", "streamlit", "run", HUD_SCRIPT,
        "--server.port", str(port), "--server.headless", "true",
    ]


def kiosk_command(browser: str, url: str) -> list[str]:
    return [browser, *KIOSK_FLAGS, url]


def spawn(command: list[str], quiet: bool = False) -> subprocess.Popen:
    """子プロセスを起動 (quiet=Trueなら出力を捨てる)"""
    output = subprocess.DEVNULL if quiet else subprocess.PIPE
    return subprocess.Popen(
        command,
        cwd=ROOT_DIR,
        stdout=output,
        stderr=subprocess.DEVNULL if quiet else subprocess.STDOUT,
    )


class ProcessManager:
    """起動した子プロセスの一覧

    停止は起動と逆順。APIには先に /api/shutdown を送り、予約中の通知を取り消させる。
    """

    def __init__(self, logger: Logger, api_url: str) -> None:
        self.logger = logger
        self.api_url = api_url
        self.processes: list[tuple[str, subprocess.Popen]] = []
        self._stopped = False

    def register(self, name: str, process: Optional[subprocess.Popen]) -> None:
        if process is not None:
            self.processes.append((name, process))

    def first_exited(self, names: tuple[str, ...]) -> Optional[str]:
        """names のうち既に終了しているプロセス名 (なければNone)"""
        for name, process in self.processes:
            if name in names and process.poll() is not None:
                return name
        return None

    def cleanup(self) -> None:
        """全プロセスを停止する (2回目以降は何もしない)"""
        if self._stopped:
            return
        self._stopped = True
        self.logger.info("Stopping child processes")

        for name, process in reversed(self.processes):
            if name == API_NAME and process.poll() is None:
                self._request_api_shutdown()
            self._terminate(name, process)

        self.logger.info("All child processes stopped")

    def _request_api_shutdown(self) -> None:
        try:
            httpx.post(f"{self.api_url}/api/shutdown", timeout=3.0)
            time.sleep(1)
        except httpx.HTTPError as e:
            self.logger.warning(f"API shutdown request failed: {e}")

    def _terminate(self, name: str, process: subprocess.Popen) -> None:
        if process.poll() is not None:
            return
        self.logger.info(f"Terminating {name} (pid={process.pid})")
        process.terminate()
        try:
            process.wait(timeout=PROCESS_STOP_TIMEOUT)
        except subprocess.TimeoutExpired:
            self.logger.warning(f"{name} did not exit in {PROCESS_STOP_TIMEOUT}s, killing")
            process.kill()
            process.wait()


def wait_for_api(logger: Logger, api_url: str, timeout: int = API_STARTUP_TIMEOUT) -> bool:
    """/health が200を返すまで1秒間隔で待つ"""
    for _ in range(timeout):
        try:
            if httpx.get(f"{api_url}/health", timeout=2.0).status_code == 200:
                logger.info("API server is up")
                return True
        except httpx.HTTPError:
            pass
        time.sleep(1)

    logger.error(f"API server did not become ready within {timeout}s")
    return False


def launch_kiosk(logger: Logger, url: str) -> Optional[subprocess.Popen]:
    """見つかった最初のChromium系ブラウザをKioskモードで開く"""
    for browser in BROWSER_CANDIDATES:
        try:
            process = spawn(kiosk_command(browser, url), quiet=True)
        except FileNotFoundError:
            continue
        logger.info(f"Kiosk browser started: {browser} (pid={process.pid})")
        return process

    logger.warning(f"No Chromium browser found. Open {url} manually.")
    return None


def main() -> None:
    from src.backend.logging import launcher_logger as logger
    from src.backend.config_helpers import get_kiosk_mode, get_settings

    settings = get_settings()
    api_url = f"http://{settings.API_HOST}:{settings.API_PORT}"
    hud_url = f"http://localhost:{STREAMLIT_PORT}"
    manager = ProcessManager(logger, api_url)

    def on_signal(signum: int, frame: object) -> None:
        manager.cleanup()
        sys.exit(0)

    signal.signal(signal.SIGINT, on_signal)
    signal.signal(signal.SIGTERM, on_signal)
    atexit.register(manager.cleanup)

    try:
        logger.info(f"Starting API server on {settings.API_HOST}:{settings.API_PORT}")
        manager.register(API_NAME, spawn(api_command(settings.API_HOST, settings.API_PORT)))
        if not wait_for_api(logger, api_url):
            manager.cleanup()
            sys.exit(1)

        logger.info(f"Starting HUD on port {STREAMLIT_PORT}")
        manager.register(HUD_NAME, spawn(hud_command()))
        time.sleep(STREAMLIT_STARTUP_DELAY)

        if get_kiosk_mode():
            manager.register(BROWSER_NAME, launch_kiosk(logger, hud_url))
        else:
            logger.info("Kiosk mode disabled")

        logger.info(f"Ready. API: {api_url} / HUD: {hud_url} (Ctrl+C to quit)")

        while True:
            exited = manager.first_exited((API_NAME, HUD_NAME))
            if exited is not None:
                logger.error(f"{exited} exited unexpectedly")
                break
            time.sleep(MONITOR_INTERVAL)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")

    finally:
        manager.cleanup()
        sys.exit(0)


if __name__ == "__main__":
    main()
