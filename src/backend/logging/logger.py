import logging
import sys
from pathlib import Path
from typing import Optional, Union

from config.settings import LogLevel

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def to_logging_level(level: Union[LogLevel, str, int]) -> int:
    """設定値のログレベルをloggingの数値レベルに変換する

    Examples:
        >>> to_logging_level(LogLevel.WARNING)
        30
        >>> to_logging_level("debug")
        10
    """
    if isinstance(level, int):
        return level
    name = level.value if isinstance(level, LogLevel) else str(level).upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: Union[LogLevel, str, int] = logging.DEBUG,
    console: bool = True,
    file_encoding: str = "utf-8",
) -> logging.Logger:
    """
    ロガーをセットアップする

    Args:
        name: ロガー名
        log_file: ログファイルのパス（Noneの場合はファイル出力なし）
        level: ログレベル (LogLevel / レベル名 / 数値)
        console: 標準出力にも出すかどうか
        file_encoding: ログファイルのエンコーディング

    Returns:
        設定済みのロガーインスタンス
    """
    numeric_level = to_logging_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)
    # Streamlitの再実行やuvicornのルートハンドラで二重出力しない
    logger.propagate = False

    if logger.handlers:
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(numeric_level)
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding=file_encoding)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(numeric_level)
        logger.addHandler(file_handler)

    return logger
