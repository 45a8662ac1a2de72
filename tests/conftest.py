"""pytest設定とフィクスチャ"""

import os
import sys
from pathlib import Path
import shutil

import pytest

# srcディレクトリをパスに追加
project_root = Path(__file__).parent.parent
src_dir = project_root / "src"
sys.path.insert(0, str(src_dir))

# テスト実行前に.envファイルを準備(.env.exampleからコピー)
env_file = project_root / ".env"
env_example = project_root / ".env.example"
if not env_file.exists() and env_example.exists():
    shutil.copy(env_example, env_file)

# Settingsは作業ディレクトリの.envを参照する
os.chdir(project_root)

# テスト用環境変数を設定
os.environ["NOTIFIER"] = "log"
os.environ["ALLOW_NOTIFICATIONS"] = "true"
os.environ["NORMALIZATION_MODE"] = "single_step"
os.environ["BASELINE_HOURS"] = "8"
os.environ["NOTIFY_LEAD_MINUTES"] = "5"
os.environ["API_HOST"] = "127.0.0.1"
os.environ["API_PORT"] = "8000"


@pytest.fixture
def project_root_path():
    """プロジェクトルートのパスを返す"""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def reset_alert_service_singleton():
    """AlertServiceのスケジューラをテストごとにリセット

    予約済みタイマーが次のテストや実際の起動に残るのを防ぐ。
    """
    yield
    try:
        from api.services.alert_service import alert_service

        alert_service.shutdown()
        alert_service._scheduler = None
    except ImportError:
        pass  # インポートできない場合はスキップ
