"""
Freedom HUD - 退勤時刻計算・通知システム

## アーキテクチャ概要

レイヤー構造 (依存関係は下位→上位のみ):

┌─────────────────────────────────────────────────────┐
│ frontend/                                           │  最上位層
│  ├── hud_app.py - Streamlit UI                     │
│  └── state.py - 通知予約の状態遷移 (IDLE/READY/LOCKED) │
├─────────────────────────────────────────────────────┤
│ api/                                                │
│  └── FastAPI (計算・通知予約エンドポイント)         │
├─────────────────────────────────────────────────────┤
│ backend/                                            │  中間層
│  ├── calculators.py - 退勤時刻計算 (純粋関数)       │
│  ├── scheduler.py - 退勤前通知のワンショットタイマー │
│  ├── notify/ - 通知出力 (デスクトップ/ログ)         │
│  └── logging/ - アプリケーションロガー             │
├─────────────────────────────────────────────────────┤
│ config/                                             │  設定層
│  └── settings.py - 環境変数管理 (Pydantic Settings)│
├─────────────────────────────────────────────────────┤
│ schemas/                                            │  最下位層
│  ├── calculation.py - CalculationInputs/Result     │
│  └── notification.py - AlertState, AlertPlan       │
└─────────────────────────────────────────────────────┘

## 依存ルール

1. **上位層 → 下位層**: 許可 (frontend → api/backend → config → schemas)
2. **下位層 → 上位層**: 禁止 (循環参照防止)
3. **schemas/**: 外部ライブラリ (pydantic) のみに依存
4. **backend/calculators.py**: 状態を持たず、I/Oもログ出力も行わない

## 使用例

```python
from schemas import CalculationInputs
from backend.calculators import compute_release_time

result = compute_release_time(CalculationInputs(completed_hours="1",
                                                completed_minutes="45",
                                                last_entry_hours="10"))
print(result.formatted)  # "16:15"
```
"""

__version__ = "0.1.0"
