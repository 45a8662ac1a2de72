"""Streamlit 退勤時刻HUD フロントエンド

勤務済み時間と最終入室時刻を入力し、退勤時刻を表示するUIアプリケーション。
計算と通知予約はバックエンドAPIに委譲し、フロントエンドは表示に専念。

起動方法:
    streamlit run src/frontend/hud_app.py
"""

import sys
from datetime import datetime
from pathlib import Path

import streamlit as st
from streamlit_autorefresh import st_autorefresh
from dotenv import load_dotenv

# プロジェクトルートをパスに追加
sys.path.insert(0, str(Path(__file__).parent.parent))

# .envファイルを読み込む
load_dotenv()

from frontend.styles import get_page_styles
from frontend.components import (
    get_clock_figure,
    get_sync_gauge_figure,
    render_header,
    render_result_panel,
    render_standby,
)
from frontend.api_client import (
    AlertRequestError,
    arm_notification,
    calculate_via_api,
    cancel_notification,
    check_api_health,
    get_notification_status,
)
from frontend.state import HudSession
from frontend.utils import (
    calculate_clock_angles,
    calculate_sync_rate,
    minutes_until_release,
)
from schemas import AlertState, CalculationInputs
from backend.config_helpers import (
    get_baseline_hours,
    get_input_max_length,
    get_notify_lead_minutes,
    get_refresh_interval,
    get_theme,
)
from backend.logging import app_logger as logger

# --------------------------
#  定数定義
# --------------------------
REFRESH_INTERVAL = get_refresh_interval()
THEME = get_theme().value
BASELINE_HOURS = get_baseline_hours()
LEAD_MINUTES = get_notify_lead_minutes()
MAX_CHARS = get_input_max_length()

PERMISSION_DENIED_MESSAGE = (
    "SYSTEM ERROR: 通知が許可されていません。退勤アラートを予約できません。"
)

# --------------------------
#  ページ基本設定
# --------------------------
st.set_page_config(
    page_title="退勤HUD",
    layout="wide",
)

st.markdown(
    get_page_styles(theme=THEME),
    unsafe_allow_html=True,
)

# --------------------------
#  セッション初期化（ブラウザセッションごとに1回）
# --------------------------
if "hud" not in st.session_state:
    st.session_state["hud"] = HudSession()
    if not check_api_health():
        logger.warning("API server is not available, calculations will run locally")
        st.session_state["api_down"] = True

session: HudSession = st.session_state["hud"]

if st.session_state.get("api_down"):
    st.warning("⚠️ APIサーバーに接続できません。通知予約は利用できません。")

# 通知予約中は自動更新し、通知済み・取り消し済みならLOCKEDを解除
if session.state is AlertState.LOCKED:
    st_autorefresh(interval=REFRESH_INTERVAL * 1000, key="armedrefresh")
    backend_status = get_notification_status()["status"]
    if session.sync_backend_status(backend_status):
        logger.info(f"Alert no longer armed on backend (status={backend_status})")

# --------------------------
#  ヘッダ
# --------------------------
render_header(session.state)
st.markdown("---")

col_display, col_controls = st.columns([1, 1])

# --------------------------
#  入力
# --------------------------
with col_controls:
    st.markdown(
        "<div class='input-label'>勤務済み時間 (時:分)</div>", unsafe_allow_html=True
    )
    c_h, c_m = st.columns(2)
    completed_hours = c_h.text_input(
        "completed_hours", placeholder="00", max_chars=MAX_CHARS,
        label_visibility="collapsed",
    )
    completed_minutes = c_m.text_input(
        "completed_minutes", placeholder="00", max_chars=MAX_CHARS,
        label_visibility="collapsed",
    )

    st.markdown(
        "<div class='input-label entry'>最終入室時刻 (時:分)</div>",
        unsafe_allow_html=True,
    )
    l_h, l_m = st.columns(2)
    last_entry_hours = l_h.text_input(
        "last_entry_hours", placeholder="00", max_chars=MAX_CHARS,
        label_visibility="collapsed",
    )
    last_entry_minutes = l_m.text_input(
        "last_entry_minutes", placeholder="00", max_chars=MAX_CHARS,
        label_visibility="collapsed",
    )

    inputs = CalculationInputs(
        completed_hours=completed_hours,
        completed_minutes=completed_minutes,
        last_entry_hours=last_entry_hours,
        last_entry_minutes=last_entry_minutes,
    )

    # 入力が変わったら計算結果を破棄し、予約済みの通知は取り消す
    if session.update_inputs(inputs):
        logger.info("Inputs changed while alert armed, cancelling")
        cancel_notification()

    # --------------------------
    #  操作ボタン
    # --------------------------
    if session.state is AlertState.IDLE:
        if st.button("計算開始", type="primary", width="stretch"):
            session.calculate(calculate_via_api(session.inputs))
            st.rerun()
    else:
        formatted = session.result.formatted if session.result else "--:--"
        label = (
            f"通知予約済み: {formatted}"
            if session.state is AlertState.LOCKED
            else f"{formatted} の{LEAD_MINUTES}分前に通知"
        )
        if st.button(
            label, key="arm_button", disabled=not session.can_arm, width="stretch"
        ):
            try:
                plan = arm_notification(session.result)
                logger.info(f"Alert armed: {plan}")
                session.lock()
            except AlertRequestError as e:
                session.deny(PERMISSION_DENIED_MESSAGE if e.permission_denied else str(e))
            st.rerun()

    if session.error:
        st.error(session.error)

# --------------------------
#  表示（ゲージ or 時計）
# --------------------------
sync_rate = calculate_sync_rate(session.inputs, baseline_hours=BASELINE_HOURS)

try:
    with col_display:
        if session.result is not None and session.result.is_valid:
            hour_angle, minute_angle = calculate_clock_angles(session.result)
            st.plotly_chart(
                get_clock_figure(
                    hour_angle,
                    minute_angle,
                    label=f"TARGET: {session.result.formatted}",
                    theme=THEME,
                ),
                width="stretch",
            )
        else:
            st.plotly_chart(get_sync_gauge_figure(sync_rate, theme=THEME), width="stretch")

    st.markdown("---")
    if session.result is not None and session.result.is_valid:
        render_result_panel(
            session.result,
            sync_rate,
            session.state,
            minutes_until_release(session.result, datetime.now()),
            LEAD_MINUTES,
        )
    else:
        render_standby()

except Exception as e:
    # レンダリングエラー時も画面を維持
    logger.error(f"Rendering error: {e}")
    st.error(f"表示エラー: {e}")

st.markdown(
    f"<div class='footer'>BUF: {session.inputs.completed_hours or '00'}."
    f"{session.inputs.completed_minutes or '00'} / Powered by Streamlit + FastAPI</div>",
    unsafe_allow_html=True,
)
