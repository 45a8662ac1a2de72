"""フロントエンドUIコンポーネント

HUD画面の各種表示コンポーネントを提供する。
テーマ対応により、ライトモード/ダークモードの切り替えが可能。
"""

import math

import plotly.graph_objects as go
import streamlit as st
from schemas import AlertState, CalculationResult
from frontend.styles import get_theme_colors
from frontend.utils import format_time_hhmm

# 時計の針の長さ (文字盤半径=1に対する比率)
HOUR_HAND_LENGTH = 0.5
MINUTE_HAND_LENGTH = 0.75


def get_status_info(sync_rate: float) -> tuple[str, str, str]:
    """シンクロ率から退勤ステータスを取得

    Args:
        sync_rate: 勤務済み時間の割合 (0-100)

    Returns:
        tuple[str, str, str]: (CSSクラス名, ステータスコード, 表示テキスト)

    Examples:
        >>> get_status_info(100.0)
        ('status-auth', 'EXTRACT_AUTH', '退勤承認')
        >>> get_status_info(50.0)
        ('status-hold', 'HOLD_SECTOR', '勤務継続中')
    """
    if sync_rate >= 100:
        return ("status-auth", "EXTRACT_AUTH", "退勤承認")
    return ("status-hold", "HOLD_SECTOR", "勤務継続中")


def hand_endpoint(angle: float, length: float) -> tuple[float, float]:
    """針の先端座標を計算 (12時方向0度・時計回り)

    Examples:
        >>> hand_endpoint(90.0, 1.0)
        (1.0, 0.0)
    """
    rad = math.radians(angle)
    return (round(length * math.sin(rad), 9), round(length * math.cos(rad), 9))


def get_sync_gauge_figure(sync_rate: float, theme: str = "dark") -> go.Figure:
    """シンクロ率のゲージ図を生成

    Args:
        sync_rate: 勤務済み時間の割合 (0-100)
        theme: "dark" または "light"

    Returns:
        go.Figure: Plotlyゲージ図オブジェクト
    """
    colors = get_theme_colors(theme)

    # 規定時間到達で緑
    bar_color = colors["gauge_complete"] if sync_rate >= 100 else colors["gauge_bar"]

    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=round(sync_rate),
            number={"suffix": "%"},
            title={"text": "SYNC RATE"},
            gauge={
                "axis": {"range": [0, 100], "visible": False},
                "bar": {"color": bar_color},
                "bgcolor": colors["gauge_track"],
                "borderwidth": 0,
            },
        )
    )

    fig.update_layout(
        margin=dict(t=40, b=5, l=30, r=30),
        height=320,
        paper_bgcolor=colors["gauge_bg"],
        font=dict(color=colors["text_color"]),
    )

    return fig


def get_clock_figure(
    hour_angle: float, minute_angle: float, label: str = "", theme: str = "dark"
) -> go.Figure:
    """退勤時刻を示すアナログ時計図を生成

    Args:
        hour_angle: 短針の角度 (度)
        minute_angle: 長針の角度 (度)
        label: 文字盤下部に表示する文字列 (例: "TARGET: 16:15")
        theme: "dark" または "light"

    Returns:
        go.Figure: Plotly図オブジェクト (文字盤・目盛り・針)
    """
    colors = get_theme_colors(theme)
    fig = go.Figure()

    # 目盛り (3時間ごとに長く)
    for i in range(12):
        inner = 0.82 if i % 3 == 0 else 0.9
        x0, y0 = hand_endpoint(i * 30, inner)
        x1, y1 = hand_endpoint(i * 30, 0.97)
        fig.add_shape(
            type="line",
            x0=x0,
            y0=y0,
            x1=x1,
            y1=y1,
            line=dict(color=colors["clock_border"], width=3 if i % 3 == 0 else 1),
        )

    fig.add_shape(
        type="circle",
        x0=-1,
        y0=-1,
        x1=1,
        y1=1,
        line=dict(color=colors["clock_border"], width=2),
        fillcolor=colors["clock_face"],
        layer="below",
    )

    for angle, length, color, width in (
        (hour_angle, HOUR_HAND_LENGTH, colors["hour_hand"], 7),
        (minute_angle, MINUTE_HAND_LENGTH, colors["minute_hand"], 4),
    ):
        x, y = hand_endpoint(angle, length)
        fig.add_trace(
            go.Scatter(
                x=[0, x],
                y=[0, y],
                mode="lines",
                line=dict(color=color, width=width),
                hoverinfo="skip",
                showlegend=False,
            )
        )

    fig.add_trace(
        go.Scatter(
            x=[0],
            y=[0],
            mode="markers",
            marker=dict(color=colors["accent_color"], size=10),
            hoverinfo="skip",
            showlegend=False,
        )
    )

    if label:
        fig.add_annotation(
            x=0,
            y=-0.45,
            text=label,
            showarrow=False,
            font=dict(color=colors["text_secondary"], size=12),
        )

    fig.update_xaxes(visible=False, range=[-1.1, 1.1])
    fig.update_yaxes(visible=False, range=[-1.1, 1.1], scaleanchor="x")
    fig.update_layout(
        margin=dict(t=5, b=5, l=5, r=5),
        height=320,
        paper_bgcolor=colors["bg_color"],
        plot_bgcolor=colors["bg_color"],
    )

    return fig


def render_header(state: AlertState) -> None:
    """ヘッダー部分をレンダリング

    タイトルと通知予約状態 (ALERT_ARMED) を表示する。
    """
    col_head_l, col_head_r = st.columns([3, 1])
    with col_head_l:
        st.markdown(
            "<div class='hud-caption'>TERMINAL: EXTRACTION_AUTH</div>"
            "<div class='header-title'>Tactical <span>HUD</span></div>",
            unsafe_allow_html=True,
        )
    with col_head_r:
        armed = "TRUE" if state is AlertState.LOCKED else "FALSE"
        st.markdown(
            f"<div class='header-armed'>PROTOCOL: TIMELY EGRESS<br>ALERT_ARMED: {armed}</div>",
            unsafe_allow_html=True,
        )


def render_result_panel(
    result: CalculationResult,
    sync_rate: float,
    state: AlertState,
    remaining_minutes: int,
    lead_minutes: int = 5,
) -> None:
    """退勤時刻とステータスをレンダリング

    Args:
        result: 計算結果 (is_valid=Trueのもの)
        sync_rate: シンクロ率 (ステータス判定に使用)
        state: 通知予約状態 (LOCKEDなら予約中表示)
        remaining_minutes: 退勤時刻までの残り分数
        lead_minutes: 通知のリード時間 (分)
    """
    col_time, col_status = st.columns([3, 2])
    with col_time:
        st.markdown(
            f"<div class='release-time'>{result.formatted}</div>",
            unsafe_allow_html=True,
        )
        st.markdown(
            f"<div class='kpi-label'>退勤まで {format_time_hhmm(remaining_minutes)}</div>",
            unsafe_allow_html=True,
        )
    with col_status:
        status_class, status_code, status_text = get_status_info(sync_rate)
        st.markdown(
            f"<div class='kpi-label'>STATUS: {status_code}</div>"
            f"<div class='{status_class}'>{status_text}</div>",
            unsafe_allow_html=True,
        )
        if state is AlertState.LOCKED:
            st.markdown(
                f"<div class='armed-bar' style='margin-top: 0.6rem;'>"
                f"通知予約済み T-{lead_minutes}分</div>",
                unsafe_allow_html=True,
            )


def render_standby() -> None:
    """入力待ち表示をレンダリング"""
    st.markdown(
        "<div class='standby'>STANDBY MODE<br>入力を待っています...</div>",
        unsafe_allow_html=True,
    )
