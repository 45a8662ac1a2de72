"""フロントエンドスタイル管理

ページ全体のCSSスタイルとテーマ設定を管理する。
ライトモード/ダークモードの切り替えに対応。
"""


def get_theme_colors(theme: str = "dark") -> dict[str, str]:
    """テーマに応じた色設定を取得

    Args:
        theme: "dark" または "light"

    Returns:
        dict[str, str]: 色設定辞書
    """
    if theme == "light":
        return {
            "bg_color": "#ffffff",
            "text_color": "#0b1a1f",
            "text_secondary": "#4a5a60",
            "header_color": "#0b1a1f",
            "accent_color": "#0891b2",
            "entry_color": "#7c3aed",
            "label_color": "#5f6b70",
            "value_color": "#0b1a1f",
            "gauge_bg": "#f5f7f8",
            "gauge_bar": "#06b6d4",
            "gauge_complete": "#22c55e",
            "gauge_track": "#e0e6e8",
            "clock_face": "#f5f7f8",
            "clock_border": "#06b6d4",
            "hour_hand": "#0b1a1f",
            "minute_hand": "#0891b2",
            "status_hold_bg": "#cffafe",
            "status_hold_border": "#06b6d4",
            "status_auth_bg": "#c8e6c9",
            "status_auth_border": "#22c55e",
            "armed_bg": "#fef3c7",
            "armed_border": "#f59e0b",
            "error_bg": "#ffcdd2",
            "error_border": "#f44336",
            "hr_color": "#e0e6e8",
        }
    else:  # dark (デフォルト)
        return {
            "bg_color": "#000000",
            "text_color": "#e6fbff",
            "text_secondary": "#7dd3e0",
            "header_color": "#ffffff",
            "accent_color": "#06b6d4",
            "entry_color": "#a855f7",
            "label_color": "#5fa8b5",
            "value_color": "#ffffff",
            "gauge_bg": "#000000",
            "gauge_bar": "#06b6d4",
            "gauge_complete": "#22c55e",
            "gauge_track": "#0e2a30",
            "clock_face": "#000000",
            "clock_border": "#06b6d4",
            "hour_hand": "#ffffff",
            "minute_hand": "#22d3ee",
            "status_hold_bg": "#062a30",
            "status_hold_border": "#06b6d4",
            "status_auth_bg": "#145c32",
            "status_auth_border": "#22c55e",
            "armed_bg": "#3b2a06",
            "armed_border": "#f59e0b",
            "error_bg": "#7a0000",
            "error_border": "#ff3333",
            "hr_color": "#0e2a30",
        }


def get_page_styles(theme: str = "dark") -> str:
    """ページ全体のカスタムCSSスタイルを取得 (テーマ対応)

    Streamlitのデフォルトスタイルを上書きし、HUD風の表示を実現する。

    Args:
        theme: "dark" または "light"

    Returns:
        str: HTML <style>タグを含むCSS文字列
    """
    colors = get_theme_colors(theme)

    return f"""
    <style>
    /* Streamlitのヘッダー・メニュー・フッターを非表示 */
    header {{
        visibility: hidden;
    }}
    #MainMenu {{
        visibility: hidden;
    }}
    footer {{
        visibility: hidden;
    }}
    .stApp {{
        background-color: {colors["bg_color"]};
        font-family: "JetBrains Mono", monospace;
    }}
    body {{
        background-color: {colors["bg_color"]};
        color: {colors["text_color"]};
    }}
    .block-container {{
        padding-top: 0.8rem;
        padding-bottom: 0.2rem;
        max-width: 95%;
        background-color: {colors["bg_color"]};
    }}
    .hud-caption {{
        font-size: 0.7rem;
        font-weight: 700;
        letter-spacing: 0.4em;
        color: {colors["label_color"]};
    }}
    .header-title {{
        font-size: 2.6rem;
        font-weight: 900;
        font-style: italic;
        text-transform: uppercase;
        color: {colors["header_color"]};
    }}
    .header-title span {{
        color: {colors["accent_color"]};
    }}
    .header-armed {{
        font-size: 0.8rem;
        text-align: right;
        letter-spacing: 0.2em;
        color: {colors["text_secondary"]};
    }}
    .input-label {{
        font-size: 0.75rem;
        font-weight: 900;
        letter-spacing: 0.2em;
        text-transform: uppercase;
        padding-left: 0.6rem;
        border-left: 4px solid {colors["accent_color"]};
        color: {colors["label_color"]};
    }}
    .input-label.entry {{
        border-left-color: {colors["entry_color"]};
    }}
    .release-time {{
        font-size: 5.5rem;
        font-weight: 900;
        color: {colors["value_color"]};
        text-shadow: 0 0 20px {colors["accent_color"]};
    }}
    .kpi-label {{
        font-size: 1.0rem;
        color: {colors["label_color"]};
    }}
    .status-hold {{
        font-size: 1.3rem;
        background: {colors["status_hold_bg"]};
        padding: 0.6rem;
        border-radius: 0.5rem;
        border: 1px solid {colors["status_hold_border"]};
        color: {colors["text_color"]};
        font-weight: 700;
    }}
    .status-auth {{
        font-size: 1.3rem;
        background: {colors["status_auth_bg"]};
        padding: 0.6rem;
        border-radius: 0.5rem;
        border: 1px solid {colors["status_auth_border"]};
        color: {colors["text_color"]};
        font-weight: 700;
    }}
    .armed-bar {{
        background: {colors["armed_bg"]};
        border: 1px solid {colors["armed_border"]};
        color: {colors["armed_border"]};
        font-size: 1.0rem;
        font-weight: 700;
        letter-spacing: 0.15em;
        padding: 0.4rem 0.8rem;
        border-radius: 0.4rem;
    }}
    .standby {{
        text-align: center;
        font-size: 0.9rem;
        font-style: italic;
        letter-spacing: 0.4em;
        color: {colors["label_color"]};
    }}
    .footer {{
        font-size: 0.7rem;
        color: #888888;
        text-align: right;
        padding-top: 0.2rem;
    }}
    hr {{
        border-color: {colors["hr_color"]};
    }}
    </style>
"""
