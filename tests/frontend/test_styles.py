"""frontend.stylesのテスト"""

from frontend.styles import get_page_styles, get_theme_colors


class TestGetThemeColors:
    """get_theme_colors関数のテスト"""

    def test_dark_theme_background(self):
        assert get_theme_colors("dark")["bg_color"] == "#000000"

    def test_light_theme_background(self):
        assert get_theme_colors("light")["bg_color"] == "#ffffff"

    def test_unknown_theme_falls_back_to_dark(self):
        assert get_theme_colors("neon") == get_theme_colors("dark")

    def test_themes_have_same_keys(self):
        """両テーマで同じキーを持つ"""
        assert get_theme_colors("dark").keys() == get_theme_colors("light").keys()


class TestGetPageStyles:
    """get_page_styles関数のテスト"""

    def test_returns_style_tag(self):
        css = get_page_styles("dark")

        assert css.strip().startswith("<style>")
        assert css.strip().endswith("</style>")

    def test_contains_theme_colors(self):
        css = get_page_styles("light")

        assert get_theme_colors("light")["bg_color"] in css
        assert ".release-time" in css
