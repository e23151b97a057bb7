"""
主题信号
只在内存中保存 light / dark / auto 三种主题, 不做持久化
"""

from imgloading.until.log import LOGGER

THEMES = ("light", "dark", "auto")


class ThemeManager:
    def __init__(self, theme="auto", system_theme=None):
        """
        Args:
            theme: 初始主题
            system_theme: 返回系统偏好 ("light" / "dark") 的函数, 默认 light
        """
        self._system_theme = system_theme or (lambda: "light")
        self._callbacks = []
        self.theme = theme if theme in THEMES else "auto"

    def get_system_theme(self):
        return "dark" if self._system_theme() == "dark" else "light"

    def get_current_theme(self):
        """当前实际主题"""
        if self.theme == "auto":
            return self.get_system_theme()
        return self.theme

    def is_dark(self):
        return self.get_current_theme() == "dark"

    def set_theme(self, theme):
        if theme not in THEMES:
            LOGGER.warning(f"unknown theme: {theme}")
            return
        self.theme = theme
        actual = self.get_current_theme()
        LOGGER.info(f"theme set to {theme} ({actual})")
        for callback in list(self._callbacks):
            try:
                callback(actual)
            except Exception as e:
                LOGGER.error(f"theme change callback failed: {e}")

    def toggle_theme(self):
        """按 light -> dark -> auto 循环切换"""
        index = THEMES.index(self.theme)
        self.set_theme(THEMES[(index + 1) % len(THEMES)])

    def toggle(self):
        """只在 light 和 dark 之间切换"""
        self.set_theme("light" if self.is_dark() else "dark")

    def on_theme_change(self, callback):
        self._callbacks.append(callback)
