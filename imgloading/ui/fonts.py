from PIL import ImageFont

from imgloading.until.resource import get_resource_path

# 提示文本默认是中文, 需要带 CJK 字形的字体
FONT_PATH = "assets/fonts/NotoSansCJKsc-Regular.otf"


class Fonts:
    def __init__(self, path=FONT_PATH):
        self.path = get_resource_path(path)
        self._cache = {}
        self.size_12 = self.get(12)
        self.size_14 = self.get(14)

    def get(self, size):
        """按字号取字体"""
        font = self._cache.get(size)
        if font is None:
            font = ImageFont.truetype(self.path, size)
            self._cache[size] = font
        return font
