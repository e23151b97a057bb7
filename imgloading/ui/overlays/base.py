"""
加载覆盖层基础结构
节点树、可视对象和单个实例的状态机
"""

import math
from enum import Enum

from PIL import Image, ImageDraw

from imgloading.ui.animation import Animation
from imgloading.ui.fonts import Fonts
from imgloading.ui.spinner import draw_ring
from imgloading.ui.styles import STYLES, apply_styles
from imgloading.until.log import LOGGER

FONTS = Fonts()

# 会触发过渡动画的根节点样式
ANIMATED = ("opacity", "translate_y")


class Node:
    """可视树中的一个节点"""

    def __init__(self, name):
        self.name = name
        self.style = {}
        self.dataset = {}
        self.text = ""
        self.children = []

    def append_child(self, node):
        self.children.append(node)
        return node

    def find(self, name):
        """按名字深度优先查找子节点"""
        for child in self.children:
            if child.name == name:
                return child
            found = child.find(name)
            if found is not None:
                return found
        return None


def text_size(font, text):
    if not text:
        return 0, 0
    bbox = font.getbbox(text)
    return math.ceil(bbox[2]), math.ceil(bbox[3])


class Visual:
    """单个加载覆盖层的可视树，挂载到容器上后才会被渲染"""

    def __init__(self, root, spinner_container, spinner, text, mask=None, anchor=None, spin=None):
        """
        Args:
            root: 根节点
            spinner_container: 加载动画容器节点
            spinner: 圆环节点
            text: 文本节点
            mask: 遮罩节点, 没有遮罩时为 None
            anchor: AnchorPosition 或 None
            spin: 提供旋转角度的 Spinner
        """
        self.root = root
        self.spinner_container = spinner_container
        self.spinner = spinner
        self.text = text
        self.mask = mask
        self.anchor = anchor
        self.spin = spin
        self.container = None

        self.anim = Animation(duration=root.style["transition"])
        for key in ANIMATED:
            self.anim.reset(key, root.style[key])

    @property
    def fullscreen(self):
        return self.root.style["position"] == "fixed"

    @property
    def attached(self):
        return self.container is not None

    @property
    def opacity(self):
        return self.anim.value("opacity")

    @property
    def translate_y(self):
        return self.anim.value("translate_y")

    def find(self, name):
        if self.root.name == name:
            return self.root
        return self.root.find(name)

    def apply(self, name):
        """给根节点应用样式表, 透明度和位移以过渡动画生效"""
        apply_styles(self.root, name)
        for key in ANIMATED:
            if key in STYLES[name]:
                self.anim.start(key, self.root.style[key], duration=self.root.style["transition"])

    def measure(self):
        """内容尺寸 (宽, 高)"""
        box = self.spinner_container.style
        ring = self.spinner.style["size"] + 2 * self.spinner.style["border_width"]
        text_w, text_h = text_size(FONTS.get(self.text.style["font_size"]), self.text.text)
        pad = box["padding"]
        return max(ring, text_w) + 2 * pad, ring + box["gap"] + text_h + 2 * pad

    def box(self, viewport, container):
        """
        计算在视口中的位置

        Returns:
            (x, y, width, height)
        """
        style = self.root.style
        dy = round(self.translate_y)

        if self.fullscreen:
            x = style.get("left", 0)
            y = style.get("top", 0)
            width = viewport.width - x - style.get("right", 0)
            height = viewport.height - y - style.get("bottom", 0)
            return x, y + dy, width, height

        cx, cy, cw, ch = container.box
        if self.anchor is None:
            return cx, cy + dy, cw, ch

        width, height = self.measure()
        if "left_ratio" in style:
            x = cx + cw * style["left_ratio"] + width * style.get("translate_x_ratio", 0)
        elif "right" in style:
            x = cx + cw - style["right"] - width
        else:
            x = cx + style.get("left", 0)

        if "bottom" in style:
            y = cy + ch - style["bottom"] - height
        else:
            y = cy + style.get("top", 0)

        return round(x), round(y) + dy, width, height

    def get_image(self, size):
        """按当前透明度渲染, 完全透明时返回 None"""
        opacity = self.opacity
        if opacity <= 0:
            return None

        width, height = size
        image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        if self.mask is not None:
            ImageDraw.Draw(image).rectangle(
                (0, 0, width - 1, height - 1), fill=self.mask.style["background"]
            )

        # 圆环和文字画在单独的图层上再合成, 避免覆盖遮罩的 alpha
        layer = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)
        content_w, content_h = self.measure()
        pad = self.spinner_container.style["padding"]
        left = (width - content_w) // 2
        top = (height - content_h) // 2 + pad

        spinner = self.spinner.style
        ring = spinner["size"] + 2 * spinner["border_width"]
        ring_x = left + (content_w - ring) // 2
        angle = self.spin.frame() if self.spin is not None else 0
        draw_ring(
            draw,
            (ring_x, top, ring_x + ring - 1, top + ring - 1),
            angle,
            spinner["border_color"],
            spinner["border_top_color"],
            spinner["border_width"],
        )

        font = FONTS.get(self.text.style["font_size"])
        text_w, _ = text_size(font, self.text.text)
        if self.text.text:
            draw.text(
                (left + (content_w - text_w) // 2, top + ring + self.spinner_container.style["gap"]),
                self.text.text,
                font=font,
                fill=self.text.style["color"],
            )

        image = Image.alpha_composite(image, layer)
        if opacity < 1:
            alpha = image.getchannel("A").point(lambda a: round(a * opacity))
            image.putalpha(alpha)
        return image

    def release(self):
        self.root.children.clear()
        self.mask = None
        self.spin = None
        self.container = None


class OverlayState(Enum):
    PENDING = "pending"
    VISIBLE = "visible"
    HIDING = "hiding"
    DESTROYED = "destroyed"


TRANSITIONS = {
    OverlayState.PENDING: (OverlayState.VISIBLE, OverlayState.HIDING),
    OverlayState.VISIBLE: (OverlayState.HIDING,),
    OverlayState.HIDING: (OverlayState.DESTROYED,),
    OverlayState.DESTROYED: (),
}


class OverlayInstance:
    """单个加载覆盖层实例"""

    def __init__(self, id, seq, config, visual):
        self.id = id
        self.seq = seq  # 创建顺序
        self.config = config
        self.visual = visual
        self.state = OverlayState.PENDING

        # 显示/销毁过渡用的定时器, 以及延迟隐藏的定时器
        self.pending_timer = None
        self.hide_timer = None
        # 销毁完成时 resolve 的 future
        self.closed = None
        self.handle = None

    @property
    def is_live(self):
        return self.state in (OverlayState.PENDING, OverlayState.VISIBLE)

    def schedule(self, timer):
        """替换当前的过渡定时器"""
        if self.pending_timer is not None:
            self.pending_timer.cancel()
        self.pending_timer = timer

    def schedule_hide(self, timer):
        """替换当前的延迟隐藏定时器"""
        if self.hide_timer is not None:
            self.hide_timer.cancel()
        self.hide_timer = timer

    def cancel_timers(self):
        self.schedule(None)
        self.schedule_hide(None)

    def transition(self, state):
        """
        切换状态, 不允许的切换直接忽略

        Returns:
            是否切换成功
        """
        if state not in TRANSITIONS[self.state]:
            LOGGER.debug(f"{self.id}: ignore {self.state.value} -> {state.value}")
            return False

        if state is OverlayState.VISIBLE:
            self.schedule(None)
        else:
            self.cancel_timers()

        LOGGER.debug(f"{self.id}: {self.state.value} -> {state.value}")
        self.state = state

        if state is OverlayState.DESTROYED and self.visual is not None:
            self.visual.release()
            self.visual = None
        return True
