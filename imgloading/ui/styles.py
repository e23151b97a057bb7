"""
加载动画样式表
所有节点样式都通过命名样式表组合，暗黑模式只覆盖需要变化的字段
"""

from imgloading.until.log import LOGGER

STYLE_ID = "loading-global-style"
SPIN_KEYFRAMES = "loading-spin"

# 基础样式表
STYLES = {
    # 基础容器样式
    "base": {
        "position": "fixed",
        "opacity": 0.0,
        "translate_y": 0,
        "transition": 0.2,
    },
    # 全屏样式
    "fullscreen": {
        "top": 0,
        "left": 0,
        "right": 0,
        "bottom": 0,
    },
    # 显示状态
    "show": {
        "opacity": 1.0,
        "translate_y": 0,
    },
    # 隐藏状态（淡出 + 向上滑出）
    "hide": {
        "opacity": 0.0,
        "translate_y": -10,
    },
    # 居中位置隐藏时保持水平居中
    "hide_center": {
        "translate_x_ratio": -0.5,
    },
    # 遮罩层样式
    "mask": {
        "background": (255, 255, 255, 204),
    },
    # 加载动画容器
    "spinner_container": {
        "gap": 12,
        "padding": 12,
    },
    # 加载动画样式
    "spinner": {
        "size": 40,
        "border_width": 4,
        "border_color": (0, 0, 0, 26),
        "animation": SPIN_KEYFRAMES,
    },
    # 文本样式
    "text": {
        "font_size": 14,
        "color": "#666",
    },
}

# 暗黑模式覆盖
DARK_STYLES = {
    "mask": {"background": (0, 0, 0, 204)},
    "spinner": {"border_color": (255, 255, 255, 26)},
    "text": {"color": "#ccc"},
}

# 全局动画定义，只写入一次
_GLOBAL_STYLES = {}


def apply_styles(node, name, dark=False):
    """把命名样式表应用到节点上"""
    if node is None:
        return
    node.style.update(STYLES[name])
    if dark:
        node.style.update(DARK_STYLES.get(name, {}))


def inject_global_style():
    """
    注册全局旋转关键帧

    Returns:
        True 表示本次写入，False 表示已经存在
    """
    if STYLE_ID in _GLOBAL_STYLES:
        return False

    _GLOBAL_STYLES[STYLE_ID] = {
        SPIN_KEYFRAMES: {"from": 0, "to": 360, "duration": 1.0},
    }
    LOGGER.debug(f"global style {STYLE_ID} injected")
    return True


def get_keyframes(name):
    """取已注册的关键帧, 未注册时返回 None"""
    return _GLOBAL_STYLES.get(STYLE_ID, {}).get(name)
