"""
加载覆盖层配置
调用方传入的字符串或字典在入口处统一转换成 OverlayConfig
"""

import dataclasses
import functools
from collections.abc import Mapping
from enum import Enum
from typing import Callable, Optional

from PIL import ImageColor


class AnchorPosition(str, Enum):
    """非全屏覆盖层的堆叠位置"""

    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"

    @property
    def vertical(self):
        return self.value.split("-")[0]

    @property
    def horizontal(self):
        return self.value.split("-")[1]

    @property
    def is_centered(self):
        return self.horizontal == "center"


@dataclasses.dataclass(frozen=True)
class OverlayConfig:
    text: str = "加载中..."  # 加载提示文本
    class_name: str = "custom-loading"  # 节点名前缀
    mask: bool = True  # 是否显示遮罩层
    color: str = "#1677ff"  # 加载动画主色调
    fullscreen: bool = True  # 是否全屏显示
    z_index: int = 9999  # 层级
    container: Optional[object] = None  # 挂载容器, None 表示根容器
    anchor: Optional[AnchorPosition] = None  # 非全屏时的堆叠位置
    on_show: Optional[Callable[[], None]] = None  # 显示回调
    on_hide: Optional[Callable[[], None]] = None  # 隐藏回调


DEFAULTS = OverlayConfig()

# 兼容前端风格的字段名
ALIASES = {
    "className": "class_name",
    "maskEnabled": "mask",
    "accentColor": "color",
    "zIndex": "z_index",
    "position": "anchor",
    "onShow": "on_show",
    "onHide": "on_hide",
}

FIELDS = frozenset(field.name for field in dataclasses.fields(OverlayConfig))


def _validate(config):
    """检查颜色与位置, 返回规范化后的配置"""
    if not isinstance(config.color, str):
        raise ValueError(f"loading color must be a string, got {config.color!r}")
    ImageColor.getrgb(config.color)
    anchor = config.anchor
    if anchor is not None and not isinstance(anchor, AnchorPosition):
        anchor = AnchorPosition(anchor)
    if anchor is not config.anchor:
        config = dataclasses.replace(config, anchor=anchor)
    return config


def merge_options(defaults, options):
    """把部分配置合并到默认配置上"""
    fields = {}
    for key, value in options.items():
        name = ALIASES.get(key, key)
        if name not in FIELDS:
            raise TypeError(f"unknown loading option: {key}")
        fields[name] = value
    return _validate(dataclasses.replace(defaults, **fields))


@functools.singledispatch
def normalize_config(options, defaults=DEFAULTS):
    """
    把 show() 的入参统一成 OverlayConfig

    Args:
        options: 提示文本、部分配置字典、完整的 OverlayConfig 或 None
        defaults: 合并用的默认配置
    """
    raise TypeError(f"unsupported loading options: {type(options).__name__}")


@normalize_config.register(type(None))
def _(options, defaults=DEFAULTS):
    return _validate(defaults)


@normalize_config.register(str)
def _(options, defaults=DEFAULTS):
    return _validate(dataclasses.replace(defaults, text=options))


@normalize_config.register(Mapping)
def _(options, defaults=DEFAULTS):
    return merge_options(defaults, options)


@normalize_config.register(OverlayConfig)
def _(options, defaults=DEFAULTS):
    return _validate(options)
