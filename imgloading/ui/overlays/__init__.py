"""
加载覆盖层模块
在容器或整个视口上显示加载动画, 管理多个实例的生命周期和堆叠位置
"""

from imgloading.ui.overlays.base import OverlayInstance, OverlayState
from imgloading.ui.overlays.config import AnchorPosition, OverlayConfig
from imgloading.ui.overlays.handle import LoadingHandle
from imgloading.ui.overlays.manager import LoadingManager

__all__ = [
    'AnchorPosition',
    'LoadingHandle',
    'LoadingManager',
    'OverlayConfig',
    'OverlayInstance',
    'OverlayState',
]
