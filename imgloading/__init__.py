"""
imgloading
图床前端的加载动画管理器
"""

from imgloading.screen.container import Container
from imgloading.screen.theme import ThemeManager
from imgloading.ui.overlays import (
    AnchorPosition,
    LoadingHandle,
    LoadingManager,
    OverlayConfig,
    OverlayState,
)

__version__ = "1.0.0"

__all__ = [
    'AnchorPosition',
    'Container',
    'LoadingHandle',
    'LoadingManager',
    'OverlayConfig',
    'OverlayState',
    'ThemeManager',
]
