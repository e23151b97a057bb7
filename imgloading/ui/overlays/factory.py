"""
加载覆盖层工厂
根据配置创建可视树
"""

from imgloading.ui.overlays.base import Node, Visual
from imgloading.ui.spinner import Spinner
from imgloading.ui.styles import SPIN_KEYFRAMES, apply_styles, get_keyframes, inject_global_style

TRANSITION = 0.2


def build(config, dark_mode, transition=TRANSITION):
    """
    创建加载动画可视树

    Args:
        config: OverlayConfig
        dark_mode: 是否暗黑模式, 只在创建时读取一次
        transition: 显示/隐藏过渡时长（秒）

    Returns:
        Visual
    """
    inject_global_style()
    name = config.class_name

    # 主容器
    root = Node(name)
    root.dataset["class_name"] = name
    root.dataset["fullscreen"] = config.fullscreen
    if config.anchor is not None:
        root.dataset["position"] = config.anchor.value
    apply_styles(root, "base")
    root.style["z_index"] = config.z_index
    root.style["transition"] = transition

    if config.fullscreen:
        apply_styles(root, "fullscreen")
    else:
        root.style["position"] = "absolute"

    # 遮罩层
    mask = None
    if config.mask:
        mask = root.append_child(Node(f"{name}-mask"))
        apply_styles(mask, "mask", dark_mode)

    # 加载动画容器
    spinner_container = Node(f"{name}-spinner-container")
    apply_styles(spinner_container, "spinner_container")

    # 圆环, 强调色只用在顶部弧线
    spinner = spinner_container.append_child(Node(f"{name}-spinner"))
    apply_styles(spinner, "spinner", dark_mode)
    spinner.style["border_top_color"] = config.color

    # 文本
    text = spinner_container.append_child(Node(f"{name}-text"))
    text.dataset["for"] = name
    apply_styles(text, "text", dark_mode)
    text.text = config.text

    root.append_child(spinner_container)

    return Visual(
        root,
        spinner_container,
        spinner,
        text,
        mask=mask,
        anchor=config.anchor,
        spin=Spinner.from_keyframes(get_keyframes(SPIN_KEYFRAMES)),
    )
