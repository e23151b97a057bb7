"""
同位置覆盖层的堆叠布局
非全屏且 anchor 相同的实例按创建顺序纵向排列, 互不重叠
"""

from imgloading.ui.overlays.base import OverlayState

OFFSET = 20  # 距离容器边缘
GAP = 12  # 堆叠间距


def anchor_group(instances, anchor):
    """同一 anchor 下参与堆叠的实例, 按创建顺序"""
    group = [
        instance for instance in instances
        if instance.state is not OverlayState.DESTROYED
        and instance.visual is not None
        and not instance.config.fullscreen
        and instance.config.anchor == anchor
    ]
    group.sort(key=lambda instance: instance.seq)
    return group


def recompute_positions(instances, anchor, offset=OFFSET, gap=GAP):
    """
    重新计算同位置实例的堆叠位置

    Args:
        instances: 候选实例（通常是 Registry）
        anchor: AnchorPosition
        offset: 距离边缘的基础偏移
        gap: 相邻实例之间的间距

    Returns:
        参与布局的实例列表
    """
    if anchor is None:
        return []
    group = anchor_group(instances, anchor)
    if not group:
        return group

    vertical, horizontal = anchor.vertical, anchor.horizontal
    total = 0
    previous = None
    for instance in group:
        style = instance.visual.root.style

        # 水平位置
        if anchor.is_centered:
            style["left_ratio"] = 0.5
            style["translate_x_ratio"] = -0.5
        else:
            style[horizontal] = offset

        # 垂直位置, 依次叠加前一个的高度和间距
        if previous is not None:
            total += previous.visual.measure()[1] + gap
        style[vertical] = offset + total
        previous = instance

    return group
