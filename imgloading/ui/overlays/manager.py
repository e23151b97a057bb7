"""
加载覆盖层管理器
管理所有存活的加载实例: 显示、隐藏、更新、堆叠和渲染
"""

import asyncio
import dataclasses
import itertools

from PIL import Image, ImageColor

from imgloading.screen.container import Container
from imgloading.screen.theme import ThemeManager
from imgloading.ui.overlays.base import OverlayInstance, OverlayState
from imgloading.ui.overlays.config import DEFAULTS, OverlayConfig, merge_options, normalize_config
from imgloading.ui.overlays.factory import TRANSITION, build
from imgloading.ui.overlays.handle import LoadingHandle
from imgloading.ui.overlays.layout import GAP, OFFSET, recompute_positions
from imgloading.ui.overlays.registry import Registry
from imgloading.until.config import load_config
from imgloading.until.log import LOGGER

DEFAULT_VIEWPORT = (800, 480)
SHOW_TICK = 0.01  # 等初始透明样式生效后再开始过渡

# 配置文件中属于管理器本身的字段
MANAGER_KEYS = ("offset", "gap", "transition", "show_tick")


def _composite(result, image, x, y):
    """把覆盖层图像合成到结果上, 超出边界的部分裁掉"""
    left = max(0, -x)
    top = max(0, -y)
    right = min(image.width, result.width - x)
    bottom = min(image.height, result.height - y)
    if left >= right or top >= bottom:
        return
    result.alpha_composite(image.crop((left, top, right, bottom)), dest=(x + left, y + top))


class LoadingManager:
    """加载覆盖层管理器"""

    def __init__(
        self,
        root=None,
        theme=None,
        defaults=None,
        offset=OFFSET,
        gap=GAP,
        transition=TRANSITION,
        show_tick=SHOW_TICK,
        loop=None,
    ):
        """
        初始化加载覆盖层管理器

        Args:
            root: 根容器（视口）, 没有指定容器的实例都挂到这里
            theme: 提供 is_dark() 的主题信号
            defaults: 默认配置, OverlayConfig 或部分配置字典
            offset: 堆叠时距离容器边缘的偏移
            gap: 堆叠间距
            transition: 显示/隐藏过渡时长（秒）
            show_tick: 显示前的延迟（秒）
            loop: 事件循环, 默认取调用时正在运行的循环
        """
        self.root = root if root is not None else Container(*DEFAULT_VIEWPORT)
        self.theme = theme if theme is not None else ThemeManager()
        if isinstance(defaults, OverlayConfig):
            self.defaults = normalize_config(defaults)
        else:
            self.defaults = merge_options(DEFAULTS, defaults or {})
        self.offset = offset
        self.gap = gap
        self.transition = transition
        self.show_tick = show_tick
        self.registry = Registry()

        self._loop = loop
        self._seq = itertools.count(1)
        self._attached = []  # 仍挂在容器上的实例（包括正在隐藏的）

    @classmethod
    def from_config(cls, root=None, theme=None, **kwargs):
        """按配置文件的 "loading" 段创建管理器"""
        section = dict(load_config("loading", {}))
        for key in MANAGER_KEYS:
            if key in section:
                kwargs.setdefault(key, section.pop(key))
        LOGGER.info(f"loading defaults from config: {section}")
        return cls(root=root, theme=theme, defaults=section, **kwargs)

    def configure(self, **fields):
        """修改默认配置, 只影响之后创建的实例"""
        self.defaults = merge_options(self.defaults, fields)

    def _get_loop(self):
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def _resolve(self, target):
        """handle / 实例 / id -> 实例"""
        if isinstance(target, LoadingHandle):
            return target.instance
        if isinstance(target, OverlayInstance):
            return target
        if isinstance(target, str):
            instance = self.registry.get(target)
            if instance is not None:
                return instance
            for instance in self._attached:
                if instance.id == target:
                    return instance
        return None

    def _notify(self, callback, name, instance):
        if callback is None:
            return
        try:
            callback()
        except Exception as e:
            LOGGER.error(f"{instance.id}: {name} callback failed: {e}")

    def _relayout(self, anchor):
        recompute_positions(self.registry, anchor, offset=self.offset, gap=self.gap)

    def show(self, options=None):
        """
        显示加载动画

        Args:
            options: 提示文本、部分配置字典或 OverlayConfig

        Returns:
            LoadingHandle
        """
        loop = self._get_loop()
        config = normalize_config(options, self.defaults)
        if config.container is None:
            config = dataclasses.replace(config, container=self.root)
        container = config.container

        visual = build(config, self.theme.is_dark(), transition=self.transition)
        container.append_child(visual)
        if not config.fullscreen:
            container.style["position"] = "relative"

        seq = next(self._seq)
        instance = OverlayInstance(f"loading-{seq}", seq, config, visual)
        instance.handle = LoadingHandle(self, instance)
        self._attached.append(instance)

        # 同一容器同一模式只保留最新的一个
        for existing in self.registry.match(container, config.fullscreen):
            LOGGER.info(f"{existing.id} replaced by {instance.id} on {container.name}")
            self.hide(existing)
            self.registry.remove(existing)

        self.registry.add(instance)
        if not config.fullscreen and config.anchor is not None:
            self._relayout(config.anchor)

        instance.schedule(loop.call_later(self.show_tick, self._reveal, instance))
        LOGGER.debug(f"{instance.id} show: {config.text}")
        return instance.handle

    def fullscreen(self, options=None):
        """创建全屏加载"""
        config = normalize_config(options, self.defaults)
        return self.show(dataclasses.replace(config, fullscreen=True))

    def local(self, container, options=None):
        """创建局部加载"""
        config = normalize_config(options, self.defaults)
        return self.show(dataclasses.replace(config, fullscreen=False, container=container))

    def _reveal(self, instance):
        if instance.state is not OverlayState.PENDING:
            return
        instance.visual.apply("show")
        instance.schedule(self._get_loop().call_later(self.transition, self._shown, instance))

    def _shown(self, instance):
        if instance.transition(OverlayState.VISIBLE):
            self._notify(instance.config.on_show, "on_show", instance)

    def hide(self, target, delay=0):
        """
        隐藏加载动画

        Args:
            target: LoadingHandle、实例或实例 id
            delay: 延迟隐藏时间（秒）

        Returns:
            销毁完成后 resolve 的 future, 不会抛出异常
        """
        loop = self._get_loop()
        instance = self._resolve(target)
        if instance is None or instance.visual is None or not instance.visual.attached:
            LOGGER.warning("loading overlay no longer exists")
            closed = loop.create_future()
            closed.set_result(None)
            return closed

        if instance.closed is None:
            instance.closed = loop.create_future()
        if instance.state is OverlayState.HIDING:
            return instance.closed

        if delay and delay > 0:
            instance.schedule_hide(loop.call_later(delay, self._begin_hide, instance))
        else:
            self._begin_hide(instance)
        return instance.closed

    def _begin_hide(self, instance):
        if instance.visual is None or not instance.transition(OverlayState.HIDING):
            return
        self.registry.remove(instance)

        instance.visual.apply("hide")
        anchor = instance.config.anchor
        if anchor is not None and anchor.is_centered:
            instance.visual.apply("hide_center")

        instance.schedule(self._get_loop().call_later(self.transition, self._teardown, instance))

    def _teardown(self, instance):
        config = instance.config
        config.container.remove_child(instance.visual)
        if instance in self._attached:
            self._attached.remove(instance)

        self._notify(config.on_hide, "on_hide", instance)
        instance.transition(OverlayState.DESTROYED)
        LOGGER.debug(f"{instance.id} destroyed")

        if not config.fullscreen and config.anchor is not None:
            self._relayout(config.anchor)

        if instance.closed is not None and not instance.closed.done():
            instance.closed.set_result(None)

    def destroy(self, target):
        """立即隐藏并释放句柄持有的实例"""
        closed = self.hide(target, 0)
        if isinstance(target, LoadingHandle):
            closed.add_done_callback(lambda _: target._release())
        return closed

    def update_text(self, target, text):
        """更新加载文本"""
        instance = self._resolve(target)
        if instance is None or instance.visual is None or not text:
            return

        node = instance.visual.find(f"{instance.config.class_name}-text")
        if node is None:
            return
        node.text = text
        instance.config = dataclasses.replace(instance.config, text=text)

    def update_color(self, target, color):
        """更新加载动画颜色"""
        instance = self._resolve(target)
        if instance is None or instance.visual is None or not color:
            return

        try:
            ImageColor.getrgb(color)
        except (AttributeError, ValueError) as e:
            LOGGER.warning(f"{instance.id}: ignore color {color!r}: {e}")
            return
        node = instance.visual.find(f"{instance.config.class_name}-spinner")
        if node is None:
            return
        node.style["border_top_color"] = color
        instance.config = dataclasses.replace(instance.config, color=color)

    async def hide_all(self):
        """隐藏所有加载动画, 全部销毁后返回"""
        # 隐藏期间新 show 的实例也要一起隐藏, 直到注册表为空
        while self.registry:
            members = self.registry.snapshot()
            await asyncio.gather(*(self.hide(instance) for instance in members))

    def get_instance(self, container=None):
        """获取指定容器的加载实例, 默认根容器"""
        if container is None:
            container = self.root
        instance = self.registry.find_by_container(container)
        return instance.handle if instance is not None else None

    @property
    def instances(self):
        return [instance.handle for instance in self.registry]

    def has_active_overlays(self):
        """检查是否还有挂载中的覆盖层"""
        return len(self._attached) > 0

    def render(self, base_image=None):
        """
        渲染所有覆盖层到基础图像上

        Args:
            base_image: PIL Image, 视口图像; None 时使用透明画布

        Returns:
            PIL Image: 合成后的 RGBA 图像
        """
        if base_image is None:
            result = Image.new("RGBA", self.root.size, (0, 0, 0, 0))
        else:
            result = base_image.convert("RGBA")

        ordered = sorted(self._attached, key=lambda instance: (instance.config.z_index, instance.seq))
        for instance in ordered:
            visual = instance.visual
            if visual is None:
                continue
            x, y, width, height = visual.box(self.root, instance.config.container)
            if width <= 0 or height <= 0:
                continue
            image = visual.get_image((width, height))
            if image is not None:
                _composite(result, image, x, y)

        return result
