# /*****************************************************************************
# * | File        :	  main.py
# * | Function    :   Loading overlay demo for the image hosting frontend
# * | Info        :
# *----------------
# * | This version:   V1.0
# ******************************************************************************/
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documnetation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to  whom the Software is
# furished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS OR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
# THE SOFTWARE.

import asyncio
from pathlib import Path

from PIL import Image, ImageDraw

from imgloading import AnchorPosition, Container, LoadingManager, ThemeManager
from imgloading.until.config import load_config
from imgloading.until.log import LOGGER


def _draw_page(root, panels, dark):
    """画一个简单的图片列表页面作为背景"""
    image = Image.new("RGB", root.size, "#1f1f1f" if dark else "#f5f5f5")
    draw = ImageDraw.Draw(image)
    for panel in panels:
        x, y, w, h = panel.box
        draw.rectangle((x, y, x + w - 1, y + h - 1), fill="#2b2b2b" if dark else "white", outline="#888")
    return image


async def run_demo(manager, panels, output):
    output.mkdir(parents=True, exist_ok=True)
    frame = 0

    async def snapshot(name, wait=None):
        nonlocal frame
        await asyncio.sleep(manager.transition + manager.show_tick if wait is None else wait)
        page = _draw_page(manager.root, panels, manager.theme.is_dark())
        path = output / f"{frame:02d}-{name}.png"
        manager.render(page).save(path)
        LOGGER.info(f"saved {path}")
        frame += 1

    # 全屏加载, 中途更新文本
    loading = manager.show("加载图片列表...")
    await snapshot("fullscreen")
    loading.update_text("还在加载...")
    loading.update_color("#52c41a")
    await snapshot("updated", wait=0)
    await loading.hide()

    # 每个面板一个右上角的局部加载, 依次堆叠
    for index, panel in enumerate(panels):
        manager.local(panel, {"text": f"上传中 {index + 1}", "anchor": AnchorPosition.TOP_RIGHT, "mask": False})
    await snapshot("stacked")

    # 切换主题后创建的实例使用暗色样式
    manager.theme.toggle()
    manager.fullscreen({"text": "同步中...", "z_index": 10000})
    await snapshot("dark")

    await manager.hide_all()
    await snapshot("cleared", wait=0)


def main():
    viewport = load_config("viewport", {"width": 800, "height": 480})
    output = Path(load_config("demo", {}).get("output", "frames"))

    root = Container(viewport.get("width", 800), viewport.get("height", 480))
    panels = [
        Container(360, 120, x=20, y=20 + i * 140, name=f"panel-{i}")
        for i in range(3)
    ]
    manager = LoadingManager.from_config(root=root, theme=ThemeManager("light"))

    asyncio.run(run_demo(manager, panels, output))


if __name__ == "__main__":
    main()
