from PIL import Image

from conftest import run, settle
from imgloading import Container, ThemeManager
from imgloading.ui.overlays.base import FONTS


def test_dark_mask_tints_viewport_after_show(make_manager):
    async def scenario():
        manager = make_manager(theme=ThemeManager("dark"))
        manager.show("加载中")
        before = manager.render(Image.new("RGB", manager.root.size, "white"))
        await settle()
        after = manager.render(Image.new("RGB", manager.root.size, "white"))
        return before, after

    before, after = run(scenario())

    assert before.getpixel((0, 0)) == (255, 255, 255, 255)
    red, green, blue, alpha = after.getpixel((0, 0))
    assert alpha == 255
    assert 45 <= red <= 57 and red == green == blue


def test_local_overlay_is_clipped_to_its_container(make_manager):
    async def scenario():
        manager = make_manager(theme=ThemeManager("dark"))
        panel = Container(100, 80, x=50, y=40, name="panel")
        manager.local(panel, "局部")
        await settle()
        return manager.render(Image.new("RGB", manager.root.size, "white"))

    image = run(scenario())

    assert image.getpixel((10, 10)) == (255, 255, 255, 255)
    assert image.getpixel((55, 45))[0] < 100
    assert image.getpixel((160, 45)) == (255, 255, 255, 255)


def test_render_without_overlays_returns_copy(make_manager):
    manager = make_manager()
    base = Image.new("RGB", manager.root.size, "white")
    result = manager.render(base)
    assert result is not base
    assert result.mode == "RGBA"
    assert result.getpixel((5, 5)) == (255, 255, 255, 255)
    assert manager.render().getpixel((5, 5)) == (0, 0, 0, 0)


def test_chinese_labels_render_distinct_glyphs(make_manager):
    font = FONTS.get(14)
    assert bytes(font.getmask("加")) != bytes(font.getmask("载"))

    async def scenario():
        manager = make_manager()
        loading = manager.local(Container(120, 100, name="a"), {"text": "加载", "mask": False})
        upload = manager.local(Container(120, 100, name="b"), {"text": "上传", "mask": False})
        await settle()
        images = []
        for handle in (loading, upload):
            handle.visual.spin = None
            images.append(handle.visual.get_image((120, 100)))
        return images

    first, second = run(scenario())

    assert first.size == second.size
    assert first.tobytes() != second.tobytes()
