from __future__ import annotations

import asyncio

import pytest

from imgloading import Container, LoadingManager, ThemeManager

TRANSITION = 0.02
SHOW_TICK = 0.005
SETTLE = 0.1  # 足够完成一次显示或隐藏过渡


def run(coro):
    return asyncio.run(coro)


async def settle(seconds: float = SETTLE) -> None:
    await asyncio.sleep(seconds)


@pytest.fixture
def make_manager():
    def _make(theme: ThemeManager | None = None, **kwargs) -> LoadingManager:
        kwargs.setdefault("transition", TRANSITION)
        kwargs.setdefault("show_tick", SHOW_TICK)
        return LoadingManager(root=Container(320, 240), theme=theme or ThemeManager("light"), **kwargs)

    return _make
