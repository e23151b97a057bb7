from imgloading.ui.overlays.base import OverlayState


class LoadingHandle:
    """show() 返回给调用方的句柄"""

    def __init__(self, manager, instance):
        self._manager = manager
        self._instance = instance
        self.id = instance.id

    def __repr__(self):
        return f"LoadingHandle({self.id!r}, {self.state.value})"

    @property
    def instance(self):
        return self._instance

    @property
    def state(self):
        if self._instance is None:
            return OverlayState.DESTROYED
        return self._instance.state

    @property
    def config(self):
        return self._instance.config if self._instance is not None else None

    @property
    def visual(self):
        return self._instance.visual if self._instance is not None else None

    def hide(self, delay=0):
        return self._manager.hide(self, delay)

    def destroy(self):
        return self._manager.destroy(self)

    def update_text(self, text):
        self._manager.update_text(self, text)

    def update_color(self, color):
        self._manager.update_color(self, color)

    def _release(self):
        self._instance = None
