class Container:
    """可挂载覆盖层的矩形区域, 坐标相对于视口"""

    def __init__(self, width, height, x=0, y=0, name="body"):
        self.name = name
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.style = {}
        self._children = []

    def __repr__(self):
        return f"Container({self.name!r}, {self.width}x{self.height}+{self.x}+{self.y})"

    @property
    def box(self):
        return self.x, self.y, self.width, self.height

    @property
    def size(self):
        return self.width, self.height

    @property
    def children(self):
        return list(self._children)

    def append_child(self, visual):
        if visual not in self._children:
            self._children.append(visual)
        visual.container = self

    def remove_child(self, visual):
        """移除子节点, 返回是否存在"""
        if visual not in self._children:
            return False
        self._children.remove(visual)
        visual.container = None
        return True

    def contains(self, visual):
        return visual in self._children
