class Registry:
    """按插入顺序保存存活的覆盖层实例, id 唯一"""

    def __init__(self):
        self._instances = {}

    def __len__(self):
        return len(self._instances)

    def __iter__(self):
        return iter(list(self._instances.values()))

    def __contains__(self, instance):
        return self._instances.get(instance.id) is instance

    def add(self, instance):
        if instance.id in self._instances:
            raise ValueError(f"duplicate loading instance: {instance.id}")
        self._instances[instance.id] = instance

    def remove(self, instance):
        """移除实例, 返回是否存在"""
        if instance in self:
            del self._instances[instance.id]
            return True
        return False

    def get(self, id):
        return self._instances.get(id)

    def match(self, container, fullscreen):
        """同一 (容器, 全屏) 组合下的实例"""
        return [
            instance for instance in self._instances.values()
            if instance.config.container is container and instance.config.fullscreen == fullscreen
        ]

    def find_by_container(self, container):
        for instance in self._instances.values():
            if instance.config.container is container:
                return instance
        return None

    def snapshot(self):
        return list(self._instances.values())
