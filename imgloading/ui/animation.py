import time


class Animation:
    def __init__(self, duration=0.2, clock=time.monotonic):
        self.animation_list = {}
        self.default_duration = duration
        self.default_operator = Operator.ease_in_out_quad
        self._clock = clock

    def reset(self, id, current=0):
        '''
        重置动画，停在 current
        id: 动画id
        '''
        self.animation_list[id] = {
            "start": current,
            "current": current,
            "target": current,
            "duration": self.default_duration,
            "start_time": None,
            "operator": self.default_operator,
        }

    def start(self, id, target, duration=None, operator=None):
        '''
        从当前值开始过渡到目标值
        id: 动画id
        target: 目标值
        duration: 动画时长，<= 0 时直接跳到目标值
        '''
        current = self.value(id, default=target)
        if duration is None:
            duration = self.default_duration
        self.animation_list[id] = {
            "start": current,
            "current": current,
            "target": target,
            "duration": duration,
            "start_time": self._clock() if duration > 0 else None,
            "operator": operator if operator is not None else self.default_operator,
        }
        if duration <= 0:
            self.animation_list[id]["current"] = target

    def value(self, id, default=0):
        '''
        取当前动画值
        id: 动画id
        '''
        anim = self.animation_list.get(id)
        if anim is None:
            return default

        if anim["start_time"] is not None:
            elapsed = self._clock() - anim["start_time"]
            if elapsed < anim["duration"]:
                progress = anim["operator"](elapsed / anim["duration"])
                anim["current"] = anim["start"] + (anim["target"] - anim["start"]) * progress
                return anim["current"]
            anim["start_time"] = None

        anim["current"] = anim["target"]
        return anim["current"]

    def is_running(self, id):
        '''
        判断动画是否正在运行
        id: 动画id
        '''
        anim = self.animation_list.get(id)
        if anim is None or anim["start_time"] is None:
            return False
        return self._clock() - anim["start_time"] < anim["duration"]


class Operator:
    @staticmethod
    def ease_linear(t):
        """线性缓动"""
        return t

    @staticmethod
    def ease_in_quad(t):
        """二次方缓入"""
        return t * t

    @staticmethod
    def ease_out_quad(t):
        """二次方缓出"""
        return t * (2 - t)

    @staticmethod
    def ease_in_out_quad(t):
        """二次方缓入缓出 (css ease 的近似)"""
        return 2 * t * t if t < 0.5 else -1 + (4 - 2 * t) * t

    @staticmethod
    def ease_out_cubic(t):
        """三次方缓出"""
        return (t - 1) * (t - 1) * (t - 1) + 1
