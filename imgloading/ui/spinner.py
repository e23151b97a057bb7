import time


class Spinner:
    def __init__(self, frames, interval, clock=time.monotonic):
        self._frames = tuple(frames)
        self._interval = interval
        self._pos = 0
        self._clock = clock
        self._last = clock()

    @classmethod
    def from_keyframes(cls, keyframes, steps=12, clock=time.monotonic):
        """按关键帧(起止角度 + 周期)生成等间隔的旋转帧"""
        start = keyframes["from"]
        span = keyframes["to"] - start
        frames = [start + span * i / steps for i in range(steps)]
        return cls(frames, keyframes["duration"] / steps, clock=clock)

    def frame(self):
        now = self._clock()
        if now - self._last >= self._interval:
            # 跳过落下的帧，保持旋转速度恒定
            skipped = int((now - self._last) / self._interval)
            self._pos = (self._pos + skipped) % len(self._frames)
            self._last = now
        return self._frames[self._pos]


def draw_ring(draw, bbox, angle, track, accent, width):
    """绘制一个旋转圆环：淡色轨道 + 顶部四分之一强调色弧线"""
    draw.ellipse(bbox, outline=track, width=width)
    # PIL 的 0 度在三点钟方向，顶部弧线为 225..315
    draw.arc(bbox, start=225 + angle, end=315 + angle, fill=accent, width=width)
