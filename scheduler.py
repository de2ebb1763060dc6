"""갱신 주기 관리 모듈 — 시계 프레임 재그리기 타이밍을 관리한다.

초침은 1초에 한 번만 움직이므로 최소 1초에 한 번 그리면 충분하다.
"""

from content.timesource import TimeSample

MAX_INTERVAL = 1.0
BOUNDARY_SLACK = 0.01   # 초 경계 직후에 깨어나도록 더하는 여유


class FrameScheduler:
    """프레임 간격과 재그리기 필요 여부를 관리한다."""

    def __init__(self, fps: float = 1):
        if fps and fps > 0:
            self._interval = min(MAX_INTERVAL, 1.0 / fps)
        else:
            self._interval = MAX_INTERVAL
        self._last: TimeSample | None = None

    @property
    def interval(self) -> float:
        return self._interval

    def should_render(self, sample: TimeSample) -> bool:
        """표시할 초가 바뀌었는지 확인한다."""
        if sample != self._last:
            self._last = sample
            return True
        return False

    def delay_after(self, frame_start: float, now: float, wall: float | None = None) -> float:
        """다음 프레임까지 남은 대기 시간 (0 ~ interval).

        wall(time.time())을 주면 다음 초 경계 직후를 넘기지 않도록 줄여서
        sleep 지연이 쌓여도 표시할 초를 건너뛰지 않는다.
        """
        elapsed = now - frame_start
        delay = max(0.0, self._interval - elapsed)
        if wall is not None:
            delay = min(delay, 1.0 - wall % 1.0 + BOUNDARY_SLACK)
        return min(self._interval, delay)

    def reset(self):
        """다음 프레임을 즉시 그리도록 리셋한다."""
        self._last = None
