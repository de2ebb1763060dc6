"""프레임 렌더링 모듈 — 레이아웃 → 래스터화 → 출력 화면 합성."""

from PIL import Image

from content.clock import ClockLayoutEngine
from content.timesource import TimeSample

from .canvas import Canvas
from .layers import LayerCompositor


class ClockRenderer:
    """시각 샘플 하나로 출력 화면 크기의 RGB 프레임을 만든다."""

    def __init__(self, engine: ClockLayoutEngine, render_size: int, panel_size: int):
        self._engine = engine
        self._canvas = Canvas(render_size)
        self._compositor = LayerCompositor(panel_size, panel_size)

    def render_clock(self, sample: TimeSample) -> Image.Image:
        """렌더링 해상도의 RGBA 시계 이미지."""
        self._canvas.clear()
        return self._canvas.draw(self._engine.layout_frame(self._canvas.size, sample))

    def render(self, sample: TimeSample) -> Image.Image:
        return self._compositor.compose(self.render_clock(sample))
