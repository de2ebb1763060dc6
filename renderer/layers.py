"""레이어 합성 모듈 — 배경 + 시계 이미지."""

from PIL import Image

from .layout import Layout
from .primitives import BACKGROUND


class LayerCompositor:
    """렌더링한 시계를 출력 화면 크기에 맞춰 합성하여 최종 프레임을 생성한다."""

    def __init__(self, width: int, height: int, background: tuple = BACKGROUND):
        self._width = width
        self._height = height
        self._background = background
        self._layout = Layout(width, height)

    def compose(self, clock: Image.Image) -> Image.Image:
        """시계 이미지를 축소·중앙 배치하여 RGB 이미지를 반환한다.

        Args:
            clock: 정사각형 RGBA 시계 이미지 (렌더링 해상도)

        Returns:
            width x height RGB 이미지 (BLE 전송용)
        """
        frame = Image.new("RGBA", (self._width, self._height), self._background)
        side, position = self._layout.compose()
        if side > 0 and clock.width > 0:
            layer = clock if clock.size == (side, side) else clock.resize(
                (side, side), Image.Resampling.LANCZOS)
            if layer.mode != "RGBA":
                layer = layer.convert("RGBA")
            frame.paste(layer, position, layer)
        return frame.convert("RGB")
