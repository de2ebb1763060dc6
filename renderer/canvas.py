"""Pillow 캔버스 모듈 — 프리미티브 목록을 RGBA 이미지로 그린다."""

from PIL import Image, ImageDraw

from .primitives import BACKGROUND, Circle, LineSegment, Primitive, Text
from .text import get_font, text_bbox


class Canvas:
    """정사각형 RGBA 캔버스."""

    def __init__(self, size: int, background: tuple = BACKGROUND):
        self._size = max(0, int(size))
        self._background = background
        self._image = Image.new("RGBA", (self._size, self._size), background)

    @property
    def size(self) -> int:
        return self._size

    @property
    def image(self) -> Image.Image:
        return self._image

    def clear(self, color: tuple | None = None) -> None:
        """캔버스를 지정 색상(기본: 배경색)으로 초기화한다."""
        self._image = Image.new("RGBA", (self._size, self._size), color or self._background)

    def draw(self, primitives: list[Primitive]) -> Image.Image:
        """프리미티브를 순서대로 그리고 이미지를 반환한다."""
        draw = ImageDraw.Draw(self._image)
        for prim in primitives:
            if isinstance(prim, Circle):
                _draw_circle(draw, prim)
            elif isinstance(prim, LineSegment):
                _draw_line(draw, prim)
            elif isinstance(prim, Text):
                _draw_text(draw, prim)
        return self._image


def _draw_circle(draw: ImageDraw.ImageDraw, circle: Circle) -> None:
    # 반지름 0 이하는 그리지 않음
    if circle.radius <= 0:
        return
    cx, cy = circle.center
    r = circle.radius
    box = (cx - r, cy - r, cx + r, cy + r)
    if circle.style.fill:
        draw.ellipse(box, fill=circle.style.color)
    else:
        # 선 두께가 원주 양쪽에 걸치도록 박스를 반 두께만큼 확장
        half = circle.style.width / 2
        outer = (box[0] - half, box[1] - half, box[2] + half, box[3] + half)
        draw.ellipse(outer, outline=circle.style.color, width=circle.style.width)


def _draw_line(draw: ImageDraw.ImageDraw, line: LineSegment) -> None:
    draw.line([line.start, line.end], fill=line.style.color, width=line.style.width)


def _draw_text(draw: ImageDraw.ImageDraw, text: Text) -> None:
    font = get_font(text.style.font_size)
    left, top, _, _ = text_bbox(text.text, text.style.font_size)
    x, y = text.position
    # 잉크 영역 좌상단이 position에 오도록 bbox 원점만큼 보정
    draw.text((x - left, y - top), text.text, font=font, fill=text.style.color)
