"""그리기 프리미티브 모듈 — 한 프레임을 구성하는 원·선분·텍스트."""

from dataclasses import dataclass

# 색상 (RGBA)
WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
RED = (255, 0, 0, 255)

# 화면 배경색 (dodger blue)
BACKGROUND = (30, 144, 255, 255)

Point = tuple[float, float]


@dataclass(frozen=True)
class Style:
    """채우기/선 스타일."""
    color: tuple = BLACK
    width: int = 1
    fill: bool = False
    font_size: int = 0


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float
    style: Style


@dataclass(frozen=True)
class LineSegment:
    start: Point
    end: Point
    style: Style


@dataclass(frozen=True)
class Text:
    """위치는 글리프 잉크 영역의 좌상단."""
    text: str
    position: Point
    style: Style


Primitive = Circle | LineSegment | Text

# 고정 스타일
FACE_FILL = Style(color=WHITE, fill=True)
FACE_OUTLINE = Style(color=BLACK, width=4)
PIVOT = Style(color=BLACK, fill=True)
TICK = Style(color=BLACK, width=4)
HAND = Style(color=BLACK, width=4)
SECOND_HAND_WIDTH = 2


def numeral_style(font_size: int) -> Style:
    return Style(color=BLACK, fill=True, font_size=font_size)


def second_hand_style(color: tuple) -> Style:
    return Style(color=color, width=SECOND_HAND_WIDTH)
