"""아날로그 시계 콘텐츠 모듈 — 문자판·숫자·눈금·바늘 레이아웃 계산.

크기 S와 시각으로부터 한 프레임에 필요한 프리미티브 목록을 만든다.
각도는 0~60 단위로 표현하며 θ = π·unit/30 − π/2 (단위 0 = 12시, 15 = 3시).
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable

from renderer.primitives import (
    FACE_FILL, FACE_OUTLINE, HAND, PIVOT, RED, TICK,
    Circle, LineSegment, Point, Primitive, Text,
    numeral_style, second_hand_style,
)
from renderer.text import measure_text

from .timesource import TimeSample

logger = logging.getLogger(__name__)

MARGIN = 50
FACE_INSET = 10      # 문자판 원 = radius + MARGIN - FACE_INSET
TICK_INNER = 30      # 눈금 시작 거리 = radius + TICK_INNER
TICK_OUTER = 40
DEFAULT_FONT_SIZE = 16

TextMeasurer = Callable[[str, int], tuple[float, float]]


@dataclass(frozen=True)
class ClockConfig:
    """위젯 생성 시 한 번 주어지는 설정."""
    second_hand_color: tuple = RED
    second_hand_length: int | None = None   # None/0 이하 → 분침 길이
    font_size: int = DEFAULT_FONT_SIZE


@dataclass(frozen=True)
class DerivedGeometry:
    """크기 S에서 유도되는 길이들. 모두 0 이상."""
    size: float
    radius: float
    minute_hand_length: float
    hour_hand_length: float
    second_hand_length: float
    face_radius: float
    pivot_radius: float


def derive_geometry(size: float, config: ClockConfig) -> DerivedGeometry:
    """크기 S에 대한 기하 값을 계산한다. 0·음수 크기는 길이 0으로 수렴한다."""
    s = size if size > 0 else 0
    radius = max(0.0, s / 2 - MARGIN)
    minute_len = max(0.0, radius - s / 20)
    hour_len = max(0.0, radius - s / 5)
    override = config.second_hand_length
    second_len = float(override) if override and override > 0 else minute_len
    # 크기 0 이하만 문자판을 없앰, 그 외에는 clamp된 radius 기준
    face_radius = radius + MARGIN - FACE_INSET if s > 0 else 0.0
    return DerivedGeometry(
        size=s,
        radius=radius,
        minute_hand_length=minute_len,
        hour_hand_length=hour_len,
        second_hand_length=second_len,
        face_radius=face_radius,
        pivot_radius=radius / 100,
    )


def unit_angle(unit: float) -> float:
    """0~60 단위 위치를 라디안으로 변환한다."""
    return math.pi * unit / 30 - math.pi / 2


def polar(center: Point, angle: float, distance: float) -> Point:
    cx, cy = center
    return cx + math.cos(angle) * distance, cy + math.sin(angle) * distance


def hand_endpoint(center: Point, unit: float, length: float) -> Point:
    return polar(center, unit_angle(unit), length)


class ClockLayoutEngine:
    """아날로그 시계 한 프레임의 프리미티브를 계산한다.

    기하 값은 크기가 바뀔 때만 다시 계산하고 그 외에는 캐시를 재사용한다.
    """

    def __init__(self, config: ClockConfig | None = None,
                 measure: TextMeasurer = measure_text):
        self._config = config or ClockConfig()
        self._measure = measure
        self._geometry: DerivedGeometry | None = None
        self._hand_style = second_hand_style(self._config.second_hand_color)
        self._numeral_style = numeral_style(self._config.font_size)

    def compute_geometry(self, size: float) -> DerivedGeometry:
        """캐시된 기하 값을 반환한다. 크기가 바뀌었으면 다시 계산한다."""
        if self._geometry is None or self._geometry.size != max(size, 0):
            self._geometry = derive_geometry(size, self._config)
            logger.debug("기하 재계산: S=%s radius=%.1f", size, self._geometry.radius)
        return self._geometry

    def layout_face(self, center: Point, geometry: DerivedGeometry) -> list[Circle]:
        return [
            Circle(center, geometry.face_radius, FACE_FILL),
            Circle(center, geometry.face_radius, FACE_OUTLINE),
            Circle(center, geometry.pivot_radius, PIVOT),
        ]

    def layout_numerals(self, center: Point, geometry: DerivedGeometry) -> list[Text]:
        """1~12 숫자를 반지름 위에 글리프 중심이 오도록 배치한다."""
        result = []
        for number in range(1, 13):
            label = str(number)
            w, h = self._measure(label, self._config.font_size)
            angle = math.pi / 6 * (number - 3)
            x, y = polar(center, angle, geometry.radius)
            result.append(Text(label, (x - w / 2, y - h / 2), self._numeral_style))
        return result

    def layout_ticks(self, center: Point, geometry: DerivedGeometry) -> list[LineSegment]:
        """60개 눈금 (1~60, 60번이 12시 방향)."""
        inner = geometry.radius + TICK_INNER
        outer = geometry.radius + TICK_OUTER
        ticks = []
        for i in range(1, 61):
            angle = unit_angle(i)
            ticks.append(LineSegment(polar(center, angle, inner), polar(center, angle, outer), TICK))
        return ticks

    def layout_hands(self, center: Point, geometry: DerivedGeometry,
                     time: TimeSample) -> list[LineSegment]:
        """시침·분침·초침 순서."""
        # 시침은 분에 비례해 연속적으로 진행
        hour_unit = (time.hour12 + time.minute / 60) * 5
        return [
            LineSegment(center, hand_endpoint(center, hour_unit, geometry.hour_hand_length), HAND),
            LineSegment(center, hand_endpoint(center, time.minute, geometry.minute_hand_length), HAND),
            LineSegment(center, hand_endpoint(center, time.second, geometry.second_hand_length),
                        self._hand_style),
        ]

    def layout_frame(self, size: float, time: TimeSample) -> list[Primitive]:
        """문자판 → 숫자 → 눈금 → 바늘 순서의 전체 프리미티브."""
        geometry = self.compute_geometry(size)
        half = geometry.size / 2
        center = (half, half)
        frame: list[Primitive] = []
        frame.extend(self.layout_face(center, geometry))
        frame.extend(self.layout_numerals(center, geometry))
        frame.extend(self.layout_ticks(center, geometry))
        frame.extend(self.layout_hands(center, geometry, time))
        return frame
