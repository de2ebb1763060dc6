"""아날로그 시계 레이아웃 테스트."""

import math

import pytest

from content.clock import ClockConfig, ClockLayoutEngine, derive_geometry, hand_endpoint, unit_angle
from content.timesource import TimeSample
from renderer.primitives import BLACK, Circle, LineSegment, Text

GREEN = (0, 255, 0, 255)


def fixed_measure(text: str, font_size: int) -> tuple[float, float]:
    return 10.0, 20.0


@pytest.fixture
def engine():
    return ClockLayoutEngine(ClockConfig(second_hand_color=GREEN), measure=fixed_measure)


def assert_point(actual, expected):
    assert actual[0] == pytest.approx(expected[0], abs=1e-9)
    assert actual[1] == pytest.approx(expected[1], abs=1e-9)


def test_geometry_for_400():
    geo = derive_geometry(400, ClockConfig())
    assert geo.radius == 150
    assert geo.minute_hand_length == 130
    assert geo.hour_hand_length == 70
    assert geo.second_hand_length == 130
    assert geo.face_radius == 190
    assert geo.pivot_radius == pytest.approx(1.5)


@pytest.mark.parametrize("size", [300, 400, 448, 800, 1000])
def test_hand_length_ordering(size):
    geo = derive_geometry(size, ClockConfig())
    assert geo.radius == size / 2 - 50
    assert geo.minute_hand_length == pytest.approx(geo.radius - size / 20)
    assert geo.hour_hand_length == pytest.approx(geo.radius - size / 5)
    assert geo.hour_hand_length < geo.minute_hand_length <= geo.radius


def test_second_hand_override():
    geo = derive_geometry(400, ClockConfig(second_hand_length=200))
    assert geo.second_hand_length == 200
    assert geo.minute_hand_length == 130


@pytest.mark.parametrize("override", [None, 0, -1, -50])
def test_second_hand_without_override_matches_minute_hand(override):
    geo = derive_geometry(400, ClockConfig(second_hand_length=override))
    assert geo.second_hand_length == geo.minute_hand_length == 130


@pytest.mark.parametrize("size", [0, -10, 40, 99])
def test_degenerate_sizes_clamp_to_zero(size, engine):
    geo = derive_geometry(size, ClockConfig())
    assert geo.radius >= 0
    assert geo.minute_hand_length == 0
    assert geo.hour_hand_length == 0
    assert geo.second_hand_length == 0
    assert geo.pivot_radius >= 0

    frame = engine.layout_frame(size, TimeSample(7, 41, 12))
    assert len(frame) == 3 + 12 + 60 + 3
    for prim in frame:
        points = [prim.center] if isinstance(prim, Circle) else (
            [prim.position] if isinstance(prim, Text) else [prim.start, prim.end])
        for x, y in points:
            assert math.isfinite(x) and math.isfinite(y)


def test_unit_angle_wraps_at_sixty():
    assert math.cos(unit_angle(0)) == pytest.approx(math.cos(unit_angle(60)))
    assert math.sin(unit_angle(0)) == pytest.approx(math.sin(unit_angle(60)))
    assert unit_angle(0) == pytest.approx(-math.pi / 2)
    assert unit_angle(15) == pytest.approx(0)


def test_primitive_counts(engine):
    geo = engine.compute_geometry(400)
    center = (200, 200)
    assert len(engine.layout_face(center, geo)) == 3
    assert len(engine.layout_numerals(center, geo)) == 12
    assert len(engine.layout_ticks(center, geo)) == 60
    assert len(engine.layout_hands(center, geo, TimeSample(0, 0, 0))) == 3


def test_face_circles(engine):
    face = engine.layout_face((200, 200), engine.compute_geometry(400))
    fill, outline, pivot = face
    assert fill.radius == outline.radius == 190
    assert fill.style.fill and fill.style.color == (255, 255, 255, 255)
    assert not outline.style.fill and outline.style.width == 4 and outline.style.color == BLACK
    assert pivot.radius == pytest.approx(1.5) and pivot.style.fill


def test_hands_at_three_oclock(engine):
    geo = engine.compute_geometry(400)
    hour, minute, second = engine.layout_hands((200, 200), geo, TimeSample(3, 0, 0))
    for hand in (hour, minute, second):
        assert hand.start == (200, 200)
    # 시침 → 오른쪽, 분침·초침 → 위쪽
    assert_point(hour.end, (270, 200))
    assert_point(minute.end, (200, 70))
    assert_point(second.end, (200, 70))


def test_hand_styles(engine):
    hour, minute, second = engine.layout_hands(
        (200, 200), engine.compute_geometry(400), TimeSample(10, 10, 30))
    assert hour.style.color == minute.style.color == BLACK
    assert hour.style.width == minute.style.width == 4
    assert second.style.color == GREEN
    assert second.style.width == 2


def test_hour_hand_advances_with_minutes(engine):
    geo = engine.compute_geometry(400)
    hour = engine.layout_hands((200, 200), geo, TimeSample(3, 30, 0))[0]
    assert_point(hour.end, hand_endpoint((200, 200), 17.5, 70))


def test_second_hand_uses_override_length():
    engine = ClockLayoutEngine(ClockConfig(second_hand_length=200), measure=fixed_measure)
    second = engine.layout_hands((200, 200), engine.compute_geometry(400), TimeSample(0, 0, 15))[2]
    assert_point(second.end, (400, 200))


def test_numeral_placement(engine):
    numerals = engine.layout_numerals((200, 200), engine.compute_geometry(400))
    assert [n.text for n in numerals] == [str(n) for n in range(1, 13)]
    by_label = {n.text: n for n in numerals}
    # 글리프 크기 10x20 → 중심에서 (5, 10)만큼 좌상단으로 이동
    assert_point(by_label["12"].position, (195, 40))
    assert_point(by_label["3"].position, (345, 190))
    assert_point(by_label["6"].position, (195, 340))
    assert_point(by_label["9"].position, (45, 190))


def test_ticks(engine):
    ticks = engine.layout_ticks((200, 200), engine.compute_geometry(400))
    top = ticks[-1]
    assert_point(top.start, (200, 20))
    assert_point(top.end, (200, 10))
    right = ticks[14]
    assert_point(right.start, (380, 200))
    assert_point(right.end, (390, 200))
    for tick in ticks:
        dx, dy = tick.end[0] - tick.start[0], tick.end[1] - tick.start[1]
        assert math.hypot(dx, dy) == pytest.approx(10)


def test_frame_order(engine):
    frame = engine.layout_frame(400, TimeSample(3, 0, 0))
    assert all(isinstance(p, Circle) for p in frame[:3])
    assert all(isinstance(p, Text) for p in frame[3:15])
    assert all(isinstance(p, LineSegment) for p in frame[15:])
    hour, minute, second = frame[-3:]
    assert_point(hour.end, (270, 200))
    assert second.style.color == GREEN


def test_frame_is_deterministic(engine):
    sample = TimeSample(8, 17, 42)
    assert engine.layout_frame(400, sample) == engine.layout_frame(400, sample)


def test_geometry_cached_per_size(engine):
    first = engine.compute_geometry(400)
    assert engine.compute_geometry(400) is first
    resized = engine.compute_geometry(500)
    assert resized is not first
    assert resized.radius == 200
    assert engine.compute_geometry(400) == first


def test_default_measure_centres_numerals():
    engine = ClockLayoutEngine()
    numerals = engine.layout_numerals((200, 200), engine.compute_geometry(400))
    twelve = numerals[-1]
    # 중심(200, 50)보다 좌상단에 위치
    assert twelve.position[0] < 200
    assert twelve.position[1] < 50
    assert twelve.style.font_size == 16


@pytest.mark.parametrize("size, face", [(100, 40), (99, 40), (101, 40.5), (400, 190)])
def test_face_radius_follows_clamped_radius(size, face):
    geo = derive_geometry(size, ClockConfig())
    assert geo.face_radius == pytest.approx(face)
    # 눈금 바깥 끝(radius + 40)이 문자판 원 위에 놓임
    assert geo.radius + 40 == pytest.approx(geo.face_radius)


@pytest.mark.parametrize("size", [0, -10])
def test_face_vanishes_for_empty_size(size):
    assert derive_geometry(size, ClockConfig()).face_radius == 0
