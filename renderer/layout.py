"""화면 레이아웃 모듈 — 시계를 정사각형으로 맞추고 출력 화면에 배치한다."""


def square_size(width: float, height: float) -> int:
    """측정된 너비·높이 중 작은 쪽을 정사각형 한 변으로 사용한다. 음수는 0."""
    return max(0, int(min(width, height)))


class Layout:
    """출력 화면(width x height) 안에 정사각형 시계를 가운데 배치한다."""

    def __init__(self, width: int, height: int):
        self._width = max(0, int(width))
        self._height = max(0, int(height))

    @property
    def side(self) -> int:
        return square_size(self._width, self._height)

    def compose(self) -> tuple[int, tuple[int, int]]:
        """(정사각형 한 변, (x, y)) 를 반환한다."""
        side = self.side
        x = (self._width - side) // 2
        y = (self._height - side) // 2
        return side, (x, y)
