"""시각 소스 모듈 — 시계 바늘 계산에 쓰이는 현재 시각 샘플."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class TimeSample:
    """12시간제 시·분·초."""
    hour12: int   # 0..11
    minute: int   # 0..59
    second: int   # 0..59

    @classmethod
    def from_datetime(cls, now: datetime) -> "TimeSample":
        return cls(hour12=now.hour % 12, minute=now.minute, second=now.second)


class TimeSource(Protocol):
    def now(self) -> TimeSample: ...


class SystemTimeSource:
    """로컬 시스템 시계."""

    def now(self) -> TimeSample:
        return TimeSample.from_datetime(datetime.now())


class FixedTimeSource:
    """항상 같은 시각을 돌려준다 (미리보기·테스트용)."""

    def __init__(self, sample: TimeSample):
        self._sample = sample

    @classmethod
    def parse(cls, text: str) -> "FixedTimeSource":
        """"HH:MM" 또는 "HH:MM:SS" 문자열로 생성한다."""
        fmt = "%H:%M:%S" if text.count(":") == 2 else "%H:%M"
        return cls(TimeSample.from_datetime(datetime.strptime(text, fmt)))

    def now(self) -> TimeSample:
        return self._sample
