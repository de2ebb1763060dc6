"""설정 파일 로더 모듈."""

import copy
import json
import logging
from pathlib import Path

from PIL import ImageColor

from content.clock import DEFAULT_FONT_SIZE, ClockConfig
from renderer.primitives import RED

logger = logging.getLogger(__name__)

# 기본 설정 경로
_CONFIG_PATH = Path(__file__).parent / "config.json"

# 기본값 — config.json에 누락된 키가 있을 때 사용
_DEFAULTS = {
    "ble": {
        "device_name_prefix": "IDM-",
        "reconnect_interval_sec": 10,
    },
    "display": {
        "brightness": 50,
        "panel_size": 64,
        "render_size": 448,
        "fps": 1,
    },
    "clock": {
        "second_hand_color": "red",
        "second_hand_length": -1,
        "font_size": DEFAULT_FONT_SIZE,
    },
    "preview": {
        "output": "preview_clock.png",
        "scale": 1,
    },
}


def _deep_merge(base: dict, override: dict) -> dict:
    """base 딕셔너리에 override 값을 병합한다 (깊은 병합)."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def merge_defaults(config: dict) -> dict:
    """설정 딕셔너리에 누락된 키를 기본값으로 채운다."""
    return _deep_merge(copy.deepcopy(_DEFAULTS), config)


def load_config(path: Path | None = None) -> dict:
    """설정 파일을 읽어 딕셔너리로 반환한다.

    파일이 없으면 기본값을 사용한다.
    """
    config_path = path or _CONFIG_PATH
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            user_config = json.load(f)
        return merge_defaults(user_config)
    return copy.deepcopy(_DEFAULTS)


def parse_color(value, default: tuple = RED) -> tuple:
    """색상 이름/"#rrggbb"/[r, g, b(, a)] 를 RGBA 튜플로 변환한다."""
    try:
        if isinstance(value, str):
            rgb = ImageColor.getrgb(value)
        elif isinstance(value, (list, tuple)) and len(value) in (3, 4):
            rgb = tuple(max(0, min(255, int(c))) for c in value)
        else:
            raise ValueError(f"지원하지 않는 색상 형식: {value!r}")
    except (ValueError, TypeError) as e:
        logger.warning("색상 설정 무시 (%s), 기본값 사용", e)
        return default
    if len(rgb) == 3:
        rgb = (*rgb, 255)
    return rgb


def _parse_int(value, default: int, name: str) -> int:
    try:
        return int(value)
    except (ValueError, TypeError):
        logger.warning("%s 설정 무시 (%r), 기본값 %d 사용", name, value, default)
        return default


def clock_config(config: dict) -> ClockConfig:
    """"clock" 섹션으로 ClockConfig를 생성한다."""
    section = config.get("clock", {})
    length = _parse_int(section.get("second_hand_length", -1), -1, "second_hand_length")
    font_size = _parse_int(section.get("font_size", DEFAULT_FONT_SIZE),
                           DEFAULT_FONT_SIZE, "font_size")
    return ClockConfig(
        second_hand_color=parse_color(section.get("second_hand_color", "red")),
        second_hand_length=length if length > 0 else None,
        font_size=font_size if font_size > 0 else DEFAULT_FONT_SIZE,
    )
