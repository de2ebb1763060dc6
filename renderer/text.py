"""텍스트 모듈 — 문자판 숫자용 폰트 로드와 크기 측정.

시스템 폰트를 찾지 못하면 Pillow 기본 폰트를 사용한다.
"""

import os
import sys as _sys

from PIL import ImageFont


def _find_font() -> str:
    """OS에 맞는 숫자용 폰트 경로를 반환한다."""
    if _sys.platform == "win32":
        candidates = ["C:/Windows/Fonts/arial.ttf", "C:/Windows/Fonts/segoeui.ttf"]
    elif _sys.platform == "darwin":
        candidates = ["/System/Library/Fonts/Helvetica.ttc", "/Library/Fonts/Arial.ttf"]
    else:
        # Linux / Raspberry Pi
        candidates = [
            "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
            "/usr/share/fonts/truetype/noto/NotoSans-Regular.ttf",
        ]
    for path in candidates:
        if os.path.exists(path):
            return path
    return ""


_FONT_PATH = _find_font()

# 폰트 캐시
_font_cache: dict[int, ImageFont.FreeTypeFont | ImageFont.ImageFont] = {}


def get_font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """지정 크기의 폰트를 로드한다 (캐싱)."""
    size = max(1, int(size))
    if size not in _font_cache:
        if _FONT_PATH:
            _font_cache[size] = ImageFont.truetype(_FONT_PATH, size)
        else:
            _font_cache[size] = ImageFont.load_default(size)
    return _font_cache[size]


def text_bbox(text: str, font_size: int) -> tuple[int, int, int, int]:
    """텍스트 잉크 영역 (left, top, right, bottom)."""
    return get_font(font_size).getbbox(text)


def measure_text(text: str, font_size: int) -> tuple[int, int]:
    """텍스트의 잉크 영역 크기(w, h)를 반환한다."""
    left, top, right, bottom = text_bbox(text, font_size)
    return right - left, bottom - top
