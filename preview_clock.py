"""시계 PC 미리보기 — 한 프레임을 PNG 파일로 저장한다.

사용법: python preview_clock.py [HH:MM[:SS]]
"""

import logging
import sys
from pathlib import Path

from PIL import Image

from config import clock_config, load_config, merge_defaults
from content.clock import ClockLayoutEngine
from content.timesource import FixedTimeSource, SystemTimeSource, TimeSource
from renderer.frame import ClockRenderer

logger = logging.getLogger(__name__)


def preview(source: TimeSource, config: dict | None = None) -> Path:
    """렌더링 해상도 시계 이미지와 패널 크기 프레임을 저장하고 경로를 반환한다."""
    config = merge_defaults(config) if config is not None else load_config()
    display = config["display"]
    scale = max(1, int(config["preview"].get("scale", 1)))

    renderer = ClockRenderer(
        ClockLayoutEngine(clock_config(config)),
        display["render_size"], display["panel_size"],
    )
    sample = source.now()

    out = Path(config["preview"]["output"])
    clock_img = renderer.render_clock(sample)
    if scale > 1:
        clock_img = clock_img.resize((clock_img.width * scale, clock_img.height * scale),
                                     Image.Resampling.NEAREST)
    clock_img.save(out)
    logger.info("저장됨: %s (%dx%d)", out, clock_img.width, clock_img.height)

    # 실제 패널 화면도 10배 확대해서 저장
    panel = renderer.render(sample)
    panel_out = out.with_name(out.stem + "_panel" + out.suffix)
    panel.resize((panel.width * 10, panel.height * 10), Image.Resampling.NEAREST).save(panel_out)
    logger.info("패널 프레임 저장됨: %s", panel_out)
    return out


def main(argv: list[str], config: dict | None = None) -> int:
    """명령행 진입점. 시각 형식이 잘못되면 1을 반환한다."""
    source: TimeSource = SystemTimeSource()
    if argv:
        try:
            source = FixedTimeSource.parse(argv[0])
        except ValueError:
            logger.error("시각 형식 오류: %r (HH:MM 또는 HH:MM:SS)", argv[0])
            return 1
    preview(source, config)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(message)s")
    sys.exit(main(sys.argv[1:]))
