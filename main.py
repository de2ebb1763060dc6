"""메인 루프 — 아날로그 시계를 BLE LED 패널에 표시한다."""

import asyncio
import logging
import time

from ble.connection import scan_devices
from ble.sender import DisplaySender
from config import clock_config, load_config
from content.clock import ClockLayoutEngine
from content.timesource import SystemTimeSource, TimeSource
from renderer.frame import ClockRenderer
from scheduler import FrameScheduler

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(message)s")
logging.getLogger("bleak").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


async def main():
    config = load_config()
    display = config["display"]

    engine = ClockLayoutEngine(clock_config(config))
    renderer = ClockRenderer(engine, display["render_size"], display["panel_size"])
    scheduler = FrameScheduler(fps=display.get("fps", 1))
    time_source: TimeSource = SystemTimeSource()

    logger.info("BLE 디바이스 검색 중...")
    devices = await scan_devices(
        name_prefix=config["ble"].get("device_name_prefix", "IDM-"),
    )
    if not devices:
        logger.error("디바이스를 찾지 못했습니다.")
        return

    async with DisplaySender(
        devices[0].address,
        panel_size=display["panel_size"],
        reconnect_interval=config["ble"].get("reconnect_interval_sec", 10),
    ) as sender:
        await asyncio.sleep(1)
        brightness = display.get("brightness", 50)
        await sender.set_brightness(brightness)
        logger.info("시계 표시 시작 (밝기: %d, 간격: %.2fs)", brightness, scheduler.interval)

        while True:
            frame_start = time.monotonic()
            sample = time_source.now()

            # 초가 바뀐 경우에만 그려서 전송, 실패하면 다음 프레임에 다시 시도
            if scheduler.should_render(sample):
                if not await sender.send_image(renderer.render(sample)):
                    scheduler.reset()

            await asyncio.sleep(scheduler.delay_after(frame_start, time.monotonic(), time.time()))


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logging.info("종료")
