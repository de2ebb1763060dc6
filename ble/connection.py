"""BLE 디바이스 스캔 모듈."""

import logging

from bleak import BleakScanner

logger = logging.getLogger(__name__)

# iDotMatrix 패널이 광고하는 이름 접두사
KNOWN_PREFIXES = ("IDM-", "LED_BLE_")


def match_name(name: str | None, name_prefix: str = "IDM-") -> bool:
    """디바이스 이름이 설정 접두사 또는 알려진 접두사로 시작하는지 확인한다."""
    if not name:
        return False
    return name.startswith(name_prefix) or name.startswith(KNOWN_PREFIXES)


async def scan_devices(name_prefix: str = "IDM-", timeout: float = 10.0) -> list:
    """BLE 디바이스를 스캔하여 이름이 일치하는 패널 목록을 반환한다."""
    logger.info("BLE 디바이스 스캔 중... (timeout=%ss)", timeout)
    devices = await BleakScanner.discover(timeout=timeout)

    found = [d for d in devices if match_name(d.name, name_prefix)]
    for d in found:
        logger.info("발견: %s (%s)", d.name, d.address)

    if not found:
        logger.warning("일치하는 디바이스를 찾지 못했습니다.")

    return found
