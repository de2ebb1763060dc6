"""iDotMatrix BLE LED 패널 전송 모듈 — 시계 프레임을 PNG로 업로드한다."""

import asyncio
import logging
import struct
from io import BytesIO

from bleak import BleakClient
from PIL import Image

logger = logging.getLogger(__name__)

WRITE_UUID = "0000fa02-0000-1000-8000-00805f9b34fb"
NOTIFY_UUID = "0000fa03-0000-1000-8000-00805f9b34fb"

IMAGE_CHUNK_SIZE = 4096
IMAGE_HEADER_SIZE = 9
MIN_WRITE_SIZE = 20
CHUNK_ACK_TIMEOUT = 2.0
FRAME_ACK_TIMEOUT = 1.0


def encode_png(image: Image.Image, panel_size: int) -> bytes:
    """이미지를 panel_size x panel_size RGB PNG 바이트로 변환한다."""
    rgb = image.convert("RGB")
    if rgb.size != (panel_size, panel_size):
        rgb = rgb.resize((panel_size, panel_size), Image.Resampling.LANCZOS)
    buf = BytesIO()
    rgb.save(buf, format="PNG")
    return buf.getvalue()


def build_image_payloads(png_bytes: bytes) -> list[bytes]:
    """PNG 바이트를 업로드 청크로 나눈다.

    청크 헤더: 길이(2B LE, 헤더 포함), 0x00 0x00, 순서(첫 청크 0x00 / 이후 0x02),
    전체 PNG 크기(4B LE).
    """
    total = len(png_bytes)
    payloads = []
    for offset in range(0, total, IMAGE_CHUNK_SIZE):
        chunk = png_bytes[offset:offset + IMAGE_CHUNK_SIZE]
        header = struct.pack(
            "<hBBBi",
            len(chunk) + IMAGE_HEADER_SIZE,
            0x00, 0x00,
            0x00 if offset == 0 else 0x02,
            total,
        )
        payloads.append(header + chunk)
    return payloads


class DisplaySender:
    """LED 패널 연결을 유지하며 프레임을 전송한다."""

    def __init__(self, address: str, panel_size: int = 64, reconnect_interval: int = 10):
        self._address = address
        self._panel_size = panel_size
        self._reconnect_interval = reconnect_interval
        self._client: BleakClient | None = None
        self._connected = False
        self._write_size = MIN_WRITE_SIZE
        self._diy_mode = False
        self._last_attempt = 0.0
        self._chunk_ack = asyncio.Event()
        self._frame_ack = asyncio.Event()

    def _on_disconnect(self, client):
        logger.warning("BLE 연결 끊김: %s", self._address)
        self._connected = False
        self._diy_mode = False

    def _on_notify(self, sender, data: bytes):
        # ACK: 5바이트, data[0]==0x05, data[4]: 0~2 청크 수신 / 3 프레임 완료
        if len(data) < 5 or data[0] != 0x05:
            return
        code = data[4]
        if code in (0, 1, 2, 3):
            self._chunk_ack.set()
        if code == 3:
            self._frame_ack.set()

    async def connect(self) -> None:
        logger.info("BLE 연결 시도: %s", self._address)
        self._client = BleakClient(self._address, disconnected_callback=self._on_disconnect)
        await self._client.connect()
        char = self._client.services.get_characteristic(WRITE_UUID)
        if char is not None and char.max_write_without_response_size > MIN_WRITE_SIZE:
            self._write_size = char.max_write_without_response_size
        else:
            self._write_size = max(MIN_WRITE_SIZE, self._client.mtu_size - 3)
        await self._client.start_notify(NOTIFY_UUID, self._on_notify)
        self._connected = True
        logger.info("BLE 연결 성공: %s (write size: %d)", self._address, self._write_size)

    async def disconnect(self) -> None:
        if self._client and self._connected:
            await self._client.disconnect()
            self._connected = False
            logger.info("BLE 연결 해제: %s", self._address)

    async def ensure_connected(self) -> bool:
        """연결이 끊겼으면 reconnect_interval 간격으로 재연결을 시도한다."""
        if self._connected and self._client and self._client.is_connected:
            return True
        loop = asyncio.get_running_loop()
        if self._last_attempt and loop.time() - self._last_attempt < self._reconnect_interval:
            return False
        self._last_attempt = loop.time()
        try:
            await self.connect()
            return True
        except Exception as e:
            logger.error("재연결 실패: %s", e)
            self._connected = False
            return False

    async def _write(self, payload: bytes) -> None:
        for pos in range(0, len(payload), self._write_size):
            await self._client.write_gatt_char(
                WRITE_UUID, payload[pos:pos + self._write_size], response=False)

    async def _send_command(self, cmd: bytes) -> bool:
        if not await self.ensure_connected():
            return False
        try:
            await self._client.write_gatt_char(WRITE_UUID, cmd, response=True)
            return True
        except Exception as e:
            logger.error("명령 전송 실패: %s", e)
            return False

    async def set_diy_mode(self, enable: bool = True) -> bool:
        """이미지 표시 모드를 켠다."""
        return await self._send_command(bytes([5, 0, 4, 1, int(enable)]))

    async def set_brightness(self, level: int) -> bool:
        """밝기를 설정한다 (0-100)."""
        level = max(0, min(100, level))
        return await self._send_command(bytes([5, 0, 4, 0x80, level]))

    async def send_image(self, image: Image.Image) -> bool:
        """프레임 이미지를 패널에 전송한다."""
        if not await self.ensure_connected():
            return False
        try:
            if not self._diy_mode:
                if not await self.set_diy_mode(True):
                    logger.error("DIY 모드 활성화 실패, 프레임 전송 취소")
                    return False
                self._diy_mode = True
                await asyncio.sleep(0.3)

            payloads = build_image_payloads(encode_png(image, self._panel_size))
            logger.debug("프레임 전송: %d 청크", len(payloads))
            self._frame_ack.clear()
            for idx, payload in enumerate(payloads):
                self._chunk_ack.clear()
                await self._write(payload)
                if idx < len(payloads) - 1:
                    try:
                        await asyncio.wait_for(self._chunk_ack.wait(), timeout=CHUNK_ACK_TIMEOUT)
                    except asyncio.TimeoutError:
                        logger.debug("청크 %d/%d ACK 타임아웃", idx + 1, len(payloads))

            # 패널이 프레임을 처리할 때까지 대기 (큐 밀림 방지)
            try:
                await asyncio.wait_for(self._frame_ack.wait(), timeout=FRAME_ACK_TIMEOUT)
            except asyncio.TimeoutError:
                pass
            return True
        except Exception as e:
            logger.error("프레임 전송 실패: %s", e)
            self._connected = False
            return False

    async def __aenter__(self):
        await self.ensure_connected()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.disconnect()
