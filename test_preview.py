"""미리보기 진입점 테스트."""

import logging

from PIL import Image

from content.timesource import FixedTimeSource
from preview_clock import main, preview


def test_preview_without_preview_section(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = preview(FixedTimeSource.parse("10:08:30"), config={"display": {"render_size": 200}})
    assert out.name == "preview_clock.png"
    assert Image.open(tmp_path / "preview_clock.png").size == (200, 200)
    assert Image.open(tmp_path / "preview_clock_panel.png").size == (640, 640)


def test_main_rejects_malformed_time(tmp_path, monkeypatch, caplog):
    monkeypatch.chdir(tmp_path)
    with caplog.at_level(logging.ERROR):
        assert main(["25:99"], config={}) == 1
    assert "25:99" in caplog.text
    assert not (tmp_path / "preview_clock.png").exists()


def test_main_with_fixed_time(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    output = str(tmp_path / "clock.png")
    assert main(["03:00"], config={"preview": {"output": output, "scale": 2}}) == 0
    assert Image.open(output).size == (896, 896)
