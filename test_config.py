"""설정 로더 테스트."""

import json
import logging

from config import clock_config, load_config, merge_defaults, parse_color
from content.clock import ClockConfig
from renderer.primitives import RED


def test_missing_file_uses_defaults(tmp_path):
    config = load_config(tmp_path / "none.json")
    assert config["clock"]["second_hand_color"] == "red"
    assert config["display"]["panel_size"] == 64
    # 반환값을 수정해도 기본값은 그대로
    config["clock"]["font_size"] = 99
    assert load_config(tmp_path / "none.json")["clock"]["font_size"] == 16


def test_partial_file_is_merged(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"clock": {"second_hand_length": 120}, "display": {"fps": 2}}),
                    encoding="utf-8")
    config = load_config(path)
    assert config["clock"]["second_hand_length"] == 120
    assert config["clock"]["second_hand_color"] == "red"
    assert config["display"]["fps"] == 2
    assert config["display"]["render_size"] == 448
    assert config["ble"]["device_name_prefix"] == "IDM-"


def test_parse_color():
    assert parse_color("red") == (255, 0, 0, 255)
    assert parse_color("#00ff00") == (0, 255, 0, 255)
    assert parse_color([0, 0, 255]) == (0, 0, 255, 255)
    assert parse_color([10, 20, 30, 40]) == (10, 20, 30, 40)
    assert parse_color([300, -1, 5]) == (255, 0, 5, 255)


def test_invalid_color_falls_back(caplog):
    with caplog.at_level(logging.WARNING):
        assert parse_color("not-a-colour") == RED
        assert parse_color(42) == RED
    assert len(caplog.records) == 2


def test_clock_config_defaults():
    assert clock_config({}) == ClockConfig()


def test_clock_config_values():
    config = {"clock": {"second_hand_color": "blue", "second_hand_length": 200, "font_size": 20}}
    cfg = clock_config(config)
    assert cfg.second_hand_color == (0, 0, 255, 255)
    assert cfg.second_hand_length == 200
    assert cfg.font_size == 20


def test_clock_config_sentinel_length(caplog):
    assert clock_config({"clock": {"second_hand_length": -1}}).second_hand_length is None
    assert clock_config({"clock": {"second_hand_length": 0}}).second_hand_length is None
    with caplog.at_level(logging.WARNING):
        cfg = clock_config({"clock": {"second_hand_length": "long", "font_size": "big"}})
    assert cfg.second_hand_length is None
    assert cfg.font_size == 16
    assert caplog.records


def test_merge_defaults_fills_missing_sections():
    config = merge_defaults({"clock": {"font_size": 20}})
    assert config["clock"]["font_size"] == 20
    assert config["clock"]["second_hand_color"] == "red"
    assert config["preview"]["output"] == "preview_clock.png"
