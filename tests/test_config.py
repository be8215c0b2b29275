"""Tests for environment-driven settings."""

from __future__ import annotations

from ninepatch import config
from ninepatch.config import LOGICAL_UNIT_PIXEL_FACTOR, MARKER_RGBA, Settings
from ninepatch.models.scaling_request import ScalingRequest


def test_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "DESIGN_WIDTH", "DESIGN_HEIGHT", "TARGET_DESIGN_WIDTH", "TARGET_DESIGN_HEIGHT"):
        monkeypatch.delenv(f"NINEPATCH_{name}", raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "info"
    assert (settings.design_width, settings.design_height) == (1440, 2560)
    assert (settings.target_design_width, settings.target_design_height) == (1080, 1920)


def test_environment_override(monkeypatch):
    monkeypatch.setenv("NINEPATCH_DESIGN_WIDTH", "720")
    monkeypatch.setenv("NINEPATCH_LOG_LEVEL", "debug")
    settings = Settings(_env_file=None)
    assert settings.design_width == 720
    assert settings.log_level == "debug"


def test_constants():
    assert LOGICAL_UNIT_PIXEL_FACTOR == 4
    assert MARKER_RGBA == (0, 0, 0, 255)


def test_request_defaults_come_from_settings(monkeypatch):
    monkeypatch.setattr(config, "settings", Settings(_env_file=None, design_width=800))
    request = ScalingRequest(width=10, height=20)
    assert request.is_raw_pixel_units is False
    assert request.design_width == 800
    assert request.target_design_height == config.settings.target_design_height
