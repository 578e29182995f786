#!/usr/bin/env python3
"""Tests for the serverless health check."""

import importlib.util
from pathlib import Path

import pyfiglet

from banner_server import renderer

HEALTH_PATH = Path(__file__).parent / "api" / "health.py"


def _load_health():
    spec = importlib.util.spec_from_file_location("api_health", HEALTH_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_health_ok():
    result = _load_health().handler({}, None)

    assert result["statusCode"] == 200
    assert result["body"] == "ok"
    assert result["headers"]["Content-Type"] == "text/plain"


def test_health_reports_missing_font(monkeypatch):
    def missing_font(*args, **kwargs):
        raise pyfiglet.FontNotFound("standard")

    monkeypatch.setattr(renderer.pyfiglet, "Figlet", missing_font)

    result = _load_health().handler({}, None)

    assert result["statusCode"] == 503
    assert result["body"].startswith("renderer unavailable")
