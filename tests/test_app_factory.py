from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import product_api.app_factory as app_factory  # noqa: E402
from product_api.core.config import get_settings  # noqa: E402
from product_api.core.logging_config import configure_logging  # noqa: E402


def test_main_serves_on_fixed_port_and_logs_endpoints(monkeypatch, tmp_path, caplog):
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(app_factory.uvicorn, "run", fake_run)
    monkeypatch.setattr(app_factory, "configure_logging", lambda level: None)
    get_settings.cache_clear()
    try:
        with caplog.at_level(logging.INFO, logger="product_api.app_factory"):
            app_factory.main()
    finally:
        get_settings.cache_clear()

    assert calls["port"] == 3000
    assert calls["host"] == "0.0.0.0"
    assert calls["app"].state.product_service is not None
    assert "http://localhost:3000" in caplog.text
    assert "/products/instock" in caplog.text


def test_configure_logging_tolerates_unknown_level():
    configure_logging("not-a-level")
    configure_logging("debug")
