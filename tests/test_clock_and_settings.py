from __future__ import annotations

import re
from datetime import date

from config.settings import get_settings
from services.clock import FixedClock, SystemClock, build_date


def test_build_date_is_iso_day():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", build_date())
    assert isinstance(SystemClock().today(), date)


def test_fixed_clock_accepts_date_or_string():
    assert build_date(FixedClock(date(2023, 12, 31))) == "2023-12-31"
    assert build_date(FixedClock("2023-01-02")) == "2023-01-02"


def test_settings_defaults(monkeypatch):
    for var in ("ADOPTERS_DIR", "OUTPUT_DIR", "ADOPTER_EXTENSIONS", "WRITE_JSON"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    s = get_settings()
    assert s.adopters_dir == "adopters"
    assert s.output_dir == "build"
    assert s.adopter_extensions == (".yaml",)
    assert s.write_json is True


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("ADOPTER_EXTENSIONS", "yaml, .YML")
    monkeypatch.setenv("WRITE_JSON", "false")
    get_settings.cache_clear()
    s = get_settings()
    assert s.adopter_extensions == (".yaml", ".yml")
    assert s.write_json is False
