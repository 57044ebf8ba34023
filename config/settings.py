from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_extensions(raw: str) -> tuple[str, ...]:
    exts = []
    for part in raw.split(","):
        ext = part.strip().lower()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = "." + ext
        exts.append(ext)
    return tuple(exts) or (".yaml",)


@dataclass(frozen=True)
class Settings:
    # Input/output
    adopters_dir: str
    output_dir: str
    adopter_extensions: tuple[str, ...]

    # Page text
    site_title: str
    site_description: str
    tracked_technology: str

    log_level: str
    run_env: str

    # Feature flags
    write_json: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        adopters_dir=os.getenv("ADOPTERS_DIR", "adopters"),
        output_dir=os.getenv("OUTPUT_DIR", "build"),
        adopter_extensions=_parse_extensions(os.getenv("ADOPTER_EXTENSIONS", ".yaml")),
        site_title=os.getenv("SITE_TITLE", "Scala Adoption Tracker"),
        site_description=os.getenv(
            "SITE_DESCRIPTION",
            "Crowdsourced list of companies and projects adopting Scala.",
        ),
        tracked_technology=os.getenv("TRACKED_TECHNOLOGY", "Scala 3"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        write_json=_as_bool(os.getenv("WRITE_JSON"), True),
    )
