from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Iterable, Tuple

import yaml

from errors import MalformedRecord, MissingDirectory
from pipelines.runner import RunContext

logger = logging.getLogger(__name__)


class DiscoverAdopterFiles:
    """List one candidate record per YAML file in the adopters directory."""

    def __init__(self, extensions: Iterable[str] = (".yaml",)) -> None:
        self.extensions: Tuple[str, ...] = tuple(e.lower() for e in extensions)

    def run(self, ctx: RunContext) -> RunContext:
        start = time.perf_counter()
        directory = Path(ctx.adopters_dir) if ctx.adopters_dir is not None else None
        if directory is None or not directory.is_dir():
            raise MissingDirectory(str(directory))

        paths = sorted(
            p for p in directory.iterdir()
            if p.is_file() and p.suffix.lower() in self.extensions
        )
        ctx.files = [(p.name, p) for p in paths]
        logger.info(
            f"Discovered {len(ctx.files)} adopter files in {directory}",
            extra={
                "step": "discover",
                "status": "ok",
                "count": len(ctx.files),
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return ctx


class ParseAdopterFiles:
    def run(self, ctx: RunContext) -> RunContext:
        start = time.perf_counter()
        parsed = []
        for file_name, path in ctx.files:
            try:
                contents = Path(path).read_text(encoding="utf-8")
            except UnicodeDecodeError as exc:
                logger.error(
                    f"{file_name} is not valid UTF-8",
                    extra={"step": "parse", "status": "error", "error": type(exc).__name__},
                )
                raise MalformedRecord(file_name, "invalid UTF-8") from exc
            try:
                data = yaml.safe_load(contents)
            except (yaml.YAMLError, ValueError) as exc:
                logger.error(
                    f"{file_name} is not valid YAML",
                    extra={"step": "parse", "status": "error", "error": type(exc).__name__},
                )
                raise MalformedRecord(file_name, "invalid YAML") from exc
            if data is None:
                data = {}
            if not isinstance(data, dict):
                raise MalformedRecord(file_name)
            parsed.append((file_name, data))
        ctx.raw_records = parsed
        logger.info(
            f"Parsed {len(parsed)} adopter files",
            extra={
                "step": "parse",
                "status": "ok",
                "count": len(parsed),
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return ctx
