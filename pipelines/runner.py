from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, List, Optional

from models import AdopterRecord, AdoptersContent, AdoptionStatus
from utils.logging_setup import init_logging


@dataclass
class RunContext:
    adopters_dir: Optional[Path] = None
    output_dir: Optional[Path] = None
    # (file_name, path) pairs found on disk, then (file_name, parsed mapping)
    files: list = field(default_factory=list)
    raw_records: list = field(default_factory=list)
    adopters: List[AdopterRecord] = field(default_factory=list)
    summary: dict = field(default_factory=dict)
    last_updated: Optional[str] = None
    meta: dict = field(default_factory=dict)

    def content(self) -> AdoptersContent:
        if self.last_updated is None:
            raise RuntimeError("RunContext has no build date; run StampBuildDate first")
        return AdoptersContent(
            adopters=list(self.adopters),
            summary={status: self.summary.get(status, 0) for status in AdoptionStatus},
            last_updated=self.last_updated,
        )


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            ctx = step.run(ctx)
        return ctx
