from __future__ import annotations

import logging
from typing import Dict, Optional

from errors import EmptyDataset
from models import AdoptionStatus
from pipelines.runner import RunContext
from services.clock import Clock, build_date

logger = logging.getLogger(__name__)


class AggregateAdopters:
    """Sort adopters by size (desc) then name, and count them per adoption status."""

    def run(self, ctx: RunContext) -> RunContext:
        entries = sorted(ctx.adopters, key=lambda a: a.sort_key())
        if not entries:
            raise EmptyDataset(str(ctx.adopters_dir))

        summary: Dict[AdoptionStatus, int] = {status: 0 for status in AdoptionStatus}
        for entry in entries:
            summary[entry.adoption_status] += 1

        ctx.adopters = entries
        ctx.summary = summary
        logger.info(
            "Adopter summary: "
            + ", ".join(f"{status.value}={count}" for status, count in summary.items()),
            extra={"step": "aggregate", "status": "ok", "count": len(entries)},
        )
        return ctx


class StampBuildDate:
    def __init__(self, clock: Optional[Clock] = None) -> None:
        self.clock = clock

    def run(self, ctx: RunContext) -> RunContext:
        ctx.last_updated = build_date(self.clock)
        return ctx
