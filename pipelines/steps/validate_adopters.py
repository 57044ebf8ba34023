from __future__ import annotations

import logging

from data_validator import AdopterValidator
from pipelines.runner import RunContext

logger = logging.getLogger(__name__)


class ValidateAdopters:
    def __init__(self) -> None:
        self.validator = AdopterValidator()

    def run(self, ctx: RunContext) -> RunContext:
        ctx.adopters = self.validator.validate_all_adopters(ctx.raw_records)
        # Attach validation stats into meta for optional logging
        ctx.meta["validation_stats"] = self.validator.get_validation_stats()
        logger.info(
            "Adopter records validated",
            extra={"step": "validate", "status": "ok", "count": len(ctx.adopters)},
        )
        return ctx
