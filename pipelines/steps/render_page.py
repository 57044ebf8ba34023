from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from config.settings import Settings
from pipelines.runner import RunContext
from services.rendering import render_adopters_page

logger = logging.getLogger(__name__)

PAGE_FILE = "index.html"
DATA_FILE = "adopters.json"


def _output_dir(ctx: RunContext) -> Path:
    if ctx.output_dir is None:
        raise RuntimeError("RunContext.output_dir is required to write build output")
    out = Path(ctx.output_dir)
    out.mkdir(parents=True, exist_ok=True)
    return out


class RenderAdoptersPage:
    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings

    def run(self, ctx: RunContext) -> RunContext:
        html = render_adopters_page(ctx.content(), self.settings)
        path = _output_dir(ctx) / PAGE_FILE
        path.write_text(html, encoding="utf-8")
        ctx.meta["page_path"] = str(path)
        logger.info(f"Wrote {path}", extra={"step": "render", "status": "ok", "count": len(ctx.adopters)})
        return ctx


class WriteAdoptersData:
    """Export the aggregate (adopters, summary, lastUpdated) as JSON next to the page."""

    def run(self, ctx: RunContext) -> RunContext:
        payload = ctx.content().to_payload()
        path = _output_dir(ctx) / DATA_FILE
        path.write_text(json.dumps(payload, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
        ctx.meta["data_path"] = str(path)
        logger.info(f"Wrote {path}", extra={"step": "export", "status": "ok", "count": len(ctx.adopters)})
        return ctx
