from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from config.settings import Settings, get_settings
from models import AdoptersContent
from pipelines.runner import Pipeline, RunContext, Step
from pipelines.steps import (
    AggregateAdopters,
    DiscoverAdopterFiles,
    ParseAdopterFiles,
    RenderAdoptersPage,
    StampBuildDate,
    ValidateAdopters,
    WriteAdoptersData,
)
from services.clock import Clock


def loader_steps(extensions: Iterable[str] = (".yaml",), clock: Optional[Clock] = None) -> List[Step]:
    return [
        DiscoverAdopterFiles(extensions),
        ParseAdopterFiles(),
        ValidateAdopters(),
        AggregateAdopters(),
        StampBuildDate(clock),
    ]


def load_adopters(
    adopters_dir: str | Path,
    clock: Optional[Clock] = None,
    extensions: Optional[Iterable[str]] = None,
) -> AdoptersContent:
    """Load, validate and aggregate every adopter file in ``adopters_dir``.

    Raises an ``errors.AdopterLoadError`` subclass on the first problem found.
    """
    if extensions is None:
        extensions = get_settings().adopter_extensions
    ctx = RunContext(adopters_dir=Path(adopters_dir))
    ctx = Pipeline(loader_steps(extensions, clock)).run(ctx)
    return ctx.content()


def build_site(
    adopters_dir: str | Path,
    output_dir: str | Path,
    settings: Optional[Settings] = None,
    clock: Optional[Clock] = None,
    write_json: Optional[bool] = None,
) -> RunContext:
    """Run the full build: load adopters, render index.html and optionally adopters.json."""
    settings = settings or get_settings()
    if write_json is None:
        write_json = settings.write_json
    steps = loader_steps(settings.adopter_extensions, clock)
    # Rendering only starts after every record validated, so failures leave no output
    steps.append(RenderAdoptersPage(settings))
    if write_json:
        steps.append(WriteAdoptersData())
    ctx = RunContext(adopters_dir=Path(adopters_dir), output_dir=Path(output_dir))
    return Pipeline(steps).run(ctx)
