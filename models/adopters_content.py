from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .adopter_record import AdopterRecord, AdoptionStatus, STATUS_ORDER


class AdoptersContent(BaseModel):
    """Aggregate handed to the presentation layer: sorted adopters, status counts, build date."""

    adopters: list[AdopterRecord]
    summary: dict[AdoptionStatus, int]
    last_updated: str = Field(alias="lastUpdated")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_payload(self) -> dict[str, Any]:
        return {
            "adopters": [a.model_dump(mode="json", by_alias=True) for a in self.adopters],
            "summary": {status.value: self.summary.get(status, 0) for status in STATUS_ORDER},
            "lastUpdated": self.last_updated,
        }
