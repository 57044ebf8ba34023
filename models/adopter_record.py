from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AdoptionStatus(str, Enum):
    NOT_PLANNED = "not planned"
    PLANNED = "planned"
    PARTIAL = "partial"
    FULL = "full"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Category(str, Enum):
    PRODUCT_COMPANY = "product company"
    OSS_PROJECT = "OSS project"
    CONSULTING_COMPANY = "consulting company"


# Display order for the status snapshot
STATUS_ORDER: tuple[AdoptionStatus, ...] = (
    AdoptionStatus.NOT_PLANNED,
    AdoptionStatus.PLANNED,
    AdoptionStatus.PARTIAL,
    AdoptionStatus.FULL,
)


class AdopterRecord(BaseModel):
    """One validated adopter entry; field aliases match the YAML schema keys."""

    name: str
    logo_url: str = Field(alias="logoUrl")
    website: str
    usage: str
    adoption_status: AdoptionStatus = Field(alias="adoptionStatus")
    category: Category
    size: int | float
    sources: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    def sort_key(self) -> tuple[float, str]:
        return (-self.size, self.name)
