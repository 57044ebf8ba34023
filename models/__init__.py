

from .adopter_record import AdopterRecord, AdoptionStatus, Category, STATUS_ORDER
from .adopters_content import AdoptersContent

__all__ = [
    "AdopterRecord",
    "AdoptionStatus",
    "Category",
    "STATUS_ORDER",
    "AdoptersContent",
]


