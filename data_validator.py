import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from errors import AdopterLoadError, InvalidEnumValue, InvalidField
from models import AdopterRecord, AdoptionStatus, Category
from utils.number_parsing import parse_number

logger = logging.getLogger(__name__)

# Lowercased input -> canonical value
ALLOWED_STATUSES: Dict[str, AdoptionStatus] = {s.value: s for s in AdoptionStatus}
ALLOWED_CATEGORIES: Dict[str, Category] = {c.value.lower(): c for c in Category}

TEXT_FIELDS = ("name", "logoUrl", "website", "usage")


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of decoding one adopter file: either a record or the first error."""

    file_name: str
    record: Optional[AdopterRecord] = None
    error: Optional[AdopterLoadError] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def unwrap(self) -> AdopterRecord:
        if self.error is not None:
            raise self.error
        if self.record is None:
            raise RuntimeError(f"No record decoded from {self.file_name}")
        return self.record


class AdopterValidator:
    def __init__(self):
        self.validation_stats = {
            'total_records': 0,
            'valid_records': 0,
            'invalid_records': 0,
            'validation_errors': []
        }

    def validate_string(self, value: Any, field: str, file_name: str) -> str:
        """Require a non-empty string; return it trimmed."""
        if not isinstance(value, str) or not value.strip():
            raise InvalidField(field, file_name, f'Field "{field}" in {file_name} must be a non-empty string')
        return value.strip()

    def validate_number(self, value: Any, field: str, file_name: str):
        parsed = parse_number(value)
        if parsed is None:
            raise InvalidField(field, file_name, f'Field "{field}" in {file_name} must be a number')
        return parsed

    def parse_adoption_status(self, value: Any, file_name: str) -> AdoptionStatus:
        key = self.validate_string(value, 'adoptionStatus', file_name).lower()
        status = ALLOWED_STATUSES.get(key)
        if status is None:
            raise InvalidEnumValue(
                'adoptionStatus', file_name, value, [s.value for s in ALLOWED_STATUSES.values()]
            )
        return status

    def parse_category(self, value: Any, file_name: str) -> Category:
        key = self.validate_string(value, 'category', file_name).lower()
        category = ALLOWED_CATEGORIES.get(key)
        if category is None:
            raise InvalidEnumValue(
                'category', file_name, value, [c.value for c in ALLOWED_CATEGORIES.values()]
            )
        return category

    def parse_sources(self, value: Any, file_name: str) -> List[str]:
        if value is None:
            return []
        if isinstance(value, list):
            return [
                self.validate_string(entry, f'sources[{idx}]', file_name)
                for idx, entry in enumerate(value)
            ]
        if isinstance(value, str):
            return [self.validate_string(value, 'sources', file_name)]
        raise InvalidField('sources', file_name, f'Field "sources" in {file_name} must be a list of strings')

    def build_record(self, data: Dict[str, Any], file_name: str) -> AdopterRecord:
        """Validate every field in schema order; the first failure raises."""
        text = {field: self.validate_string(data.get(field), field, file_name) for field in TEXT_FIELDS}
        return AdopterRecord(
            name=text['name'],
            logo_url=text['logoUrl'],
            website=text['website'],
            usage=text['usage'],
            adoption_status=self.parse_adoption_status(data.get('adoptionStatus'), file_name),
            category=self.parse_category(data.get('category'), file_name),
            size=self.validate_number(data.get('size'), 'size', file_name),
            sources=self.parse_sources(data.get('sources'), file_name),
        )

    def decode_adopter(self, data: Dict[str, Any], file_name: str) -> DecodeResult:
        """Validate a single parsed file and return a DecodeResult instead of raising."""
        self.validation_stats['total_records'] += 1
        try:
            record = self.build_record(data, file_name)
        except AdopterLoadError as exc:
            self.validation_stats['invalid_records'] += 1
            self.validation_stats['validation_errors'].append(str(exc))
            return DecodeResult(file_name=file_name, error=exc)
        self.validation_stats['valid_records'] += 1
        return DecodeResult(file_name=file_name, record=record)

    def validate_all_adopters(self, entries: List[tuple]) -> List[AdopterRecord]:
        """Decode all (file_name, data) pairs, aborting on the first invalid file."""
        records: List[AdopterRecord] = []

        logger.info(f"Starting validation of {len(entries)} adopter files")

        for file_name, data in entries:
            result = self.decode_adopter(data, file_name)
            if not result.is_valid:
                logger.error(f"{file_name} validation failed: {result.error}")
            records.append(result.unwrap())

        logger.info(f"Validation completed. Valid: {len(records)}")
        return records

    def get_validation_stats(self) -> Dict:
        """Return validation statistics."""
        return self.validation_stats.copy()
