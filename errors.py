from __future__ import annotations

from typing import Any, Sequence


class AdopterLoadError(Exception):
    """Base class for every fatal error raised while loading adopter records."""


class MissingDirectory(AdopterLoadError):
    def __init__(self, directory: str) -> None:
        self.directory = directory
        super().__init__(f"Missing adopters directory at {directory}")


class MalformedRecord(AdopterLoadError):
    def __init__(self, file_name: str, reason: str | None = None) -> None:
        self.file_name = file_name
        self.reason = reason
        message = f"{file_name} must contain a YAML object"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidField(AdopterLoadError):
    def __init__(self, field: str, file_name: str, message: str | None = None) -> None:
        self.field = field
        self.file_name = file_name
        super().__init__(message or f'Field "{field}" in {file_name} is invalid')


class InvalidEnumValue(InvalidField):
    def __init__(self, field: str, file_name: str, value: Any, allowed: Sequence[str]) -> None:
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            field,
            file_name,
            f'Invalid {field} "{value}" in {file_name}. Allowed values: {", ".join(self.allowed)}',
        )


class EmptyDataset(AdopterLoadError):
    def __init__(self, directory: str) -> None:
        self.directory = directory
        super().__init__(f"No adopter entries found at {directory}")
