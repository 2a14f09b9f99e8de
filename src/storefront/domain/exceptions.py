"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.
Each error carries a stable ``code`` and renders to a structured payload
via ``to_dict()`` so callers can tell which entity or field failed.
"""

from __future__ import annotations

from typing import Any


class DomainException(Exception):
    """Base class for all domain errors."""

    code = "DOMAIN_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


class ValidationError(DomainException):
    """A business rule or invariant was violated (invalid input)."""

    code = "INVALID_INPUT"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        if self.field is not None:
            payload["field"] = self.field
        return payload


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    code = "NOT_FOUND"

    def __init__(self, entity: str, entity_id: Any) -> None:
        super().__init__(f"{entity} #{entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["entity"] = self.entity
        payload["entity_id"] = self.entity_id
        return payload


class PersistenceError(DomainException):
    """A storage transaction could not be committed.

    The transaction has already been rolled back when this is raised.
    """

    code = "PERSISTENCE_FAILURE"

    def __init__(self, message: str, operation: str) -> None:
        super().__init__(message)
        self.operation = operation

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["operation"] = self.operation
        return payload
