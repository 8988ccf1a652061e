"""Domain exceptions."""

from __future__ import annotations

from uuid import UUID


class DomainError(Exception):
    """Base class for domain-specific failures."""


class InvalidArgumentError(DomainError, ValueError):
    """Raised when an input is malformed (e.g. an empty name)."""


class OutOfRangeError(DomainError, ValueError):
    """Raised when a numeric value violates a documented bound."""


class InvalidValueError(OutOfRangeError):
    """Raised when a numeric value is NaN or infinite."""


class NullArgumentError(DomainError, TypeError):
    """Raised when a required argument is None."""


class HotelNotFoundError(DomainError):
    """Raised when a mutation targets a hotel id that does not exist."""

    def __init__(self, hotel_id: UUID):
        super().__init__(f"Hotel with ID '{hotel_id}' was not found.")
        self.hotel_id = hotel_id


class HotelConflictError(DomainError):
    """Raised when a hotel with the same id is already stored."""

    def __init__(self, hotel_id: UUID):
        super().__init__(f"Hotel with ID '{hotel_id}' already exists.")
        self.hotel_id = hotel_id
