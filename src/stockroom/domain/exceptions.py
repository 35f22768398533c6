"""Domain-level exceptions.

All rule violations are expressed as subclasses of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
Every exception carries an ``ErrorKind`` tag naming the violated rule.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_NAME = "InvalidName"
    INVALID_QUANTITY = "InvalidQuantity"
    INVALID_PRICE = "InvalidPrice"
    NOT_FOUND = "NotFound"
    CAPACITY_EXCEEDED = "CapacityExceeded"
    IO_FAILURE = "IOFailure"
    MALFORMED_RECORD = "MalformedRecord"


class DomainException(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind


class ValidationError(DomainException):
    """A field value is outside the bounds an Item allows."""


class InvalidNameError(ValidationError):
    kind = ErrorKind.INVALID_NAME


class InvalidQuantityError(ValidationError):
    kind = ErrorKind.INVALID_QUANTITY


class InvalidPriceError(ValidationError):
    kind = ErrorKind.INVALID_PRICE


class EntityNotFoundError(DomainException):
    """A requested item does not exist."""

    kind = ErrorKind.NOT_FOUND


class CapacityExceededError(DomainException):
    """The store already holds its maximum number of items."""

    kind = ErrorKind.CAPACITY_EXCEEDED


class StorageError(DomainException):
    """The backing file could not be opened, read or written."""

    kind = ErrorKind.IO_FAILURE
