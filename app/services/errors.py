"""Domain errors raised by the convention services.

Routes translate these into HTTP responses; services never import FastAPI.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    CONVENTION_NOT_FOUND = "CONVENTION_NOT_FOUND"
    SERIES_NOT_FOUND = "SERIES_NOT_FOUND"
    VENUE_NOT_FOUND = "VENUE_NOT_FOUND"
    SLUG_CONFLICT = "SLUG_CONFLICT"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    INVALID_PRICING = "INVALID_PRICING"
    NOT_DELETED = "NOT_DELETED"
    RESTORE_CONFLICT = "RESTORE_CONFLICT"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    status_code = 400

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ConventionNotFoundError(DomainError):
    """Raised when a convention does not exist or is soft-deleted."""

    status_code = 404

    def __init__(self, convention_id: str) -> None:
        super().__init__(
            code=ErrorCode.CONVENTION_NOT_FOUND,
            message="Convention not found or has been deleted",
        )
        object.__setattr__(self, "convention_id", convention_id)


class SeriesNotFoundError(DomainError):
    """Raised when a series does not exist or is not owned by the caller."""

    status_code = 403

    def __init__(self, series_id: str) -> None:
        super().__init__(
            code=ErrorCode.SERIES_NOT_FOUND,
            message="Invalid series ID or you do not own this series",
        )
        object.__setattr__(self, "series_id", series_id)


class VenueNotFoundError(DomainError):
    status_code = 404

    def __init__(self, venue_id: str) -> None:
        super().__init__(code=ErrorCode.VENUE_NOT_FOUND, message="Venue not found")
        object.__setattr__(self, "venue_id", venue_id)


class SlugConflictError(DomainError):
    """Raised when another active convention already uses the slug."""

    status_code = 409

    def __init__(self, slug: str) -> None:
        super().__init__(code=ErrorCode.SLUG_CONFLICT, message=f"Slug '{slug}' already in use")
        object.__setattr__(self, "slug", slug)


class InvalidDateRangeError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_DATE_RANGE, message=message)


class InvalidPricingError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_PRICING, message=message)


class NotDeletedError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_DELETED,
            message="Convention is not deleted or has no restorable slug",
        )


class RestoreConflictError(DomainError):
    """Raised when the original slug was taken while the convention was deleted."""

    status_code = 409

    def __init__(self, slug: str, conflicting_id: str, conflicting_name: str) -> None:
        super().__init__(
            code=ErrorCode.RESTORE_CONFLICT,
            message=(
                f'Cannot restore convention. The slug "{slug}" is already in use '
                f'by an active convention named "{conflicting_name}".'
            ),
        )
        object.__setattr__(self, "conflicting_id", conflicting_id)
