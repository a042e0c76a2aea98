"""Domain errors raised by the service layer and rendered by app.main."""

from fastapi import status


class DomainError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(DomainError):
    """Client data breaks a required-field, range or uniqueness rule."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(DomainError):
    """Lookup by id (or match id) found nothing."""

    status_code = status.HTTP_404_NOT_FOUND
