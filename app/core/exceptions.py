"""
Application errors raised by the service layer.

Both are HTTPException subclasses, so FastAPI renders them as
{"detail": message} with the matching status code.
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """Requested resource is absent or not owned by the caller."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BadRequestError(HTTPException):
    """Request is well-formed but its values are not acceptable."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
