"""Errors raised while uploading and analyzing a resume."""

from __future__ import annotations

UPLOAD_FAILED_MESSAGE = "Failed to upload your resume. Please try again."
INVALID_FILE_MESSAGE = "Please upload a valid PDF file."


class RoasterError(Exception):
    """Base class for upload failures.

    Attributes:
        user_message: Text safe to show in the UI. Never contains status
            codes or transport details.
    """

    user_message: str = UPLOAD_FAILED_MESSAGE

    def __init__(self, message: str, user_message: str | None = None):
        super().__init__(message)
        if user_message is not None:
            self.user_message = user_message


class InvalidFileType(RoasterError):
    """File is missing or is not declared as a PDF."""

    user_message = INVALID_FILE_MESSAGE


class ServerError(RoasterError):
    """The analysis service answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str | None = None):
        self.status_code = status_code
        super().__init__(message or f"Analysis service returned HTTP {status_code}")


class NetworkError(RoasterError):
    """Transport failure, timeout, or an unreadable response body."""


class ParseWarning(UserWarning):
    """Resume text matched no section or contact heuristics."""
