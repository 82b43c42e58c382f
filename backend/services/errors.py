"""
Resolution errors. Each carries the HTTP status the API layer responds with.
"""

from typing import Optional


class ResolutionError(Exception):
    """Base class for failures of a single resolution call."""

    status_code = 500
    default_message = "Failed to process video. Please check the URL."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class UnsupportedPlatform(ResolutionError):
    status_code = 400
    default_message = (
        "Unsupported platform. Please provide a valid Facebook or Instagram URL."
    )


class RemoteAuthError(ResolutionError):
    status_code = 401
    default_message = "API key invalid or expired. Please update it in settings."


class RemoteApiError(ResolutionError):
    status_code = 502
    default_message = "Failed to resolve video."

    def __init__(self, reason: Optional[str] = None):
        message = f"Failed to resolve video: {reason}" if reason else None
        super().__init__(message)
        self.reason = reason
