# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Errors raised while building a meeting session configuration.
"""


class SessionConfigurationError(ValueError):
    """Base class for meeting session configuration errors."""


class MissingMediaPlacementError(SessionConfigurationError):
    """Raised when a meeting response carries no MediaPlacement structure."""

    def __init__(self, meeting_id: str | None = None):
        self.meeting_id = meeting_id
        message = "Meeting response is missing the required MediaPlacement structure"
        if meeting_id:
            message = f"{message} (meeting {meeting_id})"
        super().__init__(message)
