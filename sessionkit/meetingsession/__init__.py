# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Meeting session configuration.
"""

from .config_builder import build_configuration
from .errors import MissingMediaPlacementError, SessionConfigurationError
from .models import (
    MeetingSessionConfiguration,
    MeetingSessionCredentials,
    MeetingSessionURLs,
    ScreenSharingSessionOptions,
)

__all__ = [
    "MeetingSessionConfiguration",
    "MeetingSessionCredentials",
    "MeetingSessionURLs",
    "MissingMediaPlacementError",
    "ScreenSharingSessionOptions",
    "SessionConfigurationError",
    "build_configuration",
]
