# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
SessionKit - meeting session configuration from service responses.
"""

from sessionkit.meetingsession import (
    MeetingSessionConfiguration,
    MissingMediaPlacementError,
    build_configuration,
)

__version__ = "0.1.0"

__all__ = [
    "MeetingSessionConfiguration",
    "MissingMediaPlacementError",
    "build_configuration",
]
