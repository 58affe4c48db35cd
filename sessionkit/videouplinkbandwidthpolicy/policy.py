# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Video Uplink Bandwidth Policies - SessionKit

An uplink policy decides the bandwidth constraints of the local video.
"""

from abc import ABC, abstractmethod


class VideoUplinkBandwidthPolicy(ABC):
    """Interface for policies that constrain the local video."""

    def __init__(self, self_attendee_id: str | None = None):
        self.self_attendee_id = self_attendee_id

    @abstractmethod
    def name(self) -> str:
        """Return the policy name."""
        pass


class NScaleVideoUplinkBandwidthPolicy(VideoUplinkBandwidthPolicy):
    """Scales the local video bandwidth down as more attendees share video."""

    def name(self) -> str:
        return "NScaleVideoUplinkBandwidthPolicy"
