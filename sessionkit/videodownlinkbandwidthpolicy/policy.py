# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Video Downlink Bandwidth Policies - SessionKit

A downlink policy decides which remote videos the session subscribes to.
The configuration builder only constructs the default one; callers may
replace it before starting a session.
"""

from abc import ABC, abstractmethod


class VideoDownlinkBandwidthPolicy(ABC):
    """Interface for policies that choose remote video subscriptions."""

    def __init__(self, self_attendee_id: str | None = None):
        """
        Initialize the policy.

        Args:
            self_attendee_id: Attendee id of the local attendee, if known
        """
        self.self_attendee_id = self_attendee_id

    @abstractmethod
    def name(self) -> str:
        """Return the policy name."""
        pass


class AllHighestVideoBandwidthPolicy(VideoDownlinkBandwidthPolicy):
    """Subscribes to the highest quality stream of every remote video."""

    def name(self) -> str:
        return "AllHighestVideoBandwidthPolicy"
