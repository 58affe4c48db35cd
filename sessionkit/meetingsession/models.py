# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Meeting Session Models - SessionKit

Value records produced by the configuration builder. Every record stays
mutable after construction so callers can adjust fields before starting a
session.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from sessionkit.connectionhealthpolicy import ConnectionHealthPolicyConfiguration
from sessionkit.videodownlinkbandwidthpolicy import VideoDownlinkBandwidthPolicy
from sessionkit.videouplinkbandwidthpolicy import VideoUplinkBandwidthPolicy

from .config_schema import (
    DEFAULT_ATTENDEE_PRESENCE_TIMEOUT_MS,
    DEFAULT_CONNECTION_TIMEOUT_MS,
    DEFAULT_ENABLE_SIMULCAST_FOR_UNIFIED_PLAN_CHROMIUM_BASED_BROWSERS,
    DEFAULT_ENABLE_UNIFIED_PLAN_FOR_CHROMIUM_BASED_BROWSERS,
    DEFAULT_ENABLE_WEB_AUDIO,
    DEFAULT_SCREEN_SHARING_TIMEOUT_MS,
    DEFAULT_SCREEN_VIEWING_TIMEOUT_MS,
)


class MeetingSessionCredentials(BaseModel):
    """Credentials used to authenticate the session."""

    attendee_id: str | None = None
    external_user_id: str | None = None
    join_token: str | None = None


class MeetingSessionURLs(BaseModel):
    """URLs the session uses to reach the meeting service."""

    audio_host_url: str | None = None
    screen_data_url: str | None = None
    screen_sharing_url: str | None = None
    screen_viewing_url: str | None = None
    signaling_url: str | None = None
    turn_control_url: str | None = None


class ScreenSharingSessionOptions(BaseModel):
    """Options applied when starting a screen sharing session."""

    bit_rate: int | None = None


class MeetingSessionConfiguration(BaseModel):
    """
    Contains the information necessary to start a meeting session.

    Build one from service responses with ``from_responses()`` (or
    ``build_configuration()``); the fields may be reassigned afterwards.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    meeting_id: str | None = None
    credentials: MeetingSessionCredentials | None = None
    urls: MeetingSessionURLs | None = None

    # Timeouts in milliseconds
    connection_timeout_ms: int = DEFAULT_CONNECTION_TIMEOUT_MS
    screen_sharing_timeout_ms: int = DEFAULT_SCREEN_SHARING_TIMEOUT_MS
    screen_viewing_timeout_ms: int = DEFAULT_SCREEN_VIEWING_TIMEOUT_MS
    attendee_presence_timeout_ms: int = DEFAULT_ATTENDEE_PRESENCE_TIMEOUT_MS

    screen_sharing_session_options: ScreenSharingSessionOptions = Field(
        default_factory=ScreenSharingSessionOptions
    )
    connection_health_policy_configuration: ConnectionHealthPolicyConfiguration = (
        Field(default_factory=ConnectionHealthPolicyConfiguration)
    )

    # Feature flags
    enable_web_audio: bool = DEFAULT_ENABLE_WEB_AUDIO
    enable_unified_plan_for_chromium_based_browsers: bool = (
        DEFAULT_ENABLE_UNIFIED_PLAN_FOR_CHROMIUM_BASED_BROWSERS
    )
    enable_simulcast_for_unified_plan_chromium_based_browsers: bool = (
        DEFAULT_ENABLE_SIMULCAST_FOR_UNIFIED_PLAN_CHROMIUM_BASED_BROWSERS
    )

    video_downlink_bandwidth_policy: VideoDownlinkBandwidthPolicy | None = None
    video_uplink_bandwidth_policy: VideoUplinkBandwidthPolicy | None = None

    @classmethod
    def from_responses(
        cls,
        meeting_response: Mapping[str, Any] | None = None,
        attendee_response: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> "MeetingSessionConfiguration":
        """Shortcut for ``build_configuration()``; see it for the arguments."""
        from .config_builder import build_configuration

        return build_configuration(meeting_response, attendee_response, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize the configuration to plain JSON-compatible data.

        Bandwidth policies are rendered by name.
        """
        data = self.model_dump(
            exclude={"video_downlink_bandwidth_policy", "video_uplink_bandwidth_policy"}
        )
        data["video_downlink_bandwidth_policy"] = (
            self.video_downlink_bandwidth_policy.name()
            if self.video_downlink_bandwidth_policy is not None
            else None
        )
        data["video_uplink_bandwidth_policy"] = (
            self.video_uplink_bandwidth_policy.name()
            if self.video_uplink_bandwidth_policy is not None
            else None
        )
        return data
