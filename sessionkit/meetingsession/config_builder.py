# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Config Builder - SessionKit

Builds a meeting session configuration from "create meeting" and "create
attendee" service responses. This is the single place where response shapes
are resolved into the canonical configuration.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from sessionkit.browserbehavior import BrowserBehavior, DefaultBrowserBehavior
from sessionkit.utils import NormalizedResponse, lowercase_keys
from sessionkit.videodownlinkbandwidthpolicy import (
    AllHighestVideoBandwidthPolicy,
    VideoDownlinkBandwidthPolicy,
)
from sessionkit.videouplinkbandwidthpolicy import (
    NScaleVideoUplinkBandwidthPolicy,
    VideoUplinkBandwidthPolicy,
)

from .config_schema import (
    ATTENDEE_CREDENTIAL_FIELDS,
    ATTENDEE_ROOT_KEY,
    KEYFRAME_ONLY_SCREEN_SHARING_BIT_RATE,
    MEDIA_PLACEMENT_KEY,
    MEDIA_PLACEMENT_URL_FIELDS,
    MEETING_ID_KEY,
    MEETING_ROOT_KEY,
)
from .errors import MissingMediaPlacementError
from .models import (
    MeetingSessionConfiguration,
    MeetingSessionCredentials,
    MeetingSessionURLs,
    ScreenSharingSessionOptions,
)

logger = logging.getLogger(__name__)

DownlinkPolicyFactory = Callable[[str | None], VideoDownlinkBandwidthPolicy]
UplinkPolicyFactory = Callable[[str | None], VideoUplinkBandwidthPolicy]


def _normalize(
    response: Mapping[str, Any] | None, root_key: str
) -> NormalizedResponse | None:
    """
    Normalize a response and unwrap its root key.

    Returns None when nothing was supplied: no response at all, or one that
    holds no usable fields once the root key is unwrapped. The emptiness
    check runs after unwrapping so ``{}`` and ``{"Attendee": {}}`` agree.
    """
    if response is None:
        return None
    if not isinstance(response, Mapping):
        raise TypeError(
            f"Expected a mapping for the {root_key} response, got {type(response).__name__}"
        )

    normalized = lowercase_keys(response)
    wrapped = normalized.node(root_key)
    if wrapped is not None:
        logger.debug(f"Unwrapping '{root_key}' root key from response")
        normalized = wrapped
    if normalized.is_empty():
        logger.debug(f"Ignoring empty {root_key} response")
        return None
    return normalized


def _build_urls(meeting: NormalizedResponse) -> MeetingSessionURLs:
    media_placement = meeting.node(MEDIA_PLACEMENT_KEY)
    if media_placement is None:
        meeting_id = meeting.string(MEETING_ID_KEY)
        logger.warning(
            f"Meeting response for {meeting_id or 'unknown meeting'} has no MediaPlacement"
        )
        raise MissingMediaPlacementError(meeting_id)

    return MeetingSessionURLs(
        **{
            field: media_placement.string(key)
            for key, field in MEDIA_PLACEMENT_URL_FIELDS.items()
        }
    )


def _build_credentials(attendee: NormalizedResponse) -> MeetingSessionCredentials:
    return MeetingSessionCredentials(
        **{
            field: attendee.string(key)
            for key, field in ATTENDEE_CREDENTIAL_FIELDS.items()
        }
    )


def build_configuration(
    meeting_response: Mapping[str, Any] | None = None,
    attendee_response: Mapping[str, Any] | None = None,
    *,
    browser_behavior: BrowserBehavior | None = None,
    downlink_policy_factory: DownlinkPolicyFactory = AllHighestVideoBandwidthPolicy,
    uplink_policy_factory: UplinkPolicyFactory = NScaleVideoUplinkBandwidthPolicy,
) -> MeetingSessionConfiguration:
    """
    Build a meeting session configuration from service responses.

    Both responses may be passed either as the raw service response
    (``{"Meeting": {...}}`` / ``{"Attendee": {...}}``) or as the unwrapped
    fields. Key matching is case-insensitive at every level.

    This function runs in five steps:
    1. Lower-case every key, keeping only strings and nested objects
    2. Unwrap the Meeting / Attendee root keys when present
    3. Read the meeting id, media placement URLs and attendee credentials
    4. Ask the platform whether screen sharing only sends keyframes
    5. Create the default downlink and uplink bandwidth policies

    Args:
        meeting_response: Optional "create meeting" response
        attendee_response: Optional "create attendee" response
        browser_behavior: Platform probe (defaults to DefaultBrowserBehavior())
        downlink_policy_factory: Called with the attendee id (or None)
        uplink_policy_factory: Called with the attendee id (or None)

    Returns:
        A new MeetingSessionConfiguration

    Raises:
        MissingMediaPlacementError: If a non-empty meeting response has no
            MediaPlacement structure
        TypeError: If a response is not a mapping

    Example:
        >>> config = build_configuration({"Meeting": {...}}, {"Attendee": {...}})
        >>> config.credentials.attendee_id
    """
    # Steps 1 and 2: Normalize and unwrap both responses
    meeting = _normalize(meeting_response, MEETING_ROOT_KEY)
    attendee = _normalize(attendee_response, ATTENDEE_ROOT_KEY)

    # Step 3: Resolve the sub-records before assembling the configuration
    meeting_id = None
    urls = None
    if meeting is not None:
        meeting_id = meeting.string(MEETING_ID_KEY)
        urls = _build_urls(meeting)

    credentials = _build_credentials(attendee) if attendee is not None else None

    # Step 4: Platform-dependent screen sharing options
    if browser_behavior is None:
        browser_behavior = DefaultBrowserBehavior()
    screen_sharing_session_options = ScreenSharingSessionOptions()
    if browser_behavior.screen_share_sends_only_keyframes():
        screen_sharing_session_options = ScreenSharingSessionOptions(
            bit_rate=KEYFRAME_ONLY_SCREEN_SHARING_BIT_RATE
        )

    # Step 5: Default bandwidth policies, keyed on the local attendee
    # A session-start component may replace these based on the simulcast flag
    attendee_id = credentials.attendee_id if credentials is not None else None
    downlink_policy = downlink_policy_factory(attendee_id)
    uplink_policy = uplink_policy_factory(attendee_id)
    logger.debug(
        f"Selected {downlink_policy.name()} and {uplink_policy.name()} "
        f"for attendee {attendee_id}"
    )

    return MeetingSessionConfiguration(
        meeting_id=meeting_id,
        credentials=credentials,
        urls=urls,
        screen_sharing_session_options=screen_sharing_session_options,
        video_downlink_bandwidth_policy=downlink_policy,
        video_uplink_bandwidth_policy=uplink_policy,
    )
