# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Config Schema - SessionKit

Defines the field vocabulary read from meeting and attendee responses and the
default values every meeting session configuration starts from.
"""

# Root keys that wrap the payload in raw service responses
MEETING_ROOT_KEY = "meeting"
ATTENDEE_ROOT_KEY = "attendee"

MEETING_ID_KEY = "meetingid"
MEDIA_PLACEMENT_KEY = "mediaplacement"

# Media placement key -> MeetingSessionURLs field
MEDIA_PLACEMENT_URL_FIELDS: dict[str, str] = {
    "audiohosturl": "audio_host_url",
    "screendataurl": "screen_data_url",
    "screensharingurl": "screen_sharing_url",
    "screenviewingurl": "screen_viewing_url",
    "signalingurl": "signaling_url",
    "turncontrolurl": "turn_control_url",
}

# Attendee key -> MeetingSessionCredentials field
ATTENDEE_CREDENTIAL_FIELDS: dict[str, str] = {
    "attendeeid": "attendee_id",
    "externaluserid": "external_user_id",
    "jointoken": "join_token",
}

DEFAULT_CONNECTION_TIMEOUT_MS = 15000
DEFAULT_SCREEN_SHARING_TIMEOUT_MS = 5000
DEFAULT_SCREEN_VIEWING_TIMEOUT_MS = 5000
DEFAULT_ATTENDEE_PRESENCE_TIMEOUT_MS = 0

# Bit rate used when screen sharing only sends keyframes
KEYFRAME_ONLY_SCREEN_SHARING_BIT_RATE = 384000

DEFAULT_ENABLE_WEB_AUDIO = False
DEFAULT_ENABLE_UNIFIED_PLAN_FOR_CHROMIUM_BASED_BROWSERS = True
DEFAULT_ENABLE_SIMULCAST_FOR_UNIFIED_PLAN_CHROMIUM_BASED_BROWSERS = False
