# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Centralized test configuration for pytest.

This file is automatically loaded by pytest and provides:
- Environment variable loading via dotenv
- Shared response fixtures
"""

from typing import Any

import pytest
from dotenv import load_dotenv

from sessionkit.browserbehavior import BrowserBehavior

# Load environment variables once for all tests
load_dotenv()


class StubBrowserBehavior(BrowserBehavior):
    """Browser behavior with a fixed answer."""

    def __init__(self, sends_only_keyframes: bool = False):
        self.sends_only_keyframes = sends_only_keyframes
        self.calls = 0

    def screen_share_sends_only_keyframes(self) -> bool:
        self.calls += 1
        return self.sends_only_keyframes


@pytest.fixture
def chromium() -> StubBrowserBehavior:
    return StubBrowserBehavior(sends_only_keyframes=False)


@pytest.fixture
def firefox() -> StubBrowserBehavior:
    return StubBrowserBehavior(sends_only_keyframes=True)


@pytest.fixture
def media_placement() -> dict[str, Any]:
    return {
        "AudioHostUrl": "a",
        "ScreenDataUrl": "b",
        "ScreenSharingUrl": "c",
        "ScreenViewingUrl": "d",
        "SignalingUrl": "e",
        "TurnControlUrl": "f",
    }


@pytest.fixture
def meeting_response(media_placement: dict[str, Any]) -> dict[str, Any]:
    """A create meeting response as returned by the service."""
    return {"Meeting": {"MeetingId": "m1", "MediaPlacement": media_placement}}


@pytest.fixture
def attendee_response() -> dict[str, Any]:
    """A create attendee response as returned by the service."""
    return {
        "Attendee": {
            "AttendeeId": "att1",
            "ExternalUserId": "ext1",
            "JoinToken": "tok1",
        }
    }
