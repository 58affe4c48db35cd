# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Browser Behavior - SessionKit

Platform capability probe consulted while building a session configuration.
"""

import os
import re
from abc import ABC, abstractmethod

USER_AGENT_ENV_VAR = "SESSIONKIT_USER_AGENT"

_FIREFOX_PATTERN = re.compile(r"(Firefox|FxiOS)/\d+")


class BrowserBehavior(ABC):
    """
    Abstract interface for platform capability checks.

    **Simple Explanation:**
    Different browsers handle media differently. The configuration builder
    only needs to ask a yes/no question, so anything that can answer it
    (a real browser probe, a test double) can be plugged in.
    """

    @abstractmethod
    def screen_share_sends_only_keyframes(self) -> bool:
        """Return True when screen sharing on this platform only sends keyframes."""
        pass


class DefaultBrowserBehavior(BrowserBehavior):
    """Answers capability checks from a user agent string."""

    def __init__(self, user_agent: str | None = None):
        """
        Initialize the browser behavior.

        Args:
            user_agent: User agent to inspect. Falls back to the
                SESSIONKIT_USER_AGENT environment variable, then to "".
        """
        if user_agent is None:
            user_agent = os.getenv(USER_AGENT_ENV_VAR, "")
        self.user_agent = user_agent

    def is_firefox(self) -> bool:
        return bool(_FIREFOX_PATTERN.search(self.user_agent))

    def screen_share_sends_only_keyframes(self) -> bool:
        # Firefox screen capture only produces keyframes
        return self.is_firefox()
