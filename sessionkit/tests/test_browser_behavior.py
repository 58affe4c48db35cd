# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Tests for the default platform capability probe.
"""

import pytest

from sessionkit.browserbehavior import DefaultBrowserBehavior


class TestDefaultBrowserBehavior:
    """Test cases for DefaultBrowserBehavior."""

    @pytest.mark.parametrize(
        "user_agent",
        [
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:120.0) Gecko/20100101 Firefox/120.0",
            "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
            "(KHTML, like Gecko) FxiOS/120.0 Mobile/15E148 Safari/605.1.15",
        ],
    )
    def test_firefox_sends_only_keyframes(self, user_agent: str) -> None:
        assert DefaultBrowserBehavior(user_agent).screen_share_sends_only_keyframes() is True

    @pytest.mark.parametrize(
        "user_agent",
        [
            "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_0) AppleWebKit/605.1.15 "
            "(KHTML, like Gecko) Version/17.0 Safari/605.1.15",
            "",
        ],
    )
    def test_other_browsers_send_full_frames(self, user_agent: str) -> None:
        assert DefaultBrowserBehavior(user_agent).screen_share_sends_only_keyframes() is False

    def test_user_agent_falls_back_to_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SESSIONKIT_USER_AGENT", "Gecko/20100101 Firefox/115.0")
        assert DefaultBrowserBehavior().is_firefox() is True

    def test_no_user_agent_anywhere(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SESSIONKIT_USER_AGENT", raising=False)
        behavior = DefaultBrowserBehavior()

        assert behavior.user_agent == ""
        assert behavior.screen_share_sends_only_keyframes() is False
