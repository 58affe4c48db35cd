# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Tests for the SessionKit command line entry point.
"""

import json
import logging
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from sessionkit.main import load_response, main, setup_sentry

FIREFOX_UA = "Mozilla/5.0 (Windows NT 10.0; rv:121.0) Gecko/20100101 Firefox/121.0"
CHROME_UA = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


@pytest.fixture
def response_files(
    tmp_path: Path, meeting_response: dict[str, Any], attendee_response: dict[str, Any]
) -> tuple[Path, Path]:
    meeting_path = tmp_path / "meeting.json"
    attendee_path = tmp_path / "attendee.json"
    meeting_path.write_text(json.dumps(meeting_response), encoding="utf-8")
    attendee_path.write_text(json.dumps(attendee_response), encoding="utf-8")
    return meeting_path, attendee_path


class TestMain:
    """Test cases for main()."""

    def test_prints_configuration(
        self, response_files: tuple[Path, Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        meeting_path, attendee_path = response_files

        exit_code = main(
            [
                "--meeting",
                str(meeting_path),
                "--attendee",
                str(attendee_path),
                "--user-agent",
                CHROME_UA,
            ]
        )

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["meeting_id"] == "m1"
        assert output["urls"]["turn_control_url"] == "f"
        assert output["credentials"]["join_token"] == "tok1"
        assert output["screen_sharing_session_options"] == {"bit_rate": None}
        assert output["video_downlink_bandwidth_policy"] == "AllHighestVideoBandwidthPolicy"

    def test_firefox_user_agent_sets_bit_rate(
        self, response_files: tuple[Path, Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        meeting_path, _ = response_files

        exit_code = main(["--meeting", str(meeting_path), "--user-agent", FIREFOX_UA])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["screen_sharing_session_options"] == {"bit_rate": 384000}
        assert output["credentials"] is None

    def test_missing_media_placement_fails(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        meeting_path = tmp_path / "meeting.json"
        meeting_path.write_text(json.dumps({"Meeting": {"MeetingId": "m1"}}), encoding="utf-8")

        with caplog.at_level(logging.ERROR):
            exit_code = main(["--meeting", str(meeting_path), "--user-agent", CHROME_UA])

        assert exit_code == 1
        assert "MediaPlacement" in caplog.text

    def test_unreadable_file_fails(self, tmp_path: Path) -> None:
        exit_code = main(["--meeting", str(tmp_path / "missing.json")])
        assert exit_code == 1

    def test_invalid_json_fails(self, tmp_path: Path) -> None:
        meeting_path = tmp_path / "meeting.json"
        meeting_path.write_text("{not json", encoding="utf-8")

        assert main(["--meeting", str(meeting_path)]) == 1

    def test_invalid_utf8_fails(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        meeting_path = tmp_path / "meeting.json"
        meeting_path.write_bytes(b'{"MeetingId": "\xff\xfe"}')

        with caplog.at_level(logging.ERROR):
            exit_code = main(["--meeting", str(meeting_path)])

        assert exit_code == 1
        assert "Could not read response file" in caplog.text

    def test_load_response_without_path(self) -> None:
        assert load_response(None) is None


class TestSetupSentry:
    """Test cases for optional Sentry initialization."""

    def test_skipped_without_dsn(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SENTRY_DSN", raising=False)

        with patch("sessionkit.main.sentry_sdk.init") as mock_init:
            assert setup_sentry() is False
            mock_init.assert_not_called()

    def test_initialized_with_dsn(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SENTRY_DSN", "https://public@example.ingest.sentry.io/1")

        with patch("sessionkit.main.sentry_sdk.init") as mock_init:
            assert setup_sentry() is True
            mock_init.assert_called_once()
            assert mock_init.call_args.kwargs["send_default_pii"] is False
