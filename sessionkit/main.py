# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
SessionKit CLI

Builds a meeting session configuration from saved "create meeting" and
"create attendee" responses and prints it as JSON.

Usage:
    python -m sessionkit.main --meeting meeting.json --attendee attendee.json
    # Or pretend to be Firefox:
    SESSIONKIT_USER_AGENT="Mozilla/5.0 ... Firefox/120.0" python -m sessionkit.main --meeting meeting.json
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

import sentry_sdk
from dotenv import load_dotenv
from sentry_sdk.integrations.logging import LoggingIntegration

from sessionkit.browserbehavior import DefaultBrowserBehavior
from sessionkit.meetingsession import SessionConfigurationError, build_configuration

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def setup_sentry() -> bool:
    """
    Initialize Sentry error tracking when SENTRY_DSN is set.

    Returns:
        True if Sentry was initialized
    """
    sentry_dsn = os.getenv("SENTRY_DSN")
    if not sentry_dsn:
        logger.debug("Sentry not configured (SENTRY_DSN not set)")
        return False

    sentry_sdk.init(
        dsn=sentry_dsn,
        environment=os.getenv("SENTRY_ENVIRONMENT", "production"),
        release=os.getenv("SENTRY_RELEASE"),
        integrations=[
            LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),
        ],
        send_default_pii=False,
    )
    logger.info("Sentry initialized for error tracking")
    return True


def load_response(path: str | None) -> dict[str, Any] | None:
    """Read a JSON response from disk, or return None when no path is given."""
    if not path:
        return None
    with Path(path).open(encoding="utf-8") as f:
        return json.load(f)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build a meeting session configuration from service responses."
    )
    parser.add_argument("--meeting", help="Path to a create meeting response (JSON)")
    parser.add_argument("--attendee", help="Path to a create attendee response (JSON)")
    parser.add_argument(
        "--user-agent",
        default=None,
        help="User agent used for platform checks (default: $SESSIONKIT_USER_AGENT)",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("SESSIONKIT_LOG_LEVEL", "INFO"),
        help="Logging level (default: $SESSIONKIT_LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point. Returns the process exit code."""
    load_dotenv()
    args = parse_args(argv)
    setup_logging(args.log_level)
    setup_sentry()

    try:
        meeting_response = load_response(args.meeting)
        attendee_response = load_response(args.attendee)
    except (OSError, ValueError) as e:
        # ValueError covers both JSONDecodeError and UnicodeDecodeError
        logger.error(f"Could not read response file: {e}")
        return 1

    try:
        configuration = build_configuration(
            meeting_response,
            attendee_response,
            browser_behavior=DefaultBrowserBehavior(args.user_agent),
        )
    except (SessionConfigurationError, TypeError) as e:
        logger.error(f"Could not build session configuration: {e}")
        return 1

    print(json.dumps(configuration.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
