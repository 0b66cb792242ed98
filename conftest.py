"""Pytest configuration and shared fixtures."""

import io

import pytest
from loguru import logger

from lib.redirect.device import (
    ANDROID_VIEWER_HEADER,
    DESKTOP_VIEWER_HEADER,
    IOS_VIEWER_HEADER,
    USER_AGENT_HEADER,
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def viewer_headers():
    """Build CloudFront viewer headers for a device name."""

    def _build(device: str = None, user_agent: str = None) -> dict:
        flags = {
            "ios": IOS_VIEWER_HEADER,
            "android": ANDROID_VIEWER_HEADER,
            "desktop": DESKTOP_VIEWER_HEADER,
        }
        headers = {}
        if device in flags:
            headers[flags[device]] = "true"
        if user_agent:
            headers[USER_AGENT_HEADER] = user_agent
        return headers

    return _build


@pytest.fixture
def log_buffer():
    """Capture loguru output for the duration of a test."""
    buffer = io.StringIO()
    handler_id = logger.add(buffer, format="{level} | {message}", level="DEBUG")
    yield buffer
    logger.remove(handler_id)
