"""Logger factory."""

import logging

from gemini_relay.config import RELAY_ENV
from gemini_relay.logger import LOG_FORMAT, get_logger


def test_logger_is_configured_once():
    first = get_logger("gemini_relay.tests.once")
    second = get_logger("gemini_relay.tests.once")
    assert first is second
    assert len(second.handlers) == 1
    assert second.handlers[0].formatter._fmt == LOG_FORMAT
    assert second.propagate is False


def test_level_follows_relay_env():
    expected = logging.WARNING if RELAY_ENV == "prod" else logging.DEBUG
    assert get_logger("gemini_relay.tests.level").level == expected
