"""Gemini generateContent client and response unwrapping."""

import requests

from gemini_relay.logger import get_logger

logger = get_logger(__name__)

SYSTEM_INSTRUCTION = (
    "You are a helpful assistant with a slightly quirky, retro-tech personality, "
    "like a Teenage Engineering device. Keep responses concise and friendly."
)


def build_payload(message):
    """Single user turn plus the fixed persona, in Google's official format."""
    return {
        "contents": [
            {"role": "user", "parts": [{"text": message}]},
        ],
        "systemInstruction": {"parts": [{"text": SYSTEM_INSTRUCTION}]},
    }


def _dig(data, *path):
    # Walk dict keys / list indexes, None as soon as a step is missing
    current = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or len(current) <= step:
                return None
        elif not isinstance(current, dict) or step not in current:
            return None
        current = current[step]
    return current


def extract_text(data):
    """Return ``candidates[0].content.parts[0].text`` or None."""
    text = _dig(data, "candidates", 0, "content", "parts", 0, "text")
    return text if isinstance(text, str) else None


def block_reason(data):
    """Return ``promptFeedback.blockReason`` or None."""
    return _dig(data, "promptFeedback", "blockReason")


class GeminiClient:
    def __init__(self, url):
        self.url = url

    def generate_content(self, api_key, payload) -> requests.Response:
        # No timeout and no retry: a hung upstream holds this request open
        logger.debug("POST %s", self.url)
        return requests.post(
            self.url,
            params={"key": api_key},
            headers={"Content-Type": "application/json"},
            json=payload,
        )
