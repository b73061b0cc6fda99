"""
Relay handler: validates one browser request, forwards it to Gemini and
unwraps the reply into plain text.

The handler is framework agnostic. ``app.py`` (Flask) and ``api/chat.py``
(Vercel) translate their native request objects into a ``RelayRequest`` and
write the returned ``RelayResponse`` back out.
"""

import json
from dataclasses import dataclass, field
from typing import Dict, Optional

from requests.structures import CaseInsensitiveDict

from gemini_relay.config import Settings
from gemini_relay.cors import cors_headers
from gemini_relay.gemini import GeminiClient, block_reason, build_payload, extract_text
from gemini_relay.logger import get_logger

logger = get_logger(__name__)

TEXT_PLAIN = {"Content-Type": "text/plain; charset=utf-8"}

BLOCKED_REPLY = "My safety filters prevented a response to that."
EMPTY_REPLY = "Sorry, I couldn't generate a response."
BAD_MESSAGE = 'Invalid or empty message in request body. Expected { "message": "..." }'


@dataclass
class RelayRequest:
    method: str
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    body: bytes = b""

    def __post_init__(self):
        self.method = self.method.upper()
        self.headers = CaseInsensitiveDict(self.headers)

    @property
    def origin(self) -> Optional[str]:
        return self.headers.get("Origin")


@dataclass
class RelayResponse:
    status: int
    headers: Dict[str, str]
    body: str = ""


class RelayHandler:
    def __init__(self, settings: Settings, client: Optional[GeminiClient] = None):
        self.settings = settings
        self.client = client or GeminiClient(settings.generate_url)

    def handle(self, request: RelayRequest) -> RelayResponse:
        # Preflight
        if request.method == "OPTIONS":
            return RelayResponse(204, self._cors(request))

        # 1. Only POST carries chat messages
        if request.method != "POST":
            return self._text(request, 405, "Method Not Allowed")

        # 2. JSON only
        content_type = request.headers.get("Content-Type", "")
        if "application/json" not in content_type:
            return self._text(request, 415, "Expected Content-Type: application/json")

        # 3. Server-held key
        api_key = self.settings.api_key
        if not api_key:
            logger.critical("FATAL: GEMINI_API_KEY is not set in the relay environment")
            return self._text(request, 500, "API Key configuration error on server")

        try:
            return self._forward(request, api_key)
        except Exception as exc:
            # Exception text can include the upstream URL and with it the key
            logger.error("Relay error: %s", type(exc).__name__)
            return self._text(request, 500, "Internal Server Error")

    def _forward(self, request, api_key):
        # 4. Parse body
        try:
            data = json.loads(request.body)
        except ValueError:
            return self._text(request, 400, "Invalid JSON in request body")

        # 5. Validate message
        user_message = data.get("message") if isinstance(data, dict) else None
        if not isinstance(user_message, str) or not user_message.strip():
            return self._text(request, 400, BAD_MESSAGE)

        # 6-7. Call Gemini
        upstream = self.client.generate_content(api_key, build_payload(user_message))

        # 8. Pass upstream failures through, never retried
        if not 200 <= upstream.status_code < 300:
            logger.error("Gemini API Error (%s): %s", upstream.status_code, upstream.text)
            return self._text(
                request, upstream.status_code, f"Gemini API Error: {upstream.reason or ''}"
            )

        # 9. Unwrap text
        gemini_data = upstream.json()
        bot_text = extract_text(gemini_data)

        reason = block_reason(gemini_data)
        if not bot_text and reason:
            logger.warning("Gemini response blocked: %s", reason)
            return self._text(request, 200, BLOCKED_REPLY)

        return self._text(request, 200, bot_text or EMPTY_REPLY)

    def _cors(self, request, extra=None):
        return cors_headers(request.origin, self.settings.allowed_origins, extra)

    def _text(self, request, status, body):
        return RelayResponse(status, self._cors(request, TEXT_PLAIN), body)
