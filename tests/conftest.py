import json
from unittest.mock import Mock

import pytest
import requests

from gemini_relay import RelayHandler, RelayRequest, Settings
from gemini_relay.gemini import GeminiClient

TEST_KEY = "test-key-123"


def make_upstream(status=200, body=None, reason="OK"):
    """Build a real requests.Response as Gemini would return it."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response.encoding = "utf-8"
    if body is None:
        body = {}
    raw = body if isinstance(body, (bytes, str)) else json.dumps(body)
    response._content = raw.encode("utf-8") if isinstance(raw, str) else raw
    return response


def gemini_reply(text):
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


def chat_request(message="hello", origin=None, content_type="application/json", method="POST", body=None):
    headers = {}
    if content_type is not None:
        headers["Content-Type"] = content_type
    if origin is not None:
        headers["Origin"] = origin
    if body is None:
        body = json.dumps({"message": message}).encode()
    return RelayRequest(method=method, headers=headers, body=body)


@pytest.fixture
def settings():
    return Settings(api_key=TEST_KEY, allowed_origins=("null", "http://localhost:8080"))


@pytest.fixture
def client():
    client = Mock(spec=GeminiClient)
    client.generate_content.return_value = make_upstream(body=gemini_reply("hi"))
    return client


@pytest.fixture
def relay(settings, client):
    return RelayHandler(settings, client=client)
