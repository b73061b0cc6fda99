"""Gemini relay: forwards one chat message to Gemini and returns plain text."""

from gemini_relay.config import Settings
from gemini_relay.relay import RelayHandler, RelayRequest, RelayResponse

__all__ = ["RelayHandler", "RelayRequest", "RelayResponse", "Settings"]
