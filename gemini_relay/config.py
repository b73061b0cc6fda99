"""Relay configuration, read once from the environment at startup."""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

# 'null' allows a page opened straight from disk (file://), which sends no usable Origin
NO_ORIGIN = "null"

DEFAULT_ALLOWED_ORIGINS = (NO_ORIGIN,)
DEFAULT_MODEL = "gemini-1.5-flash-latest"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com"

# dev -> DEBUG, prod -> WARNING (see logger.py)
RELAY_ENV = os.environ.get("RELAY_ENV", "dev")


def parse_origins(raw):
    """Split a comma separated ALLOWED_ORIGINS value, dropping blanks."""
    origins = [o.strip() for o in raw.split(",")]
    return tuple(o for o in origins if o)


@dataclass(frozen=True, repr=False)
class Settings:
    api_key: Optional[str] = None
    allowed_origins: Tuple[str, ...] = DEFAULT_ALLOWED_ORIGINS
    model: str = DEFAULT_MODEL
    api_base: str = DEFAULT_API_BASE

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ

        # Set in Vercel / Cloudflare style project secrets, never in code
        api_key = env.get("GEMINI_API_KEY") or None

        raw_origins = env.get("ALLOWED_ORIGINS")
        if raw_origins is None:
            allowed = DEFAULT_ALLOWED_ORIGINS
        else:
            allowed = parse_origins(raw_origins)

        return cls(
            api_key=api_key,
            allowed_origins=allowed,
            model=env.get("GEMINI_MODEL", DEFAULT_MODEL),
            api_base=env.get("GEMINI_API_BASE", DEFAULT_API_BASE).rstrip("/"),
        )

    @property
    def generate_url(self) -> str:
        return f"{self.api_base}/v1beta/models/{self.model}:generateContent"

    def __repr__(self):
        key = "***" if self.api_key else None
        return (
            f"Settings(api_key={key!r}, allowed_origins={self.allowed_origins!r}, "
            f"model={self.model!r}, api_base={self.api_base!r})"
        )
