# utils/gemini_client.py
"""
Minimal client for the Google Generative Language REST API.

Only the single-shot ``generateContent`` call is needed: one prompt in,
the concatenated text parts of the first candidate out.  Every failure is
raised as ``UpstreamUnavailable`` so callers deal with one exception type.
"""
from __future__ import annotations

import requests

from utils.errors import UpstreamUnavailable

DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-1.5-pro"


class GeminiClient:

    def __init__(self, api_key: str | None, model: str = DEFAULT_MODEL,
                 timeout: float = 60, base_url: str = DEFAULT_API_BASE):
        self.api_key = api_key or ""
        self.model = model
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")

    @classmethod
    def from_config(cls, config) -> "GeminiClient":
        return cls(
            api_key=config.get("GEMINI_API_KEY"),
            model=config.get("GEMINI_MODEL", DEFAULT_MODEL),
            timeout=config.get("GEMINI_TIMEOUT", 60),
            base_url=config.get("GEMINI_API_BASE", DEFAULT_API_BASE),
        )

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate(self, prompt: str) -> str:
        if not self.configured:
            raise UpstreamUnavailable(UpstreamUnavailable.NOT_CONFIGURED,
                                      "GEMINI_API_KEY is not set")

        body = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        try:
            response = requests.post(
                self.endpoint,
                json=body,
                headers={"x-goog-api-key": self.api_key},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise UpstreamUnavailable(UpstreamUnavailable.REQUEST_FAILED, str(exc)) from exc
        except ValueError as exc:
            raise UpstreamUnavailable(UpstreamUnavailable.REQUEST_FAILED,
                                      "response is not JSON") from exc

        try:
            return _extract_text(payload)
        except (AttributeError, TypeError, IndexError) as exc:
            raise UpstreamUnavailable(UpstreamUnavailable.REQUEST_FAILED,
                                      f"unexpected response shape: {exc}") from exc


def _extract_text(payload: dict) -> str:
    candidates = payload.get("candidates") or []
    if not candidates:
        reason = (payload.get("promptFeedback") or {}).get("blockReason", "no candidates")
        raise UpstreamUnavailable(UpstreamUnavailable.REQUEST_FAILED,
                                  f"empty response ({reason})")

    parts = (candidates[0].get("content") or {}).get("parts") or []
    text = "".join(p.get("text", "") for p in parts)
    if not text:
        finish = candidates[0].get("finishReason", "unknown")
        raise UpstreamUnavailable(UpstreamUnavailable.REQUEST_FAILED,
                                  f"candidate has no text (finishReason={finish})")
    return text
