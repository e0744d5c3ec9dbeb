"""
Unit tests for prompt assembly and the Gemini client

Tests:
- Prompt content and determinism
- Image note
- Provider client success and failure paths (requests.post patched)
"""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from controllers.chat_context import (
    ERROR_REPLY,
    GUIDELINES,
    NOT_CONFIGURED_REPLY,
    build_prompt,
    device_context,
    fallback_reply,
    get_reply,
)
from storage.records import DeviceRecord
from utils.errors import UpstreamUnavailable
from utils.gemini_client import GeminiClient


@pytest.fixture
def device():
    return DeviceRecord(
        id=1,
        name="TIG Welder",
        icon="bolt",
        short_description="Tungsten Inert Gas welder",
        category_id=1,
        specifications={"Output Range": "5-200 Amps"},
        materials={"Aluminum": "Very good with AC current"},
        safety_requirements=["Wear a welding helmet"],
        usage_instructions=[{"title": "Setup", "description": "Attach ground clamp."}],
        troubleshooting=[{"issue": "Porosity", "solutions": ["Clean base metal"]}],
        media_items=[{"id": "m1", "title": "Torch", "url": "/uploads/t.png", "type": "image"}],
    )


def _gemini_response(text="Use pure argon.", status=200):
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = {
        "candidates": [{"content": {"role": "model", "parts": [{"text": text}]},
                        "finishReason": "STOP"}]
    }
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} error")
    return resp


class TestBuildPrompt:

    def test_is_deterministic(self, device):
        assert build_prompt(device, "How do I start?") == build_prompt(device, "How do I start?")

    def test_names_device_and_embeds_snapshot(self, device):
        prompt = build_prompt(device, "How do I start?")

        assert prompt.startswith("You are a specialized AI assistant")
        assert "knowledgeable about the TIG Welder." in prompt
        assert json.dumps(device_context(device), indent=2, ensure_ascii=False) in prompt
        assert '"safetyRequirements"' in prompt
        # media is not part of the assistant's context
        assert "/uploads/t.png" not in prompt

    def test_lists_all_guidelines_in_order(self, device):
        prompt = build_prompt(device, "q")

        for n in range(1, len(GUIDELINES) + 1):
            assert f"\n{n}. " in prompt
        assert "1. Always prioritize safety in your responses." in prompt
        assert "2. Be specific and direct about how to use the TIG Welder." in prompt

    def test_message_is_verbatim(self, device):
        message = "What amperage for 3mm {aluminum}?  \n  Thanks"
        prompt = build_prompt(device, message)

        assert prompt.endswith(f"User Query: {message}")

    def test_image_note(self, device):
        prompt = build_prompt(device, "What is wrong here?", image_url="/uploads/abc.png")

        assert "User Query: What is wrong here?" in prompt
        assert "image, available at /uploads/abc.png" in prompt

    def test_no_image_note_without_url(self, device):
        assert "attached an image" not in build_prompt(device, "q")

    def test_custom_guidelines(self, device):
        prompt = build_prompt(device, "q", guidelines=["Answer in French."])

        assert "1. Answer in French." in prompt
        assert "2." not in prompt.split("Guidelines:")[1].split("User Query:")[0]


class TestGetReply:

    def test_returns_provider_text_untouched(self, device):
        client = MagicMock()
        client.generate.return_value = "  **Step 1** ...\n"

        assert get_reply(device, "q", client=client) == "  **Step 1** ...\n"
        client.generate.assert_called_once_with(build_prompt(device, "q"))

    def test_passes_image_into_prompt(self, device):
        client = MagicMock()
        client.generate.return_value = "ok"

        get_reply(device, "q", "/uploads/i.png", client=client)
        assert "/uploads/i.png" in client.generate.call_args[0][0]

    def test_without_client(self, device):
        with pytest.raises(UpstreamUnavailable) as info:
            get_reply(device, "q", client=None)
        assert info.value.reason == UpstreamUnavailable.NOT_CONFIGURED

    def test_fallback_reply(self):
        assert fallback_reply(UpstreamUnavailable("not_configured")) == NOT_CONFIGURED_REPLY
        assert fallback_reply(UpstreamUnavailable("request_failed", "boom")) == ERROR_REPLY


class TestGeminiClient:

    def test_missing_key_fails_without_network(self):
        client = GeminiClient(api_key="")
        with patch("utils.gemini_client.requests.post") as mock_post:
            with pytest.raises(UpstreamUnavailable) as info:
                client.generate("hello")
        mock_post.assert_not_called()
        assert info.value.reason == UpstreamUnavailable.NOT_CONFIGURED

    def test_generate_posts_prompt(self):
        client = GeminiClient(api_key="k", model="gemini-test", timeout=5,
                              base_url="https://example.test/v1beta/")
        with patch("utils.gemini_client.requests.post",
                   return_value=_gemini_response("Use pure argon.")) as mock_post:
            assert client.generate("hello") == "Use pure argon."

        args, kwargs = mock_post.call_args
        assert args[0] == "https://example.test/v1beta/models/gemini-test:generateContent"
        assert kwargs["json"] == {"contents": [{"role": "user", "parts": [{"text": "hello"}]}]}
        assert kwargs["headers"] == {"x-goog-api-key": "k"}
        assert kwargs["timeout"] == 5

    def test_joins_text_parts(self):
        resp = _gemini_response()
        resp.json.return_value = {"candidates": [{"content": {"parts": [
            {"text": "Part one. "}, {"text": "Part two."}]}}]}
        with patch("utils.gemini_client.requests.post", return_value=resp):
            assert GeminiClient(api_key="k").generate("p") == "Part one. Part two."

    def test_http_error(self):
        with patch("utils.gemini_client.requests.post", return_value=_gemini_response(status=500)):
            with pytest.raises(UpstreamUnavailable) as info:
                GeminiClient(api_key="k").generate("p")
        assert info.value.reason == UpstreamUnavailable.REQUEST_FAILED

    def test_connection_error(self):
        with patch("utils.gemini_client.requests.post",
                   side_effect=requests.ConnectionError("unreachable")):
            with pytest.raises(UpstreamUnavailable) as info:
                GeminiClient(api_key="k").generate("p")
        assert "unreachable" in info.value.detail

    def test_blocked_prompt(self):
        resp = _gemini_response()
        resp.json.return_value = {"promptFeedback": {"blockReason": "SAFETY"}}
        with patch("utils.gemini_client.requests.post", return_value=resp):
            with pytest.raises(UpstreamUnavailable) as info:
                GeminiClient(api_key="k").generate("p")
        assert "SAFETY" in info.value.detail

    def test_from_config(self):
        client = GeminiClient.from_config({"GEMINI_API_KEY": "abc", "GEMINI_MODEL": "m"})
        assert client.configured
        assert client.model == "m"

    def test_malformed_payload(self):
        resp = _gemini_response()
        resp.json.return_value = {"candidates": ["not-a-dict"]}
        with patch("utils.gemini_client.requests.post", return_value=resp):
            with pytest.raises(UpstreamUnavailable) as info:
                GeminiClient(api_key="k").generate("p")
        assert info.value.reason == UpstreamUnavailable.REQUEST_FAILED
