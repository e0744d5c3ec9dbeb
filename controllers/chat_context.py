# controllers/chat_context.py
"""
Prompt assembly for the per-device assistant.

``build_prompt`` is a pure function of the device, the user's message and
the guidelines; ``get_reply`` is the only place that talks to the provider.
"""
from __future__ import annotations

import json
from typing import Optional, Sequence

from storage.records import DeviceRecord
from utils.errors import UpstreamUnavailable
from utils.gemini_client import GeminiClient

GUIDELINES = (
    "Always prioritize safety in your responses.",
    "Be specific and direct about how to use the {device}.",
    "If you don't know something specific about this device, acknowledge it "
    "and provide general best practices.",
    "Format your responses clearly with bullet points or numbered steps when appropriate.",
    "When discussing materials or settings, be precise about measurements, "
    "temperatures, speeds, etc.",
    "Keep responses focused on metalworking and the specific device.",
)

NOT_CONFIGURED_REPLY = (
    "Sorry, I'm unable to respond because the Gemini API key is not configured. "
    "Please contact the administrator."
)
ERROR_REPLY = (
    "Sorry, I encountered an error while generating a response. "
    "Please try again later."
)


def device_context(device: DeviceRecord) -> dict:
    """The slice of a device the assistant gets to see."""
    return {
        "name": device.name,
        "description": device.short_description,
        "specifications": device.specifications,
        "materials": device.materials,
        "safetyRequirements": device.safety_requirements,
        "usageInstructions": device.usage_instructions,
        "troubleshooting": device.troubleshooting,
    }


def build_prompt(device: DeviceRecord, message: str,
                 image_url: Optional[str] = None,
                 guidelines: Sequence[str] = GUIDELINES) -> str:
    snapshot = json.dumps(device_context(device), indent=2, ensure_ascii=False)
    rules = "\n".join(
        f"{n}. {rule.format(device=device.name)}"
        for n, rule in enumerate(guidelines, start=1)
    )

    lines = [
        "You are a specialized AI assistant for a school's metalworking shop, "
        f"specifically knowledgeable about the {device.name}.",
        "",
        "Device Information:",
        snapshot,
        "",
        "Guidelines:",
        rules,
        "",
        f"User Query: {message}",
    ]
    if image_url:
        lines += [
            "",
            f"Note: the user attached an image, available at {image_url}. "
            "Take it into account when answering.",
        ]
    return "\n".join(lines)


def get_reply(device: DeviceRecord, message: str,
              image_url: Optional[str] = None,
              client: Optional[GeminiClient] = None) -> str:
    """
    Ask the provider about *device*.  The reply text is returned untouched;
    any provider failure surfaces as ``UpstreamUnavailable``.
    """
    if client is None:
        raise UpstreamUnavailable(UpstreamUnavailable.NOT_CONFIGURED, "no provider client")
    return client.generate(build_prompt(device, message, image_url))


def fallback_reply(exc: UpstreamUnavailable) -> str:
    if exc.reason == UpstreamUnavailable.NOT_CONFIGURED:
        return NOT_CONFIGURED_REPLY
    return ERROR_REPLY
