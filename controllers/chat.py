# controllers/chat.py
"""
Device chat: transcript listing, one question/answer turn, transcript reset.
"""
from flask import jsonify, abort, current_app

from controllers.chat_context import fallback_reply, get_reply
from schemas import parse_body
from schemas.chat import ChatRequest
from storage import get_store
from utils.errors import UpstreamUnavailable

CLIENT_KEY = "gemini_client"


def provider_client():
    return current_app.extensions.get(CLIENT_KEY)


def list_messages(dev_id):
    return jsonify([m.to_dict() for m in get_store().list_messages(dev_id)])


def send_message(dev_id):
    """
    Save the user's message, ask the provider, save the reply, return both.

    Provider failures never turn into an error status: the assistant message
    carries a fixed apology instead and the cause goes to the log.
    """
    data = parse_body(ChatRequest)
    store = get_store()

    device = store.get_device(dev_id)
    if device is None:
        abort(404, "Device not found")

    user_msg = store.create_message(dev_id, is_user=True, message=data.message,
                                    image_url=data.image_url)
    try:
        reply = get_reply(device, data.message, data.image_url, client=provider_client())
    except UpstreamUnavailable as exc:
        current_app.logger.error("🤖 Chat reply for device %s failed (%s): %s",
                                 dev_id, exc.reason, exc.detail)
        reply = fallback_reply(exc)

    ai_msg = store.create_message(dev_id, is_user=False, message=reply)
    return jsonify(userMessage=user_msg.to_dict(), aiMessage=ai_msg.to_dict())


def clear_messages(dev_id):
    get_store().clear_messages(dev_id)
    return jsonify(message="Chat history cleared")
