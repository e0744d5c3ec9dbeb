# routes/chat.py

from flask import Blueprint, request
from controllers.chat import list_messages, send_message, clear_messages

chat_bp = Blueprint("chat", __name__, url_prefix="/api/devices")

# ── TRANSCRIPT ────────────────────────────────────────────────────────
@chat_bp.route("/<int:dev_id>/messages", methods=["GET"])
def messages(dev_id):
    return list_messages(dev_id)

# ── ASK / RESET ───────────────────────────────────────────────────────
@chat_bp.route("/<int:dev_id>/chat", methods=["POST", "DELETE"])
def chat(dev_id):
    if request.method == "POST":
        return send_message(dev_id)
    return clear_messages(dev_id)
