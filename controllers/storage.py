"""
controllers/storage.py
Image uploads for chat messages: saving to UPLOAD_FOLDER and serving back.
"""
import os
import uuid

from flask import abort, current_app, jsonify, request, send_from_directory, url_for
from werkzeug.utils import secure_filename


# ────────────────────────────────────────────────────────────────────────────────
# Helpers
# ────────────────────────────────────────────────────────────────────────────────
def _upload_root() -> str:
    root = current_app.config["UPLOAD_FOLDER"]
    os.makedirs(root, exist_ok=True)
    return root


def _extension(filename: str) -> str:
    return filename.rsplit(".", 1)[1].lower() if "." in filename else ""


def allowed_image(filename: str) -> bool:
    allowed = current_app.config.get("ALLOWED_IMAGE_EXTENSIONS", set())
    return _extension(filename) in allowed


# ────────────────────────────────────────────────────────────────────────────────
# Upload / Download
# ────────────────────────────────────────────────────────────────────────────────
def upload_image():
    """
    Store the multipart field ``image`` under a random name and return its URL.
    """
    img_file = request.files.get("image")
    if img_file is None or not img_file.filename:
        abort(400, "Missing 'image' file")

    # stored under a random name, only the extension of the client name is kept
    if not allowed_image(img_file.filename):
        abort(400, "Unsupported image type")

    filename = f"{uuid.uuid4().hex}.{_extension(img_file.filename)}"
    dest = os.path.join(_upload_root(), filename)
    img_file.save(dest)
    current_app.logger.info("💾 upload saved → %s", dest)

    return jsonify(imageUrl=url_for("uploads.uploaded_file", filename=filename)), 201


def serve_upload(filename):
    """Send back a previously uploaded image (404 when missing)."""
    return send_from_directory(_upload_root(), secure_filename(filename))
