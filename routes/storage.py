# routes/storage.py

from flask import Blueprint
from controllers.storage import upload_image, serve_upload

uploads_bp = Blueprint("uploads", __name__)

@uploads_bp.route("/api/upload", methods=["POST"])
def upload():
    return upload_image()

@uploads_bp.route("/uploads/<path:filename>", methods=["GET"])
def uploaded_file(filename):
    return serve_upload(filename)
