# routes/catalog.py

from flask import Blueprint, request
from controllers.device import (
    list_categories,
    get_category,
    create_category,
    delete_category,
    list_devices,
    list_devices_by_category,
    get_device,
    create_device,
    update_device,
    delete_device,
)
from middleware.auth import admin_required

catalog_bp = Blueprint("catalog", __name__, url_prefix="/api")

# ── DEVICE CATEGORIES ─────────────────────────────────────────────────
@catalog_bp.route("/device-categories", methods=["GET"])
def categories():
    return list_categories()

@catalog_bp.route("/device-categories/<int:cat_id>", methods=["GET"])
def category_item(cat_id):
    return get_category(cat_id)

@catalog_bp.route("/device-categories", methods=["POST"])
@admin_required
def add_category():
    return create_category()

@catalog_bp.route("/device-categories/<int:cat_id>", methods=["DELETE"])
@admin_required
def remove_category(cat_id):
    return delete_category(cat_id)

# ── DEVICES BY CATEGORY ───────────────────────────────────────────────
@catalog_bp.route("/categories/<int:cat_id>/devices", methods=["GET"])
def category_devices(cat_id):
    return list_devices_by_category(cat_id)

# ── SINGLE DEVICE ─────────────────────────────────────────────────────
@catalog_bp.route("/devices/<int:dev_id>", methods=["GET"])
def device_item(dev_id):
    return get_device(dev_id)

# ── ADMIN DEVICE CRUD ─────────────────────────────────────────────────
@catalog_bp.route("/devices", methods=["GET"])
@admin_required
def devices_data():
    return list_devices()

@catalog_bp.route("/devices", methods=["POST"])
@admin_required
def add_device():
    return create_device()

@catalog_bp.route("/devices/<int:dev_id>", methods=["PATCH", "DELETE"])
@admin_required
def edit_device(dev_id):
    if request.method == "PATCH":
        return update_device(dev_id)
    return delete_device(dev_id)
