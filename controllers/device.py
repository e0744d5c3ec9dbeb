# controllers/device.py

from flask import jsonify, abort, current_app

from schemas import parse_body
from schemas.catalog import CategoryCreate, DeviceCreate, DeviceUpdate
from storage import get_store
from utils.errors import CategoryInUseError, UnknownCategoryError


# ── CATEGORIES ──────────────────────────────────────────────────────
def list_categories():
    return jsonify([c.to_dict() for c in get_store().list_categories()])


def get_category(cat_id):
    cat = get_store().get_category(cat_id)
    if cat is None:
        abort(404, "Category not found")
    return jsonify(cat.to_dict())


def create_category():
    data = parse_body(CategoryCreate)
    cat = get_store().create_category(data.model_dump())
    return jsonify(cat.to_dict()), 201


def delete_category(cat_id):
    try:
        deleted = get_store().delete_category(cat_id)
    except CategoryInUseError as exc:
        current_app.logger.info("🗂️  Refused to delete category %s: %s", cat_id, exc)
        abort(409, str(exc))
    if not deleted:
        abort(404, "Category not found")
    return jsonify(ok=True)


# ── LIST DEVICES ────────────────────────────────────────────────────
def list_devices():
    return jsonify([d.to_dict() for d in get_store().list_devices()])


def list_devices_by_category(cat_id):
    return jsonify([d.to_dict() for d in get_store().list_devices_by_category(cat_id)])


# ── GET A SINGLE DEVICE ─────────────────────────────────────────────
def get_device(dev_id):
    dev = get_store().get_device(dev_id)
    if dev is None:
        abort(404, "Device not found")
    return jsonify(dev.to_dict())


# ── CREATE A NEW DEVICE ─────────────────────────────────────────────
def create_device():
    data = parse_body(DeviceCreate)
    try:
        dev = get_store().create_device(data.model_dump())
    except UnknownCategoryError as exc:
        abort(400, str(exc))
    return jsonify(dev.to_dict()), 201


# ── UPDATE (partial) ────────────────────────────────────────────────
def update_device(dev_id):
    data = parse_body(DeviceUpdate)
    try:
        dev = get_store().update_device(dev_id, data.model_dump(exclude_unset=True))
    except UnknownCategoryError as exc:
        abort(400, str(exc))
    if dev is None:
        abort(404, "Device not found")
    return jsonify(dev.to_dict())


# ── DELETE DEVICE (cascades to its chat transcript) ─────────────────
def delete_device(dev_id):
    if not get_store().delete_device(dev_id):
        abort(404, "Device not found")
    return jsonify(ok=True)
