"""
Pytest configuration and shared fixtures

Provides:
- A fresh application + data store per test, for both storage backends
- Anonymous, regular-user and admin test clients
- Sample category / device payloads
"""

import pytest

from app import create_app
from config.settings import Config
from controllers.users import ensure_admin
from extensions import db
from storage import get_store

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin-pass"


def make_config(backend, upload_folder, **overrides):
    attrs = {
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "STORAGE_BACKEND": backend,
        "SEED_SAMPLE_DATA": False,
        "ADMIN_USERNAME": None,
        "ADMIN_PASSWORD": None,
        "GEMINI_API_KEY": "",
        "UPLOAD_FOLDER": str(upload_folder),
        "LOG_LEVEL": "DEBUG",
    }
    attrs.update(overrides)
    return type("TestConfig", (Config,), attrs)


@pytest.fixture(params=["memory", "sql"])
def backend(request):
    return request.param


@pytest.fixture
def make_app(backend, tmp_path):
    """Factory: build an app for the current backend with config overrides."""
    apps = []

    def _make(**overrides):
        app = create_app(make_config(backend, tmp_path / "uploads", **overrides))
        apps.append(app)
        return app

    yield _make

    for app in apps:
        if app.config["STORAGE_BACKEND"] == "sql":
            with app.app_context():
                db.session.remove()
                db.drop_all()


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def store(app):
    with app.app_context():
        yield get_store()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(app):
    with app.app_context():
        ensure_admin(get_store(), ADMIN_USERNAME, ADMIN_PASSWORD)
    c = app.test_client()
    resp = c.post("/api/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return c


@pytest.fixture
def user_client(app):
    c = app.test_client()
    resp = c.post("/api/register", json={
        "username": "student",
        "password": "student-pass",
        "displayName": "Student",
    })
    assert resp.status_code == 201
    return c


def category_payload(**overrides):
    data = {"name": "Lathes", "icon": "precision_manufacturing"}
    data.update(overrides)
    return data


def device_payload(category_id=1, **overrides):
    data = {
        "name": "Basic Lathe",
        "icon": "precision_manufacturing",
        "shortDescription": "Entry-level metal lathe for basic turning operations",
        "categoryId": category_id,
        "specifications": {"Speed": "0-2500 RPM", "Power Input": "750W"},
        "materials": {"Steel": "Good", "Aluminum": "Excellent"},
        "safetyRequirements": ["Eye protection", "No loose clothing"],
        "usageInstructions": [
            {"title": "Secure the work", "description": "Clamp the workpiece in the chuck."},
            {"title": "Start slow", "description": "Begin at the lowest spindle speed."},
        ],
        "troubleshooting": [
            {"issue": "Motor stalls", "solutions": ["Check belt tension"]},
        ],
    }
    data.update(overrides)
    return data


def store_device(category_id, **overrides):
    """Snake_case device input for direct store calls."""
    data = {
        "name": "Basic Lathe",
        "icon": "precision_manufacturing",
        "short_description": "Entry-level metal lathe",
        "category_id": category_id,
        "specifications": {"Speed": "0-2500 RPM"},
        "materials": {"Steel": "Good"},
        "safety_requirements": ["Eye protection"],
        "usage_instructions": [{"title": "Start", "description": "Start slow."}],
        "troubleshooting": [{"issue": "Stall", "solutions": ["Check belt"]}],
    }
    data.update(overrides)
    return data
