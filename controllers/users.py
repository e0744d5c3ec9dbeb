# controllers/users.py

from flask import abort, current_app, jsonify
from flask_login import current_user
from flask_login import login_user as flask_login_user, logout_user as flask_logout_user
from werkzeug.security import check_password_hash, generate_password_hash

from schemas import parse_body
from schemas.users import LoginRequest, RegisterRequest
from storage import get_store
from utils.errors import DuplicateUsernameError

INVALID_CREDENTIALS = "Invalid username or password"

_DUMMY_HASH = None


def _dummy_hash():
    global _DUMMY_HASH
    if _DUMMY_HASH is None:
        _DUMMY_HASH = generate_password_hash("not-a-real-password")
    return _DUMMY_HASH


def authenticate(store, username, password):
    """
    Return the user when *password* matches, else ``None``.

    Unknown usernames and wrong passwords are indistinguishable to the caller.
    """
    user = store.get_user_by_username(username)
    if user is None:
        # same hashing cost as a real check
        check_password_hash(_dummy_hash(), password)
        return None
    if not check_password_hash(user.password_hash, password):
        return None
    return user


def register_user():
    """
    Register a new (non-admin) user and start a session for it.
    """
    data = parse_body(RegisterRequest)
    try:
        user = get_store().create_user(
            username=data.username,
            password_hash=generate_password_hash(data.password),
            display_name=data.display_name,
            is_admin=False,
        )
    except DuplicateUsernameError:
        abort(400, "Username already exists")
    flask_login_user(user)
    current_app.logger.info("👤 Registered user %s", user.username)
    return jsonify(user.to_dict()), 201


def login_user():
    """
    Authenticate and log in a user from a JSON body.
    """
    data = parse_body(LoginRequest)
    user = authenticate(get_store(), data.username, data.password)
    if user is None:
        current_app.logger.info("🔒 Failed login for %r", data.username)
        abort(401, INVALID_CREDENTIALS)
    flask_login_user(user)
    return jsonify(user.to_dict())


def logout_user():
    """
    Log out the current user (no-op for anonymous callers).
    """
    flask_logout_user()
    return jsonify(message="Logged out")


def current_user_info():
    return jsonify(current_user.to_dict())


def ensure_admin(store, username, password, display_name="Workshop Admin"):
    """
    Create the seed admin account when it does not exist yet.

    Returns the created user, or ``None`` when the username was already taken.
    """
    if store.get_user_by_username(username):
        return None
    return store.create_user(
        username=username,
        password_hash=generate_password_hash(password),
        display_name=display_name,
        is_admin=True,
    )
