# middleware/auth.py
from functools import wraps

from flask import Blueprint, abort
from flask_login import current_user, login_required

from extensions import login_manager
from controllers.users import (
    login_user, logout_user, register_user, current_user_info
)
from storage import get_store

auth_bp = Blueprint('auth', __name__, url_prefix='/api')


# User loader callback
@login_manager.user_loader
def load_user(user_id):
    try:
        return get_store().get_user(int(user_id))
    except (TypeError, ValueError):
        return None


@login_manager.unauthorized_handler
def unauthorized():
    abort(401, "Authentication required")


def admin_required(view):
    """
    Anonymous callers get 401, authenticated non-admins get 403.
    """
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not current_user.is_authenticated:
            abort(401, "Authentication required")
        if not current_user.is_admin:
            abort(403, "Admin privileges required")
        return view(*args, **kwargs)
    return wrapped


@auth_bp.route('/register', methods=['POST'])
def register():
    return register_user()


@auth_bp.route('/login', methods=['POST'])
def login():
    return login_user()


@auth_bp.route('/logout', methods=['POST'])
def logout():
    return logout_user()


@auth_bp.route("/user", methods=["GET"])
@login_required
def user():
    """Return the currently logged-in user's details"""
    return current_user_info()
