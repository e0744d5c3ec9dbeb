import sys
import os
import argparse

# Add the project directory to the system path to ensure app can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from werkzeug.security import generate_password_hash

from app import create_app
from storage import get_store
from utils.errors import DuplicateUsernameError

# Define default user data
default_user_data = {
    "username": "admin",
    "display_name": "Workshop Admin",
    "password": "workshop-admin",
    "is_admin": True,
}

# This function will create the user
def create_user(username, password, display_name, is_admin):
    app = create_app()
    # Ensure the app context is pushed for the database operations
    with app.app_context():
        try:
            user = get_store().create_user(
                username=username,
                password_hash=generate_password_hash(password),
                display_name=display_name,
                is_admin=is_admin,
            )
        except DuplicateUsernameError:
            print(f"User '{username}' already exists.")
            return

        print(f"User '{user.username}' created successfully (admin={user.is_admin}).")

# Run the function to create the user
if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create a workshop user")
    parser.add_argument("--username", default=default_user_data["username"])
    parser.add_argument("--password", default=default_user_data["password"])
    parser.add_argument("--display-name", default=default_user_data["display_name"])
    parser.add_argument("--no-admin", action="store_true",
                        help="create a regular (non-admin) user")
    args = parser.parse_args()

    create_user(args.username, args.password, args.display_name, not args.no_admin)
