#!/usr/bin/env python3
"""
Seed the starter DeviceCategory and Device rows.
Run once (or repeatedly) after the tables exist; a non-empty catalog is left alone.
"""
import sys
from pathlib import Path

# Add project root to import path
top = Path(__file__).resolve().parents[1].as_posix()
if top not in sys.path:
    sys.path.insert(0, top)

from app import create_app
from storage import get_store
from storage.sample_data import seed_catalog

def main():
    app = create_app()
    with app.app_context():
        created = seed_catalog(get_store())
        if created:
            print(f"Seeded {created} devices.")
        else:
            print("Catalog already populated – nothing to do.")

if __name__ == "__main__":
    main()
