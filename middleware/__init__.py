# middleware/__init__.py
