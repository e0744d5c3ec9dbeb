# routes/__init__.py
