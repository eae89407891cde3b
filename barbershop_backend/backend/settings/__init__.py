# backend/settings/__init__.py
"""
PATH: backend/settings/__init__.py

Nothing is imported here. Select a concrete module with DJANGO_SETTINGS_MODULE:
- backend.settings.dev   (terminals, local development, tests)
- backend.settings.prod  (hosted back office)
"""
