# catalog/apps.py

"""
CATALOG APP CONFIG

Sellable master data for the POS:
- Services (cuts, shaves, treatments)
- Products (retail stock with optional barcode)
"""

from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "catalog"
    verbose_name = "Catalog"
