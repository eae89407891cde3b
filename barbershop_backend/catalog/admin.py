# catalog/admin.py
"""
=====================================================
PATH: catalog/admin.py
=====================================================

Admin is where the catalog is maintained; the POS API only reads it.
Stock is edited directly on the product (single on-hand counter).
"""

from django.contrib import admin

from catalog.models import Product, Service


@admin.register(Service)
class ServiceAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "price", "duration_minutes", "is_active")
    list_filter = ("is_active", "category")
    search_fields = ("name", "category")
    ordering = ("name",)
    readonly_fields = ("created_at", "updated_at")


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "barcode",
        "price",
        "cost",
        "stock",
        "low_stock_flag",
        "is_active",
    )
    list_filter = ("is_active",)
    search_fields = ("name", "barcode")
    ordering = ("name",)
    readonly_fields = ("created_at", "updated_at")

    def low_stock_flag(self, obj):
        return "⚠ LOW" if obj.is_low_stock else "OK"

    low_stock_flag.short_description = "Stock Status"
