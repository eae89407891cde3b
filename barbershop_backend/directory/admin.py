# directory/admin.py

from django.contrib import admin

from directory.models import Customer, Staff


@admin.register(Staff)
class StaffAdmin(admin.ModelAdmin):
    list_display = ("name", "role", "commission_rate", "is_active", "created_at")
    list_filter = ("role", "is_active")
    search_fields = ("name", "phone")
    ordering = ("name",)
    readonly_fields = ("created_at", "updated_at")


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ("name", "phone", "email", "created_at")
    search_fields = ("name", "phone", "email")
    ordering = ("name",)
    readonly_fields = ("created_at", "updated_at")
