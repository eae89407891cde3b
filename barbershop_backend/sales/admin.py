# sales/admin.py

from django.contrib import admin

from sales.models import Expense, Sale, SaleItem


# ======================================================
# SALE ITEMS (READ-ONLY INLINE)
# ======================================================


class SaleItemInline(admin.TabularInline):
    model = SaleItem
    extra = 0
    can_delete = False
    fields = ("kind", "name", "quantity", "unit_price", "total_price")
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


# ======================================================
# SALE ADMIN
# ======================================================


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    """
    Sales are append-only. Admins may view and delete (explicit administrative
    action) but never edit.
    """

    list_display = (
        "invoice_no",
        "sold_at",
        "staff_name",
        "customer_name",
        "payment_method",
        "total_amount",
    )
    list_filter = ("payment_method", "tax_mode", "sold_at")
    search_fields = ("invoice_no", "staff_name", "customer_name", "promotion_code")
    ordering = ("-sold_at",)
    inlines = [SaleItemInline]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False


# ======================================================
# EXPENSE ADMIN
# ======================================================


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ("expense_date", "category", "amount", "description")
    list_filter = ("category", "expense_date")
    search_fields = ("category", "description")
    ordering = ("-expense_date", "-created_at")
    readonly_fields = ("created_at",)
