# shop/admin.py

from django.contrib import admin

from shop.models import PromotionCode, ShopSettings


@admin.register(ShopSettings)
class ShopSettingsAdmin(admin.ModelAdmin):
    list_display = ("shop_name", "currency", "tax_rate", "tax_type", "updated_at")

    def has_add_permission(self, request):
        # singleton: the row is created by ShopSettings.load()
        return not ShopSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(PromotionCode)
class PromotionCodeAdmin(admin.ModelAdmin):
    list_display = ("code", "kind", "value", "description", "is_active")
    list_filter = ("kind", "is_active")
    search_fields = ("code", "description")
    ordering = ("code",)
