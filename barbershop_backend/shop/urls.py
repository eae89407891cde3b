# shop/urls.py

from django.urls import path

from shop.views import PromotionCodeListView, ShopSettingsView

app_name = "shop"

urlpatterns = [
    path("settings/", ShopSettingsView.as_view(), name="settings"),
    path("promotions/", PromotionCodeListView.as_view(), name="promotions"),
]
