# directory/urls.py

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from directory.views import CustomerViewSet, StaffViewSet

app_name = "directory"

router = DefaultRouter()
router.register(r"staff", StaffViewSet, basename="staff")
router.register(r"customers", CustomerViewSet, basename="customers")

urlpatterns = [
    path("", include(router.urls)),
]
