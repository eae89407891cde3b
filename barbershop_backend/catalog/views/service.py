# catalog/views/service.py

from rest_framework import viewsets
from rest_framework.permissions import IsAdminUser, IsAuthenticated

from catalog.models import Service
from catalog.serializers import ServiceSerializer


class ServiceViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Service catalog (read-only over the API; maintained through the admin).
    """

    serializer_class = ServiceSerializer
    permission_classes = [IsAuthenticated]
    filterset_fields = ["category", "is_active"]

    def get_queryset(self):
        qs = Service.objects.all().order_by("name")
        # Only admins see inactive services
        if not IsAdminUser().has_permission(self.request, self):
            qs = qs.filter(is_active=True)
        return qs
