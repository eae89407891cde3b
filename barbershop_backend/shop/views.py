# shop/views.py

from drf_spectacular.utils import extend_schema
from rest_framework import generics
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from shop.models import PromotionCode, ShopSettings
from shop.serializers import PromotionCodeSerializer, ShopSettingsSerializer


class ShopSettingsView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(tags=["Shop"], summary="Shop settings", responses={200: ShopSettingsSerializer})
    def get(self, request):
        return Response(ShopSettingsSerializer(ShopSettings.load()).data)


class PromotionCodeListView(generics.ListAPIView):
    queryset = PromotionCode.objects.filter(is_active=True).order_by("code")
    serializer_class = PromotionCodeSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None
