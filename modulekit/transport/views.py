"""
Framework-level API views.

- `NavItemsView`: the navigation entries registered by active modules, so
  non-HTML clients can build the same menu the main layout renders.
"""

from __future__ import annotations

from rest_framework import serializers
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_spectacular.utils import extend_schema

from modulekit.runtime import get_application


class NavItemSerializer(serializers.Serializer):
    label = serializers.CharField()
    href = serializers.CharField()
    icon = serializers.CharField(allow_blank=True)


class NavItemsView(APIView):
    permission_classes = [AllowAny]
    pagination_class = None

    @extend_schema(responses=NavItemSerializer(many=True))
    def get(self, request):
        application = get_application()
        return Response(NavItemSerializer(application.nav_items.as_list(), many=True).data)
