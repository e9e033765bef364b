"""Activity feed API views."""

from __future__ import annotations

from rest_framework import generics, serializers  # type: ignore

from apps.users.services import CurrentRealtorMixin

from .models import Activity
from .serializers import ActivitySerializer


class ActivityListCreateView(CurrentRealtorMixin, generics.ListCreateAPIView):
    """Activity feed of the realtor. ``?limit=N`` returns the N latest entries."""

    serializer_class = ActivitySerializer

    def get_queryset(self):  # type: ignore
        qs = Activity.objects.filter(user=self.get_realtor()).select_related("property")
        limit = self.request.query_params.get("limit")
        if limit:
            try:
                limit_value = int(limit)
            except ValueError:
                raise serializers.ValidationError({"limit": "Expected a positive integer."})
            if limit_value < 1:
                raise serializers.ValidationError({"limit": "Expected a positive integer."})
            qs = qs[:limit_value]
        return qs

    def perform_create(self, serializer):  # type: ignore
        serializer.save(user=self.get_realtor())
