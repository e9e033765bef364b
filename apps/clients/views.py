"""Client API views."""

from __future__ import annotations

from rest_framework import generics  # type: ignore

from apps.activities.models import Activity
from apps.activities.services import record_activity
from apps.users.services import CurrentRealtorMixin

from .models import Client
from .serializers import ClientSerializer


class ClientListCreateView(CurrentRealtorMixin, generics.ListCreateAPIView):
    """Clients of the acting realtor. Creating one adds a lead to the feed."""

    serializer_class = ClientSerializer

    def get_queryset(self):  # type: ignore
        return Client.objects.filter(realtor=self.get_realtor())

    def perform_create(self, serializer):  # type: ignore
        realtor = self.get_realtor()
        client = serializer.save(realtor=realtor)
        record_activity(realtor, Activity.Type.LEAD, "New lead added", client.name)


class ClientDetailView(CurrentRealtorMixin, generics.RetrieveAPIView):
    serializer_class = ClientSerializer

    def get_queryset(self):  # type: ignore
        return Client.objects.filter(realtor=self.get_realtor())
