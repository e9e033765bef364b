"""Property API views."""

from __future__ import annotations

from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.filters import OrderingFilter  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.activities.models import Activity
from apps.activities.services import record_activity
from apps.users.services import CurrentRealtorMixin

from .filters import PropertyFilterSet
from .models import Property
from .serializers import PropertySerializer, PropertyWriteSerializer


class IsListingOwner(permissions.BasePermission):
    """Only the realtor who listed a property may change or delete it."""

    message = "You don't have permission to update this property"

    def has_object_permission(self, request, view, obj: Property):  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        return obj.listed_by_id == view.get_realtor().id


class PropertyViewSet(CurrentRealtorMixin, viewsets.ModelViewSet):
    """Viewset for managing property listings.

    ``list`` returns the current realtor's listings, ``retrieve`` any listing
    (the marketing site links to them by id).
    """

    queryset = Property.objects.select_related("listed_by")
    permission_classes = [IsListingOwner]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = PropertyFilterSet
    ordering_fields = [
        "price",
        "created_at",
        "bedrooms",
        "square_feet",
    ]

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        if self.action == "list":
            return qs.filter(listed_by=self.get_realtor())
        return qs

    def get_serializer_class(self):  # type: ignore
        if self.action in {"create", "update", "partial_update"}:
            return PropertyWriteSerializer
        return PropertySerializer

    def perform_create(self, serializer):  # type: ignore
        realtor = self.get_realtor()
        property_obj = serializer.save(listed_by=realtor)
        record_activity(
            realtor,
            Activity.Type.LISTING,
            "New listing added",
            property_obj.title,
            property=property_obj,
        )

    def perform_update(self, serializer):  # type: ignore
        property_obj = serializer.save()
        record_activity(
            self.get_realtor(),
            Activity.Type.PROPERTY_UPDATE,
            "Property updated",
            property_obj.title,
            property=property_obj,
        )

    def perform_destroy(self, instance):  # type: ignore
        title = instance.title
        instance.delete()
        record_activity(
            self.get_realtor(),
            Activity.Type.PROPERTY_DELETE,
            "Property deleted",
            title,
        )

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        read_serializer = PropertySerializer(serializer.instance, context=self.get_serializer_context())
        headers = self.get_success_headers(read_serializer.data)
        return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)

    def update(self, request, *args, **kwargs):  # type: ignore
        partial = kwargs.pop("partial", False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        read_serializer = PropertySerializer(serializer.instance, context=self.get_serializer_context())
        return Response(read_serializer.data, status=status.HTTP_200_OK)
