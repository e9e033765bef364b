"""User API views."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import mixins, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .serializers import UserSerializer
from .services import CurrentRealtorMixin

User = get_user_model()


class UserViewSet(CurrentRealtorMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """Realtor profiles.

    - `me` returns the realtor the dashboard acts for (PATCH updates it)
    - `retrieve` returns any realtor's public agent profile
    """

    serializer_class = UserSerializer
    queryset = User.objects.filter(is_active=True)

    @action(detail=False, methods=["get", "patch"])
    def me(self, request):
        """Profile of the acting realtor."""
        realtor = self.get_realtor()
        if request.method == "PATCH":
            serializer = UserSerializer(realtor, data=request.data, partial=True)
            serializer.is_valid(raise_exception=True)
            serializer.save()
            return Response(serializer.data)
        return Response(UserSerializer(realtor).data)
