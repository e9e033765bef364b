"""Serializers for appointments and the calendar views."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.clients.models import Client
from apps.properties.models import Property

from .models import Appointment


class AppointmentSerializer(serializers.ModelSerializer):
    realtor = serializers.ReadOnlyField(source="realtor_id")
    client = serializers.PrimaryKeyRelatedField(
        queryset=Client.objects.all(),
        required=False,
        allow_null=True,
    )
    property = serializers.PrimaryKeyRelatedField(
        queryset=Property.objects.all(),
        required=False,
        allow_null=True,
    )
    client_name = serializers.SerializerMethodField()
    property_title = serializers.SerializerMethodField()

    class Meta:
        model = Appointment
        fields = [
            "id",
            "title",
            "location",
            "date",
            "client",
            "client_name",
            "property",
            "property_title",
            "realtor",
            "notes",
            "created_at",
        ]
        read_only_fields = ["id", "realtor", "created_at", "client_name", "property_title"]

    def get_client_name(self, obj: Appointment) -> str | None:
        return obj.client.name if obj.client_id else None

    def get_property_title(self, obj: Appointment) -> str | None:
        return obj.property.title if obj.property_id else None

    def validate_client(self, value):  # type: ignore
        realtor = self.context.get("realtor")
        if value is not None and realtor is not None and value.realtor_id != realtor.pk:
            raise serializers.ValidationError("Unknown client.")
        return value


class CalendarDaySerializer(serializers.Serializer):
    """Read-only view of ``CalendarDay``."""

    date = serializers.DateField()
    is_current_month = serializers.BooleanField()
    is_today = serializers.BooleanField()
    has_appointments = serializers.BooleanField()
    appointments = AppointmentSerializer(many=True)


class MonthGridSerializer(serializers.Serializer):
    """Read-only view of ``MonthGrid``: the month, its neighbours and rows of 7 days."""

    month = serializers.SerializerMethodField()
    previous = serializers.SerializerMethodField()
    next = serializers.SerializerMethodField()
    first_weekday = serializers.IntegerField()
    start = serializers.SerializerMethodField()
    end = serializers.SerializerMethodField()
    weeks = serializers.SerializerMethodField()

    def get_month(self, obj) -> str:
        return obj.reference.strftime("%Y-%m")

    def get_previous(self, obj) -> str:
        return obj.previous().strftime("%Y-%m")

    def get_next(self, obj) -> str:
        return obj.next().strftime("%Y-%m")

    def get_start(self, obj) -> str:
        return obj.displayed_range.start_date.isoformat()

    def get_end(self, obj) -> str:
        return obj.displayed_range.last_date.isoformat()

    def get_weeks(self, obj) -> list:
        return [
            CalendarDaySerializer(week, many=True, context=self.context).data
            for week in obj.weeks()
        ]


class AgendaSerializer(serializers.Serializer):
    """Read-only view of ``AppointmentBuckets``."""

    today_date = serializers.DateField()
    tomorrow_date = serializers.DateField()
    selected = serializers.DateField()
    selected_is_distinct = serializers.BooleanField()
    is_empty = serializers.BooleanField()
    today = AppointmentSerializer(many=True)
    tomorrow = AppointmentSerializer(many=True)
    selected_date = AppointmentSerializer(many=True)
