"""Appointment API views: list/create, today, month calendar and agenda."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from django.db.models import Q  # type: ignore
from django.utils.dateparse import parse_date  # type: ignore
from rest_framework import generics, serializers  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.activities.models import Activity
from apps.activities.services import record_activity
from apps.users.services import CurrentRealtorMixin

from .domain.buckets import appointments_on, bucket_appointments
from .domain.dates import is_supported_day, local_day_bounds, local_today
from .domain.grid import build_month_grid, displayed_range
from .models import Appointment
from .serializers import AgendaSerializer, AppointmentSerializer, MonthGridSerializer


def parse_month_param(value: str | None) -> date:
    """``YYYY-MM`` query value to the first day of that month; current month when absent."""
    if not value:
        return local_today().replace(day=1)
    try:
        reference = datetime.strptime(value, "%Y-%m").date()
    except ValueError:
        raise serializers.ValidationError({"month": "Expected a month in YYYY-MM format."})
    try:
        span = displayed_range(reference)
    except ValueError:
        span = None
    if span is None or not (is_supported_day(span.start_date) and is_supported_day(span.last_date)):
        raise serializers.ValidationError({"month": "Month is outside the supported date range."})
    return reference


def parse_date_param(value: str | None) -> date:
    if not value:
        return local_today()
    try:
        parsed = parse_date(value)
    except ValueError:
        parsed = None
    if parsed is None:
        raise serializers.ValidationError({"date": "Expected a date in YYYY-MM-DD format."})
    if not is_supported_day(parsed):
        raise serializers.ValidationError({"date": "Date is outside the supported date range."})
    return parsed


class AppointmentQueryMixin(CurrentRealtorMixin):
    def get_appointments(self):
        return Appointment.objects.for_realtor(self.get_realtor())

    def get_serializer_context(self):  # type: ignore
        context = super().get_serializer_context()
        context["realtor"] = self.get_realtor()
        return context


class AppointmentListCreateView(AppointmentQueryMixin, generics.ListCreateAPIView):
    """Appointments of the acting realtor in chronological order."""

    serializer_class = AppointmentSerializer

    def get_queryset(self):  # type: ignore
        return self.get_appointments()

    def perform_create(self, serializer):  # type: ignore
        realtor = self.get_realtor()
        appointment = serializer.save(realtor=realtor)
        record_activity(
            realtor,
            Activity.Type.APPOINTMENT,
            "New appointment scheduled",
            appointment.title,
            property=appointment.property,
        )


class TodayAppointmentsView(AppointmentQueryMixin, generics.ListAPIView):
    """Appointments on the current local date, by time of day."""

    serializer_class = AppointmentSerializer

    def get_queryset(self):  # type: ignore
        today = local_today()
        start, end = local_day_bounds(today)
        return appointments_on(self.get_appointments().between(start, end), today)


class MonthCalendarView(AppointmentQueryMixin, APIView):
    """``?month=YYYY-MM``: whole-week grid for the month with appointments per day."""

    def get(self, request, format=None):  # type: ignore
        reference = parse_month_param(request.query_params.get("month"))
        span = displayed_range(reference)
        start, _ = local_day_bounds(span.start_date)
        _, end = local_day_bounds(span.last_date)
        appointments = self.get_appointments().between(start, end)
        grid = build_month_grid(reference, appointments)
        context = {"request": request, "realtor": self.get_realtor()}
        return Response(MonthGridSerializer(grid, context=context).data)


class AgendaView(AppointmentQueryMixin, APIView):
    """``?date=YYYY-MM-DD``: today, tomorrow and selected-date lists."""

    def get(self, request, format=None):  # type: ignore
        selected = parse_date_param(request.query_params.get("date"))
        today = local_today()
        window = Q()
        for day in {today, today + timedelta(days=1), selected}:
            start, end = local_day_bounds(day)
            window |= Q(date__gte=start, date__lt=end)
        appointments = self.get_appointments().filter(window)
        buckets = bucket_appointments(appointments, selected, today=today)
        context = {"request": request, "realtor": self.get_realtor()}
        return Response(AgendaSerializer(buckets, context=context).data)
