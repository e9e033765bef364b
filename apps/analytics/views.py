"""API views for the realtor dashboard.

Aggregates the realtor's portfolio value, listing and lead statistics, the
latest activity feed entries and today's appointments in a single response.
"""

from __future__ import annotations

from decimal import Decimal

from django.db import models  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.activities.models import Activity
from apps.activities.serializers import ActivitySerializer
from apps.clients.models import Client
from apps.properties.models import Property
from apps.scheduling.domain.buckets import appointments_on
from apps.scheduling.domain.dates import local_day_bounds, local_today
from apps.scheduling.models import Appointment
from apps.scheduling.serializers import AppointmentSerializer
from apps.users.services import CurrentRealtorMixin

RECENT_ACTIVITY_LIMIT = 5
NEW_LEAD_DAYS = 7


class DashboardView(CurrentRealtorMixin, APIView):
    """Summary for the realtor dashboard."""

    def get(self, request, format=None):  # type: ignore
        realtor = self.get_realtor()
        prop_qs = Property.objects.filter(listed_by=realtor)

        portfolio_value = prop_qs.aggregate(total=models.Sum('price')).get('total') or Decimal('0')
        status_counts = dict(
            prop_qs.values_list('status').annotate(count=models.Count('id'))
        )
        new_leads = Client.objects.filter(realtor=realtor).new_leads(days=NEW_LEAD_DAYS).count()

        activities = Activity.objects.filter(user=realtor).select_related('property')[:RECENT_ACTIVITY_LIMIT]

        today = local_today()
        start, end = local_day_bounds(today)
        appointments = appointments_on(
            Appointment.objects.for_realtor(realtor).between(start, end),
            today,
        )

        context = {'request': request, 'realtor': realtor}
        return Response(
            {
                'portfolio_value': portfolio_value,
                'stats': {
                    'active_listings': status_counts.get(Property.Status.ACTIVE, 0),
                    'pending_sales': status_counts.get(Property.Status.PENDING, 0),
                    'closed_sales': status_counts.get(Property.Status.SOLD, 0),
                    'new_leads': new_leads,
                },
                'recent_activities': ActivitySerializer(activities, many=True, context=context).data,
                'today_appointments': AppointmentSerializer(appointments, many=True, context=context).data,
            }
        )
