"""URL routing for appointments."""

from django.urls import path  # type: ignore

from .views import AgendaView, AppointmentListCreateView, MonthCalendarView, TodayAppointmentsView


urlpatterns = [
    path('', AppointmentListCreateView.as_view(), name='appointment-list'),
    path('today/', TodayAppointmentsView.as_view(), name='appointment-today'),
    path('calendar/', MonthCalendarView.as_view(), name='appointment-calendar'),
    path('agenda/', AgendaView.as_view(), name='appointment-agenda'),
]
