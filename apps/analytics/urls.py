"""URL routing for the dashboard endpoint."""

from django.urls import path  # type: ignore

from .views import DashboardView


urlpatterns = [
    # Do not prefix with 'dashboard/' here; the prefix is defined in config.urls
    path('', DashboardView.as_view(), name='dashboard'),
]
