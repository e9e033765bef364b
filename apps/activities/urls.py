"""URL routing for the activity feed."""

from django.urls import path  # type: ignore

from .views import ActivityListCreateView


urlpatterns = [
    path('', ActivityListCreateView.as_view(), name='activity-list'),
]
