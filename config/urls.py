"""URL configuration for RealtorHub project.

The `urlpatterns` list routes URLs to views. It includes both Django admin
and application‑level routers provided by Django Rest Framework and each app.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore

# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    # Application URLs
    path('api/v1/users/', include('apps.users.urls')),
    path('api/v1/properties/', include('apps.properties.urls')),
    path('api/v1/clients/', include('apps.clients.urls')),
    path('api/v1/messages/', include('apps.chat.urls')),
    path('api/v1/appointments/', include('apps.scheduling.urls')),
    path('api/v1/activities/', include('apps.activities.urls')),
    path('api/v1/dashboard/', include('apps.analytics.urls')),
    # Marketing site: theme settings and CMS copy
    path('api/v1/', include('apps.theming.urls')),
]
