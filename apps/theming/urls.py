"""URL routing for theme settings and page content."""

from django.urls import path  # type: ignore

from .views import ActiveThemeView, PageContentView, ThemeSettingsDetailView


urlpatterns = [
    path('theme-settings/active/', ActiveThemeView.as_view(), name='theme-settings-active'),
    path('theme-settings/<int:pk>/', ThemeSettingsDetailView.as_view(), name='theme-settings-detail'),
    path('pages/<slug:page>/content/', PageContentView.as_view(), name='page-content'),
]
